class PrecisionWarning(UserWarning):
    """A coefficient domain was computed through double precision.

    Emitted when a polynomial over a domain more precise than double
    (rational, decimal, quadruple) is raised to a power via the FFT path,
    whose complex128 working buffer holds roughly 16 significant digits.
    """

    pass
