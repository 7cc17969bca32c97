from ._polynomial import Polynomial


def polynomial_antiderivative(p: Polynomial) -> Polynomial:
    """Compute antiderivative (indefinite integral) with zero constant.

    Term ``i > 0`` of the primitive is ``c[i - 1] / i``, computed by the
    polynomial's ``_primitive_term`` hook in domain arithmetic.

    Parameters
    ----------
    p : Polynomial
        Input polynomial.

    Returns
    -------
    Polynomial
        Primitive, of size ``size + 1``.

    Raises
    ------
    NumericError
        If an exact domain cannot represent a quotient, e.g. ``1 / 3`` with
        exact decimals.

    Examples
    --------
    >>> p = rational_polynomial([2, 6])  # 2 + 6x
    >>> polynomial_antiderivative(p).coefficients()  # 0 + 2x + 3x^2
    [Fraction(0, 1), Fraction(2, 1), Fraction(3, 1)]
    """
    result = p._new(p.size() + 1)
    store = result._coefficients

    for power in range(1, result.size()):
        store.set(power, p._primitive_term(power))

    return result
