import operator

from torchpolynomial._exceptions import ArgumentError

from ._polynomial import Polynomial

# Smallest exponent routed through the FFT. Lower powers multiply directly,
# which is cheaper and keeps exact domains exact.
FFT_POWER_THRESHOLD = 5


def polynomial_pow(
    p: Polynomial,
    n: int,
    fft_threshold: int = FFT_POWER_THRESHOLD,
) -> Polynomial:
    """Raise polynomial to non-negative integer power.

    Exponents 2, 3 and 4 use direct multiplication; ``n >= fft_threshold``
    (5 by default) uses :func:`polynomial_pow_fft`.

    Parameters
    ----------
    p : Polynomial
        Base polynomial.
    n : int
        Non-negative integer exponent.
    fft_threshold : int
        Smallest exponent above 4 that uses the FFT. Exponents between 5
        and the threshold multiply repeatedly.

    Returns
    -------
    Polynomial
        p raised to power n. ``n == 0`` gives the constant 1 and ``n == 1``
        returns ``p`` itself, not a copy.

    Raises
    ------
    ArgumentError
        If n is negative.

    Examples
    --------
    >>> p = float64_polynomial([1.0, 1.0])  # 1 + x
    >>> polynomial_pow(p, 3).coefficients()  # 1 + 3x + 3x^2 + x^3
    [1.0, 3.0, 3.0, 1.0]
    """
    n = operator.index(n)

    if n < 0:
        raise ArgumentError(f"Exponent must be non-negative, got {n}")

    if n == 0:
        return p.one()

    if n == 1:
        return p

    if n == 2:
        return p.multiply(p)

    if n == 3:
        return p.multiply(p).multiply(p)

    if n == 4:
        square = p.multiply(p)
        return square.multiply(square)

    if n < fft_threshold:
        result = p.multiply(p)
        for _ in range(n - 2):
            result = result.multiply(p)
        return result

    return p._power_fft(n)
