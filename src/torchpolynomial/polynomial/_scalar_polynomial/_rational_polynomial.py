from fractions import Fraction
from typing import Any, Sequence

from torchpolynomial._polynomial_error import PolynomialError
from torchpolynomial.scalar import RATIONAL

from ._scalar_polynomial import ScalarPolynomial


class RationalPolynomial(ScalarPolynomial):
    """Polynomial with exact :class:`fractions.Fraction` coefficients.

    Every operation except an FFT power is exact.

    Examples
    --------
    >>> p = RationalPolynomial([1, 0, 1])  # 1 + x^2
    >>> p.integrate(0, 1)
    Fraction(4, 3)
    """

    domain = RATIONAL

    def _derivative_term(self, power: int) -> Fraction:
        return self.get(power + 1) * (power + 1)

    def _primitive_term(self, power: int) -> Fraction:
        return self.get(power - 1) / power


def rational_polynomial(coeffs: Sequence[Any]) -> RationalPolynomial:
    """Create a rational polynomial from coefficients.

    Parameters
    ----------
    coeffs : Sequence
        Coefficients in ascending order of degree: ints, fractions, decimals
        or floats (floats convert exactly, binary expansion included).

    Returns
    -------
    RationalPolynomial
        Polynomial instance.

    Raises
    ------
    PolynomialError
        If coeffs is empty.

    Examples
    --------
    >>> rational_polynomial([Fraction(1, 2), 3]).coefficients()
    [Fraction(1, 2), Fraction(3, 1)]
    """
    if len(coeffs) == 0:
        raise PolynomialError("Polynomial must have at least one coefficient")

    return RationalPolynomial(coeffs)
