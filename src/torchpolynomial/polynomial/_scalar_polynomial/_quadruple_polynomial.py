from typing import Any, Sequence

from torchpolynomial._polynomial_error import PolynomialError
from torchpolynomial.scalar import QUADRUPLE

from ._scalar_polynomial import ScalarPolynomial


class QuadruplePolynomial(ScalarPolynomial):
    """Polynomial with 113-bit binary floating point coefficients.

    Values are ``mpf`` numbers of the domain's private mpmath context;
    pass ``domain=QuadrupleDomain(bits)`` for another precision.
    """

    domain = QUADRUPLE


def quadruple_polynomial(coeffs: Sequence[Any]) -> QuadruplePolynomial:
    """Create a quadruple-precision polynomial from coefficients.

    Raises
    ------
    PolynomialError
        If coeffs is empty.

    Examples
    --------
    >>> p = quadruple_polynomial([3, 2, 1])  # 3 + 2x + x^2
    >>> p(2)
    mpf('11.0')
    """
    if len(coeffs) == 0:
        raise PolynomialError("Polynomial must have at least one coefficient")

    return QuadruplePolynomial(coeffs)
