from typing import Any, Sequence

from torchpolynomial._polynomial_error import PolynomialError
from torchpolynomial.scalar import COMPLEX128

from ._scalar_polynomial import ScalarPolynomial


class ComplexPolynomial(ScalarPolynomial):
    """Polynomial with Python ``complex`` coefficients.

    Examples
    --------
    >>> p = ComplexPolynomial([1, 0, 1])  # 1 + x^2
    >>> p(1j)
    0j
    """

    domain = COMPLEX128


def complex_polynomial(coeffs: Sequence[Any]) -> ComplexPolynomial:
    """Create a complex polynomial from coefficients in ascending order.

    Raises
    ------
    PolynomialError
        If coeffs is empty.
    """
    if len(coeffs) == 0:
        raise PolynomialError("Polynomial must have at least one coefficient")

    return ComplexPolynomial(coeffs)
