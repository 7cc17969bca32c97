from typing import Any, Optional, Sequence

from torchpolynomial._polynomial_error import PolynomialError
from torchpolynomial.scalar import DECIMAL, DecimalDomain

from .._polynomial import Polynomial
from ._rational_polynomial import RationalPolynomial
from ._scalar_polynomial import ScalarPolynomial


class DecimalPolynomial(ScalarPolynomial):
    """Polynomial with :class:`decimal.Decimal` coefficients.

    All arithmetic runs in the domain's decimal context. The default domain
    rounds to 34 significant digits; ``DecimalDomain(exact=True)`` raises
    :class:`NumericError` on any result that does not terminate.

    Least-squares fitting is solved exactly over the rationals and the
    solution cast back into the decimal context.
    """

    domain = DECIMAL

    def estimate(self, x: Sequence[Any], y: Sequence[Any]) -> Polynomial:
        rational = RationalPolynomial(self.size())
        rational.estimate(
            [self.domain.cast(value) for value in x],
            [self.domain.cast(value) for value in y],
        )
        self.set_coefficients(rational.coefficients())
        return self


def decimal_polynomial(
    coeffs: Sequence[Any],
    domain: Optional[DecimalDomain] = None,
) -> DecimalPolynomial:
    """Create a decimal polynomial from coefficients.

    Parameters
    ----------
    coeffs : Sequence
        Coefficients in ascending order of degree. Strings are parsed
        exactly, e.g. ``["0.1", "0.2"]``.
    domain : DecimalDomain, optional
        Decimal context to compute in. Defaults to 34 significant digits.

    Returns
    -------
    DecimalPolynomial
        Polynomial instance.

    Raises
    ------
    PolynomialError
        If coeffs is empty.

    Examples
    --------
    >>> p = decimal_polynomial(["0.1", "0.2"])
    >>> p(1)
    Decimal('0.3')
    """
    if len(coeffs) == 0:
        raise PolynomialError("Polynomial must have at least one coefficient")

    return DecimalPolynomial(coeffs, domain=domain)
