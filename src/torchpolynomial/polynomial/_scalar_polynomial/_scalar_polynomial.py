from typing import Any

from .._polynomial import Polynomial


class ScalarPolynomial(Polynomial):
    """Polynomial whose coefficients are Python number objects.

    Coefficients live in an object array and every operation runs
    element-wise through the domain's arithmetic, so the same code serves
    complex, decimal, rational and quadruple coefficients.
    """

    def _derivative_term(self, power: int) -> Any:
        domain = self.domain
        return domain.multiply(domain.cast(power + 1), self.get(power + 1))

    def _primitive_term(self, power: int) -> Any:
        domain = self.domain
        return domain.divide(self.get(power - 1), domain.cast(power))
