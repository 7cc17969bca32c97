from fractions import Fraction
from typing import Any

from torchpolynomial.linear_algebra.decomposition import (
    QRDecomposition,
    RationalQRDecomposition,
)
from torchpolynomial.scalar._coefficient_domain import CoefficientDomain

# Largest denominator kept when casting transform output back to a fraction.
# Round-off in the complex128 buffer is ~1e-16, far below the 1e-12 spacing
# of fractions with denominators up to this limit.
RATIONAL_DENOMINATOR_LIMIT = 1_000_000


class RationalDomain(CoefficientDomain):
    """Exact rational coefficients (:class:`fractions.Fraction`)."""

    name = "rational"
    exact = True

    def __init__(self, denominator_limit: int = RATIONAL_DENOMINATOR_LIMIT):
        self.denominator_limit = denominator_limit

    def _key(self) -> tuple:
        return (type(self), self.denominator_limit)

    def zero(self) -> Fraction:
        return Fraction(0)

    def one(self) -> Fraction:
        return Fraction(1)

    def cast(self, value: Any) -> Fraction:
        value = self._unwrap(value)
        if isinstance(value, Fraction):
            return value
        if isinstance(value, complex):
            if value.imag != 0:
                raise TypeError(f"Cannot cast {value} to a rational")
            value = value.real
        return Fraction(value)

    def from_complex(self, value: complex) -> Fraction:
        return Fraction(value.real).limit_denominator(self.denominator_limit)

    def decomposition(self) -> QRDecomposition:
        return RationalQRDecomposition()


RATIONAL = RationalDomain()
