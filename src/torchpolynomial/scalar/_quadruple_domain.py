from decimal import Decimal
from fractions import Fraction
from typing import Any

import mpmath

from torchpolynomial.context import NumberContext
from torchpolynomial.linear_algebra.decomposition import (
    QRDecomposition,
    QuadrupleQRDecomposition,
)
from torchpolynomial.scalar._coefficient_domain import CoefficientDomain

# Significand bits of IEEE 754 binary128
QUADRUPLE_PRECISION = 113


class QuadrupleDomain(CoefficientDomain):
    """Quadruple-precision binary floats.

    Values are ``mpf`` instances of a private :class:`mpmath.MPContext`, so
    the working precision never leaks into (or depends on) ``mpmath.mp``.

    Parameters
    ----------
    precision : int
        Significand bits, 113 for binary128.
    """

    def __init__(self, precision: int = QUADRUPLE_PRECISION):
        self.context = mpmath.MPContext()
        self.context.prec = precision
        self.name = f"quadruple({precision})"

    @property
    def precision(self) -> int:
        return self.context.prec

    @property
    def exceeds_double(self) -> bool:
        return self.precision > 53

    @property
    def default_accuracy(self) -> NumberContext:
        return NumberContext.of(self.context.dps)

    def zero(self):
        return self.context.mpf(0)

    def one(self):
        return self.context.mpf(1)

    def cast(self, value: Any):
        value = self._unwrap(value)
        if isinstance(value, Fraction):
            return self.context.mpf(value.numerator) / value.denominator
        if isinstance(value, Decimal):
            return self.context.mpf(str(value))
        if isinstance(value, complex):
            if value.imag != 0:
                raise TypeError(f"Cannot cast {value} to a real quadruple")
            value = value.real
        return self.context.mpf(value)

    def to_complex(self, value) -> complex:
        return complex(float(value))

    def from_complex(self, value: complex):
        return self.context.mpf(value.real)

    def decomposition(self) -> QRDecomposition:
        return QuadrupleQRDecomposition(self.context)


QUADRUPLE = QuadrupleDomain()
