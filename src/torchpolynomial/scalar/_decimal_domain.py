import decimal
from decimal import Decimal
from fractions import Fraction
from typing import Any

from torchpolynomial._exceptions import NumericError
from torchpolynomial.context import NumberContext
from torchpolynomial.linear_algebra.decomposition import (
    QRDecomposition,
    RationalQRDecomposition,
)
from torchpolynomial.scalar._coefficient_domain import CoefficientDomain

# Significant digits of the rounding context (IEEE 754 decimal128)
DECIMAL_PRECISION = 34

_DECIMAL_FAILURES = (
    decimal.DivisionByZero,
    decimal.Inexact,
    decimal.InvalidOperation,
)


class DecimalDomain(CoefficientDomain):
    """Signed arbitrary-precision decimal coefficients.

    Every operation runs in the domain's own :class:`decimal.Context`, never
    the thread's current context.

    Parameters
    ----------
    precision : int
        Significant digits kept by every operation when ``exact`` is false.
    exact : bool
        Use unbounded precision and divide exactly: a quotient without a
        terminating decimal expansion, such as ``1 / 3``, raises
        :class:`NumericError` instead of being rounded.
    """

    def __init__(self, precision: int = DECIMAL_PRECISION, exact: bool = False):
        self.exact = exact
        if exact:
            self.context = decimal.Context(
                prec=decimal.MAX_PREC,
                Emax=decimal.MAX_EMAX,
                Emin=decimal.MIN_EMIN,
                traps=list(_DECIMAL_FAILURES),
            )
            self.name = "decimal(exact)"
        else:
            self.context = decimal.Context(
                prec=precision,
                rounding=decimal.ROUND_HALF_EVEN,
                traps=[decimal.DivisionByZero, decimal.InvalidOperation],
            )
            self.name = f"decimal({precision})"

    @property
    def default_accuracy(self) -> NumberContext:
        """Exact zero test, or a tolerance at the context's own precision."""
        if self.exact:
            return NumberContext.exact()
        return NumberContext.of(self.context.prec)

    @property
    def exceeds_double(self) -> bool:
        # A double round-trips 15 significant decimal digits
        return self.exact or self.context.prec > 15

    def zero(self) -> Decimal:
        return Decimal(0)

    def one(self) -> Decimal:
        return Decimal(1)

    def cast(self, value: Any) -> Decimal:
        value = self._unwrap(value)
        if isinstance(value, Fraction):
            return self.divide(Decimal(value.numerator), Decimal(value.denominator))
        if isinstance(value, float):
            return self._call(self.context.create_decimal_from_float, value)
        if isinstance(value, (Decimal, int, str)):
            return self._call(self.context.create_decimal, value)
        return self._call(self.context.create_decimal, str(value))

    def add(self, a: Decimal, b: Decimal) -> Decimal:
        return self._call(self.context.add, a, b)

    def subtract(self, a: Decimal, b: Decimal) -> Decimal:
        return self._call(self.context.subtract, a, b)

    def multiply(self, a: Decimal, b: Decimal) -> Decimal:
        return self._call(self.context.multiply, a, b)

    def divide(self, a: Decimal, b: Decimal) -> Decimal:
        if not self.exact:
            return self._call(self.context.divide, a, b)
        if b == 0:
            raise NumericError(f"Division by zero in {self.name}")
        return self._terminating(Fraction(a) / Fraction(b))

    def negate(self, a: Decimal) -> Decimal:
        return self._call(self.context.minus, a)

    def norm(self, a: Decimal) -> Decimal:
        return self._call(self.context.abs, a)

    def to_complex(self, value: Decimal) -> complex:
        return complex(float(value))

    def from_complex(self, value: complex) -> Decimal:
        return self.cast(value.real)

    def decomposition(self) -> QRDecomposition:
        return RationalQRDecomposition()

    def _call(self, operation, *args) -> Decimal:
        try:
            return operation(*args)
        except _DECIMAL_FAILURES as error:
            raise NumericError(
                f"{type(error).__name__} in {self.name}: {args}"
            ) from error

    def _terminating(self, value: Fraction) -> Decimal:
        # A fraction terminates in base 10 iff its denominator is 2^i 5^j
        denominator = value.denominator
        twos = fives = 0
        while denominator % 2 == 0:
            denominator //= 2
            twos += 1
        while denominator % 5 == 0:
            denominator //= 5
            fives += 1
        if denominator != 1:
            raise NumericError(
                f"{value} has no terminating decimal expansion in {self.name}"
            )

        digits = max(twos, fives)
        scaled = value.numerator * (10**digits // value.denominator)
        return self._call(Decimal(scaled).scaleb, -digits, self.context)


DECIMAL = DecimalDomain()
