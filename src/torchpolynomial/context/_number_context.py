"""Numeric accuracy context."""

import sys
from dataclasses import dataclass
from typing import Optional

from torchpolynomial._exceptions import ArgumentError

MACHINE_EPSILON = sys.float_info.epsilon
MACHINE_SMALLEST = sys.float_info.min


@dataclass(frozen=True)
class NumberContext:
    """Precision and scale used to decide when a magnitude is zero.

    Attributes
    ----------
    precision : int
        Number of significant digits. Determines ``epsilon``, the relative
        tolerance used by :meth:`is_small`.
    scale : int, optional
        Number of decimal places. Determines ``zero_error``, the absolute
        tolerance used by :meth:`is_zero`. ``None`` means magnitudes are
        compared to zero exactly.

    Examples
    --------
    >>> context = NumberContext.of(16)
    >>> context.is_zero(1e-17)
    True
    >>> context.is_zero(1e-15)
    False
    >>> NumberContext.exact().is_zero(1e-300)
    False
    """

    precision: int = 16
    scale: Optional[int] = None

    @classmethod
    def of(cls, precision: int, scale: Optional[int] = None) -> "NumberContext":
        """Context with the given precision and scale (defaults to precision)."""
        if precision < 1:
            raise ArgumentError(f"precision must be positive, got {precision}")

        return cls(precision=precision, scale=precision if scale is None else scale)

    @classmethod
    def exact(cls) -> "NumberContext":
        """Context that only treats an exact zero magnitude as zero."""
        return cls(precision=16, scale=None)

    @property
    def epsilon(self) -> float:
        return max(MACHINE_EPSILON, 10.0 ** (1 - self.precision))

    @property
    def zero_error(self) -> float:
        if self.scale is None:
            return 0.0

        return max(MACHINE_SMALLEST, 0.5 * 10.0 ** (-self.scale))

    def is_zero(self, magnitude) -> bool:
        """Whether a non-negative magnitude should be treated as zero.

        ``magnitude`` may be a float, ``Fraction``, ``Decimal``, mpmath
        ``mpf`` or a 0-d tensor.
        """
        if self.scale is None:
            return bool(magnitude == 0)

        return bool(magnitude <= self.zero_error)

    def is_small(self, reference, value) -> bool:
        """Whether ``value`` is negligible compared to ``reference``."""
        if self.is_zero(abs(reference)):
            return self.is_zero(abs(value))

        return bool(abs(value / reference) <= self.epsilon)

    def is_difference_small(self, expected, actual) -> bool:
        return self.is_small(expected, actual - expected)


DEFAULT_ACCURACY = NumberContext.of(16)
