"""Accuracy contexts deciding when a coefficient magnitude is zero."""

from torchpolynomial.context._number_context import (
    DEFAULT_ACCURACY,
    NumberContext,
)

__all__ = [
    "DEFAULT_ACCURACY",
    "NumberContext",
]
