"""torchpolynomial: polynomials over machine, exact and extended precision numbers."""

from . import (
    array,
    context,
    linear_algebra,
    polynomial,
    scalar,
    transform,
)
from ._exceptions import ArgumentError, DegreeError, NumericError
from ._polynomial_error import PolynomialError
from ._precision_warning import PrecisionWarning

__all__ = [
    "ArgumentError",
    "DegreeError",
    "NumericError",
    "PolynomialError",
    "PrecisionWarning",
    "array",
    "context",
    "linear_algebra",
    "polynomial",
    "scalar",
    "transform",
]

__version__ = "0.1.0"
