"""Hypothesis strategies for polynomial coefficients and sample points."""

from ._coefficient_lists import coefficient_lists
from ._complex_numbers import complex_numbers
from ._rational_numbers import rational_numbers
from ._sample_points import sample_points

__all__ = [
    "coefficient_lists",
    "complex_numbers",
    "rational_numbers",
    "sample_points",
]
