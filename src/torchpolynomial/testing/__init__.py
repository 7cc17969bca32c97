"""Hypothesis strategies for polynomial testing.

Requires the ``test`` extra (``hypothesis``).

Example usage:

    from hypothesis import given

    from torchpolynomial.polynomial import rational_polynomial
    from torchpolynomial.testing import coefficient_lists, sample_points

    @given(coefficient_lists(), sample_points())
    def test_evaluate(coeffs, x):
        rational_polynomial(coeffs).evaluate(x)
"""

from .strategies import (
    coefficient_lists,
    complex_numbers,
    rational_numbers,
    sample_points,
)

__all__ = [
    "coefficient_lists",
    "complex_numbers",
    "rational_numbers",
    "sample_points",
]
