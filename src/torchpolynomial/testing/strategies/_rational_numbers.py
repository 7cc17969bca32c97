from fractions import Fraction

import hypothesis.strategies


def rational_numbers(
    max_numerator: int = 100,
    max_denominator: int = 12,
) -> hypothesis.strategies.SearchStrategy[Fraction]:
    """Strategy for fractions with bounded numerator and denominator."""
    return hypothesis.strategies.fractions(
        min_value=-max_numerator,
        max_value=max_numerator,
        max_denominator=max_denominator,
    )
