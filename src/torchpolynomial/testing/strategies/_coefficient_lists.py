from typing import List

import hypothesis.strategies


def coefficient_lists(
    min_size: int = 1,
    max_size: int = 8,
    min_value: int = -9,
    max_value: int = 9,
) -> hypothesis.strategies.SearchStrategy[List[int]]:
    """Strategy for small integer coefficient lists.

    Integers are exact in every coefficient domain, so results can be
    compared across domains without rounding differences.
    """
    return hypothesis.strategies.lists(
        hypothesis.strategies.integers(min_value=min_value, max_value=max_value),
        min_size=min_size,
        max_size=max_size,
    )
