"""Dynamic-programming drills."""

from __future__ import annotations

from typing import Iterable, List, Sequence


def longest_increasing_subsequence(values: Iterable[int]) -> int:
    """Return the length of the longest strictly increasing subsequence."""
    items = list(values)
    ending_here: List[int] = []
    for value in items:
        best_before = max(
            (length for earlier, length in zip(items, ending_here) if earlier < value),
            default=0,
        )
        ending_here.append(best_before + 1)
    return max(ending_here, default=0)


def max_non_adjacent_sum(values: Sequence[int]) -> int:
    """Return the largest sum of elements no two of which are adjacent."""
    if not values:
        raise ValueError("at least one value is required")
    before_previous, previous = 0, values[0]
    for value in values[1:]:
        before_previous, previous = previous, max(previous, before_previous + value)
    return previous


def tiling_ways(n: int) -> int:
    """Return the number of ways to tile a 2 x n floor with 2 x 1 tiles."""
    if n < 1:
        raise ValueError("the floor must be at least one column wide")
    if n == 1:
        return 1
    shorter, longer = 1, 2
    for _ in range(n - 2):
        shorter, longer = longer, shorter + longer
    return longer