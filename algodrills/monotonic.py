"""Problems solved with monotonic stacks, deques and ordered windows."""

from __future__ import annotations

from bisect import bisect_left, insort
from collections import deque
from typing import Deque, Iterable, List, Sequence, Tuple


def largest_rectangle_area(heights: Iterable[int]) -> int:
    """Return the largest rectangle that fits under a histogram."""
    bars = [*heights, 0]
    stack: List[int] = []
    best = 0
    for i, height in enumerate(bars):
        while stack and bars[stack[-1]] > height:
            top = bars[stack.pop()]
            width = i - stack[-1] - 1 if stack else i
            best = max(best, top * width)
        stack.append(i)
    return best


def stock_span(prices: Iterable[int]) -> List[int]:
    """Return, for each day, how many consecutive days up to it had a lower price."""
    spans: List[int] = []
    stack: List[Tuple[int, int]] = []
    for price in prices:
        days = 1
        while stack and stack[-1][0] < price:
            days += stack.pop()[1]
        spans.append(days)
        stack.append((price, days))
    return spans


def trapped_water(heights: Iterable[int]) -> int:
    """Return how much rain water an elevation map holds."""
    bars = list(heights)
    stack: List[int] = []
    total = 0
    for i, height in enumerate(bars):
        while stack and bars[stack[-1]] < height:
            bottom = bars[stack.pop()]
            if not stack:
                break
            left = stack[-1]
            total += (min(bars[left], height) - bottom) * (i - left - 1)
        stack.append(i)
    return total


def _checked_window(values: Iterable[int], k: int) -> Sequence[int]:
    items = list(values)
    if not 1 <= k <= len(items):
        raise ValueError(f"window size {k} does not fit {len(items)} values")
    return items


def sliding_window_max_sorted(values: Iterable[int], k: int) -> List[int]:
    """Return the maximum of every window of ``k`` values, using a sorted window."""
    items = _checked_window(values, k)
    window = sorted(items[:k])
    result = [window[-1]]
    for outgoing, incoming in zip(items, items[k:]):
        del window[bisect_left(window, outgoing)]
        insort(window, incoming)
        result.append(window[-1])
    return result


def sliding_window_max(values: Iterable[int], k: int) -> List[int]:
    """Return the maximum of every window of ``k`` values, using a monotonic deque."""
    items = _checked_window(values, k)
    candidates: Deque[int] = deque()
    result: List[int] = []
    for i, value in enumerate(items):
        if candidates and candidates[0] == i - k:
            candidates.popleft()
        while candidates and items[candidates[-1]] < value:
            candidates.pop()
        candidates.append(i)
        if i >= k - 1:
            result.append(items[candidates[0]])
    return result