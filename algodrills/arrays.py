"""Array and string drills: two pointers, sliding windows and prefix rolls."""

from __future__ import annotations

from typing import Iterable, List


def three_sum_exists(values: Iterable[int], target: int) -> bool:
    """Tell whether three elements at distinct positions add up to ``target``."""
    ordered = sorted(values)
    for i, first in enumerate(ordered):
        low, high = i + 1, len(ordered) - 1
        while low < high:
            total = first + ordered[low] + ordered[high]
            if total == target:
                return True
            if total < target:
                low += 1
            else:
                high -= 1
    return False


def max_consecutive_ones(bits: Iterable[int], k: int) -> int:
    """Return the longest run of ones possible after flipping at most ``k`` zeros."""
    if k < 0:
        raise ValueError("k must not be negative")
    items = list(bits)
    zeros = 0
    start = 0
    best = 0
    for end, bit in enumerate(items):
        if bit == 0:
            zeros += 1
        while zeros > k:
            if items[start] == 0:
                zeros -= 1
            start += 1
        best = max(best, end - start + 1)
    return best


def roll_string(text: str, rolls: Iterable[int]) -> str:
    """Advance letters: each roll ``r`` moves the first ``r`` letters one step, z wrapping to a."""
    if not all("a" <= ch <= "z" for ch in text):
        raise ValueError("text must consist of lowercase letters a-z")
    counts: List[int] = [0] * len(text)
    for roll in rolls:
        if not 1 <= roll <= len(text):
            raise ValueError(f"roll {roll} is outside 1..{len(text)}")
        counts[roll - 1] += 1
    shift = 0
    rolled: List[str] = []
    for ch, count in zip(reversed(text), reversed(counts)):
        shift += count
        rolled.append(chr((ord(ch) - ord("a") + shift) % 26 + ord("a")))
    return "".join(reversed(rolled))