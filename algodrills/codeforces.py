"""Solutions to a handful of short contest problems, with a stdin/stdout runner."""

from __future__ import annotations

import argparse
import sys
from typing import Callable, Dict, Iterator, List, Optional, Sequence, Tuple


def contest_dissatisfaction(n: int, x: int, t: int) -> int:
    """Return the total dissatisfaction of ``n`` participants starting every ``x`` minutes, each lasting ``t``."""
    if x > t:
        return 0
    if x == t:
        return n - 1
    overlap = t // x
    saturated_from = overlap + 1
    if n >= saturated_from:
        return saturated_from * (saturated_from - 1) // 2 + (n - saturated_from) * overlap
    return n * (n - 1) // 2


def max_deletion_points(n: int, a: int, b: int, s: str) -> int:
    """Return the most points for erasing the binary string ``s`` of length ``n`` in blocks."""
    if not s:
        raise ValueError("the string must not be empty")
    blocks = 1 + sum(left != right for left, right in zip(s, s[1:]))
    if b >= 0:
        return n * (a + b)
    if blocks in (1, 2):
        return n * a + blocks * b
    return n * a + (blocks // 2 + 1) * b


def level_passable(row1: str, row2: str) -> bool:
    """Tell whether no column of the two-row level is blocked in both rows."""
    if len(row1) != len(row2):
        raise ValueError("both rows must have the same length")
    return not any(top == "1" and bottom == "1" for top, bottom in zip(row1, row2))


def split_min_char(s: str) -> Tuple[str, str]:
    """Split ``s`` into its smallest letter and the rest, keeping the rest in order."""
    smallest = min(s + "z")
    position = s.find(smallest)
    if position < 0:
        return "", s
    return smallest, s[:position] + s[position + 1:]


def can_make_progression(a: int, b: int, c: int) -> bool:
    """Tell whether multiplying one of a, b, c by a positive integer makes them an arithmetic progression."""
    if 2 * b == a + c:
        return True
    if (a + c) % (2 * b) == 0:
        return True
    if (2 * b - a) % c == 0 and 2 * b - a > 0:
        return True
    if (2 * b - c) % a == 0 and 2 * b - c > 0:
        return True
    return False


def closest_word(values: Sequence[int], bits: int) -> int:
    """Return the ``bits``-bit word whose total Hamming distance to ``values`` is smallest."""
    limit = 1 << bits
    for value in values:
        if not 0 <= value < limit:
            raise ValueError(f"{value} does not fit in {bits} bits")
    half = len(values) // 2
    result = 0
    for position in range(bits):
        mask = 1 << position
        if sum(1 for value in values if value & mask) > half:
            result |= mask
    return result


def sort_string(s: str) -> str:
    """Return the characters of ``s`` in ascending order."""
    return "".join(sorted(s))


def min_operations(grid: Sequence[str], r: int, c: int) -> int:
    """Return the fewest operations to blacken cell (r, c), 1-based, or -1 if impossible."""
    row, column = r - 1, c - 1
    if not any("B" in line for line in grid):
        return -1
    if grid[row][column] == "B":
        return 0
    if "B" in grid[row] or any(line[column] == "B" for line in grid):
        return 1
    return 2


def _run_1529a(tokens: Iterator[str]) -> Iterator[str]:
    for _ in range(int(next(tokens))):
        n, x, t = (int(next(tokens)) for _ in range(3))
        yield str(contest_dissatisfaction(n, x, t))


def _run_1550b(tokens: Iterator[str]) -> Iterator[str]:
    for _ in range(int(next(tokens))):
        n, a, b = (int(next(tokens)) for _ in range(3))
        yield str(max_deletion_points(n, a, b, next(tokens)))


def _run_1598a(tokens: Iterator[str]) -> Iterator[str]:
    for _ in range(int(next(tokens))):
        n = int(next(tokens))
        row1, row2 = next(tokens)[:n], next(tokens)[:n]
        yield "YES" if level_passable(row1, row2) else "NO"


def _run_1602a(tokens: Iterator[str]) -> Iterator[str]:
    for _ in range(int(next(tokens))):
        first, rest = split_min_char(next(tokens))
        yield f"{first} {rest}"


def _run_1624b(tokens: Iterator[str]) -> Iterator[str]:
    for _ in range(int(next(tokens))):
        a, b, c = (int(next(tokens)) for _ in range(3))
        yield "YES" if can_make_progression(a, b, c) else "NO"


def _run_1625a(tokens: Iterator[str]) -> Iterator[str]:
    for _ in range(int(next(tokens))):
        n, bits = int(next(tokens)), int(next(tokens))
        values = [int(next(tokens)) for _ in range(n)]
        yield str(closest_word(values, bits))


def _run_1626a(tokens: Iterator[str]) -> Iterator[str]:
    for _ in range(int(next(tokens))):
        yield sort_string(next(tokens))


def _run_1627a(tokens: Iterator[str]) -> Iterator[str]:
    for _ in range(int(next(tokens))):
        n, _m, r, c = (int(next(tokens)) for _ in range(4))
        grid: List[str] = [next(tokens) for _ in range(n)]
        yield str(min_operations(grid, r, c))


_PROBLEMS: Dict[str, Callable[[Iterator[str]], Iterator[str]]] = {
    "1529A": _run_1529a,
    "1550B": _run_1550b,
    "1598A": _run_1598a,
    "1602A": _run_1602a,
    "1624B": _run_1624b,
    "1625A": _run_1625a,
    "1626A": _run_1626a,
    "1627A": _run_1627a,
}


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Solve the named problem for the test cases read from standard input."""
    parser = argparse.ArgumentParser(description="Solve a contest problem from standard input.")
    parser.add_argument("problem", choices=sorted(_PROBLEMS), help="problem identifier")
    args = parser.parse_args(argv)
    tokens = iter(sys.stdin.read().split())
    try:
        for line in _PROBLEMS[args.problem](tokens):
            print(line)
    except StopIteration:
        parser.error("input ended early")
    return 0


if __name__ == "__main__":
    sys.exit(main())