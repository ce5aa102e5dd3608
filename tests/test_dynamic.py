import pytest
from hypothesis import given, strategies as st

from algodrills.dynamic import (
    longest_increasing_subsequence,
    max_non_adjacent_sum,
    tiling_ways,
)

int_lists = st.lists(st.integers(min_value=-30, max_value=30), max_size=25)


def test_lis_empty():
    assert longest_increasing_subsequence([]) == 0


@given(st.integers())
def test_lis_single(value):
    assert longest_increasing_subsequence([value]) == 1


@given(int_lists)
def test_lis_of_sorted_distinct_is_full_length(values):
    distinct = sorted(set(values))
    assert longest_increasing_subsequence(distinct) == len(distinct)


@given(int_lists.filter(bool))
def test_lis_of_non_increasing_is_one(values):
    assert longest_increasing_subsequence(sorted(values, reverse=True)) == 1


@given(int_lists.filter(bool))
def test_lis_grows_by_appending_a_new_maximum(values):
    base = longest_increasing_subsequence(values)
    assert 1 <= base <= len(values)
    assert longest_increasing_subsequence(values + [max(values) + 1]) == base + 1


def test_max_non_adjacent_empty():
    with pytest.raises(ValueError):
        max_non_adjacent_sum([])


@given(st.integers())
def test_max_non_adjacent_single(value):
    assert max_non_adjacent_sum([value]) == value


@given(st.integers(), st.integers())
def test_max_non_adjacent_pair(a, b):
    assert max_non_adjacent_sum([a, b]) == max(a, b)


@given(st.lists(st.integers(min_value=0, max_value=30), min_size=1, max_size=25))
def test_max_non_adjacent_bounds(values):
    best = max_non_adjacent_sum(values)
    assert best >= max(values)
    assert best >= sum(values[::2])
    assert best >= sum(values[1::2])
    assert best <= sum(values)


def test_tiling_base_cases():
    assert tiling_ways(1) == 1
    assert tiling_ways(2) == 2


@given(st.integers(min_value=3, max_value=60))
def test_tiling_recurrence(n):
    assert tiling_ways(n) == tiling_ways(n - 1) + tiling_ways(n - 2)


@pytest.mark.parametrize("n", [0, -3])
def test_tiling_rejects_empty_floor(n):
    with pytest.raises(ValueError):
        tiling_ways(n)