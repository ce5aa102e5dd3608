import io

import pytest
from hypothesis import given
from hypothesis import strategies as st

from algodrills.codeforces import (
    can_make_progression,
    closest_word,
    contest_dissatisfaction,
    level_passable,
    main,
    max_deletion_points,
    min_operations,
    sort_string,
    split_min_char,
)


def test_dissatisfaction_pinned_example():
    assert contest_dissatisfaction(4, 2, 5) == 5


@given(st.integers(1, 1000), st.integers(2, 50), st.integers(1, 49))
def test_dissatisfaction_zero_when_interval_exceeds_duration(n, x, t):
    if x > t:
        assert contest_dissatisfaction(n, x, t) == 0
    else:
        assert contest_dissatisfaction(n, x, t) >= 0


@given(st.integers(1, 10**6), st.integers(1, 100))
def test_dissatisfaction_equal_interval_and_duration(n, x):
    assert contest_dissatisfaction(n, x, x) == n - 1


@given(st.integers(1, 500), st.integers(1, 20), st.integers(1, 200))
def test_dissatisfaction_grows_with_participants(n, x, t):
    current = contest_dissatisfaction(n, x, t)
    assert contest_dissatisfaction(n + 1, x, t) >= current
    assert current <= n * (n - 1) // 2


def test_deletion_points_pinned_example():
    assert max_deletion_points(6, 1, -4, "100111") == -2


@given(st.text(alphabet="01", min_size=1, max_size=30), st.integers(-50, 50), st.integers(0, 50))
def test_deletion_points_nonnegative_b(s, a, b):
    assert max_deletion_points(len(s), a, b, s) == len(s) * (a + b)


@given(st.text(alphabet="01", min_size=1, max_size=30), st.integers(-50, 50), st.integers(-50, -1))
def test_deletion_points_uniform_string_is_one_block(s, a, b):
    uniform = s[0] * len(s)
    assert max_deletion_points(len(uniform), a, b, uniform) == len(uniform) * a + b


def test_deletion_points_empty_string_rejected():
    with pytest.raises(ValueError):
        max_deletion_points(0, 1, 1, "")


@given(st.text(alphabet="01", max_size=20))
def test_level_passable_with_clear_row(row):
    clear = "0" * len(row)
    assert level_passable(row, clear) is True
    assert level_passable(clear, row) is True


def test_level_blocked_column():
    assert level_passable("010", "011") is False


def test_level_rows_must_match():
    with pytest.raises(ValueError):
        level_passable("00", "000")


@given(st.text(alphabet="abcdefghijklmnopqrstuvwxyz", min_size=1, max_size=30))
def test_split_min_char_invariants(s):
    first, rest = split_min_char(s)
    assert first == min(s)
    assert sorted(first + rest) == sorted(s)
    assert len(rest) == len(s) - 1


def test_split_min_char_keeps_order():
    assert split_min_char("fc") == ("c", "f")
    assert split_min_char("") == ("", "")


@given(st.integers(1, 100), st.integers(1, 20), st.integers(0, 100))
def test_progression_reachable_by_dividing_last(s, m, d):
    assert can_make_progression(s * m + 2 * d, s * m + d, s) is True


@given(st.integers(1, 100), st.integers(0, 100))
def test_progression_already_arithmetic(a, d):
    assert can_make_progression(a, a + d, a + 2 * d) is True


def test_progression_impossible():
    assert can_make_progression(1, 1, 2) is False


def test_closest_word_pinned_example():
    assert closest_word([18, 9, 21], 5) == 17


@given(st.integers(1, 10), st.data())
def test_closest_word_of_identical_values(bits, data):
    value = data.draw(st.integers(0, (1 << bits) - 1))
    count = data.draw(st.integers(1, 7))
    assert closest_word([value] * count, bits) == value


def test_closest_word_rejects_wide_value():
    with pytest.raises(ValueError):
        closest_word([32], 5)


@given(st.text(max_size=40))
def test_sort_string_invariants(s):
    result = sort_string(s)
    assert sorted(result) == sorted(s)
    assert all(left <= right for left, right in zip(result, result[1:]))


def test_min_operations_cases():
    assert min_operations(["WW", "WW"], 1, 1) == -1
    assert min_operations(["WB", "WW"], 1, 2) == 0
    assert min_operations(["WB", "WW"], 1, 1) == 1
    assert min_operations(["WB", "WW"], 2, 2) == 1
    assert min_operations(["WB", "WW"], 2, 1) == 2


def _run(monkeypatch, capsys, problem, text):
    monkeypatch.setattr("sys.stdin", io.StringIO(text))
    assert main([problem]) == 0
    return capsys.readouterr().out


def test_main_sorts_strings(monkeypatch, capsys):
    assert _run(monkeypatch, capsys, "1626A", "2\nba\ncab\n") == "ab\nabc\n"


def test_main_level_answers(monkeypatch, capsys):
    out = _run(monkeypatch, capsys, "1598A", "2\n3\n000\n000\n2\n11\n10\n")
    assert out == "YES\nNO\n"


def test_main_dissatisfaction(monkeypatch, capsys):
    out = _run(monkeypatch, capsys, "1529A", "1\n4 2 5\n")
    assert out == f"{contest_dissatisfaction(4, 2, 5)}\n"


def test_main_grid(monkeypatch, capsys):
    out = _run(monkeypatch, capsys, "1627A", "1\n2 2 2 1\nWB\nWW\n")
    assert out == f"{min_operations(['WB', 'WW'], 2, 1)}\n"


def test_main_split(monkeypatch, capsys):
    out = _run(monkeypatch, capsys, "1602A", "1\nfc\n")
    assert out == "c f\n"


def test_main_unknown_problem():
    with pytest.raises(SystemExit):
        main(["9999Z"])