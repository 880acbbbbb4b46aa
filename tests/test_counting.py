import io
import random

import pytest

from drillkit.counting import (
    count_occurrences,
    find_first,
    find_last,
    main,
    random_sorted,
)


@pytest.fixture
def values():
    return random_sorted(200, 15, random.Random(7))


def test_first_and_last_bound_each_run(values):
    for x in set(values):
        first = find_first(values, x)
        last = find_last(values, x)
        assert first == values.index(x)
        assert values[last] == x
        assert last == len(values) - 1 or values[last + 1] > x


def test_count_matches_list_count(values):
    for x in range(-2, 18):
        assert count_occurrences(values, x) == values.count(x)


def test_absent_value():
    assert find_first([1, 3, 5], 2) is None
    assert find_last([1, 3, 5], 2) is None
    assert count_occurrences([], 4) == 0


def test_random_sorted_invariants():
    result = random_sorted(50, 9, random.Random(1))
    assert len(result) == 50
    assert result == sorted(result)
    assert all(0 <= v <= 9 for v in result)


def test_random_sorted_is_reproducible():
    first = random_sorted(30, 100, random.Random(3))
    second = random_sorted(30, 100, random.Random(3))
    assert len(first) == 30
    assert first == sorted(first)
    assert first == second


@pytest.mark.parametrize("n, max_value", [(-1, 5), (3, -1)])
def test_random_sorted_rejects_bad_arguments(n, max_value):
    with pytest.raises(ValueError):
        random_sorted(n, max_value)


def test_main_counts(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("5\n0\n0\n"))
    assert main([]) == 0
    assert "Число 0 встречается 5 раз" in capsys.readouterr().out


def test_main_not_found(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("3\n0\n7\n"))
    assert main([]) == 0
    assert "Число 7 не найдено" in capsys.readouterr().out


def test_main_bad_input(monkeypatch):
    monkeypatch.setattr("sys.stdin", io.StringIO("abc\n"))
    assert main([]) == 1