import io

import pytest

from drillkit.reverse import INT64_MAX, INT64_MIN, main, reverse_digits


@pytest.mark.parametrize("value", [1, 12345, 987654321, -42, -1000001, 7])
def test_double_reverse_restores_values_without_trailing_zeros(value):
    assert reverse_digits(reverse_digits(value)) == value


@pytest.mark.parametrize("value", [12321, -45654, 9, 0])
def test_palindromes_are_unchanged(value):
    assert reverse_digits(value) == value


def test_trailing_zeros_are_dropped():
    assert reverse_digits(-120) == -21


@pytest.mark.parametrize("value", [123, -123, 5, -5])
def test_sign_is_kept(value):
    assert (reverse_digits(value) < 0) == (value < 0)


@pytest.mark.parametrize("value", [INT64_MAX + 1, INT64_MIN - 1])
def test_out_of_range_input_raises(value):
    with pytest.raises(ValueError):
        reverse_digits(value)


def test_main_with_argument(capsys):
    assert main(["123"]) == 0
    assert capsys.readouterr().out == "321\n"


def test_main_reads_stdin(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("12321\n"))
    assert main([]) == 0
    assert capsys.readouterr().out.strip() == "12321"


def test_main_rejects_garbage(capsys):
    assert main(["abc"]) == 1
    assert "invalid input" in capsys.readouterr().err