import pytest

from drillkit.linked import LinkedList, main


def test_str_and_iteration():
    items = LinkedList([1, 2, 3, 4, 5])
    assert str(items) == "1 - 2 - 3 - 4 - 5"
    assert list(items) == [1, 2, 3, 4, 5]
    assert len(items) == 5


def test_reflect_example():
    items = LinkedList([1, 2, 3, 4, 5])
    items.reflect_from_tail(4)
    assert str(items) == "1 - 5 - 4 - 3 - 2"


@pytest.mark.parametrize("k", [1, 2, 3, 5, 6])
def test_reflect_keeps_prefix_and_elements(k):
    values = [3, 1, 4, 1, 5, 9, 2]
    items = LinkedList(values)
    items.reflect_from_tail(k)
    result = list(items)
    assert result[: len(values) - k] == values[: len(values) - k]
    assert sorted(result) == sorted(values)
    assert len(items) == len(values)


@pytest.mark.parametrize("k", [2, 4, 6])
def test_reflect_twice_restores(k):
    values = list(range(10, 17))
    items = LinkedList(values)
    items.reflect_from_tail(k)
    items.reflect_from_tail(k)
    assert list(items) == values


@pytest.mark.parametrize("k", [0, -3, 5, 9])
def test_reflect_out_of_range_is_noop(k):
    items = LinkedList([1, 2, 3, 4, 5])
    items.reflect_from_tail(k)
    assert list(items) == [1, 2, 3, 4, 5]


def test_append_after_reflect_goes_to_end():
    items = LinkedList([1, 2, 3])
    items.reflect_from_tail(2)
    items.append(99)
    assert list(items)[-1] == 99
    assert len(items) == 4


def test_empty_list():
    items = LinkedList()
    items.reflect_from_tail(1)
    assert str(items) == ""
    assert len(items) == 0


def test_main_output(capsys):
    assert main([]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines == ["1 - 2 - 3 - 4 - 5", "1 - 5 - 4 - 3 - 2"]