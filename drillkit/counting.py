"""Count occurrences of a value in a sorted list by binary search."""

from __future__ import annotations

import random
import sys
from bisect import bisect_left, bisect_right
from collections.abc import Sequence


def find_first(values: Sequence[int], x: int) -> int | None:
    """Index of the first occurrence of ``x`` in sorted ``values``, or None."""
    index = bisect_left(values, x)
    if index < len(values) and values[index] == x:
        return index
    return None


def find_last(values: Sequence[int], x: int) -> int | None:
    """Index of the last occurrence of ``x`` in sorted ``values``, or None."""
    index = bisect_right(values, x) - 1
    if index >= 0 and values[index] == x:
        return index
    return None


def count_occurrences(values: Sequence[int], x: int) -> int:
    """Number of times ``x`` occurs in sorted ``values``."""
    return bisect_right(values, x) - bisect_left(values, x)


def random_sorted(
    n: int, max_value: int, rng: random.Random | None = None
) -> list[int]:
    """Return ``n`` random integers from 0 to ``max_value`` inclusive, sorted."""
    if n < 0:
        raise ValueError("size must not be negative")
    if max_value < 0:
        raise ValueError("maximum value must not be negative")
    source = rng if rng is not None else random
    return sorted(source.randint(0, max_value) for _ in range(n))


def main(argv: list[str] | None = None) -> int:
    """Generate a sorted random list and count how often a number occurs in it."""
    try:
        n = int(input("Введите размер: "))
        max_value = int(input("Введите максимальное значение для генерации: "))
        values = random_sorted(n, max_value)
        print("Массив:", *values)
        x = int(input("Введите число для поиска: "))
    except (ValueError, EOFError) as exc:
        print(f"\nОшибка ввода: {exc}", file=sys.stderr)
        return 1

    first = find_first(values, x)
    last = find_last(values, x)
    if first is None or last is None:
        print(f"Число {x} не найдено")
    else:
        print(f"Число {x} встречается {last - first + 1} раз")
    return 0


if __name__ == "__main__":
    sys.exit(main())