"""A singly linked list that can reverse its last k nodes in place."""

from __future__ import annotations

import sys
from collections.abc import Iterable, Iterator
from dataclasses import dataclass


@dataclass(slots=True)
class _Node:
    value: int
    next: _Node | None = None


class LinkedList:
    """Singly linked list of values."""

    def __init__(self, values: Iterable[int] = ()) -> None:
        self._head: _Node | None = None
        self._tail: _Node | None = None
        self._size = 0
        for value in values:
            self.append(value)

    def append(self, value: int) -> None:
        """Add ``value`` at the end."""
        node = _Node(value)
        if self._tail is None:
            self._head = node
        else:
            self._tail.next = node
        self._tail = node
        self._size += 1

    def reflect_from_tail(self, k: int) -> None:
        """Reverse the last ``k`` nodes in place; does nothing unless 0 < k < len."""
        if k <= 0 or k >= self._size:
            return
        pivot = self._head
        for _ in range(self._size - k - 1):
            pivot = pivot.next
        previous = None
        current = pivot.next
        new_tail = current
        while current is not None:
            following = current.next
            current.next = previous
            previous = current
            current = following
        pivot.next = previous
        self._tail = new_tail

    def __iter__(self) -> Iterator[int]:
        node = self._head
        while node is not None:
            yield node.value
            node = node.next

    def __len__(self) -> int:
        return self._size

    def __str__(self) -> str:
        return " - ".join(str(value) for value in self)


def main(argv: list[str] | None = None) -> int:
    """Show a list before and after reflecting its last four nodes."""
    items = LinkedList([1, 2, 3, 4, 5])
    print(items)
    items.reflect_from_tail(4)
    print(items)
    return 0


if __name__ == "__main__":
    sys.exit(main())