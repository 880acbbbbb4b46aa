"""A last-in, first-out stack of integers."""

from __future__ import annotations

import sys
from collections.abc import Iterator


class EmptyStackError(IndexError):
    """Raised when reading from or removing from an empty stack."""


class Stack:
    """LIFO stack; iteration goes from top to bottom."""

    def __init__(self) -> None:
        self._items: list[int] = []

    def push(self, value: int) -> None:
        """Put ``value`` on top."""
        self._items.append(value)

    def pop(self) -> int:
        """Remove and return the top value."""
        if not self._items:
            raise EmptyStackError("Стек пуст — удаление невозможно")
        return self._items.pop()

    def peek(self) -> int:
        """Return the top value without removing it."""
        if not self._items:
            raise EmptyStackError("Стек пуст")
        return self._items[-1]

    def is_empty(self) -> bool:
        return not self._items

    def __iter__(self) -> Iterator[int]:
        return reversed(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __str__(self) -> str:
        if not self._items:
            return "Стек пуст"
        return "Содержимое стека (сверху вниз): " + " ".join(str(v) for v in self)


def main(argv: list[str] | None = None) -> int:
    """Demonstrate pushing, peeking and popping."""
    stack = Stack()
    for value in (10, 20, 30):
        stack.push(value)
    print(stack)
    print(f"Верхний элемент: {stack.peek()}")
    stack.pop()
    print(stack)
    return 0


if __name__ == "__main__":
    sys.exit(main())