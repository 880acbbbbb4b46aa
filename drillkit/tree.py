"""Thread a binary tree into a doubly linked list in in-order sequence."""

from __future__ import annotations

import sys
from dataclasses import dataclass, field


@dataclass(eq=False)
class TreeNode:
    data: int
    left: TreeNode | None = None
    right: TreeNode | None = None
    prev: TreeNode | None = field(default=None, repr=False)
    next: TreeNode | None = field(default=None, repr=False)


def to_doubly_linked(root: TreeNode | None) -> TreeNode | None:
    """Link the nodes by ``prev``/``next`` in in-order sequence; return the head."""
    head = previous = None
    pending: list[TreeNode] = []
    node = root
    while pending or node is not None:
        while node is not None:
            pending.append(node)
            node = node.left
        node = pending.pop()
        if previous is None:
            head = node
        else:
            previous.next = node
            node.prev = previous
        previous = node
        node = node.right
    return head


def format_list(head: TreeNode | None) -> str:
    """Render the list starting at ``head`` as ``a <-> b <-> c``."""
    parts = []
    node = head
    while node is not None:
        parts.append(str(node.data))
        node = node.next
    return " <-> ".join(parts)


def main(argv: list[str] | None = None) -> int:
    """Convert a sample tree and print the resulting list."""
    root = TreeNode(
        10,
        left=TreeNode(12, left=TreeNode(25), right=TreeNode(30, right=TreeNode(36))),
        right=TreeNode(15),
    )
    head = to_doubly_linked(root)
    print(f"Двусвязный список: {format_list(head)}")
    return 0


if __name__ == "__main__":
    sys.exit(main())