"""General trees stored as first-child / next-sibling binary links."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from typing import Any

__all__ = ["TreeNode", "traverse"]


@dataclass(eq=False)
class TreeNode:
    """A tree node linking to its first child and its next sibling."""

    data: Any
    first_child: TreeNode | None = None
    next_sibling: TreeNode | None = None

    def add_child(self, data: Any) -> TreeNode:
        """Append a new last child holding ``data`` and return it."""
        child = TreeNode(data)
        if self.first_child is None:
            self.first_child = child
            return child
        last = self.first_child
        while last.next_sibling is not None:
            last = last.next_sibling
        last.next_sibling = child
        return child


def traverse(node: TreeNode | None) -> Iterator[Any]:
    """Yield data depth first: a node, its descendants, then its later siblings."""
    stack = [node] if node is not None else []
    while stack:
        current = stack.pop()
        yield current.data
        if current.next_sibling is not None:
            stack.append(current.next_sibling)
        if current.first_child is not None:
            stack.append(current.first_child)