"""Red-black trees with bottom-up insertion and deletion fix-ups."""

from __future__ import annotations

import enum
from collections.abc import Iterator
from dataclasses import dataclass, field
from typing import Any

__all__ = ["Color", "RBNode", "RedBlackTree"]


class Color(enum.Enum):
    RED = 0
    BLACK = 1


@dataclass(eq=False)
class RBNode:
    """A node; ``link[0]`` is the left child and ``link[1]`` the right."""

    data: Any
    color: Color = Color.RED
    link: list[RBNode | None] = field(default_factory=lambda: [None, None])

    @property
    def left(self) -> RBNode | None:
        return self.link[0]

    @property
    def right(self) -> RBNode | None:
        return self.link[1]


def _is_red(node: RBNode | None) -> bool:
    return node is not None and node.color is Color.RED


class RedBlackTree:
    """A set of distinct keys kept in a red-black tree."""

    def __init__(self) -> None:
        self.root: RBNode | None = None

    def insert(self, data: Any) -> bool:
        """Insert ``data``; return False if it was already present."""
        if self.root is None:
            self.root = RBNode(data, Color.BLACK)
            return True

        # The root appears twice so that a great-grandparent always exists.
        stack: list[RBNode] = [self.root]
        dirs: list[int] = [0]
        node: RBNode | None = self.root
        index = 0
        while node is not None:
            if node.data == data:
                return False
            index = 1 if data > node.data else 0
            stack.append(node)
            dirs.append(index)
            node = node.link[index]
        stack[-1].link[index] = RBNode(data)

        ht = len(stack)
        while ht >= 3 and stack[ht - 1].color is Color.RED:
            side = dirs[ht - 2]
            grand, parent = stack[ht - 2], stack[ht - 1]
            uncle = grand.link[1 - side]
            if _is_red(uncle):
                grand.color = Color.RED
                parent.color = Color.BLACK
                uncle.color = Color.BLACK
                ht -= 2
                continue
            if dirs[ht - 1] == side:
                pivot = parent
            else:
                pivot = parent.link[1 - side]
                assert pivot is not None
                parent.link[1 - side] = pivot.link[side]
                pivot.link[side] = parent
                grand.link[side] = pivot
            grand.color = Color.RED
            pivot.color = Color.BLACK
            grand.link[side] = pivot.link[1 - side]
            pivot.link[1 - side] = grand
            if grand is self.root:
                self.root = pivot
            else:
                above, above_dir = stack[ht - 3], dirs[ht - 3]
                above.link[above_dir] = pivot
            break
        self.root.color = Color.BLACK
        return True

    def delete(self, data: Any) -> None:
        """Remove ``data``; raise KeyError if it is absent."""
        path: list[tuple[RBNode, int]] = []
        node = self.root
        while node is not None and node.data != data:
            direction = 1 if data > node.data else 0
            path.append((node, direction))
            node = node.link[direction]
        if node is None:
            raise KeyError(data)

        successor = node.right
        if successor is None:
            self._set_child(path, len(path), node.left)
        elif successor.left is None:
            successor.link[0] = node.left
            successor.color, node.color = node.color, successor.color
            self._set_child(path, len(path), successor)
            path.append((successor, 1))
        else:
            slot = len(path)
            path.append((node, 1))
            parent = successor
            while True:
                path.append((parent, 0))
                successor = parent.left
                assert successor is not None
                if successor.left is None:
                    break
                parent = successor
            path[slot] = (successor, 1)
            self._set_child(path, slot, successor)
            successor.link[0] = node.left
            parent.link[0] = successor.right
            successor.link[1] = node.right
            successor.color, node.color = node.color, successor.color

        if path and node.color is Color.BLACK:
            self._fix_after_delete(path)
        if self.root is not None:
            self.root.color = Color.BLACK

    def _set_child(self, path: list[tuple[RBNode, int]], depth: int, child: RBNode | None) -> None:
        """Attach ``child`` where the node at ``depth`` on the path hangs."""
        if depth == 0:
            self.root = child
        else:
            parent, direction = path[depth - 1]
            parent.link[direction] = child

    def _fix_after_delete(self, path: list[tuple[RBNode, int]]) -> None:
        while path:
            parent, side = path[-1]
            short = parent.link[side]
            if _is_red(short):
                short.color = Color.BLACK
                return
            sibling = parent.link[1 - side]
            if sibling is None:
                return
            if sibling.color is Color.RED:
                parent.color = Color.RED
                sibling.color = Color.BLACK
                parent.link[1 - side] = sibling.link[side]
                sibling.link[side] = parent
                self._set_child(path, len(path) - 1, sibling)
                path[-1] = (sibling, side)
                path.append((parent, side))
                sibling = parent.link[1 - side]
                assert sibling is not None
            if not _is_red(sibling.link[0]) and not _is_red(sibling.link[1]):
                sibling.color = Color.RED
            else:
                if not _is_red(sibling.link[1 - side]):
                    inner = sibling.link[side]
                    assert inner is not None
                    sibling.color = Color.RED
                    inner.color = Color.BLACK
                    sibling.link[side] = inner.link[1 - side]
                    inner.link[1 - side] = sibling
                    parent.link[1 - side] = inner
                    sibling = inner
                sibling.color = parent.color
                parent.color = Color.BLACK
                far = sibling.link[1 - side]
                assert far is not None
                far.color = Color.BLACK
                parent.link[1 - side] = sibling.link[side]
                sibling.link[side] = parent
                self._set_child(path, len(path) - 1, sibling)
                return
            path.pop()

    def in_order(self) -> list[Any]:
        """Keys in ascending order."""
        return list(self)

    def __iter__(self) -> Iterator[Any]:
        stack: list[RBNode] = []
        node = self.root
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = node.left
            node = stack.pop()
            yield node.data
            node = node.right

    def __contains__(self, data: Any) -> bool:
        node = self.root
        while node is not None:
            if node.data == data:
                return True
            node = node.link[1 if data > node.data else 0]
        return False