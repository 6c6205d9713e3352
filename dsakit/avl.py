"""AVL trees: binary search trees kept height-balanced by rotations."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from typing import Any

__all__ = ["AVLNode", "AVLTree"]


@dataclass(eq=False)
class AVLNode:
    """A node with its key, children and the height of its subtree (a leaf is 0)."""

    key: Any
    left: AVLNode | None = None
    right: AVLNode | None = None
    height: int = 0


def _height(node: AVLNode | None) -> int:
    return -1 if node is None else node.height


def _update_height(node: AVLNode) -> None:
    node.height = max(_height(node.left), _height(node.right)) + 1


def _balance(node: AVLNode) -> int:
    return _height(node.left) - _height(node.right)


def _rotate_left(node: AVLNode) -> AVLNode:
    pivot = node.right
    assert pivot is not None
    node.right = pivot.left
    pivot.left = node
    _update_height(node)
    _update_height(pivot)
    return pivot


def _rotate_right(node: AVLNode) -> AVLNode:
    pivot = node.left
    assert pivot is not None
    node.left = pivot.right
    pivot.right = node
    _update_height(node)
    _update_height(pivot)
    return pivot


class AVLTree:
    """A set of distinct keys stored in an AVL tree."""

    def __init__(self) -> None:
        self.root: AVLNode | None = None
        self._size = 0

    def insert(self, key: Any) -> bool:
        """Insert ``key``; return False if it was already present."""
        before = self._size
        self.root = self._insert(self.root, key)
        return self._size > before

    def _insert(self, node: AVLNode | None, key: Any) -> AVLNode:
        if node is None:
            self._size += 1
            return AVLNode(key)
        if key < node.key:
            node.left = self._insert(node.left, key)
        elif key > node.key:
            node.right = self._insert(node.right, key)
        else:
            return node

        _update_height(node)
        balance = _balance(node)

        if balance > 1 and node.left is not None:
            if key < node.left.key:
                return _rotate_right(node)
            if key > node.left.key:
                node.left = _rotate_left(node.left)
                return _rotate_right(node)
        if balance < -1 and node.right is not None:
            if key > node.right.key:
                return _rotate_left(node)
            if key < node.right.key:
                node.right = _rotate_right(node.right)
                return _rotate_left(node)
        return node

    def in_order(self) -> list[Any]:
        """Keys in ascending order."""
        return list(self)

    def __iter__(self) -> Iterator[Any]:
        stack: list[AVLNode] = []
        node = self.root
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = node.left
            node = stack.pop()
            yield node.key
            node = node.right

    def __len__(self) -> int:
        return self._size