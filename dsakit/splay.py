"""Splay trees: search moves the sought key, or the last node reached, to the root."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

__all__ = ["SplayNode", "splay", "search", "pre_order"]


@dataclass(eq=False)
class SplayNode:
    """A node holding a key and its left and right subtrees."""

    key: Any
    left: SplayNode | None = None
    right: SplayNode | None = None


def _rotate_right(node: SplayNode) -> SplayNode:
    pivot = node.left
    assert pivot is not None
    node.left = pivot.right
    pivot.right = node
    return pivot


def _rotate_left(node: SplayNode) -> SplayNode:
    pivot = node.right
    assert pivot is not None
    node.right = pivot.left
    pivot.left = node
    return pivot


def splay(root: SplayNode | None, key: Any) -> SplayNode | None:
    """Bring ``key`` (or the last node on its search path) to the root; return the new root."""
    if root is None or root.key == key:
        return root

    if root.key > key:
        if root.left is None:
            return root
        if root.left.key > key:
            root.left.left = splay(root.left.left, key)
            root = _rotate_right(root)
        elif root.left.key < key:
            root.left.right = splay(root.left.right, key)
            if root.left.right is not None:
                root.left = _rotate_left(root.left)
        return root if root.left is None else _rotate_right(root)

    if root.right is None:
        return root
    if root.right.key > key:
        root.right.left = splay(root.right.left, key)
        if root.right.left is not None:
            root.right = _rotate_right(root.right)
    elif root.right.key < key:
        root.right.right = splay(root.right.right, key)
        root = _rotate_left(root)
    return root if root.right is None else _rotate_left(root)


def search(root: SplayNode | None, key: Any) -> SplayNode | None:
    """Search for ``key`` by splaying; return the new root."""
    return splay(root, key)


def pre_order(root: SplayNode | None) -> list[Any]:
    """Keys in node, left, right order."""
    result: list[Any] = []
    stack = [root] if root is not None else []
    while stack:
        node = stack.pop()
        result.append(node.key)
        if node.right is not None:
            stack.append(node.right)
        if node.left is not None:
            stack.append(node.left)
    return result