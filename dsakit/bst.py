"""Binary search trees with iterative and recursive operations."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from typing import Any

__all__ = ["BSTNode", "BinarySearchTree"]


@dataclass(eq=False)
class BSTNode:
    """A node holding a key and its left and right subtrees."""

    data: Any
    left: BSTNode | None = None
    right: BSTNode | None = None


class BinarySearchTree:
    """A set of distinct keys in an unbalanced binary search tree."""

    def __init__(self, root_key: Any) -> None:
        self.root: BSTNode | None = BSTNode(root_key)

    def insert(self, key: Any) -> bool:
        """Insert ``key`` by walking down iteratively; return False if already present."""
        if self.root is None:
            self.root = BSTNode(key)
            return True
        current = self.root
        while True:
            if key < current.data:
                if current.left is None:
                    current.left = BSTNode(key)
                    return True
                current = current.left
            elif key > current.data:
                if current.right is None:
                    current.right = BSTNode(key)
                    return True
                current = current.right
            else:
                return False

    def insert_recursive(self, key: Any) -> bool:
        """Insert ``key`` by recursive descent; return False if already present."""
        if self.root is None:
            self.root = BSTNode(key)
            return True
        return self._insert_below(self.root, key)

    def _insert_below(self, node: BSTNode, key: Any) -> bool:
        if key < node.data:
            if node.left is None:
                node.left = BSTNode(key)
                return True
            return self._insert_below(node.left, key)
        if key > node.data:
            if node.right is None:
                node.right = BSTNode(key)
                return True
            return self._insert_below(node.right, key)
        return False

    def _find_node(self, key: Any) -> BSTNode | None:
        node = self.root
        while node is not None:
            if node.data > key:
                node = node.left
            elif node.data < key:
                node = node.right
            else:
                return node
        return None

    def find(self, key: Any) -> Any | None:
        """Return the stored key equal to ``key``, or None (iterative)."""
        node = self._find_node(key)
        return None if node is None else node.data

    def find_recursive(self, key: Any) -> Any | None:
        """Return the stored key equal to ``key``, or None (recursive)."""

        def descend(node: BSTNode | None) -> Any | None:
            if node is None:
                return None
            if node.data > key:
                return descend(node.left)
            if node.data < key:
                return descend(node.right)
            return node.data

        return descend(self.root)

    def _require_root(self) -> BSTNode:
        if self.root is None:
            raise ValueError("tree is empty")
        return self.root

    def find_min(self) -> Any:
        """Smallest key (iterative); raise ValueError on an empty tree."""
        node = self._require_root()
        while node.left is not None:
            node = node.left
        return node.data

    def find_min_recursive(self) -> Any:
        """Smallest key (recursive); raise ValueError on an empty tree."""

        def leftmost(node: BSTNode) -> Any:
            return node.data if node.left is None else leftmost(node.left)

        return leftmost(self._require_root())

    def find_max(self) -> Any:
        """Largest key (iterative); raise ValueError on an empty tree."""
        node = self._require_root()
        while node.right is not None:
            node = node.right
        return node.data

    def find_max_recursive(self) -> Any:
        """Largest key (recursive); raise ValueError on an empty tree."""

        def rightmost(node: BSTNode) -> Any:
            return node.data if node.right is None else rightmost(node.right)

        return rightmost(self._require_root())

    def delete(self, key: Any) -> None:
        """Remove ``key``; a node with two children takes its in-order predecessor.

        Raise KeyError if the key is absent.
        """
        self.root = self._delete(self.root, key)

    def _delete(self, node: BSTNode | None, key: Any) -> BSTNode | None:
        if node is None:
            raise KeyError(key)
        if key < node.data:
            node.left = self._delete(node.left, key)
        elif key > node.data:
            node.right = self._delete(node.right, key)
        elif node.left is not None and node.right is not None:
            predecessor = node.left
            while predecessor.right is not None:
                predecessor = predecessor.right
            node.data = predecessor.data
            node.left = self._delete(node.left, predecessor.data)
        else:
            return node.left if node.left is not None else node.right
        return node

    def in_order(self) -> list[Any]:
        """Keys in ascending order."""
        return list(self._walk())

    def _walk(self) -> Iterator[Any]:
        stack: list[BSTNode] = []
        node = self.root
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = node.left
            node = stack.pop()
            yield node.data
            node = node.right

    def __contains__(self, key: Any) -> bool:
        return self._find_node(key) is not None