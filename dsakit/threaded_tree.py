"""In-order threaded binary trees.

Where a node has no left (right) child, its left (right) link is a thread to
its in-order predecessor (successor) instead.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

__all__ = ["ThreadedNode", "ThreadedBinaryTree"]


@dataclass(eq=False, repr=False)
class ThreadedNode:
    """A node whose tags tell whether each link is a child (True) or a thread."""

    data: Any
    left: ThreadedNode | None = None
    right: ThreadedNode | None = None
    left_tag: bool = False
    right_tag: bool = False

    def __repr__(self) -> str:
        return f"ThreadedNode({self.data!r})"


def _in_order_successor(node: ThreadedNode) -> ThreadedNode | None:
    if not node.right_tag:
        return node.right
    position = node.right
    assert position is not None
    while position.left_tag:
        assert position.left is not None
        position = position.left
    return position


def _pre_order_successor(node: ThreadedNode) -> ThreadedNode | None:
    if node.left_tag:
        return node.left
    position: ThreadedNode | None = node
    while position is not None and not position.right_tag:
        position = position.right
    return None if position is None else position.right


class ThreadedBinaryTree:
    """An in-order threaded binary tree grown by inserting beside existing nodes."""

    def __init__(self, data: Any) -> None:
        self.root = ThreadedNode(data)

    def insert_left(self, node: ThreadedNode, data: Any) -> ThreadedNode:
        """Make a new node the left child of ``node``; the old left subtree goes under it."""
        new = ThreadedNode(data, left=node.left, right=node, left_tag=node.left_tag)
        node.left = new
        node.left_tag = True
        if new.left_tag:
            predecessor = new.left
            assert predecessor is not None
            while predecessor.right_tag:
                assert predecessor.right is not None
                predecessor = predecessor.right
            predecessor.right = new
        return new

    def insert_right(self, node: ThreadedNode, data: Any) -> ThreadedNode:
        """Make a new node the right child of ``node``; the old right subtree goes under it."""
        new = ThreadedNode(data, left=node, right=node.right, right_tag=node.right_tag)
        node.right = new
        node.right_tag = True
        if new.right_tag:
            successor = new.right
            assert successor is not None
            while successor.left_tag:
                assert successor.left is not None
                successor = successor.left
            successor.left = new
        return new

    def in_order(self) -> list[Any]:
        """Data in left-node-right order, following threads without a stack."""
        position: ThreadedNode | None = self.root
        while position.left_tag:
            position = position.left
        result: list[Any] = []
        while position is not None:
            result.append(position.data)
            position = _in_order_successor(position)
        return result

    def pre_order(self) -> list[Any]:
        """Data in node-left-right order, following threads without a stack."""
        result: list[Any] = []
        position: ThreadedNode | None = self.root
        while position is not None:
            result.append(position.data)
            position = _pre_order_successor(position)
        return result