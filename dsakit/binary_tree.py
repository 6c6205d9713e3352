"""Binary tree nodes, depth-first and breadth-first traversals, expression trees."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from typing import Any

__all__ = [
    "BinaryTreeNode",
    "in_order",
    "in_order_iterative",
    "pre_order",
    "pre_order_iterative",
    "post_order",
    "post_order_iterative",
    "level_order",
    "build_expression_tree",
]


@dataclass(eq=False)
class BinaryTreeNode:
    """A node holding ``data`` with optional left and right children."""

    data: Any
    left: BinaryTreeNode | None = None
    right: BinaryTreeNode | None = None


def in_order(root: BinaryTreeNode | None) -> list[Any]:
    """Left subtree, node, right subtree (recursive)."""
    if root is None:
        return []
    return [*in_order(root.left), root.data, *in_order(root.right)]


def in_order_iterative(root: BinaryTreeNode | None) -> list[Any]:
    """Left subtree, node, right subtree, using an explicit stack."""
    result: list[Any] = []
    stack: list[BinaryTreeNode] = []
    node = root
    while True:
        while node is not None:
            stack.append(node)
            node = node.left
        if not stack:
            return result
        node = stack.pop()
        result.append(node.data)
        node = node.right


def pre_order(root: BinaryTreeNode | None) -> list[Any]:
    """Node, left subtree, right subtree (recursive)."""
    if root is None:
        return []
    return [root.data, *pre_order(root.left), *pre_order(root.right)]


def pre_order_iterative(root: BinaryTreeNode | None) -> list[Any]:
    """Node, left subtree, right subtree, using an explicit stack."""
    result: list[Any] = []
    stack: list[BinaryTreeNode] = []
    node = root
    while True:
        while node is not None:
            result.append(node.data)
            stack.append(node)
            node = node.left
        if not stack:
            return result
        node = stack.pop().right


def post_order(root: BinaryTreeNode | None) -> list[Any]:
    """Left subtree, right subtree, node (recursive)."""
    if root is None:
        return []
    return [*post_order(root.left), *post_order(root.right), root.data]


def post_order_iterative(root: BinaryTreeNode | None) -> list[Any]:
    """Left subtree, right subtree, node, using one stack and a last-visited marker."""
    result: list[Any] = []
    if root is None:
        return result
    stack: list[BinaryTreeNode] = []
    previous: BinaryTreeNode | None = None
    node: BinaryTreeNode | None = root
    while True:
        while node is not None:
            stack.append(node)
            node = node.left
        top = stack[-1]
        if top.right is None or top.right is previous:
            result.append(top.data)
            stack.pop()
            previous = top
            node = None
        else:
            node = top.right
        if not stack:
            return result


def level_order(root: BinaryTreeNode | None) -> list[Any]:
    """Nodes level by level, left to right."""
    result: list[Any] = []
    if root is None:
        return result
    pending = deque([root])
    while pending:
        node = pending.popleft()
        result.append(node.data)
        if node.left is not None:
            pending.append(node.left)
        if node.right is not None:
            pending.append(node.right)
    return result


def build_expression_tree(postfix: str) -> BinaryTreeNode:
    """Build an expression tree from postfix; operands are capital letters A-Z."""
    stack: list[BinaryTreeNode] = []
    for char in postfix:
        node = BinaryTreeNode(char)
        if "A" <= char <= "Z":
            stack.append(node)
            continue
        if len(stack) < 2:
            raise ValueError(f"operator {char!r} lacks operands")
        node.right = stack.pop()
        node.left = stack.pop()
        stack.append(node)
    if not stack:
        raise ValueError("empty expression")
    return stack[-1]