"""A doubly linked list storing one XOR-combined link per node."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from typing import Any

__all__ = ["XorLinkedList"]

_NULL = 0


@dataclass
class _Node:
    data: Any
    link: int


class XorLinkedList:
    """Doubly linked list where each node holds ``previous_id ^ next_id``.

    Nodes are addressed by integer ids handed out on insertion; id 0 is the
    null link.
    """

    def __init__(self) -> None:
        self._nodes: dict[int, _Node] = {}
        self._head = _NULL
        self._tail = _NULL
        self._next_id = 1

    def insert(self, data: Any) -> int:
        """Insert ``data`` at the head and return the new node's id."""
        node_id = self._next_id
        self._next_id += 1
        self._nodes[node_id] = _Node(data, _NULL ^ self._head)
        if self._head != _NULL:
            self._nodes[self._head].link ^= node_id
        else:
            self._tail = node_id
        self._head = node_id
        return node_id

    def _walk(self, start: int) -> Iterator[Any]:
        previous, current = _NULL, start
        while current != _NULL:
            node = self._nodes[current]
            yield node.data
            previous, current = current, previous ^ node.link

    def __iter__(self) -> Iterator[Any]:
        return self._walk(self._head)

    def iter_from(self, node_id: int) -> Iterator[Any]:
        """Walk the list starting at an end node, towards the other end."""
        if node_id not in self._nodes or node_id not in (self._head, self._tail):
            raise ValueError(f"node {node_id} is not an end of the list")
        return self._walk(node_id)

    def __len__(self) -> int:
        return len(self._nodes)