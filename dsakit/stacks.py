"""Last-in first-out stacks: fixed-capacity, growable and linked."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from typing import Any

__all__ = [
    "StackOverflowError",
    "StackEmptyError",
    "ArrayStack",
    "DynamicArrayStack",
    "LinkedStack",
]


class StackOverflowError(Exception):
    """Raised when pushing onto a full fixed-capacity stack."""


class StackEmptyError(Exception):
    """Raised when popping or peeking an empty stack."""


def _check_capacity(capacity: int) -> None:
    if capacity < 1:
        raise ValueError("capacity must be at least 1")


class ArrayStack:
    """Stack backed by an array of fixed capacity."""

    def __init__(self, capacity: int) -> None:
        _check_capacity(capacity)
        self.capacity = capacity
        self._items: list[Any] = []

    def push(self, data: Any) -> None:
        """Place ``data`` on top; raise StackOverflowError when full."""
        if self.is_full():
            raise StackOverflowError(f"stack is full at capacity {self.capacity}")
        self._items.append(data)

    def pop(self) -> Any:
        """Remove and return the top item."""
        if self.is_empty():
            raise StackEmptyError("stack is empty")
        return self._items.pop()

    def peek(self) -> Any:
        """Return the top item without removing it."""
        if self.is_empty():
            raise StackEmptyError("stack is empty")
        return self._items[-1]

    def is_empty(self) -> bool:
        return not self._items

    def is_full(self) -> bool:
        return len(self._items) == self.capacity

    def clear(self) -> None:
        """Remove every item."""
        self._items.clear()

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Any]:
        """Items from top to bottom."""
        return reversed(self._items)


class DynamicArrayStack:
    """Array stack that doubles its capacity instead of overflowing."""

    def __init__(self, capacity: int) -> None:
        _check_capacity(capacity)
        self.capacity = capacity
        self._items: list[Any] = []

    def push(self, data: Any) -> None:
        """Place ``data`` on top, doubling the capacity first if full."""
        if self.is_full():
            self.capacity *= 2
        self._items.append(data)

    def pop(self) -> Any:
        """Remove and return the top item."""
        if self.is_empty():
            raise StackEmptyError("stack is empty")
        return self._items.pop()

    def peek(self) -> Any:
        """Return the top item without removing it."""
        if self.is_empty():
            raise StackEmptyError("stack is empty")
        return self._items[-1]

    def is_empty(self) -> bool:
        return not self._items

    def is_full(self) -> bool:
        return len(self._items) == self.capacity

    def clear(self) -> None:
        """Remove every item."""
        self._items.clear()

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Any]:
        """Items from top to bottom."""
        return reversed(self._items)


@dataclass
class _Node:
    data: Any
    next: _Node | None = None


class LinkedStack:
    """Stack built from a chain of singly linked nodes."""

    def __init__(self) -> None:
        self._top: _Node | None = None
        self._size = 0

    def push(self, data: Any) -> None:
        """Place ``data`` on top."""
        self._top = _Node(data, self._top)
        self._size += 1

    def pop(self) -> Any:
        """Remove and return the top item."""
        if self._top is None:
            raise StackEmptyError("stack is empty")
        node = self._top
        self._top = node.next
        self._size -= 1
        return node.data

    def peek(self) -> Any:
        """Return the top item without removing it."""
        if self._top is None:
            raise StackEmptyError("stack is empty")
        return self._top.data

    def is_empty(self) -> bool:
        return self._size == 0

    def clear(self) -> None:
        """Remove every item."""
        self._top = None
        self._size = 0

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[Any]:
        """Items from top to bottom."""
        node = self._top
        while node is not None:
            yield node.data
            node = node.next