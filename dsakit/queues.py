"""First-in first-out queues: circular fixed-capacity, growable and linked."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from typing import Any

__all__ = [
    "QueueOverflowError",
    "QueueEmptyError",
    "CircularQueue",
    "DynamicQueue",
    "LinkedQueue",
]


class QueueOverflowError(Exception):
    """Raised when adding to a full fixed-capacity queue."""


class QueueEmptyError(Exception):
    """Raised when removing from or inspecting an empty queue."""


class _Ring:
    """Ring buffer holding the items of an array-backed queue."""

    def __init__(self, capacity: int) -> None:
        if capacity < 1:
            raise ValueError("capacity must be at least 1")
        self.buffer: list[Any] = [None] * capacity
        self.front = 0
        self.size = 0

    @property
    def capacity(self) -> int:
        return len(self.buffer)

    def slot(self, offset: int) -> int:
        return (self.front + offset) % len(self.buffer)

    def is_full(self) -> bool:
        return self.size == len(self.buffer)

    def append(self, data: Any) -> None:
        self.buffer[self.slot(self.size)] = data
        self.size += 1

    def popleft(self) -> Any:
        if self.size == 0:
            raise QueueEmptyError("queue is empty")
        value = self.buffer[self.front]
        self.buffer[self.front] = None
        self.front = self.slot(1)
        self.size -= 1
        return value

    def first(self) -> Any:
        if self.size == 0:
            raise QueueEmptyError("queue is empty")
        return self.buffer[self.front]

    def last(self) -> Any:
        if self.size == 0:
            raise QueueEmptyError("queue is empty")
        return self.buffer[self.slot(self.size - 1)]

    def grow(self) -> None:
        """Double the capacity, laying the items out from slot zero."""
        items = list(self)
        self.buffer = items + [None] * len(self.buffer)
        self.front = 0

    def reset(self) -> None:
        self.buffer = [None] * len(self.buffer)
        self.front = 0
        self.size = 0

    def __iter__(self) -> Iterator[Any]:
        for offset in range(self.size):
            yield self.buffer[self.slot(offset)]


class CircularQueue:
    """Queue stored in a ring buffer of fixed capacity."""

    def __init__(self, capacity: int) -> None:
        self._ring = _Ring(capacity)

    @property
    def capacity(self) -> int:
        return self._ring.capacity

    def enqueue(self, data: Any) -> None:
        """Add ``data`` at the rear; raise QueueOverflowError when full."""
        if self._ring.is_full():
            raise QueueOverflowError(f"queue is full at capacity {self.capacity}")
        self._ring.append(data)

    def dequeue(self) -> Any:
        """Remove and return the front item."""
        return self._ring.popleft()

    def front(self) -> Any:
        """Return the front item without removing it."""
        return self._ring.first()

    def rear(self) -> Any:
        """Return the most recently added item."""
        return self._ring.last()

    def is_empty(self) -> bool:
        return self._ring.size == 0

    def is_full(self) -> bool:
        return self._ring.is_full()

    def clear(self) -> None:
        """Remove every item."""
        self._ring.reset()

    def __len__(self) -> int:
        return self._ring.size

    def __iter__(self) -> Iterator[Any]:
        """Items from front to rear."""
        return iter(self._ring)


class DynamicQueue:
    """Ring-buffer queue that doubles its capacity instead of overflowing."""

    def __init__(self, capacity: int) -> None:
        self._ring = _Ring(capacity)

    @property
    def capacity(self) -> int:
        return self._ring.capacity

    def enqueue(self, data: Any) -> None:
        """Add ``data`` at the rear, doubling the capacity first if full."""
        if self._ring.is_full():
            self._ring.grow()
        self._ring.append(data)

    def dequeue(self) -> Any:
        """Remove and return the front item."""
        return self._ring.popleft()

    def front(self) -> Any:
        """Return the front item without removing it."""
        return self._ring.first()

    def rear(self) -> Any:
        """Return the most recently added item."""
        return self._ring.last()

    def is_empty(self) -> bool:
        return self._ring.size == 0

    def is_full(self) -> bool:
        return self._ring.is_full()

    def clear(self) -> None:
        """Remove every item."""
        self._ring.reset()

    def __len__(self) -> int:
        return self._ring.size

    def __iter__(self) -> Iterator[Any]:
        """Items from front to rear."""
        return iter(self._ring)


@dataclass
class _Node:
    data: Any
    next: _Node | None = None


class LinkedQueue:
    """Queue built from a chain of singly linked nodes."""

    def __init__(self) -> None:
        self._front: _Node | None = None
        self._rear: _Node | None = None
        self._size = 0

    def enqueue(self, data: Any) -> None:
        """Add ``data`` at the rear."""
        node = _Node(data)
        if self._rear is None:
            self._front = node
        else:
            self._rear.next = node
        self._rear = node
        self._size += 1

    def dequeue(self) -> Any:
        """Remove and return the front item."""
        if self._front is None:
            raise QueueEmptyError("queue is empty")
        node = self._front
        self._front = node.next
        if self._front is None:
            self._rear = None
        self._size -= 1
        return node.data

    def front(self) -> Any:
        """Return the front item without removing it."""
        if self._front is None:
            raise QueueEmptyError("queue is empty")
        return self._front.data

    def rear(self) -> Any:
        """Return the most recently added item."""
        if self._rear is None:
            raise QueueEmptyError("queue is empty")
        return self._rear.data

    def is_empty(self) -> bool:
        return self._size == 0

    def clear(self) -> None:
        """Remove every item."""
        self._front = None
        self._rear = None
        self._size = 0

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[Any]:
        """Items from front to rear."""
        node = self._front
        while node is not None:
            yield node.data
            node = node.next