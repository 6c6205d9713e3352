"""Bounded binary min-heaps and max-heaps stored in arrays."""

from __future__ import annotations

import operator
from collections.abc import Callable, Iterator
from typing import Any

__all__ = ["HeapOverflowError", "HeapEmptyError", "MinHeap", "MaxHeap"]


class HeapOverflowError(Exception):
    """Raised when inserting into a heap that is at capacity."""


class HeapEmptyError(Exception):
    """Raised when reading or removing the top of an empty heap."""


def _parent(index: int) -> int:
    return (index - 1) // 2


class _BinaryHeap:
    """Array-backed binary heap of bounded size ordered by ``above``."""

    def __init__(self, capacity: int, above: Callable[[Any, Any], bool]) -> None:
        if capacity < 1:
            raise ValueError("capacity must be at least 1")
        self.capacity = capacity
        self.items: list[Any] = []
        self._above = above

    def _swap(self, i: int, j: int) -> None:
        self.items[i], self.items[j] = self.items[j], self.items[i]

    def sift_up(self, index: int) -> None:
        while index and self._above(self.items[index], self.items[_parent(index)]):
            self._swap(index, _parent(index))
            index = _parent(index)

    def _sift_down(self, index: int) -> None:
        size = len(self.items)
        while True:
            best = index
            for child in (2 * index + 1, 2 * index + 2):
                if child < size and self._above(self.items[child], self.items[best]):
                    best = child
            if best == index:
                return
            self._swap(index, best)
            index = best

    def push(self, key: Any) -> None:
        if len(self.items) == self.capacity:
            raise HeapOverflowError(f"heap is full at capacity {self.capacity}")
        self.items.append(key)
        self.sift_up(len(self.items) - 1)

    def pop(self) -> Any:
        if not self.items:
            raise HeapEmptyError("heap is empty")
        top = self.items[0]
        last = self.items.pop()
        if self.items:
            self.items[0] = last
            self._sift_down(0)
        return top

    def peek(self) -> Any:
        if not self.items:
            raise HeapEmptyError("heap is empty")
        return self.items[0]

    def check_index(self, index: int) -> None:
        if not 0 <= index < len(self.items):
            raise IndexError(f"index {index} outside 0..{len(self.items) - 1}")

    def delete(self, index: int) -> None:
        self.check_index(index)
        # Carry the item all the way to the root, as if given an extreme key.
        while index:
            self._swap(index, _parent(index))
            index = _parent(index)
        self.pop()


class MinHeap:
    """Binary heap with the smallest key at the root."""

    def __init__(self, capacity: int) -> None:
        self._heap = _BinaryHeap(capacity, operator.lt)

    @property
    def capacity(self) -> int:
        return self._heap.capacity

    def insert(self, key: Any) -> None:
        """Add ``key``; raise HeapOverflowError when full."""
        self._heap.push(key)

    def extract_min(self) -> Any:
        """Remove and return the smallest key."""
        return self._heap.pop()

    def get_min(self) -> Any:
        """Return the smallest key without removing it."""
        return self._heap.peek()

    def decrease_key(self, index: int, new_value: Any) -> None:
        """Lower the key at array ``index`` to ``new_value`` and restore order."""
        self._heap.check_index(index)
        if new_value > self._heap.items[index]:
            raise ValueError("new value is larger than the current key")
        self._heap.items[index] = new_value
        self._heap.sift_up(index)

    def delete_key(self, index: int) -> None:
        """Remove the key at array ``index``."""
        self._heap.delete(index)

    def __len__(self) -> int:
        return len(self._heap.items)

    def __iter__(self) -> Iterator[Any]:
        """Items in heap array order."""
        return iter(list(self._heap.items))


class MaxHeap:
    """Binary heap with the largest key at the root."""

    def __init__(self, capacity: int) -> None:
        self._heap = _BinaryHeap(capacity, operator.gt)

    @property
    def capacity(self) -> int:
        return self._heap.capacity

    def insert(self, key: Any) -> None:
        """Add ``key``; raise HeapOverflowError when full."""
        self._heap.push(key)

    def extract_max(self) -> Any:
        """Remove and return the largest key."""
        return self._heap.pop()

    def get_max(self) -> Any:
        """Return the largest key without removing it."""
        return self._heap.peek()

    def increase_key(self, index: int, new_value: Any) -> None:
        """Raise the key at array ``index`` to ``new_value`` and restore order."""
        self._heap.check_index(index)
        if new_value < self._heap.items[index]:
            raise ValueError("new value is smaller than the current key")
        self._heap.items[index] = new_value
        self._heap.sift_up(index)

    def delete_key(self, index: int) -> None:
        """Remove the key at array ``index``."""
        self._heap.delete(index)

    def __len__(self) -> int:
        return len(self._heap.items)

    def __iter__(self) -> Iterator[Any]:
        """Items in heap array order."""
        return iter(list(self._heap.items))