"""An unrolled linked list: a chain of blocks, each holding a few items."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterator
from itertools import chain
from typing import Any

__all__ = ["UnrolledLinkedList"]


class UnrolledLinkedList:
    """Sequence stored in blocks of at most ``block_size`` items.

    Every block except the last is kept full, so the block holding a
    position is found by division.
    """

    def __init__(self, block_size: int = 5) -> None:
        if block_size < 1:
            raise ValueError("block size must be at least 1")
        self.block_size = block_size
        self._blocks: list[deque[Any]] = []
        self._length = 0

    def add(self, position: int, value: Any) -> None:
        """Insert ``value`` after the ``position``-th item; 0 inserts at the front.

        On an empty list the position is ignored.
        """
        if not self._blocks:
            self._blocks.append(deque([value]))
            self._length = 1
            return
        if not 0 <= position <= self._length:
            raise IndexError(f"position {position} outside 0..{self._length}")
        if position == 0:
            block_index, offset = 0, 0
        else:
            block_index, offset = divmod(position - 1, self.block_size)
            offset += 1
        self._blocks[block_index].insert(offset, value)
        self._length += 1
        self._shift(block_index)

    def _shift(self, index: int) -> None:
        """Push overflow from a block onto the front of the following blocks."""
        while len(self._blocks[index]) > self.block_size:
            moved = self._blocks[index].pop()
            if index + 1 == len(self._blocks):
                self._blocks.append(deque())
            self._blocks[index + 1].appendleft(moved)
            index += 1

    def search(self, position: int) -> Any:
        """Return the item at 1-based ``position``."""
        if not 1 <= position <= self._length:
            raise IndexError(f"position {position} outside 1..{self._length}")
        block_index, offset = divmod(position - 1, self.block_size)
        return self._blocks[block_index][offset]

    def blocks(self) -> list[list[Any]]:
        """Contents of each block, in order."""
        return [list(block) for block in self._blocks]

    def __iter__(self) -> Iterator[Any]:
        return chain.from_iterable(self._blocks)

    def __len__(self) -> int:
        return self._length