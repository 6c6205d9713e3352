"""Disjoint-set forests: union by rank with path compression, and plain quick union."""

from __future__ import annotations

__all__ = ["DisjointSet", "QuickUnion"]


def _check_size(size: int) -> None:
    if size < 0:
        raise ValueError("size must not be negative")


class DisjointSet:
    """Items ``0..size-1`` partitioned into sets, merged by rank."""

    def __init__(self, size: int) -> None:
        _check_size(size)
        self._parent = list(range(size))
        self._rank = [0] * size

    def _check(self, item: int) -> None:
        if not 0 <= item < len(self._parent):
            raise IndexError(f"item {item} outside 0..{len(self._parent) - 1}")

    def find(self, item: int) -> int:
        """Representative of the set holding ``item``; compresses the path walked."""
        self._check(item)
        parent = self._parent
        root = item
        while parent[root] != root:
            root = parent[root]
        while parent[item] != root:
            parent[item], item = root, parent[item]
        return root

    def union(self, x: int, y: int) -> bool:
        """Merge the sets of ``x`` and ``y``; return False if already the same set.

        The root of lower rank goes under the other; on equal ranks the root
        of ``y`` goes under the root of ``x``.
        """
        x_root = self.find(x)
        y_root = self.find(y)
        if x_root == y_root:
            return False
        if self._rank[x_root] < self._rank[y_root]:
            self._parent[x_root] = y_root
        elif self._rank[x_root] > self._rank[y_root]:
            self._parent[y_root] = x_root
        else:
            self._parent[y_root] = x_root
            self._rank[x_root] += 1
        return True

    def connected(self, x: int, y: int) -> bool:
        """True if ``x`` and ``y`` are in the same set."""
        return self.find(x) == self.find(y)


class QuickUnion:
    """Items ``0..size-1`` joined by linking roots, without balancing."""

    def __init__(self, size: int) -> None:
        _check_size(size)
        self._parent = list(range(size))

    def find_root(self, item: int) -> int:
        """Follow parent links from ``item`` up to its root."""
        if not 0 <= item < len(self._parent):
            raise IndexError(f"item {item} outside 0..{len(self._parent) - 1}")
        while item != self._parent[item]:
            item = self._parent[item]
        return item

    def connect(self, x: int, y: int) -> None:
        """Hang the root of ``y`` under the root of ``x``."""
        x_root = self.find_root(x)
        y_root = self.find_root(y)
        self._parent[y_root] = x_root

    def is_connected(self, x: int, y: int) -> bool:
        """True if ``x`` and ``y`` share a root."""
        return self.find_root(x) == self.find_root(y)