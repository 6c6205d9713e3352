"""Graphs as adjacency lists and adjacency matrices, with depth- and breadth-first search."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Iterator, Sequence

__all__ = ["dfs_of_graph", "AdjacencyListGraph", "AdjacencyMatrixGraph"]


def dfs_of_graph(adjacency: Sequence[Sequence[int]]) -> list[int]:
    """Depth-first order from vertex 0, trying neighbours in list order, with a stack."""
    if not adjacency:
        return []
    traversal = [0]
    visited = {0}
    stack = [0]
    while stack:
        for neighbor in adjacency[stack[-1]]:
            if neighbor not in visited:
                visited.add(neighbor)
                traversal.append(neighbor)
                stack.append(neighbor)
                break
        else:
            stack.pop()
    return traversal


class AdjacencyListGraph:
    """Directed graph whose edges are prepended to each source's neighbour list."""

    def __init__(self, edges: Iterable[tuple[int, int]], vertex_count: int) -> None:
        if vertex_count < 0:
            raise ValueError("vertex count must not be negative")
        self.vertex_count = vertex_count
        self._heads: list[deque[int]] = [deque() for _ in range(vertex_count)]
        for source, destination in edges:
            for vertex in (source, destination):
                if not 0 <= vertex < vertex_count:
                    raise ValueError(f"vertex {vertex} outside 0..{vertex_count - 1}")
            self._heads[source].appendleft(destination)

    def neighbors(self, vertex: int) -> list[int]:
        """Destinations of edges from ``vertex``, most recently added first."""
        if not 0 <= vertex < self.vertex_count:
            raise IndexError(f"vertex {vertex} outside 0..{self.vertex_count - 1}")
        return list(self._heads[vertex])

    def format(self) -> str:
        """One line per vertex: the vertex followed by its neighbours."""
        return "\n".join(
            "".join([str(vertex), *(f" —> {n}" for n in head)])
            for vertex, head in enumerate(self._heads)
        )


class AdjacencyMatrixGraph:
    """Undirected graph stored as a 0/1 adjacency matrix."""

    def __init__(self, vertex_count: int) -> None:
        if vertex_count < 0:
            raise ValueError("vertex count must not be negative")
        self.vertex_count = vertex_count
        self._matrix = [[0] * vertex_count for _ in range(vertex_count)]

    def _check(self, *vertices: int) -> None:
        for vertex in vertices:
            if not 0 <= vertex < self.vertex_count:
                raise IndexError(f"vertex {vertex} outside 0..{self.vertex_count - 1}")

    def is_connected(self, source: int, destination: int) -> bool:
        """True if an edge joins the two vertices."""
        self._check(source, destination)
        return self._matrix[source][destination] == 1 or self._matrix[destination][source] == 1

    def insert_edge(self, source: int, destination: int) -> bool:
        """Join the two vertices; return False if they were already joined."""
        if self.is_connected(source, destination):
            return False
        self._matrix[source][destination] = 1
        self._matrix[destination][source] = 1
        return True

    def remove_edge(self, source: int, destination: int) -> bool:
        """Remove the edge between the two vertices; return False if there was none."""
        if not self.is_connected(source, destination):
            return False
        self._matrix[source][destination] = 0
        self._matrix[destination][source] = 0
        return True

    def edges(self) -> list[tuple[int, int]]:
        """Every edge once, as ``(lower, higher)`` pairs in ascending order."""
        return [
            (i, j)
            for i in range(self.vertex_count)
            for j in range(i + 1, self.vertex_count)
            if self._matrix[i][j] == 1 and self._matrix[j][i] == 1
        ]

    def format(self) -> str:
        """The matrix, one space-separated row per line."""
        return "\n".join(" ".join(str(cell) for cell in row) for row in self._matrix)

    def _neighbors(self, vertex: int) -> Iterator[int]:
        return (i for i, linked in enumerate(self._matrix[vertex]) if linked == 1)

    def dfs(self, start: int) -> list[int]:
        """Depth-first order from ``start``, trying neighbours in ascending order."""
        self._check(start)
        visited = {start}
        traversal = [start]
        stack = [self._neighbors(start)]
        while stack:
            for neighbor in stack[-1]:
                if neighbor not in visited:
                    visited.add(neighbor)
                    traversal.append(neighbor)
                    stack.append(self._neighbors(neighbor))
                    break
            else:
                stack.pop()
        return traversal

    def bfs(self, start: int) -> list[int]:
        """Breadth-first order from ``start``; empty if ``start`` has no neighbours."""
        self._check(start)
        if next(self._neighbors(start), None) is None:
            return []
        visited = {start}
        traversal = [start]
        pending = deque([start])
        while pending:
            vertex = pending.popleft()
            for neighbor in self._neighbors(vertex):
                if neighbor not in visited:
                    visited.add(neighbor)
                    traversal.append(neighbor)
                    pending.append(neighbor)
        return traversal