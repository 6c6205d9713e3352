"""Graph search, shortest paths and minimum spanning trees over adjacency lists.

Graphs are sequences of neighbour lists; edge weights come from a square
matrix ``weight[u][v]``. Predecessor lists hold ``None`` for unreached
vertices and the start vertex for itself.
"""

from __future__ import annotations

import heapq
import math
from collections import deque
from collections.abc import Sequence
from dataclasses import dataclass

from dsakit.disjoint_set import QuickUnion

__all__ = [
    "Edge",
    "NegativeCycleError",
    "connect_directed",
    "connect_undirected",
    "bfs",
    "dfs",
    "unweighted_shortest_path",
    "dijkstra",
    "bellman_ford",
    "prim",
    "kruskal",
    "paths_from",
]

Adjacency = Sequence[list[int]]
Weights = Sequence[Sequence[float]]


@dataclass(frozen=True)
class Edge:
    """A weighted directed edge."""

    weight: float
    src: int
    dest: int


class NegativeCycleError(Exception):
    """Raised when a negative-weight cycle is reachable from the start."""


def _check_endpoints(start: int, end: int, vertex_count: int) -> None:
    if start < 0 or start > vertex_count or end < 0 or end > vertex_count or start == end:
        raise ValueError(f"cannot connect {start} and {end} in a graph of {vertex_count} vertices")


def connect_directed(adjacency: Adjacency, start: int, end: int, vertex_count: int) -> bool:
    """Add the edge ``start -> end``; return False if it already exists."""
    _check_endpoints(start, end, vertex_count)
    if end in adjacency[start]:
        return False
    adjacency[start].append(end)
    return True


def connect_undirected(adjacency: Adjacency, start: int, end: int, vertex_count: int) -> bool:
    """Add edges both ways; return False if both directions already exist."""
    _check_endpoints(start, end, vertex_count)
    if end in adjacency[start] and start in adjacency[end]:
        return False
    adjacency[start].append(end)
    adjacency[end].append(start)
    return True


def bfs(adjacency: Adjacency, start: int) -> list[int]:
    """Breadth-first order from ``start``."""
    traversal = [start]
    visited = {start}
    pending = deque([start])
    while pending:
        vertex = pending.popleft()
        for neighbor in adjacency[vertex]:
            if neighbor not in visited:
                visited.add(neighbor)
                traversal.append(neighbor)
                pending.append(neighbor)
    return traversal


def dfs(adjacency: Adjacency, start: int) -> list[int]:
    """Depth-first order from ``start`` using a stack; later neighbours come out first."""
    traversal: list[int] = []
    visited = {start}
    stack = [start]
    while stack:
        vertex = stack.pop()
        traversal.append(vertex)
        for neighbor in adjacency[vertex]:
            if neighbor not in visited:
                visited.add(neighbor)
                stack.append(neighbor)
    return traversal


def unweighted_shortest_path(
    adjacency: Adjacency, start: int, vertex_count: int
) -> tuple[list[int], list[int | None]]:
    """Edge counts from ``start`` (-1 if unreachable) and predecessors, by BFS."""
    distance = [-1] * vertex_count
    path: list[int | None] = [None] * vertex_count
    distance[start] = 0
    path[start] = start
    pending = deque([start])
    while pending:
        vertex = pending.popleft()
        for neighbor in adjacency[vertex]:
            if distance[neighbor] == -1:
                distance[neighbor] = distance[vertex] + 1
                path[neighbor] = vertex
                pending.append(neighbor)
    return distance, path


def dijkstra(
    adjacency: Adjacency, start: int, vertex_count: int, weight: Weights
) -> tuple[list[float], list[int | None]]:
    """Shortest distances (inf if unreachable) and predecessors for non-negative weights."""
    distance: list[float] = [math.inf] * vertex_count
    path: list[int | None] = [None] * vertex_count
    distance[start] = 0
    path[start] = start
    heap: list[tuple[float, int]] = [(0, start)]
    while heap:
        reached, vertex = heapq.heappop(heap)
        if reached > distance[vertex]:
            continue
        for neighbor in adjacency[vertex]:
            candidate = distance[vertex] + weight[vertex][neighbor]
            if candidate < distance[neighbor]:
                distance[neighbor] = candidate
                path[neighbor] = vertex
                heapq.heappush(heap, (candidate, neighbor))
    return distance, path


def bellman_ford(
    adjacency: Adjacency, start: int, vertex_count: int, weight: Weights
) -> tuple[list[float], list[int | None]]:
    """Shortest distances and predecessors allowing negative weights.

    Raise NegativeCycleError if a reachable negative cycle exists.
    """
    distance: list[float] = [math.inf] * vertex_count
    path: list[int | None] = [None] * vertex_count
    distance[start] = 0
    path[start] = start
    for _ in range(vertex_count - 1):
        for vertex in range(vertex_count):
            if distance[vertex] == math.inf:
                continue
            for neighbor in adjacency[vertex]:
                candidate = distance[vertex] + weight[vertex][neighbor]
                if candidate < distance[neighbor]:
                    distance[neighbor] = candidate
                    path[neighbor] = vertex
    for vertex in range(vertex_count):
        if distance[vertex] == math.inf:
            continue
        for neighbor in adjacency[vertex]:
            if distance[vertex] + weight[vertex][neighbor] < distance[neighbor]:
                raise NegativeCycleError("negative cycle reachable from the start")
    return distance, path


def prim(
    adjacency: Adjacency, start: int, vertex_count: int, weight: Weights
) -> tuple[list[float], list[int | None]]:
    """Minimum spanning tree from ``start``: each vertex's joining weight and its tree parent."""
    distance: list[float] = [math.inf] * vertex_count
    path: list[int | None] = [None] * vertex_count
    in_tree = [False] * vertex_count
    distance[start] = 0
    path[start] = start
    heap: list[tuple[float, int]] = [(0, start)]
    while heap:
        _, vertex = heapq.heappop(heap)
        if in_tree[vertex]:
            continue
        in_tree[vertex] = True
        for neighbor in adjacency[vertex]:
            if not in_tree[neighbor] and weight[vertex][neighbor] < distance[neighbor]:
                distance[neighbor] = weight[vertex][neighbor]
                path[neighbor] = vertex
                heapq.heappush(heap, (distance[neighbor], neighbor))
    return distance, path


def kruskal(adjacency: Adjacency, vertex_count: int, weight: Weights) -> list[Edge]:
    """Edges of a minimum spanning forest, in the order they were chosen."""
    candidates = sorted(
        (
            Edge(weight[vertex][neighbor], vertex, neighbor)
            for vertex in range(vertex_count)
            for neighbor in adjacency[vertex]
        ),
        key=lambda edge: edge.weight,
    )
    forest = QuickUnion(vertex_count)
    chosen: list[Edge] = []
    for edge in candidates:
        if not forest.is_connected(edge.src, edge.dest):
            forest.connect(edge.src, edge.dest)
            chosen.append(edge)
    return chosen


def paths_from(path: Sequence[int | None], start: int) -> list[list[int] | None]:
    """For each vertex, the route from ``start`` given by predecessors, or None if unreached."""
    routes: list[list[int] | None] = []
    for vertex, predecessor in enumerate(path):
        if predecessor is None and vertex != start:
            routes.append(None)
            continue
        route = [vertex]
        current = vertex
        while current != start:
            following = path[current]
            if following is None or len(route) > len(path):
                raise ValueError(f"predecessor chain from {vertex} does not reach {start}")
            current = following
            route.append(current)
        routes.append(route[::-1])
    return routes