import math

import pytest
from hypothesis import given
from hypothesis import strategies as st

from dsakit.shortest_paths import (
    Edge,
    NegativeCycleError,
    bellman_ford,
    bfs,
    connect_directed,
    connect_undirected,
    dfs,
    dijkstra,
    kruskal,
    paths_from,
    prim,
    unweighted_shortest_path,
)

SOURCE_EDGES = [(0, 1, 4), (0, 2, 1), (2, 1, 2), (2, 3, 4), (3, 4, 4), (1, 4, 4)]


def _source_graph():
    adjacency = [[] for _ in range(10)]
    weight = [[0] * 5 for _ in range(5)]
    for u, v, w in SOURCE_EDGES:
        connect_directed(adjacency, u, v, 5)
        weight[u][v] = weight[v][u] = w
    return adjacency, weight


def test_connect_directed_rejects_duplicate():
    adjacency = [[] for _ in range(3)]
    assert connect_directed(adjacency, 0, 1, 3) is True
    assert connect_directed(adjacency, 0, 1, 3) is False
    assert adjacency[0] == [1]
    assert adjacency[1] == []


def test_connect_undirected_links_both_ways():
    adjacency = [[] for _ in range(3)]
    assert connect_undirected(adjacency, 0, 2, 3) is True
    assert connect_undirected(adjacency, 2, 0, 3) is False
    assert adjacency[0] == [2]
    assert adjacency[2] == [0]


@pytest.mark.parametrize("connect", [connect_directed, connect_undirected])
@pytest.mark.parametrize("start,end", [(2, 2), (-1, 0), (0, 6), (6, 0)])
def test_connect_rejects_invalid(connect, start, end):
    adjacency = [[] for _ in range(10)]
    with pytest.raises(ValueError):
        connect(adjacency, start, end, 5)


def test_bfs_and_dfs_visit_every_reachable_vertex_once():
    adjacency, _ = _source_graph()
    for order in (bfs(adjacency, 0), dfs(adjacency, 0)):
        assert order[0] == 0
        assert sorted(order) == [0, 1, 2, 3, 4]


def test_search_from_isolated_vertex():
    adjacency, _ = _source_graph()
    assert bfs(adjacency, 7) == [7]
    assert dfs(adjacency, 7) == [7]


def test_bfs_order_follows_distance():
    adjacency, _ = _source_graph()
    distance, _ = unweighted_shortest_path(adjacency, 0, 5)
    levels = [distance[v] for v in bfs(adjacency, 0)]
    assert levels == sorted(levels)


def test_unweighted_predecessors_are_one_step_closer():
    adjacency, _ = _source_graph()
    distance, path = unweighted_shortest_path(adjacency, 0, 5)
    assert distance[0] == 0
    assert path[0] == 0
    for vertex in range(1, 5):
        assert vertex in adjacency[path[vertex]]
        assert distance[vertex] == distance[path[vertex]] + 1


def test_unweighted_unreachable():
    adjacency, _ = _source_graph()
    distance, path = unweighted_shortest_path(adjacency, 4, 5)
    assert distance[0] == -1
    assert path[0] is None


def test_dijkstra_source_example():
    adjacency, weight = _source_graph()
    distance, _ = dijkstra(adjacency, 0, 5, weight)
    assert distance == [0, 3, 1, 5, 7]


def test_dijkstra_unreachable_is_infinite():
    adjacency, weight = _source_graph()
    distance, path = dijkstra(adjacency, 4, 5, weight)
    assert distance[0] == math.inf
    assert path[0] is None
    assert distance[4] == 0


def test_bellman_ford_matches_dijkstra_on_example():
    adjacency, weight = _source_graph()
    assert bellman_ford(adjacency, 0, 5, weight)[0] == dijkstra(adjacency, 0, 5, weight)[0]


def test_bellman_ford_handles_negative_edge():
    adjacency = [[1, 2], [], [1]]
    weight = [[0, 5, 2], [0, 0, 0], [0, -4, 0]]
    distance, path = bellman_ford(adjacency, 0, 3, weight)
    assert distance[1] == -2
    assert path[1] == 2


def test_bellman_ford_detects_negative_cycle():
    adjacency = [[1], [0]]
    weight = [[0, -1], [-1, 0]]
    with pytest.raises(NegativeCycleError):
        bellman_ford(adjacency, 0, 2, weight)


def test_paths_from_follow_edges():
    adjacency, weight = _source_graph()
    _, path = dijkstra(adjacency, 0, 5, weight)
    routes = paths_from(path, 0)
    for vertex, route in enumerate(routes):
        assert route[0] == 0
        assert route[-1] == vertex
        for a, b in zip(route, route[1:]):
            assert b in adjacency[a]


def test_paths_from_simple_chain():
    assert paths_from([0, 0, 1], 0) == [[0], [0, 1], [0, 1, 2]]


def test_paths_from_unreached_is_none():
    assert paths_from([0, None], 0)[1] is None


def test_paths_from_broken_chain():
    with pytest.raises(ValueError):
        paths_from([None, 1], 0)


def test_prim_tree_uses_graph_edges():
    adjacency, weight = _source_graph()
    distance, path = prim(adjacency, 0, 5, weight)
    for vertex in range(1, 5):
        assert vertex in adjacency[path[vertex]]
        assert distance[vertex] == weight[path[vertex]][vertex]


def test_kruskal_edges_are_sorted_and_span():
    adjacency, weight = _source_graph()
    chosen = kruskal(adjacency, 5, weight)
    assert len(chosen) == 4
    weights = [edge.weight for edge in chosen]
    assert weights == sorted(weights)
    assert all(isinstance(edge, Edge) and edge.weight == weight[edge.src][edge.dest] for edge in chosen)


@st.composite
def directed_graphs(draw):
    n = draw(st.integers(2, 6))
    triples = draw(
        st.lists(st.tuples(st.integers(0, n - 1), st.integers(0, n - 1), st.integers(0, 20)), max_size=15)
    )
    adjacency = [[] for _ in range(n)]
    weight = [[0] * n for _ in range(n)]
    for u, v, w in triples:
        if u != v and connect_directed(adjacency, u, v, n):
            weight[u][v] = w
    return n, adjacency, weight


@st.composite
def connected_undirected_graphs(draw):
    n = draw(st.integers(2, 6))
    adjacency = [[] for _ in range(n)]
    weight = [[0] * n for _ in range(n)]
    chain = [(i, i + 1, draw(st.integers(1, 20))) for i in range(n - 1)]
    extra = draw(
        st.lists(st.tuples(st.integers(0, n - 1), st.integers(0, n - 1), st.integers(1, 20)), max_size=10)
    )
    for u, v, w in chain + extra:
        if u != v and connect_undirected(adjacency, u, v, n):
            weight[u][v] = weight[v][u] = w
    return n, adjacency, weight


@given(directed_graphs())
def test_dijkstra_agrees_with_bellman_ford(graph):
    n, adjacency, weight = graph
    assert dijkstra(adjacency, 0, n, weight)[0] == bellman_ford(adjacency, 0, n, weight)[0]


@given(connected_undirected_graphs())
def test_prim_and_kruskal_agree_on_total_weight(graph):
    n, adjacency, weight = graph
    distance, _ = prim(adjacency, 0, n, weight)
    chosen = kruskal(adjacency, n, weight)
    assert len(chosen) == n - 1
    assert sum(distance[v] for v in range(1, n)) == sum(edge.weight for edge in chosen)