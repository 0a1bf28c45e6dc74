import math

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from cpalgo.graph import (
    NegativeCycleError,
    bellman_ford,
    bfs,
    dijkstra,
    floyd_warshall,
)


@st.composite
def weighted_graphs(draw, min_weight=0, acyclic=False):
    n = draw(st.integers(1, 6))
    edge = st.tuples(
        st.integers(0, n - 1), st.integers(0, n - 1), st.integers(min_weight, 20)
    )
    edges = draw(st.lists(edge, max_size=15))
    if acyclic:
        edges = [(u, v, w) for u, v, w in edges if u < v]
    return n, edges


def adjacency(n, edges):
    graph = [[] for _ in range(n)]
    for u, v, w in edges:
        graph[u].append((v, w))
    return graph


def matrix(n, edges):
    dist = [[math.inf] * n for _ in range(n)]
    for i in range(n):
        dist[i][i] = 0
    for u, v, w in edges:
        if u != v and w < dist[u][v]:
            dist[u][v] = w
    return dist


def test_bfs_on_chain_with_isolated_node():
    graph = [[1], [2], [], []]
    assert bfs(graph, 0) == [0, 1, 2, None]


@given(weighted_graphs())
def test_bfs_distances_are_consistent(case):
    n, edges = case
    graph = [[v for v, _ in row] for row in adjacency(n, edges)]
    dist = bfs(graph, 0)
    assert dist[0] == 0
    for u, row in enumerate(graph):
        if dist[u] is None:
            continue
        for v in row:
            assert dist[v] is not None
            assert dist[v] <= dist[u] + 1


def test_bfs_rejects_bad_start():
    with pytest.raises(IndexError):
        bfs([[]], 3)


def test_dijkstra_unreachable_is_infinite():
    graph = [[(1, 4)], [], []]
    dist = dijkstra(graph, 0)
    assert dist[0] == 0
    assert dist[2] == math.inf


@settings(max_examples=150)
@given(weighted_graphs())
def test_shortest_path_algorithms_agree(case):
    n, edges = case
    by_dijkstra = dijkstra(adjacency(n, edges), 0)
    by_bellman = bellman_ford(n, edges, 0)
    by_floyd = floyd_warshall(matrix(n, edges))[0]
    assert by_dijkstra == by_bellman == by_floyd


@settings(max_examples=150)
@given(weighted_graphs(min_weight=-10, acyclic=True))
def test_bellman_ford_matches_floyd_with_negative_edges(case):
    n, edges = case
    result = floyd_warshall(matrix(n, edges))
    for start in range(n):
        assert bellman_ford(n, edges, start) == result[start]


def test_bellman_ford_detects_reachable_negative_cycle():
    edges = [(0, 1, 1), (1, 2, -3), (2, 1, 1)]
    with pytest.raises(NegativeCycleError):
        bellman_ford(3, edges, 0)


def test_bellman_ford_ignores_unreachable_negative_cycle():
    edges = [(1, 2, -3), (2, 1, 1)]
    dist = bellman_ford(3, edges, 0)
    assert dist[0] == 0
    assert dist[1] == math.inf and dist[2] == math.inf


def test_floyd_warshall_marks_negative_cycle_on_diagonal():
    edges = [(0, 1, 1), (1, 2, -3), (2, 1, 1)]
    result = floyd_warshall(matrix(3, edges))
    assert result[1][1] < 0
    assert result[2][2] < 0


def test_floyd_warshall_does_not_modify_input():
    original = matrix(3, [(0, 1, 2), (1, 2, 2)])
    snapshot = [list(row) for row in original]
    result = floyd_warshall(original)
    assert original == snapshot
    assert result[0][2] == result[0][1] + result[1][2]


def test_floyd_warshall_rejects_ragged_matrix():
    with pytest.raises(ValueError):
        floyd_warshall([[0, 1], [0]])