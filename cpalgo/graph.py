"""Shortest paths: BFS, Dijkstra, Bellman-Ford and Floyd-Warshall."""

from __future__ import annotations

import heapq
import math
from collections import deque
from collections.abc import Iterable, Sequence


class NegativeCycleError(ValueError):
    """Raised when a negative cycle can be reached from the start node."""


def _check_node(node: int, n: int) -> None:
    if not 0 <= node < n:
        raise IndexError(f"node {node} out of range for {n} nodes")


def bfs(graph: Sequence[Iterable[int]], start: int) -> list[int | None]:
    """Edge counts from ``start`` in an unweighted graph; None when unreachable."""
    _check_node(start, len(graph))
    dist: list[int | None] = [None] * len(graph)
    dist[start] = 0
    queue = deque([start])
    while queue:
        cur = queue.popleft()
        step = dist[cur] + 1
        for nxt in graph[cur]:
            if dist[nxt] is None:
                dist[nxt] = step
                queue.append(nxt)
    return dist


def dijkstra(graph: Sequence[Iterable[tuple[int, float]]], start: int) -> list[float]:
    """Shortest distances from ``start``; ``graph[u]`` holds ``(v, weight)`` pairs.

    Weights must be non-negative. Unreachable nodes get ``math.inf``.
    """
    _check_node(start, len(graph))
    dist = [math.inf] * len(graph)
    dist[start] = 0
    heap: list[tuple[float, int]] = [(0, start)]
    while heap:
        cost, cur = heapq.heappop(heap)
        if dist[cur] < cost:
            continue
        for nxt, weight in graph[cur]:
            candidate = cost + weight
            if candidate < dist[nxt]:
                dist[nxt] = candidate
                heapq.heappush(heap, (candidate, nxt))
    return dist


def bellman_ford(
    n: int, edges: Iterable[tuple[int, int, float]], start: int
) -> list[float]:
    """Shortest distances from ``start`` allowing negative edge weights.

    ``edges`` holds ``(from, to, weight)`` triples. Raises NegativeCycleError
    when a negative cycle is reachable from ``start``.
    """
    _check_node(start, n)
    edge_list = list(edges)
    dist = [math.inf] * n
    dist[start] = 0
    for _ in range(n - 1):
        changed = False
        for u, v, w in edge_list:
            if dist[u] == math.inf:
                continue
            if dist[u] + w < dist[v]:
                dist[v] = dist[u] + w
                changed = True
        if not changed:
            break
    for u, v, w in edge_list:
        if dist[u] != math.inf and dist[u] + w < dist[v]:
            raise NegativeCycleError(f"negative cycle reachable from node {start}")
    return dist


def floyd_warshall(dist: Sequence[Sequence[float]]) -> list[list[float]]:
    """All-pairs shortest distances from an adjacency matrix.

    Missing edges are ``math.inf`` and the diagonal is normally 0. A negative
    entry on the diagonal of the result marks a node on a negative cycle.
    """
    n = len(dist)
    result = [list(row) for row in dist]
    if any(len(row) != n for row in result):
        raise ValueError("distance matrix must be square")
    for k in range(n):
        row_k = result[k]
        for row_i in result:
            via = row_i[k]
            if via == math.inf:
                continue
            for j, step in enumerate(row_k):
                if step == math.inf:
                    continue
                if via + step < row_i[j]:
                    row_i[j] = via + step
    return result