"""Maximum flow by Edmonds-Karp and Dinic, and the minimum cut after it."""

from __future__ import annotations

from collections import deque
from collections.abc import Sequence
from dataclasses import dataclass
from typing import NamedTuple


class FlowResult(NamedTuple):
    """Value of a maximum flow and the flow matrix that achieves it."""

    value: int
    flow: list[list[int]]


def edmonds_karp(
    n: int,
    source: int,
    sink: int,
    cap: Sequence[Sequence[int]],
    adj: Sequence[Sequence[int]],
) -> FlowResult:
    """Maximum flow with BFS augmenting paths.

    ``cap[u][v]`` is the capacity of ``u -> v``; ``adj[u]`` lists the neighbours
    of ``u`` in both directions so that residual arcs are visited. The flow
    matrix is antisymmetric: ``flow[v][u] == -flow[u][v]``.
    """
    if source == sink:
        raise ValueError("source and sink must differ")
    flow = [[0] * n for _ in range(n)]
    total = 0
    while True:
        parent = [-1] * n
        parent[source] = source
        queue = deque([source])
        while queue and parent[sink] == -1:
            cur = queue.popleft()
            for nxt in adj[cur]:
                if parent[nxt] == -1 and cap[cur][nxt] - flow[cur][nxt] > 0:
                    parent[nxt] = cur
                    queue.append(nxt)
                    if nxt == sink:
                        break
        if parent[sink] == -1:
            break
        path = []
        node = sink
        while node != source:
            path.append((parent[node], node))
            node = parent[node]
        aug = min(cap[u][v] - flow[u][v] for u, v in path)
        for u, v in path:
            flow[u][v] += aug
            flow[v][u] -= aug
        total += aug
    return FlowResult(total, flow)


@dataclass(slots=True)
class _Edge:
    to: int
    rev: int
    cap: int


class Dinic:
    """Maximum flow on a level graph with blocking flows."""

    def __init__(self, n: int) -> None:
        self.n = n
        self._graph: list[list[_Edge]] = [[] for _ in range(n)]
        self._level = [-1] * n
        self._ptr = [0] * n

    def add_edge(self, u: int, v: int, cap: int) -> None:
        """Add a directed edge ``u -> v`` and its zero-capacity reverse."""
        self._graph[u].append(_Edge(v, len(self._graph[v]), cap))
        self._graph[v].append(_Edge(u, len(self._graph[u]) - 1, 0))

    def _bfs(self, s: int, t: int) -> bool:
        level = self._level
        level[:] = [-1] * self.n
        level[s] = 0
        queue = deque([s])
        while queue:
            u = queue.popleft()
            for e in self._graph[u]:
                if e.cap and level[e.to] == -1:
                    level[e.to] = level[u] + 1
                    queue.append(e.to)
        return level[t] != -1

    def _augment(self, s: int, t: int) -> int:
        graph, level, ptr = self._graph, self._level, self._ptr
        path: list[tuple[int, int]] = []
        u = s
        while True:
            if u == t:
                pushed = min(graph[v][i].cap for v, i in path)
                for v, i in path:
                    edge = graph[v][i]
                    edge.cap -= pushed
                    graph[edge.to][edge.rev].cap += pushed
                return pushed
            edges = graph[u]
            while ptr[u] < len(edges):
                edge = edges[ptr[u]]
                if edge.cap and level[edge.to] == level[u] + 1:
                    path.append((u, ptr[u]))
                    u = edge.to
                    break
                ptr[u] += 1
            else:
                if not path:
                    return 0
                u, _ = path.pop()
                ptr[u] += 1

    def max_flow(self, s: int, t: int) -> int:
        """Push as much flow from ``s`` to ``t`` as the residual graph allows."""
        if s == t:
            raise ValueError("source and sink must differ")
        total = 0
        while self._bfs(s, t):
            self._ptr[:] = [0] * self.n
            while pushed := self._augment(s, t):
                total += pushed
        return total


def min_cut(
    n: int,
    s: int,
    cap: Sequence[Sequence[int]],
    flow: Sequence[Sequence[int]],
    adj: Sequence[Sequence[int]],
) -> list[int]:
    """Start nodes of the edges crossing the minimum cut after a maximum flow.

    A node appears once for each of its cut edges, in node order.
    """
    visited = [False] * n
    visited[s] = True
    queue = deque([s])
    while queue:
        u = queue.popleft()
        for v in adj[u]:
            if not visited[v] and cap[u][v] - flow[u][v] > 0:
                visited[v] = True
                queue.append(v)
    return [
        u
        for u in range(n)
        if visited[u]
        for v in adj[u]
        if not visited[v] and cap[u][v] > 0
    ]