"""Tree traversals, a subtree DP and heavy-light decomposition."""

from __future__ import annotations

from collections import deque
from collections.abc import Sequence


def tree_dfs_order(tree: Sequence[Sequence[int]], root: int = 0) -> list[int]:
    """Nodes in depth-first preorder, children visited in adjacency order."""
    order = []
    stack = [(root, -1)]
    while stack:
        u, parent = stack.pop()
        order.append(u)
        stack.extend((v, u) for v in reversed(tree[u]) if v != parent)
    return order


def tree_bfs_order(tree: Sequence[Sequence[int]], root: int = 0) -> list[int]:
    """Nodes in breadth-first order from ``root``."""
    visited = [False] * len(tree)
    visited[root] = True
    order = []
    queue = deque([root])
    while queue:
        u = queue.popleft()
        order.append(u)
        for v in tree[u]:
            if not visited[v]:
                visited[v] = True
                queue.append(v)
    return order


def tree_dp(
    tree: Sequence[Sequence[int]], values: Sequence[int], root: int = 0
) -> list[int]:
    """Best sum of a connected subtree hanging from each node.

    ``dp[u] = values[u] + sum(max(0, dp[v]))`` over the children ``v`` of ``u``.
    """
    dp = list(values)
    parent = [-1] * len(tree)
    order = []
    stack = [root]
    while stack:
        u = stack.pop()
        order.append(u)
        for v in tree[u]:
            if v != parent[u]:
                parent[v] = u
                stack.append(v)
    for u in reversed(order):
        if parent[u] != -1 and dp[u] > 0:
            dp[parent[u]] += dp[u]
    return dp


class HeavyLightDecomposition:
    """Splits a tree into heavy chains laid out contiguously by position.

    After ``build``, ``pos[u]`` is the position of node ``u``, ``end[u]`` is one
    past the last position in its subtree, and ``top[u]`` heads its chain.
    """

    def __init__(self, n: int) -> None:
        self.n = n
        self._adj: list[list[int]] = [[] for _ in range(n)]
        self._edges = 0
        self._built = False
        self.size = [0] * n
        self.pos = [0] * n
        self.end = [0] * n
        self.top = [0] * n
        self.parent = [-1] * n
        self.depth = [0] * n

    def add_edge(self, u: int, v: int) -> None:
        """Connect ``u`` and ``v``."""
        self._adj[u].append(v)
        self._adj[v].append(u)
        self._edges += 1
        self._built = False

    def build(self, root: int = 0) -> None:
        """Compute sizes, depths, heavy chains and positions from ``root``."""
        n = self.n
        if self._edges != n - 1:
            raise ValueError("edges do not form a tree")
        parent = [-1] * n
        depth = [0] * n
        seen = [False] * n
        seen[root] = True
        children: list[list[int]] = [[] for _ in range(n)]
        order = [root]
        for u in order:
            for v in self._adj[u]:
                if seen[v]:
                    continue
                seen[v] = True
                parent[v] = u
                depth[v] = depth[u] + 1
                children[u].append(v)
                order.append(v)
        if len(order) != n:
            raise ValueError("tree is not connected")

        size = [1] * n
        for u in reversed(order):
            if parent[u] != -1:
                size[parent[u]] += size[u]
        for kids in children:
            if len(kids) > 1:
                heavy = max(kids, key=size.__getitem__)
                kids.remove(heavy)
                kids.insert(0, heavy)

        pos, end, top = [0] * n, [0] * n, [0] * n
        top[root] = root
        cursor = 0
        stack = [root]
        while stack:
            u = stack.pop()
            pos[u] = cursor
            end[u] = cursor + size[u]
            cursor += 1
            for i, v in reversed(list(enumerate(children[u]))):
                top[v] = top[u] if i == 0 else v
                stack.append(v)

        self.size, self.pos, self.end, self.top = size, pos, end, top
        self.parent, self.depth = parent, depth
        self._built = True

    def query_path(self, u: int, v: int) -> list[tuple[int, int]]:
        """Half-open position ranges covering the edges on the path ``u``-``v``.

        The node at a position stands for the edge to its parent, so the
        lowest common ancestor itself is left out; the last range may be empty.
        """
        if not self._built:
            raise RuntimeError("build() must be called before querying")
        top, depth, pos, parent = self.top, self.depth, self.pos, self.parent
        ranges = []
        while top[u] != top[v]:
            if depth[top[u]] < depth[top[v]]:
                u, v = v, u
            ranges.append((pos[top[u]], pos[u] + 1))
            u = parent[top[u]]
        if depth[u] > depth[v]:
            u, v = v, u
        ranges.append((pos[u] + 1, pos[v] + 1))
        return ranges