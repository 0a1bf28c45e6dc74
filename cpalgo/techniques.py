"""Binary search templates, bitmask TSP, coordinate compression, splitting."""

from __future__ import annotations

import math
from collections.abc import Callable, Iterable, Sequence


def binary_search_exact(lo: int, hi: int, check: Callable[[int], int]) -> int | None:
    """Find ``mid`` in ``[lo, hi]`` with ``check(mid) == 0``.

    ``check`` is negative when ``mid`` is too small and positive when too
    large. Returns None when no such value exists.
    """
    while lo <= hi:
        mid = (lo + hi) // 2
        res = check(mid)
        if res == 0:
            return mid
        if res < 0:
            lo = mid + 1
        else:
            hi = mid - 1
    return None


def binary_search_min(lo: int, hi: int, check: Callable[[int], int]) -> int:
    """Smallest value in ``[lo, hi]`` for which ``check`` is not positive."""
    while lo < hi:
        mid = (lo + hi) // 2
        if check(mid) <= 0:
            hi = mid
        else:
            lo = mid + 1
    return lo


def binary_search_max(lo: int, hi: int, check: Callable[[int], int]) -> int:
    """Largest value in ``[lo, hi]`` for which ``check`` is not negative."""
    while lo < hi:
        mid = (lo + hi + 1) // 2
        if check(mid) >= 0:
            lo = mid
        else:
            hi = mid - 1
    return lo


def tsp(cost: Sequence[Sequence[float]]) -> float:
    """Cheapest path from node 0 that visits every node once (no return leg)."""
    n = len(cost)
    if n == 0:
        raise ValueError("cost matrix is empty")
    full = 1 << n
    dp = [[math.inf] * n for _ in range(full)]
    dp[1][0] = 0
    for mask in range(1, full):
        for u, base in enumerate(dp[mask]):
            if not mask >> u & 1 or base == math.inf:
                continue
            for v, step in enumerate(cost[u]):
                if mask >> v & 1:
                    continue
                nxt = mask | 1 << v
                if base + step < dp[nxt][v]:
                    dp[nxt][v] = base + step
    return min(dp[full - 1])


def coordinate_compression(values: Iterable[int]) -> list[int]:
    """Replace each value by its rank among the distinct values."""
    items = list(values)
    ranks = {value: rank for rank, value in enumerate(sorted(set(items)))}
    return [ranks[value] for value in items]


def split(text: str, delim: str | None = None) -> list[str]:
    """Split on whitespace, or on ``delim`` dropping one trailing empty field."""
    if delim is None:
        return text.split()
    parts = text.split(delim)
    if parts[-1] == "":
        parts.pop()
    return parts