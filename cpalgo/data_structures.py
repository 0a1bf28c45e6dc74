"""Prefix-sum trees and linear-time scans over integer arrays."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Sequence


class Fenwick:
    """Binary indexed tree over ``n`` slots: point additions and prefix sums."""

    def __init__(self, n: int) -> None:
        if n < 0:
            raise ValueError("size must be non-negative")
        self.n = n
        self._bit = [0] * (n + 1)

    def __len__(self) -> int:
        return self.n

    def add(self, idx: int, val: int) -> None:
        """Add ``val`` to slot ``idx``."""
        if not 0 <= idx < self.n:
            raise IndexError(f"index {idx} out of range for size {self.n}")
        i = idx + 1
        while i <= self.n:
            self._bit[i] += val
            i += i & -i

    def prefix_sum(self, idx: int) -> int:
        """Sum of slots ``0..idx`` inclusive; ``idx == -1`` gives 0."""
        if not -1 <= idx < self.n:
            raise IndexError(f"index {idx} out of range for size {self.n}")
        total = 0
        i = idx + 1
        while i > 0:
            total += self._bit[i]
            i -= i & -i
        return total

    def range_sum(self, left: int, right: int) -> int:
        """Sum of slots ``left..right`` inclusive."""
        return self.prefix_sum(right) - self.prefix_sum(left - 1)


class SegmentTree:
    """Iterative sum segment tree with point assignment."""

    def __init__(self, size: int) -> None:
        if size < 0:
            raise ValueError("size must be non-negative")
        self.size = size
        self._leaves = 1
        while self._leaves < size:
            self._leaves <<= 1
        self._tree = [0] * (2 * self._leaves)

    def __len__(self) -> int:
        return self.size

    def update(self, idx: int, val: int) -> None:
        """Set slot ``idx`` to ``val``."""
        if not 0 <= idx < self.size:
            raise IndexError(f"index {idx} out of range for size {self.size}")
        idx += self._leaves
        self._tree[idx] = val
        while idx > 1:
            idx >>= 1
            self._tree[idx] = self._tree[2 * idx] + self._tree[2 * idx + 1]

    def query(self, left: int, right: int) -> int:
        """Sum over the half-open range ``[left, right)``."""
        if not 0 <= left <= right <= self.size:
            raise IndexError(f"range [{left}, {right}) out of bounds for size {self.size}")
        total = 0
        left += self._leaves
        right += self._leaves
        while left < right:
            if left & 1:
                total += self._tree[left]
                left += 1
            if right & 1:
                right -= 1
                total += self._tree[right]
            left >>= 1
            right >>= 1
        return total


def sliding_window_min(values: Iterable[int], k: int) -> list[int]:
    """Minimum of every window of length ``k``, in order."""
    if k < 1:
        raise ValueError("window length must be positive")
    window: deque[tuple[int, int]] = deque()
    result = []
    for i, value in enumerate(values):
        while window and window[0][0] <= i - k:
            window.popleft()
        while window and window[-1][1] >= value:
            window.pop()
        window.append((i, value))
        if i >= k - 1:
            result.append(window[0][1])
    return result


def min_len_subarray_sum_at_least_k(values: Sequence[int], k: int) -> int | None:
    """Length of the shortest contiguous run whose sum is at least ``k``.

    Meant for non-negative values. Returns None when no run qualifies.
    """
    best: int | None = None
    total = 0
    left = 0
    for right, value in enumerate(values):
        total += value
        while left <= right and total >= k:
            length = right - left + 1
            if best is None or length < best:
                best = length
            total -= values[left]
            left += 1
    return best


def has_two_sum(values: Iterable[int], target: int) -> bool:
    """Whether two distinct elements add up to ``target``."""
    ordered = sorted(values)
    left, right = 0, len(ordered) - 1
    while left < right:
        total = ordered[left] + ordered[right]
        if total == target:
            return True
        if total < target:
            left += 1
        else:
            right -= 1
    return False