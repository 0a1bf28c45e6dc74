from itertools import accumulate, combinations

import pytest
from hypothesis import given, strategies as st

from cpalgo.data_structures import (
    Fenwick,
    SegmentTree,
    has_two_sum,
    min_len_subarray_sum_at_least_k,
    sliding_window_min,
)

small_ints = st.integers(-1000, 1000)


@given(st.lists(small_ints, min_size=1, max_size=50))
def test_fenwick_prefix_sums_match_running_totals(values):
    tree = Fenwick(len(values))
    for i, v in enumerate(values):
        tree.add(i, v)
    assert [tree.prefix_sum(i) for i in range(len(values))] == list(accumulate(values))


@given(st.data())
def test_fenwick_range_sum_matches_slice(data):
    values = data.draw(st.lists(small_ints, min_size=1, max_size=40))
    left = data.draw(st.integers(0, len(values) - 1))
    right = data.draw(st.integers(left, len(values) - 1))
    tree = Fenwick(len(values))
    for i, v in enumerate(values):
        tree.add(i, v)
    assert tree.range_sum(left, right) == sum(values[left : right + 1])


def test_fenwick_add_accumulates():
    tree = Fenwick(4)
    tree.add(2, 3)
    tree.add(2, 4)
    assert tree.range_sum(2, 2) == 3 + 4
    assert tree.prefix_sum(-1) == 0


def test_fenwick_rejects_out_of_range_index():
    tree = Fenwick(3)
    with pytest.raises(IndexError):
        tree.add(3, 1)
    with pytest.raises(IndexError):
        tree.prefix_sum(3)


@given(
    st.integers(1, 30).flatmap(
        lambda n: st.tuples(
            st.just(n),
            st.lists(st.tuples(st.integers(0, n - 1), small_ints), max_size=40),
        )
    )
)
def test_segment_tree_matches_model(case):
    n, updates = case
    seg = SegmentTree(n)
    model = [0] * n
    for idx, val in updates:
        seg.update(idx, val)
        model[idx] = val
    for left in range(n + 1):
        for right in range(left, n + 1):
            assert seg.query(left, right) == sum(model[left:right])


def test_segment_tree_update_overwrites():
    seg = SegmentTree(3)
    seg.update(1, 5)
    seg.update(1, 2)
    assert seg.query(0, 3) == 2


def test_segment_tree_bounds():
    seg = SegmentTree(3)
    with pytest.raises(IndexError):
        seg.query(0, 4)
    with pytest.raises(IndexError):
        seg.update(-1, 1)


@given(st.lists(small_ints, max_size=40), st.integers(1, 10))
def test_sliding_window_min_matches_window_minimums(values, k):
    expected = [min(values[i : i + k]) for i in range(len(values) - k + 1)]
    assert sliding_window_min(values, k) == expected


def test_sliding_window_min_rejects_empty_window():
    with pytest.raises(ValueError):
        sliding_window_min([1, 2], 0)


@given(st.lists(st.integers(0, 20), max_size=25), st.integers(1, 100))
def test_min_len_subarray_is_shortest_qualifying_run(values, k):
    lengths = {
        j - i
        for i in range(len(values))
        for j in range(i + 1, len(values) + 1)
        if sum(values[i:j]) >= k
    }
    assert min_len_subarray_sum_at_least_k(values, k) == (min(lengths) if lengths else None)


@given(st.lists(st.integers(-50, 50), max_size=20), st.integers(-100, 100))
def test_has_two_sum_matches_pairs(values, target):
    original = list(values)
    expected = any(a + b == target for a, b in combinations(values, 2))
    assert has_two_sum(values, target) is expected
    assert values == original