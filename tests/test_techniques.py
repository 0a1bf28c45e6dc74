from itertools import pairwise, permutations

import pytest
from hypothesis import given, settings, strategies as st

from cpalgo.techniques import (
    binary_search_exact,
    binary_search_max,
    binary_search_min,
    coordinate_compression,
    split,
    tsp,
)


@given(st.integers(-100, 100), st.integers(-100, 100), st.integers(-150, 150))
def test_binary_search_exact(lo, hi, target):
    result = binary_search_exact(lo, hi, lambda m: m - target)
    if lo <= target <= hi:
        assert result == target
    else:
        assert result is None


@given(st.integers(0, 2000))
def test_binary_search_min_finds_first_satisfying(limit):
    result = binary_search_min(0, 100, lambda m: 0 if m * m >= limit else 1)
    expected = next((m for m in range(101) if m * m >= limit), 100)
    assert result == expected


@given(st.integers(0, 2000))
def test_binary_search_max_finds_last_satisfying(limit):
    result = binary_search_max(0, 100, lambda m: 0 if m * m <= limit else -1)
    assert result == max(m for m in range(101) if m * m <= limit)


def _path_cost(cost, order):
    return sum(cost[a][b] for a, b in pairwise(order))


@settings(max_examples=40)
@given(
    st.integers(1, 6).flatmap(
        lambda n: st.lists(
            st.lists(st.integers(0, 100), min_size=n, max_size=n), min_size=n, max_size=n
        )
    )
)
def test_tsp_matches_exhaustive_search(cost):
    n = len(cost)
    best = min(_path_cost(cost, (0, *perm)) for perm in permutations(range(1, n)))
    assert tsp(cost) == best


def test_tsp_single_node_and_empty():
    assert tsp([[7]]) == 0
    with pytest.raises(ValueError):
        tsp([])


def test_coordinate_compression_example():
    assert coordinate_compression([10, -5, 10, 3]) == [2, 0, 2, 1]


@given(st.lists(st.integers(-10**9, 10**9), max_size=40))
def test_coordinate_compression_preserves_order(values):
    ranks = coordinate_compression(values)
    assert sorted(set(ranks)) == list(range(len(set(values))))
    for (a, ra), (b, rb) in pairwise(zip(values, ranks)):
        assert (a < b) == (ra < rb)
        assert (a == b) == (ra == rb)


def test_split_whitespace():
    assert split("  a b\tc \n") == ["a", "b", "c"]
    assert split("") == []


def test_split_delimiter():
    assert split("a,b,", ",") == ["a", "b"]
    assert split("a,,b", ",") == ["a", "", "b"]
    assert split(",a", ",") == ["", "a"]
    assert split("", ",") == []


@given(st.lists(st.text(alphabet="xyz ", max_size=5), min_size=1, max_size=8))
def test_split_delimiter_round_trip(fields):
    text = ";".join(fields)
    expected = fields[:-1] if fields[-1] == "" else fields
    assert split(text, ";") == expected