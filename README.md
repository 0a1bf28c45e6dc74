# cpalgo

A small library of classic algorithms and data structures of the kind used in
programming contests, written as ordinary Python functions and classes that
work on lists, tuples, ints and floats. It has no dependencies outside the
standard library.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Modules

### `cpalgo.data_structures`

- `Fenwick(n)` – binary indexed tree: `add(idx, val)`, `prefix_sum(idx)`
  (sum of slots `0..idx`, with `prefix_sum(-1) == 0`) and
  `range_sum(left, right)` (inclusive). Out-of-range indices raise `IndexError`.
- `SegmentTree(size)` – sum tree with point assignment: `update(idx, val)` sets
  a slot, `query(left, right)` sums the half-open range `[left, right)`.
- `sliding_window_min(values, k)` – minimum of every window of length `k`.
- `min_len_subarray_sum_at_least_k(values, k)` – length of the shortest
  contiguous run with sum at least `k` (for non-negative values), or `None`.
- `has_two_sum(values, target)` – whether two distinct elements add up to
  `target`.

### `cpalgo.number_theory`

- `gcd`, `lcm`, `mod_pow(base, exp, mod)`.
- `ext_gcd(a, b)` returns `(g, x, y)` with `a*x + b*y == g`.
- `mod_inv(a, m)` raises `ValueError` when no inverse exists.
- `Binomial(limit=200_005, mod=1_000_000_007)` builds factorial tables;
  `ncr(n, r)` gives `C(n, r) % mod`, 0 when `r` is out of range, and raises
  `ValueError` when `n` is beyond the table.
- `sieve(n)` – list of primality flags for `0..n`.
- `is_prime(n)` – trial division; `miller_rabin(n)` – test with the fixed
  witnesses 2 to 23.
- `pollard_rho(n, rng=None)` – a non-trivial divisor of a composite `n`; an
  optional `random.Random` makes it reproducible. Raises `ValueError` if `n` is
  not composite.

### `cpalgo.geometry`

Points are `Point(x, y)` named tuples; any two-element sequence is accepted.

- `dot`, `cross`, `norm` (squared length), `dist2`, `dist`.
- `ccw(a, b, c)` – 1 for a left turn, -1 for a right turn, 0 when collinear
  (with tolerance `EPS = 1e-9`).
- `is_on_line(a, b, p)` – whether `p` lies on segment `ab`.
- `is_cross(s1, e1, s2, e2)` – -1 for a proper crossing, 1 for touching or
  overlapping, 0 for no contact.
- `where_cross(s1, e1, s2, e2)` – intersection of the two lines, or `None`
  when they are parallel.
- `Polygon(dots)` with `build_convex_hull()` (replaces the vertices by their
  counter-clockwise hull), `point_in_polygon(p)` and `point_in_convex(p)`
  (1 inside, 0 outside, -1 on the boundary), `contain(other)`,
  `rotating_calipers()` (diameter of a convex polygon), `area()` and
  `make_lines()`.

### `cpalgo.techniques`

- `binary_search_exact(lo, hi, check)` – `check` returns negative when too
  small, positive when too large and 0 on a hit; returns the hit or `None`.
- `binary_search_min(lo, hi, check)` – smallest value where `check <= 0`.
- `binary_search_max(lo, hi, check)` – largest value where `check >= 0`.
- `tsp(cost)` – cheapest path from node 0 visiting every node once, without a
  return leg; bitmask DP over a cost matrix.
- `coordinate_compression(values)` – each value replaced by its rank among
  the distinct values.
- `split(text, delim=None)` – split on whitespace, or on `delim` dropping one
  trailing empty field.

### `cpalgo.graph`

- `bfs(graph, start)` – edge counts, `None` for unreachable nodes.
- `dijkstra(graph, start)` – `graph[u]` holds `(v, weight)` pairs;
  unreachable nodes get `math.inf`.
- `bellman_ford(n, edges, start)` – `edges` holds `(u, v, weight)` triples;
  raises `NegativeCycleError` when a negative cycle is reachable.
- `floyd_warshall(dist)` – all-pairs distances from a square matrix using
  `math.inf` for missing edges; returns a new matrix.

### `cpalgo.flow`

- `edmonds_karp(n, source, sink, cap, adj)` returns a `FlowResult(value, flow)`
  with the antisymmetric flow matrix.
- `Dinic(n)` with `add_edge(u, v, cap)` and `max_flow(s, t)`.
- `min_cut(n, s, cap, flow, adj)` – start nodes of the edges crossing the
  minimum cut, once per cut edge, after a maximum flow has been computed.

### `cpalgo.trees`

- `tree_dfs_order(tree, root=0)` and `tree_bfs_order(tree, root=0)`.
- `tree_dp(tree, values, root=0)` – for each node, `values[u]` plus the
  positive sums of its children's results.
- `HeavyLightDecomposition(n)` with `add_edge(u, v)`, `build(root=0)` (raises
  `ValueError` if the edges do not form a connected tree) and
  `query_path(u, v)`, which returns half-open position ranges covering the
  edges of the path. After `build`, the attributes `pos`, `end`, `top`,
  `parent`, `depth` and `size` describe the layout.

## Examples

```python
from cpalgo.data_structures import Fenwick

fw = Fenwick(5)
fw.add(0, 3)
fw.add(2, 4)
fw.range_sum(0, 2)   # 7
```

```python
from cpalgo.number_theory import Binomial, mod_inv, miller_rabin

Binomial().ncr(5, 2)         # 10
mod_inv(3, 11)               # 4
miller_rabin(1_000_000_007)  # True
```

```python
from cpalgo.graph import dijkstra

graph = [[(1, 4), (2, 1)], [], [(1, 2)]]
dijkstra(graph, 0)   # [0, 3, 1]
```

```python
from cpalgo.flow import Dinic

net = Dinic(4)
net.add_edge(0, 1, 3)
net.add_edge(1, 3, 2)
net.add_edge(0, 2, 2)
net.add_edge(2, 3, 3)
net.max_flow(0, 3)   # 4
```

```python
from cpalgo.geometry import Polygon

square = Polygon([(0, 0), (1, 0), (1, 1), (0, 1)])
square.area()        # 1.0
```

## What it does not do

This is a library only. It has no command-line program and does not read
problem input from standard input or print answers; you call the functions
from your own code.