# contestkit

Classic algorithms and data structures from competitive programming, written
in plain Python with no third-party dependencies. Every function takes its
input as ordinary Python values (lists, tuples, integers, strings) and returns
its result; invalid input raises an exception (mostly `ValueError`, or
`IndexError` for out-of-range queries).

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

| Module | Contents |
| --- | --- |
| `contestkit.sparse_table` | `SecondMinSparseTable`: second smallest value on a static range |
| `contestkit.treap` | `Treap` (multiset of integer keys with range sums); `execute_commands` for `("+", key)` / `("?", bound)` streams |
| `contestkit.fenwick` | `AlternatingFenwickTree`: point updates and sums `a[l] - a[l+1] + a[l+2] - ...`; `execute_commands` |
| `contestkit.dsu` | `DisjointSetUnion` with per-set weights; `merge_tables` |
| `contestkit.matrix_power` | `ModInt`, `SquareMatrix`, `identity_matrix`, `fibonacci_mod`, `grasshopper_ways`, `count_walks` |
| `contestkit.convex_hull` | `Line`, `cross_point`, `ConvexHullTrick`, `min_jump_cost`, `min_sum_squared_lengths` |
| `contestkit.subsequences` | `longest_decreasing_subsequence`, `longest_alternating_subsequence`, `longest_common_subsequence` (returns `CommonSubsequence`), `longest_common_increasing_length` |
| `contestkit.partition_dp` | `plan_taxis` (returns `TaxiPlan`), `format_taxis`, `place_offices`, `min_experiments`, `count_peaceful_sets` |
| `contestkit.knapsack` | `choose_tasks`, `max_correct_tests`, `min_mismatches` |
| `contestkit.bitmask_dp` | `min_hamiltonian_path` (returns `HamiltonianPath`), `count_partitions`, `max_paired_computers`, `count_consistent_colorings` |
| `contestkit.mst` | `kruskal_cost`, `prim_cost`, `min_supply_cost` |
| `contestkit.matching` | `max_bipartite_matching` (augmenting paths) |
| `contestkit.traversal` | `find_cycle`, `has_cycle`, `connected_components`, `topological_sort` |
| `contestkit.connectivity` | `find_bridges`, `articulation_points`, `edges_to_two_edge_connected` |
| `contestkit.lca` | `MinSparseTable`, `TreeDistance` (distances through an Euler tour and range minima) |
| `contestkit.shortest_paths` | `dijkstra`, `min_time_to_medical_room`, `bellman_ford`, `find_negative_cycle`, `transitive_closure` |
| `contestkit.flow` | `max_flow_dfs` (depth-first augmenting paths) and `FlowNetwork` (Dinic's algorithm) |

Vertex numbering follows each function's docstring: the functions in
`traversal` and `connectivity` use vertices `1..vertex_count`, while
`dijkstra`, `bellman_ford`, `kruskal_cost`, `TreeDistance`, `FlowNetwork`
and `max_bipartite_matching` use zero-based vertices.

## Examples

```python
from contestkit.matrix_power import fibonacci_mod
from contestkit.sparse_table import SecondMinSparseTable
from contestkit.dsu import DisjointSetUnion
from contestkit.flow import FlowNetwork

print(fibonacci_mod(11))          # 55: the entry of [[1, 1], [1, 0]] ** 10, mod 1000003

table = SecondMinSparseTable([5, 1, 3])
print(table.second_min(0, 2))     # 3

dsu = DisjointSetUnion(3, [5, 1, 2])
print(dsu.union(0, 1))            # 6, the weight of the merged set

network = FlowNetwork(4)
network.add_edge(0, 1, 3)
network.add_edge(1, 3, 2)
network.add_edge(0, 2, 1)
network.add_edge(2, 3, 4)
print(network.max_flow(0, 3))     # 3
print(network.edge_flows())       # [2, 2, 1, 1]
```

A few behaviours worth knowing:

- `SecondMinSparseTable.second_min` returns `2**31 - 1` for a range holding a
  single element.
- `Treap.remove` does nothing when the key is absent.
- `topological_sort` raises `ValueError` when the graph has a cycle;
  `find_cycle` returns the cycle's vertices, or `None`.
- `min_experiments` returns `-1` when no number of drops is enough, and
  `min_mismatches` returns `-1` when the lengths differ by more than the
  allowed number of edits.

## What the package does not do

contestkit is a library only. It installs no command-line programs and does
not read problem input from standard input or print answers; parsing input
and formatting output (apart from `format_taxis`) are left to the caller.