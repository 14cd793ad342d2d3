"""Minimum spanning tree costs by Kruskal's and Prim's algorithms."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from contestkit.dsu import DisjointSetUnion

INF = 2**31 - 1


def kruskal_cost(vertex_count: int, edges: Iterable[tuple[int, int, int]]) -> int:
    """Total cost of a minimum spanning forest; edges are zero-based ``(begin, end, cost)``."""
    if vertex_count < 0:
        raise ValueError("vertex_count must be non-negative")
    edge_list = list(edges)
    for begin, end, _ in edge_list:
        if not (0 <= begin < vertex_count and 0 <= end < vertex_count):
            raise ValueError(f"edge ({begin}, {end}) has a vertex out of range")
    sets = DisjointSetUnion(vertex_count)
    total = 0
    for begin, end, cost in sorted(edge_list, key=lambda edge: edge[2]):
        if sets.find(begin) != sets.find(end):
            total += cost
            sets.union(begin, end)
    return total


def prim_cost(matrix: Sequence[Sequence[int]]) -> int:
    """Total cost of a minimum spanning tree of a dense graph given by its cost matrix.

    Entries equal to or above ``INF`` act as missing edges.
    """
    rows = [list(row) for row in matrix]
    count = len(rows)
    if any(len(row) != count for row in rows):
        raise ValueError("matrix must be square")
    used = [False] * count
    min_edge = [INF] * count
    chosen = [-1] * count
    for _ in range(count):
        current = min((v for v in range(count) if not used[v]), key=min_edge.__getitem__)
        used[current] = True
        for vertex, cost in enumerate(rows[current]):
            if not used[vertex] and cost < min_edge[vertex]:
                min_edge[vertex] = cost
                chosen[vertex] = current
    return sum(rows[vertex][parent] for vertex, parent in enumerate(chosen) if parent != -1)


def min_supply_cost(distances: Sequence[Sequence[int]], well_costs: Sequence[int]) -> int:
    """Cheapest way to supply every village, either by its own well or by pipes."""
    rows = [list(row) for row in distances]
    wells = list(well_costs)
    count = len(rows)
    if any(len(row) != count for row in rows):
        raise ValueError("distance matrix must be square")
    if len(wells) != count:
        raise ValueError("one well cost is needed per village")
    matrix = [
        [INF if i == j else cost for j, cost in enumerate(row)] + [wells[i]]
        for i, row in enumerate(rows)
    ]
    matrix.append(wells + [INF])
    return prim_cost(matrix)