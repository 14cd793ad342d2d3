"""Shortest paths: Dijkstra, Bellman-Ford, negative cycles and transitive closure."""

from __future__ import annotations

import heapq
from collections.abc import Iterable, Sequence

DIJKSTRA_INFINITY = 2_009_000_999
MEDICAL_INFINITY = 2**63 - 1
BELLMAN_FORD_INFINITY = 30_000
NO_EDGE = 100_000
UNREACHABLE_ROOM = -1


def dijkstra(
    adjacency: Sequence[Iterable[tuple[int, int]]],
    start: int,
    infinity: int = DIJKSTRA_INFINITY,
) -> list[int]:
    """Distances from ``start``; ``adjacency[v]`` lists ``(to, cost)`` with non-negative costs.

    Vertices that cannot be reached get ``infinity``.
    """
    graph = [list(edges) for edges in adjacency]
    count = len(graph)
    if not 0 <= start < count:
        raise ValueError(f"start vertex {start} is out of range")
    for vertex, edges in enumerate(graph):
        for target, cost in edges:
            if not 0 <= target < count:
                raise ValueError(f"vertex {vertex} has neighbour {target} out of range")
            if cost < 0:
                raise ValueError("edge costs must be non-negative")

    distance = [infinity] * count
    distance[start] = 0
    queue = [(0, start)]
    while queue:
        reached, vertex = heapq.heappop(queue)
        if reached > distance[vertex]:
            continue
        for target, cost in graph[vertex]:
            candidate = reached + cost
            if candidate < distance[target]:
                distance[target] = candidate
                heapq.heappush(queue, (candidate, target))
    return distance


def min_time_to_medical_room(
    vertex_count: int,
    edges: Iterable[tuple[int, int, int]],
    viruses: Iterable[int],
    start: int,
    finish: int,
) -> int:
    """Time to reach ``finish`` from ``start`` before any virus can get there.

    The graph is undirected with vertices 1..vertex_count. Returns -1 when some
    virus reaches ``finish`` no later than the traveller, or it is unreachable.
    """
    if vertex_count < 0:
        raise ValueError("vertex_count must be non-negative")
    adjacency: list[list[tuple[int, int]]] = [[] for _ in range(vertex_count + 1)]
    for begin, end, cost in edges:
        for vertex in (begin, end):
            if not 0 <= vertex <= vertex_count:
                raise ValueError(f"vertex {vertex} is out of range")
        adjacency[begin].append((end, cost))
        adjacency[end].append((begin, cost))

    distance = dijkstra(adjacency, finish, MEDICAL_INFINITY)
    virus_best = min((distance[virus] for virus in viruses), default=MEDICAL_INFINITY)
    answer = distance[start]
    return UNREACHABLE_ROOM if answer >= virus_best else answer


def bellman_ford(vertex_count: int, edges: Iterable[tuple[int, int, int]]) -> list[int]:
    """Distances from vertex 0 over directed zero-based ``(start, finish, cost)`` edges.

    Unreachable vertices get 30000.
    """
    if vertex_count < 1:
        raise ValueError("the graph must have at least one vertex")
    edge_list = list(edges)
    for start, finish, _ in edge_list:
        if not (0 <= start < vertex_count and 0 <= finish < vertex_count):
            raise ValueError(f"edge ({start}, {finish}) has a vertex out of range")

    distance = [BELLMAN_FORD_INFINITY] * vertex_count
    distance[0] = 0
    for _ in range(vertex_count - 1):
        changed = False
        for start, finish, cost in edge_list:
            if distance[start] != BELLMAN_FORD_INFINITY and distance[start] + cost < distance[finish]:
                distance[finish] = distance[start] + cost
                changed = True
        if not changed:
            break
    return distance


def find_negative_cycle(matrix: Sequence[Sequence[int]]) -> list[int] | None:
    """Find a cycle of negative weight in a weight matrix where 100000 means no edge.

    Returns the zero-based vertices of the cycle in edge order, first and last
    vertex being the same, or None when there is no negative cycle.
    """
    rows = [list(row) for row in matrix]
    count = len(rows)
    if any(len(row) != count for row in rows):
        raise ValueError("matrix must be square")
    edges = [
        (start, finish, weight)
        for start, row in enumerate(rows)
        for finish, weight in enumerate(row)
        if weight != NO_EDGE
    ]

    distance = [NO_EDGE] * count
    parent = [-1] * count
    cycle_start = -1
    updated = True
    attempt = 0
    while updated and attempt <= count:
        updated = False
        for start, finish, weight in edges:
            if distance[start] + weight < distance[finish]:
                distance[finish] = distance[start] + weight
                parent[finish] = start
                updated = True
                if attempt == count:
                    cycle_start = start
                    break
        attempt += 1

    if not updated:
        return None

    vertex = cycle_start
    for _ in range(count):
        vertex = parent[vertex]
    anchor = vertex
    vertex = parent[vertex]
    cycle: list[int] = []
    while vertex != anchor:
        cycle.append(vertex)
        vertex = parent[vertex]
    cycle.append(vertex)
    cycle.append(parent[vertex])
    cycle.reverse()
    return cycle


def transitive_closure(matrix: Sequence[Sequence[object]]) -> list[list[bool]]:
    """Reachability matrix of a directed graph given by its adjacency matrix."""
    closure = [[bool(cell) for cell in row] for row in matrix]
    count = len(closure)
    if any(len(row) != count for row in closure):
        raise ValueError("matrix must be square")
    for middle in range(count):
        through = closure[middle]
        for row in closure:
            if row[middle]:
                for target, reachable in enumerate(through):
                    if reachable:
                        row[target] = True
    return closure