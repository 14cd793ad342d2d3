"""Bridges, articulation points and 2-edge-connectivity of undirected graphs.

Vertices are numbered from 1 to ``vertex_count``; edges are ``(begin, end)`` pairs.
"""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable

from contestkit.dsu import DisjointSetUnion

_UNSEEN = -1


def _check(vertex_count: int, edges: Iterable[tuple[int, int]]) -> list[tuple[int, int]]:
    if vertex_count < 0:
        raise ValueError("vertex_count must be non-negative")
    edge_list = list(edges)
    for begin, end in edge_list:
        for vertex in (begin, end):
            if not 1 <= vertex <= vertex_count:
                raise ValueError(f"vertex {vertex} is out of range 1..{vertex_count}")
    return edge_list


def find_bridges(vertex_count: int, edges: Iterable[tuple[int, int]]) -> list[int]:
    """Return the one-based numbers of all bridge edges in increasing order.

    Parallel edges are told apart by number, so a doubled edge is never a bridge.
    """
    edge_list = _check(vertex_count, edges)
    graph: list[list[tuple[int, int]]] = [[] for _ in range(vertex_count + 1)]
    for number, (begin, end) in enumerate(edge_list, 1):
        graph[begin].append((end, number))
        graph[end].append((begin, number))

    height = [_UNSEEN] * (vertex_count + 1)
    up = [0] * (vertex_count + 1)
    bridges: list[int] = []
    for root in range(1, vertex_count + 1):
        if height[root] != _UNSEEN:
            continue
        height[root] = up[root] = 0
        stack: list[tuple[int, int | None, Iterable[tuple[int, int]]]] = [
            (root, None, iter(graph[root]))
        ]
        while stack:
            vertex, parent_edge, neighbours = stack[-1]
            for following, number in neighbours:
                if height[following] == _UNSEEN:
                    height[following] = up[following] = height[vertex] + 1
                    stack.append((following, number, iter(graph[following])))
                    break
                if parent_edge is not None and number != parent_edge:
                    up[vertex] = min(up[vertex], height[following])
            else:
                stack.pop()
                if parent_edge is not None:
                    if up[vertex] == height[vertex]:
                        bridges.append(parent_edge)
                    parent = stack[-1][0]
                    up[parent] = min(up[parent], up[vertex])
    bridges.sort()
    return bridges


def articulation_points(vertex_count: int, edges: Iterable[tuple[int, int]]) -> list[int]:
    """Return the cut vertices of the graph in increasing order."""
    edge_list = _check(vertex_count, edges)
    graph: list[list[int]] = [[] for _ in range(vertex_count + 1)]
    for begin, end in edge_list:
        graph[begin].append(end)
        graph[end].append(begin)

    entry = [_UNSEEN] * (vertex_count + 1)
    low = [0] * (vertex_count + 1)
    points: set[int] = set()
    for root in range(1, vertex_count + 1):
        if entry[root] != _UNSEEN:
            continue
        entry[root] = low[root] = 0
        root_children = 0
        stack = [(root, _UNSEEN, iter(graph[root]))]
        while stack:
            vertex, parent, neighbours = stack[-1]
            for following in neighbours:
                if following == parent:
                    continue
                if entry[following] == _UNSEEN:
                    entry[following] = low[following] = entry[vertex] + 1
                    stack.append((following, vertex, iter(graph[following])))
                    break
                low[vertex] = min(low[vertex], entry[following])
            else:
                stack.pop()
                if parent == _UNSEEN:
                    continue
                low[parent] = min(low[parent], low[vertex])
                if parent == root:
                    root_children += 1
                elif entry[parent] <= low[vertex]:
                    points.add(parent)
        if root_children > 1:
            points.add(root)
    return sorted(points)


def edges_to_two_edge_connected(vertex_count: int, edges: Iterable[tuple[int, int]]) -> int:
    """Fewest edges to add so that no bridge remains: half the leaves of the bridge tree."""
    edge_list = _check(vertex_count, edges)
    graph: list[list[int]] = [[] for _ in range(vertex_count + 1)]
    for begin, end in edge_list:
        graph[begin].append(end)
        graph[end].append(begin)

    entry = [_UNSEEN] * (vertex_count + 1)
    ret = [0] * (vertex_count + 1)
    groups = DisjointSetUnion(vertex_count + 1)
    bridges: list[tuple[int, int]] = []
    timer = 0
    for root in range(1, vertex_count + 1):
        if entry[root] != _UNSEEN:
            continue
        entry[root] = ret[root] = timer
        timer += 1
        stack = [(root, _UNSEEN, iter(graph[root]))]
        while stack:
            vertex, parent, neighbours = stack[-1]
            for following in neighbours:
                if following == parent:
                    continue
                if entry[following] == _UNSEEN:
                    entry[following] = ret[following] = timer
                    timer += 1
                    stack.append((following, vertex, iter(graph[following])))
                    break
                ret[vertex] = min(ret[vertex], entry[following])
            else:
                stack.pop()
                if parent == _UNSEEN:
                    continue
                ret[parent] = min(ret[parent], ret[vertex])
                if ret[vertex] >= entry[vertex]:
                    bridges.append((parent, vertex))
                else:
                    groups.union(parent, vertex)

    degree: Counter[int] = Counter()
    for begin, end in bridges:
        degree[groups.find(begin)] += 1
        degree[groups.find(end)] += 1
    leaves = sum(1 for count in degree.values() if count == 1)
    return (leaves + 1) // 2