"""Depth-first traversals of small graphs: cycles, components and topological order.

Vertices are numbered from 1 to ``vertex_count``; edges are ``(begin, end)`` pairs.
"""

from __future__ import annotations

from collections.abc import Iterable
from enum import IntEnum


class _Colour(IntEnum):
    WHITE = 0
    GREY = 1
    BLACK = 2


def _adjacency(
    vertex_count: int, edges: Iterable[tuple[int, int]], *, directed: bool
) -> list[list[int]]:
    if vertex_count < 0:
        raise ValueError("vertex_count must be non-negative")
    graph: list[list[int]] = [[] for _ in range(vertex_count + 1)]
    for begin, end in edges:
        for vertex in (begin, end):
            if not 1 <= vertex <= vertex_count:
                raise ValueError(f"vertex {vertex} is out of range 1..{vertex_count}")
        graph[begin].append(end)
        if not directed:
            graph[end].append(begin)
    return graph


def find_cycle(vertex_count: int, edges: Iterable[tuple[int, int]]) -> list[int] | None:
    """Return the vertices of some directed cycle in visiting order, or None if acyclic."""
    graph = _adjacency(vertex_count, edges, directed=True)
    colour = [_Colour.WHITE] * (vertex_count + 1)
    for root in range(1, vertex_count + 1):
        if colour[root] != _Colour.WHITE:
            continue
        colour[root] = _Colour.GREY
        path = [root]
        stack = [iter(graph[root])]
        while stack:
            for following in stack[-1]:
                if colour[following] == _Colour.WHITE:
                    colour[following] = _Colour.GREY
                    path.append(following)
                    stack.append(iter(graph[following]))
                    break
                if colour[following] == _Colour.GREY:
                    return path[path.index(following):]
            else:
                stack.pop()
                colour[path.pop()] = _Colour.BLACK
    return None


def has_cycle(vertex_count: int, edges: Iterable[tuple[int, int]]) -> bool:
    """Tell whether the directed graph contains a cycle."""
    return find_cycle(vertex_count, edges) is not None


def connected_components(
    vertex_count: int, edges: Iterable[tuple[int, int]]
) -> list[list[int]]:
    """Return the components of an undirected graph, each in depth-first visiting order."""
    graph = _adjacency(vertex_count, edges, directed=False)
    visited = [False] * (vertex_count + 1)
    components: list[list[int]] = []
    for root in range(1, vertex_count + 1):
        if visited[root]:
            continue
        visited[root] = True
        component = [root]
        stack = [iter(graph[root])]
        while stack:
            for following in stack[-1]:
                if not visited[following]:
                    visited[following] = True
                    component.append(following)
                    stack.append(iter(graph[following]))
                    break
            else:
                stack.pop()
        components.append(component)
    return components


def topological_sort(vertex_count: int, edges: Iterable[tuple[int, int]]) -> list[int]:
    """Order the vertices so every edge goes forward; raise ValueError on a cycle."""
    edge_list = list(edges)
    if has_cycle(vertex_count, edge_list):
        raise ValueError("graph contains a cycle")
    graph = _adjacency(vertex_count, edge_list, directed=True)
    visited = [False] * (vertex_count + 1)
    finished: list[int] = []
    for root in range(1, vertex_count + 1):
        if visited[root]:
            continue
        visited[root] = True
        stack = [(root, iter(graph[root]))]
        while stack:
            vertex, neighbours = stack[-1]
            for following in neighbours:
                if not visited[following]:
                    visited[following] = True
                    stack.append((following, iter(graph[following])))
                    break
            else:
                stack.pop()
                finished.append(vertex)
    finished.reverse()
    return finished