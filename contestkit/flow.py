"""Maximum flow by depth-first augmenting paths and by Dinic's algorithm."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable
from dataclasses import dataclass

INF = 2**31 - 1


def _augment(capacity: list[list[int]], flow: list[list[int]], source: int, sink: int) -> int:
    """Push flow along the first augmenting path found by depth-first search."""
    count = len(capacity)
    used = [False] * count
    used[source] = True
    path = [source]
    choices = [iter(range(count))]
    while path:
        vertex = path[-1]
        for following in choices[-1]:
            if used[following] or capacity[vertex][following] - flow[vertex][following] <= 0:
                continue
            path.append(following)
            if following == sink:
                pushed = min(
                    [INF] + [capacity[a][b] - flow[a][b] for a, b in zip(path, path[1:])]
                )
                for a, b in zip(path, path[1:]):
                    flow[a][b] += pushed
                    flow[b][a] -= pushed
                return pushed
            used[following] = True
            choices.append(iter(range(count)))
            break
        else:
            path.pop()
            choices.pop()
    return 0


def max_flow_dfs(
    vertex_count: int, edges: Iterable[tuple[int, int, int]], source: int, sink: int
) -> int:
    """Maximum flow over zero-based ``(start, finish, capacity)`` edges.

    A repeated edge between the same pair replaces the earlier capacity.
    """
    if vertex_count < 1:
        raise ValueError("the network must have at least one vertex")
    for vertex in (source, sink):
        if not 0 <= vertex < vertex_count:
            raise ValueError(f"vertex {vertex} is out of range")
    if source == sink:
        raise ValueError("source and sink must differ")
    capacity = [[0] * vertex_count for _ in range(vertex_count)]
    flow = [[0] * vertex_count for _ in range(vertex_count)]
    for start, finish, amount in edges:
        if not (0 <= start < vertex_count and 0 <= finish < vertex_count):
            raise ValueError(f"edge ({start}, {finish}) has a vertex out of range")
        capacity[start][finish] = amount
        flow[start][finish] = 0

    total = 0
    while pushed := _augment(capacity, flow, source, sink):
        total += pushed
    return total


@dataclass
class _Arc:
    target: int
    capacity: int
    flow: int = 0


class FlowNetwork:
    """A directed network whose maximum flow is found by Dinic's algorithm."""

    def __init__(self, vertex_count: int) -> None:
        if vertex_count < 1:
            raise ValueError("the network must have at least one vertex")
        self._count = vertex_count
        self._arcs: list[_Arc] = []
        self._outgoing: list[list[int]] = [[] for _ in range(vertex_count)]
        self._level: list[int] = []
        self._pointer: list[int] = []

    def _check(self, vertex: int) -> None:
        if not 0 <= vertex < self._count:
            raise ValueError(f"vertex {vertex} is out of range")

    def add_edge(self, start: int, finish: int, capacity: int) -> None:
        """Add a directed edge with its zero-capacity reverse twin."""
        self._check(start)
        self._check(finish)
        self._outgoing[start].append(len(self._arcs))
        self._arcs.append(_Arc(finish, capacity))
        self._outgoing[finish].append(len(self._arcs))
        self._arcs.append(_Arc(start, 0))

    def _build_levels(self, source: int, sink: int) -> bool:
        self._level = [-1] * self._count
        self._level[source] = 0
        queue = deque([source])
        while queue:
            vertex = queue.popleft()
            for arc_id in self._outgoing[vertex]:
                arc = self._arcs[arc_id]
                if self._level[arc.target] == -1 and arc.flow < arc.capacity:
                    self._level[arc.target] = self._level[vertex] + 1
                    queue.append(arc.target)
        return self._level[sink] != -1

    def _blocking(self, vertex: int, sink: int, limit: int) -> int:
        if not limit or vertex == sink:
            return limit
        outgoing = self._outgoing[vertex]
        while self._pointer[vertex] < len(outgoing):
            arc_id = outgoing[self._pointer[vertex]]
            arc = self._arcs[arc_id]
            if self._level[arc.target] == self._level[vertex] + 1:
                pushed = self._blocking(arc.target, sink, min(limit, arc.capacity - arc.flow))
                if pushed:
                    arc.flow += pushed
                    self._arcs[arc_id ^ 1].flow -= pushed
                    return pushed
            self._pointer[vertex] += 1
        return 0

    def max_flow(self, source: int, sink: int) -> int:
        """Push as much flow as possible from ``source`` to ``sink`` and return it."""
        self._check(source)
        self._check(sink)
        if source == sink:
            raise ValueError("source and sink must differ")
        total = 0
        while self._build_levels(source, sink):
            self._pointer = [0] * self._count
            while pushed := self._blocking(source, sink, INF):
                total += pushed
        return total

    def edge_flows(self) -> list[int]:
        """Flow on each added edge, in the order the edges were added."""
        return [arc.flow for arc in self._arcs[::2]]