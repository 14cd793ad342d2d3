"""Distances in a tree via an Euler tour and range-minimum queries on depths."""

from __future__ import annotations

from collections.abc import Iterable


class MinSparseTable:
    """Answers minimum queries on inclusive, zero-based ranges of a static list."""

    def __init__(self, values: Iterable[int]) -> None:
        level = list(values)
        self._size = len(level)
        self._levels: list[list[int]] = [level] if level else []
        width = 1
        while 2 * width <= self._size:
            previous = level
            level = [
                min(previous[start], previous[start + width])
                for start in range(self._size - 2 * width + 1)
            ]
            self._levels.append(level)
            width *= 2

    def __len__(self) -> int:
        return self._size

    def range_min(self, left: int, right: int) -> int:
        """Return the smallest value among positions left..right inclusive."""
        if not 0 <= left <= right < self._size:
            raise IndexError(f"invalid range [{left}, {right}] for {self._size} values")
        power = (right - left + 1).bit_length() - 1
        row = self._levels[power]
        return min(row[left], row[right - (1 << power) + 1])


class TreeDistance:
    """Number of edges between two vertices of a tree given as zero-based adjacency lists."""

    def __init__(self, adjacency: Iterable[Iterable[int]]) -> None:
        graph = [list(neighbours) for neighbours in adjacency]
        count = len(graph)
        for vertex, neighbours in enumerate(graph):
            for other in neighbours:
                if not 0 <= other < count:
                    raise ValueError(f"vertex {vertex} has neighbour {other} out of range")

        self._first = [0] * count
        depths: list[int] = []
        visited = [False] * count
        for root in range(count):
            if visited[root]:
                continue
            visited[root] = True
            self._first[root] = len(depths)
            depths.append(0)
            stack = [(root, 0, iter(graph[root]))]
            while stack:
                _, depth, neighbours = stack[-1]
                for following in neighbours:
                    if not visited[following]:
                        visited[following] = True
                        self._first[following] = len(depths)
                        depths.append(depth + 1)
                        stack.append((following, depth + 1, iter(graph[following])))
                        break
                else:
                    stack.pop()
                    if stack:
                        depths.append(stack[-1][1])
        self._depths = depths
        self._rmq = MinSparseTable(depths)

    def __len__(self) -> int:
        return len(self._first)

    def distance(self, first: int, second: int) -> int:
        """Return the number of edges on the path between ``first`` and ``second``."""
        for vertex in (first, second):
            if not 0 <= vertex < len(self._first):
                raise IndexError(f"vertex {vertex} out of range")
        low, high = sorted((self._first[first], self._first[second]))
        ancestor = self._rmq.range_min(low, high)
        return self._depths[low] - ancestor + self._depths[high] - ancestor