"""Disjoint set union with union by size, path compression and per-set weights."""

from __future__ import annotations

from collections.abc import Iterable, Sequence


class DisjointSetUnion:
    """Partition of 0..size-1; each set carries the sum of its members' weights."""

    def __init__(self, size: int, weights: Iterable[int] | None = None) -> None:
        self._weights = list(weights) if weights is not None else [0] * size
        if len(self._weights) != size:
            raise ValueError("number of weights must equal the number of elements")
        self._parent = list(range(size))
        self._size = [1] * size

    def find(self, item: int) -> int:
        """Return the representative of the set containing ``item``."""
        root = item
        while self._parent[root] != root:
            root = self._parent[root]
        while self._parent[item] != root:
            self._parent[item], item = root, self._parent[item]
        return root

    def union(self, first: int, second: int) -> int:
        """Join the sets of ``first`` and ``second``; return the joined set's weight."""
        first = self.find(first)
        second = self.find(second)
        if first == second:
            return self._weights[first]
        if self._size[first] < self._size[second]:
            first, second = second, first
        self._size[first] += self._size[second]
        self._weights[first] += self._weights[second]
        self._parent[second] = first
        return self._weights[first]


def merge_tables(sizes: Sequence[int], requests: Iterable[tuple[int, int]]) -> list[int]:
    """Merge one-based tables pairwise; after each request report the largest table."""
    sets = DisjointSetUnion(len(sizes), sizes)
    largest = max([0, *sizes])
    answers: list[int] = []
    for destination, source in requests:
        largest = max(largest, sets.union(destination - 1, source - 1))
        answers.append(largest)
    return answers