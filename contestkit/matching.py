"""Maximum bipartite matching by augmenting paths (Kuhn's algorithm)."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

_FREE = -1


def _augment(adjacency: Sequence[Sequence[int]], owner: list[int], start: int) -> bool:
    """Search for an augmenting path from ``start`` and apply it if found."""
    visited = {start}
    stack = [(start, iter(adjacency[start]))]
    via: list[int] = []
    while stack:
        vertex, neighbours = stack[-1]
        for right in neighbours:
            holder = owner[right]
            if holder == _FREE:
                owner[right] = vertex
                for (frame_vertex, _), edge in zip(stack, via):
                    owner[edge] = frame_vertex
                return True
            if holder not in visited:
                visited.add(holder)
                via.append(right)
                stack.append((holder, iter(adjacency[holder])))
                break
        else:
            stack.pop()
            if via:
                via.pop()
    return False


def max_bipartite_matching(
    adjacency: Iterable[Iterable[int]], right_size: int
) -> list[tuple[int, int]]:
    """Return matched ``(left, right)`` pairs of a maximum matching, ordered by right vertex.

    ``adjacency[left]`` lists the zero-based right vertices joined to ``left``.
    """
    graph = [list(neighbours) for neighbours in adjacency]
    if right_size < 0:
        raise ValueError("right_size must be non-negative")
    for left, neighbours in enumerate(graph):
        for right in neighbours:
            if not 0 <= right < right_size:
                raise ValueError(f"left vertex {left} has right neighbour {right} out of range")
    owner = [_FREE] * right_size
    for left in range(len(graph)):
        _augment(graph, owner, left)
    return [(left, right) for right, left in enumerate(owner) if left != _FREE]