"""Dynamic programmes over bit masks: paths, grid partitions, pairings, colourings."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

INF = (2**32 - 1) // 4
PARTITION_MODULUS = 1_000_000_007


@dataclass(frozen=True)
class HamiltonianPath:
    """The cost of a cheapest path through every vertex and its one-based vertices."""

    min_cost: int
    vertices: tuple[int, ...]


def _square(matrix: Sequence[Sequence[object]]) -> list[list]:
    rows = [list(row) for row in matrix]
    if any(len(row) != len(rows) for row in rows):
        raise ValueError("matrix must be square")
    return rows


def min_hamiltonian_path(costs: Sequence[Sequence[int]]) -> HamiltonianPath:
    """Find a cheapest path visiting every vertex once, with any start and end."""
    costs = _square(costs)
    count = len(costs)
    if count == 0:
        raise ValueError("the graph must have at least one vertex")
    full = (1 << count) - 1
    best = [[INF] * count for _ in range(full + 1)]
    previous = [[-1] * count for _ in range(full + 1)]
    for vertex in range(count):
        best[1 << vertex][vertex] = 0

    for mask in range(1, full + 1):
        for vertex in range(count):
            if not mask >> vertex & 1:
                continue
            base = best[mask][vertex]
            for target in range(count):
                if mask >> target & 1:
                    continue
                extended = mask | 1 << target
                candidate = base + costs[vertex][target]
                if best[extended][target] > candidate:
                    best[extended][target] = candidate
                    previous[extended][target] = vertex

    final = min(range(count), key=best[full].__getitem__)
    vertices: list[int] = []
    mask, vertex = full, final
    while True:
        vertices.append(vertex + 1)
        parent = previous[mask][vertex]
        mask ^= 1 << vertex
        vertex = parent
        if not mask:
            break
    vertices.reverse()
    return HamiltonianPath(best[full][final], tuple(vertices))


def _fits(mask: int, row: str) -> bool:
    """Check a row mask against '+' (must be set) and '-' (must be clear) cells."""
    for index, cell in enumerate(row):
        bit = mask >> index & 1
        if (bit and cell == "-") or (not bit and cell == "+"):
            return False
    return True


def _next_row(width: int, first_bit: int, previous: int) -> int | None:
    """Build the row below ``previous`` so every 2x2 square holds exactly two set bits."""
    mask = first_bit
    for index in range(1, width):
        total = (previous >> index & 1) + (previous >> (index - 1) & 1) + (mask >> (index - 1) & 1)
        if total in (0, 3):
            return None
        if total == 1:
            mask |= 1 << index
    return mask


def count_partitions(districts: Sequence[str]) -> int:
    """Count 0/1 fillings of the grid where every 2x2 square has two ones, mod 10**9+7.

    A '+' cell must be one, a '-' cell must be zero; any other character is free.
    """
    rows = [str(row) for row in districts]
    if not rows or not rows[0]:
        raise ValueError("the grid must not be empty")
    if any(len(row) != len(rows[0]) for row in rows):
        raise ValueError("all rows must have the same length")
    if len(rows[0]) > len(rows):
        rows = ["".join(column) for column in zip(*rows)]

    width = len(rows[0])
    masks = range(1 << width)
    counts = [1 if _fits(mask, rows[0]) else 0 for mask in masks]
    for above, row in zip(rows, rows[1:]):
        current = [0] * len(counts)
        for previous in masks:
            if not _fits(previous, above):
                continue
            for first_bit in (1, 0):
                mask = _next_row(width, first_bit, previous)
                if mask is not None and _fits(mask, row):
                    current[mask] = (current[mask] + counts[previous]) % PARTITION_MODULUS
        counts = current
    return sum(counts) % PARTITION_MODULUS


def max_paired_computers(connected: Sequence[Sequence[bool]]) -> int:
    """Largest number of computers that can be split into connected pairs."""
    links = [[bool(cell) for cell in row] for row in _square(connected)]
    count = len(links)
    full = (1 << count) - 1
    best = [0] * (full + 1)
    for mask in range(1, full + 1):
        members = [vertex for vertex in range(count) if mask >> vertex & 1]
        value = 0
        for first in members:
            for second in members:
                if first != second and links[first][second]:
                    value = max(value, best[mask ^ (1 << first) ^ (1 << second)] + 2)
        best[mask] = value
    return best[full]


def _consistent(width: int, first: int, second: int) -> bool:
    for index in range(1, width):
        bits = {
            first >> (index - 1) & 1,
            first >> index & 1,
            second >> (index - 1) & 1,
            second >> index & 1,
        }
        if len(bits) == 1:
            return False
    return True


def count_consistent_colorings(width: int, height: int) -> int:
    """Count two-colourings of a width x height grid with no single-coloured 2x2 square."""
    if width < 0 or height < 0:
        raise ValueError("dimensions must be non-negative")
    width, height = min(width, height), max(width, height)
    if height == 0:
        raise ValueError("the grid must not be empty")
    masks = range(1 << width)
    allowed = {first: [second for second in masks if _consistent(width, first, second)] for first in masks}
    counts = [1] * len(masks)
    for _ in range(height - 1):
        current = [0] * len(masks)
        for first in masks:
            for second in allowed[first]:
                current[second] += counts[first]
        counts = current
    return sum(counts)