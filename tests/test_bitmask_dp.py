from itertools import pairwise, permutations, product

import pytest

from contestkit.bitmask_dp import (
    HamiltonianPath,
    count_consistent_colorings,
    count_partitions,
    max_paired_computers,
    min_hamiltonian_path,
)

COSTS = [[0, 4, 9, 2], [3, 0, 7, 8], [6, 1, 0, 5], [2, 9, 4, 0]]


def _path_cost(costs, vertices):
    return sum(costs[a - 1][b - 1] for a, b in pairwise(vertices))


def test_hamiltonian_two_vertices():
    result = min_hamiltonian_path([[0, 5], [7, 0]])
    assert result == HamiltonianPath(5, (1, 2))


def test_hamiltonian_single_vertex():
    assert min_hamiltonian_path([[0]]) == HamiltonianPath(0, (1,))


def test_hamiltonian_path_is_optimal_permutation():
    result = min_hamiltonian_path(COSTS)
    assert sorted(result.vertices) == [1, 2, 3, 4]
    assert _path_cost(COSTS, result.vertices) == result.min_cost
    best = min(_path_cost(COSTS, [v + 1 for v in order]) for order in permutations(range(4)))
    assert result.min_cost == best


def test_hamiltonian_rejects_empty_and_ragged():
    with pytest.raises(ValueError):
        min_hamiltonian_path([])
    with pytest.raises(ValueError):
        min_hamiltonian_path([[0, 1], [1]])


def _brute_partitions(rows):
    height, width = len(rows), len(rows[0])
    total = 0
    for bits in product((0, 1), repeat=height * width):
        grid = [bits[r * width:(r + 1) * width] for r in range(height)]
        if any(
            (cell == "+" and not grid[r][c]) or (cell == "-" and grid[r][c])
            for r, row in enumerate(rows)
            for c, cell in enumerate(row)
        ):
            continue
        if all(
            grid[r][c] + grid[r][c + 1] + grid[r + 1][c] + grid[r + 1][c + 1] == 2
            for r in range(height - 1)
            for c in range(width - 1)
        ):
            total += 1
    return total


def test_count_partitions_free_square():
    assert count_partitions(["..", ".."]) == 6


@pytest.mark.parametrize(
    "rows",
    [["+.", ".."], ["+..", "...", "..-"], ["...", "+-."], ["....", "..+."], ["+"], ["-.+"], ["..", "..", "-."]],
)
def test_count_partitions_matches_exhaustive_search(rows):
    assert count_partitions(rows) == _brute_partitions(rows)


def test_count_partitions_invariant_under_transpose():
    rows = ["+.-", "...", ".+."]
    transposed = ["".join(column) for column in zip(*rows)]
    assert count_partitions(rows) == count_partitions(transposed)


def test_count_partitions_rejects_bad_grids():
    with pytest.raises(ValueError):
        count_partitions([])
    with pytest.raises(ValueError):
        count_partitions(["..", "."])


def test_max_paired_computers_triangle():
    triangle = [[False, True, True], [True, False, True], [True, True, False]]
    assert max_paired_computers(triangle) == 2


def test_max_paired_computers_without_links():
    assert max_paired_computers([[False] * 4 for _ in range(4)]) == 0


@pytest.mark.parametrize("size", range(1, 6))
def test_max_paired_computers_complete_graph(size):
    links = [[i != j for j in range(size)] for i in range(size)]
    result = max_paired_computers(links)
    assert result % 2 == 0
    assert result == size - size % 2


def _brute_colorings(width, height):
    total = 0
    for bits in product((0, 1), repeat=width * height):
        grid = [bits[r * width:(r + 1) * width] for r in range(height)]
        if all(
            len({grid[r][c], grid[r][c + 1], grid[r + 1][c], grid[r + 1][c + 1]}) > 1
            for r in range(height - 1)
            for c in range(width - 1)
        ):
            total += 1
    return total


def test_count_consistent_colorings_two_by_two():
    assert count_consistent_colorings(2, 2) == 14


@pytest.mark.parametrize("width, height", [(1, 1), (1, 4), (2, 3), (3, 3), (3, 4), (4, 2)])
def test_count_consistent_colorings_matches_exhaustive_search(width, height):
    assert count_consistent_colorings(width, height) == _brute_colorings(width, height)


def test_count_consistent_colorings_is_symmetric():
    assert count_consistent_colorings(3, 5) == count_consistent_colorings(5, 3)


def test_count_consistent_colorings_rejects_bad_sizes():
    with pytest.raises(ValueError):
        count_consistent_colorings(-1, 2)
    with pytest.raises(ValueError):
        count_consistent_colorings(0, 0)