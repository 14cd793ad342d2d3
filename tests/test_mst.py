import random

import pytest

from contestkit.mst import INF, kruskal_cost, min_supply_cost, prim_cost


def _random_complete(seed, size):
    rng = random.Random(seed)
    matrix = [[INF] * size for _ in range(size)]
    edges = []
    for i in range(size):
        for j in range(i + 1, size):
            cost = rng.randint(1, 50)
            matrix[i][j] = matrix[j][i] = cost
            edges.append((i, j, cost))
    return matrix, edges


def test_kruskal_triangle():
    assert kruskal_cost(3, [(0, 1, 1), (1, 2, 2), (0, 2, 3)]) == 3


def test_kruskal_forest():
    assert kruskal_cost(4, [(0, 1, 4), (2, 3, 6)]) == 10


@pytest.mark.parametrize("seed, size", [(1, 2), (2, 4), (3, 6), (4, 8)])
def test_prim_agrees_with_kruskal(seed, size):
    matrix, edges = _random_complete(seed, size)
    assert prim_cost(matrix) == kruskal_cost(size, edges)


def test_prim_empty_graph():
    assert prim_cost([]) == kruskal_cost(0, [])


def test_kruskal_rejects_bad_vertex():
    with pytest.raises(ValueError):
        kruskal_cost(2, [(0, 2, 1)])


def test_prim_rejects_ragged_matrix():
    with pytest.raises(ValueError):
        prim_cost([[0, 1], [1]])


def test_min_supply_single_village():
    assert min_supply_cost([[0]], [5]) == 5


@pytest.mark.parametrize("seed, size", [(5, 3), (6, 5), (7, 7)])
def test_min_supply_matches_kruskal_with_well_vertex(seed, size):
    matrix, edges = _random_complete(seed, size)
    rng = random.Random(seed * 10)
    wells = [rng.randint(1, 80) for _ in range(size)]
    edges += [(i, size, cost) for i, cost in enumerate(wells)]
    assert min_supply_cost(matrix, wells) == kruskal_cost(size + 1, edges)


def test_min_supply_rejects_mismatched_wells():
    with pytest.raises(ValueError):
        min_supply_cost([[0, 1], [1, 0]], [3])