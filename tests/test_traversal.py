import random

import pytest

from contestkit.traversal import (
    connected_components,
    find_cycle,
    has_cycle,
    topological_sort,
)


def _random_edges(rng, vertex_count, edge_count):
    return [
        (rng.randint(1, vertex_count), rng.randint(1, vertex_count))
        for _ in range(edge_count)
    ]


def test_triangle_cycle_is_closed_walk():
    edges = [(1, 2), (2, 3), (3, 1)]
    cycle = find_cycle(3, edges)
    assert sorted(cycle) == [1, 2, 3]
    for a, b in zip(cycle, cycle[1:] + cycle[:1]):
        assert (a, b) in edges


def test_cycle_starts_at_repeated_vertex():
    assert find_cycle(3, [(1, 2), (2, 3), (3, 2)]) == [2, 3]


def test_self_loop_is_cycle():
    assert find_cycle(1, [(1, 1)]) == [1]


def test_acyclic_graph_has_no_cycle():
    edges = [(1, 2), (1, 3), (2, 4), (3, 4)]
    assert find_cycle(4, edges) is None
    assert has_cycle(4, edges) is False


def test_has_cycle_detects_cycle():
    assert has_cycle(4, [(1, 2), (2, 3), (3, 4), (4, 2)]) is True


@pytest.mark.parametrize("seed", range(20))
def test_random_cycles_are_real(seed):
    rng = random.Random(seed)
    edges = _random_edges(rng, 8, 10)
    cycle = find_cycle(8, edges)
    if cycle is None:
        order = topological_sort(8, edges)
        position = {vertex: index for index, vertex in enumerate(order)}
        assert all(position[a] < position[b] for a, b in edges)
    else:
        assert len(set(cycle)) == len(cycle)
        for a, b in zip(cycle, cycle[1:] + cycle[:1]):
            assert (a, b) in edges


def test_topological_sort_of_chain():
    assert topological_sort(3, [(3, 2), (2, 1)]) == [3, 2, 1]


def test_topological_sort_respects_edges():
    edges = [(1, 3), (2, 3), (3, 4), (1, 5), (5, 4)]
    order = topological_sort(5, edges)
    assert sorted(order) == [1, 2, 3, 4, 5]
    position = {vertex: index for index, vertex in enumerate(order)}
    assert all(position[a] < position[b] for a, b in edges)


def test_topological_sort_rejects_cycle():
    with pytest.raises(ValueError):
        topological_sort(2, [(1, 2), (2, 1)])


def test_components_of_small_graph():
    assert connected_components(5, [(1, 2), (3, 4)]) == [[1, 2], [3, 4], [5]]


@pytest.mark.parametrize("seed", range(10))
def test_components_partition_vertices(seed):
    rng = random.Random(seed)
    edges = _random_edges(rng, 10, 7)
    components = connected_components(10, edges)
    flat = sorted(vertex for component in components for vertex in component)
    assert flat == list(range(1, 11))
    label = {v: index for index, component in enumerate(components) for v in component}
    assert all(label[a] == label[b] for a, b in edges)
    assert all(component[0] == min(component) for component in components)


def test_invalid_vertex_rejected():
    with pytest.raises(ValueError):
        connected_components(2, [(1, 3)])
    with pytest.raises(ValueError):
        find_cycle(2, [(0, 1)])