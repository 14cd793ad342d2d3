import pytest

from contestkit.dsu import DisjointSetUnion, merge_tables


def test_initially_singletons():
    sets = DisjointSetUnion(4)
    assert [sets.find(i) for i in range(4)] == [0, 1, 2, 3]


def test_union_joins_sets():
    sets = DisjointSetUnion(5)
    sets.union(0, 1)
    sets.union(3, 4)
    assert sets.find(0) == sets.find(1)
    assert sets.find(3) == sets.find(4)
    assert sets.find(0) != sets.find(3)


def test_union_returns_combined_weight():
    sets = DisjointSetUnion(2, [3, 4])
    assert sets.union(0, 1) == 7


def test_union_within_one_set_keeps_weight():
    weights = [2, 5, 1]
    sets = DisjointSetUnion(3, weights)
    joined = sets.union(0, 1)
    assert sets.union(1, 0) == joined
    assert sets.union(0, 2) == sum(weights)


def test_larger_set_keeps_its_root():
    sets = DisjointSetUnion(3)
    sets.union(0, 1)
    root = sets.find(0)
    sets.union(2, 0)
    assert sets.find(2) == root


def test_long_chain_compresses():
    size = 2000
    sets = DisjointSetUnion(size)
    for item in range(1, size):
        sets.union(item - 1, item)
    roots = {sets.find(item) for item in range(size)}
    assert len(roots) == 1


def test_weight_count_mismatch():
    with pytest.raises(ValueError):
        DisjointSetUnion(3, [1, 2])


def test_merge_tables_example():
    assert merge_tables([5, 1, 1], [(2, 1)]) == [6]


def test_merge_tables_invariants():
    sizes = [3, 8, 2, 6, 1]
    requests = [(1, 2), (3, 4), (1, 3), (2, 4), (5, 1)]
    answers = merge_tables(sizes, requests)
    assert len(answers) == len(requests)
    assert answers == sorted(answers)
    assert answers[0] >= max(sizes)
    assert answers[-1] == sum(sizes)