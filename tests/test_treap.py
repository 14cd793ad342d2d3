import random

import pytest

from contestkit.treap import Treap, execute_commands


def _filled(keys, seed=0):
    treap = Treap(random.Random(seed))
    for key in keys:
        treap.insert(key)
    return treap


@pytest.mark.parametrize("seed", range(4))
def test_range_sums_match_brute_force(seed):
    rng = random.Random(seed)
    keys = [rng.randint(-30, 30) for _ in range(60)]
    treap = _filled(keys, seed)
    for _ in range(100):
        left = rng.randint(-35, 35)
        right = rng.randint(left, 40)
        assert treap.range_sum(left, right) == sum(k for k in keys if left <= k <= right)


def test_length_counts_duplicates():
    keys = [4, 4, 9, 1]
    assert len(_filled(keys)) == len(keys)


def test_membership():
    treap = _filled([10, 20, 30])
    assert 20 in treap
    assert 25 not in treap


def test_remove_takes_one_occurrence():
    treap = _filled([5, 5, 8])
    treap.remove(5)
    assert 5 in treap
    assert len(treap) == 2
    assert treap.range_sum(5, 5) == 5


def test_remove_missing_key_is_noop():
    treap = _filled([1, 2, 3])
    treap.remove(7)
    assert len(treap) == 3
    assert treap.range_sum(1, 3) == 1 + 2 + 3


def test_remove_all_then_empty():
    keys = [3, 1, 2]
    treap = _filled(keys)
    for key in keys:
        treap.remove(key)
    assert len(treap) == 0
    assert treap.range_sum(-100, 100) == 0


def test_execute_commands_example():
    commands = [("+", 1), ("+", 3), ("?", 2), ("+", -4), ("?", 10)]
    assert execute_commands(commands, random.Random(1)) == [1, 1 + 3]


def test_execute_commands_rejects_unknown():
    with pytest.raises(ValueError):
        execute_commands([("-", 3)], random.Random(1))