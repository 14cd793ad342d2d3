from itertools import combinations, pairwise

import pytest

from contestkit.partition_dp import (
    TaxiPlan,
    count_peaceful_sets,
    format_taxis,
    min_experiments,
    place_offices,
    plan_taxis,
)


def _brute_peaceful(n):
    total = 0
    for size in range(n + 1):
        for combo in combinations(range(1, n + 1), size):
            if sum(combo) == n and all(2 * a <= b for a, b in pairwise(combo)):
                total += 1
    return total


def test_single_boy_rides_alone():
    assert plan_taxis([("Ivan", 7)], []) == TaxiPlan(7, [["Ivan"]])


def test_boy_and_girl_share_taxi():
    plan = plan_taxis([("Ivan", 5)], [("Anna", 3)])
    assert plan.taxis == [["Ivan", "Anna"]]
    assert plan.total_time == 5


def test_four_boys_fill_one_taxi():
    boys = [("A", 3), ("B", 9), ("C", 1), ("D", 4)]
    plan = plan_taxis(boys, [])
    assert plan.total_time == max(distance for _, distance in boys)
    assert plan.taxis == [["B", "D", "A", "C"]]


def test_plan_seats_everyone_once():
    boys = [("A", 3), ("B", 9), ("C", 1), ("D", 4), ("E", 6)]
    girls = [("F", 2), ("G", 8), ("H", 5)]
    plan = plan_taxis(boys, girls)
    seated = sorted(name for taxi in plan.taxis for name in taxi)
    assert seated == sorted(name for name, _ in boys + girls)
    boy_names = {name for name, _ in boys}
    assert all(1 <= len(taxi) <= 4 for taxi in plan.taxis)
    assert all(any(name in boy_names for name in taxi) for taxi in plan.taxis)


def test_empty_plan():
    assert plan_taxis([], []) == TaxiPlan(0, [])


@pytest.mark.parametrize(
    "boys,girls",
    [([], [("Anna", 1)]), ([("Ivan", 1)], [("A", 1), ("B", 2), ("C", 3), ("D", 4)])],
)
def test_impossible_plan_raises(boys, girls):
    with pytest.raises(ValueError):
        plan_taxis(boys, girls)


def test_format_taxis():
    text = format_taxis([["A"], ["B", "C"], ["D", "E", "F"]])
    assert text == "3\nTaxi 1: A.\nTaxi 2: B and C.\nTaxi 3: D, E and F.\n"


def test_format_empty_taxi_raises():
    with pytest.raises(ValueError):
        format_taxis([[]])


def test_one_office_small():
    assert place_offices([1, 2, 3], 1) == (2, [2])


def test_one_office_two_villages():
    cost, positions = place_offices([0, 10], 1)
    assert cost == 10
    assert positions[0] in (0, 10)


@pytest.mark.parametrize("coords,count", [([1, 2], 0), ([1, 2], 3), ([3, 1], 1), ([1, 1], 1)])
def test_place_offices_invalid(coords, count):
    with pytest.raises(ValueError):
        place_offices(coords, count)


def test_no_planes():
    assert min_experiments(1, 0) == 0
    assert min_experiments(2, 0) == -1


@pytest.mark.parametrize("height", [2, 3, 10, 25])
def test_one_plane_tries_every_floor(height):
    assert min_experiments(height, 1) == height - 1


def test_many_planes_use_binary_search():
    assert min_experiments(1024, 20) == 10


def test_more_planes_never_hurt():
    answers = [min_experiments(100, planes) for planes in range(1, 8)]
    assert all(a >= b for a, b in pairwise(answers))


def test_min_experiments_negative_raises():
    with pytest.raises(ValueError):
        min_experiments(-1, 2)


@pytest.mark.parametrize("n", range(13))
def test_peaceful_sets_match_enumeration(n):
    assert count_peaceful_sets(n) == _brute_peaceful(n)


def test_peaceful_sets_negative_raises():
    with pytest.raises(ValueError):
        count_peaceful_sets(-1)