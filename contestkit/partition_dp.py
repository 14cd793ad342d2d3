"""Dynamic programmes that split items into groups: taxis, offices, drops, sets."""

from __future__ import annotations

from bisect import bisect_left
from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field
from itertools import accumulate, pairwise

TAXI_SEATS = 4
_UINT64_MASK = (1 << 64) - 1


@dataclass(frozen=True)
class TaxiPlan:
    """Total driving time and the passengers of each taxi."""

    total_time: int
    taxis: list[list[str]] = field(default_factory=list)


def plan_taxis(
    boys: Iterable[tuple[str, int]], girls: Iterable[tuple[str, int]]
) -> TaxiPlan:
    """Seat everyone in taxis of four, each with at least one boy, minimising total time.

    Each person is ``(name, distance)``; a taxi costs the largest distance it covers.
    """
    boys = sorted(boys, key=lambda person: person[1])
    girls = sorted(girls, key=lambda person: person[1])
    boy_count, girl_count = len(boys), len(girls)

    best: list[list[int | None]] = [[None] * (girl_count + 1) for _ in range(boy_count + 1)]
    previous = [[(0, 0)] * (girl_count + 1) for _ in range(boy_count + 1)]
    best[0][0] = 0

    for b in range(1, boy_count + 1):
        for g in range(girl_count + 1):
            boy_distance = boys[b - 1][1]
            cost = boy_distance if g == 0 else max(girls[g - 1][1], boy_distance)
            for boys_in_taxi in range(1, min(TAXI_SEATS, b) + 1):
                for girls_in_taxi in range(min(TAXI_SEATS - boys_in_taxi, g) + 1):
                    base = best[b - boys_in_taxi][g - girls_in_taxi]
                    if base is None:
                        continue
                    candidate = base + cost
                    current = best[b][g]
                    if current is None or candidate < current:
                        best[b][g] = candidate
                        previous[b][g] = (b - boys_in_taxi, g - girls_in_taxi)

    total = best[boy_count][girl_count]
    if total is None:
        raise ValueError("every taxi needs a boy: not everyone can be seated")

    taxis: list[list[str]] = []
    b, g = boy_count, girl_count
    while b or g:
        prev_b, prev_g = previous[b][g]
        taxi = [name for name, _ in reversed(boys[prev_b:b])]
        taxi += [name for name, _ in reversed(girls[prev_g:g])]
        taxis.append(taxi)
        b, g = prev_b, prev_g
    return TaxiPlan(total, taxis)


def _describe(names: Sequence[str]) -> str:
    if not names:
        raise ValueError("a taxi must carry at least one passenger")
    if len(names) == 1:
        return names[0]
    return ", ".join(names[:-1]) + " and " + names[-1]


def format_taxis(taxis: Sequence[Sequence[str]]) -> str:
    """Render the taxi count followed by one ``Taxi N: a, b and c.`` line per taxi."""
    lines = [str(len(taxis))]
    lines += [f"Taxi {number}: {_describe(names)}." for number, names in enumerate(taxis, 1)]
    return "\n".join(lines) + "\n"


def _half(value: int) -> int:
    """Halve, rounding toward zero."""
    return value // 2 if value >= 0 else -((-value) // 2)


def place_offices(coords: Sequence[int], count: int) -> tuple[int, list[int]]:
    """Place ``count`` offices at villages to minimise the total distance to the nearest one.

    ``coords`` must be strictly increasing. Returns the minimal total and the chosen
    coordinates; offices that the reconstruction does not reach are reported as -1.
    """
    coords = list(coords)
    n = len(coords)
    if not 1 <= count <= n:
        raise ValueError("count must be between 1 and the number of villages")
    if any(a >= b for a, b in pairwise(coords)):
        raise ValueError("coordinates must be strictly increasing")

    # right_cost[i][j]: serve villages i..j from an office at i; left_cost[i][j]: serve j..i from i.
    right_cost = [[0] * n for _ in range(n)]
    left_cost = [[0] * n for _ in range(n)]
    for i, origin in enumerate(coords):
        right_cost[i][i + 1:] = accumulate(c - origin for c in coords[i + 1:])
        left_cost[i][:i] = reversed(list(accumulate(origin - c for c in reversed(coords[:i]))))

    cost = [[0] * n for _ in range(count)]
    previous = [[0] * n for _ in range(count)]
    cost[0] = [left_cost[j][0] for j in range(n)]
    for level in range(1, count):
        for j in range(level, n):
            cost[level][j] = cost[0][n - 1]
            for k in range(level - 1, j):
                middle = bisect_left(coords, _half(coords[j] + coords[k] + 1))
                candidate = cost[level - 1][k] + right_cost[k][middle - 1] + left_cost[j][middle]
                if candidate < cost[level][j]:
                    cost[level][j] = candidate
                    previous[level][j] = k

    last_row = cost[count - 1]
    best, last = last_row[n - 1], n - 1
    for i in range(count - 1, n - 1):
        total = last_row[i] + right_cost[i][n - 1]
        if total < best:
            best, last = total, i

    positions = [-1] * count
    level = count
    while previous[level - 1][last] > 0:
        positions[level - 1] = coords[last]
        last = previous[level - 1][last]
        level -= 1
    positions[0] = coords[last]
    return best, positions


def min_experiments(max_height: int, planes: int) -> int:
    """Fewest drops that find the breaking height among ``max_height`` with ``planes`` planes.

    Returns -1 when no number of drops suffices.
    """
    if max_height < 0 or planes < 0:
        raise ValueError("max_height and planes must be non-negative")
    if planes == 0:
        return 0 if max_height == 1 else -1

    reach = 1
    for tries in range(planes + 1):
        if reach >= max_height:
            return tries
        reach *= 2

    row = [1] * (planes + 1)
    for tries in range(1, max_height + 1):
        row = [1, *(a + b for a, b in pairwise(row))]
        if row[planes] >= max_height:
            return tries
    return -1


def count_peaceful_sets(n: int) -> int:
    """Count sets of positive integers summing to ``n`` where each element is at least
    twice the previous one, modulo 2**64."""
    if n < 0:
        raise ValueError("n must be non-negative")
    # prefix[total][k] = number of sets with sum ``total`` and largest element <= k.
    prefix = [[1]]
    for total in range(1, n + 1):
        row = [0] * (total + 1)
        for largest in range(1, total + 1):
            rest = total - largest
            row[largest] = prefix[rest][min(largest // 2, rest)]
        prefix.append(list(accumulate(row, lambda a, b: (a + b) & _UINT64_MASK)))
    return prefix[n][n]