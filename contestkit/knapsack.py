"""Knapsack-style dynamic programmes: task selection, test groups, string edits."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

IMPOSSIBLE_TRANSFORMATION = -1


def choose_tasks(resources: Iterable[int], awards: Iterable[int], capacity: int) -> list[int]:
    """Pick tasks maximising the total award within ``capacity`` resources.

    Returns the one-based numbers of the chosen tasks in increasing order.
    """
    resources = list(resources)
    awards = list(awards)
    if len(resources) != len(awards):
        raise ValueError("resources and awards must have the same length")
    if capacity < 0:
        raise ValueError("capacity must be non-negative")
    if any(need < 0 for need in resources):
        raise ValueError("resources must be non-negative")

    count = len(resources)
    # best[budget][j]: best award using the first j tasks and at most ``budget`` resources.
    best = [[0] * (count + 1) for _ in range(capacity + 1)]
    for budget in range(1, capacity + 1):
        row = best[budget]
        for j, (need, award) in enumerate(zip(resources, awards), 1):
            row[j] = row[j - 1]
            if budget >= need:
                row[j] = max(row[j], best[budget - need][j - 1] + award)

    chosen: list[int] = []
    target = best[capacity][count]
    budget, j = capacity, count
    while best[budget][j] > 0:
        if best[budget][j - 1] == target:
            j -= 1
        else:
            chosen.append(j)
            j -= 1
            budget -= resources[j]
            target = best[budget][j]
    chosen.reverse()
    return chosen


def max_correct_tests(groups: Iterable[Iterable[tuple[int, int]]], max_tests: int) -> int:
    """Most correct tests when at most one algorithm per group is run within ``max_tests``.

    Each group lists ``(total_tests, correct_tests)`` pairs. A group without any
    algorithm resets the running result to zero.
    """
    if max_tests < 0:
        raise ValueError("max_tests must be non-negative")
    previous = [0] * (max_tests + 1)
    for group in groups:
        options = list(group)
        if any(total < 0 for total, _ in options):
            raise ValueError("test counts must be non-negative")
        current = [0] * (max_tests + 1)
        for tests in range(1, max_tests + 1):
            for total, correct in options:
                if total <= tests:
                    current[tests] = max(current[tests], previous[tests - total] + correct)
                current[tests] = max(previous[tests], current[tests])
        previous = current
    return previous[max_tests]


def min_mismatches(alpha: Sequence[str], beta: Sequence[str], max_edits: int) -> int:
    """Fewest positions of ``beta`` left unmatched after up to ``max_edits`` edits of ``alpha``.

    Returns -1 when the lengths differ by more than ``max_edits``.
    """
    if max_edits < 0:
        raise ValueError("max_edits must be non-negative")
    if abs(len(alpha) - len(beta)) > max_edits:
        return IMPOSSIBLE_TRANSFORMATION

    limit = max_edits
    previous = [[0] * (limit + 1) for _ in range(limit + 1)]
    for length in range(1, len(beta) + 1):
        letter = beta[length - 1]
        current = [[0] * (limit + 1) for _ in range(limit + 1)]
        for removed in range(limit + 1):
            for added in range(limit + 1):
                value = 0
                if removed:
                    value = max(value, current[removed - 1][added])
                if added:
                    value = max(value, previous[removed][added - 1] + 1)
                position = length + removed - added
                if 0 < position <= len(alpha):
                    value = max(value, previous[removed][added] + (alpha[position - 1] == letter))
                current[removed][added] = value
        previous = current

    result = 0
    for removed in range(limit + 1):
        for added in range(limit + 1 - removed):
            if len(alpha) + added == len(beta) + removed:
                result = max(result, previous[removed][added] + limit - removed - added)
    return max(0, len(beta) - result)