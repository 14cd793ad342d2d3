"""Longest decreasing, alternating, common and common increasing subsequences."""

from __future__ import annotations

from bisect import bisect_left
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class CommonSubsequence:
    """A longest common subsequence given by one-based positions in both inputs."""

    length: int
    first_positions: tuple[int, ...]
    second_positions: tuple[int, ...]


def longest_decreasing_subsequence(values: Iterable[int]) -> list[int]:
    """Return the zero-based indices of a longest strictly decreasing subsequence."""
    values = list(values)
    negated_tails: list[int] = []
    tail_indices: list[int] = []
    parent = [-1] * len(values)
    for index, value in enumerate(values):
        position = bisect_left(negated_tails, -value)
        if position < len(negated_tails) and negated_tails[position] == -value:
            continue
        parent[index] = tail_indices[position - 1] if position else -1
        if position == len(negated_tails):
            negated_tails.append(-value)
            tail_indices.append(index)
        else:
            negated_tails[position] = -value
            tail_indices[position] = index
    chain: list[int] = []
    current = tail_indices[-1] if tail_indices else -1
    while current != -1:
        chain.append(current)
        current = parent[current]
    chain.reverse()
    return chain


def longest_alternating_subsequence(values: Iterable[int]) -> list[int]:
    """Return a longest subsequence whose elements go alternately up and down."""
    values = list(values)
    if not values:
        raise ValueError("values must not be empty")
    # falling[i]: best length ending at i where the previous element is greater;
    # rising[i]: best length ending at i where the previous element is smaller.
    falling = [0] * len(values)
    rising = [0] * len(values)
    falling[0] = rising[0] = 1
    for index in range(1, len(values)):
        value = values[index]
        for earlier_index, earlier in enumerate(values[:index]):
            if value < earlier:
                falling[index] = max(falling[index], rising[earlier_index] + 1)
            elif value > earlier:
                rising[index] = max(rising[index], falling[earlier_index] + 1)

    best, position, is_falling = 0, 0, False
    for index, (down, up) in enumerate(zip(falling, rising)):
        if up > best:
            best, position, is_falling = up, index, False
        if down > best:
            best, position, is_falling = down, index, True

    current = values[position]
    result = [current]
    while best > 1:
        best -= 1
        is_falling = not is_falling
        position -= 1
        table = falling if is_falling else rising
        while table[position] != best or not (
            values[position] < current if is_falling else values[position] > current
        ):
            position -= 1
        current = values[position]
        result.append(current)
    result.reverse()
    return result


def longest_common_subsequence(first: Sequence[Any], second: Sequence[Any]) -> CommonSubsequence:
    """Return a longest common subsequence of two sequences with one-based positions."""
    table = [[0] * (len(second) + 1) for _ in range(len(first) + 1)]
    best, end_first, end_second = 0, 0, 0
    for i, item in enumerate(first, 1):
        previous_row, row = table[i - 1], table[i]
        for j, other in enumerate(second, 1):
            row[j] = previous_row[j - 1] + 1 if item == other else max(previous_row[j], row[j - 1])
            if row[j] > best:
                best, end_first, end_second = row[j], i, j

    first_positions: list[int] = []
    second_positions: list[int] = []
    i, j, remaining = end_first, end_second, best
    while remaining:
        if first[i - 1] == second[j - 1]:
            first_positions.append(i)
            second_positions.append(j)
            i -= 1
            j -= 1
            remaining -= 1
        elif table[i - 1][j] < table[i][j - 1]:
            j -= 1
        else:
            i -= 1
    return CommonSubsequence(best, tuple(reversed(first_positions)), tuple(reversed(second_positions)))


def longest_common_increasing_length(first: Iterable[int], second: Sequence[int]) -> int:
    """Return the length of a longest strictly increasing common subsequence."""
    row = [0] * len(second)
    for item in first:
        best_before = 0
        for j, other in enumerate(second):
            previous = row[j]
            if item == other and previous <= best_before:
                row[j] = best_before + 1
            elif item > other and previous > best_before:
                best_before = previous
    return max(row, default=0)