"""Convex hull trick for minimum queries over lines, and two DP problems using it."""

from __future__ import annotations

from bisect import bisect_left
from collections.abc import Iterable
from dataclasses import dataclass
from itertools import pairwise

LEFT_BOUNDARY = -(1 << 42)
JUMP_INFINITY = 1 << 42
SEGMENT_INFINITY = 2**31 - 1


@dataclass(frozen=True)
class Line:
    """The line y = slope * x + intercept."""

    slope: int
    intercept: int

    def value_at(self, x: int) -> int:
        return self.slope * x + self.intercept


def _truncating_div(numerator: int, denominator: int) -> int:
    quotient = abs(numerator) // abs(denominator)
    return quotient if (numerator < 0) == (denominator < 0) else -quotient


def cross_point(first: Line, second: Line) -> int:
    """Return the last integer x at which ``first`` is still used before ``second``."""
    x = _truncating_div(second.intercept - first.intercept, first.slope - second.slope)
    if second.intercept < first.intercept:
        x -= 1
    return x


class ConvexHullTrick:
    """Lower envelope of lines added in decreasing slope order."""

    def __init__(self) -> None:
        self._lines: list[Line] = []
        self._points: list[int] = []

    def __len__(self) -> int:
        return len(self._lines)

    def add_line(self, line: Line) -> None:
        while self._lines and self._lines[-1].value_at(self._points[-1]) > line.value_at(self._points[-1]):
            self._lines.pop()
            self._points.pop()
        self._points.append(cross_point(self._lines[-1], line) if self._lines else LEFT_BOUNDARY)
        self._lines.append(line)

    def min_at(self, x: int) -> int:
        """Return the minimum over the envelope's lines at ``x``."""
        if not self._lines:
            raise ValueError("no lines have been added")
        index = bisect_left(self._points, x) - 1
        if index < 0:
            raise ValueError(f"x must be greater than {LEFT_BOUNDARY}")
        return self._lines[index].value_at(x)


def min_jump_cost(heights: Iterable[int], cost: int) -> int:
    """Cheapest way from the first to the last column, paying (dh)^2 + cost per jump."""
    heights = list(heights)
    if not heights:
        raise ValueError("heights must not be empty")
    hull = ConvexHullTrick()
    best = 0
    for previous, current in pairwise(heights):
        hull.add_line(Line(-2 * previous, previous * previous + best + cost))
        best = hull.min_at(current) + current * current
    return best if best < JUMP_INFINITY else 0


def min_sum_squared_lengths(points: int, segments: int) -> int:
    """Minimal sum of squared lengths when points 1..points form at most ``segments`` groups."""
    if points < 0 or segments < 0:
        raise ValueError("points and segments must be non-negative")
    previous = [0] + [SEGMENT_INFINITY] * points
    for _ in range(segments):
        hull = ConvexHullTrick()
        current = [0]
        for point in range(1, points + 1):
            hull.add_line(Line(-2 * point, previous[point - 1] + point * point))
            current.append(hull.min_at(point) + point * point)
        previous = current
    result = previous[points]
    return result if result < SEGMENT_INFINITY else 0