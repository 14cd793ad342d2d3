"""Sparse table answering "second smallest element" queries on static ranges."""

from __future__ import annotations

import math
from collections.abc import Iterable

MAX_VALUE = 2**31 - 1
"""Returned when a range holds a single element and has no second minimum."""

# An entry is identified by (value, position); ties on value go to the lower position.
_Key = tuple[int, float]
_Pair = tuple[_Key, _Key]

_SENTINEL: _Key = (MAX_VALUE, math.inf)


def _combine(left: _Pair, right: _Pair) -> _Pair:
    """Merge the (minimum, second minimum) pairs of two possibly overlapping ranges."""
    (first1, second1), (first2, second2) = left, right
    first = min(first1, first2)
    other = first2 if first == first1 else first1
    second = min(second1, second2)
    if other != first and other < second:
        second = other
    return first, second


class SecondMinSparseTable:
    """Answers second-minimum queries on inclusive, zero-based index ranges."""

    def __init__(self, values: Iterable[int]) -> None:
        self._values = list(values)
        size = len(self._values)
        level: list[_Pair] = [((value, index), _SENTINEL) for index, value in enumerate(self._values)]
        self._levels: list[list[_Pair]] = [level] if size else []
        width = 1
        while 2 * width <= size:
            previous = level
            level = [
                _combine(previous[start], previous[start + width])
                for start in range(size - 2 * width + 1)
            ]
            self._levels.append(level)
            width *= 2

    def __len__(self) -> int:
        return len(self._values)

    def second_min(self, left: int, right: int) -> int:
        """Return the second smallest value among positions left..right inclusive."""
        if not 0 <= left <= right < len(self._values):
            raise IndexError(f"invalid range [{left}, {right}] for {len(self._values)} values")
        power = (right - left + 1).bit_length() - 1
        row = self._levels[power]
        _, second = _combine(row[left], row[right - (1 << power) + 1])
        return second[0]