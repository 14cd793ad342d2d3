"""Fenwick tree over sign-alternating values for a[l] - a[l+1] + a[l+2] - ... queries."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

CHANGE_VALUE = 0
GET_SUM = 1


class AlternatingFenwickTree:
    """Point updates and alternating-sign range sums on zero-based positions."""

    def __init__(self, values: Iterable[int]) -> None:
        self._values = list(values)
        if not self._values:
            raise ValueError("values must not be empty")
        self._tree = [0] * len(self._values)
        for index, value in enumerate(self._values):
            self._add(index, value)

    def _check(self, index: int) -> None:
        if not 0 <= index < len(self._values):
            raise IndexError(f"index {index} out of range")

    def _add(self, index: int, delta: int) -> None:
        # Odd positions are stored negated so prefix sums alternate in sign.
        signed = -delta if index % 2 else delta
        position = index
        while position < len(self._tree):
            self._tree[position] += signed
            position |= position + 1

    def update(self, index: int, delta: int) -> None:
        """Add ``delta`` to the value at ``index``."""
        self._check(index)
        self._values[index] += delta
        self._add(index, delta)

    def assign(self, index: int, value: int) -> None:
        """Set the value at ``index``."""
        self._check(index)
        self.update(index, value - self._values[index])

    def prefix_sum(self, index: int) -> int:
        """Return the signed sum a[0] - a[1] + ... over positions 0..index."""
        if index >= len(self._values):
            raise IndexError(f"index {index} out of range")
        result = 0
        position = index
        while position >= 0:
            result += self._tree[position]
            position = (position & (position + 1)) - 1
        return result

    def alternating_sum(self, left: int, right: int) -> int:
        """Return a[left] - a[left+1] + a[left+2] - ... up to a[right]."""
        if not 0 <= left <= right < len(self._values):
            raise IndexError(f"invalid range [{left}, {right}]")
        total = self.prefix_sum(right) - self.prefix_sum(left - 1)
        return -total if left % 2 else total


def execute_commands(values: Sequence[int], commands: Iterable[Sequence[int]]) -> list[int]:
    """Run one-based ``(0, index, value)`` assignments and ``(1, left, right)`` queries."""
    tree = AlternatingFenwickTree(values)
    answers: list[int] = []
    for command, *arguments in commands:
        if command == CHANGE_VALUE:
            index, value = arguments
            tree.assign(index - 1, value)
        elif command == GET_SUM:
            left, right = arguments
            answers.append(tree.alternating_sum(left - 1, right - 1))
        else:
            raise ValueError(f"invalid command {command!r}")
    return answers