"""Modular integers, square matrices and recurrences solved by fast matrix powers."""

from __future__ import annotations

import operator
from collections.abc import Iterable, Iterator, Sequence
from functools import reduce
from typing import Any

FIBONACCI_MODULUS = 1_000_003
GRASSHOPPER_MODULUS = 1_000_003
WALK_MODULUS = 1_000_000_007
MAX_JUMP = 5


class ModInt:
    """An integer reduced modulo a fixed positive modulus."""

    __slots__ = ("value", "modulus")

    def __init__(self, value: int, modulus: int) -> None:
        if modulus <= 0:
            raise ValueError("modulus must be positive")
        self.modulus = modulus
        self.value = value % modulus

    def _coerce(self, other: object) -> int | None:
        if isinstance(other, ModInt):
            if other.modulus != self.modulus:
                raise ValueError("cannot combine numbers with different moduli")
            return other.value
        if isinstance(other, int):
            return other
        return None

    def __add__(self, other: object) -> ModInt:
        value = self._coerce(other)
        if value is None:
            return NotImplemented
        return ModInt(self.value + value, self.modulus)

    __radd__ = __add__

    def __sub__(self, other: object) -> ModInt:
        value = self._coerce(other)
        if value is None:
            return NotImplemented
        return ModInt(self.value - value, self.modulus)

    def __rsub__(self, other: object) -> ModInt:
        value = self._coerce(other)
        if value is None:
            return NotImplemented
        return ModInt(value - self.value, self.modulus)

    def __mul__(self, other: object) -> ModInt:
        value = self._coerce(other)
        if value is None:
            return NotImplemented
        return ModInt(self.value * value, self.modulus)

    __rmul__ = __mul__

    def __int__(self) -> int:
        return self.value

    def __eq__(self, other: object) -> bool:
        if isinstance(other, ModInt):
            return self.value == other.value and self.modulus == other.modulus
        if isinstance(other, int):
            return self.value == other
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self.value)

    def __repr__(self) -> str:
        return f"ModInt({self.value}, {self.modulus})"


def _dot(row: Sequence[Any], column: Sequence[Any]) -> Any:
    return reduce(operator.add, map(operator.mul, row, column))


class SquareMatrix:
    """An immutable square matrix over any ring-like element type."""

    __slots__ = ("_rows",)

    def __init__(self, rows: Iterable[Iterable[Any]]) -> None:
        data = tuple(tuple(row) for row in rows)
        if any(len(row) != len(data) for row in data):
            raise ValueError("matrix must be square")
        self._rows = data

    def __len__(self) -> int:
        return len(self._rows)

    def __getitem__(self, index: int) -> tuple[Any, ...]:
        return self._rows[index]

    def __iter__(self) -> Iterator[tuple[Any, ...]]:
        return iter(self._rows)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SquareMatrix):
            return NotImplemented
        return self._rows == other._rows

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"SquareMatrix({[list(row) for row in self._rows]!r})"

    def _check_size(self, other: SquareMatrix) -> None:
        if len(self) != len(other):
            raise ValueError("matrices have different sizes")

    def __add__(self, other: object) -> SquareMatrix:
        if not isinstance(other, SquareMatrix):
            return NotImplemented
        self._check_size(other)
        return SquareMatrix(
            [a + b for a, b in zip(mine, theirs)] for mine, theirs in zip(self._rows, other._rows)
        )

    def __sub__(self, other: object) -> SquareMatrix:
        if not isinstance(other, SquareMatrix):
            return NotImplemented
        self._check_size(other)
        return SquareMatrix(
            [a - b for a, b in zip(mine, theirs)] for mine, theirs in zip(self._rows, other._rows)
        )

    def __mul__(self, other: object) -> Any:
        """Multiply by another matrix, or by a column vector given as a sequence."""
        if isinstance(other, SquareMatrix):
            self._check_size(other)
            columns = list(zip(*other._rows))
            return SquareMatrix([_dot(row, column) for column in columns] for row in self._rows)
        if isinstance(other, Sequence) and not isinstance(other, (str, bytes)):
            if len(other) != len(self):
                raise ValueError("vector length does not match matrix size")
            return [_dot(row, other) for row in self._rows]
        return NotImplemented

    def power(self, exponent: int, one: Any = 1, zero: Any = 0) -> SquareMatrix:
        """Raise the matrix to a non-negative integer power by repeated squaring."""
        if exponent < 0:
            raise ValueError("exponent must be non-negative")
        result = identity_matrix(len(self), one, zero)
        base = self
        while exponent:
            if exponent & 1:
                result = result * base
            base = base * base
            exponent >>= 1
        return result


def identity_matrix(size: int, one: Any = 1, zero: Any = 0) -> SquareMatrix:
    """Return the size x size identity matrix built from ``one`` and ``zero``."""
    return SquareMatrix(
        [one if row == column else zero for column in range(size)] for row in range(size)
    )


def fibonacci_mod(n: int) -> int:
    """Return the lower-left entry of [[1, 1], [1, 0]] ** (n - 1) modulo 1000003."""
    one, zero = ModInt(1, FIBONACCI_MODULUS), ModInt(0, FIBONACCI_MODULUS)
    base = SquareMatrix([[one, one], [one, zero]])
    return int(base.power(max(n - 1, 0), one, zero)[1][0])


def grasshopper_ways(steps: int, max_jump: int = MAX_JUMP) -> int:
    """Count ways to reach cell ``steps`` from cell 1 with jumps of 1..max_jump, mod 1000003."""
    if max_jump < 1:
        raise ValueError("max_jump must be at least 1")
    if steps < 1:
        raise ValueError("steps must be at least 1")
    one, zero = ModInt(1, GRASSHOPPER_MODULUS), ModInt(0, GRASSHOPPER_MODULUS)
    ways = [one]
    for _ in range(1, max_jump):
        ways.append(reduce(operator.add, ways))
    if steps <= max_jump:
        return int(ways[steps - 1])
    move = SquareMatrix(
        [[one if column == row + 1 else zero for column in range(max_jump)] for row in range(max_jump - 1)]
        + [[one] * max_jump]
    )
    return int((move.power(steps - max_jump, one, zero) * ways)[-1])


def count_walks(segments: Iterable[tuple[int, int, int]], limit: int) -> int:
    """Count walks from height 0 to height 0 under ceiling segments up to x = limit.

    Each segment is ``(x_begin, x_end, ceiling)``; each step moves one to the right
    and changes the height by -1, 0 or +1 while staying within [0, ceiling].
    """
    one, zero = ModInt(1, WALK_MODULUS), ModInt(0, WALK_MODULUS)
    state: list[ModInt] = []
    seen_any = False
    for x_begin, x_end, ceiling in segments:
        if ceiling < 0:
            raise ValueError("ceiling must be non-negative")
        size = ceiling + 1
        state = (state + [zero] * size)[:size]
        if not seen_any:
            state[0] = one
            seen_any = True
        move = SquareMatrix(
            [one if abs(row - column) <= 1 else zero for column in range(size)] for row in range(size)
        )
        exponent = max(min(limit, x_end) - x_begin, 0)
        state = move.power(exponent, one, zero) * state
    if not seen_any:
        raise ValueError("at least one segment is required")
    return int(state[0])