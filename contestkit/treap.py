"""Treap keyed by integers that keeps subtree sums for range-sum queries."""

from __future__ import annotations

import random
from collections.abc import Iterable


class _Node:
    __slots__ = ("key", "priority", "total", "left", "right")

    def __init__(self, key: int, priority: float) -> None:
        self.key = key
        self.priority = priority
        self.total = key
        self.left: _Node | None = None
        self.right: _Node | None = None

    def refresh(self) -> None:
        self.total = self.key + _total(self.left) + _total(self.right)


def _total(node: _Node | None) -> int:
    return 0 if node is None else node.total


def _split(node: _Node | None, key: int) -> tuple[_Node | None, _Node | None]:
    """Split into keys below ``key`` and keys at or above it."""
    if node is None:
        return None, None
    if node.key < key:
        lower, upper = _split(node.right, key)
        node.right = lower
        node.refresh()
        return node, upper
    lower, upper = _split(node.left, key)
    node.left = upper
    node.refresh()
    return lower, node


def _merge(left: _Node | None, right: _Node | None) -> _Node | None:
    if left is None:
        return right
    if right is None:
        return left
    if left.priority > right.priority:
        left.right = _merge(left.right, right)
        left.refresh()
        return left
    right.left = _merge(left, right.left)
    right.refresh()
    return right


class Treap:
    """A multiset of integer keys with sums over key ranges."""

    def __init__(self, rng: random.Random | None = None) -> None:
        self._rng = rng if rng is not None else random.Random()
        self._root: _Node | None = None
        self._size = 0

    def __len__(self) -> int:
        return self._size

    def __contains__(self, key: object) -> bool:
        node = self._root
        while node is not None:
            if node.key == key:
                return True
            node = node.right if node.key < key else node.left
        return False

    def insert(self, key: int) -> None:
        """Add one occurrence of ``key``."""
        node = _Node(key, self._rng.random())
        self._size += 1
        if self._root is None:
            self._root = node
            return
        lower, upper = _split(self._root, key)
        self._root = _merge(_merge(lower, node), upper)

    def remove(self, key: int) -> None:
        """Remove one occurrence of ``key``; do nothing if it is absent."""
        if key not in self:
            return
        lower, rest = _split(self._root, key)
        equal, upper = _split(rest, key + 1)
        assert equal is not None
        remaining = _merge(equal.left, equal.right)
        self._root = _merge(lower, _merge(remaining, upper))
        self._size -= 1

    def range_sum(self, left: int, right: int) -> int:
        """Return the sum of all keys k with left <= k <= right."""
        not_above, above = _split(self._root, right + 1)
        below, inside = _split(not_above, left)
        result = _total(inside)
        self._root = _merge(_merge(below, inside), above)
        return result


def execute_commands(
    commands: Iterable[tuple[str, int]], rng: random.Random | None = None
) -> list[int]:
    """Run ``+ key`` insertions and ``? bound`` queries summing keys in [0, bound]."""
    treap = Treap(rng)
    answers: list[int] = []
    for command, value in commands:
        if command == "+":
            treap.insert(value)
        elif command == "?":
            answers.append(treap.range_sum(0, value))
        else:
            raise ValueError(f"unknown command {command!r}")
    return answers