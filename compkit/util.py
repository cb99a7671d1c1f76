"""Small helpers: running extrema, elapsed time, permutations and transposition."""

from __future__ import annotations

import time
from dataclasses import dataclass
from typing import Any, Generic, MutableSequence, Sequence, TypeVar

T = TypeVar("T")

_START: list[float] = []


@dataclass
class Extremum(Generic[T]):
    """A value that can only be lowered by ``chmin`` or raised by ``chmax``."""

    value: Any

    def chmin(self, x: T) -> bool:
        """Replace the value with ``x`` if ``x`` is smaller; report whether it changed."""
        if self.value > x:
            self.value = x
            return True
        return False

    def chmax(self, x: T) -> bool:
        """Replace the value with ``x`` if ``x`` is larger; report whether it changed."""
        if self.value < x:
            self.value = x
            return True
        return False


def get_time() -> float:
    """Seconds elapsed since the first call of this function."""
    now = time.perf_counter()
    if not _START:
        _START.append(now)
    return now - _START[0]


def next_permutation(a: MutableSequence[Any]) -> bool:
    """Rearrange ``a`` in place into the next permutation in lexicographic order.

    Returns False (leaving ``a`` sorted ascending) when ``a`` was the last one.
    """
    n = len(a)
    for i in range(n - 1, 0, -1):
        if a[i - 1] < a[i]:
            j = n - 1
            while a[i - 1] >= a[j]:
                j -= 1
            a[i - 1], a[j] = a[j], a[i - 1]
            a[i:] = a[i:][::-1]
            return True
    a.reverse()
    return False


def transpose(a: Sequence[Sequence[Any]]) -> list[list[Any]]:
    """Return the transpose of a rectangular two-dimensional list."""
    if not a:
        raise ValueError("cannot transpose an empty matrix")
    width = len(a[0])
    if any(len(row) != width for row in a):
        raise ValueError("all rows must have the same length")
    return [list(column) for column in zip(*a)]