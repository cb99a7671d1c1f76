"""Dynamic-programming routines on grids and sequences."""

from __future__ import annotations

import bisect
from typing import Any, Sequence


def largest_square_in_grid(grid: Sequence[Sequence[bool]]) -> list[list[int]]:
    """For each cell, the side of the largest all-True square ending there."""
    if not grid:
        raise ValueError("grid must not be empty")
    dp: list[list[int]] = []
    prev: list[int] = []
    for i, row in enumerate(grid):
        cur: list[int] = []
        for j, cell in enumerate(row):
            if not cell:
                cur.append(0)
            elif i == 0 or j == 0:
                cur.append(1)
            else:
                cur.append(min(prev[j], cur[j - 1], prev[j - 1]) + 1)
        dp.append(cur)
        prev = cur
    return dp


def lis(a: Sequence[Any]) -> int:
    """Length of the longest strictly increasing subsequence of ``a``."""
    tails: list[Any] = []
    for x in a:
        pos = bisect.bisect_left(tails, x)
        if pos == len(tails):
            tails.append(x)
        else:
            tails[pos] = x
    return len(tails)


def memo_rec(l: int, r: int, a: Sequence[Any]) -> int:
    """Interval DP over ``a[l..=r]``.

    Each interval takes the maximum of its two sub-intervals one element
    shorter; single-element intervals score 0.
    """
    if not 0 <= l <= r < len(a):
        raise ValueError("need 0 <= l <= r < len(a)")
    width = r - l
    row = [0] * (width + 1)
    for length in range(1, width + 1):
        row = [max(row[k + 1], row[k]) for k in range(width + 1 - length)]
    return row[0]