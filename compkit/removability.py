"""Whether removing the centre of a small window keeps the rest connected."""

from __future__ import annotations

from collections import deque


def is_connected(window: int, pattern: int) -> bool:
    """Whether the set cells of ``pattern`` form one 4-connected region.

    Bit ``k`` stands for row ``k // window``, column ``k % window``.
    An empty pattern counts as not connected.
    """
    if pattern == 0:
        return False
    size = window * window
    start = (pattern & -pattern).bit_length() - 1
    visited = 1 << start
    queue = deque([start])
    while queue:
        crt = queue.popleft()
        neighbours = []
        if crt % window < window - 1:
            neighbours.append(crt + 1)
        if crt % window > 0:
            neighbours.append(crt - 1)
        if crt + window < size:
            neighbours.append(crt + window)
        if crt >= window:
            neighbours.append(crt - window)
        for nxt in neighbours:
            bit = 1 << nxt
            if not visited & bit and pattern & bit:
                visited |= bit
                queue.append(nxt)
    return pattern == visited


def has_no_corner(window: int, pattern: int) -> bool:
    """False when the centre of a 3x3 window forms an L shape with two edge cells."""
    cells = {idx for idx in range(window * window) if pattern >> idx & 1}
    corners = ({1, 3, 4}, {1, 5, 4}, {3, 7, 4}, {5, 7, 4})
    return not any(corner <= cells for corner in corners)


class RemovabilityChecker:
    """Lookup table of patterns whose centre cell can be removed safely."""

    def __init__(self, window: int) -> None:
        if window < 1:
            raise ValueError("window must be positive")
        self.window = window
        area = window * window
        centre = 1 << (area // 2)
        self._table = [is_connected(window, p & ~centre) for p in range(1 << area)]

    def is_removable(self, pattern: int) -> bool:
        """Whether the cells of ``pattern`` stay connected without the centre."""
        if not 0 <= pattern < len(self._table):
            raise ValueError(f"pattern {pattern} does not fit the window")
        return self._table[pattern]