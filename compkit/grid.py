"""Breadth-first searches on character grids where '.' marks open cells."""

from __future__ import annotations

from collections import deque
from typing import Optional, Sequence

Cell = tuple[int, int]
Grid = Sequence[Sequence[str]]

OPEN = "."
UNREACHED = -1
INF = 1_000_000_000

ORTHOGONAL: tuple[Cell, ...] = ((1, 0), (0, 1), (-1, 0), (0, -1))
DIAGONAL: tuple[Cell, ...] = ((-1, -1), (-1, 1), (1, -1), (1, 1))


def _is_open(c: Grid, x: int, y: int) -> bool:
    return 0 <= x < len(c) and 0 <= y < len(c[0]) and c[x][y] == OPEN


def grid_bfs(
    c: Grid, s_x: int, s_y: int
) -> tuple[list[list[int]], list[list[Optional[Cell]]]]:
    """Step distances from ``(s_x, s_y)`` over open cells, with predecessors."""
    h, w = len(c), len(c[0])
    dist = [[UNREACHED] * w for _ in range(h)]
    prev: list[list[Optional[Cell]]] = [[None] * w for _ in range(h)]
    dist[s_x][s_y] = 0
    queue = deque([(s_x, s_y)])
    while queue:
        x, y = queue.popleft()
        for dx, dy in ORTHOGONAL:
            tx, ty = x + dx, y + dy
            if _is_open(c, tx, ty) and dist[tx][ty] == UNREACHED:
                dist[tx][ty] = dist[x][y] + 1
                prev[tx][ty] = (x, y)
                queue.append((tx, ty))
    return dist, prev


def restore_grid_path(
    prev: Sequence[Sequence[Optional[Cell]]], t_x: int, t_y: int
) -> list[Cell]:
    """Follow predecessors back from ``(t_x, t_y)`` and return the path in order."""
    path = []
    cell: Optional[Cell] = (t_x, t_y)
    while cell is not None:
        path.append(cell)
        cell = prev[cell[0]][cell[1]]
    path.reverse()
    return path


def bfs_until_wall(c: Grid, s_x: int, s_y: int) -> list[list[bool]]:
    """Cells passed over when every move slides until it hits a wall."""
    h, w = len(c), len(c[0])
    visited = [[False] * w for _ in range(h)]
    stopped = [[False] * w for _ in range(h)]
    visited[s_x][s_y] = True
    queue = deque([(s_x, s_y)])
    while queue:
        fx, fy = queue.popleft()
        for dx, dy in ORTHOGONAL:
            tx, ty = fx, fy
            while _is_open(c, tx + dx, ty + dy):
                tx += dx
                ty += dy
                visited[tx][ty] = True
            if not stopped[tx][ty]:
                stopped[tx][ty] = True
                queue.append((tx, ty))
    return visited


def grid_zero_one_bfs(c: Grid, s_x: int, s_y: int) -> list[list[int]]:
    """Fewest diagonal straight-line moves to each cell; any length costs one."""
    h, w = len(c), len(c[0])
    dist = [[INF] * w for _ in range(h)]
    dist[s_x][s_y] = 0
    queue = deque([(s_x, s_y)])
    while queue:
        fx, fy = queue.popleft()
        to_cost = dist[fx][fy] + 1
        for dx, dy in DIAGONAL:
            tx, ty = fx + dx, fy + dy
            while _is_open(c, tx, ty):
                if to_cost < dist[tx][ty]:
                    queue.append((tx, ty))
                    dist[tx][ty] = to_cost
                elif to_cost > dist[tx][ty]:
                    break
                tx += dx
                ty += dy
    return dist