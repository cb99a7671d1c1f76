"""Shortest paths and spanning trees on adjacency-list graphs."""

from __future__ import annotations

import heapq
from collections import deque
from typing import Optional, Sequence

UNREACHED = -1
"""Distance that :func:`bfs` reports for vertices it never reached."""

ZERO_ONE_INF = 1_000_000_000
"""Distance that :func:`zero_one_bfs` reports for unreachable vertices."""

INF = 1 << 60
"""Distance that :func:`dijkstra` reports for unreachable vertices."""


def bfs(
    edges: Sequence[Sequence[int]], s: int
) -> tuple[list[int], list[Optional[int]]]:
    """Unweighted shortest distances from ``s`` and each vertex's predecessor.

    Unreached vertices get distance ``UNREACHED``; vertices without a
    predecessor (the start and unreached ones) get ``None``.
    """
    n = len(edges)
    dist = [UNREACHED] * n
    prev: list[Optional[int]] = [None] * n
    dist[s] = 0
    queue = deque([s])
    while queue:
        crt = queue.popleft()
        for to in edges[crt]:
            if dist[to] == UNREACHED:
                dist[to] = dist[crt] + 1
                prev[to] = crt
                queue.append(to)
    return dist, prev


def restore_path(prev: Sequence[Optional[int]], t: int) -> list[int]:
    """Walk the predecessor list back from ``t`` and return the path in order."""
    path = []
    node: Optional[int] = t
    while node is not None:
        path.append(node)
        node = prev[node]
    path.reverse()
    return path


def zero_one_bfs(edges: Sequence[Sequence[tuple[int, int]]], s: int) -> list[int]:
    """Shortest distances from ``s`` in a graph whose edge costs are 0 or 1."""
    dist = [ZERO_ONE_INF] * len(edges)
    dist[s] = 0
    queue = deque([s])
    while queue:
        frm = queue.popleft()
        for to, cost in edges[frm]:
            d = dist[frm] + cost
            if d < dist[to]:
                dist[to] = d
                if cost == 1:
                    queue.append(to)
                else:
                    queue.appendleft(to)
    return dist


def dijkstra(
    edges: Sequence[Sequence[tuple[int, int]]], s: int
) -> tuple[list[int], list[Optional[int]]]:
    """Shortest distances from ``s`` with non-negative weights, and predecessors."""
    n = len(edges)
    dist = [INF] * n
    prev: list[Optional[int]] = [None] * n
    dist[s] = 0
    heap = [(0, s)]
    while heap:
        d, crt = heapq.heappop(heap)
        if dist[crt] < d:
            continue
        for to, w in edges[crt]:
            if d + w < dist[to]:
                dist[to] = d + w
                prev[to] = crt
                heapq.heappush(heap, (dist[to], to))
    return dist, prev


def prim(edges: Sequence[Sequence[tuple[int, int]]]) -> int:
    """Total weight of a minimum spanning tree grown from vertex 0."""
    if not edges:
        raise ValueError("graph has no vertices")
    visited = [False] * len(edges)
    cost = 0
    heap: list[tuple[int, int, Optional[int]]] = [(0, 0, None)]
    while heap:
        w, crt, frm = heapq.heappop(heap)
        if visited[crt]:
            continue
        visited[crt] = True
        if frm is not None:
            cost += w
        for to, w2 in edges[crt]:
            if not visited[to]:
                heapq.heappush(heap, (w2, to, crt))
    return cost


def warshall_floyd(dist: Sequence[Sequence[int]]) -> list[list[int]]:
    """All-pairs shortest distances from a square distance matrix.

    The input is left untouched; a new matrix is returned.
    """
    d = [list(row) for row in dist]
    n = len(d)
    if any(len(row) != n for row in d):
        raise ValueError("distance matrix must be square")
    for k in range(n):
        via = d[k]
        for row in d:
            dik = row[k]
            for j in range(n):
                candidate = dik + via[j]
                if row[j] > candidate:
                    row[j] = candidate
    return d