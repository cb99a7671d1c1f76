"""Minimum-cost flow with lower bounds by capacity-scaling successive shortest paths."""

from __future__ import annotations

import enum
import heapq
from dataclasses import dataclass
from typing import Optional


class Status(enum.Enum):
    OPTIMAL = enum.auto()
    INFEASIBLE = enum.auto()


@dataclass(frozen=True)
class EdgeHandle:
    """Refers to an edge added with :meth:`CapacityScalingSuccessiveShortestPath.add_edge`."""

    frm: int
    idx: int


@dataclass
class _Edge:
    to: int
    rev: int
    cap: int
    flow: int
    cost: int

    @property
    def residual_cap(self) -> int:
        return self.cap - self.flow


def _trunc_mod(a: int, b: int) -> int:
    """Remainder whose sign follows the dividend."""
    r = abs(a) % abs(b)
    return r if a >= 0 else -r


class CapacityScalingSuccessiveShortestPath:
    """Min-cost b-flow solver on ``n`` vertices."""

    def __init__(self, n: int) -> None:
        self.n = n
        self._g: list[list[_Edge]] = [[] for _ in range(n)]
        self._b = [0] * n
        self._p = [0] * n

    def add_edge(self, frm: int, to: int, lower: int, upper: int, cost: int) -> EdgeHandle:
        """Add an edge carrying between ``lower`` and ``upper`` units at ``cost`` each."""
        fidx = len(self._g[frm])
        tidx = len(self._g[to]) + (1 if frm == to else 0)
        self._g[frm].append(_Edge(to, tidx, upper, 0, cost))
        self._g[to].append(_Edge(frm, fidx, -lower, 0, -cost))
        return EdgeHandle(frm, fidx)

    def add_supply(self, v: int, amount: int) -> None:
        self._b[v] += amount

    def add_demand(self, v: int, amount: int) -> None:
        self.add_supply(v, -amount)

    def edge_flow(self, e: EdgeHandle) -> int:
        return self._g[e.frm][e.idx].flow

    def potential(self, v: int) -> int:
        return self._p[v]

    def _push(self, frm: int, idx: int, amount: int) -> None:
        edge = self._g[frm][idx]
        edge.flow += amount
        self._g[edge.to][edge.rev].flow -= amount

    def _initial_delta(self, scaling_factor: int) -> int:
        cap_inf = max(
            max(self._b, default=0),
            max((abs(e.residual_cap) for es in self._g for e in es), default=0),
        )
        delta = 1
        while delta < cap_inf:
            delta *= scaling_factor
        return delta

    def _reduced_cost(self, frm: int, e: _Edge) -> int:
        return e.cost + self._p[frm] - self._p[e.to]

    def _saturate_negative(self, delta: int) -> None:
        for v, edges in enumerate(self._g):
            for ei, e in enumerate(edges):
                cap = e.residual_cap
                cap -= _trunc_mod(cap, delta)
                if cap < 0 or self._reduced_cost(v, e) < 0:
                    self._push(v, ei, cap)
                    self._b[v] -= cap
                    self._b[e.to] += cap

    def _dual(
        self, excess_vs: list[int], delta: int
    ) -> tuple[list[Optional[EdgeHandle]], list[int]]:
        dist: list[Optional[int]] = [None] * self.n
        par: list[Optional[EdgeHandle]] = [None] * self.n
        heap: list[tuple[int, int]] = []
        for v in excess_vs:
            dist[v] = 0
            heapq.heappush(heap, (0, v))
        farthest = 0
        deficit_vs: list[int] = []
        while heap:
            d, v = heapq.heappop(heap)
            if dist[v] < d:
                continue
            farthest = d
            if self._b[v] <= -delta:
                deficit_vs.append(v)
            for ei, e in enumerate(self._g[v]):
                if e.residual_cap < delta:
                    continue
                cost = d + self._reduced_cost(v, e)
                if dist[e.to] is None or dist[e.to] > cost:
                    dist[e.to] = cost
                    par[e.to] = EdgeHandle(v, ei)
                    heapq.heappush(heap, (cost, e.to))
        for v, d in enumerate(dist):
            self._p[v] += farthest if d is None else d
        return par, deficit_vs

    def _primal(
        self, par: list[Optional[EdgeHandle]], deficit_vs: list[int], delta: int
    ) -> None:
        for t in deficit_vs:
            f = -self._b[t]
            v = t
            while (h := par[v]) is not None:
                f = min(f, self._g[h.frm][h.idx].residual_cap)
                v = h.frm
            f = min(f, self._b[v])
            f -= _trunc_mod(f, delta)
            if f <= 0:
                continue
            v = t
            while (h := par[v]) is not None:
                self._push(h.frm, h.idx, f)
                v = h.frm
            self._b[t] += f
            self._b[v] -= f

    def solve(self, scaling_factor: int = 2) -> Status:
        """Route all supplies to demands at minimum cost."""
        if scaling_factor < 2:
            raise ValueError("scaling factor must be at least 2")
        delta = self._initial_delta(scaling_factor)
        while delta > 0:
            excess_vs = list(range(self.n))
            self._saturate_negative(delta)
            while True:
                excess_vs = [v for v in excess_vs if self._b[v] >= delta]
                par, deficit_vs = self._dual(excess_vs, delta)
                if not deficit_vs:
                    break
                self._primal(par, deficit_vs, delta)
            delta //= scaling_factor
        return Status.OPTIMAL if all(b == 0 for b in self._b) else Status.INFEASIBLE

    def result_cost(self) -> int:
        """Total cost of the current flow."""
        total = sum(e.flow * e.cost for es in self._g for e in es)
        return total // 2