"""Algorithms and data structures for programming contests and heuristic optimisation."""

__version__ = "0.1.0"

__all__ = [
    "util",
    "modint",
    "xoshiro",
    "number_theory",
    "sequences",
    "dp",
    "graph",
    "grid",
    "linked_list",
    "removability",
    "skiplist",
    "min_cost_flow",
    "pid",
    "gaussian_process",
    "kalman",
    "sinkhorn",
]