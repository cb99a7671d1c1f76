"""Entropy-regularised optimal transport by the Sinkhorn-Knopp iteration."""

from __future__ import annotations

import logging
from typing import Sequence

import numpy as np

logger = logging.getLogger(__name__)


def sinkhorn_knopp(
    a: Sequence[float],
    b: Sequence[float],
    c: Sequence[Sequence[float]],
    lam: float,
    tolerance: float,
) -> list[list[float]]:
    """Transport plan moving supplies ``a`` to demands ``b`` under costs ``c``.

    ``lam`` (> 0) controls the regularisation: larger values approach the exact
    optimum but converge more slowly. Iteration stops once the scaling vectors
    change by less than ``tolerance``.
    """
    a_vec = np.asarray(a, dtype=float)
    b_vec = np.asarray(b, dtype=float)
    cost = np.asarray(c, dtype=float)
    if cost.ndim != 2 or cost.shape != (a_vec.size, b_vec.size):
        raise ValueError("cost matrix must have shape (len(a), len(b))")

    k = np.exp(-lam * cost)
    k_t = k.T
    u = np.ones(a_vec.size)
    v = b_vec / (k_t @ u)
    iterations = 0
    while True:
        iterations += 1
        next_u = a_vec / (k @ v)
        next_v = b_vec / (k_t @ u)
        error = np.linalg.norm(next_u - u) + np.linalg.norm(next_v - v)
        if error < tolerance:
            logger.debug("sinkhorn-knopp converged after %d iterations", iterations)
            break
        u, v = next_u, next_v

    plan = u[:, None] * k * v[None, :]
    return plan.tolist()