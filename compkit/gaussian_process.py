"""Gaussian process regression with an RBF kernel and grid-searched hyperparameters."""

from __future__ import annotations

import itertools
import math
from dataclasses import dataclass
from typing import Sequence

import numpy as np


@dataclass(frozen=True)
class KernelParams:
    """Kernel hyperparameters: amplitude, length scale and observation noise."""

    theta1: float
    theta2: float
    theta3: float


class GaussianProcessRegression:
    """Gaussian process regression over vector inputs and scalar outputs."""

    def __init__(self) -> None:
        self.x: list[np.ndarray] = []
        self.y: list[float] = []
        self.param = KernelParams(1.0, 1.0, 0.1)

    def collect_data(self, xi: Sequence[float], yi: float) -> None:
        """Add one training observation."""
        self.x.append(np.asarray(xi, dtype=float).ravel())
        self.y.append(float(yi))

    def _training_data(self) -> tuple[np.ndarray, np.ndarray, float]:
        if not self.x:
            raise ValueError("no training data collected")
        x_train = np.vstack(self.x)
        y_train = np.asarray(self.y, dtype=float)
        y_average = float(y_train.mean())
        return x_train, y_train - y_average, y_average

    def predict(self, x_test: Sequence[Sequence[float]]) -> tuple[list[float], list[float]]:
        """Predictive means and variances for each row of ``x_test``."""
        x_train, y_train, y_average = self._training_data()
        x_test_arr = np.atleast_2d(np.asarray(x_test, dtype=float))
        train_len = x_train.shape[0]

        kernel_mat = self.compute_kernel_matrix(x_train)
        yy = np.linalg.solve(kernel_mat, y_train)

        mean: list[float] = []
        covariance: list[float] = []
        for j, xj in enumerate(x_test_arr):
            k = np.array([self.kernel(xi, xj, i, j) for i, xi in enumerate(x_train)])
            s = self.kernel(xj, xj, j + train_len, j + train_len)
            mean.append(float(k @ yy) + y_average)
            covariance.append(float(s - k @ np.linalg.solve(kernel_mat, k)))
        return mean, covariance

    def kernel(self, xi: Sequence[float], xj: Sequence[float], i: int, j: int) -> float:
        """RBF kernel value; observation noise is added when ``i == j``."""
        diff = np.asarray(xi, dtype=float) - np.asarray(xj, dtype=float)
        norm = float(np.sum(diff * diff))
        value = self.param.theta1 * math.exp(-norm / self.param.theta2**2)
        if i == j:
            value += self.param.theta3
        return value

    def compute_kernel_matrix(self, x_train: Sequence[Sequence[float]]) -> np.ndarray:
        """Covariance matrix between all pairs of training inputs."""
        rows = np.atleast_2d(np.asarray(x_train, dtype=float))
        n = rows.shape[0]
        mat = np.zeros((n, n))
        for i, j in itertools.product(range(n), repeat=2):
            mat[i, j] = self.kernel(rows[i], rows[j], i, j)
        return mat

    def log_likelihood(self, y_train: Sequence[float], kernel_mat: np.ndarray) -> float:
        """Log-likelihood of centred targets under the given covariance, up to constants."""
        y = np.asarray(y_train, dtype=float)
        det = max(float(np.linalg.det(kernel_mat)), 1e-100)
        return -math.log(det) - float(y @ np.linalg.solve(kernel_mat, y))

    def search_ranges(self) -> tuple[list[float], list[float], list[float]]:
        """Candidate values for each hyperparameter in the grid search."""
        theta1_range = [2.0**v for v in range(3, 10)]
        theta2_range = [5.0 * v for v in range(2, 12)]
        theta3_range = [2.0**v for v in range(0, 6)]
        return theta1_range, theta2_range, theta3_range

    def grid_search(self) -> None:
        """Pick the hyperparameters with the highest likelihood on the training data."""
        x_train, y_train, _ = self._training_data()
        best_param = self.param
        best_likelihood = self.log_likelihood(y_train, self.compute_kernel_matrix(x_train))
        for theta1, theta2, theta3 in itertools.product(*self.search_ranges()):
            self.param = KernelParams(theta1, theta2, theta3)
            likelihood = self.log_likelihood(y_train, self.compute_kernel_matrix(x_train))
            if best_likelihood < likelihood:
                best_likelihood = likelihood
                best_param = self.param
        self.param = best_param