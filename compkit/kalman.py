"""A linear Kalman filter tracking 2D position and velocity."""

from __future__ import annotations

from typing import Sequence, Union

import numpy as np

Observation = Union[float, Sequence[float]]


class KalmanFilter:
    """Kalman filter over the state ``(x, vx, y, vy)`` with 2D control input."""

    def __init__(self) -> None:
        self.state = np.zeros(4)
        self.covariance = np.zeros((4, 4))
        self.transition = np.array(
            [
                [1.0, 1.0, 0.0, 0.0],
                [0.0, 1.0, 0.0, 0.0],
                [0.0, 0.0, 1.0, 1.0],
                [0.0, 0.0, 0.0, 1.0],
            ]
        )
        self.control = np.array(
            [
                [1.0, 0.0],
                [1.0, 0.0],
                [0.0, 1.0],
                [0.0, 1.0],
            ]
        )
        self.process_noise = np.array(
            [
                [0.0, 1e-3, 0.0, 0.0],
                [1e-3, 1e-5, 0.0, 0.0],
                [0.0, 0.0, 0.0, 1e-3],
                [0.0, 0.0, 1e-3, 1e-5],
            ]
        )
        self.observation = np.array(
            [
                [1.0, 0.0, 0.0, 0.0],
                [0.0, 0.0, 1.0, 0.0],
            ]
        )

    def predict(self, u: Sequence[float]) -> None:
        """Advance the prior one step under control input ``u``."""
        f = self.transition
        self.state = f @ self.state + self.control @ np.asarray(u, dtype=float)
        self.covariance = f @ self.covariance @ f.T + self.process_noise

    def update(self, mu: Observation, sigma2: float) -> None:
        """Fold in an observed position with variance ``sigma2``.

        ``mu`` is a position pair, or a scalar used for both coordinates.
        """
        h = self.observation
        p = self.covariance
        r = np.eye(2) * sigma2
        s = h @ p @ h.T + r
        k = p @ h.T @ np.linalg.inv(s)
        z = np.broadcast_to(np.asarray(mu, dtype=float), (2,))
        y = z - h @ self.state
        self.state = self.state + k @ y
        i_kh = np.eye(4) - k @ h
        self.covariance = i_kh @ p @ i_kh.T + k @ r @ k.T