"""A two-dimensional PID controller."""

from __future__ import annotations

from typing import Sequence

Vec2 = tuple[float, float]


class PID:
    """Proportional-integral-derivative controller acting on 2D positions."""

    def __init__(self, kp: float, ki: float, kd: float) -> None:
        self.kp = kp
        self.ki = ki
        self.kd = kd
        self.integral: Vec2 = (0.0, 0.0)
        self.prev_error: Vec2 = (0.0, 0.0)

    def calc_manipulated_variable(
        self, crt: Sequence[float], destination: Sequence[float]
    ) -> Vec2:
        """Control output that moves ``crt`` towards ``destination``."""
        ex, ey = destination[0] - crt[0], destination[1] - crt[1]
        ix, iy = self.integral[0] + ex, self.integral[1] + ey
        dx, dy = ex - self.prev_error[0], ey - self.prev_error[1]
        self.integral = (ix, iy)
        self.prev_error = (ex, ey)
        return (
            ex * self.kp + ix * self.ki + dx * self.kd,
            ey * self.kp + iy * self.ki + dy * self.kd,
        )