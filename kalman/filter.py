"""Linear Kalman filter holding the current estimate and its uncertainty."""

from __future__ import annotations

import numpy as np
from numpy.typing import ArrayLike

from kalman.step import KalmanStep


class KalmanFilter:
    """Tracks a state estimate, its covariance and the last Kalman gain."""

    def __init__(self, init_estimate: ArrayLike, init_P: ArrayLike, du: int, dy: int):
        self._estimate = np.array(init_estimate, dtype=float, ndmin=1)
        if self._estimate.ndim != 1:
            raise ValueError("init_estimate must be a one-dimensional vector")
        self._P = np.array(init_P, dtype=float, ndmin=2)
        self._du = int(du)
        self._dy = int(dy)
        self._dx = self._estimate.shape[0]
        self._Kg = np.zeros((self._dx, self._dy))

    @property
    def dx(self) -> int:
        """Size of the state vector."""
        return self._dx

    @property
    def dy(self) -> int:
        """Size of the measurement vector."""
        return self._dy

    @property
    def du(self) -> int:
        """Size of the control vector."""
        return self._du

    @property
    def estimate(self) -> np.ndarray:
        """Current state estimate (a copy)."""
        return self._estimate.copy()

    @property
    def P(self) -> np.ndarray:
        """Current covariance of the estimate (a copy)."""
        return self._P.copy()

    @property
    def Kg(self) -> np.ndarray:
        """Kalman gain used by the latest update (a copy)."""
        return self._Kg.copy()

    def update(self, step: KalmanStep) -> None:
        """Predict with the step's dynamics, then correct with its measurement."""
        if (step.dx, step.dy, step.du) != (self._dx, self._dy, self._du):
            raise ValueError("Dimension mismatch between step object and kalman filter")

        A, H = step.A, step.H
        self._estimate = A @ self._estimate + step.B @ step.u
        self._P = A @ self._P @ A.T + step.Q

        innovation_cov = step.R + H @ self._P @ H.T
        self._Kg = self._P @ H.T @ np.linalg.inv(innovation_cov)

        self._P = (np.eye(self._dx) - self._Kg @ H) @ self._P
        self._estimate = self._estimate + self._Kg @ (step.y - H @ self._estimate)

    def __repr__(self) -> str:
        return f"KalmanFilter(dx={self._dx}, dy={self._dy}, du={self._du})"