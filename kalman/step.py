"""Inputs of a single Kalman filter step: measurement, control and system model."""

from __future__ import annotations

import numpy as np
from numpy.typing import ArrayLike


def _vector(values: ArrayLike, name: str) -> np.ndarray:
    array = np.array(values, dtype=float, ndmin=1)
    if array.ndim != 1:
        raise ValueError(f"{name} must be a one-dimensional vector, got shape {array.shape}")
    array.setflags(write=False)
    return array


def _matrix(values: ArrayLike, name: str) -> np.ndarray:
    array = np.array(values, dtype=float, ndmin=2)
    if array.ndim != 2:
        raise ValueError(f"{name} must be a two-dimensional matrix, got shape {array.shape}")
    array.setflags(write=False)
    return array


class KalmanStep:
    """A measurement together with the linear model that produced it.

    ``y`` is the measurement, ``u`` the control vector, ``A`` and ``B`` the
    linearised dynamics, ``R`` the measurement noise covariance, ``Q`` the
    process noise covariance and ``H`` the map from state to measurement.
    """

    def __init__(self, y, u, A, B, R, Q, H):
        self.y = _vector(y, "y")
        self.u = _vector(u, "u")
        self.A = _matrix(A, "A")
        self.B = _matrix(B, "B")
        self.R = _matrix(R, "R")
        self.Q = _matrix(Q, "Q")
        self.H = _matrix(H, "H")

        dx, dy, du = self.dx, self.dy, self.du
        if self.R.shape != (dy, dy):
            raise ValueError(f"R must have shape {(dy, dy)}, got {self.R.shape}")
        if self.B.shape[1] != du:
            raise ValueError(f"B must have {du} columns, got {self.B.shape[1]}")
        if self.Q.shape != (dx, dx):
            raise ValueError(f"Q must have shape {(dx, dx)}, got {self.Q.shape}")
        if self.A.shape != (dx, dx):
            raise ValueError(f"A must have shape {(dx, dx)}, got {self.A.shape}")
        if self.H.shape != (dy, dx):
            raise ValueError(f"H must have shape {(dy, dx)}, got {self.H.shape}")

    @property
    def dx(self) -> int:
        """Size of the state vector."""
        return self.Q.shape[0]

    @property
    def dy(self) -> int:
        """Size of the measurement vector."""
        return self.y.shape[0]

    @property
    def du(self) -> int:
        """Size of the control vector."""
        return self.u.shape[0]

    def __repr__(self) -> str:
        return f"KalmanStep(dx={self.dx}, dy={self.dy}, du={self.du})"