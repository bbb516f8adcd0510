"""Linear Kalman filter with per-step dynamics, noise and measurement models."""

__version__ = "0.1.0"
__all__ = ["filter", "step", "example"]