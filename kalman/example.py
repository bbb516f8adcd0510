"""Tracking an oscillating trajectory from noisy position measurements."""

from __future__ import annotations

import argparse
from dataclasses import dataclass

import numpy as np

from kalman.filter import KalmanFilter
from kalman.step import KalmanStep

V0 = 12.0  # constant part of the initial velocity
ACCEL = -5.0  # constant part of the acceleration
AMPLITUDE = 1000.0  # amplitude of the oscillatory component
OMEGA = 1.0  # frequency of the oscillatory component


@dataclass(frozen=True)
class Simulation:
    """Exact trajectory, noisy measurements and filter estimates."""

    times: np.ndarray
    true_x: np.ndarray
    measurement_times: np.ndarray
    measured_x: np.ndarray
    controls: np.ndarray
    estimates: np.ndarray


def _true_position(t: np.ndarray) -> np.ndarray:
    return V0 * t + 0.5 * ACCEL * t * t - (AMPLITUDE / OMEGA**2) * np.sin(OMEGA * t)


def simulate(dt: float = 0.1, t_end: float = 50.0, sigma: float = 400.0,
             seed: int | None = None) -> Simulation:
    """Run the filter over a trajectory sampled every ``dt`` up to ``t_end``."""
    if dt <= 0:
        raise ValueError("dt must be positive")
    if t_end < dt:
        raise ValueError("t_end must be at least dt")
    if sigma <= 0:
        raise ValueError("sigma must be positive")

    count = int(np.floor(t_end / dt + 1e-9)) + 1
    times = np.arange(count) * dt
    true_x = _true_position(times)

    kfilter = KalmanFilter([0.0, V0 - AMPLITUDE / OMEGA], np.eye(2), 1, 1)

    A = np.array([[1.0, dt], [0.0, 1.0]])
    B = np.array([[dt * dt / 2], [dt]])
    Q = np.zeros((2, 2))
    H = np.array([[1.0, 0.0]])
    R = np.array([[sigma * sigma]])

    rng = np.random.default_rng(seed)
    measurement_times = times[1:]
    measured_x = true_x[1:] + rng.normal(0.0, sigma, size=measurement_times.shape)
    controls = ACCEL + AMPLITUDE * np.sin(OMEGA * measurement_times)

    estimates = []
    for measured, control in zip(measured_x, controls):
        kfilter.update(KalmanStep([measured], [control], A, B, R, Q, H))
        estimates.append(kfilter.estimate[0])

    return Simulation(
        times=times,
        true_x=true_x,
        measurement_times=measurement_times,
        measured_x=measured_x,
        controls=controls,
        estimates=np.array(estimates),
    )


def plot_simulation(simulation: Simulation):
    """Draw the trajectory, measurements and estimates; return the figure."""
    import matplotlib.pyplot as plt

    fig, ax = plt.subplots()
    ax.plot(simulation.times, simulation.true_x, linewidth=3.5, label="Exact trajectory")
    ax.plot(simulation.measurement_times, simulation.measured_x, "^", markersize=6,
            color=(0.0, 0.30, 0.0), label="Measurement")
    ax.plot(simulation.measurement_times, simulation.estimates, linestyle="--",
            linewidth=3.5, color=(0.545, 0.0, 0.0), label="Kalman Filter: Estimates")
    ax.set_xlabel("t [s]")
    ax.set_ylabel("x(t) [m]")
    ax.grid(True)
    ax.legend()
    return fig


def main(argv=None) -> int:
    """Simulate, then show the plot or save it to a file."""
    parser = argparse.ArgumentParser(description="Kalman filter tracking demonstration.")
    parser.add_argument("--dt", type=float, default=0.1, help="time step")
    parser.add_argument("--t-end", type=float, default=50.0, help="final time")
    parser.add_argument("--sigma", type=float, default=400.0, help="measurement noise")
    parser.add_argument("--seed", type=int, default=None, help="random seed")
    parser.add_argument("--output", default=None, help="save the plot here instead of showing it")
    args = parser.parse_args(argv)

    try:
        simulation = simulate(args.dt, args.t_end, args.sigma, args.seed)
    except ValueError as exc:
        parser.error(str(exc))

    fig = plot_simulation(simulation)
    if args.output:
        fig.savefig(args.output)
    else:
        import matplotlib.pyplot as plt

        plt.show()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())