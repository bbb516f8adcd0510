import numpy as np
import pytest

from kalman.filter import KalmanFilter
from kalman.step import KalmanStep


def _scalar_step(y, R):
    return KalmanStep([y], [0.0], [[1.0]], [[0.0]], [[R]], [[0.0]], [[1.0]])


def test_kalman_filter_initial_state():
    init_P = np.array([[1.0]])
    init_estimate = np.array([1.0])
    kfilter = KalmanFilter(init_estimate, init_P, 1, 1)

    assert kfilter.dy == 1
    assert kfilter.du == 1
    assert kfilter.dx == 1
    np.testing.assert_array_equal(kfilter.P, init_P)
    np.testing.assert_array_equal(kfilter.estimate, init_estimate)
    assert not kfilter.Kg.any()
    assert kfilter.Kg.shape == (1, 1)


def test_verify_step_rejects_mismatched_dimensions():
    kfilter = KalmanFilter(np.zeros(2), np.zeros((2, 2)), 1, 1)
    step = KalmanStep(
        np.zeros(3),
        np.zeros(1),
        np.eye(3),
        np.zeros((3, 1)),
        0.01 * np.eye(3),
        0.1 * np.eye(3),
        np.eye(3),
    )
    with pytest.raises(ValueError):
        kfilter.update(step)


def test_update():
    kfilter = KalmanFilter([0.1], [[1.0]], 1, 1)
    kfilter.update(_scalar_step(-0.1, 1.0))

    assert kfilter.Kg[0, 0] == pytest.approx(0.5, rel=1e-8)
    assert kfilter.P[0, 0] == pytest.approx(0.5, rel=1e-8)
    assert abs(kfilter.estimate[0]) < 1e-6


def test_gain_decreases_with_noise():
    kfilter = KalmanFilter([0.0], [[1.0]], 1, 1)
    gains = []
    for noise in (0.001, 1000.0):
        kfilter.update(_scalar_step(-0.1, noise))
        gains.append(kfilter.Kg[0, 0])
    assert gains[0] > gains[1]


def test_converges_on_perfect_measurements():
    dt = 0.1
    A = np.array([[1.0, dt], [0.0, 1.0]])
    B = np.zeros((2, 0))
    H = np.array([[1.0, 0.0]])
    Q = np.zeros((2, 2))
    R = 1e-6 * np.eye(1)
    u = np.zeros(0)
    y = np.array([10.0])

    kfilter = KalmanFilter([0.0, 1.0], 100 * np.eye(2), 0, 1)
    for _ in range(5):
        kfilter.update(KalmanStep(y, u, A, B, R, Q, H))

    assert abs(kfilter.estimate[0] - 10) < 1e-7
    assert kfilter.P[0, 0] < 1e-6


def test_returned_arrays_are_copies():
    kfilter = KalmanFilter([1.0], [[1.0]], 1, 1)
    kfilter.estimate[0] = 42.0
    kfilter.P[0, 0] = 42.0
    assert kfilter.estimate[0] == 1.0
    assert kfilter.P[0, 0] == 1.0


def test_covariance_stays_symmetric():
    dt = 0.1
    kfilter = KalmanFilter([0.0, 0.0], np.eye(2), 1, 1)
    step = KalmanStep([1.0], [0.5], [[1.0, dt], [0.0, 1.0]], [[dt * dt / 2], [dt]],
                      [[0.25]], 0.01 * np.eye(2), [[1.0, 0.0]])
    for _ in range(10):
        kfilter.update(step)
    np.testing.assert_allclose(kfilter.P, kfilter.P.T, atol=1e-12)