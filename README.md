# kalman

A small linear Kalman filter built on NumPy.

The filter stores three things: a state estimate, the covariance `P` of that
estimate, and the Kalman gain `Kg` from the most recent update. Each update
takes one `KalmanStep`. A step carries the measurement and control vectors for
one moment in time. It also carries the dynamics matrices (`A`, `B`), the noise
matrices (`Q`, `R`) and the measurement matrix (`H`) that apply at that moment.
Since every step brings its own matrices, a model that changes over time needs
no special handling.

## Installation

```
pip install .
```

To run the tests, install the test extra and then run pytest:

```
pip install ".[test]"
pytest
```

## Usage

```python
import numpy as np
from kalman.filter import KalmanFilter
from kalman.step import KalmanStep

kf = KalmanFilter(init_estimate=np.array([0.1]), init_P=np.array([[1.0]]), du=1, dy=1)

step = KalmanStep(
    y=np.array([-0.1]),    # measurement, size dy
    u=np.array([0.0]),     # control, size du
    A=np.array([[1.0]]),   # state transition, dx x dx
    B=np.array([[0.0]]),   # control input, dx x du
    R=np.array([[1.0]]),   # measurement noise, dy x dy
    Q=np.array([[0.0]]),   # process noise, dx x dx
    H=np.array([[1.0]]),   # measurement model, dy x dx
)
kf.update(step)

print(kf.estimate)  # ~[0.0]
print(kf.P)         # [[0.5]]
print(kf.Kg)        # [[0.5]]
```

### `KalmanStep`

`KalmanStep` converts its inputs to float arrays. Scalars and lists are
accepted. The arrays are stored read-only as the attributes `y`, `u`, `A`, `B`,
`R`, `Q` and `H`. The dimensions come from the inputs:

* `dx` is the number of rows of `Q`.
* `dy` is the length of `y`.
* `du` is the length of `u`.

A zero-length control vector is allowed. Use `u` of size 0 together with a
`B` of shape `(dx, 0)`.

### `KalmanFilter`

The filter exposes these members:

* `estimate` is the current state estimate.
* `P` is the current covariance of the estimate.
* `Kg` is the Kalman gain. It is all zeros until the first update.
* `dx`, `dy` and `du` are the sizes of the state, measurement and control
  vectors.

`estimate`, `P` and `Kg` return copies, so changing them does not affect the
filter.

Each call to `update(step)` runs the standard cycle:

1. Predict the state: `x = A x + B u`.
2. Predict the covariance: `P = A P Aᵀ + Q`.
3. Compute the gain: `Kg = P Hᵀ (R + H P Hᵀ)⁻¹`.
4. Update the covariance: `P = (I − Kg H) P`.
5. Update the estimate: `x = x + Kg (y − H x)`.

### Errors

* `KalmanStep` raises `ValueError` in two cases:
  * `y` or `u` is not one-dimensional, or a matrix is not two-dimensional.
  * The shapes do not agree. The required shapes are: `R` is `(dy, dy)`, `B`
    has `du` columns, `Q` and `A` are `(dx, dx)`, and `H` is `(dy, dx)`.
* `KalmanFilter` raises `ValueError` if `init_estimate` is not one-dimensional.
* `KalmanFilter.update` raises `ValueError` if the step's `dx`, `dy` or `du`
  differs from the filter's.

## Example

`kalman.example` tracks a body that moves under a known, oscillating
acceleration. The filter sees only noisy measurements of its position.

* `simulate(dt=0.1, t_end=50.0, sigma=400.0, seed=None)` runs the filter and
  returns a `Simulation` with these fields:
  * `times` and `true_x`: the exact trajectory.
  * `measurement_times`, `measured_x` and `controls`: the measurements and the
    control inputs.
  * `estimates`: the filter's position estimates.

  It raises `ValueError` in any of these cases:
  * `dt` is not positive.
  * `t_end` is smaller than `dt`.
  * `sigma` is not positive.
* `plot_simulation(simulation)` draws the trajectory, the measurements and the
  estimates with matplotlib, and returns the figure.

Run the example from the command line:

```
kalman-example
```

The command takes these options:

* `--dt` sets the time step.
* `--t-end` sets the final time.
* `--sigma` sets the measurement noise.
* `--seed` sets the random seed.
* `--output FILE` saves the plot to `FILE` instead of showing it in a window.

Run it from Python:

```python
from kalman.example import simulate, plot_simulation

sim = simulate(dt=0.1, t_end=50.0, sigma=400.0, seed=1)
fig = plot_simulation(sim)
fig.savefig("tracking.png")
```