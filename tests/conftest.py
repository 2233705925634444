"""
Shared fixtures and sample-set builders for the interpolation tests.

Data sets follow the literature used to validate spline schemes:

* Gaussian exp(−x²) samples – Hyman (1983) accuracy tables;
* RPN15A – a steep, almost-step monotone set on which unfiltered splines
  overshoot 1.0;
* y = −x² on four points – exact cubic end conditions.
"""

import matplotlib

matplotlib.use("Agg")

import numpy as np  # noqa: E402
import pytest  # noqa: E402

RPN15A_X = [7.99, 8.09, 8.19, 8.7, 9.2, 10.0, 12.0, 15.0, 20.0]
RPN15A_Y = [0.0, 2.76429e-5, 4.37498e-5, 0.169183, 0.469428, 0.943740, 0.998636, 0.999919, 0.999994]


def x_range(start: float, finish: float, points: int) -> np.ndarray:
    """Uniform grid built as start + i·dx with the last node pinned to *finish*."""
    dx = (finish - start) / (points - 1)
    x = [start + i * dx for i in range(points - 1)]
    x.append(finish)
    return np.asarray(x)


def gaussian(x) -> np.ndarray:
    x = np.asarray(x, dtype=float)
    return np.exp(-x * x)


def parabolic(x) -> np.ndarray:
    x = np.asarray(x, dtype=float)
    return -x * x


@pytest.fixture
def rpn15a():
    return np.asarray(RPN15A_X), np.asarray(RPN15A_Y)


@pytest.fixture
def generic_samples():
    """Blossey/Frigyik/Farnum spline-note example."""
    return np.array([0.0, 1.0, 3.0, 4.0]), np.array([0.0, 0.0, 2.0, 2.0])


@pytest.fixture
def parabola4():
    x = x_range(-2.0, 2.0, 4)
    return x, parabolic(x)


@pytest.fixture
def step_samples():
    """Decreasing staircase used by the flat/linear tests."""
    return np.array([0.0, 1.0, 2.0, 3.0, 4.0]), np.array([5.0, 4.0, 3.0, 2.0, 1.0])
