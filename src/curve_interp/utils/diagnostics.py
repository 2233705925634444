"""
utils.diagnostics
=================

Stateless accuracy / shape checks for fitted interpolants.

Key functions
-------------
l2_error(interp, func, a, b)        → float
    √∫ₐᵇ (interp − func)² – the error norm used in Hyman (1983) to compare
    spline schemes on Gaussian data.

max_abs_error(interp, x, y)         → float
    Largest deviation from reference samples.

overshoot_intervals(interp)         → list[int]
    Intervals where the curve leaves the range spanned by its two end
    samples, i.e. spurious extrema between knots.
"""

from __future__ import annotations

from typing import Callable, List, Sequence

import numpy as np
from scipy.integrate import simpson

from ..interpolators import Interpolation

__all__ = ["l2_error", "max_abs_error", "overshoot_intervals"]

Array = np.ndarray


def l2_error(
    interp: Interpolation,
    func: Callable[[Array], Array],
    a: float,
    b: float,
    *,
    points: int = 20001,
) -> float:
    """
    L2 norm of ``interp − func`` on ``[a, b]`` (composite Simpson rule).

    ``points`` is forced odd so Simpson's rule is exact on the last panel.
    """
    if points % 2 == 0:
        points += 1
    grid = np.linspace(a, b, points)
    err = interp.value(grid, allow_extrapolation=True) - func(grid)
    return float(np.sqrt(simpson(err * err, x=grid)))


def max_abs_error(interp: Interpolation, x: Sequence[float], y: Sequence[float]) -> float:
    """max |interp(xᵢ) − yᵢ| over the reference samples."""
    x = np.asarray(x, dtype=float)
    y = np.asarray(y, dtype=float)
    return float(np.max(np.abs(interp.value(x, allow_extrapolation=True) - y)))


def overshoot_intervals(
    interp: Interpolation,
    *,
    samples_per_interval: int = 65,
    rtol: float = 1e-12,
) -> List[int]:
    """
    Indices *i* such that the curve on [xᵢ, xᵢ₊₁] exits
    [min(yᵢ, yᵢ₊₁), max(yᵢ, yᵢ₊₁)] by more than ``rtol`` (relative to the
    data range).
    """
    x, y = interp.x_values(), interp.y_values()
    scale = max(float(np.ptp(y)), 1.0) * rtol
    bad: list[int] = []
    for i in range(x.size - 1):
        grid = np.linspace(x[i], x[i + 1], samples_per_interval)
        v = interp.value(grid)
        lo, hi = min(y[i], y[i + 1]), max(y[i], y[i + 1])
        if np.any(v > hi + scale) or np.any(v < lo - scale):
            bad.append(i)
    return bad
