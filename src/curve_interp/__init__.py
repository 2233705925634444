"""
One-dimensional interpolation for term-structure style curves.

Public interface
----------------
* **CubicInterpolation** – C² cubic spline, natural / clamped / not-a-knot
  ends, optional Hyman monotonicity filter; plus the
  **NaturalCubicSpline**, **ClampedCubicSpline**, **NotAKnotCubicSpline**
  shortcuts.
* **BackwardFlatInterpolation**, **ForwardFlatInterpolation**,
  **LinearInterpolation** – simpler schemes with the same contract.
* **SplineConfig** – declarative (YAML/JSON-friendly) curve options.
* **interpolators.get(name)** – registry lookup.
* **InvalidInputError**, **ExtrapolationError** – error taxonomy.
"""

from typing import Any, Callable

# ---------------------------------------------------------------------------
# Public re-exports
# ---------------------------------------------------------------------------
from . import interpolators as interpolators  # noqa: F401 – re-export
from .config import SplineConfig
from .errors import ExtrapolationError, InterpolationError, InvalidInputError
from .interpolators import (
    BackwardFlat,
    BackwardFlatInterpolation,
    BoundaryCondition,
    ClampedCubicSpline,
    Cubic,
    CubicInterpolation,
    DerivativeApprox,
    ForwardFlat,
    ForwardFlatInterpolation,
    Interpolation,
    Linear,
    LinearInterpolation,
    NaturalCubicSpline,
    NotAKnotCubicSpline,
)
from .interpolators import get as _get_interp

__version__ = "0.1.0"

# ---------------------------------------------------------------------------
# Convenience wrapper
# ---------------------------------------------------------------------------


def interpolator(name: str) -> Callable[..., Any]:
    """Shortcut so callers can do ``curve_interp.interpolator("cubic")``."""
    return _get_interp(name)


__all__ = [
    "interpolators",
    "interpolator",
    "SplineConfig",
    "InterpolationError",
    "InvalidInputError",
    "ExtrapolationError",
    "Interpolation",
    "BackwardFlat",
    "BackwardFlatInterpolation",
    "ForwardFlat",
    "ForwardFlatInterpolation",
    "Linear",
    "LinearInterpolation",
    "BoundaryCondition",
    "DerivativeApprox",
    "Cubic",
    "CubicInterpolation",
    "NaturalCubicSpline",
    "ClampedCubicSpline",
    "NotAKnotCubicSpline",
]
