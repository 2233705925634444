"""
Back-end registry for one-dimensional interpolators.

Every concrete interpolator shares the call-signature

    f = interp(x, y, ..., extrapolate=False)
    f(x_query), f.derivative(x_query), f.primitive(x_query), ...

Implemented back-ends
---------------------
backward_flat – piece-wise constant, value taken from the right node
forward_flat  – piece-wise constant, value taken from the left node
linear        – C⁰ piece-wise linear
cubic         – C² cubic spline (natural / clamped / not-a-knot, optional
                Hyman monotonicity filter)

Adding new schemes merely requires dropping a module implementing
`class Interpolator` **or** calling `register(tag, cls)` manually.
"""

from importlib import import_module
from types import MappingProxyType
from typing import Dict, Type

from ._base import Interpolation, close_enough

# ---------------------------------------------------------------- registry

_REGISTRY: Dict[str, Type] = {}


def register(tag: str, cls: Type):
    """
    Add a concrete interpolator to the registry.

    Raises
    ------
    ValueError  if `tag` already taken.
    """
    if tag in _REGISTRY:
        raise ValueError(f"Interpolator '{tag}' already registered")
    _REGISTRY[tag] = cls


def get(tag: str) -> Type:
    """Retrieve interpolator class by short name (e.g. ``'cubic'``)."""
    try:
        return _REGISTRY[tag]
    except KeyError as exc:
        raise KeyError(
            f"Unknown interpolator '{tag}'. Available: {list(_REGISTRY)}"
        ) from exc


# ---------------------------------------------------------------- built-ins
# NB: each plug-in module must define a public `Interpolator` class.

for _name in ("linear", "cubic"):
    _mod = import_module(f".{_name}", __name__)
    register(_name, _mod.Interpolator)

# the two flat flavours live in one file; register them explicitly
from .flat import (  # noqa: E402  (after registry helpers)
    BackwardFlat,
    BackwardFlatInterpolation,
    ForwardFlat,
    ForwardFlatInterpolation,
)

register("backward_flat", BackwardFlatInterpolation)
register("forward_flat", ForwardFlatInterpolation)

from .cubic import (  # noqa: E402
    BoundaryCondition,
    ClampedCubicSpline,
    Cubic,
    CubicInterpolation,
    DerivativeApprox,
    NaturalCubicSpline,
    NotAKnotCubicSpline,
)
from .linear import Linear, LinearInterpolation  # noqa: E402

# immutable public view -------------------------------------------------------

available = MappingProxyType(_REGISTRY)  # read-only dict proxy

__all__ = [
    "register",
    "get",
    "available",
    "close_enough",
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
