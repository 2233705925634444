"""
interpolators.flat
==================

Piece-wise **constant** interpolation, in the two flavours used for
term-structure nodes:

* :class:`BackwardFlatInterpolation` – on (xᵢ, xᵢ₊₁] the curve equals
  yᵢ₊₁ (each node value is carried *backward* to the previous node);
* :class:`ForwardFlatInterpolation`  – on [xᵢ, xᵢ₊₁) the curve equals
  yᵢ (each node value is carried *forward* to the next node).

Because the segment value is constant the primitive is a running
rectangle sum and the derivatives vanish identically.  Outside the sample
range (extrapolation enabled) the boundary value is held constant.

>>> from curve_interp.interpolators import get
>>> f = get("backward_flat")([0, 1, 2, 3, 4], [5, 4, 3, 2, 1])
>>> f(1.5)
3.0
"""

from __future__ import annotations

import numpy as np

from ._base import Interpolation


class _FlatBase(Interpolation):
    """Shared fit: rectangle-rule primitive at the knots."""

    def _node_values(self) -> np.ndarray:  # pragma: no cover - abstract
        raise NotImplementedError

    def _fit(self) -> None:
        dx = np.diff(self.x)
        self._K = np.concatenate([np.zeros(1), np.cumsum(dx * self._node_values())])

    def _derivative(self, x, j):
        return np.zeros_like(x)

    def _second_derivative(self, x, j):
        return np.zeros_like(x)


class BackwardFlatInterpolation(_FlatBase):
    """Value on each segment taken from its right-hand node."""

    def _node_values(self) -> np.ndarray:
        return self.y[1:]

    def _value(self, x, j):
        inner = np.where(x == self.x[j], self.y[j], self.y[j + 1])
        return np.where(x <= self.x[0], self.y[0], inner)

    def _primitive(self, x, j):
        return self._K[j] + (x - self.x[j]) * self.y[j + 1]


class ForwardFlatInterpolation(_FlatBase):
    """Value on each segment taken from its left-hand node."""

    def _node_values(self) -> np.ndarray:
        return self.y[:-1]

    def _value(self, x, j):
        return np.where(x >= self.x[-1], self.y[-1], self.y[j])

    def _primitive(self, x, j):
        return self._K[j] + (x - self.x[j]) * self.y[j]


# -------------------------------------------------------------------------
# Factories – carry no parameters, kept for symmetry with `Cubic`
# -------------------------------------------------------------------------


class BackwardFlat:
    """Factory for :class:`BackwardFlatInterpolation`."""

    is_global = False
    required_points = 2

    def interpolate(self, x, y, **kwargs) -> BackwardFlatInterpolation:
        return BackwardFlatInterpolation(x, y, **kwargs)


class ForwardFlat:
    """Factory for :class:`ForwardFlatInterpolation`."""

    is_global = False
    required_points = 2

    def interpolate(self, x, y, **kwargs) -> ForwardFlatInterpolation:
        return ForwardFlatInterpolation(x, y, **kwargs)


__all__ = [
    "BackwardFlatInterpolation",
    "ForwardFlatInterpolation",
    "BackwardFlat",
    "ForwardFlat",
]
