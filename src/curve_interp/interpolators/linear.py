"""
interpolators.linear
====================

Piece-wise **linear** interpolator.

* On each interval *[xᵢ, xᵢ₊₁]*

        f(x) = yᵢ + sᵢ (x − xᵢ),
        sᵢ = (yᵢ₊₁ − yᵢ) / (xᵢ₊₁ − xᵢ).

* The primitive is a quadratic per segment; the knot values are
  accumulated once in ``update()``.

With extrapolation enabled the first/last segment is simply prolonged.
"""

from __future__ import annotations

import numpy as np

from ._base import Interpolation


class LinearInterpolation(Interpolation):
    """Piece-wise linear curve through the samples."""

    def _fit(self) -> None:
        h = np.diff(self.x)
        self._s = np.diff(self.y) / h

        # K_i = ∫ f from x_0 to x_i, one entry per interval
        K = np.zeros(h.size)
        for i in range(1, h.size):
            K[i] = K[i - 1] + h[i - 1] * (self.y[i - 1] + 0.5 * h[i - 1] * self._s[i - 1])
        self._K = K

    def _value(self, x, j):
        return self.y[j] + (x - self.x[j]) * self._s[j]

    def _derivative(self, x, j):
        return self._s[j] + np.zeros_like(x)

    def _second_derivative(self, x, j):
        return np.zeros_like(x)

    def _primitive(self, x, j):
        dx = x - self.x[j]
        return self._K[j] + dx * (self.y[j] + 0.5 * dx * self._s[j])

    def slopes(self) -> np.ndarray:
        """Segment slopes sᵢ (copy)."""
        if not self._fitted:
            self.update()
        return np.array(self._s, copy=True)


class Linear:
    """Factory for :class:`LinearInterpolation`."""

    is_global = False
    required_points = 2

    def interpolate(self, x, y, **kwargs) -> LinearInterpolation:
        return LinearInterpolation(x, y, **kwargs)


# ------------------------------------------------------------------ #
# public alias expected by the registry
# ------------------------------------------------------------------ #
Interpolator = LinearInterpolation

__all__ = ["LinearInterpolation", "Linear", "Interpolator"]
