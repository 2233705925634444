"""
interpolators.cubic
===================

**C² cubic-spline** interpolation with independent end conditions and an
optional monotonicity (Hyman) filter.

On every interval the curve is the cubic Hermite polynomial

    P(x) = yᵢ + aᵢ h + bᵢ h² + cᵢ h³,      h = x − xᵢ

whose knot slopes solve the classical tri-diagonal continuity system
(first and second derivative continuous at every interior knot), closed by
one equation per end:

* ``NOT_A_KNOT``        – third derivative continuous across x₁ / xₙ₋₂,
* ``FIRST_DERIVATIVE``  – clamped end slope,
* ``SECOND_DERIVATIVE`` – prescribed end curvature (0 ⇒ natural spline).

With ``monotonic=True`` the solved slopes go through the non-restrictive
Dougherty/Edelman/Hyman filter, which removes spurious extrema where the
data are locally monotone.  The second derivative is then no longer
continuous at the adjusted knots.

Implementation notes
--------------------
*  The system is assembled with NumPy and solved by the Numba Thomas kernel
   in :mod:`._core` – O(n).
*  The running integral at the knots is pre-computed so ``primitive`` is a
   bracket + one Horner step.

Example
-------
>>> from curve_interp.interpolators import get
>>> x = [7.99, 8.09, 8.19, 8.7, 9.2, 10.0, 12.0, 15.0, 20.0]
>>> y = [0.0, 2.76429e-5, 4.37498e-5, 0.169183, 0.469428,
...      0.943740, 0.998636, 0.999919, 0.999994]
>>> mc = get("cubic")(x, y, monotonic=True)
>>> mc(11.0) < 1.0
True
"""

from __future__ import annotations

import enum
import logging
from typing import Sequence

import numpy as np

from ..errors import InvalidInputError
from ._base import Interpolation
from ._core import (
    cubic_coefficients,
    cubic_primitive_constants,
    hyman_filter,
    solve_tridiagonal,
)

logger = logging.getLogger(__name__)


class _ParsableEnum(enum.Enum):
    @classmethod
    def parse(cls, value):
        """Accept a member, its value or its (case-insensitive) name."""
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            key = value.strip().replace("-", "_").lower()
            for member in cls:
                if key in (member.value, member.name.lower()):
                    return member
        raise InvalidInputError(
            f"unknown {cls.__name__} {value!r}; expected one of {[m.value for m in cls]}"
        )


class BoundaryCondition(_ParsableEnum):
    """End condition applied independently on each side."""

    NOT_A_KNOT = "not_a_knot"
    FIRST_DERIVATIVE = "first_derivative"
    SECOND_DERIVATIVE = "second_derivative"


class DerivativeApprox(_ParsableEnum):
    """How knot slopes are obtained before filtering."""

    SPLINE = "spline"


class _TriDiag:
    """
    Assemble the slope system  L·t = r  for the spline scheme.

    Rows are stored as three diagonals: ``lower[i-1]``, ``diag[i]`` and
    ``upper[i]`` belong to row *i*.
    """

    @staticmethod
    def build(
        dx: np.ndarray,
        S: np.ndarray,
        left: BoundaryCondition,
        left_value: float,
        right: BoundaryCondition,
        right_value: float,
    ):
        n = dx.size + 1
        lower = np.zeros(n - 1)
        diag = np.zeros(n)
        upper = np.zeros(n - 1)
        rhs = np.zeros(n)

        # interior rows – C² continuity
        i = np.arange(1, n - 1)
        lower[i - 1] = dx[i]
        diag[i] = 2.0 * (dx[i] + dx[i - 1])
        upper[i] = dx[i - 1]
        rhs[i] = 3.0 * (dx[i] * S[i - 1] + dx[i - 1] * S[i])

        # left end
        if left is BoundaryCondition.NOT_A_KNOT:
            diag[0] = dx[1] * (dx[1] + dx[0])
            upper[0] = (dx[0] + dx[1]) * (dx[0] + dx[1])
            rhs[0] = S[0] * dx[1] * (2.0 * dx[1] + 3.0 * dx[0]) + S[1] * dx[0] * dx[0]
        elif left is BoundaryCondition.FIRST_DERIVATIVE:
            diag[0], upper[0] = 1.0, 0.0
            rhs[0] = left_value
        else:
            diag[0], upper[0] = 2.0, 1.0
            rhs[0] = 3.0 * S[0] - left_value * dx[0] / 2.0

        # right end
        k = n - 1
        if right is BoundaryCondition.NOT_A_KNOT:
            lower[k - 1] = -(dx[k - 1] + dx[k - 2]) * (dx[k - 1] + dx[k - 2])
            diag[k] = -dx[k - 2] * (dx[k - 2] + dx[k - 1])
            rhs[k] = -S[k - 2] * dx[k - 1] * dx[k - 1] - S[k - 1] * dx[k - 2] * (
                3.0 * dx[k - 1] + 2.0 * dx[k - 2]
            )
        elif right is BoundaryCondition.FIRST_DERIVATIVE:
            lower[k - 1], diag[k] = 0.0, 1.0
            rhs[k] = right_value
        else:
            lower[k - 1], diag[k] = 1.0, 2.0
            rhs[k] = 3.0 * S[k - 1] + right_value * dx[k - 1] / 2.0

        return lower, diag, upper, rhs


class CubicInterpolation(Interpolation):
    """Cubic spline with configurable end conditions."""

    is_global = True

    # ------------------------------------------------------------------ #
    def __init__(
        self,
        x: Sequence[float],
        y: Sequence[float],
        derivative_approx: DerivativeApprox | str = DerivativeApprox.SPLINE,
        monotonic: bool = False,
        left_condition: BoundaryCondition | str = BoundaryCondition.SECOND_DERIVATIVE,
        left_value: float = 0.0,
        right_condition: BoundaryCondition | str = BoundaryCondition.SECOND_DERIVATIVE,
        right_value: float = 0.0,
        *,
        extrapolate: bool = False,
    ):
        """
        Parameters
        ----------
        x, y : 1-D array-like
            Samples; ``x`` strictly increasing, at least two points plus one
            per ``NOT_A_KNOT`` end.
        derivative_approx : DerivativeApprox
            Only ``SPLINE`` (global C² solve) is available.
        monotonic : bool
            Apply the Hyman filter to the solved slopes.
        left_condition, right_condition : BoundaryCondition or str
            End conditions; strings such as ``"not_a_knot"`` are accepted.
        left_value, right_value : float
            Slope (``FIRST_DERIVATIVE``) or curvature
            (``SECOND_DERIVATIVE``) at the end; ignored for ``NOT_A_KNOT``.
        """
        self.derivative_approx = DerivativeApprox.parse(derivative_approx)
        self.monotonic = bool(monotonic)
        self.left_condition = BoundaryCondition.parse(left_condition)
        self.right_condition = BoundaryCondition.parse(right_condition)
        self.left_value = float(left_value)
        self.right_value = float(right_value)
        super().__init__(x, y, extrapolate=extrapolate)

    def _check_samples(self) -> None:
        super()._check_samples()
        # each not-a-knot end consumes one interior knot; both ends on three
        # points give the same equation twice
        ends = (self.left_condition, self.right_condition)
        needed = 2 + ends.count(BoundaryCondition.NOT_A_KNOT)
        if self.x.size < needed:
            raise InvalidInputError(
                f"not-a-knot on {'both ends' if needed == 4 else 'one end'} "
                f"needs at least {needed} points, got {self.x.size}."
            )

    # ------------------------------------------------------------------ #
    def _fit(self) -> None:
        x = np.ascontiguousarray(self.x, dtype=np.float64)
        y = np.ascontiguousarray(self.y, dtype=np.float64)
        dx = np.diff(x)
        S = np.diff(y) / dx

        lower, diag, upper, rhs = _TriDiag.build(
            dx, S, self.left_condition, self.left_value, self.right_condition, self.right_value
        )
        try:
            slopes = solve_tridiagonal(lower, diag, upper, rhs)
        except ZeroDivisionError as exc:
            raise InvalidInputError("spline system is singular for these samples") from exc

        if self.monotonic:
            slopes, adjusted = hyman_filter(slopes, S, dx)
        else:
            adjusted = np.zeros(x.size, dtype=bool)

        self._slopes = slopes
        self._adjusted = adjusted
        self._a, self._b, self._c = cubic_coefficients(slopes, S, dx)
        self._K = cubic_primitive_constants(y, dx, self._a, self._b, self._c)

        logger.debug(
            "cubic spline: n=%d left=%s(%g) right=%s(%g) monotonic=%s adjusted=%d",
            x.size,
            self.left_condition.value,
            self.left_value,
            self.right_condition.value,
            self.right_value,
            self.monotonic,
            int(adjusted.sum()),
        )

    # ------------------------------------------------------------------ #
    # kernels
    # ------------------------------------------------------------------ #

    def _value(self, x, j):
        h = x - self.x[j]
        return self.y[j] + h * (self._a[j] + h * (self._b[j] + h * self._c[j]))

    def _derivative(self, x, j):
        h = x - self.x[j]
        return self._a[j] + (2.0 * self._b[j] + 3.0 * self._c[j] * h) * h

    def _second_derivative(self, x, j):
        h = x - self.x[j]
        return 2.0 * self._b[j] + 6.0 * self._c[j] * h

    def _primitive(self, x, j):
        h = x - self.x[j]
        return self._K[j] + h * (
            self.y[j] + h * (self._a[j] / 2.0 + h * (self._b[j] / 3.0 + h * self._c[j] / 4.0))
        )

    # ------------------------------------------------------------------ #
    # fitted-state accessors (copies)
    # ------------------------------------------------------------------ #

    def _fitted_copy(self, name: str) -> np.ndarray:
        if not self._fitted:
            self.update()
        return np.array(getattr(self, name), copy=True)

    def a_coefficients(self) -> np.ndarray:
        """Linear coefficients aᵢ (knot slopes of each interval's left end)."""
        return self._fitted_copy("_a")

    def b_coefficients(self) -> np.ndarray:
        """Quadratic coefficients bᵢ."""
        return self._fitted_copy("_b")

    def c_coefficients(self) -> np.ndarray:
        """Cubic coefficients cᵢ."""
        return self._fitted_copy("_c")

    def primitive_constants(self) -> np.ndarray:
        return self._fitted_copy("_K")

    def knot_derivatives(self) -> np.ndarray:
        """Slopes at all n knots after filtering."""
        return self._fitted_copy("_slopes")

    def monotonicity_adjustments(self) -> np.ndarray:
        """Boolean mask of knots whose slope the Hyman filter changed."""
        return self._fitted_copy("_adjusted")


# -------------------------------------------------------------------------
# Named variants
# -------------------------------------------------------------------------


class NaturalCubicSpline(CubicInterpolation):
    """Zero curvature at both ends."""

    def __init__(self, x, y, monotonic: bool = False, *, extrapolate: bool = False):
        super().__init__(
            x,
            y,
            DerivativeApprox.SPLINE,
            monotonic,
            BoundaryCondition.SECOND_DERIVATIVE,
            0.0,
            BoundaryCondition.SECOND_DERIVATIVE,
            0.0,
            extrapolate=extrapolate,
        )


class ClampedCubicSpline(CubicInterpolation):
    """Prescribed slopes at both ends."""

    def __init__(
        self,
        x,
        y,
        left_slope: float = 0.0,
        right_slope: float = 0.0,
        monotonic: bool = False,
        *,
        extrapolate: bool = False,
    ):
        super().__init__(
            x,
            y,
            DerivativeApprox.SPLINE,
            monotonic,
            BoundaryCondition.FIRST_DERIVATIVE,
            left_slope,
            BoundaryCondition.FIRST_DERIVATIVE,
            right_slope,
            extrapolate=extrapolate,
        )


class NotAKnotCubicSpline(CubicInterpolation):
    """Third derivative continuous across the second and penultimate knots."""

    def __init__(self, x, y, monotonic: bool = False, *, extrapolate: bool = False):
        super().__init__(
            x,
            y,
            DerivativeApprox.SPLINE,
            monotonic,
            BoundaryCondition.NOT_A_KNOT,
            0.0,
            BoundaryCondition.NOT_A_KNOT,
            0.0,
            extrapolate=extrapolate,
        )


# -------------------------------------------------------------------------
# Factory
# -------------------------------------------------------------------------


class Cubic:
    """Carries spline options; :meth:`interpolate` builds the curve."""

    is_global = True
    required_points = 2

    def __init__(
        self,
        derivative_approx: DerivativeApprox | str = DerivativeApprox.SPLINE,
        monotonic: bool = False,
        left_condition: BoundaryCondition | str = BoundaryCondition.SECOND_DERIVATIVE,
        left_value: float = 0.0,
        right_condition: BoundaryCondition | str = BoundaryCondition.SECOND_DERIVATIVE,
        right_value: float = 0.0,
    ):
        self.derivative_approx = DerivativeApprox.parse(derivative_approx)
        self.monotonic = bool(monotonic)
        self.left_condition = BoundaryCondition.parse(left_condition)
        self.left_value = float(left_value)
        self.right_condition = BoundaryCondition.parse(right_condition)
        self.right_value = float(right_value)

    def interpolate(self, x, y, **kwargs) -> CubicInterpolation:
        return CubicInterpolation(
            x,
            y,
            self.derivative_approx,
            self.monotonic,
            self.left_condition,
            self.left_value,
            self.right_condition,
            self.right_value,
            **kwargs,
        )


# ---------------------------------------------------------------------------
# public alias expected by the registry
Interpolator = CubicInterpolation

__all__ = [
    "BoundaryCondition",
    "DerivativeApprox",
    "CubicInterpolation",
    "NaturalCubicSpline",
    "ClampedCubicSpline",
    "NotAKnotCubicSpline",
    "Cubic",
    "Interpolator",
]
