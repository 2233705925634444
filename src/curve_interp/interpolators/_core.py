"""
Low-level numerics – JIT-compiled kernels used by the cubic back-end.

* :func:`solve_tridiagonal`         – Thomas algorithm, O(n)
* :func:`hyman_filter`              – Dougherty/Edelman/Hyman slope limiter
* :func:`cubic_coefficients`        – Hermite slopes ↦ power-basis coefficients
* :func:`cubic_primitive_constants` – running integral at the knots

All routines are purely functional (no globals, no Python objects) so that
Numba can compile them in *nopython* mode.  ``fastmath`` stays off: the
spline must reproduce its samples and end conditions to a few ULPs, and
re-associated arithmetic breaks that.
"""

from __future__ import annotations

import numpy as np
from numba import njit

__all__ = [
    "solve_tridiagonal",
    "hyman_filter",
    "cubic_coefficients",
    "cubic_primitive_constants",
]


# ---------------------------------------------------------------------------
# Linear algebra
# ---------------------------------------------------------------------------


@njit(cache=True)
def solve_tridiagonal(
    lower: np.ndarray,  # (n-1,)  sub-diagonal, lower[i-1] sits on row i
    diag: np.ndarray,  # (n,)
    upper: np.ndarray,  # (n-1,)  super-diagonal, upper[i] sits on row i
    rhs: np.ndarray,  # (n,)
) -> np.ndarray:
    """Solve ``L · u = rhs`` for a tridiagonal ``L``.

    Raises ``ZeroDivisionError`` on a vanishing pivot; no pivoting is done,
    the spline systems are diagonally dominant except for the not-a-knot
    rows, which are safe for strictly increasing abscissae.
    """
    n = diag.size
    result = np.empty(n)
    work = np.empty(n)

    bet = diag[0]
    if bet == 0.0:
        raise ZeroDivisionError("singular tridiagonal system")
    result[0] = rhs[0] / bet

    for j in range(1, n):
        work[j] = upper[j - 1] / bet
        bet = diag[j] - lower[j - 1] * work[j]
        if bet == 0.0:
            raise ZeroDivisionError("singular tridiagonal system")
        result[j] = (rhs[j] - lower[j - 1] * result[j - 1]) / bet

    for j in range(n - 2, -1, -1):
        result[j] -= work[j + 1] * result[j + 1]
    return result


# ---------------------------------------------------------------------------
# Monotonicity filter
# ---------------------------------------------------------------------------


@njit(cache=True)
def _clip(slope: float, bound: float) -> float:
    return slope / abs(slope) * min(abs(slope), bound)


@njit(cache=True)
def hyman_filter(slopes: np.ndarray, S: np.ndarray, dx: np.ndarray):
    """Non-restrictive Hyman filter on knot slopes.

    Parameters
    ----------
    slopes : (n,) first derivatives at the knots (not modified)
    S      : (n-1,) secant slopes
    dx     : (n-1,) interval widths

    Returns
    -------
    filtered : (n,) float array
    adjusted : (n,) bool array – True where the slope was changed

    Notes
    -----
    R. L. Dougherty, A. Edelman, J. M. Hyman, "Nonnegativity-, Monotonicity-,
    or Convexity-Preserving Cubic and Quintic Hermite Interpolation",
    Math. Comp. 52 (186), 1989, pp. 471-494.
    """
    n = slopes.size
    out = slopes.copy()
    adjusted = np.zeros(n, dtype=np.bool_)

    for i in range(n):
        t = out[i]
        if i == 0:
            correction = _clip(t, abs(3.0 * S[0])) if t * S[0] > 0.0 else 0.0
        elif i == n - 1:
            correction = _clip(t, abs(3.0 * S[n - 2])) if t * S[n - 2] > 0.0 else 0.0
        else:
            pm = (S[i - 1] * dx[i] + S[i] * dx[i - 1]) / (dx[i - 1] + dx[i])
            M = 3.0 * min(min(abs(S[i - 1]), abs(S[i])), abs(pm))
            if i > 1:
                if (S[i - 1] - S[i - 2]) * (S[i] - S[i - 1]) > 0.0:
                    pd = (S[i - 1] * (2.0 * dx[i - 1] + dx[i - 2]) - S[i - 2] * dx[i - 1]) / (
                        dx[i - 2] + dx[i - 1]
                    )
                    if pm * pd > 0.0 and pm * (S[i - 1] - S[i - 2]) > 0.0:
                        M = max(M, 1.5 * min(abs(pm), abs(pd)))
            if i < n - 2:
                if (S[i] - S[i - 1]) * (S[i + 1] - S[i]) > 0.0:
                    pu = (S[i] * (2.0 * dx[i] + dx[i + 1]) - S[i + 1] * dx[i]) / (dx[i] + dx[i + 1])
                    if pm * pu > 0.0 and -pm * (S[i] - S[i - 1]) > 0.0:
                        M = max(M, 1.5 * min(abs(pm), abs(pu)))
            correction = _clip(t, M) if t * pm > 0.0 else 0.0

        if correction != t:
            out[i] = correction
            adjusted[i] = True
    return out, adjusted


# ---------------------------------------------------------------------------
# Piece-wise polynomial coefficients
# ---------------------------------------------------------------------------


@njit(cache=True)
def cubic_coefficients(slopes: np.ndarray, S: np.ndarray, dx: np.ndarray):
    """
    Coefficients such that on [xᵢ, xᵢ₊₁]

        P(x) = yᵢ + aᵢ·h + bᵢ·h² + cᵢ·h³,   h = x − xᵢ
    """
    m = dx.size
    a = np.empty(m)
    b = np.empty(m)
    c = np.empty(m)
    for i in range(m):
        a[i] = slopes[i]
        b[i] = (3.0 * S[i] - slopes[i + 1] - 2.0 * slopes[i]) / dx[i]
        c[i] = (slopes[i + 1] + slopes[i] - 2.0 * S[i]) / (dx[i] * dx[i])
    return a, b, c


@njit(cache=True)
def cubic_primitive_constants(
    y: np.ndarray, dx: np.ndarray, a: np.ndarray, b: np.ndarray, c: np.ndarray
) -> np.ndarray:
    """Kᵢ = ∫ P from x₀ to xᵢ, one entry per interval (K₀ = 0)."""
    m = dx.size
    K = np.zeros(m)
    for i in range(1, m):
        h = dx[i - 1]
        K[i] = K[i - 1] + h * (y[i - 1] + h * (a[i - 1] / 2.0 + h * (b[i - 1] / 3.0 + h * c[i - 1] / 4.0)))
    return K
