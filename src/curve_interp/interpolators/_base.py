"""
interpolators._base
===================

Common machinery for every 1-D back-end:

* sample validation (``InvalidInputError``),
* domain checks and the extrapolation switch (``ExtrapolationError``),
* interval location by binary search,
* lazy fitting – the first query triggers ``update()`` if the caller has not.

Concrete classes implement ``_fit()`` plus the four ``_value`` /
``_derivative`` / ``_second_derivative`` / ``_primitive`` kernels.  Each
kernel receives the query array and the matching interval indices and must
be fully vectorised; scalars are handled here.
"""

from __future__ import annotations

import logging
from typing import Callable, Sequence

import numpy as np

from ..errors import ExtrapolationError, InvalidInputError

logger = logging.getLogger(__name__)

__all__ = ["Interpolation", "close_enough"]

_EPS = np.finfo(float).eps


def close_enough(x, y, n: int = 42):
    """Relative float comparison within ``n`` machine epsilons (vectorised)."""
    x = np.asarray(x, dtype=float)
    y = np.asarray(y, dtype=float)
    tol = n * _EPS
    diff = np.abs(x - y)
    near = np.where(
        x * y == 0.0,
        diff < tol * tol,
        (diff <= tol * np.abs(x)) | (diff <= tol * np.abs(y)),
    )
    return (x == y) | near


class Interpolation:
    """Base class – not meant to be instantiated directly."""

    #: minimum number of samples accepted by the scheme
    required_points: int = 2
    #: True when moving one sample changes the curve everywhere
    is_global: bool = False

    # ------------------------------------------------------------------ #
    def __init__(self, x: Sequence[float], y: Sequence[float], *, extrapolate: bool = False):
        """
        Parameters
        ----------
        x : 1-D array-like
            Strictly increasing abscissae.  NumPy float arrays are held by
            reference: mutate them in place and call :meth:`update` to refit.
        y : 1-D array-like
            Ordinates, ``len(y) == len(x)``.
        extrapolate : bool
            Initial state of the extrapolation switch.
        """
        self.x = np.asarray(x, dtype=float)
        self.y = np.asarray(y, dtype=float)
        self._extrapolate = bool(extrapolate)
        self._fitted = False
        self._check_samples()

    # ------------------------------------------------------------------ #
    # validation / fitting
    # ------------------------------------------------------------------ #

    def _check_samples(self) -> None:
        if self.x.ndim != 1 or self.y.ndim != 1:
            raise InvalidInputError("`x` and `y` must be 1-D.")
        if self.x.shape != self.y.shape:
            raise InvalidInputError(
                f"`x` and `y` length mismatch ({self.x.size} vs {self.y.size})."
            )
        if self.x.size < self.required_points:
            raise InvalidInputError(
                f"{type(self).__name__} needs at least {self.required_points} points, "
                f"got {self.x.size}."
            )
        if not (np.all(np.isfinite(self.x)) and np.all(np.isfinite(self.y))):
            raise InvalidInputError("`x` and `y` must be finite.")
        if np.any(self.x[1:] <= self.x[:-1]):
            raise InvalidInputError("`x` must be strictly increasing.")

    def _fit(self) -> None:  # pragma: no cover - abstract
        raise NotImplementedError

    def update(self) -> "Interpolation":
        """(Re)validate the samples and recompute the fit."""
        self._check_samples()
        self._fit()
        self._fitted = True
        logger.debug("%s fitted on %d points", type(self).__name__, self.x.size)
        return self

    # ------------------------------------------------------------------ #
    # domain
    # ------------------------------------------------------------------ #

    def x_min(self) -> float:
        return float(self.x[0])

    def x_max(self) -> float:
        return float(self.x[-1])

    def x_values(self) -> np.ndarray:
        return np.array(self.x, copy=True)

    def y_values(self) -> np.ndarray:
        return np.array(self.y, copy=True)

    def is_in_range(self, x):
        """True where ``x_min <= x <= x_max`` (bounds compared with ``close_enough``)."""
        arr = np.asarray(x, dtype=float)
        lo, hi = self.x[0], self.x[-1]
        ok = ((arr >= lo) & (arr <= hi)) | close_enough(arr, lo) | close_enough(arr, hi)
        return bool(ok) if ok.ndim == 0 else ok

    def enable_extrapolation(self) -> None:
        self._extrapolate = True

    def disable_extrapolation(self) -> None:
        self._extrapolate = False

    def allows_extrapolation(self) -> bool:
        return self._extrapolate

    # ------------------------------------------------------------------ #
    # evaluation plumbing
    # ------------------------------------------------------------------ #

    def _locate(self, x: np.ndarray) -> np.ndarray:
        """Index j of the interval [x_j, x_j+1] used for each query point."""
        idx = np.searchsorted(self.x, x, side="right") - 1
        return np.clip(idx, 0, self.x.size - 2)

    def _check_range(self, x: np.ndarray, allow_extrapolation: bool) -> None:
        if allow_extrapolation or self._extrapolate:
            return
        outside = ~np.asarray(self.is_in_range(x))
        if np.any(outside):
            bad = np.asarray(x)[outside].ravel()[0]
            raise ExtrapolationError(float(bad), self.x_min(), self.x_max())

    def _evaluate(self, kernel: Callable, x, allow_extrapolation: bool):
        if not self._fitted:
            self.update()
        arr = np.asarray(x, dtype=float)
        self._check_range(arr, allow_extrapolation)
        out = kernel(arr, self._locate(arr))
        return float(out) if arr.ndim == 0 else np.asarray(out, dtype=float)

    # ------------------------------------------------------------------ #
    # public API
    # ------------------------------------------------------------------ #

    def value(self, x, allow_extrapolation: bool = False):
        """Interpolated value(s) at *x* (scalar or array)."""
        return self._evaluate(self._value, x, allow_extrapolation)

    def derivative(self, x, allow_extrapolation: bool = False):
        """First derivative at *x*."""
        return self._evaluate(self._derivative, x, allow_extrapolation)

    def second_derivative(self, x, allow_extrapolation: bool = False):
        """Second derivative at *x*."""
        return self._evaluate(self._second_derivative, x, allow_extrapolation)

    def primitive(self, x, allow_extrapolation: bool = False):
        """Integral of the interpolant from ``x_min`` to *x*."""
        return self._evaluate(self._primitive, x, allow_extrapolation)

    __call__ = value

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(n={self.x.size}, "
            f"range=[{self.x_min()}, {self.x_max()}], extrapolate={self._extrapolate})"
        )
