"""
curve_interp.errors
===================

Exception hierarchy shared by every interpolator.

* :class:`InvalidInputError`  – malformed samples or options, raised at
  construction / ``update()``.
* :class:`ExtrapolationError` – query outside ``[x_min, x_max]`` while
  extrapolation is disabled.

Both derive from ``ValueError`` so callers that only catch the builtin keep
working.
"""

from __future__ import annotations


class InterpolationError(Exception):
    """Root of all errors raised by :mod:`curve_interp`."""


class InvalidInputError(InterpolationError, ValueError):
    """Samples or fit options are not usable (size, ordering, conditions)."""


class ExtrapolationError(InterpolationError, ValueError):
    """Evaluation requested outside the sample domain."""

    def __init__(self, x: float, x_min: float, x_max: float):
        self.x = x
        self.x_min = x_min
        self.x_max = x_max
        super().__init__(
            f"interpolation range is [{x_min}, {x_max}]: "
            f"extrapolation at {x} not allowed"
        )

    def __reduce__(self):
        return type(self), (self.x, self.x_min, self.x_max)


__all__ = ["InterpolationError", "InvalidInputError", "ExtrapolationError"]
