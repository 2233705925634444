"""
curve_interp.config
===================

Declarative description of an interpolant, so curves can be configured from
YAML/JSON (see :func:`curve_interp.utils.data.load_yaml`) instead of code.

>>> cfg = SplineConfig.from_mapping({"kind": "cubic", "monotonic": True,
...                                  "left_condition": "first_derivative"})
>>> f = cfg.build([0.0, 1.0, 2.0, 3.0], [1.0, 3.0, 2.0, 4.0])
"""

from __future__ import annotations

import logging
from dataclasses import asdict, dataclass, fields
from typing import Any, Mapping, Sequence

from .errors import InvalidInputError
from .interpolators import Interpolation, available, get
from .interpolators.cubic import BoundaryCondition, DerivativeApprox

logger = logging.getLogger(__name__)

__all__ = ["SplineConfig"]


@dataclass(frozen=True)
class SplineConfig:
    """Options for one interpolant.

    Parameters
    ----------
    kind            : Registered interpolator name (default ``"cubic"``).
    monotonic       : Hyman filter switch (cubic only).
    left_condition  : End condition on the left (cubic only).
    left_value      : Slope / curvature paired with ``left_condition``.
    right_condition : End condition on the right (cubic only).
    right_value     : Slope / curvature paired with ``right_condition``.
    extrapolate     : Start with extrapolation enabled.
    """

    kind: str = "cubic"
    monotonic: bool = False
    left_condition: BoundaryCondition = BoundaryCondition.SECOND_DERIVATIVE
    left_value: float = 0.0
    right_condition: BoundaryCondition = BoundaryCondition.SECOND_DERIVATIVE
    right_value: float = 0.0
    extrapolate: bool = False

    def __post_init__(self):
        if self.kind not in available:
            raise InvalidInputError(
                f"unknown interpolator kind {self.kind!r}; available: {list(available)}"
            )
        # frozen: normalise through object.__setattr__
        object.__setattr__(self, "left_condition", BoundaryCondition.parse(self.left_condition))
        object.__setattr__(self, "right_condition", BoundaryCondition.parse(self.right_condition))
        object.__setattr__(self, "left_value", float(self.left_value))
        object.__setattr__(self, "right_value", float(self.right_value))
        object.__setattr__(self, "monotonic", bool(self.monotonic))
        object.__setattr__(self, "extrapolate", bool(self.extrapolate))

    # ------------------------------------------------------------------ #
    @classmethod
    def from_mapping(cls, data: Mapping[str, Any] | None) -> "SplineConfig":
        """Build from a parsed YAML/JSON mapping; unknown keys are rejected."""
        if data is None:
            return cls()
        if not isinstance(data, Mapping):
            raise InvalidInputError(f"spline config must be a mapping, got {type(data).__name__}")
        known = {f.name for f in fields(cls)}
        unknown = set(data) - known
        if unknown:
            raise InvalidInputError(f"unknown spline config keys: {sorted(unknown)}")
        return cls(**dict(data))

    def to_mapping(self) -> dict[str, Any]:
        out = asdict(self)
        out["left_condition"] = self.left_condition.value
        out["right_condition"] = self.right_condition.value
        return out

    def interpolator_kwargs(self) -> dict[str, Any]:
        """Constructor keywords understood by the configured back-end."""
        kw: dict[str, Any] = {"extrapolate": self.extrapolate}
        if self.kind == "cubic":
            kw.update(
                derivative_approx=DerivativeApprox.SPLINE,
                monotonic=self.monotonic,
                left_condition=self.left_condition,
                left_value=self.left_value,
                right_condition=self.right_condition,
                right_value=self.right_value,
            )
        elif self.monotonic:
            logger.warning("monotonic=True ignored for %r interpolation", self.kind)
        return kw

    def build(self, x: Sequence[float], y: Sequence[float]) -> Interpolation:
        """Construct and fit the configured interpolant."""
        return get(self.kind)(x, y, **self.interpolator_kwargs()).update()
