"""
utils
=====

Stateless helper sub-package used across **curve-interp**.

* :pymod:`utils.data`        – CSV samples, YAML/JSON config, grid output
* :pymod:`utils.diagnostics` – error norms and overshoot checks
* :pymod:`utils.plots`       – Matplotlib shortcuts

Sub-modules are imported on first attribute access so that
``import curve_interp`` does not pull pandas or Matplotlib:

    >>> from curve_interp import utils as U
    >>> x, y = U.data.load_samples("curve.csv")
"""

from __future__ import annotations

import importlib
import types

__all__: list[str] = ["data", "diagnostics", "plots"]  # public API


def __getattr__(name: str) -> types.ModuleType:
    if name in __all__:
        mod = importlib.import_module(f"{__name__}.{name}")
        globals()[name] = mod  # memoise – next access is direct
        return mod
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
