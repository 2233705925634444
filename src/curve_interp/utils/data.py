"""
utils.data
==========

Thin I/O layer – keeps *all* external data access in one place so the
interpolators stay completely file-system agnostic.

Functions
---------

load_samples(path, *, x_col="x", y_col="y", sort=False) -> (x, y)
    CSV ↦ pair of float arrays ready for an interpolator.

load_yaml(path)                                         -> Any
    Load a YAML/JSON configuration file and return the parsed object.

dump_grid(frame, path)                                  -> Path
    Write an evaluation grid (DataFrame) as CSV, creating parent folders.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Tuple

import numpy as np
import pandas as pd
import yaml

from ..errors import InvalidInputError

logger = logging.getLogger(__name__)

__all__ = ["load_samples", "load_yaml", "dump_grid"]

# --------------------------------------------------------------------------- #
# Samples loader
# --------------------------------------------------------------------------- #


def load_samples(
    path: str | Path,
    *,
    x_col: str = "x",
    y_col: str = "y",
    sort: bool = False,
) -> Tuple[np.ndarray, np.ndarray]:
    """
    Load ``(x, y)`` samples from a CSV file.

    Rows with a missing value in either column are dropped.  With
    ``sort=True`` rows are ordered by *x*; otherwise the file order is kept
    and the interpolator will reject non-increasing abscissae.
    """
    df = pd.read_csv(Path(path).expanduser())
    missing = [c for c in (x_col, y_col) if c not in df.columns]
    if missing:
        raise InvalidInputError(
            f"{path}: missing column(s) {missing}; found {list(df.columns)}"
        )

    df = df.loc[:, [x_col, y_col]].dropna()
    if sort:
        df = df.sort_values(x_col, kind="mergesort")
    logger.debug("loaded %d samples from %s", len(df), path)
    return df[x_col].to_numpy(dtype=float), df[y_col].to_numpy(dtype=float)


# --------------------------------------------------------------------------- #
# Lightweight YAML/JSON loader
# --------------------------------------------------------------------------- #


def load_yaml(path: str | Path) -> Any:
    """Parse a YAML or JSON file and return the deserialised object."""
    p = Path(path).expanduser().resolve()
    with p.open("r", encoding="utf-8") as fh:
        if p.suffix.lower() == ".json":
            return json.load(fh)
        return yaml.safe_load(fh)


# --------------------------------------------------------------------------- #
# Grid writer
# --------------------------------------------------------------------------- #


def dump_grid(frame: pd.DataFrame, path: str | Path) -> Path:
    """Write *frame* as CSV (no index).  Overwrites if the file exists."""
    out = Path(path).expanduser().resolve()
    out.parent.mkdir(parents=True, exist_ok=True)
    frame.to_csv(out, index=False)
    return out
