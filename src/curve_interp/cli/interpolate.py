#!/usr/bin/env python3
"""
cli.interpolate
===============

Command-line helper that fits an interpolant through a CSV of samples and
dumps it on a uniform grid:

* value, first / second derivative and primitive per grid point (CSV)
* optional PNG plot of the curve and its samples

Typical usage
-------------

.. code-block:: console

    $ curve-interp samples.csv --config spline.yaml \
        --points 401 --out build/grid.csv --plot build/curve.png

``spline.yaml`` holds the keys of :class:`curve_interp.config.SplineConfig`;
``--kind`` and ``--[no-]monotonic`` / ``--[no-]extrapolate`` override it.

All heavy lifting is delegated to the library; this file is a thin
argparse + orchestration wrapper.
"""
from __future__ import annotations

import argparse
import logging
import pathlib
import sys
from typing import List

import numpy as np
import pandas as pd

from ..config import SplineConfig
from ..errors import InterpolationError
from ..interpolators import available
from ..utils import data as udata

logger = logging.getLogger(__name__)


# --------------------------------------------------------------------------- #
# Argument parsing
# --------------------------------------------------------------------------- #
def _parse_args(argv: List[str] | None = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(
        prog="curve-interp",
        description="Fit a 1-D interpolant through CSV samples and evaluate it on a grid.",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )

    p.add_argument("csv", type=pathlib.Path, help="Samples CSV.")
    p.add_argument("--x-col", default="x", help="Abscissa column.")
    p.add_argument("--y-col", default="y", help="Ordinate column.")
    p.add_argument("--sort", action="store_true", help="Sort samples by x before fitting.")
    p.add_argument("--config", type=pathlib.Path, help="YAML/JSON spline configuration.")
    p.add_argument("--kind", choices=sorted(available), help="Interpolator (overrides config).")
    p.add_argument(
        "--monotonic",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Toggle the Hyman filter (cubic only; overrides config).",
    )
    p.add_argument(
        "--extrapolate",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Toggle grid points outside the sample range (overrides config).",
    )
    p.add_argument("--points", type=int, default=201, help="Grid size.")
    p.add_argument("--from", dest="x_from", type=float, help="Grid start (default: first sample).")
    p.add_argument("--to", dest="x_to", type=float, help="Grid end (default: last sample).")
    p.add_argument(
        "--out",
        type=pathlib.Path,
        default=pathlib.Path("grid.csv"),
        help="Output CSV.",
    )
    p.add_argument("--plot", type=pathlib.Path, help="Optional PNG of the fitted curve.")
    p.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging verbosity.",
    )
    return p.parse_args(argv)


def _resolve_config(args: argparse.Namespace) -> SplineConfig:
    raw = dict(udata.load_yaml(args.config) or {}) if args.config else {}
    for key in ("kind", "monotonic", "extrapolate"):
        value = getattr(args, key)
        if value is not None:
            raw[key] = value
    return SplineConfig.from_mapping(raw)


# --------------------------------------------------------------------------- #
# Driver
# --------------------------------------------------------------------------- #


def evaluate_grid(interp, grid: np.ndarray) -> pd.DataFrame:
    """Tabulate value / derivatives / primitive of *interp* on *grid*."""
    return pd.DataFrame(
        {
            "x": grid,
            "value": interp.value(grid),
            "derivative": interp.derivative(grid),
            "second_derivative": interp.second_derivative(grid),
            "primitive": interp.primitive(grid),
        }
    )


def main(argv: List[str] | None = None) -> int:
    args = _parse_args(argv)
    logging.basicConfig(level=args.log_level, format="%(levelname)s %(name)s: %(message)s")

    try:
        cfg = _resolve_config(args)
        x, y = udata.load_samples(args.csv, x_col=args.x_col, y_col=args.y_col, sort=args.sort)
        interp = cfg.build(x, y)

        lo = interp.x_min() if args.x_from is None else args.x_from
        hi = interp.x_max() if args.x_to is None else args.x_to
        grid = np.linspace(lo, hi, args.points)
        table = evaluate_grid(interp, grid)
    except InterpolationError as exc:
        logger.error("%s", exc)
        return 2

    out = udata.dump_grid(table, args.out)
    logger.info("%s on %d points written to %s", cfg.kind, len(table), out)

    if args.plot is not None:
        from ..utils import plots as uplt

        args.plot.parent.mkdir(parents=True, exist_ok=True)
        uplt.plot_interpolant(interp, save_to=str(args.plot))
        logger.info("plot saved to %s", args.plot)

    return 0


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
