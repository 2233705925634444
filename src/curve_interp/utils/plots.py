"""
Utility plotting helpers for fitted interpolants.

Functions
---------
interpolant(interp, *, ax=None, derivative=False)     -> Figure
    Curve on a dense grid plus the sample markers; optional derivative on a
    twin axis.

compare(curves, *, ax=None)                            -> Figure
    Several interpolants of the same samples on one axis.

plot_interpolant(interp, *, save_to=None, **kwargs)    -> Figure
    Thin wrapper around ``interpolant`` that also handles ``save_to``.
"""

from __future__ import annotations

from typing import Mapping

import matplotlib.pyplot as plt
import numpy as np

from ..interpolators import Interpolation

__all__ = ["interpolant", "compare", "plot_interpolant"]

# --------------------------------------------------------------------------- #
# internal helper
# --------------------------------------------------------------------------- #


def _ax(ax):
    if ax is None:
        fig, ax_ = plt.subplots(figsize=(8, 4))
        return fig, ax_
    return ax.figure, ax


def _grid(interp: Interpolation, points: int) -> np.ndarray:
    return np.linspace(interp.x_min(), interp.x_max(), points)


# --------------------------------------------------------------------------- #
# visualisations
# --------------------------------------------------------------------------- #


def interpolant(
    interp: Interpolation,
    *,
    ax=None,
    points: int = 600,
    derivative: bool = False,
    label: str | None = None,
):
    """Interpolated curve, samples and (optionally) its first derivative."""
    fig, ax = _ax(ax)
    grid = _grid(interp, points)

    ax.plot(grid, interp.value(grid), lw=1.5, label=label or type(interp).__name__)
    ax.scatter(interp.x_values(), interp.y_values(), marker="o", s=30, zorder=3, label="samples")

    if derivative:
        ax2 = ax.twinx()
        ax2.plot(grid, interp.derivative(grid), lw=1.0, ls="--", c="tab:red", label="f'")
        ax2.set_ylabel("f'(x)")

    ax.set(xlabel="x", ylabel="f(x)", title="Interpolant")
    ax.legend()
    ax.grid(True, ls="--", alpha=0.3)
    return fig


def compare(curves: Mapping[str, Interpolation], *, ax=None, points: int = 600):
    """Overlay several interpolants; samples are taken from the first one."""
    fig, ax = _ax(ax)
    first = None
    for name, interp in curves.items():
        first = first or interp
        grid = _grid(interp, points)
        ax.plot(grid, interp.value(grid), lw=1.2, label=name)

    if first is not None:
        ax.scatter(first.x_values(), first.y_values(), c="k", s=20, zorder=3, label="samples")

    ax.set(xlabel="x", ylabel="f(x)", title="Interpolant comparison")
    ax.legend()
    ax.grid(True, ls="--", alpha=0.3)
    return fig


# --------------------------------------------------------------------------- #
# Thin wrapper used by the CLI
# --------------------------------------------------------------------------- #


def plot_interpolant(interp: Interpolation, *, save_to: str | None = None, **kwargs):
    """Wrapper around :pyfunc:`interpolant` that also handles file output."""
    fig = interpolant(interp, **kwargs)
    if save_to is not None:
        fig.savefig(save_to, dpi=150, bbox_inches="tight")
        plt.close(fig)
    return fig
