"""Plot Student's t densities and CDFs.

Plotting functions receive distribution parameters, evaluate them through the
distribution layer and render; no numerical logic lives here.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Sequence, Tuple

import matplotlib.pyplot as plt
import numpy as np
from matplotlib.axes import Axes
from matplotlib.ticker import MaxNLocator

from .distribution.t_distribution import TDistribution

FIGURE_DPI = 300
FIGURE_ROOT = Path("output") / "figures"
DEFAULT_X_RANGE: Tuple[float, float] = (-5.0, 5.0)
N_POINTS = 401

LINE_STYLES = ("-", "--", "-.", ":")


@dataclass(frozen=True)
class StyleConfig:
    LABEL_FONTSIZE: float = 12.0
    TICK_FONTSIZE: float = 11.0
    LEGEND_FONTSIZE: float = 10.0
    LINEWIDTH: float = 1.8
    LINEWIDTH_THIN: float = 1.2
    GRID_ALPHA: float = 0.20
    FIGSIZE_WIDE: tuple[float, float] = (9.5, 4.2)


STYLE = StyleConfig()


def clean_axis(ax: Axes) -> None:
    """Apply consistent ticks, grid, and spine formatting to one axis."""
    ax.tick_params(axis="both", which="major", labelsize=STYLE.TICK_FONTSIZE)
    ax.xaxis.set_major_locator(MaxNLocator(nbins=6, min_n_ticks=4))
    ax.yaxis.set_major_locator(MaxNLocator(nbins=6, min_n_ticks=4))
    for side in ("left", "bottom"):
        ax.spines[side].set_linewidth(STYLE.LINEWIDTH_THIN)
    ax.spines["top"].set_visible(False)
    ax.spines["right"].set_visible(False)
    ax.grid(True, axis="y", alpha=STYLE.GRID_ALPHA, linestyle=":", linewidth=0.7)


def plot_t_distribution(
    dfs: Sequence[float],
    output_dir: str | Path = FIGURE_ROOT,
    x_range: Tuple[float, float] = DEFAULT_X_RANGE,
    filename: str = "t_distribution.png",
) -> str:
    """Render density and CDF panels for several t-distributions.

    Args:
        dfs (Sequence[float]): Degrees of freedom, one curve each.
        output_dir (str | Path): Directory for the PNG.
        x_range (tuple[float, float]): Plotted interval of ``x``.
        filename (str): Output file name.

    Returns:
        str: Path of the saved PNG.

    Raises:
        ValueError: If ``dfs`` is empty or ``x_range`` is not increasing.
    """
    if len(dfs) == 0:
        raise ValueError("At least one degrees-of-freedom value is required.")
    lo, hi = x_range
    if not lo < hi:
        raise ValueError(f"x_range must be increasing, got {x_range!r}")

    xs = np.linspace(lo, hi, N_POINTS)
    fig, (ax_pdf, ax_cdf) = plt.subplots(1, 2, figsize=STYLE.FIGSIZE_WIDE)

    for i, df in enumerate(dfs):
        dist = TDistribution(df)
        style = LINE_STYLES[i % len(LINE_STYLES)]
        label = rf"$\nu = {df:g}$"
        ax_pdf.plot(
            xs,
            [dist.density(float(x)) for x in xs],
            linestyle=style,
            linewidth=STYLE.LINEWIDTH,
            color="black",
            label=label,
        )
        ax_cdf.plot(
            xs,
            [dist.cumulative_probability(float(x)) for x in xs],
            linestyle=style,
            linewidth=STYLE.LINEWIDTH,
            color="black",
            label=label,
        )

    ax_pdf.set_xlabel(r"$x$", fontsize=STYLE.LABEL_FONTSIZE)
    ax_pdf.set_ylabel(r"$f(x)$", fontsize=STYLE.LABEL_FONTSIZE)
    ax_cdf.set_xlabel(r"$x$", fontsize=STYLE.LABEL_FONTSIZE)
    ax_cdf.set_ylabel(r"$F(x)$", fontsize=STYLE.LABEL_FONTSIZE)
    ax_cdf.set_ylim(0.0, 1.0)
    for ax in (ax_pdf, ax_cdf):
        clean_axis(ax)
    ax_cdf.legend(frameon=False, fontsize=STYLE.LEGEND_FONTSIZE, loc="lower right")
    fig.tight_layout()

    path = os.path.join(str(output_dir), filename)
    try:
        os.makedirs(output_dir, exist_ok=True)
        fig.savefig(path, dpi=FIGURE_DPI, bbox_inches="tight")
    finally:
        plt.close(fig)
    return path
