# pointlabel/core/render.py
"""
Matplotlib PNG rendering of a placement run: every input point in light gray,
labelled points blue, unlabelled points red, label boxes green with text centred.
Reads the result only; never feeds back into placement.
"""

from __future__ import annotations

import warnings
from pathlib import Path
from typing import Sequence

import matplotlib.pyplot as plt
import numpy as np

from pointlabel.core.config import (
    LABEL_FONT_SIZE_PT,
    POINT_MARKER_SIZE,
    RENDER_HEIGHT_PX,
    RENDER_WIDTH_PX,
)
from pointlabel.core.geometry import box_to_polygon, layout_bounds
from pointlabel.core.reporting import unlabeled_specs
from pointlabel.core.types import LabelSpec, LayoutSummary, PlacedLabel


def set_axes_to_layout(
    ax: plt.Axes,
    specs: Sequence[LabelSpec],
    placed: Sequence[PlacedLabel],
    pad_frac: float = 0.05,
) -> None:
    """Set xlim/ylim from points and boxes with margin; equal aspect."""
    minx, miny, maxx, maxy = layout_bounds([s.point for s in specs], [p.box for p in placed])
    dx = max(0.5, (maxx - minx) * pad_frac)
    dy = max(0.5, (maxy - miny) * pad_frac)
    ax.set_xlim(minx - dx, maxx + dx)
    ax.set_ylim(miny - dy, maxy + dy)
    ax.set_aspect("equal", adjustable="box")


def _scatter(ax: plt.Axes, specs: Sequence, color: str, label: str, zorder: int) -> None:
    if not specs:
        return
    xy = np.array([(s.point.x, s.point.y) for s in specs])
    ax.scatter(
        xy[:, 0], xy[:, 1],
        s=POINT_MARKER_SIZE, c=color, edgecolors="black", linewidths=0.5,
        label=label, zorder=zorder,
    )


def _draw_label(ax: plt.Axes, lp: PlacedLabel, font_size_pt: float) -> None:
    xy = np.array(box_to_polygon(lp.box).exterior.coords)
    ax.fill(xy[:, 0], xy[:, 1], facecolor="white", edgecolor="green", linewidth=1.5, alpha=0.8, zorder=3)
    cx, cy = lp.box.center
    ax.text(
        cx, cy, lp.text,
        fontsize=font_size_pt,
        ha="center", va="center",
        color="black",
        zorder=4,
        clip_on=True,
    )


def render_layout(
    specs: Sequence[LabelSpec],
    summary: LayoutSummary,
    output_path: str | Path,
    width_px: int = RENDER_WIDTH_PX,
    height_px: int = RENDER_HEIGHT_PX,
    font_size_pt: float = LABEL_FONT_SIZE_PT,
    title: str = "Automatic Label Placement",
    scale: int = 1,
) -> None:
    """Render points and placed labels to PNG. scale multiplies output resolution (1x, 2x, 4x)."""
    w, h = width_px * scale, height_px * scale
    fig = plt.figure(figsize=(w / 100.0, h / 100.0), dpi=100, constrained_layout=False)
    # Leave bottom margin so legend does not overlap the plot
    ax = fig.add_axes([0.05, 0.1, 0.9, 0.82])
    ax.set_xticks([])
    ax.set_yticks([])

    placed = summary.placed
    _scatter(ax, specs, "lightgray", "all points", zorder=1)
    for lp in placed:
        _draw_label(ax, lp, font_size_pt)
    labelled = [o.spec for o in summary.outcomes if o.placed]
    _scatter(ax, labelled, "tab:blue", "labelled", zorder=5)
    _scatter(ax, unlabeled_specs(specs, placed), "tab:red", "unlabelled (overlap)", zorder=5)

    set_axes_to_layout(ax, specs, placed)
    ax.set_title(f"{title}: {summary.placed_count} of {summary.n_labels} labels placed", fontsize=10)
    handles, _ = ax.get_legend_handles_labels()
    leg = None
    if handles:
        leg = ax.legend(loc="upper center", bbox_to_anchor=(0.5, -0.02), ncol=3, fontsize=8)
    with warnings.catch_warnings():
        warnings.filterwarnings("ignore", message=".*constrained_layout.*", category=UserWarning)
        fig.savefig(
            output_path, dpi=100, facecolor="white",
            bbox_inches="tight", bbox_extra_artists=[leg] if leg is not None else None,
        )
    plt.close(fig)
