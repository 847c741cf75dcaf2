# pointlabel/core/geometry.py
"""
Geometry helpers: the box overlap predicate, shapely conversion and
layout bounds for rendering.
"""

from __future__ import annotations

from typing import Iterable

import numpy as np
from shapely.geometry import Polygon, box as shapely_box

from pointlabel.core.config import TOUCHING_OVERLAPS
from pointlabel.core.types import Box, Point


def boxes_overlap(a: Box, b: Box, touching_overlaps: bool = TOUCHING_OVERLAPS) -> bool:
    """
    True if the projections of a and b intersect on both axes.
    touching_overlaps=False: intersection needs positive length on both axes,
    so boxes sharing only an edge or a corner do not overlap.
    touching_overlaps=True: closed intervals, touching counts as overlap.
    """
    if touching_overlaps:
        return (
            a.min_x <= b.max_x and b.min_x <= a.max_x
            and a.min_y <= b.max_y and b.min_y <= a.max_y
        )
    return (
        a.min_x < b.max_x and b.min_x < a.max_x
        and a.min_y < b.max_y and b.min_y < a.max_y
    )


def box_to_polygon(b: Box) -> Polygon:
    """Shapely polygon for a box (for audits and rendering)."""
    return shapely_box(b.min_x, b.min_y, b.max_x, b.max_y)


def layout_bounds(
    points: Iterable[Point],
    boxes: Iterable[Box] = (),
) -> tuple[float, float, float, float]:
    """Return (minx, miny, maxx, maxy) over all points and boxes; zeros when empty."""
    xy = [(p.x, p.y) for p in points]
    for b in boxes:
        xy.append((b.min_x, b.min_y))
        xy.append((b.max_x, b.max_y))
    if not xy:
        return (0.0, 0.0, 0.0, 0.0)
    arr = np.asarray(xy, dtype=float)
    mins = arr.min(axis=0)
    maxs = arr.max(axis=0)
    return (float(mins[0]), float(mins[1]), float(maxs[0]), float(maxs[1]))
