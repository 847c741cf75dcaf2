# pointlabel/core/validate.py
"""
Fail-fast precondition checks for a placement run, and an independent
post-hoc audit that a result set has no overlapping label boxes.
"""

from __future__ import annotations

import math
from typing import Sequence

from shapely.strtree import STRtree

from pointlabel.core.config import GRID_MIN_CELL_FRACTION, INDEX_KINDS, TOUCHING_OVERLAPS
from pointlabel.core.error_codes import (
    EMPTY_OFFSETS,
    INVALID_CELL_SIZE,
    INVALID_INDEX_KIND,
    INVALID_LABEL_SIZE,
    INVALID_OFFSET,
    INVALID_POINT,
    PlacementConfigError,
)
from pointlabel.core.geometry import box_to_polygon, boxes_overlap
from pointlabel.core.types import LabelSpec, PlacedLabel, PlacementConfig


def _positive_finite(value: float) -> bool:
    try:
        return math.isfinite(value) and value > 0
    except TypeError:
        return False


def validate_config(config: PlacementConfig) -> None:
    """Raise PlacementConfigError if config cannot drive a placement run."""
    if not (_positive_finite(config.label_width) and _positive_finite(config.label_height)):
        raise PlacementConfigError(
            INVALID_LABEL_SIZE,
            f"width={config.label_width!r}, height={config.label_height!r}",
        )
    if not config.offsets:
        raise PlacementConfigError(EMPTY_OFFSETS)
    for i, (dx, dy) in enumerate(config.offsets):
        if not (math.isfinite(dx) and math.isfinite(dy)):
            raise PlacementConfigError(INVALID_OFFSET, f"offset {i}: ({dx!r}, {dy!r})")
    if config.index not in INDEX_KINDS:
        raise PlacementConfigError(INVALID_INDEX_KIND, repr(config.index))
    if config.grid_cell_size is not None:
        # Boxes register in every covered cell; the floor bounds cells per box.
        min_cell = GRID_MIN_CELL_FRACTION * max(config.label_width, config.label_height)
        if not (_positive_finite(config.grid_cell_size) and config.grid_cell_size >= min_cell):
            raise PlacementConfigError(
                INVALID_CELL_SIZE,
                f"{config.grid_cell_size!r}, minimum {min_cell:g}",
            )


def validate_label_specs(specs: Sequence[LabelSpec]) -> None:
    """Raise PlacementConfigError on the first spec with non-finite coordinates."""
    for i, spec in enumerate(specs):
        x, y = spec.point
        if not (math.isfinite(x) and math.isfinite(y)):
            raise PlacementConfigError(INVALID_POINT, f"entry {i} ({spec.text!r}): ({x!r}, {y!r})")


def find_collisions(
    placed: Sequence[PlacedLabel],
    touching_overlaps: bool = TOUCHING_OVERLAPS,
) -> list[tuple[int, int]]:
    """
    Index pairs (i, j), i < j, of placed labels whose boxes overlap.
    STRtree narrows pairs by envelope; boxes_overlap decides. Empty for a valid result.
    """
    if len(placed) < 2:
        return []
    polys = [box_to_polygon(p.box) for p in placed]
    tree = STRtree(polys)
    pairs: list[tuple[int, int]] = []
    for i, poly in enumerate(polys):
        for j in tree.query(poly):
            j = int(j)
            if j <= i:
                continue
            if boxes_overlap(placed[i].box, placed[j].box, touching_overlaps):
                pairs.append((i, j))
    return sorted(pairs)
