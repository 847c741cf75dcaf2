# pointlabel/core/overlap.py
"""
Overlap testing of a candidate box against accepted labels.
has_overlap is the plain O(k) scan; LinearIndex and GridIndex keep the accepted
boxes and answer any_overlap(box) with the same predicate, so the choice of
index never changes which candidate is accepted.
"""

from __future__ import annotations

import logging
import math
from typing import Iterable, Protocol

from pointlabel.core.config import INDEX_AUTO_THRESHOLD, TOUCHING_OVERLAPS
from pointlabel.core.geometry import boxes_overlap
from pointlabel.core.types import Box, PlacedLabel, PlacementConfig

logger = logging.getLogger(__name__)


def has_overlap(
    candidate: Box,
    placed: Iterable[PlacedLabel],
    touching_overlaps: bool = TOUCHING_OVERLAPS,
) -> bool:
    """True if candidate overlaps the box of any placed label."""
    return any(boxes_overlap(candidate, p.box, touching_overlaps) for p in placed)


class OccupancyIndex(Protocol):
    """Accepted label boxes. Query: does any stored box overlap this one?"""
    kind: str

    def insert(self, b: Box) -> None: ...

    def any_overlap(self, b: Box) -> bool: ...

    def __len__(self) -> int: ...


class LinearIndex:
    """Flat list of boxes; O(k) per query."""
    kind = "linear"

    def __init__(self, touching_overlaps: bool = TOUCHING_OVERLAPS) -> None:
        self.touching_overlaps = touching_overlaps
        self._boxes: list[Box] = []

    def insert(self, b: Box) -> None:
        self._boxes.append(b)

    def any_overlap(self, b: Box) -> bool:
        touching = self.touching_overlaps
        return any(boxes_overlap(b, other, touching) for other in self._boxes)

    def __len__(self) -> int:
        return len(self._boxes)


class GridIndex:
    """
    Uniform grid buckets keyed by (col, row). A box is registered in every cell
    its closed extent covers, so two boxes that touch share at least one cell.
    """
    kind = "grid"

    def __init__(self, cell_size: float, touching_overlaps: bool = TOUCHING_OVERLAPS) -> None:
        if not (math.isfinite(cell_size) and cell_size > 0):
            raise ValueError(f"cell_size must be positive and finite, got {cell_size}")
        self.cell_size = cell_size
        self.touching_overlaps = touching_overlaps
        self._boxes: list[Box] = []
        self._cells: dict[tuple[int, int], list[int]] = {}

    def _cell_range(self, b: Box) -> tuple[range, range]:
        s = self.cell_size
        cols = range(math.floor(b.min_x / s), math.floor(b.max_x / s) + 1)
        rows = range(math.floor(b.min_y / s), math.floor(b.max_y / s) + 1)
        return cols, rows

    def insert(self, b: Box) -> None:
        slot = len(self._boxes)
        self._boxes.append(b)
        cols, rows = self._cell_range(b)
        for cx in cols:
            for cy in rows:
                self._cells.setdefault((cx, cy), []).append(slot)

    def any_overlap(self, b: Box) -> bool:
        touching = self.touching_overlaps
        seen: set[int] = set()
        cols, rows = self._cell_range(b)
        for cx in cols:
            for cy in rows:
                for slot in self._cells.get((cx, cy), ()):
                    if slot in seen:
                        continue
                    seen.add(slot)
                    if boxes_overlap(b, self._boxes[slot], touching):
                        return True
        return False

    def __len__(self) -> int:
        return len(self._boxes)

    @property
    def n_cells(self) -> int:
        return len(self._cells)


def resolve_index_kind(kind: str, n_labels: int) -> str:
    """'auto' -> 'grid' at INDEX_AUTO_THRESHOLD labels or more, else 'linear'."""
    if kind == "auto":
        return "grid" if n_labels >= INDEX_AUTO_THRESHOLD else "linear"
    return kind


def make_index(config: PlacementConfig, n_labels: int) -> OccupancyIndex:
    """Build the occupancy index selected by config.index for a run of n_labels."""
    kind = resolve_index_kind(config.index, n_labels)
    if kind == "grid":
        logger.debug("Using grid index (cell_size=%.3f) for %d labels", config.cell_size(), n_labels)
        return GridIndex(config.cell_size(), touching_overlaps=config.touching_overlaps)
    return LinearIndex(touching_overlaps=config.touching_overlaps)
