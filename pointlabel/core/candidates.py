# pointlabel/core/candidates.py
"""
Candidate boxes around a point: one box per configured offset, in offset order.
The default order Top-Right, Top-Left, Bottom-Right, Bottom-Left is the tie-break:
the first free candidate wins.
"""

from __future__ import annotations

from typing import Iterator

from pointlabel.core.config import CANDIDATE_NAMES, LABEL_GAP, LABEL_HEIGHT, LABEL_WIDTH
from pointlabel.core.types import Box, CandidateOffset, PlacementConfig, Point


def corner_offsets(
    label_width: float = LABEL_WIDTH,
    label_height: float = LABEL_HEIGHT,
    gap: float = LABEL_GAP,
) -> tuple[CandidateOffset, ...]:
    """Offsets for the four corner positions, TR, TL, BR, BL, each `gap` away from the point."""
    return (
        CandidateOffset(gap, gap),
        CandidateOffset(-gap - label_width, gap),
        CandidateOffset(gap, -gap - label_height),
        CandidateOffset(-gap - label_width, -gap - label_height),
    )


def candidate_box(point: Point, offset: CandidateOffset, label_width: float, label_height: float) -> Box:
    """Box with one corner at point + offset and the opposite corner shifted by (+w, +h)."""
    x0 = point.x + offset.dx
    y0 = point.y + offset.dy
    return Box.from_corners((x0, y0), (x0 + label_width, y0 + label_height))


def iter_candidates(point: Point, config: PlacementConfig) -> Iterator[Box]:
    """Candidate boxes for point, lazily, in the exact order of config.offsets."""
    for off in config.offsets:
        yield candidate_box(point, off, config.label_width, config.label_height)


def generate_candidates(point: Point, config: PlacementConfig) -> list[Box]:
    """All candidate boxes for point, in the exact order of config.offsets."""
    return list(iter_candidates(point, config))


def candidate_name(candidate_index: int | None, config: PlacementConfig) -> str:
    """Human name of a candidate (e.g. 'top_left') when config uses the default corner order."""
    if candidate_index is None:
        return "none"
    defaults = corner_offsets(config.label_width, config.label_height, config.offsets[0].dx)
    if len(config.offsets) == len(defaults) and tuple(config.offsets) == defaults:
        return CANDIDATE_NAMES[candidate_index]
    return f"offset_{candidate_index}"
