# pointlabel/core/placement.py
"""
Greedy first-fit label placement.
Points are taken in input order (earlier points get first claim on space);
for each point the candidates are tried in offset order and the first one that
overlaps no accepted box wins. A point with no free candidate is dropped and
never revisited; an accepted label is never evicted.
"""

from __future__ import annotations

import logging
from typing import Iterable

from pointlabel.core.candidates import iter_candidates
from pointlabel.core.overlap import OccupancyIndex, make_index
from pointlabel.core.types import (
    LabelSpec,
    LayoutSummary,
    PlacedLabel,
    PlacementConfig,
    PlacementOutcome,
    as_label_specs,
)
from pointlabel.core.validate import validate_config, validate_label_specs

logger = logging.getLogger(__name__)


def place_one(
    spec: LabelSpec,
    occupied: OccupancyIndex,
    config: PlacementConfig,
    input_index: int = 0,
) -> PlacementOutcome:
    """
    Try spec's candidates in order against occupied. On success the box is
    inserted into occupied and a placed outcome returned; otherwise dropped.
    """
    for ci, candidate in enumerate(iter_candidates(spec.point, config)):
        if not occupied.any_overlap(candidate):
            occupied.insert(candidate)
            return PlacementOutcome(
                spec=spec,
                input_index=input_index,
                status="placed",
                box=candidate,
                candidate_index=ci,
            )
    logger.debug(
        "Dropped label %r at (%g, %g): all %d candidates overlap",
        spec.text, spec.point.x, spec.point.y, len(config.offsets),
    )
    return PlacementOutcome(spec=spec, input_index=input_index, status="dropped")


def run_label_layout(
    specs: Iterable[LabelSpec | tuple],
    config: PlacementConfig | None = None,
) -> LayoutSummary:
    """
    Place labels in input order and return per-point outcomes.
    Raises PlacementConfigError before any work if config or inputs are malformed.
    """
    config = config if config is not None else PlacementConfig()
    validate_config(config)
    items = as_label_specs(specs)
    validate_label_specs(items)

    occupied = make_index(config, len(items))
    outcomes = [place_one(spec, occupied, config, input_index=i) for i, spec in enumerate(items)]

    placed_count = len(occupied)
    summary = LayoutSummary(
        n_labels=len(items),
        placed_count=placed_count,
        dropped_count=len(items) - placed_count,
        index_kind=occupied.kind,
        outcomes=outcomes,
    )
    logger.info(
        "Placed %d of %d labels (%d dropped, %s index)",
        summary.placed_count, summary.n_labels, summary.dropped_count, summary.index_kind,
    )
    return summary


def place_labels(
    specs: Iterable[LabelSpec | tuple],
    config: PlacementConfig | None = None,
) -> list[PlacedLabel]:
    """Ordered placed labels; dropped points are simply absent."""
    return run_label_layout(specs, config).placed
