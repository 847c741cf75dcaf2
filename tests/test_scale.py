# tests/test_scale.py
"""
Large inputs: the grid index handles 100k points, well separated or crowded,
and gives the same placements as the linear and naive scans for the same input order.
"""

from __future__ import annotations

import pytest

from pointlabel.core.candidates import generate_candidates
from pointlabel.core.overlap import has_overlap
from pointlabel.core.placement import place_labels, run_label_layout
from pointlabel.core.samples import lattice_points, random_points
from pointlabel.core.types import LabelSpec, PlacedLabel, PlacementConfig, Point


def _naive_placement(specs: list[LabelSpec], config: PlacementConfig) -> list[PlacedLabel]:
    placed: list[PlacedLabel] = []
    for spec in specs:
        for box in generate_candidates(spec.point, config):
            if not has_overlap(box, placed, config.touching_overlaps):
                placed.append(PlacedLabel(point=spec.point, text=spec.text, box=box))
                break
    return placed


def test_hundred_thousand_separated_points_grid() -> None:
    specs = lattice_points(100_000, spacing=20.0)
    summary = run_label_layout(specs, PlacementConfig())
    assert summary.index_kind == "grid"
    assert summary.placed_count == 100_000
    assert all(o.candidate_index == 0 for o in summary.outcomes)


@pytest.mark.parametrize("touching", [False, True])
def test_hundred_thousand_crowded_points_match_naive_prefix(touching: bool) -> None:
    # Spacing 3 with 6 x 2 labels: neighbouring rows compete for space.
    # Outcomes of the first k entries do not depend on later entries.
    specs = lattice_points(100_000, spacing=3.0)
    config = PlacementConfig(touching_overlaps=touching, grid_cell_size=6.0)
    summary = run_label_layout(specs, config)
    assert summary.index_kind == "grid"
    assert 0 < summary.dropped_count < len(specs)

    k = 1200
    grid_prefix = [o.to_placed_label() for o in summary.outcomes[:k] if o.placed]
    naive = _naive_placement(specs[:k], config)
    assert grid_prefix == naive
    assert len(naive) < k


@pytest.mark.parametrize("touching", [False, True])
def test_grid_matches_linear_random(touching: bool) -> None:
    specs = random_points(1500, extent=110.0, seed=7)
    linear = place_labels(specs, PlacementConfig(index="linear", touching_overlaps=touching))
    grid = place_labels(specs, PlacementConfig(index="grid", touching_overlaps=touching))
    assert grid == linear
    assert 0 < len(grid) < len(specs)


@pytest.mark.parametrize("touching", [False, True])
def test_grid_matches_linear_on_aligned_lattice(touching: bool) -> None:
    # Unit labels on a unit lattice with zero gap: candidate boxes tile and touch
    # exactly on grid cell boundaries.
    specs = lattice_points(900, spacing=1.0)
    kw = dict(touching_overlaps=touching, grid_cell_size=1.0)
    linear = place_labels(specs, PlacementConfig.from_label_size(1.0, 1.0, 0.0, index="linear", **kw))
    grid = place_labels(specs, PlacementConfig.from_label_size(1.0, 1.0, 0.0, index="grid", **kw))
    assert grid == linear
    if not touching:
        assert len(grid) == len(specs)
    else:
        assert len(grid) < len(specs)


def test_grid_matches_linear_negative_coordinates() -> None:
    specs = [
        LabelSpec(Point(s.point.x - 75.0, s.point.y - 75.0), s.text)
        for s in random_points(1000, extent=120.0, seed=21)
    ]
    linear = place_labels(specs, PlacementConfig(index="linear"))
    grid = place_labels(specs, PlacementConfig(index="grid", grid_cell_size=5.0))
    assert grid == linear
