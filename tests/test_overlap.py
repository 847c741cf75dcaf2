# tests/test_overlap.py
"""
Overlap tester and occupancy indexes: the grid index must answer exactly
like the linear scan, including touching boxes on cell boundaries.
"""

from __future__ import annotations

import pytest

from pointlabel.core.config import INDEX_AUTO_THRESHOLD
from pointlabel.core.overlap import (
    GridIndex,
    LinearIndex,
    has_overlap,
    make_index,
    resolve_index_kind,
)
from pointlabel.core.types import Box, PlacedLabel, PlacementConfig, Point


def _placed(b: Box, text: str = "X") -> PlacedLabel:
    return PlacedLabel(point=Point(b.min_x, b.min_y), text=text, box=b)


def test_has_overlap_empty() -> None:
    assert has_overlap(Box(0, 0, 1, 1), []) is False


def test_has_overlap_against_placed() -> None:
    placed = [_placed(Box(0, 0, 2, 2)), _placed(Box(5, 5, 6, 6))]
    assert has_overlap(Box(1, 1, 3, 3), placed) is True
    assert has_overlap(Box(3, 3, 4, 4), placed) is False
    assert has_overlap(Box(2, 0, 3, 1), placed) is False
    assert has_overlap(Box(2, 0, 3, 1), placed, touching_overlaps=True) is True


@pytest.mark.parametrize("touching", [False, True])
def test_grid_index_matches_linear_on_cell_boundaries(touching: bool) -> None:
    # Cell size 1 puts every box edge exactly on a cell boundary.
    grid = GridIndex(cell_size=1.0, touching_overlaps=touching)
    linear = LinearIndex(touching_overlaps=touching)
    for b in (Box(0, 0, 1, 1), Box(3, -2, 4, -1), Box(-5, -5, -4, -4)):
        grid.insert(b)
        linear.insert(b)
    queries = [
        Box(1, 0, 2, 1),      # shares an edge
        Box(1, 1, 2, 2),      # shares a corner
        Box(0.5, 0.5, 1.5, 1.5),
        Box(4, -1, 5, 0),     # corner with second box
        Box(-4, -6, -3, -5),  # corner with negative box
        Box(10, 10, 11, 11),
    ]
    for q in queries:
        assert grid.any_overlap(q) == linear.any_overlap(q), q
    assert len(grid) == len(linear) == 3


def test_grid_index_box_spanning_many_cells() -> None:
    grid = GridIndex(cell_size=0.5)
    grid.insert(Box(0, 0, 10, 1))
    assert grid.any_overlap(Box(9.5, 0.5, 9.75, 0.75)) is True
    assert grid.any_overlap(Box(10.5, 0.5, 11, 0.75)) is False
    assert grid.n_cells > 10


def test_grid_index_rejects_bad_cell_size() -> None:
    with pytest.raises(ValueError):
        GridIndex(cell_size=0.0)


def test_resolve_index_kind_auto() -> None:
    assert resolve_index_kind("auto", INDEX_AUTO_THRESHOLD - 1) == "linear"
    assert resolve_index_kind("auto", INDEX_AUTO_THRESHOLD) == "grid"
    assert resolve_index_kind("linear", 10**6) == "linear"
    assert resolve_index_kind("grid", 1) == "grid"


def test_make_index_uses_config() -> None:
    config = PlacementConfig(index="grid", grid_cell_size=3.0, touching_overlaps=True)
    idx = make_index(config, 5)
    assert isinstance(idx, GridIndex)
    assert idx.cell_size == 3.0
    assert idx.touching_overlaps is True
    assert isinstance(make_index(PlacementConfig(index="linear"), 10**6), LinearIndex)


def test_default_cell_size_from_label_size() -> None:
    config = PlacementConfig(label_width=6.0, label_height=2.0)
    assert config.cell_size() == pytest.approx(12.0)
