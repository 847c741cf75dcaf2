# pointlabel/core/config.py
"""
Central configuration for point label placement.
All tunable defaults live here; no magic numbers in other modules.
PlacementConfig (types.py) carries the values actually used by a run.
"""

from __future__ import annotations
import os

# ----- Paths (repo-relative) -----
REPORTS_DIR: str = "reports"

# ----- Label size -----
LABEL_WIDTH: float = 6.0
"""Width of every label box (world units). Uniform across labels."""

LABEL_HEIGHT: float = 2.0
"""Height of every label box (world units). Uniform across labels."""

LABEL_GAP: float = 1.0
"""Distance between the point and the nearest corner of each default candidate box."""

# ----- Candidates -----
CANDIDATE_NAMES: tuple[str, ...] = ("top_right", "top_left", "bottom_right", "bottom_left")
"""Names of the default candidate positions, in priority order."""

# ----- Overlap -----
TOUCHING_OVERLAPS: bool = False
"""When False, boxes sharing only an edge or corner do not overlap."""

# ----- Occupancy index -----
INDEX_KINDS: tuple[str, ...] = ("auto", "linear", "grid")

INDEX_AUTO_THRESHOLD: int = 1000
"""'auto' switches from the linear scan to the grid index at this many labels."""

GRID_CELL_SIZE_FACTOR: float = 2.0
"""Default grid cell size = factor * max(label_width, label_height)."""

GRID_MIN_CELL_FRACTION: float = 0.1
"""Smallest accepted grid cell size, as a fraction of max(label_width, label_height)."""

# ----- Rendering -----
RENDER_WIDTH_PX: int = 600
RENDER_HEIGHT_PX: int = 600
POINT_MARKER_SIZE: float = 36.0
LABEL_FONT_SIZE_PT: float = 6.0

# ----- Sample data -----
SEED: int | None = 42
"""Random seed for generated point sets; None for non-deterministic."""

RANDOM_EXTENT: float = 100.0
"""Side of the square area random points are drawn from."""

# ----- Logging -----
LOG_LEVEL: str = os.environ.get("LOG_LEVEL", "INFO").upper()
"""Log level name for the CLI. Set env LOG_LEVEL=DEBUG to see dropped points."""
