# pointlabel/core/samples.py
"""
Sample point sets for demos, smoke runs and scale tests.
Not used by the placement engine itself.
"""

from __future__ import annotations

import numpy as np

from pointlabel.core.config import RANDOM_EXTENT, SEED
from pointlabel.core.types import LabelSpec, PlacementConfig, Point

# Small labels close to the points; suits the clustered demo set.
DEMO_CONFIG = PlacementConfig.from_label_size(0.4, 0.2, 0.2)


def basic_points() -> list[LabelSpec]:
    """Five points with long-ish labels; pairs with the default 6 x 2 label size."""
    return [
        LabelSpec(Point(1.0, 1.0), "Label A"),
        LabelSpec(Point(5.0, 5.0), "Label B"),
        LabelSpec(Point(3.0, 8.0), "Label C"),
        LabelSpec(Point(8.0, 2.0), "Very Long Label D"),
        LabelSpec(Point(2.0, 2.0), "Label E"),
    ]


def demo_points() -> list[LabelSpec]:
    """Three clusters plus two isolated points; pairs with DEMO_CONFIG."""
    coords = [
        # cluster 1
        (1.0, 1.0, "A"), (1.5, 1.2, "B"), (2.0, 0.8, "C"),
        # cluster 2
        (4.0, 3.0, "D"), (4.5, 3.5, "E"), (3.8, 3.8, "F"),
        # cluster 3
        (2.0, 4.0, "G"), (2.5, 4.5, "H"),
        # isolated
        (5.5, 1.0, "I"), (1.0, 5.0, "J"),
    ]
    return [LabelSpec(Point(x, y), t) for x, y, t in coords]


def lattice_points(n: int, spacing: float, columns: int | None = None) -> list[LabelSpec]:
    """n points on a square lattice, row by row, labelled P0, P1, ..."""
    if n <= 0:
        return []
    cols = columns or int(np.ceil(np.sqrt(n)))
    idx = np.arange(n)
    xs = (idx % cols) * spacing
    ys = (idx // cols) * spacing
    return [LabelSpec(Point(float(x), float(y)), f"P{i}") for i, (x, y) in enumerate(zip(xs, ys))]


def random_points(
    n: int,
    extent: float = RANDOM_EXTENT,
    seed: int | None = SEED,
) -> list[LabelSpec]:
    """n uniform points in [0, extent)^2; deterministic for a given seed."""
    if n <= 0:
        return []
    rng = np.random.default_rng(seed)
    xy = rng.uniform(0.0, extent, size=(n, 2))
    return [LabelSpec(Point(float(x), float(y)), f"P{i}") for i, (x, y) in enumerate(xy)]
