# pointlabel/core/types.py
"""
Value types for point label placement: points, label specs, boxes,
candidate offsets, placed labels, per-point outcomes and run configuration.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Literal, NamedTuple

from pointlabel.core.config import (
    GRID_CELL_SIZE_FACTOR,
    LABEL_GAP,
    LABEL_HEIGHT,
    LABEL_WIDTH,
    TOUCHING_OVERLAPS,
)
from pointlabel.core.error_codes import INVALID_LABEL_SIZE, INVALID_OFFSET, PlacementConfigError


IndexKind = Literal["auto", "linear", "grid"]
OutcomeStatus = Literal["placed", "dropped"]


class Point(NamedTuple):
    """Feature location. Equal coordinates compare equal."""
    x: float
    y: float


class CandidateOffset(NamedTuple):
    """Corner of a candidate box relative to its point."""
    dx: float
    dy: float


@dataclass(frozen=True)
class LabelSpec:
    """A point paired with its label text (input unit)."""
    point: Point
    text: str


@dataclass(frozen=True)
class Box:
    """Axis-aligned rectangle with min_x <= max_x and min_y <= max_y."""
    min_x: float
    min_y: float
    max_x: float
    max_y: float

    def __post_init__(self) -> None:
        if self.min_x > self.max_x or self.min_y > self.max_y:
            raise ValueError(
                f"Box corners out of order: ({self.min_x}, {self.min_y}) / ({self.max_x}, {self.max_y})"
            )

    @classmethod
    def from_corners(cls, c1: tuple[float, float], c2: tuple[float, float]) -> Box:
        """Build from any two opposite corners; min/max are sorted per axis."""
        (x1, y1), (x2, y2) = c1, c2
        return cls(min(x1, x2), min(y1, y2), max(x1, x2), max(y1, y2))

    @property
    def min_corner(self) -> Point:
        return Point(self.min_x, self.min_y)

    @property
    def max_corner(self) -> Point:
        return Point(self.max_x, self.max_y)

    @property
    def width(self) -> float:
        return self.max_x - self.min_x

    @property
    def height(self) -> float:
        return self.max_y - self.min_y

    @property
    def center(self) -> Point:
        return Point((self.min_x + self.max_x) / 2.0, (self.min_y + self.max_y) / 2.0)

    def corners(self) -> list[tuple[float, float]]:
        """4 corners, counter-clockwise from min corner."""
        return [
            (self.min_x, self.min_y),
            (self.max_x, self.min_y),
            (self.max_x, self.max_y),
            (self.min_x, self.max_y),
        ]


@dataclass(frozen=True)
class PlacedLabel:
    """A successfully placed label. Its box overlaps no other box in the same result."""
    point: Point
    text: str
    box: Box


@dataclass(frozen=True)
class PlacementOutcome:
    """Placed(box) or Dropped for one input entry."""
    spec: LabelSpec
    input_index: int
    status: OutcomeStatus
    box: Box | None = None
    candidate_index: int | None = None

    @property
    def placed(self) -> bool:
        return self.status == "placed"

    def to_placed_label(self) -> PlacedLabel:
        if self.box is None:
            raise ValueError(f"Label {self.spec.text!r} was dropped; no box to report.")
        return PlacedLabel(point=self.spec.point, text=self.spec.text, box=self.box)


def _default_offsets(label_width, label_height, gap) -> tuple[CandidateOffset, ...]:
    from pointlabel.core.candidates import corner_offsets

    try:
        w, h = float(label_width), float(label_height)
    except (TypeError, ValueError) as e:
        raise PlacementConfigError(
            INVALID_LABEL_SIZE, f"width={label_width!r}, height={label_height!r}"
        ) from e
    try:
        g = float(gap)
    except (TypeError, ValueError) as e:
        raise PlacementConfigError(INVALID_OFFSET, f"gap={gap!r}") from e
    return corner_offsets(w, h, g)


def _coerce_offsets(offsets) -> tuple[CandidateOffset, ...]:
    out = []
    for i, item in enumerate(offsets):
        try:
            dx, dy = item
            out.append(CandidateOffset(float(dx), float(dy)))
        except (TypeError, ValueError) as e:
            raise PlacementConfigError(INVALID_OFFSET, f"offset {i}: {item!r}") from e
    return tuple(out)


@dataclass(frozen=True)
class PlacementConfig:
    """
    Explicit configuration for one placement run.
    offsets=None means the four-corner default order (TR, TL, BR, BL) for this label size.
    Validated by validate.validate_config before any placement work.
    """
    label_width: float = LABEL_WIDTH
    label_height: float = LABEL_HEIGHT
    offsets: tuple[CandidateOffset, ...] | None = None
    touching_overlaps: bool = TOUCHING_OVERLAPS
    index: IndexKind = "auto"
    grid_cell_size: float | None = None

    def __post_init__(self) -> None:
        if self.offsets is None:
            offsets = _default_offsets(self.label_width, self.label_height, LABEL_GAP)
        else:
            offsets = _coerce_offsets(self.offsets)
        object.__setattr__(self, "offsets", offsets)

    @classmethod
    def from_label_size(
        cls,
        label_width: float = LABEL_WIDTH,
        label_height: float = LABEL_HEIGHT,
        gap: float = LABEL_GAP,
        **kwargs,
    ) -> PlacementConfig:
        """Four-corner default offsets for the given size and point-to-box gap."""
        return cls(
            label_width=label_width,
            label_height=label_height,
            offsets=_default_offsets(label_width, label_height, gap),
            **kwargs,
        )

    def cell_size(self) -> float:
        """Grid cell size actually used by the grid index."""
        if self.grid_cell_size is not None:
            return self.grid_cell_size
        return GRID_CELL_SIZE_FACTOR * max(self.label_width, self.label_height)


@dataclass
class LayoutSummary:
    """Summary of one placement run."""
    n_labels: int
    placed_count: int
    dropped_count: int
    index_kind: str
    outcomes: list[PlacementOutcome] = field(default_factory=list)

    @property
    def placed(self) -> list[PlacedLabel]:
        return [o.to_placed_label() for o in self.outcomes if o.placed]

    @property
    def dropped(self) -> list[LabelSpec]:
        return [o.spec for o in self.outcomes if not o.placed]


def as_label_spec(item: LabelSpec | tuple) -> LabelSpec:
    """Accept a LabelSpec or a ((x, y), text) pair."""
    if isinstance(item, LabelSpec):
        if isinstance(item.point, Point):
            return item
        return LabelSpec(point=Point(*item.point), text=item.text)
    (x, y), text = item
    return LabelSpec(point=Point(float(x), float(y)), text=str(text))


def as_label_specs(items: Iterable[LabelSpec | tuple]) -> list[LabelSpec]:
    return [as_label_spec(it) for it in items]
