# pointlabel/core/reporting.py
"""
Create reports/<run_name>/ and write placements.json and run_metadata.json;
format the console summary of a run.
"""

from __future__ import annotations

import json
from datetime import datetime, timezone
from pathlib import Path
from typing import Sequence

from pointlabel.core.candidates import candidate_name
from pointlabel.core.config import (
    GRID_CELL_SIZE_FACTOR,
    INDEX_AUTO_THRESHOLD,
    LABEL_GAP,
    LABEL_HEIGHT,
    LABEL_WIDTH,
    REPORTS_DIR,
    TOUCHING_OVERLAPS,
)
from pointlabel.core.types import LabelSpec, LayoutSummary, PlacedLabel, PlacementConfig

SCHEMA_VERSION = "1.0"


def _xy(x: float, y: float) -> dict:
    return {"x": float(x), "y": float(y)}


def placed_label_to_dict(label: PlacedLabel) -> dict:
    b = label.box
    return {
        "text": label.text,
        "point": _xy(label.point.x, label.point.y),
        "box": {
            "min": _xy(b.min_x, b.min_y),
            "max": _xy(b.max_x, b.max_y),
        },
    }


def config_to_dict(config: PlacementConfig) -> dict:
    return {
        "label_width": config.label_width,
        "label_height": config.label_height,
        "offsets": [[o.dx, o.dy] for o in config.offsets],
        "touching_overlaps": config.touching_overlaps,
        "index": config.index,
        "grid_cell_size": config.grid_cell_size,
    }


def layout_to_dict(summary: LayoutSummary, config: PlacementConfig) -> dict:
    """Structure of placements.json: placed labels in order, dropped points, summary, config."""
    placed = []
    for o in summary.outcomes:
        if not o.placed:
            continue
        entry = placed_label_to_dict(o.to_placed_label())
        entry["input_index"] = o.input_index
        entry["candidate"] = candidate_name(o.candidate_index, config)
        placed.append(entry)
    dropped = [
        {"text": o.spec.text, "point": _xy(o.spec.point.x, o.spec.point.y), "input_index": o.input_index}
        for o in summary.outcomes if not o.placed
    ]
    return {
        "schema_version": SCHEMA_VERSION,
        "placed": placed,
        "dropped": dropped,
        "summary": {
            "n_labels": summary.n_labels,
            "placed_count": summary.placed_count,
            "dropped_count": summary.dropped_count,
            "index": summary.index_kind,
        },
        "config": config_to_dict(config),
    }


def unlabeled_specs(specs: Sequence[LabelSpec], placed: Sequence[PlacedLabel]) -> list[LabelSpec]:
    """
    Input entries whose point has no placed label (set difference by coordinates).
    Display rule only: a dropped point coincident with a placed one is not reported.
    """
    labelled = {p.point for p in placed}
    return [s for s in specs if tuple(s.point) not in labelled]


def format_report_lines(specs: Sequence[LabelSpec], summary: LayoutSummary) -> list[str]:
    """Console lines: one per placed label, then one per unlabeled point, then the count."""
    placed = summary.placed
    lines: list[str] = []
    for lp in placed:
        b = lp.box
        lines.append(
            f"✓ Point ({lp.point.x:g}, {lp.point.y:g}) -> '{lp.text}' at "
            f"[{b.min_x:g},{b.min_y:g}]-[{b.max_x:g},{b.max_y:g}]"
        )
    for s in unlabeled_specs(specs, placed):
        lines.append(f"✗ Point ({s.point.x:g}, {s.point.y:g}) -> NO LABEL for '{s.text}' (overlap)")
    lines.append(f"Placed {summary.placed_count} out of {summary.n_labels} labels.")
    return lines


def run_metadata_dict(
    run_name: str,
    input_source: str,
    config: PlacementConfig,
    summary: LayoutSummary,
) -> dict:
    """Timestamp, input and config snapshot for run_metadata.json."""
    return {
        "run_name": run_name,
        "timestamp_utc": datetime.now(timezone.utc).isoformat(),
        "input_source": input_source,
        "n_labels": summary.n_labels,
        "placed_count": summary.placed_count,
        "placement": config_to_dict(config),
        "config": {
            "LABEL_WIDTH": LABEL_WIDTH,
            "LABEL_HEIGHT": LABEL_HEIGHT,
            "LABEL_GAP": LABEL_GAP,
            "TOUCHING_OVERLAPS": TOUCHING_OVERLAPS,
            "INDEX_AUTO_THRESHOLD": INDEX_AUTO_THRESHOLD,
            "GRID_CELL_SIZE_FACTOR": GRID_CELL_SIZE_FACTOR,
        },
    }


def ensure_report_dir(
    repo_root: Path,
    run_name: str,
    output_dir: str | None = None,
) -> Path:
    """Create output_dir/<run_name>/ under repo_root; return path. Default output_dir from config."""
    base = output_dir if output_dir is not None else REPORTS_DIR
    out = (repo_root / base).resolve() / run_name
    out.mkdir(parents=True, exist_ok=True)
    return out


def write_placements_json(report_dir: Path, summary: LayoutSummary, config: PlacementConfig) -> Path:
    """Write placements.json to report_dir. Returns path to file."""
    path = report_dir / "placements.json"
    path.write_text(json.dumps(layout_to_dict(summary, config), indent=2), encoding="utf-8")
    return path


def write_run_metadata_json(
    report_dir: Path,
    run_name: str,
    input_source: str,
    config: PlacementConfig,
    summary: LayoutSummary,
) -> Path:
    """Write run_metadata.json to report_dir."""
    path = report_dir / "run_metadata.json"
    data = run_metadata_dict(run_name, input_source, config, summary)
    path.write_text(json.dumps(data, indent=2), encoding="utf-8")
    return path
