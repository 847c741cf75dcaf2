# pointlabel/core/smoke.py
"""
Single entrypoint to verify placement end-to-end: demo points, placement,
report files and rendering, into reports/smoke. Does not run on import.
"""

from __future__ import annotations

from pathlib import Path

from pointlabel.core.placement import run_label_layout
from pointlabel.core.render import render_layout
from pointlabel.core.reporting import (
    ensure_report_dir,
    format_report_lines,
    write_placements_json,
    write_run_metadata_json,
)
from pointlabel.core.samples import DEMO_CONFIG, demo_points
from pointlabel.core.validate import find_collisions


def main(repo_root: Path | None = None) -> Path:
    """Run the demo placement with run_name='smoke'; return the report directory."""
    repo_root = repo_root or Path.cwd().resolve()
    specs = demo_points()
    summary = run_label_layout(specs, DEMO_CONFIG)
    collisions = find_collisions(summary.placed, DEMO_CONFIG.touching_overlaps)
    if collisions:
        raise RuntimeError(f"Overlapping labels in smoke run: {collisions}")

    report_dir = ensure_report_dir(repo_root, "smoke")
    write_placements_json(report_dir, summary, DEMO_CONFIG)
    write_run_metadata_json(report_dir, "smoke", "demo", DEMO_CONFIG, summary)
    render_layout(specs, summary, report_dir / "label_placement_results.png")
    for line in format_report_lines(specs, summary):
        print(line)
    return report_dir


if __name__ == "__main__":
    main()
