# pointlabel/core/runner.py
"""
CLI entrypoint: load points (file, demo set or random), run greedy placement,
print the console report, write placements.json / run_metadata.json and render PNG.
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from pointlabel.core.config import (
    INDEX_KINDS,
    LABEL_GAP,
    LABEL_HEIGHT,
    LABEL_WIDTH,
    LOG_LEVEL,
    RANDOM_EXTENT,
    REPORTS_DIR,
    SEED,
)
from pointlabel.core.io import load_label_specs, parse_offsets
from pointlabel.core.placement import run_label_layout
from pointlabel.core.reporting import (
    ensure_report_dir,
    format_report_lines,
    write_placements_json,
    write_run_metadata_json,
)
from pointlabel.core.samples import DEMO_CONFIG, demo_points, random_points
from pointlabel.core.types import LabelSpec, PlacementConfig

logger = logging.getLogger(__name__)


def _parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Greedy non-overlapping point label placement.")
    src = p.add_mutually_exclusive_group()
    src.add_argument("--input", type=str, default=None, help="Points file (.csv, .json, .tsv/.txt)")
    src.add_argument("--demo", action="store_true", help="Use the built-in clustered demo points")
    src.add_argument("--random", type=int, default=None, help="Use N random points")
    p.add_argument("--extent", type=float, default=RANDOM_EXTENT, help="Area side for --random")
    p.add_argument("--seed", type=int, default=SEED, help="Random seed for --random")
    p.add_argument("--label-width", type=float, default=None, dest="label_width", help="Label box width")
    p.add_argument("--label-height", type=float, default=None, dest="label_height", help="Label box height")
    p.add_argument("--gap", type=float, default=None, help="Point-to-box gap for the four corner candidates")
    p.add_argument("--offsets", type=str, default=None, help="Explicit candidate offsets 'dx,dy;dx,dy;...'")
    p.add_argument("--touching-overlaps", action="store_true", dest="touching_overlaps",
                   help="Treat boxes that only touch as overlapping")
    p.add_argument("--index", type=str, default="auto", choices=INDEX_KINDS, help="Occupancy index")
    p.add_argument("--cell-size", type=float, default=None, dest="cell_size", help="Grid index cell size")
    p.add_argument("--run-name", type=str, default="run", dest="run_name", help="Reports subdir name")
    p.add_argument("--output-dir", type=str, default=REPORTS_DIR, dest="output_dir", help="Output directory (repo-relative)")
    p.add_argument("--repo-root", type=str, default=None, dest="repo_root", help="Repo root (default: cwd)")
    p.add_argument("--no-render", action="store_true", dest="no_render", help="Skip PNG rendering")
    p.add_argument("--quiet", action="store_true", help="Do not print per-label lines")
    return p.parse_args(argv)


def _load_specs(args: argparse.Namespace, repo_root: Path) -> tuple[list[LabelSpec], str]:
    """Return (specs, input_source description)."""
    if args.input:
        return load_label_specs(args.input, repo_root=repo_root), args.input
    if args.random is not None:
        return random_points(args.random, extent=args.extent, seed=args.seed), f"random:{args.random}:seed={args.seed}"
    return demo_points(), "demo"


def build_config(args: argparse.Namespace) -> PlacementConfig:
    """PlacementConfig from CLI args. The demo set keeps its small demo label size unless overridden."""
    use_demo = not args.input and args.random is None
    base_w, base_h, base_gap = LABEL_WIDTH, LABEL_HEIGHT, LABEL_GAP
    if use_demo:
        base_w, base_h = DEMO_CONFIG.label_width, DEMO_CONFIG.label_height
        base_gap = DEMO_CONFIG.offsets[0].dx
    w = args.label_width if args.label_width is not None else base_w
    h = args.label_height if args.label_height is not None else base_h
    gap = args.gap if args.gap is not None else base_gap
    common = dict(
        touching_overlaps=args.touching_overlaps,
        index=args.index,
        grid_cell_size=args.cell_size,
    )
    if args.offsets is not None:
        return PlacementConfig(label_width=w, label_height=h, offsets=parse_offsets(args.offsets), **common)
    return PlacementConfig.from_label_size(w, h, gap, **common)


def main(argv: list[str] | None = None) -> int:
    args = _parse_args(argv)
    logging.basicConfig(level=getattr(logging, LOG_LEVEL, logging.INFO))
    repo_root = Path(args.repo_root).resolve() if args.repo_root else Path.cwd().resolve()

    try:
        specs, source = _load_specs(args, repo_root)
        config = build_config(args)
        summary = run_label_layout(specs, config)
    except (FileNotFoundError, ValueError) as e:
        logger.error("%s", e)
        return 2

    lines = format_report_lines(specs, summary)
    for line in (lines[-1:] if args.quiet else lines):
        print(line)

    report_dir = ensure_report_dir(repo_root, args.run_name, output_dir=args.output_dir)
    paths = [
        write_placements_json(report_dir, summary, config),
        write_run_metadata_json(report_dir, args.run_name, source, config, summary),
    ]
    if not args.no_render:
        from pointlabel.core.render import render_layout
        png_path = report_dir / "label_placement_results.png"
        render_layout(specs, summary, png_path)
        paths.append(png_path)
    for p in paths:
        print(p)
    return 0


if __name__ == "__main__":
    sys.exit(main())
