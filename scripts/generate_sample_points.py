#!/usr/bin/env python3
"""
Generate sample point files for pointlabel runs.

Files written to docs/assets/points/:
demo.csv          clustered demo set (use with --label-width 0.4 --label-height 0.2 --gap 0.2)
basic.csv         five points for the default 6 x 2 label size
lattice_<n>.csv   well-separated lattice points, every label fits top-right
random_<n>.csv    uniform random points (seeded)
"""

from __future__ import annotations

import argparse
from pathlib import Path

from pointlabel.core.config import RANDOM_EXTENT, SEED
from pointlabel.core.io import write_label_specs_csv
from pointlabel.core.samples import basic_points, demo_points, lattice_points, random_points

# Output directory
OUTPUT_DIR = Path(__file__).parent.parent / "docs" / "assets" / "points"


def main() -> None:
    p = argparse.ArgumentParser(description="Write sample point CSV files.")
    p.add_argument("--lattice", type=int, default=1000, help="Number of lattice points")
    p.add_argument("--spacing", type=float, default=20.0, help="Lattice spacing")
    p.add_argument("--random", type=int, default=500, help="Number of random points")
    p.add_argument("--extent", type=float, default=RANDOM_EXTENT, help="Random area side")
    p.add_argument("--seed", type=int, default=SEED, help="Random seed")
    p.add_argument("--output-dir", type=str, default=str(OUTPUT_DIR), dest="output_dir")
    args = p.parse_args()

    out = Path(args.output_dir)
    files = [
        write_label_specs_csv(out / "demo.csv", demo_points()),
        write_label_specs_csv(out / "basic.csv", basic_points()),
        write_label_specs_csv(out / f"lattice_{args.lattice}.csv", lattice_points(args.lattice, args.spacing)),
        write_label_specs_csv(
            out / f"random_{args.random}.csv",
            random_points(args.random, extent=args.extent, seed=args.seed),
        ),
    ]
    for f in files:
        print(f"Created: {f.name}")


if __name__ == "__main__":
    main()
