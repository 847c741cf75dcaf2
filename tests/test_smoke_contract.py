# tests/test_smoke_contract.py
"""
placements.json shape, console report lines, PNG rendering and the CLI,
end to end on small inputs. Deterministic, writes only under tmp_path.
"""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from pointlabel.core.placement import run_label_layout
from pointlabel.core.render import render_layout
from pointlabel.core.reporting import (
    SCHEMA_VERSION,
    ensure_report_dir,
    format_report_lines,
    layout_to_dict,
    unlabeled_specs,
    write_placements_json,
    write_run_metadata_json,
)
from pointlabel.core.runner import main
from pointlabel.core.samples import DEMO_CONFIG, basic_points, demo_points
from pointlabel.core.types import LabelSpec, PlacementConfig, Point


def _conflict_case() -> tuple[list[LabelSpec], PlacementConfig]:
    config = PlacementConfig(offsets=((1.0, 1.0),))
    specs = [LabelSpec(Point(0.0, 0.0), "A"), LabelSpec(Point(2.0, 0.0), "B")]
    return specs, config


def test_layout_dict_shape() -> None:
    specs, config = _conflict_case()
    data = layout_to_dict(run_label_layout(specs, config), config)
    assert data["schema_version"] == SCHEMA_VERSION
    assert [p["text"] for p in data["placed"]] == ["A"]
    assert data["placed"][0]["box"] == {"min": {"x": 1.0, "y": 1.0}, "max": {"x": 7.0, "y": 3.0}}
    assert data["placed"][0]["input_index"] == 0
    assert data["placed"][0]["candidate"] == "offset_0"
    assert data["dropped"] == [{"text": "B", "point": {"x": 2.0, "y": 0.0}, "input_index": 1}]
    assert data["summary"] == {"n_labels": 2, "placed_count": 1, "dropped_count": 1, "index": "linear"}
    assert data["config"]["offsets"] == [[1.0, 1.0]]
    json.loads(json.dumps(data))


def test_default_candidate_names_in_report() -> None:
    config = PlacementConfig()
    data = layout_to_dict(run_label_layout(basic_points(), config), config)
    names = {p["text"]: p["candidate"] for p in data["placed"]}
    assert names["Label A"] == "top_right"
    assert names["Label E"] == "top_left"


def test_report_lines() -> None:
    specs, config = _conflict_case()
    lines = format_report_lines(specs, run_label_layout(specs, config))
    assert lines[0] == "✓ Point (0, 0) -> 'A' at [1,1]-[7,3]"
    assert lines[1] == "✗ Point (2, 0) -> NO LABEL for 'B' (overlap)"
    assert lines[-1] == "Placed 1 out of 2 labels."


def test_unlabeled_by_coordinates() -> None:
    config = PlacementConfig(label_width=1.0, label_height=1.0, offsets=((0.1, 0.1),))
    specs = [LabelSpec(Point(0, 0), "A"), LabelSpec(Point(0, 0), "B"), LabelSpec(Point(0.5, 0), "C")]
    summary = run_label_layout(specs, config)
    assert [s.text for s in summary.dropped] == ["B", "C"]
    # B shares A's coordinates, so display treats it as labelled
    assert [s.text for s in unlabeled_specs(specs, summary.placed)] == ["C"]


def test_write_report_files(tmp_path: Path) -> None:
    specs = demo_points()
    summary = run_label_layout(specs, DEMO_CONFIG)
    report_dir = ensure_report_dir(tmp_path, "t", output_dir="reports")
    p1 = write_placements_json(report_dir, summary, DEMO_CONFIG)
    p2 = write_run_metadata_json(report_dir, "t", "demo", DEMO_CONFIG, summary)
    placements = json.loads(p1.read_text(encoding="utf-8"))
    meta = json.loads(p2.read_text(encoding="utf-8"))
    assert len(placements["placed"]) == len(specs)
    assert meta["run_name"] == "t" and meta["input_source"] == "demo"
    assert meta["placement"]["label_width"] == pytest.approx(0.4)
    assert "timestamp_utc" in meta


def test_render_layout_writes_png(tmp_path: Path) -> None:
    specs, config = _conflict_case()
    out = tmp_path / "layout.png"
    render_layout(specs, run_label_layout(specs, config), out)
    assert out.exists() and out.stat().st_size > 0


def test_runner_demo(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    code = main(["--demo", "--repo-root", str(tmp_path), "--run-name", "cli", "--no-render"])
    assert code == 0
    out = capsys.readouterr().out
    assert "Placed 10 out of 10 labels." in out
    data = json.loads((tmp_path / "reports" / "cli" / "placements.json").read_text(encoding="utf-8"))
    assert data["config"]["label_width"] == pytest.approx(0.4)


def test_runner_input_file_with_offsets(tmp_path: Path) -> None:
    (tmp_path / "pts.csv").write_text("x,y,label\n0,0,A\n2,0,B\n", encoding="utf-8")
    code = main([
        "--input", "pts.csv", "--repo-root", str(tmp_path), "--run-name", "f",
        "--offsets", "1,1", "--no-render", "--quiet",
    ])
    assert code == 0
    data = json.loads((tmp_path / "reports" / "f" / "placements.json").read_text(encoding="utf-8"))
    assert data["summary"]["placed_count"] == 1


def test_runner_reports_bad_config(tmp_path: Path) -> None:
    code = main(["--demo", "--repo-root", str(tmp_path), "--label-width", "0", "--no-render"])
    assert code == 2
    assert not (tmp_path / "reports").exists()


def test_runner_rejects_tiny_cell_size(tmp_path: Path) -> None:
    code = main(["--random", "50", "--repo-root", str(tmp_path), "--index", "grid",
                 "--cell-size", "0.005", "--no-render"])
    assert code == 2
    assert not (tmp_path / "reports").exists()


def test_runner_missing_input(tmp_path: Path) -> None:
    assert main(["--input", "missing.csv", "--repo-root", str(tmp_path), "--no-render"]) == 2


def test_smoke_main(tmp_path: Path) -> None:
    from pointlabel.core.smoke import main as smoke_main

    report_dir = smoke_main(repo_root=tmp_path)
    assert report_dir == (tmp_path / "reports" / "smoke").resolve()
    assert (report_dir / "placements.json").exists()
    assert (report_dir / "run_metadata.json").exists()
    assert (report_dir / "label_placement_results.png").exists()
