# pointlabel/core/io.py
"""
Load labelled points from CSV, JSON or tab-separated text.
CSV:  header with x, y, label columns.
JSON: list of {"x": .., "y": .., "label": ..} objects or [x, y, label] triples.
TSV/TXT: one "x<TAB>y<TAB>label" line per point; blank lines and '#' comments skipped.
Input order is preserved (it is the placement priority).
"""

from __future__ import annotations

import csv
import json
from pathlib import Path

from pointlabel.core.types import CandidateOffset, LabelSpec, Point


def _resolve_path(path: str | Path, repo_root: Path | None) -> Path:
    """Resolve path; if relative, against repo_root (or cwd if repo_root is None)."""
    p = Path(path)
    if not p.is_absolute() and repo_root is not None:
        p = repo_root / p
    return p.resolve()


def _make_spec(x, y, label, where: str) -> LabelSpec:
    try:
        return LabelSpec(point=Point(float(x), float(y)), text=str(label))
    except (TypeError, ValueError) as e:
        raise ValueError(f"Bad point at {where}: {e}") from e


def parse_csv_points(text: str) -> list[LabelSpec]:
    reader = csv.DictReader(text.splitlines())
    fields = {f.strip().lower() for f in (reader.fieldnames or [])}
    missing = {"x", "y", "label"} - fields
    if missing:
        raise ValueError(f"CSV header missing column(s): {', '.join(sorted(missing))}")
    out: list[LabelSpec] = []
    for line_no, row in enumerate(reader, start=2):
        row = {k.strip().lower(): v for k, v in row.items() if k is not None}
        out.append(_make_spec(row["x"], row["y"], row["label"], f"line {line_no}"))
    return out


def parse_json_points(text: str) -> list[LabelSpec]:
    data = json.loads(text)
    if isinstance(data, dict) and "points" in data:
        data = data["points"]
    if not isinstance(data, list):
        raise ValueError("JSON points must be a list (or an object with a 'points' list)")
    out: list[LabelSpec] = []
    for i, item in enumerate(data):
        if isinstance(item, dict):
            try:
                out.append(_make_spec(item["x"], item["y"], item["label"], f"item {i}"))
            except KeyError as e:
                raise ValueError(f"Bad point at item {i}: missing key {e}") from e
        elif isinstance(item, (list, tuple)) and len(item) == 3:
            out.append(_make_spec(item[0], item[1], item[2], f"item {i}"))
        else:
            raise ValueError(f"Bad point at item {i}: expected object or [x, y, label]")
    return out


def parse_tsv_points(text: str) -> list[LabelSpec]:
    out: list[LabelSpec] = []
    for line_no, line in enumerate(text.splitlines(), start=1):
        line = line.strip()
        if not line or line.startswith("#"):
            continue
        parts = line.split("\t")
        if len(parts) < 3:
            raise ValueError(f"Bad point at line {line_no}: expected x<TAB>y<TAB>label")
        out.append(_make_spec(parts[0], parts[1], "\t".join(parts[2:]), f"line {line_no}"))
    return out


def load_label_specs(path: str | Path, repo_root: Path | None = None) -> list[LabelSpec]:
    """
    Read labelled points from a file; format chosen by suffix.
    Raises FileNotFoundError if path is missing, ValueError if the content is malformed.
    """
    resolved = _resolve_path(path, repo_root)
    if not resolved.exists():
        raise FileNotFoundError(f"Points file not found: {resolved}")
    text = resolved.read_text(encoding="utf-8")
    suffix = resolved.suffix.lower()
    if suffix == ".csv":
        return parse_csv_points(text)
    if suffix == ".json":
        return parse_json_points(text)
    if suffix in (".tsv", ".txt"):
        return parse_tsv_points(text)
    raise ValueError(f"Unsupported points file type: {suffix or '(none)'}")


def parse_offsets(text: str) -> tuple[CandidateOffset, ...]:
    """Parse 'dx,dy;dx,dy;...' into offsets, keeping order. Empty text -> empty tuple."""
    out: list[CandidateOffset] = []
    for chunk in (text or "").split(";"):
        chunk = chunk.strip()
        if not chunk:
            continue
        parts = [p.strip() for p in chunk.split(",")]
        if len(parts) != 2:
            raise ValueError(f"Bad offset {chunk!r}: expected 'dx,dy'")
        out.append(CandidateOffset(float(parts[0]), float(parts[1])))
    return tuple(out)


def write_label_specs_csv(path: str | Path, specs: list[LabelSpec]) -> Path:
    """Write specs as CSV with an x,y,label header. Returns the path."""
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)
    with p.open("w", newline="", encoding="utf-8") as f:
        w = csv.writer(f)
        w.writerow(["x", "y", "label"])
        for s in specs:
            w.writerow([s.point.x, s.point.y, s.text])
    return p
