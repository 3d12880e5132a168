from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict, List, Tuple

from occurrence_clustering.core.exceptions import RecordLoadError
from occurrence_clustering.features import OccurrenceFeatures, RecordShape, features_from_dict


def load_record(path: Path, shape: RecordShape) -> OccurrenceFeatures:
    """
    Read one occurrence record (a JSON object) and wrap it for comparison.
    """
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as exc:
        raise RecordLoadError(f"{path}: {exc}") from exc

    if not isinstance(data, dict):
        raise RecordLoadError(f"{path}: expected a JSON object, got {type(data).__name__}")

    return features_from_dict(data, shape)


def load_pairs(path: Path, shape: RecordShape) -> List[Tuple[OccurrenceFeatures, OccurrenceFeatures]]:
    """
    Read candidate pairs from JSON lines: one ``{"a": {...}, "b": {...}}`` per line.
    Blank lines are skipped.
    """
    pairs: List[Tuple[OccurrenceFeatures, OccurrenceFeatures]] = []
    try:
        lines = path.read_text(encoding="utf-8").splitlines()
    except OSError as exc:
        raise RecordLoadError(f"{path}: {exc}") from exc

    for lineno, line in enumerate(lines, start=1):
        if not line.strip():
            continue
        try:
            row = json.loads(line)
        except json.JSONDecodeError as exc:
            raise RecordLoadError(f"{path}:{lineno}: {exc}") from exc

        if not isinstance(row, dict) or not isinstance(row.get("a"), dict) or not isinstance(row.get("b"), dict):
            raise RecordLoadError(f"{path}:{lineno}: expected an object with 'a' and 'b' records")

        pairs.append((features_from_dict(row["a"], shape), features_from_dict(row["b"], shape)))

    return pairs


def write_json(
    data: Any,
    *,
    out: Path | None,
    pretty: bool,
):
    """
    Write JSON to stdout or file.
    """
    if pretty:
        payload = json.dumps(data, indent=2, ensure_ascii=False)
    else:
        payload = json.dumps(data, separators=(",", ":"), ensure_ascii=False)

    if out:
        out.write_text(payload + "\n", encoding="utf-8")
    else:
        print(payload)


def write_json_lines(rows: List[Dict[str, Any]], *, out: Path | None):
    payload = "".join(json.dumps(row, ensure_ascii=False) + "\n" for row in rows)
    if out:
        out.write_text(payload, encoding="utf-8")
    else:
        print(payload, end="")
