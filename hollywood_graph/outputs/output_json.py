"""JSON output: deterministic report.json generation."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from pathlib import Path

    from hollywood_graph.model import AnalysisResult


def write_json(data: Any, out_path: Path, filename: str) -> Path:
    """Dump *data* with sorted keys to out_path/filename, creating the directory."""
    from pathlib import Path as _Path

    out_dir = _Path(str(out_path))
    out_dir.mkdir(parents=True, exist_ok=True)
    out_file = out_dir / filename
    out_file.write_text(
        json.dumps(data, sort_keys=True, indent=2, ensure_ascii=False) + "\n",
        encoding="utf-8",
    )
    return out_file


def render_json(result: AnalysisResult, out_path: Path) -> Path:
    """Write byte-deterministic report.json and return the written path."""
    return write_json(result.model_dump(mode="json"), out_path, "report.json")
