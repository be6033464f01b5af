"""Run-metadata sidecar: describes one run, written next to the reports."""

from __future__ import annotations

import datetime
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from pathlib import Path

from hollywood_graph.outputs.output_json import write_json

METADATA_FILENAME = "run-metadata.json"


def build_run_metadata(data_path: Path, out_path: Path, source: str) -> dict[str, str]:
    """Timestamp, resolved input/output paths and the queried source actor."""
    now = datetime.datetime.now(datetime.UTC)
    return {
        "timestamp_utc": now.isoformat().replace("+00:00", "Z"),
        "data_path": str(data_path.resolve()),
        "output_dir": str(out_path.resolve()),
        "source_actor": source,
    }


def write_run_metadata(meta: dict[str, str], out_path: Path) -> Path:
    return write_json(meta, out_path, METADATA_FILENAME)
