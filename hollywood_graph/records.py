"""Record parsing and graph construction from line-oriented input files.

Each non-blank line is one record: an actor followed by one or more
movies, separated by a delimiter (``" | "`` for the pipe format)::

    Bacon, Kevin | Apollo 13 (1995) | Footloose (1984)
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterable
    from pathlib import Path

    from hollywood_graph.adapters.adapter_protocol import RecordReader

from pydantic import ValidationError

from hollywood_graph.adapters.adapter_protocol import get_reader
from hollywood_graph.errors import ParseError
from hollywood_graph.logger import logger
from hollywood_graph.model import (
    ActorRecord,
    GraphConfig,
    HollywoodConfig,
    ReaderOutput,
    ReadStats,
)
from hollywood_graph.store import GraphStore

PIPE_DELIMITER = " | "
TAB_DELIMITER = "\t"
BOM = "\ufeff"


def parse_records(
    path: Path,
    delimiter: str = PIPE_DELIMITER,
    encoding: str = "utf-8",
    skip_blank_lines: bool = True,
) -> ReaderOutput:
    """Parse a delimited records file into ActorRecords."""
    text = _load_text(path, encoding)
    # read_text has already folded \r\n and \r into \n
    rows = text.split("\n")
    if rows[-1] == "":
        rows.pop()

    records: list[ActorRecord] = []
    lines = 0
    skipped = 0
    for lineno, line in enumerate(rows, 1):
        lines += 1
        if not line.strip():
            if skip_blank_lines:
                logger.debug("%s:%d: skipping blank line", path, lineno)
                skipped += 1
                continue
            raise ParseError(f"{path}:{lineno}: blank line")
        records.append(parse_line(line, delimiter, f"{path}:{lineno}"))

    logger.info("Read %d record(s) from %s", len(records), path)
    return ReaderOutput(
        records=records,
        stats=ReadStats(lines=lines, records=len(records), skipped=skipped),
    )


def parse_line(line: str, delimiter: str = PIPE_DELIMITER, where: str = "<line>") -> ActorRecord:
    """Split one line into an actor and their movies."""
    fields = [field.strip() for field in line.split(delimiter)]
    if len(fields) < 2:
        raise ParseError(
            f"{where}: expected an actor followed by at least one movie, "
            f"separated by {delimiter!r}"
        )
    if not all(fields):
        raise ParseError(f"{where}: empty actor or movie name")
    try:
        return ActorRecord(actor=fields[0], movies=fields[1:])
    except ValidationError as e:
        raise ParseError(f"{where}: {e}") from e


def _load_text(path: Path, encoding: str) -> str:
    from pathlib import Path as _Path

    p = _Path(str(path))
    try:
        text = p.read_text(encoding=encoding)
    except FileNotFoundError:
        raise ParseError(f"File not found: {path}") from None
    except UnicodeDecodeError as e:
        raise ParseError(f"{path} is not valid {encoding} text: {e}") from None
    except LookupError as e:
        raise ParseError(f"Unknown encoding {encoding!r}: {e}") from None
    except OSError as e:
        raise ParseError(f"Cannot read file {path}: {e}") from None
    return text.removeprefix(BOM)


def read_records(path: Path, reader: RecordReader | str = "pipe") -> list[ActorRecord]:
    """Records of *path* parsed by *reader*, a RecordReader or a registered name."""
    if isinstance(reader, str):
        reader = get_reader(reader)
    return reader.read(path).records


def build_graph(records: Iterable[ActorRecord], config: GraphConfig | None = None) -> GraphStore:
    """Insert every record, in order, into a fresh GraphStore."""
    store = GraphStore.from_config(config or GraphConfig())
    for record in records:
        store.insert_record(record.actor, record.movies)
    logger.debug("Built graph: %r", store)
    return store


def load_graph(
    path: Path, config: HollywoodConfig | None = None
) -> tuple[GraphStore, ReadStats]:
    """Read *path* with the configured reader and build its graph."""
    cfg = config or HollywoodConfig()
    reader = get_reader(cfg.input.format)
    output = reader.read(
        path, encoding=cfg.input.encoding, skip_blank_lines=cfg.input.skip_blank_lines
    )
    return build_graph(output.records, cfg.graph), output.stats
