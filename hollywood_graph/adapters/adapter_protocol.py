"""Reader protocol and registry for record file formats."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from pathlib import Path

    from hollywood_graph.model import ReaderOutput


class RecordReader(Protocol):
    """Protocol for parsing a records file into ActorRecords."""

    def read(
        self, path: Path, encoding: str = "utf-8", skip_blank_lines: bool = True
    ) -> ReaderOutput:
        """Parse the file into records plus read stats."""
        ...

    @property
    def delimiter(self) -> str:
        """Field separator this reader splits lines on."""
        ...


class DelimitedReader:
    """Reader for one-record-per-line files with a fixed field separator."""

    def __init__(self, delimiter: str) -> None:
        self._delimiter = delimiter

    @property
    def delimiter(self) -> str:
        return self._delimiter

    def read(self, path, encoding="utf-8", skip_blank_lines=True):  # type: ignore[no-untyped-def]
        from hollywood_graph.records import parse_records

        return parse_records(
            path, self._delimiter, encoding=encoding, skip_blank_lines=skip_blank_lines
        )


# Registry of available readers
READERS: dict[str, RecordReader] = {
    "pipe": DelimitedReader(" | "),
    "tsv": DelimitedReader("\t"),
}


def get_reader(reader_name: str) -> RecordReader:
    """Get reader by name, raise KeyError if not found."""
    return READERS[reader_name]
