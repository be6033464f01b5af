"""Tests for records parsing, the reader registry and graph loading."""

from __future__ import annotations

from pathlib import Path

import pytest

from hollywood_graph.adapters.adapter_protocol import READERS, get_reader
from hollywood_graph.errors import DuplicateActorError, ParseError
from hollywood_graph.model import (
    ActorRecord,
    DuplicateActorPolicy,
    GraphConfig,
    HollywoodConfig,
    InputConfig,
    Role,
)
from hollywood_graph.records import (
    build_graph,
    load_graph,
    parse_line,
    parse_records,
    read_records,
)
from hollywood_graph.traversal import compute_actor_numbers


class TestParseLine:
    def test_actor_and_movies(self) -> None:
        record = parse_line("Bacon, Kevin | Apollo 13 (1995) | Footloose (1984)")
        assert record.actor == "Bacon, Kevin"
        assert record.movies == ["Apollo 13 (1995)", "Footloose (1984)"]

    def test_fields_are_stripped(self) -> None:
        record = parse_line("  Alice  |  M1 \r")
        assert record == ActorRecord(actor="Alice", movies=["M1"])

    def test_custom_delimiter(self) -> None:
        record = parse_line("Alice\tM1\tM2", "\t")
        assert record.movies == ["M1", "M2"]

    def test_actor_without_movies(self) -> None:
        with pytest.raises(ParseError, match="at least one movie"):
            parse_line("Alice", where="data.txt:4")

    def test_empty_field(self) -> None:
        with pytest.raises(ParseError, match="empty actor or movie name"):
            parse_line("Alice |  | M2")

    def test_location_in_message(self) -> None:
        with pytest.raises(ParseError, match="data.txt:4"):
            parse_line("Alice", where="data.txt:4")


class TestParseRecords:
    def test_small_file(self, fixtures_dir: Path) -> None:
        output = parse_records(fixtures_dir / "small.txt")
        assert [r.actor for r in output.records] == ["Alice", "Bob", "Carol"]
        assert output.stats.records == 3
        assert output.stats.skipped == 0

    def test_blank_lines_skipped(self, fixtures_dir: Path) -> None:
        output = parse_records(fixtures_dir / "blank-lines.txt")
        assert output.stats.lines == 5
        assert output.stats.records == 3
        assert output.stats.skipped == 2

    def test_blank_lines_rejected(self, fixtures_dir: Path) -> None:
        with pytest.raises(ParseError, match="blank-lines.txt:2"):
            parse_records(fixtures_dir / "blank-lines.txt", skip_blank_lines=False)

    def test_malformed_reports_line(self, fixtures_dir: Path) -> None:
        with pytest.raises(ParseError, match="malformed.txt:2"):
            parse_records(fixtures_dir / "malformed.txt")

    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(ParseError, match="File not found"):
            parse_records(tmp_path / "nope.txt")

    def test_wrong_encoding(self, tmp_path: Path) -> None:
        path = tmp_path / "latin1.txt"
        path.write_bytes("Beyonc\xe9 | Dreamgirls\n".encode("latin-1"))
        with pytest.raises(ParseError, match="not valid utf-8"):
            parse_records(path)
        output = parse_records(path, encoding="latin-1")
        assert output.records[0].actor == "Beyoncé"

    def test_unknown_encoding(self, fixtures_dir: Path) -> None:
        with pytest.raises(ParseError, match="Unknown encoding 'no-such-codec'"):
            parse_records(fixtures_dir / "small.txt", encoding="no-such-codec")

    def test_leading_bom_stripped(self, tmp_path: Path) -> None:
        path = tmp_path / "bom.txt"
        path.write_bytes("\ufeffBacon, Kevin | Footloose (1984)\n".encode())
        output = parse_records(path)
        assert output.records[0].actor == "Bacon, Kevin"

    def test_only_newlines_split_records(self, tmp_path: Path) -> None:
        path = tmp_path / "controls.txt"
        path.write_bytes("Alice | M\x0c1 | M\x1c2\x85\r\nBob | M\x0b1\n".encode())
        output = parse_records(path)
        assert output.stats.lines == 2
        assert [r.actor for r in output.records] == ["Alice", "Bob"]
        assert output.records[0].movies == ["M\x0c1", "M\x1c2"]

    def test_crlf_and_no_trailing_newline(self, tmp_path: Path) -> None:
        path = tmp_path / "crlf.txt"
        path.write_bytes(b"Alice | M1\r\nBob | M1")
        output = parse_records(path)
        assert output.stats.lines == 2
        assert output.records[1] == ActorRecord(actor="Bob", movies=["M1"])

    def test_empty_file(self, tmp_path: Path) -> None:
        path = tmp_path / "empty.txt"
        path.write_text("")
        output = parse_records(path)
        assert output.records == []
        assert output.stats.lines == 0


class TestReadRecords:
    def test_by_reader_name(self, fixtures_dir: Path) -> None:
        records = read_records(fixtures_dir / "small.tsv", "tsv")
        assert [r.actor for r in records] == ["Alice", "Bob", "Carol"]

    def test_by_reader_instance(self, fixtures_dir: Path) -> None:
        records = read_records(fixtures_dir / "small.txt", get_reader("pipe"))
        assert records[0] == ActorRecord(actor="Alice", movies=["M1", "M2"])

    def test_default_is_pipe(self, fixtures_dir: Path) -> None:
        assert len(read_records(fixtures_dir / "hollywood.txt")) == 10


class TestReaders:
    def test_registry(self) -> None:
        assert set(READERS) == {"pipe", "tsv"}
        assert get_reader("pipe").delimiter == " | "
        assert get_reader("tsv").delimiter == "\t"

    def test_unknown_reader(self) -> None:
        with pytest.raises(KeyError):
            get_reader("xml")

    def test_tsv_matches_pipe(self, fixtures_dir: Path) -> None:
        pipe = get_reader("pipe").read(fixtures_dir / "small.txt")
        tsv = get_reader("tsv").read(fixtures_dir / "small.tsv")
        assert pipe.records == tsv.records


class TestBuildGraph:
    def test_build_from_records(self) -> None:
        records = [
            ActorRecord(actor="Alice", movies=["M1", "M2"]),
            ActorRecord(actor="Bob", movies=["M1"]),
        ]
        store = build_graph(records)
        assert store.vertex_count == 4
        assert store.lookup("M2", Role.MOVIE) is not None

    def test_graph_config_applied(self) -> None:
        store = build_graph([], GraphConfig(initial_capacity=64))
        assert store.capacity == 64


class TestLoadGraph:
    def test_hollywood_fixture(self, fixtures_dir: Path) -> None:
        store, stats = load_graph(fixtures_dir / "hollywood.txt")
        assert stats.records == 10
        assert store.vertex_count == 18
        assert store.edge_count == 34
        assert store.capacity == 40

        numbers = compute_actor_numbers(store, "Bacon, Kevin")
        assert numbers["Hanks, Tom"] == 1
        assert numbers["Hunt, Helen"] == 2
        assert numbers["Franco, James"] == 2
        assert "Streep, Meryl" not in numbers

    def test_tsv_via_config(self, fixtures_dir: Path) -> None:
        cfg = HollywoodConfig(input=InputConfig(format="tsv"))
        store, _ = load_graph(fixtures_dir / "small.tsv", cfg)
        assert compute_actor_numbers(store, "Alice") == {"Alice": 0, "Bob": 1, "Carol": 1}

    def test_repeated_actor_merged(self, fixtures_dir: Path) -> None:
        store, _ = load_graph(fixtures_dir / "repeated-actor.txt")
        assert compute_actor_numbers(store, "Alice")["Dave"] == 2
        assert store.vertex_count == 7

    def test_repeated_actor_rejected(self, fixtures_dir: Path) -> None:
        cfg = HollywoodConfig(graph=GraphConfig(duplicate_actors=DuplicateActorPolicy.REJECT))
        with pytest.raises(DuplicateActorError):
            load_graph(fixtures_dir / "repeated-actor.txt", cfg)
