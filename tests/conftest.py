"""Shared test fixtures."""

from pathlib import Path

import pytest

from hollywood_graph.store import GraphStore

FIXTURES_DIR = Path(__file__).parent / "fixtures"

SMALL_RECORDS: list[list[str]] = [
    ["Alice", "M1", "M2"],
    ["Bob", "M1"],
    ["Carol", "M2"],
]


@pytest.fixture()
def fixtures_dir() -> Path:
    return FIXTURES_DIR


@pytest.fixture()
def small_store() -> GraphStore:
    store = GraphStore()
    for actor, *movies in SMALL_RECORDS:
        store.insert_record(actor, movies)
    return store
