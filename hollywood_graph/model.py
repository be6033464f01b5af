"""Canonical model: roles, records, stats, reports, config."""

from __future__ import annotations

from enum import StrEnum

from pydantic import BaseModel, Field


class Role(StrEnum):
    """Which side of the bipartite graph a vertex lives on."""

    ACTOR = "actor"
    MOVIE = "movie"


class DuplicateActorPolicy(StrEnum):
    """What insert_record does when an actor name was already ingested."""

    MERGE = "merge"
    REJECT = "reject"


class ActorRecord(BaseModel):
    """One input line: an actor followed by the movies they appear in."""

    actor: str = Field(min_length=1)
    movies: list[str] = Field(min_length=1)


class ReadStats(BaseModel):
    lines: int
    records: int
    skipped: int


class ReaderOutput(BaseModel):
    """Returned by a record reader. Contains only parsed records."""

    records: list[ActorRecord]
    stats: ReadStats


class SlotEntry(BaseModel):
    """One row of the adjacency dump. head is None for an empty slot."""

    index: int
    head: str | None = None
    role: Role | None = None
    chain: list[str] = Field(default_factory=list)


class GraphStats(BaseModel):
    vertex_count: int
    edge_count: int
    capacity: int
    load: float


class ActorNumberEntry(BaseModel):
    name: str
    hop: int


class ActorNumberReport(BaseModel):
    source: str
    found: bool
    entries: list[ActorNumberEntry] = Field(default_factory=list)
    reachable: int = 0
    average: float = 0.0
    max_hop: int = 0
    histogram: dict[int, int] = Field(default_factory=dict)


class GraphConfig(BaseModel):
    initial_capacity: int = Field(default=10, ge=1)
    load_factor: float = Field(default=0.75, gt=0.0, lt=1.0)
    duplicate_actors: DuplicateActorPolicy = DuplicateActorPolicy.MERGE


class InputConfig(BaseModel):
    format: str = "pipe"
    encoding: str = "utf-8"
    skip_blank_lines: bool = True


class ReportConfig(BaseModel):
    show_table: bool = False
    top: int = Field(default=0, ge=0)


class HollywoodConfig(BaseModel):
    graph: GraphConfig = Field(default_factory=GraphConfig)
    input: InputConfig = Field(default_factory=InputConfig)
    report: ReportConfig = Field(default_factory=ReportConfig)


class AnalysisResult(BaseModel):
    """Assembled at the end of the pipeline, after the traversal."""

    data_path: str
    read_stats: ReadStats
    graph: GraphStats
    numbers: ActorNumberReport
    table: list[SlotEntry] = Field(default_factory=list)
