"""Graph store: open-addressing hash table of adjacency chains.

Every unique actor and every unique movie gets exactly one *head* vertex.
Heads live in an append-only arena (``_heads``) and the table holds integer
handles into it, so growing the table only re-probes handles: no vertex is
copied and no chain is re-linked.

Slot index = crc32(name) mod capacity, then linear probing forward
(wrapping) until an empty slot or a slot whose head has the same
(role, name).  Nothing is ever deleted, so no tombstones are needed.
The table doubles as soon as ``vertex_count / capacity`` reaches the load
factor, which keeps at least one slot free and lets probing terminate.

Edge counting is per direction: ingesting actor A in movie M once adds the
edge node M under A and the edge node A under M, i.e. 2 edges.
"""

from __future__ import annotations

import zlib
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterator, Sequence

from hollywood_graph.errors import DuplicateActorError
from hollywood_graph.logger import logger
from hollywood_graph.model import (
    DuplicateActorPolicy,
    GraphConfig,
    GraphStats,
    Role,
    SlotEntry,
)
from hollywood_graph.vertex import Vertex

DEFAULT_CAPACITY = 10
LOAD_FACTOR = 0.75


def slot_hash(name: str) -> int:
    """Non-negative hash of a vertex name, stable across interpreter runs."""
    return zlib.crc32(name.encode("utf-8"))


class GraphStore:
    """Bipartite actor/movie graph stored as a hash table of vertex chains.

    Args:
        initial_capacity: Number of table slots to start with.
        load_factor: Growth threshold, strictly between 0 and 1.
        duplicate_actors: What to do when an actor name is ingested twice.
    """

    def __init__(
        self,
        initial_capacity: int = DEFAULT_CAPACITY,
        load_factor: float = LOAD_FACTOR,
        duplicate_actors: DuplicateActorPolicy = DuplicateActorPolicy.MERGE,
    ) -> None:
        if initial_capacity < 1:
            raise ValueError("initial_capacity must be at least 1")
        if not 0.0 < load_factor < 1.0:
            raise ValueError("load_factor must be between 0 and 1 (exclusive)")
        self._table: list[int | None] = [None] * initial_capacity
        self._heads: list[Vertex] = []
        self._edge_count = 0
        self._load_factor = load_factor
        self._duplicate_actors = duplicate_actors

    @classmethod
    def from_config(cls, config: GraphConfig) -> GraphStore:
        return cls(
            initial_capacity=config.initial_capacity,
            load_factor=config.load_factor,
            duplicate_actors=config.duplicate_actors,
        )

    # ---- ingestion -------------------------------------------------------

    def insert_record(self, actor: str, movies: Sequence[str]) -> None:
        """Add one actor and an edge to each of their movies, in both directions."""
        if not movies:
            raise ValueError(f"Record for actor '{actor}' has no movies")

        probe = Vertex(actor, Role.ACTOR)
        index = self.find_slot(probe)
        handle = self._table[index]
        if handle is None:
            head = probe
            self._place(index, head)
            created = True
        elif self._duplicate_actors == DuplicateActorPolicy.REJECT:
            raise DuplicateActorError(actor)
        else:
            head = self._heads[handle]
            created = False
            logger.info("Actor '%s' seen again, merging %d movie(s)", actor, len(movies))

        # actor -> movies
        tail = head.tail()
        for movie in movies:
            tail.next = Vertex(movie, Role.MOVIE)
            tail = tail.next
            self._edge_count += 1

        if created:
            self._check_load()

        # movies -> actor
        for movie in movies:
            self._link_movie(movie, actor)

    def _link_movie(self, movie: str, actor: str) -> None:
        probe = Vertex(movie, Role.MOVIE)
        index = self.find_slot(probe)
        handle = self._table[index]
        if handle is None:
            self._place(index, probe)
            probe.next = Vertex(actor, Role.ACTOR)
            self._edge_count += 1
            self._check_load()
        else:
            self._heads[handle].append(Vertex(actor, Role.ACTOR))
            self._edge_count += 1

    def _place(self, index: int, head: Vertex) -> None:
        self._table[index] = len(self._heads)
        self._heads.append(head)

    def _check_load(self) -> None:
        while self.vertex_count / self.capacity >= self._load_factor:
            self.grow()

    # ---- hashing ---------------------------------------------------------

    def find_slot(self, probe: Vertex) -> int:
        """Index of *probe*'s head if present, else of the empty slot it would take."""
        return self._probe(self._table, probe)

    def _probe(self, table: list[int | None], vertex: Vertex) -> int:
        size = len(table)
        index = slot_hash(vertex.name) % size
        while True:
            handle = table[index]
            if handle is None or self._heads[handle] == vertex:
                return index
            index = (index + 1) % size

    def grow(self) -> None:
        """Double the table and re-probe every occupied slot."""
        old = self._table
        new: list[int | None] = [None] * (len(old) * 2)
        for handle in old:
            if handle is not None:
                new[self._probe(new, self._heads[handle])] = handle
        self._table = new
        logger.debug(
            "Grew table %d -> %d slots (%d heads)", len(old), len(new), self.vertex_count
        )

    # ---- queries ---------------------------------------------------------

    def lookup(self, name: str, role: Role = Role.ACTOR) -> Vertex | None:
        """Return the head vertex for (role, name), or None."""
        handle = self._table[self.find_slot(Vertex(name, role))]
        if handle is None:
            return None
        return self._heads[handle]

    def neighbors(self, vertex: Vertex) -> Iterator[Vertex]:
        """Edge nodes adjacent to *vertex*, which may be a head or an edge node."""
        head = self.lookup(vertex.name, vertex.role)
        if head is not None:
            yield from head.chain()

    @property
    def vertex_count(self) -> int:
        return len(self._heads)

    @property
    def edge_count(self) -> int:
        return self._edge_count

    @property
    def capacity(self) -> int:
        return len(self._table)

    @property
    def load(self) -> float:
        return self.vertex_count / self.capacity

    def stats(self) -> GraphStats:
        return GraphStats(
            vertex_count=self.vertex_count,
            edge_count=self.edge_count,
            capacity=self.capacity,
            load=self.load,
        )

    def dump(self) -> list[SlotEntry]:
        """One entry per table slot: empty, or the head and its chain in order."""
        entries: list[SlotEntry] = []
        for index, handle in enumerate(self._table):
            if handle is None:
                entries.append(SlotEntry(index=index))
                continue
            head = self._heads[handle]
            entries.append(
                SlotEntry(
                    index=index,
                    head=head.name,
                    role=head.role,
                    chain=[node.name for node in head.chain()],
                )
            )
        return entries

    def __len__(self) -> int:
        return self.vertex_count

    def __repr__(self) -> str:
        return (
            f"GraphStore(vertices={self.vertex_count}, edges={self.edge_count}, "
            f"capacity={self.capacity})"
        )
