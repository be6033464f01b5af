"""Actor numbers: layered breadth-first search over the actor/movie graph.

The frontier alternates between actors and movies.  Only actor layers are
recorded, so the reported hop count is the number of shared-movie links
between two actors.  Movie vertices act as relays and never appear in the
result.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterable

    from hollywood_graph.store import GraphStore
    from hollywood_graph.vertex import Vertex

from hollywood_graph.model import Role

NOT_FOUND_KEY = "null"
NOT_FOUND_VALUE = -1


def not_found() -> dict[str, int]:
    """The mapping returned when the source actor is not in the graph."""
    return {NOT_FOUND_KEY: NOT_FOUND_VALUE}


def is_not_found(numbers: dict[str, int]) -> bool:
    return numbers == not_found()


def compute_actor_numbers(store: GraphStore, source_name: str) -> dict[str, int]:
    """Map every actor reachable from *source_name* to its actor number.

    The source maps to 0.  Keys are inserted hop by hop, and by name within
    a hop.  Returns ``{"null": -1}`` if no actor named *source_name* exists.
    """
    source = store.lookup(source_name, Role.ACTOR)
    if source is None:
        return not_found()

    result: dict[str, int] = {}
    visited: set[Vertex] = set()
    frontier: set[Vertex] = {source}
    hop = 0

    while frontier:
        for vertex in sorted(frontier, key=lambda v: v.name):
            result[vertex.name] = hop
            visited.add(vertex)

        movies = _expand(store, frontier, visited)
        frontier = _expand(store, movies, visited)
        visited.update(movies)
        hop += 1

    return result


def _expand(store: GraphStore, vertices: Iterable[Vertex], visited: set[Vertex]) -> set[Vertex]:
    found: set[Vertex] = set()
    for vertex in vertices:
        for neighbor in store.neighbors(vertex):
            if neighbor not in visited:
                found.add(neighbor)
    return found
