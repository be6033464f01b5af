"""Graph vertex and its singly linked adjacency chain.

A Vertex that sits in a table slot is a *head*; every Vertex hanging off
its ``next`` link is an *edge node* naming one neighbour.  Edge nodes are
never looked up by identity and never occupy a slot of their own.

Identity is the pair (role, name), so an actor and a movie that happen to
share a title are different vertices.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterator

from hollywood_graph.model import Role


class Vertex:
    __slots__ = ("name", "role", "next")

    def __init__(self, name: str, role: Role) -> None:
        self.name = name
        self.role = role
        self.next: Vertex | None = None

    @property
    def key(self) -> tuple[Role, str]:
        return (self.role, self.name)

    def tail(self) -> Vertex:
        current = self
        while current.next is not None:
            current = current.next
        return current

    def append(self, node: Vertex) -> None:
        """Walk to the tail of this chain and link *node* there."""
        self.tail().next = node

    def chain(self) -> Iterator[Vertex]:
        """Yield the edge nodes after this vertex, in insertion order."""
        current = self.next
        while current is not None:
            yield current
            current = current.next

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Vertex):
            return NotImplemented
        return self.key == other.key

    def __hash__(self) -> int:
        return hash(self.key)

    def __repr__(self) -> str:
        return f"Vertex(name={self.name!r}, role={self.role.value})"
