"""Exception types raised by the graph builder and record readers."""

from __future__ import annotations


class HollywoodGraphError(Exception):
    """Base class for every error this package raises."""


class ParseError(HollywoodGraphError):
    """Raised when an input file is missing, unreadable or holds a malformed record."""


class DuplicateActorError(HollywoodGraphError):
    """Raised when an actor is ingested twice under the reject policy."""

    def __init__(self, actor: str) -> None:
        super().__init__(f"Actor '{actor}' was already ingested")
        self.actor = actor
