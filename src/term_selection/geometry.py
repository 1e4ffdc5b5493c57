"""Read-only capabilities a screen buffer lends to selection resolution."""

from __future__ import annotations

from typing import Protocol, Tuple

from .index import Point


class Dimensions(Protocol):
    """Anything with a rectangular viewport."""

    def dimensions(self) -> Tuple[int, int]:
        """Return ``(columns, lines)`` of the visible viewport."""
        ...


class SemanticSearch(Protocol):
    """Word-boundary lookups; what counts as a boundary is the buffer's policy."""

    def semantic_search_left(self, point: Point) -> Point:
        """Return the nearest semantic boundary to the left of ``point``."""
        ...

    def semantic_search_right(self, point: Point) -> Point:
        """Return the nearest semantic boundary to the right of ``point``."""
        ...


class SelectionGeometry(Dimensions, SemanticSearch, Protocol):
    """Both capabilities, as required by ``Selection.to_span``."""


__all__ = ["Dimensions", "SemanticSearch", "SelectionGeometry"]
