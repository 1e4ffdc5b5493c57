"""Selection resolution engine for grid-based terminal screens."""

from .index import Point, Side
from .selection import (
    Anchor,
    Lines,
    Locations,
    Selection,
    Semantic,
    Simple,
    Span,
    SpanType,
    lines,
    semantic,
    simple,
)

__all__ = [
    "Anchor",
    "Lines",
    "Locations",
    "Point",
    "Selection",
    "Semantic",
    "Side",
    "Simple",
    "Span",
    "SpanType",
    "lines",
    "semantic",
    "simple",
    "adapters",
    "config",
    "geometry",
    "grid",
    "runtime",
    "tracker",
]

__version__ = "0.1.0"
