"""Selection gestures and their resolution into spans."""

from .models import (
    Anchor,
    Lines,
    Selection,
    Semantic,
    Simple,
    lines,
    semantic,
    simple,
)
from .span import Locations, Span, SpanType

__all__ = [
    "Anchor",
    "Lines",
    "Locations",
    "Selection",
    "Semantic",
    "Simple",
    "Span",
    "SpanType",
    "lines",
    "semantic",
    "simple",
]
