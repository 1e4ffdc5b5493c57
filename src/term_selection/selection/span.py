"""Resolved selection ranges and their conversion to copy locations."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from term_selection.index import Point


class SpanType(str, Enum):
    """How the endpoints of a ``Span`` are interpreted."""

    INCLUSIVE = "inclusive"
    EXCLUSIVE = "exclusive"
    EXCLUDE_FRONT = "exclude_front"
    EXCLUDE_TAIL = "exclude_tail"


@dataclass(frozen=True, slots=True)
class Locations:
    """Inclusive cell range ready for text extraction."""

    start: Point
    end: Point


@dataclass(frozen=True, slots=True)
class Span:
    """A normalized range of selected cells.

    ``front`` is the end of the range in reading order and ``tail`` its
    beginning. ``cols`` is the grid width at the time the span was resolved;
    wrap arithmetic in ``to_locations`` uses it rather than asking the grid
    again.
    """

    front: Point
    tail: Point
    cols: int
    ty: SpanType = SpanType.INCLUSIVE

    def to_locations(self) -> Locations:
        if self.ty is SpanType.EXCLUSIVE:
            start, end = _advance(self.front, self.cols), _retreat(self.tail, self.cols)
        elif self.ty is SpanType.EXCLUDE_FRONT:
            start, end = _advance(self.front, self.cols), self.tail
        elif self.ty is SpanType.EXCLUDE_TAIL:
            start, end = self.front, _retreat(self.tail, self.cols)
        else:
            start, end = self.front, self.tail
        return Locations(start=start, end=end)


def _advance(point: Point, cols: int) -> Point:
    if point.col == cols - 1:
        return Point(line=point.line + 1, col=0)
    return point.with_col(point.col + 1)


def _retreat(point: Point, cols: int) -> Point:
    if point.col == 0:
        if point.line != 0:
            return Point(line=point.line - 1, col=cols - 1)
        return point
    return point.with_col(point.col - 1)


__all__ = ["Locations", "Span", "SpanType"]
