"""Selection gestures: cell-precise, word-precise, and line-precise.

A selection starts when a mouse button goes down and is updated on every
pointer move. ``start`` always holds the gesture origin and ``end`` the most
recent pointer position; the pair is never reordered here, ``to_span`` works
out the ordering each time it resolves the selection.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Union

from term_selection.geometry import Dimensions, SelectionGeometry
from term_selection.index import Point, Side

from .resolve import span_lines, span_semantic, span_simple
from .span import Span


@dataclass(frozen=True, slots=True)
class Anchor:
    """A point plus the half of the cell the boundary touches."""

    point: Point
    side: Side

    def shift(self, lines: int) -> "Anchor":
        return Anchor(self.point.shift(lines), self.side)


@dataclass(slots=True)
class Simple:
    """Tracks exactly which cells were covered, with half-cell precision."""

    start: Anchor
    end: Anchor

    def update(self, point: Point, side: Side) -> None:
        self.end = Anchor(point, side)

    def rotate(self, offset: int) -> None:
        self.start = self.start.shift(offset)
        self.end = self.end.shift(offset)

    def is_empty(self) -> bool:
        return self.start == self.end

    def lowest_line(self) -> int:
        return min(self.start.point.line, self.end.point.line)

    def to_span(self, grid: Dimensions, alt_screen: bool = False) -> Optional[Span]:
        return span_simple(grid, self.start, self.end, alt_screen)


@dataclass(slots=True)
class Semantic:
    """Expands both ends out to the nearest semantic boundary."""

    start: Point
    end: Point

    def update(self, point: Point, side: Side = Side.LEFT) -> None:
        del side
        self.end = point

    def rotate(self, offset: int) -> None:
        self.start = self.start.shift(offset)
        self.end = self.end.shift(offset)

    def is_empty(self) -> bool:
        return False

    def lowest_line(self) -> int:
        return min(self.start.line, self.end.line)

    def to_span(
        self, grid: SelectionGeometry, alt_screen: bool = False
    ) -> Optional[Span]:
        return span_semantic(grid, self.start, self.end, alt_screen)


@dataclass(slots=True)
class Lines:
    """Always covers whole rows; ``initial_line`` stays selected throughout."""

    start: Point
    end: Point
    initial_line: int

    def update(self, point: Point, side: Side = Side.LEFT) -> None:
        del side
        self.end = point

    def rotate(self, offset: int) -> None:
        self.start = self.start.shift(offset)
        self.end = self.end.shift(offset)
        self.initial_line += offset

    def is_empty(self) -> bool:
        return False

    def lowest_line(self) -> int:
        return min(self.start.line, self.end.line, self.initial_line)

    def to_span(self, grid: Dimensions, alt_screen: bool = False) -> Optional[Span]:
        return span_lines(grid, self.start, self.end, self.initial_line, alt_screen)


Selection = Union[Simple, Semantic, Lines]


def simple(point: Point, side: Side) -> Simple:
    anchor = Anchor(point, side)
    return Simple(start=anchor, end=anchor)


def semantic(point: Point) -> Semantic:
    return Semantic(start=point, end=point)


def lines(point: Point) -> Lines:
    return Lines(start=point, end=point, initial_line=point.line)


__all__ = [
    "Anchor",
    "Lines",
    "Selection",
    "Semantic",
    "Simple",
    "lines",
    "semantic",
    "simple",
]
