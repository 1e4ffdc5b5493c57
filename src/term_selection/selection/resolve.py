"""Pure resolution of selection regions into spans.

None of these functions keep state or touch the grid beyond the read-only
queries of ``Dimensions`` and ``SemanticSearch``, so they are safe to call
from a render pass.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional

from term_selection.geometry import Dimensions, SelectionGeometry
from term_selection.index import Point, Side

from .span import Span, SpanType

if TYPE_CHECKING:
    from .models import Anchor


def _unsigned(point: Point, cols: int) -> Point:
    # Anything below the viewport collapses onto its bottom-right cell.
    if point.line < 0:
        return Point(line=0, col=cols - 1)
    return point


def span_simple(
    grid: Dimensions, start: "Anchor", end: "Anchor", alt_screen: bool
) -> Optional[Span]:
    cols, _ = grid.dimensions()

    # front is the bottom/end of the range, tail the top/beginning
    if start.point.line > end.point.line or (
        start.point.line == end.point.line and start.point.col <= end.point.col
    ):
        front, tail = end, start
    else:
        front, tail = start, end

    front_point, tail_point = front.point, tail.point

    # A click without a drag, or a drag between two touching half-cells
    if front_point == tail_point and front.side == tail.side:
        return None
    if (
        tail.side is Side.RIGHT
        and front.side is Side.LEFT
        and front_point.line == tail_point.line
        and front_point.col == tail_point.col + 1
    ):
        return None
    if tail_point.line < 0:
        return None

    # Ending on the left half of a cell leaves that cell out
    if front.side is Side.LEFT and start.point != end.point:
        if front_point.col == 0:
            front_point = Point(line=front_point.line + 1, col=cols - 1)
        else:
            front_point = front_point.with_col(front_point.col - 1)

    # Starting on the right half of a cell leaves that cell out
    if tail.side is Side.RIGHT and front_point != tail_point:
        if tail_point.col >= cols - 1:
            tail_point = Point(line=tail_point.line - 1, col=0)
        else:
            tail_point = tail_point.with_col(tail_point.col + 1)

    # Growing past the end of the bottom row leaves nothing on screen
    if tail_point.line < 0:
        return None

    if alt_screen and front_point.line < 0:
        front_point = Point(line=0, col=cols - 1)

    return Span(
        front=_unsigned(front_point, cols),
        tail=_unsigned(tail_point, cols),
        cols=cols,
        ty=SpanType.INCLUSIVE,
    )


def span_semantic(
    grid: SelectionGeometry, start: Point, end: Point, alt_screen: bool
) -> Optional[Span]:
    cols, lines = grid.dimensions()

    front, tail = (start, end) if start < end else (end, start)

    if alt_screen:
        if tail.line >= lines:
            if front.line >= lines:
                return None
            tail = Point(line=lines - 1, col=0)

        if front.line < 0:
            if tail.line < 0:
                return None
            front = Point(line=0, col=cols - 1)

    front = _unsigned(front, cols)
    tail = _unsigned(tail, cols)

    # Forward drags on a single row widen outward from each end; every other
    # ordering searches from front to the right and from tail to the left.
    if front < tail and front.line == tail.line:
        first = grid.semantic_search_left(front)
        last = grid.semantic_search_right(tail)
    else:
        first = grid.semantic_search_right(front)
        last = grid.semantic_search_left(tail)

    if first > last:
        first, last = last, first

    return Span(front=first, tail=last, cols=cols, ty=SpanType.INCLUSIVE)


def span_lines(
    grid: Dimensions,
    start: Point,
    end: Point,
    initial_line: int,
    alt_screen: bool,
) -> Optional[Span]:
    cols, lines = grid.dimensions()

    first = Point(line=initial_line, col=cols - 1)
    last = Point(line=initial_line, col=0)

    if alt_screen and first.line < 0:
        first = Point(line=0, col=cols - 1)

    low, high = sorted((start.line, end.line))
    first = first.with_line(min(first.line, low))
    last = last.with_line(max(last.line, high))

    if alt_screen:
        if last.line >= lines:
            if first.line >= lines:
                return None
            last = Point(line=lines - 1, col=0)

        if first.line < 0:
            if last.line < 0:
                return None
            first = Point(line=0, col=cols - 1)

    if last.line < 0:
        last = Point(line=0, col=0)

    return Span(
        front=_unsigned(first, cols),
        tail=last,
        cols=cols,
        ty=SpanType.INCLUSIVE,
    )


__all__ = ["span_lines", "span_semantic", "span_simple"]
