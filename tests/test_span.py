from __future__ import annotations

import pytest

from term_selection import Locations, Point, Span, SpanType


def test_inclusive_span_locations_are_endpoints() -> None:
    span = Span(front=Point(0, 1), tail=Point(1, 3), cols=5)

    assert span.to_locations() == Locations(start=Point(0, 1), end=Point(1, 3))


def test_exclusive_span_wraps_both_ends() -> None:
    span = Span(front=Point(0, 4), tail=Point(2, 0), cols=5, ty=SpanType.EXCLUSIVE)

    assert span.to_locations() == Locations(start=Point(1, 0), end=Point(1, 4))


@pytest.mark.parametrize(
    "ty, start, end",
    [
        (SpanType.EXCLUDE_FRONT, Point(0, 2), Point(1, 3)),
        (SpanType.EXCLUDE_TAIL, Point(0, 1), Point(1, 2)),
        (SpanType.EXCLUSIVE, Point(0, 2), Point(1, 2)),
    ],
)
def test_one_sided_exclusion(ty: SpanType, start: Point, end: Point) -> None:
    span = Span(front=Point(0, 1), tail=Point(1, 3), cols=5, ty=ty)

    assert span.to_locations() == Locations(start=start, end=end)


def test_exclude_tail_at_origin_stays_put() -> None:
    span = Span(front=Point(0, 0), tail=Point(0, 0), cols=5, ty=SpanType.EXCLUDE_TAIL)

    assert span.to_locations().end == Point(0, 0)


def test_wrap_uses_columns_captured_in_span() -> None:
    narrow = Span(front=Point(0, 2), tail=Point(3, 0), cols=3, ty=SpanType.EXCLUSIVE)
    wide = Span(front=Point(0, 2), tail=Point(3, 0), cols=8, ty=SpanType.EXCLUSIVE)

    assert narrow.to_locations() == Locations(start=Point(1, 0), end=Point(2, 2))
    assert wide.to_locations() == Locations(start=Point(0, 3), end=Point(2, 7))
