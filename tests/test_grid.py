from __future__ import annotations

import pytest

from term_selection import Locations, Point
from term_selection.config import SelectionSettings
from term_selection.grid import GridValidationError, TextGrid


def make_grid() -> TextGrid:
    return TextGrid.from_text("hello world\nfoo,bar baz")


def test_rows_are_numbered_from_the_bottom() -> None:
    grid = make_grid()

    assert grid.dimensions() == (11, 2)
    assert grid.cell(Point(1, 0)) == "h"
    assert grid.cell(Point(0, 0)) == "f"


def test_semantic_search_stops_at_escape_chars() -> None:
    grid = make_grid()

    assert grid.semantic_search_left(Point(1, 8)) == Point(1, 6)
    assert grid.semantic_search_right(Point(1, 8)) == Point(1, 10)
    assert grid.semantic_search_left(Point(0, 5)) == Point(0, 4)
    assert grid.semantic_search_right(Point(0, 5)) == Point(0, 6)


def test_semantic_search_on_escape_char_returns_point() -> None:
    grid = make_grid()

    assert grid.semantic_search_left(Point(0, 3)) == Point(0, 3)
    assert grid.semantic_search_right(Point(0, 3)) == Point(0, 3)


def test_semantic_search_uses_configured_escape_chars() -> None:
    grid = TextGrid.from_text(
        "foo,bar baz", settings=SelectionSettings(semantic_escape_chars=" ")
    )

    assert grid.semantic_search_left(Point(0, 5)) == Point(0, 0)
    assert grid.semantic_search_right(Point(0, 5)) == Point(0, 6)


def test_semantic_search_clamps_out_of_range_points() -> None:
    grid = make_grid()

    assert grid.semantic_search_left(Point(9, 40)) == Point(1, 6)
    assert grid.semantic_search_right(Point(-3, 0)) == Point(0, 2)


def test_text_between_reads_top_row_first() -> None:
    grid = make_grid()

    text = grid.text_between(Locations(start=Point(0, 2), end=Point(1, 6)))

    assert text == "world\nfoo"


def test_text_between_accepts_unordered_points_on_one_row() -> None:
    grid = make_grid()

    assert grid.text_between(Locations(start=Point(1, 4), end=Point(1, 0))) == "hello"


def test_text_between_trims_padding_of_full_rows() -> None:
    grid = TextGrid.from_text("ab\ncd\nef", columns=4)

    text = grid.text_between(Locations(start=Point(0, 3), end=Point(2, 0)))

    assert text == "ab\ncd\nef"


def test_text_between_clamps_points_above_storage() -> None:
    grid = make_grid()

    text = grid.text_between(Locations(start=Point(5, 3), end=Point(0, 2)))

    assert text == "hello world\nfoo"


def test_text_between_clamps_points_below_viewport() -> None:
    grid = make_grid()

    text = grid.text_between(Locations(start=Point(1, 6), end=Point(-1, 0)))

    assert text == "world\nfoo,bar baz"


def test_cell_rejects_points_outside_storage() -> None:
    grid = make_grid()

    with pytest.raises(GridValidationError) as info:
        grid.cell(Point(2, 0))

    assert info.value.point == Point(2, 0)


def test_push_lines_moves_rows_into_scrollback() -> None:
    grid = TextGrid.from_text("a\nb", columns=3)

    shifted = grid.push_lines(["c"])

    assert shifted == 1
    assert grid.line_count == 3
    assert grid.cell(Point(0, 0)) == "c"
    assert grid.cell(Point(2, 0)) == "a"


def test_push_lines_respects_history_size() -> None:
    grid = TextGrid.from_text(
        "a\nb", columns=3, settings=SelectionSettings(history_size=1)
    )

    grid.push_lines(["c", "d"])

    assert grid.line_count == 3
    assert grid.cell(Point(2, 0)) == "b"
    assert grid.cell(Point(0, 0)) == "d"


def test_short_screens_are_padded_below_text() -> None:
    grid = TextGrid.from_text("top", screen_lines=3)

    assert grid.dimensions() == (3, 3)
    assert grid.cell(Point(2, 0)) == "t"
    assert grid.cell(Point(0, 0)) == " "


def test_grid_requires_positive_dimensions() -> None:
    with pytest.raises(GridValidationError):
        TextGrid([], columns=0, screen_lines=1)
