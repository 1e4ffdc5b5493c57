from __future__ import annotations

from typing import Any, List, Tuple

import pytest

from term_selection import Lines, Point, Semantic, Side, Simple
from term_selection.config import SelectionSettings
from term_selection.grid import TextGrid
from term_selection.runtime import telemetry
from term_selection.tracker import ClickCounter, SelectionTracker


def record_events(tracker: SelectionTracker) -> List[Tuple[str, Any]]:
    events: List[Tuple[str, Any]] = []
    for name in ("selection.start", "selection.update", "selection.rotate", "selection.clear"):
        tracker.bus.subscribe(
            name, lambda payload, event=name: events.append((event, payload))
        )
    return events


def test_click_count_picks_selection_kind() -> None:
    tracker = SelectionTracker()

    assert isinstance(tracker.press(Point(0, 0), Side.LEFT), Simple)
    assert isinstance(tracker.press(Point(0, 0), Side.LEFT, clicks=2), Semantic)
    assert isinstance(tracker.press(Point(0, 0), Side.LEFT, clicks=3), Lines)
    assert isinstance(tracker.press(Point(0, 0), Side.LEFT, clicks=5), Lines)


def test_drag_selects_cells() -> None:
    grid = TextGrid.from_text("hello world")
    tracker = SelectionTracker()

    tracker.press(Point(0, 0), Side.LEFT)
    tracker.drag(Point(0, 3), Side.RIGHT)

    assert tracker.selected_text(grid) == "hell"


def test_double_click_selects_word() -> None:
    grid = TextGrid.from_text("hello world")
    tracker = SelectionTracker()

    tracker.press(Point(0, 7), Side.LEFT, clicks=2)

    assert tracker.selected_text(grid) == "world"


def test_triple_click_selects_line() -> None:
    grid = TextGrid.from_text("hello world\nsecond")
    tracker = SelectionTracker()

    tracker.press(Point(1, 3), Side.LEFT, clicks=3)

    assert tracker.selected_text(grid) == "hello world"


def test_scroll_keeps_selection_on_same_content() -> None:
    grid = TextGrid.from_text("one\ntwo", columns=5)
    tracker = SelectionTracker()
    tracker.press(Point(1, 0), Side.LEFT, clicks=3)

    tracker.scroll(grid.push_lines(["three"]))

    assert tracker.selected_text(grid) == "one"


def test_no_selection_resolves_to_none() -> None:
    grid = TextGrid.from_text("hello")
    tracker = SelectionTracker()

    assert tracker.span(grid) is None
    assert tracker.selected_text(grid) is None
    assert tracker.drag(Point(0, 1), Side.LEFT) is False


def test_click_without_drag_has_no_text() -> None:
    grid = TextGrid.from_text("hello")
    tracker = SelectionTracker()
    tracker.press(Point(0, 2), Side.LEFT)

    assert tracker.active
    assert tracker.selected_text(grid) is None


def test_lifecycle_events() -> None:
    tracker = SelectionTracker()
    events = record_events(tracker)

    tracker.press(Point(0, 1), Side.LEFT, clicks=2)
    tracker.drag(Point(0, 4), Side.RIGHT)
    tracker.scroll(2)
    tracker.scroll(0)
    tracker.clear()
    tracker.clear()

    assert [name for name, _ in events] == [
        "selection.start",
        "selection.update",
        "selection.rotate",
        "selection.clear",
    ]
    assert events[0][1]["kind"] == "semantic"
    assert events[2][1] == 2
    assert events[3][1] == "semantic"
    assert not tracker.active


def test_trackers_are_independent() -> None:
    left = SelectionTracker(name="left")
    right = SelectionTracker(name="right")

    left.press(Point(0, 0), Side.LEFT)

    assert left.active
    assert not right.active


def test_click_counter_chains_presses_on_same_cell() -> None:
    counter = ClickCounter(interval_ms=300)

    assert counter.register(Point(0, 0), 0) == 1
    assert counter.register(Point(0, 0), 100) == 2
    assert counter.register(Point(0, 0), 200) == 3
    assert counter.register(Point(0, 0), 1000) == 1
    assert counter.register(Point(0, 1), 1100) == 1


def test_press_at_uses_click_counter() -> None:
    tracker = SelectionTracker()

    tracker.press_at(Point(0, 2), Side.LEFT, timestamp_ms=0)
    second = tracker.press_at(Point(0, 2), Side.LEFT, timestamp_ms=120)

    assert isinstance(second, Semantic)


def test_selection_pushed_out_of_history_is_dropped() -> None:
    grid = TextGrid.from_text(
        "one\ntwo", columns=5, settings=SelectionSettings(history_size=1)
    )
    tracker = SelectionTracker()
    events = record_events(tracker)
    tracker.press(Point(1, 0), Side.LEFT, clicks=3)

    shifted = grid.push_lines(["a", "b", "c"])
    tracker.scroll(shifted, retained_lines=grid.line_count)

    assert not tracker.active
    assert tracker.selected_text(grid) is None
    assert events[-1] == ("selection.clear", "lines")


def test_partly_evicted_selection_is_clamped_to_history() -> None:
    grid = TextGrid.from_text(
        "one\ntwo", columns=5, settings=SelectionSettings(history_size=1)
    )
    tracker = SelectionTracker()
    tracker.press(Point(1, 0), Side.LEFT)
    tracker.drag(Point(0, 2), Side.RIGHT)
    assert tracker.selected_text(grid) == "one\ntwo"

    shifted = grid.push_lines(["x", "y"])
    tracker.scroll(shifted, retained_lines=grid.line_count)

    assert tracker.active
    assert tracker.selected_text(grid) == "two"


def test_empty_copy_is_recorded(monkeypatch: pytest.MonkeyPatch) -> None:
    recorded: List[str] = []
    monkeypatch.setattr(
        telemetry, "record_event", lambda name, **kwargs: recorded.append(name)
    )
    grid = TextGrid.from_text("hello")
    tracker = SelectionTracker()
    tracker.press(Point(0, 2), Side.LEFT)

    assert tracker.selected_text(grid) is None
    assert recorded[-1] == "selection.copy_empty"
