"""Per-window owner of the active selection.

The tracker turns raw pointer input into selection gestures, keeps the
gesture aligned with scrolling content and resolves it on demand. Every
window owns its own tracker; nothing here is shared.
"""

from __future__ import annotations

from typing import Callable, Dict, Optional

from term_selection.runtime import telemetry

from .config import SelectionSettings
from .geometry import SelectionGeometry
from .grid import TextGrid
from .index import Point, Side
from .selection import Selection, Span, lines, semantic, simple


class SelectionBus:
    """Minimal event bus for selection lifecycle signals."""

    def __init__(self) -> None:
        self._subscribers: Dict[str, list[Callable[[object], None]]] = {}

    def subscribe(self, event: str, callback: Callable[[object], None]) -> None:
        self._subscribers.setdefault(event, []).append(callback)

    def emit(self, event: str, payload: object | None = None) -> None:
        for callback in self._subscribers.get(event, []):
            callback(payload)


class ClickCounter:
    """Counts consecutive presses on the same cell within an interval."""

    def __init__(self, interval_ms: int) -> None:
        self.interval_ms = interval_ms
        self._last_point: Optional[Point] = None
        self._last_ms: Optional[float] = None
        self._count = 0

    def register(self, point: Point, timestamp_ms: float) -> int:
        chained = (
            self._last_point == point
            and self._last_ms is not None
            and 0 <= timestamp_ms - self._last_ms <= self.interval_ms
        )
        self._count = self._count + 1 if chained else 1
        self._last_point = point
        self._last_ms = timestamp_ms
        return self._count

    def reset(self) -> None:
        self._last_point = None
        self._last_ms = None
        self._count = 0


def _kind(selection: Selection) -> str:
    return type(selection).__name__.lower()


class SelectionTracker:
    def __init__(
        self,
        *,
        name: str = "default",
        settings: Optional[SelectionSettings] = None,
        bus: Optional[SelectionBus] = None,
    ) -> None:
        self.name = name
        self.settings = settings or SelectionSettings()
        self.bus = bus or SelectionBus()
        self.clicks = ClickCounter(self.settings.multi_click_interval_ms)
        self.selection: Optional[Selection] = None
        self.logger = telemetry.get_logger("term_selection.tracker")

    @property
    def active(self) -> bool:
        return self.selection is not None

    def press(self, point: Point, side: Side, *, clicks: int = 1) -> Selection:
        """Start a new gesture; the click count picks the selection kind."""

        if clicks >= 3:
            selection: Selection = lines(point)
        elif clicks == 2:
            selection = semantic(point)
        else:
            selection = simple(point, side)
        self.selection = selection

        payload = {"kind": _kind(selection), "point": point, "clicks": clicks}
        telemetry.record_event("selection.start", data={"tracker": self.name, **payload})
        self.bus.emit("selection.start", payload)
        return selection

    def press_at(self, point: Point, side: Side, *, timestamp_ms: float) -> Selection:
        return self.press(point, side, clicks=self.clicks.register(point, timestamp_ms))

    def drag(self, point: Point, side: Side) -> bool:
        if self.selection is None:
            return False
        self.selection.update(point, side)
        self.bus.emit("selection.update", {"point": point, "side": side})
        return True

    def scroll(self, offset: int, *, retained_lines: Optional[int] = None) -> None:
        """Follow content that moved ``offset`` lines up (negative: down).

        With ``retained_lines`` set, a selection whose every row now lies
        beyond the retained history is dropped.
        """

        if self.selection is None or offset == 0:
            return
        self.selection.rotate(offset)
        self.logger.debug(f"tracker={self.name} rotate offset={offset}")
        self.bus.emit("selection.rotate", offset)
        if retained_lines is not None and self.selection.lowest_line() >= retained_lines:
            self.clear()

    def clear(self) -> None:
        if self.selection is None:
            return
        kind = _kind(self.selection)
        self.selection = None
        self.clicks.reset()
        telemetry.record_event("selection.clear", data={"tracker": self.name, "kind": kind})
        self.bus.emit("selection.clear", kind)

    def span(
        self, geometry: SelectionGeometry, *, alt_screen: bool = False
    ) -> Optional[Span]:
        if self.selection is None:
            return None
        return self.selection.to_span(geometry, alt_screen)

    def selected_text(self, grid: TextGrid, *, alt_screen: bool = False) -> Optional[str]:
        """Resolve the selection against ``grid`` and extract its text."""

        if self.selection is None:
            return None
        with telemetry.span(
            "selection::copy",
            component="tracker",
            metadata={"tracker": self.name, "kind": _kind(self.selection)},
        ):
            span = self.selection.to_span(grid, alt_screen)
            if span is None:
                telemetry.record_event(
                    "selection.copy_empty",
                    data={"tracker": self.name, "kind": _kind(self.selection)},
                )
                return None
            return grid.text_between(span.to_locations())


__all__ = ["ClickCounter", "SelectionBus", "SelectionTracker"]
