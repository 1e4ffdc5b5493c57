"""Bridges widget mouse events to a SelectionTracker without importing Textual."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Iterable, Optional, Tuple

from term_selection.grid import TextGrid
from term_selection.index import Point, Side
from term_selection.tracker import SelectionTracker


def _noop(*_args, **_kwargs) -> None:  # pragma: no cover - default hook
    return None


@dataclass(slots=True)
class TextualUIHooks:
    """Callbacks the adapter uses to update host widgets."""

    update_selection: Callable[[Optional[str]], None]
    update_status: Callable[[str], None] = _noop
    refresh_grid: Callable[[TextGrid], None] = _noop
    handle_event: Callable[[str, object | None], None] = _noop
    log: Callable[[str], None] = _noop


class TextualSelectionAdapter:
    """Translates cell-space pointer input into tracker gestures.

    ``x`` may carry a fractional part: below ``.5`` the pointer is on the
    left half of the cell. ``y`` counts rows from the top of the widget.
    """

    def __init__(
        self,
        tracker: SelectionTracker,
        grid: TextGrid,
        hooks: TextualUIHooks,
        *,
        alt_screen: bool = False,
    ) -> None:
        self.tracker = tracker
        self.grid = grid
        self.hooks = hooks
        self.alt_screen = alt_screen
        self._dragging = False
        self._origin: Optional[Tuple[Point, Side]] = None
        self._subscribe_events()

    @staticmethod
    def pointer_position(event: Any) -> Tuple[float, int]:
        """Cell-space pointer position of a Textual mouse event.

        Prefers the sub-cell ``pointer_x``/``pointer_y`` and falls back to the
        whole-cell ``x``/``y``.
        """

        pointer_x = getattr(event, "pointer_x", None)
        pointer_y = getattr(event, "pointer_y", None)
        x = float(pointer_x) if pointer_x is not None else float(event.x)
        y = int(pointer_y) if pointer_y is not None else int(event.y)
        return x, y

    def point_at(self, x: float, y: int) -> Tuple[Point, Side]:
        columns, screen_lines = self.grid.dimensions()
        y = max(0, min(y, screen_lines - 1))
        if x >= columns:
            return Point(screen_lines - 1 - y, columns - 1), Side.RIGHT
        if x < 0:
            return Point(screen_lines - 1 - y, 0), Side.LEFT
        col = int(x)
        side = Side.RIGHT if x - col >= 0.5 else Side.LEFT
        return Point(screen_lines - 1 - y, col), side

    def handle_mouse_down(self, x: float, y: int, *, chain: int = 1) -> None:
        point, side = self.point_at(x, y)
        self.tracker.press(point, side, clicks=chain)
        self._origin = (point, side)
        self._dragging = True
        self._publish()

    def handle_mouse_move(self, x: float, y: int) -> None:
        if not self._dragging:
            return
        point, side = self.point_at(x, y)
        if float(x).is_integer():
            side = self._drag_side(point, side)
        if self.tracker.drag(point, side):
            self._publish()

    def _drag_side(self, point: Point, side: Side) -> Side:
        # Whole-cell positions carry no half; cover the cell under the pointer
        # when dragging forward in reading order.
        if self._origin is None:
            return side
        origin, origin_side = self._origin
        if point == origin:
            return origin_side
        if point.line < origin.line or (point.line == origin.line and point.col > origin.col):
            return Side.RIGHT
        return Side.LEFT

    def handle_mouse_up(self, x: float, y: int) -> Optional[str]:
        """Finish the drag and return the text that ended up selected."""

        self.handle_mouse_move(x, y)
        self._dragging = False
        text = self.selected_text()
        if text is None:
            self.tracker.clear()
        return text

    def handle_output(self, rows: Iterable[str]) -> None:
        """Append terminal output and keep the selection on the same content."""

        shifted = self.grid.push_lines(rows)
        if self._origin is not None:
            origin, origin_side = self._origin
            self._origin = (origin.shift(shifted), origin_side)
        self.tracker.scroll(shifted, retained_lines=self.grid.line_count)
        self.hooks.refresh_grid(self.grid)
        self._publish()

    def clear(self) -> None:
        self._dragging = False
        self._origin = None
        self.tracker.clear()
        self._publish()

    def selected_text(self) -> Optional[str]:
        return self.tracker.selected_text(self.grid, alt_screen=self.alt_screen)

    def _publish(self) -> None:
        text = self.selected_text()
        self.hooks.update_selection(text)
        if text is None:
            self.hooks.update_status("no selection")
        else:
            self.hooks.update_status(f"{len(text)} chars selected")

    def _subscribe_events(self) -> None:
        for event in (
            "selection.start",
            "selection.update",
            "selection.rotate",
            "selection.clear",
        ):
            self.tracker.bus.subscribe(
                event, lambda payload, name=event: self._handle_event(name, payload)
            )

    def _handle_event(self, name: str, payload: object | None) -> None:
        self.hooks.log(f"event -> {name} payload={payload!r}")
        self.hooks.handle_event(name, payload)


__all__ = ["TextualSelectionAdapter", "TextualUIHooks"]
