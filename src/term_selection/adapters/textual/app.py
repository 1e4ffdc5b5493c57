"""Executable Textual demo: select text in a small terminal-like grid."""

from __future__ import annotations

import argparse
import os
from typing import Optional, Sequence

try:  # pragma: no cover - imported only when demo is run
    from textual import events
    from textual.app import App, ComposeResult
    from textual.widgets import Footer, Header, Static
except ModuleNotFoundError as exc:  # pragma: no cover - friendly error for missing dep
    raise RuntimeError(
        "Install the 'textual' package to use term_selection.adapters.textual.app"
    ) from exc

from term_selection.config import SelectionSettings
from term_selection.grid import TextGrid
from term_selection.index import Point
from term_selection.runtime import telemetry
from term_selection.tracker import SelectionTracker

from .controller import TextualSelectionAdapter, TextualUIHooks

SAMPLE_TEXT = """\
$ ls -la ~/projects/term-selection
drwxr-xr-x  5 user staff  160 Oct 19 08:24 src
-rw-r--r--  1 user staff 1024 Oct 19 08:24 pyproject.toml
$ echo "double-click a word, triple-click a line"
double-click a word, triple-click a line"""


def _rows(grid: TextGrid) -> str:
    columns, screen_lines = grid.dimensions()
    return "\n".join(
        "".join(grid.cell(Point(line, col)) for col in range(columns))
        for line in range(screen_lines - 1, -1, -1)
    )


class GridView(Static):
    """Shows the grid viewport and forwards mouse input to the adapter."""

    def __init__(self, grid: TextGrid, **kwargs) -> None:
        super().__init__(_rows(grid), markup=False, **kwargs)
        self.adapter: TextualSelectionAdapter | None = None

    def on_mouse_down(self, event: events.MouseDown) -> None:
        if self.adapter is None:
            return
        self.capture_mouse()
        x, y = self.adapter.pointer_position(event)
        self.adapter.handle_mouse_down(x, y, chain=getattr(event, "chain", 1))

    def on_mouse_move(self, event: events.MouseMove) -> None:
        if self.adapter is not None:
            self.adapter.handle_mouse_move(*self.adapter.pointer_position(event))

    def on_mouse_up(self, event: events.MouseUp) -> None:
        self.release_mouse()
        if self.adapter is not None:
            self.adapter.handle_mouse_up(*self.adapter.pointer_position(event))


class SelectionDemoApp(App[None]):
    """Minimal Textual UI hosting a TextGrid and its selection tracker."""

    CSS = """
	#grid-view {
		height: auto;
		padding: 0;
	}

	#selection-line {
		height: auto;
		background: $surface-darken-1;
		padding: 0 1;
	}

	#status-line {
		height: 1;
		background: $surface-darken-2;
		padding: 0 1;
	}
	"""

    BINDINGS = [
        ("ctrl+q", "quit", "Quit"),
        ("escape", "clear_selection", "Clear"),
        ("ctrl+o", "emit_output", "Scroll output"),
    ]

    def __init__(self, *, settings: Optional[SelectionSettings] = None) -> None:
        super().__init__()
        self.settings = settings or SelectionSettings.from_env()
        self.grid = TextGrid.from_text(SAMPLE_TEXT, settings=self.settings)
        self.adapter: TextualSelectionAdapter | None = None
        self._grid_widget = GridView(self.grid, id="grid-view")
        self._selection_widget = Static("", id="selection-line", markup=False)
        self._status_widget = Static("", id="status-line")
        self._output_counter = 0

    def compose(self) -> ComposeResult:
        yield Header()
        yield self._grid_widget
        yield self._selection_widget
        yield self._status_widget
        yield Footer()

    def on_mount(self) -> None:
        hooks = TextualUIHooks(
            update_selection=self._update_selection,
            update_status=self._status_widget.update,
            refresh_grid=lambda grid: self._grid_widget.update(_rows(grid)),
            log=telemetry.get_logger("term_selection.adapters.textual").debug,
        )
        tracker = SelectionTracker(name="demo", settings=self.settings)
        self.adapter = TextualSelectionAdapter(tracker, self.grid, hooks)
        self._grid_widget.adapter = self.adapter

    def action_clear_selection(self) -> None:
        if self.adapter:
            self.adapter.clear()

    def action_emit_output(self) -> None:
        if self.adapter:
            self._output_counter += 1
            self.adapter.handle_output([f"output line {self._output_counter}"])

    def _update_selection(self, text: Optional[str]) -> None:
        self._selection_widget.update(repr(text) if text is not None else "")


def _parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Run the selection Textual demo.")
    parser.add_argument(
        "--log-preset",
        default=os.environ.get("TERM_SELECTION_LOG_PRESET"),
        help="Telemetry preset: development, production or performance",
    )
    return parser.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None) -> None:
    args = _parse_args(argv)
    if args.log_preset:
        telemetry.configure(preset=args.log_preset)
    SelectionDemoApp().run()


if __name__ == "__main__":  # pragma: no cover - manual demo
    main()
