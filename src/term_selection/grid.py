"""In-memory character grid implementing the selection geometry protocols."""

from __future__ import annotations

from typing import Iterable, List, Optional, Sequence, Tuple

from .config import SelectionSettings
from .index import Point
from .selection.span import Locations


class GridValidationError(RuntimeError):
    """Raised when a grid is misconfigured or queried outside its storage."""

    def __init__(self, message: str, *, point: Point | None = None) -> None:
        super().__init__(message)
        self.point = point


class TextGrid:
    """Fixed-width rows of text with a viewport and bounded scrollback.

    Line ``0`` is the bottom row of the viewport. Rows at lines
    ``screen_lines`` and above are scrollback, oldest last.
    """

    def __init__(
        self,
        rows: Sequence[str],
        *,
        columns: int,
        screen_lines: int,
        settings: Optional[SelectionSettings] = None,
    ) -> None:
        if columns <= 0 or screen_lines <= 0:
            raise GridValidationError(
                f"grid needs positive dimensions, got {columns}x{screen_lines}"
            )
        self.columns = columns
        self.screen_lines = screen_lines
        self.settings = settings or SelectionSettings()
        self._rows: List[str] = [self._fit(row) for row in rows]
        while len(self._rows) < screen_lines:
            self._rows.insert(0, self._fit(""))
        self._trim_history()

    @classmethod
    def from_text(
        cls,
        text: str,
        *,
        columns: Optional[int] = None,
        screen_lines: Optional[int] = None,
        settings: Optional[SelectionSettings] = None,
    ) -> "TextGrid":
        """Build a grid from rows listed top to bottom."""

        top_down = text.split("\n")
        width = columns or max(1, max(len(row) for row in top_down))
        height = screen_lines or len(top_down)
        # Short screens are padded with blank rows under the text.
        top_down.extend("" for _ in range(height - len(top_down)))
        return cls(
            list(reversed(top_down)),
            columns=width,
            screen_lines=height,
            settings=settings,
        )

    def dimensions(self) -> Tuple[int, int]:
        return self.columns, self.screen_lines

    @property
    def line_count(self) -> int:
        return len(self._rows)

    def cell(self, point: Point) -> str:
        self._check(point)
        return self._rows[point.line][point.col]

    def semantic_search_left(self, point: Point) -> Point:
        line, col = self._clamp(point)
        row = self._rows[line]
        if self.settings.is_escape(row[col]):
            return Point(line, col)
        while col > 0 and not self.settings.is_escape(row[col - 1]):
            col -= 1
        return Point(line, col)

    def semantic_search_right(self, point: Point) -> Point:
        line, col = self._clamp(point)
        row = self._rows[line]
        if self.settings.is_escape(row[col]):
            return Point(line, col)
        while col < self.columns - 1 and not self.settings.is_escape(row[col + 1]):
            col += 1
        return Point(line, col)

    def text_between(self, locations: Locations) -> str:
        """Return the text covered by ``locations`` in reading order.

        Endpoints outside storage are clamped: above the oldest row to its
        first cell, below the viewport to its last cell.
        """

        a = self._clamp_location(locations.start)
        b = self._clamp_location(locations.end)
        if a.line > b.line or (a.line == b.line and a.col <= b.col):
            first, last = a, b
        else:
            first, last = b, a

        if first.line == last.line:
            return self._rows[first.line][first.col : last.col + 1].rstrip()

        pieces = [self._rows[first.line][first.col :].rstrip()]
        for line in range(first.line - 1, last.line, -1):
            pieces.append(self._rows[line].rstrip())
        pieces.append(self._rows[last.line][: last.col + 1].rstrip())
        return "\n".join(pieces)

    def push_lines(self, rows: Iterable[str]) -> int:
        """Append output rows at the bottom and return how far content moved up."""

        shifted = 0
        for row in rows:
            self._rows.insert(0, self._fit(row))
            shifted += 1
        self._trim_history()
        return shifted

    def _fit(self, row: str) -> str:
        return row[: self.columns].ljust(self.columns)

    def _trim_history(self) -> None:
        limit = self.screen_lines + self.settings.history_size
        del self._rows[limit:]

    def _clamp(self, point: Point) -> Tuple[int, int]:
        line = max(0, min(point.line, len(self._rows) - 1))
        col = max(0, min(point.col, self.columns - 1))
        return line, col

    def _clamp_location(self, point: Point) -> Point:
        if point.line >= len(self._rows):
            return Point(len(self._rows) - 1, 0)
        if point.line < 0:
            return Point(0, self.columns - 1)
        return Point(point.line, max(0, min(point.col, self.columns - 1)))

    def _check(self, point: Point) -> None:
        if not 0 <= point.line < len(self._rows):
            raise GridValidationError("Line out of range", point=point)
        if not 0 <= point.col < self.columns:
            raise GridValidationError("Column out of range", point=point)


__all__ = ["GridValidationError", "TextGrid"]
