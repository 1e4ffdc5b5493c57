"""Grid coordinates shared by selections, spans, and geometry providers."""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum


class Side(str, Enum):
    """Half of a cell a selection boundary touches."""

    LEFT = "left"
    RIGHT = "right"


@dataclass(frozen=True, order=True, slots=True)
class Point:
    """A ``(line, col)`` cell coordinate.

    Lines count upward from the bottom row of the viewport: ``0`` is the
    bottom row, values at or above the screen height are scrollback rows and
    negative values lie below the viewport. Ordering compares the line first.
    """

    line: int
    col: int

    def shift(self, lines: int) -> "Point":
        return replace(self, line=self.line + lines)

    def with_line(self, line: int) -> "Point":
        return replace(self, line=line)

    def with_col(self, col: int) -> "Point":
        return replace(self, col=col)


__all__ = ["Point", "Side"]
