"""Selection settings with environment overrides."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Optional

ENV_PREFIX = "TERM_SELECTION_"

DEFAULT_SEMANTIC_ESCAPE_CHARS = ",│`|:\"' ()[]{}<>\t"
DEFAULT_HISTORY_SIZE = 10_000
DEFAULT_MULTI_CLICK_MS = 300


class SettingsError(ValueError):
    """Raised when a setting is out of range or cannot be parsed."""


def _env(name: str, default: Optional[str] = None) -> Optional[str]:
    return os.getenv(f"{ENV_PREFIX}{name}", default)


def _env_int(name: str, default: int) -> int:
    raw = _env(name)
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw)
    except ValueError as exc:
        raise SettingsError(f"{ENV_PREFIX}{name} must be an integer, got {raw!r}") from exc


@dataclass(frozen=True, slots=True)
class SelectionSettings:
    """Knobs for word boundaries, scrollback depth and click chaining."""

    semantic_escape_chars: str = DEFAULT_SEMANTIC_ESCAPE_CHARS
    history_size: int = DEFAULT_HISTORY_SIZE
    multi_click_interval_ms: int = DEFAULT_MULTI_CLICK_MS

    def __post_init__(self) -> None:
        if self.history_size < 0:
            raise SettingsError("history_size cannot be negative")
        if self.multi_click_interval_ms < 0:
            raise SettingsError("multi_click_interval_ms cannot be negative")

    @classmethod
    def from_env(cls) -> "SelectionSettings":
        return cls(
            semantic_escape_chars=_env(
                "SEMANTIC_ESCAPE_CHARS", DEFAULT_SEMANTIC_ESCAPE_CHARS
            )
            or "",
            history_size=_env_int("HISTORY_SIZE", DEFAULT_HISTORY_SIZE),
            multi_click_interval_ms=_env_int("MULTI_CLICK_MS", DEFAULT_MULTI_CLICK_MS),
        )

    def is_escape(self, char: str) -> bool:
        return char in self.semantic_escape_chars


__all__ = [
    "DEFAULT_SEMANTIC_ESCAPE_CHARS",
    "ENV_PREFIX",
    "SelectionSettings",
    "SettingsError",
]
