"""Textual integration; ``app`` additionally needs the ``textual`` package."""

from .controller import TextualSelectionAdapter, TextualUIHooks

__all__ = ["TextualSelectionAdapter", "TextualUIHooks"]
