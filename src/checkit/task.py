"""Checklist task model."""

from __future__ import annotations

from dataclasses import dataclass

DONE_MARKER = "x"
OPEN_MARKER = " "


@dataclass
class Task:
    """A single checklist entry."""

    completed: bool
    content: str

    @property
    def marker(self) -> str:
        return DONE_MARKER if self.completed else OPEN_MARKER

    def select(self) -> None:
        """Toggle completion."""
        self.completed = not self.completed

    def render(self) -> str:
        """Return the display row, e.g. ``[x] Buy milk``."""
        return f"[{self.marker}] {self.content}"
