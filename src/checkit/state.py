"""Application state driven by the interaction loop."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

from checkit.errors import ChecklistSaveError
from checkit.selectable import SelectableList
from checkit.storage import load_checklist, save_checklist
from checkit.task import Task

logger = logging.getLogger(__name__)


def _require_path(path: str | Path) -> None:
    if path == "" or path == Path(""):
        raise ValueError("Valid path is required.")


@dataclass
class SaveResult:
    """Outcome of a save. Failures are reported here rather than raised."""

    ok: bool
    message: str
    error: ChecklistSaveError | None = None


class AppState:
    """The task list, its selection cursor and the file it came from."""

    def __init__(self, tasks: list[Task], path: str | Path) -> None:
        _require_path(path)
        self.tasks: SelectableList[Task] = SelectableList.with_items(tasks)
        self._path = Path(path)
        self.dirty = False

    @classmethod
    def from_file(cls, path: str | Path, strict: bool = False) -> AppState:
        _require_path(path)
        return cls(load_checklist(path, strict=strict), path)

    @property
    def path(self) -> Path:
        return self._path

    def rows(self) -> list[str]:
        """Rendered rows in display order."""
        return [task.render() for task in self.tasks]

    def selected(self) -> int | None:
        return self.tasks.selected()

    def summary(self) -> tuple[int, int]:
        """Return (completed, total)."""
        done = sum(1 for task in self.tasks if task.completed)
        return done, len(self.tasks)

    def toggle_selected(self) -> None:
        task = self.tasks.selected_item()
        if task is None:
            return
        task.select()
        self.dirty = True

    def move_next(self) -> None:
        self.tasks.next()

    def move_previous(self) -> None:
        self.tasks.previous()

    def persist(self) -> SaveResult:
        """Write the tasks back to the source file.

        A failed save leaves the in-memory tasks untouched so it can be retried.
        """
        try:
            save_checklist(self._path, self.tasks.items)
        except ChecklistSaveError as e:
            return SaveResult(ok=False, message=f"Save failed: {e}", error=e)

        self.dirty = False
        logger.info("Saved %d tasks to %s", len(self.tasks), self._path)
        return SaveResult(ok=True, message=f"Saved {self._path.name}")
