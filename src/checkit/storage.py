"""Reading and writing checklist files."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from pathlib import Path

from checkit.codec import decode, encode
from checkit.errors import ChecklistLoadError, ChecklistSaveError
from checkit.task import Task

logger = logging.getLogger(__name__)


def load_checklist(path: str | Path, strict: bool = False) -> list[Task]:
    """Read and decode a checklist file.

    Raises ChecklistLoadError if the file cannot be read, and lets
    ChecklistParseError from the decoder propagate.
    """
    file_path = Path(path)
    try:
        content = file_path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise ChecklistLoadError(file_path, e) from e

    tasks = decode(content, strict=strict)
    logger.debug("Loaded %d tasks from %s", len(tasks), file_path)
    return tasks


def save_checklist(path: str | Path, tasks: Iterable[Task]) -> None:
    """Overwrite an existing checklist file with the encoded tasks.

    The file must already exist; it is never created here.
    """
    file_path = Path(path)
    content = encode(tasks)
    try:
        # r+ fails on a missing file instead of creating it
        with open(file_path, "r+", encoding="utf-8") as f:
            f.write(content)
            f.truncate()
            f.flush()
    except OSError as e:
        logger.warning("Failed to save %s: %s", file_path, e)
        raise ChecklistSaveError(file_path, e) from e

    logger.debug("Saved %s", file_path)
