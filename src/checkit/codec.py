"""Checklist text format.

Each line is ``[`` + status character + ``]`` + space + content::

    [x] Completed item text
    [ ] Incomplete item text

The status character ``x`` marks a completed task; any other character
(including a space) marks an open one.
"""

from __future__ import annotations

from collections.abc import Iterable

from checkit.errors import ChecklistParseError
from checkit.task import DONE_MARKER, Task

MARKER_OFFSET = 1
CONTENT_OFFSET = 3


def decode(text: str, strict: bool = False) -> list[Task]:
    """Parse checklist file contents into tasks, in file order.

    Leading and trailing whitespace of the whole input is dropped first, so an
    empty or blank file gives an empty list. Any line too short to hold a
    marker and a content offset aborts the decode. With ``strict`` the bracket
    characters around the marker are checked as well.
    """
    text = text.strip()
    if not text:
        return []

    return [
        _decode_line(number, line, strict)
        for number, line in enumerate(text.split("\n"), start=1)
    ]


def _decode_line(number: int, line: str, strict: bool) -> Task:
    line = line.removesuffix("\r")

    if len(line) <= MARKER_OFFSET:
        raise ChecklistParseError(number, line, "missing status marker")
    if len(line) < CONTENT_OFFSET:
        raise ChecklistParseError(number, line, "line too short")
    if strict and (line[0] != "[" or line[2] != "]"):
        raise ChecklistParseError(number, line, "expected '[?]' prefix")

    return Task(
        completed=line[MARKER_OFFSET] == DONE_MARKER,
        content=line[CONTENT_OFFSET:].strip(),
    )


def encode(tasks: Iterable[Task]) -> str:
    """Format tasks as checklist file contents, one newline-terminated line each."""
    return "".join(f"{task.render()}\n" for task in tasks)
