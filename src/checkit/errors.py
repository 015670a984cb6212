"""Exceptions raised by checkit."""

from __future__ import annotations

from pathlib import Path


class CheckitError(Exception):
    """Base class for all checkit errors."""


class ChecklistParseError(CheckitError):
    """A checklist line could not be decoded."""

    def __init__(self, line_number: int, line: str, reason: str) -> None:
        self.line_number = line_number
        self.line = line
        self.reason = reason
        super().__init__(f"line {line_number}: {reason}: {line!r}")


class ChecklistLoadError(CheckitError):
    """The checklist file could not be read."""

    def __init__(self, path: str | Path, cause: OSError | UnicodeDecodeError) -> None:
        self.path = str(path)
        self.cause = cause
        reason = getattr(cause, "strerror", None) or cause
        super().__init__(f"unable to open {self.path}: {reason}")


class ChecklistSaveError(CheckitError):
    """The checklist file could not be written."""

    def __init__(self, path: str | Path, cause: OSError) -> None:
        self.path = str(path)
        self.cause = cause
        super().__init__(f"unable to save {self.path}: {cause.strerror or cause}")


class ConfigError(CheckitError):
    """The config file is unreadable, not JSON, or fails validation."""

    def __init__(self, path: str | Path, reason: str) -> None:
        self.path = str(path)
        super().__init__(f"invalid config {self.path}: {reason}")
