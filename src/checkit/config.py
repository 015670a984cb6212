"""Configuration models for checkit."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Literal

from pydantic import BaseModel, Field, ValidationError

from checkit.errors import ConfigError

Color = Literal["black", "red", "green", "yellow", "blue", "magenta", "cyan", "white"]


class DisplayConfig(BaseModel):
    """Configuration for the terminal UI."""

    title: str = "Checklist"
    highlight_color: Color = "green"
    margin: int = Field(default=1, ge=0)
    show_status: bool = True


class ParseConfig(BaseModel):
    """Configuration for reading checklist files."""

    strict: bool = False


class CheckitConfig(BaseModel):
    """Main configuration for checkit."""

    display: DisplayConfig = Field(default_factory=DisplayConfig)
    parse: ParseConfig = Field(default_factory=ParseConfig)

    @classmethod
    def load(cls, path: Path | None = None) -> CheckitConfig:
        """Load configuration from file or return defaults.

        Raises ConfigError if the file exists but cannot be used.
        """
        if path is None:
            path = CONFIG_FILE

        if not path.exists():
            return cls()

        try:
            with open(path) as f:
                data = json.load(f)
            return cls.model_validate(data)
        except (OSError, ValueError) as e:
            raise ConfigError(path, _describe(e)) from e


def _describe(error: Exception) -> str:
    if isinstance(error, ValidationError):
        first = error.errors()[0]
        location = ".".join(str(part) for part in first["loc"]) or "config"
        return f"{location}: {first['msg']}"
    if isinstance(error, OSError):
        return error.strerror or str(error)
    return str(error)


# Default config directory
CHECKIT_DIR = Path(".checkit")
CONFIG_FILE = CHECKIT_DIR / "config.json"
