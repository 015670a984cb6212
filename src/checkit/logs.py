"""Logging setup for checkit."""

from __future__ import annotations

import logging
from pathlib import Path

from rich.console import Console
from rich.logging import RichHandler

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(verbose: bool = False, log_file: Path | None = None) -> None:
    """Attach a handler to the package logger.

    The terminal UI owns the screen while it runs, so a log file is preferred
    when one is given. Otherwise verbose mode logs to stderr through rich, and
    the default is to stay quiet.
    """
    logger = logging.getLogger("checkit")
    logger.handlers.clear()
    logger.propagate = False

    if log_file is not None:
        handler: logging.Handler = logging.FileHandler(log_file, encoding="utf-8")
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.setLevel(logging.DEBUG if verbose else logging.INFO)
    elif verbose:
        handler = RichHandler(console=Console(stderr=True), show_path=False)
        logger.setLevel(logging.DEBUG)
    else:
        handler = logging.NullHandler()
        logger.setLevel(logging.WARNING)

    logger.addHandler(handler)
