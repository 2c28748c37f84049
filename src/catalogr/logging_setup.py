"""Logging configuration for catalogr.

Everything logs under the ``catalogr`` namespace. The console handler follows
the configured level (DEBUG with ``--verbose``, which also shows per-rule
title traces); an optional log file always receives DEBUG.
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path

from rich.console import Console
from rich.logging import RichHandler

LOGGER_NAME = "catalogr"

FILE_FORMAT = "%(asctime)s | %(levelname)-5s | [%(name)s] %(message)s"
FILE_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# Console handler and the level it was configured with, for quiet toggling
_console_handler: logging.Handler | None = None
_console_level: int = logging.INFO


def resolve_level(log_level: str) -> int:
    """Map a level name to its number, falling back to INFO for unknown names."""
    level = logging.getLevelName(log_level.upper())
    return level if isinstance(level, int) else logging.INFO


def setup_logging(
    log_level: str = "INFO",
    log_file: Path | str | None = None,
    rich_console: bool = True,
    quiet_console: bool = False,
) -> logging.Logger:
    """
    Configure logging for catalogr.

    Args:
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR)
        log_file: Optional file path for DEBUG log output
        rich_console: Use rich handler on stderr instead of a plain stream
        quiet_console: If True, only show WARNING+ on console

    Returns:
        The ``catalogr`` logger
    """
    global _console_handler, _console_level
    level = resolve_level(log_level)

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(logging.DEBUG if log_file else level)
    logger.handlers.clear()

    console_handler: logging.Handler
    if rich_console:
        # Titles and paths are logged verbatim; brackets must not be read as markup
        console_handler = RichHandler(
            console=Console(stderr=True),
            show_time=True,
            show_path=False,
            rich_tracebacks=True,
            markup=False,
        )
    else:
        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setFormatter(logging.Formatter("%(levelname)s: %(message)s"))

    _console_handler = console_handler
    _console_level = level
    console_handler.setLevel(max(level, logging.WARNING) if quiet_console else level)
    logger.addHandler(console_handler)

    if log_file:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)

        file_handler = logging.FileHandler(log_path, encoding="utf-8")
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(logging.Formatter(FILE_FORMAT, datefmt=FILE_DATE_FORMAT))
        logger.addHandler(file_handler)

    logger.debug("Logging configured: level=%s file=%s", logging.getLevelName(level), log_file)
    return logger


def set_console_quiet(quiet: bool = True) -> None:
    """
    Toggle quiet mode for console logging.

    Quiet shows only WARNING and above; turning it off restores the level
    setup_logging was called with.
    """
    if _console_handler is not None:
        _console_handler.setLevel(
            max(_console_level, logging.WARNING) if quiet else _console_level
        )
