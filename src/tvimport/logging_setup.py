"""
Logging configuration for tvimport.

Every module logs through ``logging.getLogger(__name__)``; this module only
attaches handlers to the ``tvimport`` package logger:

- console: rich ``RichHandler`` on stderr (or a plain ``StreamHandler``)
- file: optional, receives DEBUG regardless of the configured level so
  per-file import reasoning is kept; the console handler alone is gated
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path

from rich.console import Console
from rich.logging import RichHandler

from tvimport.config import get_settings

PACKAGE_LOGGER = "tvimport"

FILE_FORMAT = "%(asctime)s | %(levelname)-5s | [%(name)s] %(message)s"
FILE_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# Console handler and its configured level, for set_console_quiet()
_console_handler: logging.Handler | None = None
_console_level: int = logging.INFO


def _build_console_handler(rich_console: bool) -> logging.Handler:
    if not rich_console:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter("%(levelname)s: %(message)s"))
        return handler

    # markup=False: file names and release titles routinely contain [brackets]
    return RichHandler(
        console=Console(stderr=True),
        show_time=True,
        show_path=False,
        rich_tracebacks=True,
        markup=False,
    )


def _build_file_handler(log_file: Path | str) -> logging.Handler:
    log_path = Path(log_file)
    log_path.parent.mkdir(parents=True, exist_ok=True)

    handler = logging.FileHandler(log_path, encoding="utf-8")
    handler.setLevel(logging.DEBUG)
    handler.setFormatter(logging.Formatter(FILE_FORMAT, datefmt=FILE_DATE_FORMAT))
    return handler


def setup_logging(
    log_level: str | None = None,
    log_file: Path | str | None = None,
    rich_console: bool = True,
    quiet_console: bool = False,
) -> logging.Logger:
    """
    Configure the ``tvimport`` logger.

    Args:
        log_level: DEBUG, INFO, WARNING, ERROR or CRITICAL (case-insensitive);
            defaults to ``logging.level`` from settings. Unknown names mean INFO.
        log_file: Optional log file; defaults to ``logging.file`` from settings
        rich_console: Use rich handler for console output
        quiet_console: If True, only show WARNING+ on console

    Returns:
        The ``tvimport`` package logger
    """
    global _console_handler, _console_level

    if log_level is None or log_file is None:
        logging_config = get_settings().logging
        log_level = log_level or logging_config.level
        log_file = log_file or logging_config.file

    level = getattr(logging, log_level.upper(), logging.INFO)
    if not isinstance(level, int):
        level = logging.INFO

    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(logging.DEBUG if log_file else level)
    logger.handlers.clear()

    console_handler = _build_console_handler(rich_console)
    console_handler.setLevel(logging.WARNING if quiet_console else level)
    logger.addHandler(console_handler)
    _console_handler = console_handler
    _console_level = level

    if log_file:
        logger.addHandler(_build_file_handler(log_file))

    logger.debug("Logging configured: level=%s file=%s", logging.getLevelName(level), log_file)
    return logger


def set_console_quiet(quiet: bool = True) -> None:
    """
    Toggle quiet mode for console logging.

    When quiet, only WARNING and above reach the console; turning it off
    restores the level given to setup_logging(). The log file is unaffected.
    """
    if _console_handler is not None:
        _console_handler.setLevel(logging.WARNING if quiet else _console_level)
