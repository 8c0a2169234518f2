"""Logger setup for the readmegen CLI.

Console output goes to stderr so that ``readmegen scan`` and ``--dry-run`` can
print JSON or prompts on stdout. An optional log file records the full run with
timestamps and logger names.
"""

from __future__ import annotations

import logging
from pathlib import Path

_ROOT_LOGGER = "readmegen"
_CONSOLE_FORMAT = "[readmegen] %(levelname)s %(message)s"
_FILE_FORMAT = "%(asctime)s %(levelname)s %(name)s:%(lineno)d %(message)s"


def get_logger(name: str | None = None) -> logging.Logger:
    """Return ``readmegen`` or one of its children, e.g. ``readmegen.scanner.walker``."""
    return logging.getLogger(f"{_ROOT_LOGGER}.{name}" if name else _ROOT_LOGGER)


def configure_logging(
    *, verbose: bool = False, log_file: Path | None = None
) -> logging.Logger:
    """Install console and optional file handlers on the ``readmegen`` logger.

    The console honours ``verbose``; the log file always captures DEBUG records
    so a failed run can be diagnosed after the fact. Handlers from a previous
    call are closed and replaced.
    """
    logger = logging.getLogger(_ROOT_LOGGER)
    logger.propagate = False
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    console_level = logging.DEBUG if verbose else logging.INFO
    console = logging.StreamHandler()
    console.setLevel(console_level)
    console.setFormatter(logging.Formatter(_CONSOLE_FORMAT))
    logger.addHandler(console)

    logger_level = console_level
    if log_file is not None:
        sink = logging.FileHandler(log_file, mode="a", encoding="utf-8")
        sink.setLevel(logging.DEBUG)
        sink.setFormatter(logging.Formatter(_FILE_FORMAT))
        logger.addHandler(sink)
        logger_level = logging.DEBUG

    logger.setLevel(logger_level)
    return logger


__all__ = ["configure_logging", "get_logger"]
