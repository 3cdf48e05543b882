"""Logging for storycheck runs.

The report itself is printed to stdout, so console log records go to stderr.
An optional log file always records at DEBUG, which keeps per-container
traversal detail available to CI artifacts without making the console noisy.
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path

_LOGGER_NAME = "storycheck"
_CONSOLE_FORMAT = "[storycheck] %(levelname)s %(message)s"
_FILE_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def get_logger(name: str | None = None) -> logging.Logger:
    """Return a module-scoped logger under the storycheck hierarchy."""
    full_name = f"{_LOGGER_NAME}.{name}" if name else _LOGGER_NAME
    return logging.getLogger(full_name)


def reset_logging() -> None:
    """Detach and close every handler installed by `configure_logging`."""
    logger = logging.getLogger(_LOGGER_NAME)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()


def configure_logging(
    *, verbose: bool = False, log_file: Path | None = None
) -> logging.Logger:
    """Route storycheck records to stderr and, when given, to `log_file`."""
    console_level = logging.DEBUG if verbose else logging.INFO
    reset_logging()

    logger = logging.getLogger(_LOGGER_NAME)
    logger.setLevel(logging.DEBUG if log_file is not None else console_level)
    logger.propagate = False

    console = logging.StreamHandler(sys.stderr)
    console.setLevel(console_level)
    console.setFormatter(logging.Formatter(_CONSOLE_FORMAT))
    logger.addHandler(console)

    if log_file is not None:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(logging.Formatter(_FILE_FORMAT))
        logger.addHandler(file_handler)

    return logger


__all__ = ["configure_logging", "get_logger", "reset_logging"]
