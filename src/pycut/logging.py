"""Logging setup for the pycut command line."""

from __future__ import annotations

import sys
from typing import TextIO

from loguru import logger

DEFAULT_LOG_FORMAT = "{time:YYYY-MM-DD HH:mm:ss.SSS} | {level: <8} | {name}:{function}:{line} - {message}"
LOG_LEVELS = ("TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL")


def configure_logging(level: str, *, sink: TextIO | None = None) -> int:
    """Route pycut's log records to stderr at ``level``; returns the handler id."""
    logger.remove()
    logger.enable("pycut")
    return logger.add(
        sink if sink is not None else sys.stderr,
        level=level.upper(),
        format=DEFAULT_LOG_FORMAT,
        colorize=False,
    )
