"""Logging utilities.

Game actions go to the ``tienlen_engine`` logger.  Nothing is attached at
import time; :func:`configure_logging` (called by the CLI) appends the
log to ``LOG_FILE`` and optionally echoes it to the console.
"""
from __future__ import annotations

import logging

from .settings import LOG_FILE

logger = logging.getLogger("tienlen_engine")

FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


def configure_logging(log_file: str | None = LOG_FILE, level: int = logging.INFO,
                      console: bool = False) -> logging.Logger:
    """Attach file and console handlers to the package logger once."""

    if not logger.handlers:
        formatter = logging.Formatter(FORMAT)
        if log_file:
            handler = logging.FileHandler(log_file, encoding="utf-8")
            handler.setFormatter(formatter)
            logger.addHandler(handler)
        if console:
            stream = logging.StreamHandler()
            stream.setFormatter(logging.Formatter('%(message)s'))
            logger.addHandler(stream)
        if logger.handlers:
            logger.propagate = False
    logger.setLevel(level)
    return logger


def log_action(action: str) -> None:
    """Log a game action."""

    logger.info(action)
