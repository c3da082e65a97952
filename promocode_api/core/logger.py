"""
Centralized logging configuration.
All modules should use `get_logger(__name__)` to obtain a logger instance.
"""
from __future__ import annotations

import logging
import sys

_LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
_initialized = False


def configure_logging(level: str = "INFO") -> None:
    """Attach the stdout handler to the root logger once; later calls only change the level."""
    global _initialized
    root = logging.getLogger()
    root.setLevel(level.upper())
    if _initialized:
        return
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(_LOG_FORMAT, _DATE_FORMAT))
    root.addHandler(handler)
    _initialized = True


def get_logger(name: str) -> logging.Logger:
    """
    Get a named logger instance.

    Args:
        name: Usually ``__name__`` of the calling module.

    Returns:
        A configured logging.Logger.
    """
    if not _initialized:
        configure_logging()
    return logging.getLogger(name)
