"""
Logging configuration for the ``weather_manager`` package logger.
"""

from __future__ import annotations

import logging
import sys


def setup_logging(level: int | str = logging.WARNING) -> logging.Logger:
    """
    Configure the ``weather_manager`` logger with a single stderr handler.

    Safe to call more than once; existing handlers are replaced.

    Args:
        level: Logging level, as a number or a name such as ``"DEBUG"``.
    """
    if isinstance(level, str):
        level = level.upper()

    logger = logging.getLogger("weather_manager")
    logger.setLevel(level)

    if logger.hasHandlers():
        logger.handlers.clear()

    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(level)
    handler.setFormatter(
        logging.Formatter(
            "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
            datefmt="%H:%M:%S",
        )
    )
    logger.addHandler(handler)

    logger.debug("Logging initialized.")
    return logger
