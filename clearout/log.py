"""Logging configuration shared by the API and the CLI."""

from __future__ import annotations

import logging
import sys

_FORMAT = "%(asctime)s - %(levelname)s - %(name)s - %(message)s"


def setup_logging(level: str | int = "INFO") -> logging.Logger:
    """Configure the ``clearout`` logger with a single console handler.

    Safe to call more than once: existing handlers are replaced rather than
    stacked, so repeated CLI invocations in one process do not duplicate
    output.
    """
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.INFO

    logger = logging.getLogger("clearout")
    logger.setLevel(level)
    logger.handlers = []

    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(_FORMAT))
    logger.addHandler(handler)

    # Keep records out of the root logger (uvicorn installs its own handlers).
    logger.propagate = False
    return logger
