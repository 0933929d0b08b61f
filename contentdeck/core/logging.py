"""Logging setup shared by both services."""
from __future__ import annotations

import logging
import sys

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s - %(message)s"


def configure_logging(level: str = "INFO") -> None:
    """Configure the root logger with a single stderr handler."""
    logger = logging.getLogger()
    logger.setLevel(level)

    # Remove existing handlers to avoid duplicated lines on reload
    if logger.handlers:
        logger.handlers.clear()

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(handler)
