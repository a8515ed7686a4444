"""Logging configuration utilities for gitpatch."""

import logging
import os
from typing import Optional

_LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"


def configure_logging(level: Optional[str] = None) -> None:
    """Configure application-wide logging once.

    The level comes from ``level``, then LOG_LEVEL, then defaults to WARNING so
    that CLI output on stdout stays clean.
    """
    if logging.getLogger().handlers:
        return

    log_level = level or os.getenv("LOG_LEVEL", "WARNING")
    logging.basicConfig(level=log_level.upper(), format=_LOG_FORMAT)
