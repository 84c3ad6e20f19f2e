"""Logging setup helpers."""

from __future__ import annotations

import logging
import sys


_LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"


def configure_logging(level: str = "WARNING") -> None:
    numeric_level = getattr(logging, level.upper(), logging.WARNING)
    # stdout is reserved for the queried value.
    logging.basicConfig(level=numeric_level, format=_LOG_FORMAT, stream=sys.stderr, force=True)
