"""
Logging utilities for the procstats package.

Modules call get_logger(__name__). Only the command line entry point and
scripts call configure_logging(), which sends records to stderr; stdout
carries the statistics report. Nothing is written to log files.
"""

from __future__ import annotations

import logging
import os
import sys
from typing import Optional, Union

PACKAGE_LOGGER = "procstats"

# stderr only; the report owns stdout
DEFAULT_FMT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DEFAULT_DATEFMT = "%H:%M:%S"

LOG_LEVEL_ENV = "PROCSTATS_LOG_LEVEL"
DEFAULT_LEVEL = "WARNING"


def resolve_level(level: Optional[Union[str, int]]) -> int:
    """Turn a level name, number or None into a logging level number.

    None falls back to the PROCSTATS_LOG_LEVEL env var, then to WARNING.
    Unknown names resolve to WARNING.
    """
    if level is None:
        level = os.environ.get(LOG_LEVEL_ENV, DEFAULT_LEVEL)
    if isinstance(level, str):
        value = getattr(logging, level.upper(), None)
        return value if isinstance(value, int) else logging.WARNING
    return int(level)


def _stderr_handler(logger: logging.Logger) -> Optional[logging.StreamHandler]:
    for h in logger.handlers:
        if isinstance(h, logging.StreamHandler) and h.stream is sys.stderr:
            return h
    return None


def configure_logging(
    level: Optional[Union[str, int]] = None,
    *,
    fmt: str = DEFAULT_FMT,
    datefmt: str = DEFAULT_DATEFMT,
    force: bool = False,
) -> None:
    """
    Attach a stderr handler to the procstats logger (never root).

    Parameters
    ----------
    level:
        Level name or number; see resolve_level() for the fallback order.
    fmt, datefmt:
        Formatter settings for the stderr handler.
    force:
        Drop existing handlers first. Without it, a second call only updates
        the level of the stderr handler already attached.
    """
    level = resolve_level(level)
    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(level)

    if force:
        for h in logger.handlers[:]:
            h.close()
            logger.removeHandler(h)
    else:
        existing = _stderr_handler(logger)
        if existing is not None:
            existing.setLevel(level)
            return

    console = logging.StreamHandler(sys.stderr)
    console.setLevel(level)
    console.setFormatter(logging.Formatter(fmt=fmt, datefmt=datefmt))
    logger.addHandler(console)


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Logger for ``name``, or the package logger when name is None."""
    return logging.getLogger(name or PACKAGE_LOGGER)
