"""
Runtime configuration.

Every setting resolves in the same order:
1) the explicit value passed by the caller
2) the SORTSUITE_* environment variable
3) the built-in default
Unparseable values fall back to the default.
"""

from __future__ import annotations

import logging
import os
from typing import Optional

DEFAULT_LOG_LEVEL = "WARNING"
DEFAULT_MAX_BENCH_SIZE = 2000

SEED_ENV = "SORTSUITE_SEED"
LOG_LEVEL_ENV = "SORTSUITE_LOG_LEVEL"
MAX_BENCH_SIZE_ENV = "SORTSUITE_MAX_BENCH_SIZE"

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def resolve_seed(explicit: Optional[int] = None) -> Optional[int]:
    """Seed for the shuffle and the generators. None means OS entropy."""
    raw = explicit if explicit is not None else os.getenv(SEED_ENV)
    if raw is None or raw == "":
        return None
    try:
        return int(raw)
    except (TypeError, ValueError):
        return None


def resolve_log_level(explicit: Optional[str] = None) -> int:
    raw = explicit if explicit is not None else os.getenv(LOG_LEVEL_ENV, DEFAULT_LOG_LEVEL)
    level = logging.getLevelName(str(raw).upper())
    if isinstance(level, int):
        return level
    return logging.getLevelName(DEFAULT_LOG_LEVEL)


def resolve_max_bench_size(explicit: Optional[int] = None) -> int:
    """
    Largest n the quadratic algorithms are benchmarked at.

    Bubble, selection and insertion sort are skipped above this size so a
    benchmark over large inputs still finishes.
    """
    raw = explicit if explicit is not None else os.getenv(MAX_BENCH_SIZE_ENV)
    if raw is None:
        return DEFAULT_MAX_BENCH_SIZE
    try:
        limit = int(raw)
        if limit > 0:
            return limit
    except (TypeError, ValueError):
        pass
    return DEFAULT_MAX_BENCH_SIZE


def configure_logging(level: Optional[str] = None) -> None:
    """Set up root logging for the console scripts."""
    logging.basicConfig(level=resolve_log_level(level), format=LOG_FORMAT)
