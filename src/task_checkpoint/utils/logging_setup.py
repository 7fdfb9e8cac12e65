"""Logging configuration for applications embedding checkpoints."""

from __future__ import annotations

import logging
import sys


def setup_logging(level: str | int = "INFO") -> None:
    """Configure the root logger for checkpoint diagnostics.

    Accepts a level name (case-insensitive) or a numeric level; unknown
    names fall back to INFO.
    """
    if isinstance(level, int):
        numeric = level
    else:
        numeric = getattr(logging, level.upper(), logging.INFO)
    logging.basicConfig(
        level=numeric,
        format="%(asctime)s [%(levelname)-7s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stderr,
        force=True,
    )
    logging.getLogger("task_checkpoint").debug("Logging configured at %s", level)
