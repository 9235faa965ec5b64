"""Logging setup for the command-line entry point."""

from __future__ import annotations

import logging
import os

LOG_LEVEL_ENV = "LSTREE_LOG_LEVEL"
DEFAULT_LOG_LEVEL = logging.WARNING


def _level_from_env() -> int:
    raw = os.environ.get(LOG_LEVEL_ENV, "").strip().upper()
    if not raw:
        return DEFAULT_LOG_LEVEL
    level = logging.getLevelName(raw)
    return level if isinstance(level, int) else DEFAULT_LOG_LEVEL


def setup_logging(level: int | None = None) -> logging.Logger:
    """Attach one stderr handler to the ``lstree`` logger.

    Records never reach stdout, so they cannot interleave with tree rows.
    """
    fmt = logging.Formatter(fmt="%(levelname)s | %(name)s | %(message)s")

    package_logger = logging.getLogger("lstree")
    package_logger.setLevel(level if level is not None else _level_from_env())
    package_logger.propagate = False
    package_logger.handlers.clear()

    handler = logging.StreamHandler()
    handler.setFormatter(fmt)
    package_logger.addHandler(handler)
    return package_logger


__all__ = ["LOG_LEVEL_ENV", "setup_logging"]
