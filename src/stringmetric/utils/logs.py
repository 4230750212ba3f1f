from __future__ import annotations

"""Loguru sink configuration for the command line."""

import os
import sys
from typing import Optional

from loguru import logger

LOG_LEVEL_ENV_VAR = "STRINGMETRIC_LOG_LEVEL"
DEFAULT_LOG_LEVEL = "WARNING"

LOG_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss.SSS}</green> | "
    "<level>{level: <8}</level> | "
    "<cyan>{name}:{function}:{line}</cyan> - "
    "<level>{message}</level>"
)


def resolve_log_level(level: Optional[str] = None) -> str:
    """Pick the explicit level, else the environment, else the default."""

    chosen = level or os.getenv(LOG_LEVEL_ENV_VAR) or DEFAULT_LOG_LEVEL
    return chosen.upper()


def configure_logging(level: Optional[str] = None, *, sink=None) -> int:
    """Replace loguru's default handler with a single formatted sink.

    Returns the handler id so callers (and tests) can remove it again.
    """

    logger.remove()
    return logger.add(
        sink or sys.stderr,
        level=resolve_log_level(level),
        format=LOG_FORMAT,
        backtrace=False,
        diagnose=False,
    )
