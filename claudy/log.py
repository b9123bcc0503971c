"""Logging configuration using loguru.

Diagnostics only.  Messages meant for the user go through ``claudy.console``.
"""

from __future__ import annotations

import sys

from loguru import logger


def setup_logging(level: str = "WARNING") -> None:
    """Configure loguru as the sole logging sink.

    Call this once per invocation, before any command runs.
    """
    level = level.upper()

    logger.remove()
    logger.add(
        sys.stderr,
        level=level,
        format="<dim>{time:HH:mm:ss.SSS}</dim> | <level>{level: <8}</level> | <cyan>{name}</cyan> - <level>{message}</level>",
    )

    logger.debug("Logging initialised (level={})", level)
