"""Logging configuration for the Dots and Boxes engine.

Library modules only create ``logging.getLogger(__name__)`` loggers; scripts
call :func:`setup_logging` once to attach a console handler.
"""

from __future__ import annotations

import logging
import os
import sys

DEFAULT_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
COMPACT_FORMAT = "[%(levelname)s] %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

DEFAULT_LEVEL = os.getenv("DOTSBOXES_LOG_LEVEL", "INFO")


def setup_logging(
    name: str,
    level: int | str | None = None,
    fmt: str = DEFAULT_FORMAT,
) -> logging.Logger:
    """Configure and return the logger ``name``.

    Calling it again for the same name reuses the existing console handler.

    Args:
        name: Logger name (usually the package or script name)
        level: Level as int or name; defaults to ``DOTSBOXES_LOG_LEVEL``
        fmt: Log record format

    Returns:
        The configured logger
    """
    if level is None:
        level = DEFAULT_LEVEL
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.INFO

    logger = logging.getLogger(name)
    logger.setLevel(level)
    if not any(getattr(h, "_dotsboxes_console", False) for h in logger.handlers):
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(fmt, datefmt=DATE_FORMAT))
        handler._dotsboxes_console = True
        logger.addHandler(handler)
    return logger
