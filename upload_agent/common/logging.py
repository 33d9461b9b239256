"""Logging configuration for the upload agent.

Every module gets its logger through ``setup_logging`` so the web app,
the CLI and the uploader all print the same line format to stdout.
"""

from __future__ import annotations

import logging
import os
import sys
from contextlib import contextmanager
from typing import IO, Iterator

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def _resolve_level(level: int | str | None) -> int:
    """Turn an int, a level name or ``None`` (read ``LOG_LEVEL``) into a level."""
    if level is None:
        level = os.getenv("LOG_LEVEL", "INFO")
    if isinstance(level, str):
        # getLevelName maps known names to ints, unknown ones to "Level X"
        value = logging.getLevelName(level.upper())
        return value if isinstance(value, int) else logging.INFO
    return level


def setup_logging(
    level: int | str | None = None,
    module_name: str = "upload_agent",
) -> logging.Logger:
    """Configure and return a logger with consistent formatting.

    Args:
        level: Logging level. ``None`` reads ``LOG_LEVEL`` (default INFO).
        module_name: Name for the logger instance.

    Returns:
        Configured logger.
    """
    logger = logging.getLogger(module_name)

    if logger.handlers:
        return logger

    resolved = _resolve_level(level)
    logger.setLevel(resolved)
    # Each named logger owns its handler; passing records up would print them twice
    logger.propagate = False

    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(resolved)
    handler.setFormatter(logging.Formatter(fmt=LOG_FORMAT, datefmt=LOG_DATE_FORMAT))
    logger.addHandler(handler)

    return logger


@contextmanager
def redirect_logging(stream: IO[str], *module_names: str) -> Iterator[None]:
    """Temporarily point the named loggers' stream handlers at ``stream``.

    Used by the CLI to keep stdout free for its JSON output. The previous
    streams are restored on exit.
    """
    swapped: list[tuple[logging.StreamHandler, IO[str]]] = []
    try:
        for name in module_names:
            for handler in logging.getLogger(name).handlers:
                if isinstance(handler, logging.StreamHandler):
                    previous = handler.setStream(stream)
                    swapped.append((handler, previous if previous is not None else stream))
        yield
    finally:
        for handler, previous in swapped:
            handler.setStream(previous)
