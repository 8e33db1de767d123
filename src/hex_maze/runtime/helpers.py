"""Process-level helpers shared by entry points."""

from __future__ import annotations

import logging
import os

from hex_maze.config import LOG_FORMAT, LOG_LEVEL_DEFAULT, LOG_LEVEL_ENV

_HANDLER_FLAG = "_hex_maze_handler"


def resolve_log_level(level: str | int | None = None) -> int:
    if level is None:
        level = os.environ.get(LOG_LEVEL_ENV) or LOG_LEVEL_DEFAULT
    if isinstance(level, int):
        return level
    resolved = logging.getLevelName(str(level).strip().upper())
    if not isinstance(resolved, int):
        raise ValueError(f"Unknown log level: {level!r}")
    return resolved


def configure_logging(level: str | int | None = None) -> logging.Logger:
    """Attach one stream handler to the ``hex_maze`` logger and set its level.

    Safe to call repeatedly; the handler is installed once.
    """

    logger = logging.getLogger("hex_maze")
    if not any(getattr(handler, _HANDLER_FLAG, False) for handler in logger.handlers):
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        setattr(handler, _HANDLER_FLAG, True)
        logger.addHandler(handler)
    logger.setLevel(resolve_log_level(level))
    return logger
