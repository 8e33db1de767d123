"""Runtime helpers for Hex Maze."""

from .helpers import configure_logging, resolve_log_level

try:
    from .arcade_runtime import ArcadeFrameClock, ArcadeWindowController, TextCache
except ImportError:
    pass

__all__ = [
    "ArcadeFrameClock",
    "ArcadeWindowController",
    "TextCache",
    "configure_logging",
    "resolve_log_level",
]
