"""Constants shared by the maze core, the renderer and the play loop."""

from typing import Final

# Maze defaults
DEFAULT_MAP_SIZE: Final[int] = 3
DEFAULT_HEX_RADIUS: Final[float] = 1.0
DEFAULT_WALL_WIDTH: Final[float] = 0.1
DEFAULT_WALL_HEIGHT: Final[float] = 0.5

# Settings panel ranges: (minimum, maximum, step)
MAP_SIZE_RANGE: Final[tuple[int, int, int]] = (0, 12, 1)
HEX_RADIUS_RANGE: Final[tuple[float, float, float]] = (0.25, 3.0, 0.25)
WALL_WIDTH_RANGE: Final[tuple[float, float, float]] = (0.02, 0.5, 0.02)
WALL_HEIGHT_RANGE: Final[tuple[float, float, float]] = (0.1, 2.0, 0.1)

# Open walls are lowered below the floor by this much
WALL_HIDE_DEPTH: Final[float] = 0.1

# Window
SCREEN_WIDTH: Final[int] = 800
SCREEN_HEIGHT: Final[int] = 800
BB_HEIGHT: Final[int] = 36
FPS: Final[int] = 30
WINDOW_TITLE: Final[str] = "Hex Maze"
BOARD_MARGIN_PX: Final[int] = 24

# UI
FONT_NAME_BAR: Final[str] = "Arial"
FONT_SIZE_BAR: Final[int] = 14
UI_MIN_LINE_WIDTH_PX: Final[int] = 1
UI_STATUS_SEPARATOR: Final[str] = "   /   "

# Logging
LOG_LEVEL_DEFAULT: Final[str] = "WARNING"
LOG_LEVEL_ENV: Final[str] = "HEX_MAZE_LOG_LEVEL"
LOG_LEVEL_CHOICES: Final[tuple[str, ...]] = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
LOG_FORMAT: Final[str] = "%(asctime)s %(levelname)s %(name)s: %(message)s"
