"""Maze board presets."""

from .maze_specs import (
    MAZE_SLIDERS,
    MAZE_STANDARD,
    MazeSettings,
    MazeSliderSpec,
    normalize_maze_settings,
    step_setting,
)

__all__ = [
    "MAZE_SLIDERS",
    "MAZE_STANDARD",
    "MazeSettings",
    "MazeSliderSpec",
    "normalize_maze_settings",
    "step_setting",
]
