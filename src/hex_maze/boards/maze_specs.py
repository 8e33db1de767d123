"""Maze settings presets, settings-panel ranges and validation."""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Final

from hex_maze.config import (
    DEFAULT_HEX_RADIUS,
    DEFAULT_MAP_SIZE,
    DEFAULT_WALL_HEIGHT,
    DEFAULT_WALL_WIDTH,
    HEX_RADIUS_RANGE,
    MAP_SIZE_RANGE,
    WALL_HEIGHT_RANGE,
    WALL_WIDTH_RANGE,
)
from hex_maze.errors import MazeConfigError, require_non_negative_int, require_positive_float


@dataclass(frozen=True)
class MazeSettings:
    """Parameters consumed at the start of one generation pass.

    ``map_size`` and ``hex_radius`` shape the grid. ``wall_width`` and
    ``wall_height`` only size the rendered geometry.
    """

    map_size: int
    hex_radius: float
    wall_width: float
    wall_height: float


@dataclass(frozen=True)
class MazeSliderSpec:
    """Bounds and step of one settings-panel control."""

    minimum: float
    maximum: float
    step: float

    def clamp(self, value):
        return max(self.minimum, min(self.maximum, value))

    def step_value(self, value, steps: int):
        stepped = value + self.step * steps
        # Keep float steps on the slider grid.
        if isinstance(self.step, float):
            stepped = round(stepped, 6)
        return self.clamp(stepped)


MAZE_STANDARD: Final[MazeSettings] = MazeSettings(
    map_size=DEFAULT_MAP_SIZE,
    hex_radius=DEFAULT_HEX_RADIUS,
    wall_width=DEFAULT_WALL_WIDTH,
    wall_height=DEFAULT_WALL_HEIGHT,
)

MAZE_SLIDERS: Final[dict[str, MazeSliderSpec]] = {
    "map_size": MazeSliderSpec(*MAP_SIZE_RANGE),
    "hex_radius": MazeSliderSpec(*HEX_RADIUS_RANGE),
    "wall_width": MazeSliderSpec(*WALL_WIDTH_RANGE),
    "wall_height": MazeSliderSpec(*WALL_HEIGHT_RANGE),
}


def step_setting(settings: MazeSettings, name: str, steps: int) -> MazeSettings:
    """Move one setting by whole slider steps, clamped to the slider range."""

    slider = MAZE_SLIDERS.get(name)
    if slider is None:
        raise MazeConfigError(f"Unknown maze setting: {name}")
    value = slider.step_value(getattr(settings, name), steps)
    return replace(settings, **{name: value})


def normalize_maze_settings(settings: MazeSettings) -> MazeSettings:
    """Validate settings and return a copy with coerced numeric types."""

    return MazeSettings(
        map_size=require_non_negative_int(settings.map_size, "map_size"),
        hex_radius=require_positive_float(settings.hex_radius, "hex_radius"),
        wall_width=require_positive_float(settings.wall_width, "wall_width"),
        wall_height=require_positive_float(settings.wall_height, "wall_height"),
    )


__all__ = [
    "MazeSettings",
    "MazeSliderSpec",
    "MAZE_STANDARD",
    "MAZE_SLIDERS",
    "normalize_maze_settings",
    "step_setting",
]
