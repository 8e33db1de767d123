"""Visual constants for the maze viewer."""

from .theme import (
    COLOR_AMBER,
    COLOR_AQUA,
    COLOR_BOUNDARY_WALL,
    COLOR_CHARCOAL,
    COLOR_CORNER,
    COLOR_FLOOR,
    COLOR_FOG_GRAY,
    COLOR_NEAR_BLACK,
    COLOR_SLATE_GRAY,
    COLOR_SOFT_WHITE,
    COLOR_WALL,
)

__all__ = [
    "COLOR_AMBER",
    "COLOR_AQUA",
    "COLOR_BOUNDARY_WALL",
    "COLOR_CHARCOAL",
    "COLOR_CORNER",
    "COLOR_FLOOR",
    "COLOR_FOG_GRAY",
    "COLOR_NEAR_BLACK",
    "COLOR_SLATE_GRAY",
    "COLOR_SOFT_WHITE",
    "COLOR_WALL",
]
