"""Colour constants used by the maze viewer."""

from typing import Final

Rgb = tuple[int, int, int]

COLOR_CHARCOAL: Final[Rgb] = (45, 45, 45)
COLOR_NEAR_BLACK: Final[Rgb] = (20, 20, 22)
COLOR_SLATE_GRAY: Final[Rgb] = (96, 104, 112)
COLOR_FOG_GRAY: Final[Rgb] = (200, 200, 200)
COLOR_SOFT_WHITE: Final[Rgb] = (236, 236, 230)
COLOR_AMBER: Final[Rgb] = (245, 180, 60)
COLOR_AQUA: Final[Rgb] = (50, 215, 200)

COLOR_FLOOR: Final[Rgb] = COLOR_SLATE_GRAY
COLOR_WALL: Final[Rgb] = COLOR_SOFT_WHITE
COLOR_BOUNDARY_WALL: Final[Rgb] = COLOR_AQUA
COLOR_CORNER: Final[Rgb] = COLOR_FOG_GRAY
