"""Transforms handed to a 3D renderer: one box per wall, one prism per lattice vertex.

Positions are ``(x, height, z)`` where ``(x, z)`` is the planar position of
the grid. Yaw is in degrees about the vertical axis.
"""

from __future__ import annotations

from dataclasses import dataclass

from hex_maze.config import WALL_HIDE_DEPTH
from hex_maze.cube import INV_SQRT_THREE

Vector3 = tuple[float, float, float]


@dataclass(frozen=True)
class WallPlacement:
    wall_index: int
    position: Vector3
    hidden_position: Vector3
    yaw_degrees: float
    scale: Vector3
    is_boundary: bool
    is_open: bool

    def resolved_position(self) -> Vector3:
        """Where the renderer should put the wall for its current open state."""

        return self.hidden_position if self.is_open else self.position


@dataclass(frozen=True)
class CornerPlacement:
    cell_index: int
    corner: int
    position: Vector3
    yaw_degrees: float


def wall_scale(circum_radius: float, wall_width: float, wall_height: float) -> Vector3:
    # Shortened so two walls meeting at a vertex leave room for the corner prism.
    return (wall_width, wall_height, circum_radius - wall_width * INV_SQRT_THREE)


def wall_placements(grid, wall_width: float, wall_height: float) -> list[WallPlacement]:
    scale = wall_scale(grid.metrics.circum_radius, wall_width, wall_height)
    lift = wall_height * 0.5
    placements = []
    for wall in grid.walls:
        x, z = wall.position
        placements.append(
            WallPlacement(
                wall_index=wall.index,
                position=(x, lift, z),
                hidden_position=(x, -lift - WALL_HIDE_DEPTH, z),
                yaw_degrees=float(90 + 60 * wall.direction),
                scale=scale,
                is_boundary=wall.is_boundary,
                is_open=wall.is_open,
            )
        )
    return placements


def corner_placements(grid, wall_height: float) -> list[CornerPlacement]:
    lift = wall_height * 0.5
    placements = []
    for cell_index, corner in grid.corners:
        cx, cz = grid.cells[cell_index].center
        ox, oz = grid.metrics.corner_offset(corner)
        placements.append(
            CornerPlacement(
                cell_index=cell_index,
                corner=corner,
                position=(cx + ox, lift, cz + oz),
                yaw_degrees=float(90 + 60 * corner),
            )
        )
    return placements


def prism_profile(wall_width: float) -> tuple[tuple[float, float], ...]:
    """Footprint of a corner prism: an equilateral triangle whose sides match the wall width."""

    z = wall_width * INV_SQRT_THREE
    x = wall_width * 0.5
    return ((0.0, z), (x, -z * 0.5), (-x, -z * 0.5))


__all__ = [
    "Vector3",
    "WallPlacement",
    "CornerPlacement",
    "wall_scale",
    "wall_placements",
    "corner_placements",
    "prism_profile",
]
