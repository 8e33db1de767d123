"""Cube-coordinate math for a hex lattice with pointy sides along the planar y axis."""

from __future__ import annotations

import math
from dataclasses import dataclass

Cube = tuple[int, int, int]
Planar = tuple[float, float]

ORIGIN: Cube = (0, 0, 0)

# Cyclic order, 60 degrees apart. Index i + 3 is the opposite of index i.
CUBE_DIRECTIONS: tuple[Cube, ...] = (
    (0, 1, -1),
    (1, 0, -1),
    (1, -1, 0),
    (0, -1, 1),
    (-1, 0, 1),
    (-1, 1, 0),
)

DIRECTION_COUNT = len(CUBE_DIRECTIONS)

SQRT_THREE = math.sqrt(3.0)
INV_SQRT_THREE = 1.0 / SQRT_THREE


def neighbor_direction(index: int) -> Cube:
    """Cube offset for direction ``index``; indices wrap modulo 6."""

    return CUBE_DIRECTIONS[index % DIRECTION_COUNT]


def opposite_direction(index: int) -> int:
    return (index + 3) % DIRECTION_COUNT


def cube_add(a: Cube, b: Cube) -> Cube:
    return (a[0] + b[0], a[1] + b[1], a[2] + b[2])


def cube_neighbor(cube: Cube, index: int) -> Cube:
    return cube_add(cube, neighbor_direction(index))


def is_valid_cube(cube: Cube) -> bool:
    return cube[0] + cube[1] + cube[2] == 0


def cube_distance(a: Cube, b: Cube) -> int:
    return max(abs(a[0] - b[0]), abs(a[1] - b[1]), abs(a[2] - b[2]))


def hex_cell_count(radius: int) -> int:
    """Number of cells in a filled hexagon of the given hop radius."""

    if radius < 0:
        return 0
    return 1 + 3 * radius * (radius + 1)


def circum_radius(hex_radius: float) -> float:
    """Circumscribed radius of a hex whose inscribed radius is ``hex_radius``."""

    return hex_radius * 2.0 * INV_SQRT_THREE


@dataclass(frozen=True)
class HexMetrics:
    """Planar scale of one hex cell, derived from its inscribed-circle radius."""

    hex_radius: float

    @property
    def circum_radius(self) -> float:
        return circum_radius(self.hex_radius)

    @property
    def x_unit(self) -> Planar:
        return (self.circum_radius, 0.0)

    @property
    def y_unit(self) -> Planar:
        return (-self.circum_radius * 0.5, self.hex_radius)

    @property
    def z_unit(self) -> Planar:
        return (-self.circum_radius * 0.5, -self.hex_radius)

    def to_planar(self, cube: Cube) -> Planar:
        x, y, z = cube
        ux, uy, uz = self.x_unit, self.y_unit, self.z_unit
        return (
            ux[0] * x + uy[0] * y + uz[0] * z,
            ux[1] * x + uy[1] * y + uz[1] * z,
        )

    def wall_offset(self, direction: int) -> Planar:
        """Offset from a cell centre to the midpoint of its wall in ``direction``."""

        px, py = self.to_planar(neighbor_direction(direction))
        return (px * 0.5, py * 0.5)

    def corner_offset(self, index: int) -> Planar:
        """Offset from a cell centre to the vertex between directions ``index`` and ``index + 1``."""

        angle = math.radians(30 + 60 * index)
        radius = self.circum_radius
        return (radius * math.sin(angle), radius * math.cos(angle))

    def wall_endpoints(self, center: Planar, direction: int) -> tuple[Planar, Planar]:
        """The two vertices bounding the wall of a cell in ``direction``."""

        cx, cy = center
        ax, ay = self.corner_offset(direction - 1)
        bx, by = self.corner_offset(direction)
        return (cx + ax, cy + ay), (cx + bx, cy + by)


def to_planar_position(cube: Cube, hex_radius: float) -> Planar:
    return HexMetrics(hex_radius).to_planar(cube)


__all__ = [
    "Cube",
    "Planar",
    "ORIGIN",
    "CUBE_DIRECTIONS",
    "DIRECTION_COUNT",
    "SQRT_THREE",
    "INV_SQRT_THREE",
    "neighbor_direction",
    "opposite_direction",
    "cube_add",
    "cube_neighbor",
    "is_valid_cube",
    "cube_distance",
    "hex_cell_count",
    "circum_radius",
    "HexMetrics",
    "to_planar_position",
]
