import logging
from collections import deque

from hex_maze.cube import (
    DIRECTION_COUNT,
    ORIGIN,
    HexMetrics,
    cube_neighbor,
    hex_cell_count,
    is_valid_cube,
    opposite_direction,
)
from hex_maze.errors import MazeIntegrityError, require_non_negative_int, require_positive_float

logger = logging.getLogger(__name__)


class HexCell:
    def __init__(self, index, cube, center):
        self.index = index
        self.cube = cube
        self.center = center
        # Wall ids into HexGrid.walls, one per direction.
        self.walls = [None] * DIRECTION_COUNT
        # Filled in by graph extraction and carving.
        self.group = index
        self.neighbors = []


class HexWall:
    def __init__(self, index, cell_a, direction, position):
        self.index = index
        self.cell_a = cell_a
        self.cell_b = None
        # Direction as seen from cell_a.
        self.direction = direction
        self.position = position
        self.is_open = False

    @property
    def is_interior(self):
        return self.cell_a is not None and self.cell_b is not None

    @property
    def is_boundary(self):
        return not self.is_interior

    def neighbor_cells(self):
        return tuple(i for i in (self.cell_a, self.cell_b) if i is not None)

    def show(self):
        self.is_open = False

    def hide(self):
        self.is_open = True


class HexCellArray:
    """Square array of cells addressed by the cube ``x`` and ``y`` components.

    The array is one hop wider than ``map_size`` on each side so that
    neighbour lookups from the outermost ring stay in bounds.
    """

    def __init__(self, map_size):
        self.offset = map_size + 1
        self.size = 2 * self.offset + 1
        self._slots = [[None] * self.size for _ in range(self.size)]

    def storage_index(self, cube):
        if not is_valid_cube(cube):
            raise MazeIntegrityError(f"Invalid cube coordinate {cube}: components must sum to zero")
        col = cube[0] + self.offset
        row = cube[1] + self.offset
        if not (0 <= col < self.size and 0 <= row < self.size):
            raise MazeIntegrityError(
                f"Cube coordinate {cube} maps outside storage ({col},{row}) of size {self.size}"
            )
        return col, row

    def get(self, cube):
        col, row = self.storage_index(cube)
        return self._slots[col][row]

    def put(self, cube, cell):
        col, row = self.storage_index(cube)
        if self._slots[col][row] is not None:
            raise MazeIntegrityError(f"Duplicate cell at {cube}")
        self._slots[col][row] = cell


class HexGrid:
    def __init__(self, map_size, hex_radius):
        self.map_size = require_non_negative_int(map_size, "map_size")
        self.hex_radius = require_positive_float(hex_radius, "hex_radius")
        self.metrics = HexMetrics(self.hex_radius)
        self.cells = []
        self.walls = []
        # (cell index, corner index) for every lattice vertex, each listed once.
        self.corners = []
        self._array = HexCellArray(self.map_size)

        self._expand()
        self.validate_integrity()
        logger.debug(
            "Built hex grid map_size=%d: %d cells, %d walls, %d interior",
            self.map_size,
            len(self.cells),
            len(self.walls),
            sum(1 for wall in self.walls if wall.is_interior),
        )

    def _expand(self):
        queue = deque([(ORIGIN, self.map_size)])
        while queue:
            cube, remaining = queue.popleft()
            if self._array.get(cube) is not None:
                continue
            self._create_cell(cube)
            if remaining > 0:
                for direction in range(DIRECTION_COUNT):
                    queue.append((cube_neighbor(cube, direction), remaining - 1))

    def _create_cell(self, cube):
        cell = HexCell(len(self.cells), cube, self.metrics.to_planar(cube))

        for direction in range(DIRECTION_COUNT):
            neighbor = self._array.get(cube_neighbor(cube, direction))
            if neighbor is not None:
                wall = self.walls[neighbor.walls[opposite_direction(direction)]]
                if wall.cell_b is not None:
                    raise MazeIntegrityError(
                        f"Wall {wall.index} already joins cells {wall.cell_a} and {wall.cell_b}"
                    )
                wall.cell_b = cell.index
                cell.walls[direction] = wall.index
                continue

            ox, oy = self.metrics.wall_offset(direction)
            cx, cy = cell.center
            wall = HexWall(len(self.walls), cell.index, direction, (cx + ox, cy + oy))
            self.walls.append(wall)
            cell.walls[direction] = wall.index

        for corner in range(DIRECTION_COUNT):
            if self._array.get(cube_neighbor(cube, corner)) is not None:
                continue
            if self._array.get(cube_neighbor(cube, corner + 1)) is not None:
                continue
            self.corners.append((cell.index, corner))

        self._array.put(cube, cell)
        self.cells.append(cell)
        return cell

    def get_cell(self, cube):
        if any(abs(c) > self.map_size + 1 for c in cube):
            return None
        return self._array.get(cube)

    def interior_walls(self):
        return [wall for wall in self.walls if wall.is_interior]

    def boundary_walls(self):
        return [wall for wall in self.walls if wall.is_boundary]

    def validate_integrity(self):
        expected = hex_cell_count(self.map_size)
        if len(self.cells) != expected:
            raise MazeIntegrityError(
                f"Expected {expected} cells for map_size={self.map_size}, built {len(self.cells)}"
            )

        seen = set()
        for position, cell in enumerate(self.cells):
            if cell.index != position:
                raise MazeIntegrityError(f"Cell at position {position} has index {cell.index}")
            if not is_valid_cube(cell.cube):
                raise MazeIntegrityError(f"Cell {cell.index} has invalid cube {cell.cube}")
            if cell.cube in seen:
                raise MazeIntegrityError(f"Duplicate cube coordinate {cell.cube}")
            seen.add(cell.cube)
            for direction, wall_index in enumerate(cell.walls):
                if wall_index is None or not (0 <= wall_index < len(self.walls)):
                    raise MazeIntegrityError(f"Cell {cell.index} has no wall in direction {direction}")
                if cell.index not in self.walls[wall_index].neighbor_cells():
                    raise MazeIntegrityError(
                        f"Wall {wall_index} does not reference cell {cell.index}"
                    )

        for wall in self.walls:
            for cell_index in wall.neighbor_cells():
                if not (0 <= cell_index < len(self.cells)):
                    raise MazeIntegrityError(f"Wall {wall.index} references missing cell {cell_index}")
            if wall.cell_a is None:
                raise MazeIntegrityError(f"Wall {wall.index} has no owning cell")
            if wall.cell_a == wall.cell_b:
                raise MazeIntegrityError(f"Wall {wall.index} joins cell {wall.cell_a} to itself")
            if wall.is_boundary and wall.is_open:
                raise MazeIntegrityError(f"Boundary wall {wall.index} is open")


__all__ = ["HexCell", "HexWall", "HexCellArray", "HexGrid"]
