import logging
import random
from dataclasses import replace

from hex_maze.boards import MAZE_STANDARD, normalize_maze_settings
from hex_maze.carving import MazeCarver
from hex_maze.graph import extract_graph
from hex_maze.grid import HexGrid
from hex_maze.placement import corner_placements, wall_placements

logger = logging.getLogger(__name__)


class HexMaze:
    """Current maze of one host: grid, edges and the latest carve.

    ``configure`` replaces everything; ``regenerate`` re-carves the same grid.
    """

    def __init__(self, settings=MAZE_STANDARD, seed=None, rng=None, merger_factory=None):
        self.rng = rng if rng is not None else random.Random(seed)
        self.merger_factory = merger_factory
        self.settings = None
        self.grid = None
        self.edges = []
        self.last_carve = None
        self.generation = 0
        self.configure(settings)

    @property
    def cells(self):
        return self.grid.cells

    @property
    def walls(self):
        return self.grid.walls

    def configure(self, settings):
        """Validate ``settings`` and rebuild the whole maze.

        Nothing is replaced unless the new maze is fully built and carved.
        """

        settings = normalize_maze_settings(settings)
        grid = HexGrid(settings.map_size, settings.hex_radius)
        edges = extract_graph(grid)
        result = self._carve(grid, edges)

        self.settings = settings
        self.grid = grid
        self.edges = edges
        self.last_carve = result
        self.generation += 1
        logger.info(
            "Configured maze map_size=%d hex_radius=%.3f: %d cells, %d passages",
            settings.map_size,
            settings.hex_radius,
            len(grid.cells),
            result.accepted,
        )
        return result

    def update_settings(self, **changes):
        return self.configure(replace(self.settings, **changes))

    def regenerate(self):
        """Carve a fresh maze over the current grid."""

        result = self._carve(self.grid, self.edges)
        self.last_carve = result
        self.generation += 1
        logger.info("Regenerated maze: %d passages, %d walls kept", result.accepted, result.rejected)
        return result

    def _carve(self, grid, edges):
        merger = self.merger_factory() if self.merger_factory is not None else None
        carver = MazeCarver(rng=self.rng, merger=merger)
        result = carver.carve(edges, grid.cells)

        for wall in grid.walls:
            wall.show()
        for edge in edges:
            if edge.is_connected:
                grid.walls[edge.wall_index].hide()
        grid.validate_integrity()
        return result

    def wall_states(self):
        """``(wall index, is_open)`` for every wall, in wall order."""

        return [(wall.index, wall.is_open) for wall in self.grid.walls]

    def passages(self):
        """Adjacency of the carved maze: cell index -> cells reachable in one step."""

        adjacency = {cell.index: [] for cell in self.grid.cells}
        for edge in self.edges:
            if edge.is_connected:
                adjacency[edge.cell_a].append(edge.cell_b)
                adjacency[edge.cell_b].append(edge.cell_a)
        return adjacency

    def wall_placements(self):
        return wall_placements(self.grid, self.settings.wall_width, self.settings.wall_height)

    def corner_placements(self):
        return corner_placements(self.grid, self.settings.wall_height)


__all__ = ["HexMaze"]
