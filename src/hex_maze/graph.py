"""Maze graph extraction from the interior walls of a hex grid."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from hex_maze.errors import MazeIntegrityError

logger = logging.getLogger(__name__)


@dataclass
class MazeEdge:
    """Candidate passage between two cells, backed by one interior wall."""

    cell_a: int
    cell_b: int
    wall_index: int
    is_connected: bool = False

    def key(self) -> tuple[int, int]:
        """Stable undirected key."""

        a, b = self.cell_a, self.cell_b
        return (a, b) if a < b else (b, a)


def extract_edges(walls) -> list[MazeEdge]:
    """One edge per interior wall, in wall order. Boundary walls are skipped."""

    return [
        MazeEdge(cell_a=wall.cell_a, cell_b=wall.cell_b, wall_index=wall.index)
        for wall in walls
        if wall.cell_a is not None and wall.cell_b is not None
    ]


def link_cells(cells, edges) -> None:
    """Reset each cell's group tag and rebuild its grid-adjacency list from ``edges``."""

    for position, cell in enumerate(cells):
        if cell.index != position:
            raise MazeIntegrityError(f"Cell at position {position} has index {cell.index}")
        cell.group = cell.index
        cell.neighbors = []

    cell_count = len(cells)
    for edge in edges:
        for index in (edge.cell_a, edge.cell_b):
            if not (0 <= index < cell_count):
                raise MazeIntegrityError(
                    f"Edge {edge.key()} on wall {edge.wall_index} references missing cell {index}"
                )
        if edge.cell_a == edge.cell_b:
            raise MazeIntegrityError(f"Edge on wall {edge.wall_index} is a self-loop")

        a = cells[edge.cell_a]
        b = cells[edge.cell_b]
        if edge.cell_b not in a.neighbors:
            a.neighbors.append(edge.cell_b)
        if edge.cell_a not in b.neighbors:
            b.neighbors.append(edge.cell_a)


def extract_graph(grid) -> list[MazeEdge]:
    edges = extract_edges(grid.walls)
    link_cells(grid.cells, edges)
    logger.debug("Extracted %d edges from %d walls", len(edges), len(grid.walls))
    return edges


__all__ = ["MazeEdge", "extract_edges", "link_cells", "extract_graph"]
