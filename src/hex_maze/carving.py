"""Randomized Kruskal carving over the hex maze graph.

Edges are drawn uniformly at random without replacement. An edge whose
endpoints already share a connectivity group would close a loop and stays a
wall; any other edge becomes a passage and the two groups merge, the larger
group id taking the smaller one's value. After the last draw every cell
carries group 0 and the passages form a spanning tree.

Group merging sits behind ``GroupMerger``. ``FloodFillMerger`` relabels the
absorbed component by walking grid adjacency, which costs time proportional
to that component per merge (quadratic over a degenerate chain of merges).
``UnionFindMerger`` is a drop-in replacement with near-constant merges and
produces identical decisions and final group tags.
"""

from __future__ import annotations

import logging
import random
from collections import deque
from dataclasses import dataclass
from typing import Protocol

from hex_maze.errors import MazeIntegrityError

logger = logging.getLogger(__name__)


class GroupMerger(Protocol):
    def reset(self, cells) -> None:
        """Put every cell in its own group, keyed by its index."""

    def group_of(self, index: int) -> int:
        ...

    def merge(self, a: int, b: int) -> int:
        """Join the groups of cells ``a`` and ``b``; return the number of cells touched."""

    def sync(self) -> None:
        """Write final group values back to ``cell.group``."""


class FloodFillMerger:
    def __init__(self):
        self._cells = []

    def reset(self, cells):
        self._cells = cells
        for cell in cells:
            cell.group = cell.index

    def group_of(self, index):
        return self._cells[index].group

    def merge(self, a, b):
        group_a = self.group_of(a)
        group_b = self.group_of(b)
        if group_a == group_b:
            return 0
        if group_a < group_b:
            return self._relabel(b, group_b, group_a)
        return self._relabel(a, group_a, group_b)

    def _relabel(self, start, old_group, new_group):
        cells = self._cells
        if not (0 <= new_group < len(cells)):
            raise MazeIntegrityError(f"Group {new_group} does not name a cell")

        start_cell = cells[start]
        start_cell.group = new_group
        queue = deque([start_cell])
        touched = 1
        while queue:
            cell = queue.popleft()
            for neighbor_index in cell.neighbors:
                neighbor = cells[neighbor_index]
                # Only cells still carrying the old tag belong to the absorbed component.
                if neighbor.group != old_group:
                    continue
                neighbor.group = new_group
                queue.append(neighbor)
                touched += 1
        return touched

    def sync(self):
        pass


class UnionFindMerger:
    def __init__(self):
        self._cells = []
        self._parent = []

    def reset(self, cells):
        self._cells = cells
        self._parent = list(range(len(cells)))
        for cell in cells:
            cell.group = cell.index

    def group_of(self, index):
        parent = self._parent
        while parent[index] != index:
            parent[index] = parent[parent[index]]
            index = parent[index]
        return index

    def merge(self, a, b):
        root_a = self.group_of(a)
        root_b = self.group_of(b)
        if root_a == root_b:
            return 0
        keep, drop = (root_a, root_b) if root_a < root_b else (root_b, root_a)
        self._parent[drop] = keep
        return 1

    def sync(self):
        for cell in self._cells:
            cell.group = self.group_of(cell.index)


@dataclass(frozen=True)
class CarveResult:
    accepted: int
    rejected: int
    merge_steps: int

    @property
    def processed(self) -> int:
        return self.accepted + self.rejected


class MazeCarver:
    def __init__(self, rng: random.Random | None = None, merger: GroupMerger | None = None):
        self.rng = rng or random
        self.merger = merger if merger is not None else FloodFillMerger()

    def carve(self, edges, cells) -> CarveResult:
        """Decide ``is_connected`` for every edge and leave final group tags on ``cells``."""

        merger = self.merger
        merger.reset(cells)
        cell_count = len(cells)

        remaining = list(edges)
        for edge in remaining:
            edge.is_connected = False

        accepted = 0
        rejected = 0
        merge_steps = 0
        while remaining:
            edge = remaining.pop(self.rng.randrange(len(remaining)))
            a, b = edge.cell_a, edge.cell_b
            if not (0 <= a < cell_count and 0 <= b < cell_count):
                raise MazeIntegrityError(f"Edge on wall {edge.wall_index} references missing cell")

            if merger.group_of(a) == merger.group_of(b):
                edge.is_connected = False
                rejected += 1
                continue

            edge.is_connected = True
            accepted += 1
            merge_steps += merger.merge(a, b)

        merger.sync()
        self._check_spanning_tree(cells, accepted)

        logger.debug(
            "Carved %d edges: %d accepted, %d rejected, %d merge steps",
            accepted + rejected,
            accepted,
            rejected,
            merge_steps,
        )
        return CarveResult(accepted=accepted, rejected=rejected, merge_steps=merge_steps)

    @staticmethod
    def _check_spanning_tree(cells, accepted):
        if not cells:
            return
        if accepted != len(cells) - 1:
            raise MazeIntegrityError(
                f"Carving accepted {accepted} edges for {len(cells)} cells; expected {len(cells) - 1}"
            )
        groups = {cell.group for cell in cells}
        if len(groups) != 1:
            raise MazeIntegrityError(f"Carving left {len(groups)} disconnected groups")


__all__ = [
    "GroupMerger",
    "FloodFillMerger",
    "UnionFindMerger",
    "CarveResult",
    "MazeCarver",
]
