"""Perfect-maze generation on a radius-bounded hexagonal grid."""

from .boards import MAZE_STANDARD, MazeSettings
from .carving import CarveResult, FloodFillMerger, MazeCarver, UnionFindMerger
from .errors import MazeConfigError, MazeIntegrityError
from .graph import MazeEdge, extract_graph
from .grid import HexCell, HexGrid, HexWall
from .maze import HexMaze

__version__ = "0.1.0"

__all__ = [
    "MAZE_STANDARD",
    "MazeSettings",
    "CarveResult",
    "FloodFillMerger",
    "MazeCarver",
    "UnionFindMerger",
    "MazeConfigError",
    "MazeIntegrityError",
    "MazeEdge",
    "extract_graph",
    "HexCell",
    "HexGrid",
    "HexWall",
    "HexMaze",
    "__version__",
]
