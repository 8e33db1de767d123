import math

import pytest

from hex_maze.cube import ORIGIN, CUBE_DIRECTIONS, cube_distance, cube_neighbor, opposite_direction
from hex_maze.errors import MazeConfigError, MazeIntegrityError
from hex_maze.grid import HexCellArray, HexGrid


@pytest.mark.parametrize("map_size", range(0, 7))
def test_cell_count_matches_closed_form(map_size):
    grid = HexGrid(map_size, 1.0)

    assert len(grid.cells) == 1 + 3 * map_size * (map_size + 1)
    cubes = [cell.cube for cell in grid.cells]
    assert len(set(cubes)) == len(cubes)
    assert all(cube_distance(ORIGIN, cube) <= map_size for cube in cubes)
    assert [cell.index for cell in grid.cells] == list(range(len(grid.cells)))


@pytest.mark.parametrize("map_size", range(0, 6))
def test_wall_neighbour_counts(map_size):
    grid = HexGrid(map_size, 1.0)
    interior = grid.interior_walls()
    boundary = grid.boundary_walls()

    for wall in interior:
        assert wall.cell_a != wall.cell_b
        assert len(wall.neighbor_cells()) == 2
    for wall in boundary:
        assert len(wall.neighbor_cells()) == 1

    assert len(interior) == 3 * map_size * (3 * map_size + 1)
    assert len(boundary) == 6 * (2 * map_size + 1)
    assert len(grid.walls) == len(interior) + len(boundary)


def test_single_cell_grid():
    grid = HexGrid(0, 1.0)

    assert len(grid.cells) == 1
    assert grid.cells[0].cube == ORIGIN
    assert len(grid.walls) == 6
    assert all(wall.is_boundary for wall in grid.walls)
    assert grid.cells[0].walls == [0, 1, 2, 3, 4, 5]


def test_neighbours_share_one_wall_object():
    grid = HexGrid(3, 1.0)
    for cell in grid.cells:
        assert len(set(cell.walls)) == 6
        for direction in range(6):
            neighbor = grid.get_cell(cube_neighbor(cell.cube, direction))
            if neighbor is None:
                assert grid.walls[cell.walls[direction]].is_boundary
                continue
            assert cell.walls[direction] == neighbor.walls[opposite_direction(direction)]


def test_cells_are_created_breadth_first():
    grid = HexGrid(1, 1.0)
    assert [cell.cube for cell in grid.cells] == [ORIGIN, *CUBE_DIRECTIONS]


def test_interior_wall_sits_between_cell_centres():
    grid = HexGrid(2, 1.25)
    for wall in grid.interior_walls():
        a = grid.cells[wall.cell_a].center
        b = grid.cells[wall.cell_b].center
        assert wall.position[0] == pytest.approx((a[0] + b[0]) / 2)
        assert wall.position[1] == pytest.approx((a[1] + b[1]) / 2)


def test_boundary_walls_face_outward():
    grid = HexGrid(2, 1.0)
    for wall in grid.boundary_walls():
        owner = grid.cells[wall.cell_a]
        assert cube_distance(ORIGIN, owner.cube) == 2
        assert cube_distance(ORIGIN, cube_neighbor(owner.cube, wall.direction)) == 3


@pytest.mark.parametrize("map_size", range(0, 5))
def test_each_lattice_vertex_gets_one_corner(map_size):
    grid = HexGrid(map_size, 1.0)
    assert len(grid.corners) == 6 * (map_size + 1) ** 2

    points = set()
    for cell_index, corner in grid.corners:
        cx, cy = grid.cells[cell_index].center
        ox, oy = grid.metrics.corner_offset(corner)
        points.add((round(cx + ox, 6), round(cy + oy, 6)))
    assert len(points) == len(grid.corners)


def test_storage_covers_one_hop_beyond_radius():
    array = HexCellArray(2)
    assert array.size == 7
    assert array.storage_index((-3, 3, 0)) == (0, 6)
    assert array.get((3, -3, 0)) is None

    with pytest.raises(MazeIntegrityError):
        array.storage_index((4, -4, 0))
    with pytest.raises(MazeIntegrityError):
        array.storage_index((-4, 0, 4))


def test_storage_rejects_invalid_cube():
    with pytest.raises(MazeIntegrityError):
        HexCellArray(1).storage_index((1, 1, 1))


def test_storage_rejects_duplicate_cell():
    array = HexCellArray(1)
    array.put(ORIGIN, object())
    with pytest.raises(MazeIntegrityError):
        array.put(ORIGIN, object())


def test_get_cell_outside_storage_returns_none():
    grid = HexGrid(1, 1.0)
    assert grid.get_cell((5, -5, 0)) is None
    assert grid.get_cell(ORIGIN) is grid.cells[0]


@pytest.mark.parametrize(
    "map_size, hex_radius",
    [
        (-1, 1.0),
        (1.5, 1.0),
        (True, 1.0),
        (math.inf, 1.0),
        (math.nan, 1.0),
        ("two", 1.0),
        (2, 0.0),
        (2, -1.0),
        (2, math.nan),
        (2, math.inf),
        (2, "wide"),
        (2, None),
    ],
)
def test_invalid_grid_configuration(map_size, hex_radius):
    with pytest.raises(MazeConfigError):
        HexGrid(map_size, hex_radius)


def test_config_error_is_value_error():
    with pytest.raises(ValueError):
        HexGrid(-2, 1.0)


def test_validate_integrity_detects_broken_wall():
    grid = HexGrid(1, 1.0)
    grid.walls[0].cell_b = 99
    with pytest.raises(MazeIntegrityError):
        grid.validate_integrity()


def test_validate_integrity_detects_open_boundary():
    grid = HexGrid(1, 1.0)
    grid.boundary_walls()[0].hide()
    with pytest.raises(MazeIntegrityError):
        grid.validate_integrity()


def test_cell_centres_scale_with_hex_radius():
    small = HexGrid(1, 1.0)
    large = HexGrid(1, 2.0)
    for a, b in zip(small.cells, large.cells):
        assert math.hypot(*b.center) == pytest.approx(2 * math.hypot(*a.center))


def test_grid_accepts_the_same_inputs_as_settings():
    grid = HexGrid(2.0, "1.5")

    assert grid.map_size == 2
    assert grid.hex_radius == 1.5
    assert all(math.isfinite(x) and math.isfinite(y) for x, y in (c.center for c in grid.cells))
