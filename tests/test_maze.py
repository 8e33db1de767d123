import math
from dataclasses import replace

import pytest

from hex_maze import HexMaze, MazeConfigError, MazeSettings, UnionFindMerger
from hex_maze.boards import MAZE_SLIDERS, MAZE_STANDARD, normalize_maze_settings, step_setting


def test_default_maze():
    maze = HexMaze(seed=1)

    assert maze.settings == MAZE_STANDARD
    assert len(maze.cells) == 37
    assert len(maze.edges) == 90
    assert maze.last_carve.accepted == 36
    assert maze.last_carve.rejected == 54
    assert maze.generation == 1


def test_open_walls_are_the_accepted_edges():
    maze = HexMaze(seed=2)

    open_walls = {index for index, is_open in maze.wall_states() if is_open}
    assert open_walls == {edge.wall_index for edge in maze.edges if edge.is_connected}
    assert not any(wall.is_open for wall in maze.grid.boundary_walls())


def test_passages_form_a_tree():
    maze = HexMaze(MazeSettings(4, 1.0, 0.1, 0.5), seed=3)
    passages = maze.passages()

    assert sum(len(others) for others in passages.values()) == 2 * (len(maze.cells) - 1)
    seen = {0}
    stack = [0]
    while stack:
        for other in passages[stack.pop()]:
            if other not in seen:
                seen.add(other)
                stack.append(other)
    assert len(seen) == len(maze.cells)


def test_invalid_settings_keep_previous_maze():
    maze = HexMaze(seed=4)
    grid = maze.grid
    states = maze.wall_states()

    with pytest.raises(MazeConfigError):
        maze.configure(replace(maze.settings, map_size=-1))
    with pytest.raises(MazeConfigError):
        maze.update_settings(hex_radius=0)

    assert maze.grid is grid
    assert maze.settings == MAZE_STANDARD
    assert maze.wall_states() == states
    assert maze.generation == 1


def test_update_settings_rebuilds_grid():
    maze = HexMaze(seed=5)
    old_grid = maze.grid
    maze.update_settings(map_size=2)

    assert maze.grid is not old_grid
    assert len(maze.cells) == 19
    assert maze.last_carve.accepted == 18
    assert maze.generation == 2


def test_regenerate_keeps_grid():
    maze = HexMaze(seed=6)
    grid = maze.grid
    edges = maze.edges
    maze.regenerate()

    assert maze.grid is grid
    assert maze.edges is edges
    assert maze.generation == 2
    assert maze.last_carve.accepted == len(maze.cells) - 1
    assert {cell.group for cell in maze.cells} == {0}


def test_seed_reproduces_maze():
    assert HexMaze(seed=7).wall_states() == HexMaze(seed=7).wall_states()


def test_wall_size_does_not_change_topology():
    thin = HexMaze(MazeSettings(3, 1.0, 0.1, 0.5), seed=8)
    thick = HexMaze(MazeSettings(3, 1.0, 0.4, 1.5), seed=8)

    assert thin.wall_states() == thick.wall_states()


def test_union_find_maze_matches_flood_fill():
    flood = HexMaze(seed=9)
    union = HexMaze(seed=9, merger_factory=UnionFindMerger)

    assert flood.wall_states() == union.wall_states()


def test_single_cell_maze():
    maze = HexMaze(MazeSettings(0, 1.0, 0.1, 0.5), seed=10)

    assert len(maze.cells) == 1
    assert maze.edges == []
    assert all(not is_open for _, is_open in maze.wall_states())


def test_normalize_coerces_numbers():
    settings = normalize_maze_settings(MazeSettings(2.0, 1, 0.1, 1))

    assert settings == MazeSettings(2, 1.0, 0.1, 1.0)
    assert isinstance(settings.map_size, int)
    assert isinstance(settings.hex_radius, float)


@pytest.mark.parametrize(
    "changes",
    [
        {"map_size": 1.5},
        {"map_size": True},
        {"map_size": -3},
        {"hex_radius": math.nan},
        {"hex_radius": "wide"},
        {"wall_width": 0.0},
        {"wall_height": math.inf},
    ],
)
def test_normalize_rejects_bad_values(changes):
    with pytest.raises(MazeConfigError):
        normalize_maze_settings(replace(MAZE_STANDARD, **changes))


def test_step_setting_moves_by_slider_step():
    assert step_setting(MAZE_STANDARD, "map_size", 1).map_size == 4
    assert step_setting(MAZE_STANDARD, "hex_radius", 1).hex_radius == 1.25
    assert step_setting(MAZE_STANDARD, "wall_width", -1).wall_width == pytest.approx(0.08)


def test_step_setting_clamps_to_range():
    low = replace(MAZE_STANDARD, map_size=0)
    assert step_setting(low, "map_size", -1).map_size == 0
    top = MAZE_SLIDERS["hex_radius"].maximum
    assert step_setting(replace(MAZE_STANDARD, hex_radius=top), "hex_radius", 3).hex_radius == top


def test_step_setting_unknown_name():
    with pytest.raises(MazeConfigError):
        step_setting(MAZE_STANDARD, "seed", 1)
