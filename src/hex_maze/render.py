"""Arcade-based top-down rendering for Hex Maze."""

from __future__ import annotations

from math import cos, radians, sin

import arcade

from hex_maze.config import (
    BB_HEIGHT,
    BOARD_MARGIN_PX,
    SCREEN_HEIGHT,
    SCREEN_WIDTH,
    UI_MIN_LINE_WIDTH_PX,
    UI_STATUS_SEPARATOR,
)
from hex_maze.cube import DIRECTION_COUNT
from hex_maze.placement import prism_profile
from hex_maze.runtime import TextCache
from hex_maze.visual import (
    COLOR_AMBER,
    COLOR_BOUNDARY_WALL,
    COLOR_CHARCOAL,
    COLOR_CORNER,
    COLOR_FLOOR,
    COLOR_NEAR_BLACK,
    COLOR_SOFT_WHITE,
    COLOR_WALL,
)

_TEXT_CACHE = TextCache(max_entries=256)
_MAZE_GEOMETRY_CACHE: dict[tuple[int, int, float, float], dict[str, object]] = {}


def draw_frame(window, font_bar, maze):
    window.clear(COLOR_CHARCOAL)
    geometry = _get_maze_geometry(maze)
    line_width = geometry["wall_line_width"]

    for points in geometry["floors"]:
        arcade.draw_polygon_filled(points, COLOR_FLOOR)

    for wall in maze.walls:
        if wall.is_open:
            continue
        (x1, y1), (x2, y2) = geometry["walls"][wall.index]
        color = COLOR_BOUNDARY_WALL if wall.is_boundary else COLOR_WALL
        arcade.draw_line(x1, y1, x2, y2, color, line_width)

    for points in geometry["corners"]:
        arcade.draw_polygon_filled(points, COLOR_CORNER)

    draw_bottom_bar(font_bar, maze)


def draw_bottom_bar(font, maze):
    settings = maze.settings
    carve = maze.last_carve
    arcade.draw_lbwh_rectangle_filled(0, 0, SCREEN_WIDTH, BB_HEIGHT, COLOR_NEAR_BLACK)

    separator = UI_STATUS_SEPARATOR if UI_STATUS_SEPARATOR else " / "
    segments = [
        (f"Size: {settings.map_size}", COLOR_SOFT_WHITE),
        (separator, COLOR_SOFT_WHITE),
        (f"Radius: {settings.hex_radius:.2f}", COLOR_SOFT_WHITE),
        (separator, COLOR_SOFT_WHITE),
        (f"Wall: {settings.wall_width:.2f} x {settings.wall_height:.2f}", COLOR_SOFT_WHITE),
        (separator, COLOR_SOFT_WHITE),
        (f"Open: {carve.accepted}", COLOR_AMBER),
        (separator, COLOR_SOFT_WHITE),
        (f"Closed: {carve.rejected}", COLOR_AMBER),
    ]
    _draw_centered_status_segments(
        segments=segments,
        font_name=str(font["name"]),
        font_size=int(font["size"]),
        bar_height=BB_HEIGHT,
    )


def _draw_centered_status_segments(segments, font_name: str, font_size: int, bar_height: int):
    if not segments:
        return

    text_objects = []
    total_width = 0.0
    for text, color in segments:
        text_obj = _TEXT_CACHE.get_text(
            text=text,
            color=color,
            font_size=font_size,
            font_name=font_name,
            anchor_x="left",
            anchor_y="center",
        )
        text_objects.append(text_obj)
        total_width += float(text_obj.content_width)

    cursor_x = (SCREEN_WIDTH - total_width) / 2.0
    center_y = bar_height / 2.0
    for text_obj in text_objects:
        text_obj.x = cursor_x
        text_obj.y = center_y
        text_obj.draw()
        cursor_x += float(text_obj.content_width)


def board_transform(grid, wall_width):
    """Scale and screen origin that fit the whole grid above the status bar."""

    reach = grid.metrics.circum_radius + wall_width
    extent_x = max(abs(cell.center[0]) for cell in grid.cells) + reach
    extent_y = max(abs(cell.center[1]) for cell in grid.cells) + reach

    available_width = SCREEN_WIDTH - 2 * BOARD_MARGIN_PX
    available_height = SCREEN_HEIGHT - BB_HEIGHT - 2 * BOARD_MARGIN_PX
    scale = min(available_width / (2 * extent_x), available_height / (2 * extent_y))
    origin_x = SCREEN_WIDTH / 2.0
    origin_y = BB_HEIGHT + (SCREEN_HEIGHT - BB_HEIGHT) / 2.0
    return scale, origin_x, origin_y


def _get_maze_geometry(maze):
    grid = maze.grid
    wall_width = maze.settings.wall_width
    key = (id(grid), grid.map_size, grid.hex_radius, wall_width)
    cached = _MAZE_GEOMETRY_CACHE.get(key)
    if cached is not None:
        return cached
    if len(_MAZE_GEOMETRY_CACHE) > 8:
        _MAZE_GEOMETRY_CACHE.clear()

    scale, origin_x, origin_y = board_transform(grid, wall_width)
    metrics = grid.metrics

    def to_screen(point):
        return (origin_x + point[0] * scale, origin_y + point[1] * scale)

    floors = []
    for cell in grid.cells:
        cx, cy = cell.center
        corners = []
        for corner in range(DIRECTION_COUNT):
            ox, oy = metrics.corner_offset(corner)
            corners.append(to_screen((cx + ox, cy + oy)))
        floors.append(corners)

    walls = {}
    for wall in grid.walls:
        owner = grid.cells[wall.cell_a]
        a, b = metrics.wall_endpoints(owner.center, wall.direction)
        walls[wall.index] = (to_screen(a), to_screen(b))

    profile = prism_profile(wall_width)
    corners = []
    for cell_index, corner in grid.corners:
        cx, cy = grid.cells[cell_index].center
        ox, oy = metrics.corner_offset(corner)
        yaw = radians(90 + 60 * corner)
        points = []
        for px, pz in profile:
            rx = px * cos(yaw) + pz * sin(yaw)
            rz = -px * sin(yaw) + pz * cos(yaw)
            points.append(to_screen((cx + ox + rx, cy + oy + rz)))
        corners.append(points)

    geometry = {
        "floors": floors,
        "walls": walls,
        "corners": corners,
        "wall_line_width": max(float(UI_MIN_LINE_WIDTH_PX), wall_width * scale),
    }
    _MAZE_GEOMETRY_CACHE[key] = geometry
    return geometry
