if __package__ is None or __package__ == "":
    import sys
    from pathlib import Path

    sys.path.insert(0, str(Path(__file__).resolve().parents[1]))

import argparse
import logging

import arcade

from hex_maze.boards import MAZE_STANDARD, MazeSettings, step_setting
from hex_maze.config import (
    FONT_NAME_BAR,
    FONT_SIZE_BAR,
    FPS,
    LOG_LEVEL_CHOICES,
    SCREEN_HEIGHT,
    SCREEN_WIDTH,
    WINDOW_TITLE,
)
from hex_maze.errors import MazeConfigError
from hex_maze.maze import HexMaze
import hex_maze.render as ui
from hex_maze.runtime import ArcadeFrameClock, ArcadeWindowController, configure_logging

logger = logging.getLogger(__name__)

SETTING_KEYS = {
    arcade.key.UP: ("map_size", 1),
    arcade.key.DOWN: ("map_size", -1),
    arcade.key.RIGHT: ("hex_radius", 1),
    arcade.key.LEFT: ("hex_radius", -1),
    arcade.key.BRACKETRIGHT: ("wall_width", 1),
    arcade.key.BRACKETLEFT: ("wall_width", -1),
    arcade.key.EQUAL: ("wall_height", 1),
    arcade.key.MINUS: ("wall_height", -1),
}


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Generate and view a hexagonal perfect maze")
    parser.add_argument("--map-size", type=int, default=MAZE_STANDARD.map_size, help="Rings around the centre cell")
    parser.add_argument("--hex-radius", type=float, default=MAZE_STANDARD.hex_radius, help="Inscribed radius of one cell")
    parser.add_argument("--wall-width", type=float, default=MAZE_STANDARD.wall_width)
    parser.add_argument("--wall-height", type=float, default=MAZE_STANDARD.wall_height)
    parser.add_argument("--seed", type=int, default=None)
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=LOG_LEVEL_CHOICES,
        default=None,
        help="Overrides the HEX_MAZE_LOG_LEVEL environment variable",
    )
    return parser.parse_args(argv)


def apply_setting_key(maze, symbol):
    """Handle one settings key; a rejected change keeps the current maze."""

    name, steps = SETTING_KEYS[symbol]
    try:
        maze.configure(step_setting(maze.settings, name, steps))
    except MazeConfigError as exc:
        logger.warning("Ignoring %s change: %s", name, exc)


def play_maze(settings=MAZE_STANDARD, seed=None):
    maze = HexMaze(settings, seed=seed)

    window_controller = ArcadeWindowController(
        SCREEN_WIDTH,
        SCREEN_HEIGHT,
        WINDOW_TITLE,
        enabled=True,
        queue_input_events=True,
        vsync=False,
    )
    window = window_controller.window
    if window is None:
        return

    frame_clock = ArcadeFrameClock()
    font_bar = {"name": FONT_NAME_BAR, "size": FONT_SIZE_BAR}

    while True:
        frame_clock.tick(FPS)
        if window_controller.poll_events():
            break

        for symbol in window_controller.consume_key_presses():
            if symbol == arcade.key.ESCAPE:
                window_controller.request_close()
            elif symbol == arcade.key.R:
                maze.regenerate()
            elif symbol in SETTING_KEYS:
                apply_setting_key(maze, symbol)

        ui.draw_frame(window, font_bar, maze)
        window_controller.flip()

    window_controller.close()


def main(argv=None):
    args = parse_args(argv)
    try:
        configure_logging(args.log_level)
    except ValueError as exc:
        raise SystemExit(f"Invalid log level: {exc}") from exc
    settings = MazeSettings(
        map_size=args.map_size,
        hex_radius=args.hex_radius,
        wall_width=args.wall_width,
        wall_height=args.wall_height,
    )
    try:
        play_maze(settings, seed=args.seed)
    except MazeConfigError as exc:
        raise SystemExit(f"Invalid maze settings: {exc}") from exc


if __name__ == "__main__":
    main()
