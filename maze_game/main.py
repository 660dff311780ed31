"""Maze Game - console entry point."""

import logging
import sys
from typing import Optional

from maze_game.config import Settings, get_settings
from maze_game.core.maze_grid import MazeError
from maze_game.services.game_service import MazeGame
from maze_game.ui.console import MazeConsole

logger = logging.getLogger("maze_game")


def configure_logging(settings: Settings) -> None:
    """Configure logging; a log file keeps records out of the game frame."""
    handlers: Optional[list[logging.Handler]] = None
    if settings.log_file is not None:
        handlers = [logging.FileHandler(settings.log_file, encoding="utf-8")]

    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        handlers=handlers,
    )


def build_console(settings: Settings) -> MazeConsole:
    return MazeConsole(
        color=settings.color,
        clear_screen=settings.clear_screen,
        step_delay=settings.step_delay_seconds,
    )


def main(settings: Optional[Settings] = None, ui: Optional[MazeConsole] = None) -> int:
    """
    Run the game.

    Returns:
        0 on a normal exit, 1 if the maze could not be loaded, 130 on Ctrl-C.
    """
    settings = settings or get_settings()
    configure_logging(settings)
    ui = ui or build_console(settings)

    logger.info(f"Starting {settings.app_name} with {settings.maze_file}")
    game = MazeGame(settings, ui)

    try:
        return game.run()
    except OSError as e:
        logger.error(f"Cannot open maze file {settings.maze_file}: {e}")
        ui.error(f"Error: {settings.maze_file} not found or cannot be opened!")
    except MazeError as e:
        logger.error(f"Invalid maze file {settings.maze_file}: {e}")
        ui.error(f"Error: {e}")
    except KeyboardInterrupt:
        logger.info("Interrupted by user")
        ui.notice("\nGoodbye!")
        return 130

    ui.error("Program terminated.")
    return 1


def run() -> None:
    """Console script entry point."""
    sys.exit(main())


if __name__ == "__main__":
    run()
