"""Menu loop and game modes for the console maze game."""

import logging
import random
from typing import Optional

from maze_game.config import Settings
from maze_game.core.maze_grid import MazeGrid, load_maze_file
from maze_game.core.maze_search import (
    NoPathFoundError,
    SearchResult,
    find_shortest_path,
    iter_random_paths,
)
from maze_game.core.maze_session import ManualSession
from maze_game.schemas.commands import (
    InvalidCommandError,
    MenuOption,
    parse_after_mode_choice,
    parse_continue_answer,
    parse_menu_choice,
    parse_move_command,
)
from maze_game.ui.console import (
    PATH_MARKER,
    SHORTEST_PATH_MARKER,
    EndOfInput,
    MazeConsole,
)

logger = logging.getLogger(__name__)


class MazeGame:
    """
    Interactive maze game session.

    Owns the pristine grid and reloads it from disk before every mode, so a
    mode never sees markings or state left behind by the previous one.

    Example usage:
        game = MazeGame(get_settings(), MazeConsole())
        exit_code = game.run()
    """

    def __init__(
        self,
        settings: Settings,
        ui: MazeConsole,
        rng: Optional[random.Random] = None,
    ):
        self.settings = settings
        self.ui = ui
        self.rng = rng or random.Random()
        self.grid: Optional[MazeGrid] = None

    def reload(self) -> MazeGrid:
        """
        Load a fresh grid from the configured maze file.

        On failure the previous grid is discarded before the error propagates.
        """
        self.grid = None
        self.grid = load_maze_file(
            self.settings.maze_file,
            max_rows=self.settings.max_rows,
            max_cols=self.settings.max_cols,
            strict_markers=self.settings.strict_markers,
        )
        return self.grid

    def _require_grid(self) -> MazeGrid:
        if self.grid is None:
            raise RuntimeError("Maze not loaded")
        return self.grid

    def run(self) -> int:
        """
        Load the maze and loop the main menu until the player exits.

        Returns:
            Process exit code (0 on a normal exit).

        Raises:
            OSError: If the maze file cannot be read.
            MazeError: If the maze file is invalid.
        """
        self.reload()

        try:
            while True:
                option = self._ask_menu()
                if option is None:
                    continue
                if option == MenuOption.EXIT:
                    break

                self.run_mode(option)

                self.ui.clear()
                self.ui.info("\n1 - Return to menu\n2 - Exit program")
                if not parse_after_mode_choice(self.ui.ask("Your choice: ")):
                    break

                self.reload()
        except EndOfInput:
            logger.info("Input closed, leaving the game")

        self.ui.notice("Goodbye!")
        return 0

    def _ask_menu(self) -> Optional[MenuOption]:
        self.ui.info(
            "\n=== Maze Game Menu ===\n"
            "1 - Play manually (WASD)\n"
            f"2 - Show some possible solutions (up to {self.settings.max_paths_to_show} paths)\n"
            "3 - Show shortest path (BFS)\n"
            "4 - Exit"
        )
        try:
            return parse_menu_choice(self.ui.ask("Your choice: "))
        except InvalidCommandError as e:
            logger.debug(f"Rejected menu input: {e}")
            self.ui.error(str(e))
            return None

    def run_mode(self, option: MenuOption) -> None:
        modes = {
            MenuOption.PLAY_MANUAL: self.play_manual,
            MenuOption.POSSIBLE_PATHS: self.show_possible_paths,
            MenuOption.SHORTEST_PATH: self.show_shortest_path,
        }
        modes[option]()

    def play_manual(self) -> bool:
        """
        Step-by-step play with w/a/s/d.

        Returns:
            True if the player reached the exit, False if they quit.
        """
        session = ManualSession(self._require_grid())

        while True:
            self.ui.render(session.overlay())

            if session.completed:
                self.ui.success(
                    f"Congratulations! You reached the exit in {session.moves} moves!\n"
                )
                return True

            try:
                command = parse_move_command(self.ui.ask("Move (w a s d) or q to quit: "))
            except InvalidCommandError as e:
                logger.debug(f"Rejected move input: {e}")
                self.ui.error(str(e))
                self.ui.pause()
                continue

            if command.is_quit:
                self.ui.error("You quit the game.")
                return False

            result = session.move(command.direction)
            if result.status == "blocked":
                self.ui.error(result.message)
                self.ui.pause()

    def show_possible_paths(self) -> int:
        """
        Show randomized depth-first paths one at a time.

        Returns:
            Number of paths shown.
        """
        grid = self._require_grid()
        limit = self.settings.max_paths_to_show

        self.ui.notice("Searching for possible paths...\n")
        self.ui.pause()

        count = 0
        try:
            for result in iter_random_paths(grid, limit=limit, rng=self.rng):
                count += 1
                self.ui.clear()
                self.ui.notice(
                    f"\n--- Possible Path #{count} (length: {result.length} steps) ---"
                )
                self.ui.render(grid.marked(result.path, PATH_MARKER), clear=False)

                if count >= limit:
                    self.ui.message("\nMaximum number of paths reached.")
                    self.ui.pause()
                    break

                answer = self.ui.ask("\nDo you want to see another path? (y/n): ")
                if not parse_continue_answer(answer):
                    break
        except NoPathFoundError as e:
            self.ui.error(str(e))
            self.ui.pause()

        return count

    def show_shortest_path(self) -> Optional[SearchResult]:
        """Compute and draw the breadth-first shortest path."""
        grid = self._require_grid()

        try:
            result = find_shortest_path(grid)
        except NoPathFoundError as e:
            self.ui.error(str(e))
            return None

        self.ui.clear()
        self.ui.notice(
            f"Shortest path (length: {result.length} steps, "
            f"{result.visited_count} cells explored):"
        )
        self.ui.pause()
        self.ui.render(grid.marked(result.path, SHORTEST_PATH_MARKER), clear=False)
        return result
