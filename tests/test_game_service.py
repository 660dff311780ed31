"""Tests for the menu loop and game modes with scripted input."""

import random
import time

import pytest

from maze_game.config import Settings
from maze_game.core.maze_grid import MazeParseError
from maze_game.schemas.commands import MenuOption
from maze_game.services.game_service import MazeGame


BLOCKED_MAZE = """#####
#S..#
#####
#..E#
#####"""

OPEN_MAZE = """#######
#S....#
#.....#
#..#..#
#.....#
#....E#
#######"""


@pytest.fixture
def make_game(test_settings, make_ui):
    """Build a MazeGame over the simple maze; returns (game, output)."""

    def _make(answers=(), settings: Settings = None):
        ui, output = make_ui(answers)
        game = MazeGame(settings or test_settings, ui, rng=random.Random(42))
        return game, output

    return _make


class TestMenu:
    def test_exit_from_menu(self, make_game):
        game, output = make_game(["4"])

        assert game.run() == 0
        assert "=== Maze Game Menu ===" in output.getvalue()
        assert "Goodbye!" in output.getvalue()

    def test_menu_shows_path_limit(self, make_game, test_settings):
        settings = test_settings.model_copy(update={"max_paths_to_show": 7})
        game, output = make_game(["4"], settings=settings)

        game.run()

        assert "up to 7 paths" in output.getvalue()

    def test_invalid_option_is_reported(self, make_game):
        game, output = make_game(["9", "hello", "4"])

        assert game.run() == 0
        assert output.getvalue().count("Invalid option!") == 2

    def test_end_of_input_exits_cleanly(self, make_game):
        game, output = make_game([])

        assert game.run() == 0
        assert "Goodbye!" in output.getvalue()

    def test_exit_after_mode(self, make_game):
        game, output = make_game(["3", "2"])

        assert game.run() == 0
        assert "1 - Return to menu" in output.getvalue()

    def test_return_to_menu_reloads_maze(self, make_game, maze_file):
        """Each mode starts from the file contents, not the previous grid."""
        game, output = make_game(["3", "1", "4"])
        loaded = []
        original_reload = game.reload

        def tracking_reload():
            grid = original_reload()
            loaded.append(grid)
            return grid

        game.reload = tracking_reload

        assert game.run() == 0
        assert len(loaded) == 2
        assert "b" not in "".join(loaded[-1].cells)

    def test_reload_picks_up_file_changes(self, make_game, maze_file):
        game, _ = make_game()
        game.reload()
        assert game.grid.width == 5

        maze_file.write_text("S..E\n", encoding="utf-8")

        assert game.reload().width == 4

    def test_failed_reload_discards_grid(self, make_game, maze_file):
        game, _ = make_game()
        game.reload()

        maze_file.write_text("S..E\n...\n", encoding="utf-8")

        with pytest.raises(MazeParseError):
            game.reload()
        assert game.grid is None

    def test_mode_without_grid_raises(self, make_game):
        game, _ = make_game()
        with pytest.raises(RuntimeError, match="not loaded"):
            game.run_mode(MenuOption.SHORTEST_PATH)


class TestManualMode:
    def test_reach_exit(self, make_game):
        game, output = make_game(["d", "d", "s", "s"])
        game.reload()

        assert game.play_manual() is True
        assert "Congratulations! You reached the exit in 4 moves!" in output.getvalue()

    def test_wall_and_invalid_input_then_quit(self, make_game):
        game, output = make_game(["w", "x", "q"])
        game.reload()

        assert game.play_manual() is False

        text = output.getvalue()
        assert "Cannot go through walls or out of bounds" in text
        assert "Use w, a, s, d or q to quit" in text
        assert "You quit the game." in text

    def test_player_is_drawn(self, make_game):
        game, output = make_game(["d", "q"])
        game.reload()

        game.play_manual()

        assert "#S^.#" in output.getvalue()

    def test_full_run_through_menu(self, make_game):
        game, output = make_game(["1", "s", "s", "d", "d", "2"])

        assert game.run() == 0
        assert "Congratulations!" in output.getvalue()


class TestPossiblePathsMode:
    def test_stop_after_answer_no(self, make_game):
        game, output = make_game(["y", "n"])
        game.reload()

        assert game.show_possible_paths() == 2

        text = output.getvalue()
        assert "Possible Path #1 (length: 4 steps)" in text
        assert "Possible Path #2 (length: 4 steps)" in text
        assert "Possible Path #3" not in text

    def test_limit_reached(self, make_game, write_maze, test_settings):
        path = write_maze(OPEN_MAZE, filename="open.txt")
        settings = test_settings.model_copy(
            update={"maze_file": path, "max_paths_to_show": 3}
        )
        game, output = make_game(["y", "y", "y"], settings=settings)
        game.reload()

        assert game.show_possible_paths() == 3
        assert "Maximum number of paths reached." in output.getvalue()

    def test_path_markers_are_drawn_on_copy(self, make_game):
        game, output = make_game(["n"])
        game.reload()

        game.show_possible_paths()

        assert "^" in output.getvalue()
        assert "^" not in game.grid.to_text()

    def test_no_path(self, make_game, write_maze, test_settings):
        path = write_maze(BLOCKED_MAZE, filename="blocked.txt")
        game, output = make_game(settings=test_settings.model_copy(update={"maze_file": path}))
        game.reload()

        assert game.show_possible_paths() == 0
        assert "No more paths found." in output.getvalue()

    def test_sealed_exit_returns_promptly(self, make_game, write_maze, test_settings):
        room = "\n".join(["S......"] + ["......."] * 5 + ["######.", "#####E#"])
        path = write_maze(room, filename="sealed.txt")
        game, output = make_game(settings=test_settings.model_copy(update={"maze_file": path}))
        game.reload()

        started = time.monotonic()
        assert game.show_possible_paths() == 0
        assert time.monotonic() - started < 2.0
        assert "No more paths found." in output.getvalue()


class TestShortestPathMode:
    def test_shortest_path(self, make_game):
        game, output = make_game()
        game.reload()

        result = game.show_shortest_path()

        assert result.length == 4
        text = output.getvalue()
        assert "Shortest path (length: 4 steps, 8 cells explored):" in text
        assert "#b#.#" in text
        assert "#bbE#" in text
        assert "b" not in game.grid.to_text()

    def test_no_path_returns_to_menu(self, make_game, write_maze, test_settings):
        path = write_maze(BLOCKED_MAZE, filename="blocked.txt")
        settings = test_settings.model_copy(update={"maze_file": path})
        game, output = make_game(["3", "1", "4"], settings=settings)

        assert game.run() == 0
        assert "No path exists!" in output.getvalue()
