"""Pytest configuration and fixtures."""

import io
from pathlib import Path
from typing import Callable

import pytest
from rich.console import Console

from maze_game.config import Settings
from maze_game.ui.console import MazeConsole


# Sample maze for testing
SIMPLE_MAZE = """#####
#S..#
#.#.#
#..E#
#####"""


class ScriptedInput:
    """Reader returning canned answers and recording the prompts."""

    def __init__(self, answers):
        self.answers = list(answers)
        self.prompts: list[str] = []

    def __call__(self, prompt: str) -> str:
        self.prompts.append(prompt)
        if not self.answers:
            raise EOFError
        return self.answers.pop(0)


@pytest.fixture
def write_maze(tmp_path) -> Callable[[str, str], Path]:
    """Write maze text to a file under tmp_path and return its path."""

    def _write(text: str, filename: str = "maze.txt") -> Path:
        path = tmp_path / filename
        path.write_text(text, encoding="utf-8")
        return path

    return _write


@pytest.fixture
def maze_file(write_maze) -> Path:
    return write_maze(SIMPLE_MAZE)


@pytest.fixture
def test_settings(maze_file) -> Settings:
    """Settings pointing at the simple maze, with no delays or colors."""
    return Settings(
        _env_file=None,
        maze_file=maze_file,
        color=False,
        clear_screen=False,
        step_delay_seconds=0,
    )


@pytest.fixture
def make_ui():
    """Build a MazeConsole fed by canned answers; returns (ui, output)."""

    def _make(answers=()):
        output = io.StringIO()
        console = Console(file=output, no_color=True, width=120)
        ui = MazeConsole(
            console=console,
            reader=ScriptedInput(answers),
            clear_screen=False,
            step_delay=0,
        )
        return ui, output

    return _make
