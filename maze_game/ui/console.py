"""
Console rendering and input for the maze game.

Everything that touches the terminal lives here: colors, screen clearing,
pauses and prompts. The search core only hands over plain rows of text.
"""

import time
from typing import Callable, Iterable, Optional

from rich.console import Console
from rich.text import Text

from maze_game.core.maze_grid import EXIT, START, WALL
from maze_game.core.maze_session import PLAYER_MARKER

PATH_MARKER = "^"
SHORTEST_PATH_MARKER = "b"

CELL_STYLES = {
    START: "bold bright_blue",
    EXIT: "bold bright_blue",
    WALL: "yellow",
    PATH_MARKER: "bold red",
    PLAYER_MARKER: "bold red",
    SHORTEST_PATH_MARKER: "bold green",
}


class EndOfInput(Exception):
    """The input source has no more tokens."""

    pass


class MazeConsole:
    """
    Rendering and input collaborator backed by a rich Console.

    Args:
        console: Console to draw on. Created from the color flag when omitted.
        reader: Callable taking a prompt and returning a line of input.
            Defaults to Console.input.
        color: Color capability flag used when creating the console.
        clear_screen: Clear the terminal before each frame.
        step_delay: Seconds to pause after status messages.
    """

    def __init__(
        self,
        console: Optional[Console] = None,
        reader: Optional[Callable[[str], str]] = None,
        color: bool = True,
        clear_screen: bool = True,
        step_delay: float = 0.0,
    ):
        self.console = console or Console(no_color=not color, highlight=False)
        self._reader = reader or self._console_input
        self.clear_screen = clear_screen
        self.step_delay = step_delay

    def _console_input(self, prompt: str) -> str:
        return self.console.input(prompt)

    def clear(self) -> None:
        if self.clear_screen:
            self.console.clear()

    def pause(self) -> None:
        if self.step_delay > 0:
            time.sleep(self.step_delay)

    def render(self, rows: Iterable[str], clear: bool = True) -> None:
        """Draw a frame of maze rows, coloring markers and walls."""
        if clear:
            self.clear()

        frame = Text()
        for row in rows:
            for ch in row:
                style = CELL_STYLES.get(ch)
                if style:
                    frame.append(ch, style=style)
                else:
                    frame.append(ch)
            frame.append("\n")
        self.console.print(frame, soft_wrap=True)

    def message(self, text: str, style: Optional[str] = None) -> None:
        self.console.print(text, style=style, highlight=False, markup=False)

    def info(self, text: str) -> None:
        self.message(text, style="cyan")

    def notice(self, text: str) -> None:
        self.message(text, style="yellow")

    def success(self, text: str) -> None:
        self.message(text, style="green")

    def error(self, text: str) -> None:
        self.message(text, style="red")

    def ask(self, prompt: str) -> str:
        """
        Read one token from the input source.

        Raises:
            EndOfInput: If the input is exhausted.
        """
        try:
            answer = self._reader(prompt)
        except (EOFError, StopIteration) as e:
            raise EndOfInput() from e
        return answer.strip()
