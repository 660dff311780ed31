"""Command schemas for validating console input tokens."""

from enum import IntEnum
from typing import Optional

from pydantic import BaseModel, Field, ValidationError, field_validator

from maze_game.core.maze_grid import Direction, MazeError


class InvalidCommandError(MazeError):
    """User input that does not match any accepted command."""

    pass


class MenuOption(IntEnum):
    """Main menu entries."""

    PLAY_MANUAL = 1
    POSSIBLE_PATHS = 2
    SHORTEST_PATH = 3
    EXIT = 4


KEY_DIRECTIONS = {
    "w": Direction.UP,
    "s": Direction.DOWN,
    "a": Direction.LEFT,
    "d": Direction.RIGHT,
}
QUIT_KEY = "q"


class MenuSelection(BaseModel):
    """Schema for a main menu selection."""

    choice: int = Field(..., ge=1, le=4)


class MoveCommand(BaseModel):
    """Schema for one manual-play keystroke (w/a/s/d or q)."""

    key: str = Field(..., pattern="^[wasdqWASDQ]$")

    @field_validator("key")
    @classmethod
    def normalize_key(cls, v: str) -> str:
        return v.lower()

    @property
    def is_quit(self) -> bool:
        return self.key == QUIT_KEY

    @property
    def direction(self) -> Optional[Direction]:
        return KEY_DIRECTIONS.get(self.key)


class ContinuePrompt(BaseModel):
    """Schema for the yes/no prompt between possible paths."""

    answer: str = Field(..., pattern="^([yY]([eE][sS])?|[nN][oO]?)$")

    @property
    def wants_more(self) -> bool:
        return self.answer.lower() in ("y", "yes")


class AfterModeSelection(BaseModel):
    """Schema for the return-to-menu prompt (1 = menu, 2 = exit)."""

    choice: int

    @property
    def return_to_menu(self) -> bool:
        return self.choice == 1


def parse_menu_choice(raw: str) -> MenuOption:
    """
    Parse a main menu token.

    Raises:
        InvalidCommandError: If the token is not one of the menu numbers.
    """
    try:
        return MenuOption(MenuSelection(choice=raw.strip()).choice)
    except ValidationError as e:
        raise InvalidCommandError("Invalid option!") from e


def parse_move_command(raw: str) -> MoveCommand:
    """
    Parse a manual-play token.

    Raises:
        InvalidCommandError: If the token is not w, a, s, d or q.
    """
    try:
        return MoveCommand(key=raw.strip())
    except ValidationError as e:
        raise InvalidCommandError("Invalid movement! Use w, a, s, d or q to quit.") from e


def parse_continue_answer(raw: str) -> bool:
    """True only for an explicit yes; anything else stops."""
    try:
        return ContinuePrompt(answer=raw.strip()).wants_more
    except ValidationError:
        return False


def parse_after_mode_choice(raw: str) -> bool:
    """True to return to the menu; any other answer exits."""
    try:
        return AfterModeSelection(choice=raw.strip()).return_to_menu
    except ValidationError:
        return False
