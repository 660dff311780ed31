"""
Manual play state for a single maze run.

Tracks the player position and move count; rendering and input reading are
left to the caller.
"""

import logging
from dataclasses import dataclass
from typing import Literal, Optional

from .maze_grid import Direction, MazeGrid, Position, is_passable

logger = logging.getLogger(__name__)

PLAYER_MARKER = "^"


@dataclass
class MoveResult:
    """Result of a move action."""
    status: Literal["moved", "blocked", "completed"]
    position: Position
    moves: int
    message: Optional[str] = None


class ManualSession:
    """
    Step-by-step player movement over a grid.

    Example usage:
        session = ManualSession(grid)
        result = session.move(Direction.RIGHT)
        if result.status == "blocked":
            print(result.message)
    """

    def __init__(self, grid: MazeGrid):
        self.grid = grid
        self.position = grid.start
        self.moves = 0

    @property
    def completed(self) -> bool:
        return self.position == self.grid.exit

    def move(self, direction: Direction) -> MoveResult:
        """
        Move one cell in direction.

        Blocked moves leave the position unchanged and are not counted.

        Raises:
            RuntimeError: If the player already reached the exit.
        """
        if self.completed:
            raise RuntimeError("Session already completed")

        new_pos = self.position.move(direction)

        # Wall or edge - can't move
        if not is_passable(self.grid, new_pos):
            logger.debug(f"Blocked move {direction.value} at {self.position}")
            return MoveResult(
                status="blocked",
                position=self.position,
                moves=self.moves,
                message="Invalid movement! Cannot go through walls or out of bounds.",
            )

        self.position = new_pos
        self.moves += 1

        if self.completed:
            return MoveResult(
                status="completed",
                position=self.position,
                moves=self.moves,
                message="Congratulations! You reached the exit!",
            )

        return MoveResult(status="moved", position=self.position, moves=self.moves)

    def overlay(self) -> list[str]:
        """Rows of the grid with the player marker drawn in."""
        rows = [list(row) for row in self.grid.cells]
        rows[self.position.row][self.position.col] = PLAYER_MARKER
        return ["".join(row) for row in rows]
