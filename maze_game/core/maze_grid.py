"""
Maze grid loading and validation.

Loads a maze from a text file into an immutable grid.

Maze Format:
    S = Start position (exactly one)
    E = Exit (exactly one)
    # = Wall (impassable)
    anything else = Open passage (space, '.', '*', ...)

All non-empty rows must have the same length.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Iterable, Optional

logger = logging.getLogger(__name__)

WALL = "#"
START = "S"
EXIT = "E"

DEFAULT_MAX_ROWS = 105
DEFAULT_MAX_COLS = 105


class MazeError(Exception):
    """Base exception for all maze errors."""

    pass


class MazeParseError(MazeError):
    """Exception raised when the maze text is malformed (ragged or empty)."""

    pass


class MazeFormatError(MazeParseError):
    """Exception raised when the rows are ragged, empty or not decodable."""

    pass


class MazeValidationError(MazeError):
    """Exception raised when a well-formed maze is semantically invalid."""

    pass


class MissingMarkerError(MazeValidationError):
    """The maze has no start (S) or no exit (E)."""

    pass


class CapacityExceededError(MazeValidationError):
    """The maze has more rows or columns than allowed."""

    pass


class Direction(Enum):
    """Movement directions."""
    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"

    @property
    def delta(self) -> tuple[int, int]:
        """Get (d_row, d_col) for this direction."""
        deltas = {
            Direction.UP: (-1, 0),
            Direction.DOWN: (1, 0),
            Direction.LEFT: (0, -1),
            Direction.RIGHT: (0, 1),
        }
        return deltas[self]

    @classmethod
    def search_order(cls) -> tuple["Direction", ...]:
        """Fixed neighbour order used by breadth-first search."""
        return (cls.UP, cls.DOWN, cls.LEFT, cls.RIGHT)


@dataclass(frozen=True)
class Position:
    """(row, col) position in the maze."""
    row: int
    col: int

    def move(self, direction: Direction) -> "Position":
        """Return new position after moving in direction."""
        d_row, d_col = direction.delta
        return Position(self.row + d_row, self.col + d_col)

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return {"row": self.row, "col": self.col}


@dataclass(frozen=True)
class MazeGrid:
    """Validated, immutable maze grid."""

    name: str
    cells: tuple[str, ...]
    start: Position
    exit: Position

    @property
    def height(self) -> int:
        return len(self.cells)

    @property
    def width(self) -> int:
        return len(self.cells[0]) if self.cells else 0

    def in_bounds(self, pos: Position) -> bool:
        return 0 <= pos.row < self.height and 0 <= pos.col < self.width

    def cell(self, pos: Position) -> str:
        """Get the character at pos. Out of bounds reads as a wall."""
        if not self.in_bounds(pos):
            return WALL
        return self.cells[pos.row][pos.col]

    def marked(self, positions: Iterable[Position], symbol: str) -> list[str]:
        """
        Return a disposable copy of the rows with symbol placed at positions.

        Start and exit markers are never overwritten and the grid itself is
        left untouched.
        """
        rows = [list(row) for row in self.cells]
        for pos in positions:
            if not self.in_bounds(pos):
                continue
            if rows[pos.row][pos.col] in (START, EXIT):
                continue
            rows[pos.row][pos.col] = symbol
        return ["".join(row) for row in rows]

    def to_text(self) -> str:
        return "\n".join(self.cells)


def is_passable(grid: MazeGrid, pos: Position) -> bool:
    """True if pos is inside the grid and not a wall."""
    if not grid.in_bounds(pos):
        return False
    return grid.cells[pos.row][pos.col] != WALL


def parse_maze_lines(
    lines: Iterable[str],
    name: str = "Unnamed",
    max_rows: int = DEFAULT_MAX_ROWS,
    max_cols: int = DEFAULT_MAX_COLS,
    strict_markers: bool = False,
) -> MazeGrid:
    """
    Parse maze rows into a validated grid.

    Args:
        lines: Raw lines, with or without trailing line terminators.
        name: Name of the maze.
        max_rows: Maximum number of rows accepted.
        max_cols: Maximum number of columns accepted.
        strict_markers: Reject duplicate S/E instead of keeping the last one.

    Returns:
        MazeGrid with its start and exit located.

    Raises:
        MazeFormatError: If the rows are empty or not all the same length.
        CapacityExceededError: If the maze is larger than allowed.
        MissingMarkerError: If the start or exit is absent.
        MazeValidationError: If strict_markers is set and a marker repeats.
    """
    rows: list[str] = []
    width: Optional[int] = None

    for line in lines:
        row = line.rstrip("\r\n")
        if not row:
            continue

        if width is None:
            width = len(row)
            if width > max_cols:
                raise CapacityExceededError(
                    f"Maze has {width} columns, the maximum is {max_cols}"
                )
        elif len(row) != width:
            raise MazeFormatError(
                f"All rows must have the same length: row {len(rows) + 1} has "
                f"{len(row)} characters, expected {width}"
            )

        rows.append(row)
        if len(rows) > max_rows:
            raise CapacityExceededError(
                f"Maze has more than {max_rows} rows"
            )

    if not rows:
        raise MazeFormatError("Maze is empty")

    # Find start and exit positions; the last one seen wins unless strict
    start_pos: Optional[Position] = None
    exit_pos: Optional[Position] = None

    for r, row in enumerate(rows):
        for c, char in enumerate(row):
            if char == START:
                if strict_markers and start_pos is not None:
                    raise MazeValidationError(
                        f"Multiple start positions found: "
                        f"first at {start_pos.to_dict()}, second at {Position(r, c).to_dict()}"
                    )
                start_pos = Position(r, c)
            elif char == EXIT:
                if strict_markers and exit_pos is not None:
                    raise MazeValidationError(
                        f"Multiple exit positions found: "
                        f"first at {exit_pos.to_dict()}, second at {Position(r, c).to_dict()}"
                    )
                exit_pos = Position(r, c)

    if start_pos is None:
        raise MissingMarkerError("Maze must have a start position (S)")

    if exit_pos is None:
        raise MissingMarkerError("Maze must have an exit position (E)")

    return MazeGrid(name=name, cells=tuple(rows), start=start_pos, exit=exit_pos)


def parse_maze_text(maze_text: str, name: str = "Unnamed", **limits) -> MazeGrid:
    """Parse a multi-line maze string. See parse_maze_lines for arguments."""
    return parse_maze_lines(maze_text.splitlines(), name=name, **limits)


def load_maze_file(
    file_path: Path | str,
    name: Optional[str] = None,
    max_rows: int = DEFAULT_MAX_ROWS,
    max_cols: int = DEFAULT_MAX_COLS,
    strict_markers: bool = False,
) -> MazeGrid:
    """
    Load and parse a maze file from the filesystem.

    Args:
        file_path: Path to the maze file.
        name: Optional name override. If not provided, uses filename.

    Returns:
        MazeGrid ready for searching or playing.

    Raises:
        FileNotFoundError: If the file doesn't exist.
        OSError: If the file cannot be read.
        MazeFormatError: If the file is not UTF-8 text.
        MazeError: If the maze is malformed or invalid.
    """
    file_path = Path(file_path)

    if name is None:
        name = file_path.stem.replace("_", " ").replace("-", " ").title()

    try:
        with file_path.open("r", encoding="utf-8") as f:
            grid = parse_maze_lines(
                f,
                name=name,
                max_rows=max_rows,
                max_cols=max_cols,
                strict_markers=strict_markers,
            )
    except UnicodeDecodeError as e:
        raise MazeFormatError(f"Maze file is not valid UTF-8 text: {e}") from e

    logger.info(
        f"Loaded maze '{grid.name}' ({grid.height}x{grid.width}) from {file_path}"
    )
    return grid


def validate_maze_text(maze_text: str, **limits) -> tuple[bool, Optional[str]]:
    """
    Validate maze text without raising exceptions.

    Returns:
        Tuple of (is_valid, error_message).
        error_message is None if valid.
    """
    try:
        parse_maze_text(maze_text, **limits)
        return True, None
    except MazeError as e:
        return False, str(e)
