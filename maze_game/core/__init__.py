# Core module
from .maze_grid import (
    CapacityExceededError,
    Direction,
    MazeError,
    MazeFormatError,
    MazeGrid,
    MazeParseError,
    MazeValidationError,
    MissingMarkerError,
    Position,
    is_passable,
    load_maze_file,
    parse_maze_lines,
    parse_maze_text,
    validate_maze_text,
)
from .maze_search import (
    NoPathFoundError,
    SearchResult,
    find_random_path,
    find_shortest_path,
    iter_random_paths,
)
from .maze_session import ManualSession, MoveResult

__all__ = [
    "CapacityExceededError",
    "Direction",
    "MazeError",
    "MazeFormatError",
    "MazeGrid",
    "MazeParseError",
    "MazeValidationError",
    "MissingMarkerError",
    "Position",
    "is_passable",
    "load_maze_file",
    "parse_maze_lines",
    "parse_maze_text",
    "validate_maze_text",
    "NoPathFoundError",
    "SearchResult",
    "find_random_path",
    "find_shortest_path",
    "iter_random_paths",
    "ManualSession",
    "MoveResult",
]
