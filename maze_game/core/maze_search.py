"""
Path finding over a MazeGrid.

- find_shortest_path: breadth-first search, exact shortest path
- find_random_path: randomized depth-first search with backtracking,
  one valid (not necessarily shortest) path per call
- iter_random_paths: repeated find_random_path calls up to a limit
"""

import logging
import random
from collections import deque
from dataclasses import dataclass
from typing import Iterator, Optional

from .maze_grid import Direction, MazeError, MazeGrid, Position, is_passable

logger = logging.getLogger(__name__)


class NoPathFoundError(MazeError):
    """The search space was exhausted without reaching the exit."""

    pass


@dataclass
class SearchResult:
    """A start-to-exit path plus how many cells the search touched."""

    path: list[Position]
    visited_count: int

    @property
    def length(self) -> int:
        """Number of steps (edges) in the path."""
        return len(self.path) - 1


def find_shortest_path(grid: MazeGrid) -> SearchResult:
    """
    Compute the shortest start-to-exit path with breadth-first search.

    Neighbours are expanded in the fixed order up, down, left, right and the
    search stops as soon as the exit is discovered.

    Raises:
        NoPathFoundError: If the exit is unreachable.
    """
    start, goal = grid.start, grid.exit
    parent: dict[Position, Optional[Position]] = {start: None}
    frontier: deque[Position] = deque([start])
    found = start == goal

    while frontier and not found:
        current = frontier.popleft()
        for direction in Direction.search_order():
            neighbor = current.move(direction)
            if not is_passable(grid, neighbor) or neighbor in parent:
                continue

            parent[neighbor] = current
            frontier.append(neighbor)

            if neighbor == goal:
                found = True
                break

    if not found:
        logger.info(f"No path from {start} to {goal} ({len(parent)} cells explored)")
        raise NoPathFoundError("No path exists!")

    path = []
    node: Optional[Position] = goal
    while node is not None:
        path.append(node)
        node = parent[node]
    path.reverse()

    result = SearchResult(path=path, visited_count=len(parent))
    logger.info(f"Shortest path found: {result.length} steps")
    return result


def _exit_reachable(grid: MazeGrid) -> bool:
    """Flood fill from the start; True once the exit is reached."""
    seen = {grid.start}
    frontier = deque([grid.start])
    while frontier:
        current = frontier.popleft()
        if current == grid.exit:
            return True
        for direction in Direction.search_order():
            neighbor = current.move(direction)
            if is_passable(grid, neighbor) and neighbor not in seen:
                seen.add(neighbor)
                frontier.append(neighbor)
    return False


def _shuffled_directions(rng: random.Random) -> list[Direction]:
    directions = list(Direction)
    rng.shuffle(directions)
    return directions


def find_random_path(grid: MazeGrid, rng: Optional[random.Random] = None) -> SearchResult:
    """
    Find one start-to-exit path by randomized depth-first search.

    Every call starts from a fresh visited set. At each cell the four
    directions are tried in a shuffled order; a cell whose neighbours are all
    exhausted is unmarked and dropped from the path before backtracking.

    The search keeps an explicit stack of remaining directions per path cell
    instead of recursing, so large grids stay within the recursion limit.
    An unreachable exit is detected by a flood fill first, since backtracking
    would otherwise walk every simple path of the start region.

    Raises:
        NoPathFoundError: If the exit is unreachable.
    """
    rng = rng or random.Random()
    start, goal = grid.start, grid.exit

    if not _exit_reachable(grid):
        logger.info(f"Exit {goal} unreachable from {start}")
        raise NoPathFoundError("No more paths found.")

    path = [start]
    if start == goal:
        return SearchResult(path=path, visited_count=1)

    visited = {start}
    touched = 1
    # remaining[i] holds the untried directions of path[i]
    remaining = [_shuffled_directions(rng)]

    while remaining:
        if not remaining[-1]:
            remaining.pop()
            visited.discard(path.pop())
            continue

        neighbor = path[-1].move(remaining[-1].pop(0))
        if not is_passable(grid, neighbor) or neighbor in visited:
            continue

        path.append(neighbor)
        touched += 1
        if neighbor == goal:
            return SearchResult(path=path, visited_count=touched)

        visited.add(neighbor)
        remaining.append(_shuffled_directions(rng))

    raise NoPathFoundError("No more paths found.")


def iter_random_paths(
    grid: MazeGrid,
    limit: int = 20,
    rng: Optional[random.Random] = None,
) -> Iterator[SearchResult]:
    """
    Yield up to limit randomized paths, one independent search each.

    Paths may repeat. The generator stops early only if the exit is
    unreachable, in which case NoPathFoundError propagates on the first pull.
    """
    rng = rng or random.Random()
    for count in range(1, limit + 1):
        result = find_random_path(grid, rng)
        logger.info(f"Random path #{count}: {result.length} steps")
        yield result
