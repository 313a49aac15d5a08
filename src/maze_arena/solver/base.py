import logging
import time
from abc import ABC, abstractmethod
from typing import List, Tuple

from maze_arena.grid import validate_endpoints
from maze_arena.models import Algorithm, Maze, Position, SearchResult

logger = logging.getLogger(__name__)

# (path, visited) as produced by a search procedure
Trace = Tuple[List[Position], List[Position]]


class PathfindingAlgorithm(ABC):
    """
    Abstract base class for all grid search algorithms.

    Subclasses implement `_search`, which explores the maze and returns the
    path (empty when the end is unreachable) and the positions in the order
    they were expanded. `solve` wraps it with endpoint validation and timing.
    """

    key: Algorithm
    display_name: str
    description: str

    def solve(self, maze: Maze, start: Position, end: Position) -> SearchResult:
        """
        Run the search from start to end.

        Raises:
            InvalidPositionError: If start or end is out of bounds or on a wall
        """
        validate_endpoints(maze, start, end)

        start_time = time.perf_counter()
        path, visited = self._search(maze, start, end)
        solve_time_ms = (time.perf_counter() - start_time) * 1000

        result = SearchResult.from_trace(path, visited, solve_time_ms)
        logger.debug(
            f"{self.display_name} {start} -> {end}: "
            f"path length {result.stats.path_length}, "
            f"explored {result.stats.nodes_explored}, "
            f"{solve_time_ms:.3f}ms"
        )
        return result

    @abstractmethod
    def _search(self, maze: Maze, start: Position, end: Position) -> Trace:
        pass
