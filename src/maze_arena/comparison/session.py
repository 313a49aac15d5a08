"""
ComparisonSession - runs several search algorithms on one maze and ranks them.

Selected algorithms run one after another, each on its own deep copy of the
maze, and the results are ranked by solve time (ascending, stable on ties).
"""

import logging
from enum import Enum
from typing import Callable, Dict, List, Optional, Union

from maze_arena.grid import validate_endpoints
from maze_arena.models import Algorithm, ComparisonResult, Maze, Position, SearchResult
from maze_arena.solver import resolve_algorithm, run_algorithm

logger = logging.getLogger(__name__)

AlgorithmRunner = Callable[[Algorithm, Maze, Position, Position], SearchResult]

MIN_ALGORITHMS = 2


class ComparisonState(str, Enum):
    IDLE = "idle"
    SELECTING = "selecting"
    COMPARING = "comparing"


class AlgorithmSelection:
    """Insertion-ordered set of selected algorithms."""

    def __init__(self):
        self._items: Dict[Algorithm, None] = {}

    def __contains__(self, algorithm: Algorithm) -> bool:
        return algorithm in self._items

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self):
        return iter(list(self._items))

    def add(self, algorithm: Algorithm) -> None:
        self._items.setdefault(algorithm, None)

    def remove(self, algorithm: Algorithm) -> None:
        self._items.pop(algorithm, None)

    def clear(self) -> None:
        self._items.clear()


class ComparisonSession:
    """Selection, execution and ranking state for one comparison view."""

    def __init__(self, runner: Optional[AlgorithmRunner] = None):
        """
        Args:
            runner: Callable executing one algorithm. Defaults to run_algorithm.
        """
        self._runner: AlgorithmRunner = runner or run_algorithm
        self._selection = AlgorithmSelection()
        self._results: List[ComparisonResult] = []
        self._is_comparing = False

    @property
    def selected_algorithms(self) -> List[Algorithm]:
        return list(self._selection)

    @property
    def results(self) -> List[ComparisonResult]:
        return list(self._results)

    @property
    def is_comparing(self) -> bool:
        return self._is_comparing

    @property
    def state(self) -> ComparisonState:
        if self._is_comparing:
            return ComparisonState.COMPARING
        if len(self._selection) > 0:
            return ComparisonState.SELECTING
        return ComparisonState.IDLE

    @property
    def can_compare(self) -> bool:
        return len(self._selection) >= MIN_ALGORITHMS

    def toggle_algorithm(self, algo: Union[Algorithm, str]) -> None:
        """Select the algorithm if it is not selected, deselect it otherwise."""
        algorithm = resolve_algorithm(algo)
        if algorithm in self._selection:
            self._selection.remove(algorithm)
            logger.debug(f"Deselected {algorithm.value}")
        else:
            self._selection.add(algorithm)
            logger.debug(f"Selected {algorithm.value}")

    def start_comparison(self, maze: Maze, start: Position, end: Position) -> List[ComparisonResult]:
        """
        Run every selected algorithm and rank the results by solve time.

        Does nothing and returns an empty list when fewer than two algorithms
        are selected.

        Raises:
            InvalidPositionError: If start or end is out of bounds or on a wall
        """
        if not self.can_compare:
            logger.debug(
                f"Comparison needs at least {MIN_ALGORITHMS} algorithms, "
                f"{len(self._selection)} selected"
            )
            return []

        validate_endpoints(maze, start, end)

        algorithms = self.selected_algorithms
        logger.info(f"Comparing {len(algorithms)} algorithms from {start} to {end}")
        self._is_comparing = True

        results: List[ComparisonResult] = []
        for algorithm in algorithms:
            maze_copy = maze.model_copy(deep=True)
            result = self._runner(algorithm, maze_copy, start, end)
            results.append(ComparisonResult.from_search_result(algorithm, result))

        results.sort(key=lambda r: r.stats.solve_time_ms)
        self._results = results

        fastest = self.fastest()
        logger.info(
            f"Comparison finished: fastest {fastest.algorithm.value} "
            f"({fastest.stats.solve_time_ms:.3f}ms)"
        )
        return self.results

    def clear_comparison(self) -> None:
        """Drop the selection and results and leave the comparing state."""
        self._selection.clear()
        self._results = []
        self._is_comparing = False

    def fastest(self) -> Optional[ComparisonResult]:
        """The top-ranked result, or None before a comparison has run."""
        return self._results[0] if self._results else None

    def most_efficient(self) -> Optional[ComparisonResult]:
        """The result with the shortest found path, earliest in ranking on ties."""
        best: Optional[ComparisonResult] = None
        for result in self._results:
            if result.stats.path_length == 0:
                continue
            if best is None or result.stats.path_length < best.stats.path_length:
                best = result
        return best
