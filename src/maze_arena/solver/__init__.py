# Grid search algorithms and their registry

from typing import Any, Dict, List, Type, Union

from maze_arena.exceptions import UnknownAlgorithmError
from maze_arena.models import Algorithm, Maze, Position, SearchResult
from .base import PathfindingAlgorithm
from .astar import AStarSearch
from .bfs import BreadthFirstSearch
from .dfs import DepthFirstSearch
from .ucs import UniformCostSearch
from .ids import IterativeDeepeningSearch
from .nodes import NodeArena, SearchNode

ALGORITHMS: Dict[Algorithm, Type[PathfindingAlgorithm]] = {
    Algorithm.ASTAR: AStarSearch,
    Algorithm.BFS: BreadthFirstSearch,
    Algorithm.DFS: DepthFirstSearch,
    Algorithm.UCS: UniformCostSearch,
    Algorithm.IDS: IterativeDeepeningSearch,
}

# Short labels used in comparison tables
SHORT_NAMES: Dict[Algorithm, str] = {
    Algorithm.ASTAR: "A*",
    Algorithm.BFS: "BFS",
    Algorithm.DFS: "DFS",
    Algorithm.UCS: "UCS",
    Algorithm.IDS: "IDS",
}

def resolve_algorithm(key: Union[Algorithm, str]) -> Algorithm:
    """Turn an enum member or its string value into an Algorithm."""
    try:
        return Algorithm(key)
    except ValueError:
        available = [a.value for a in Algorithm]
        raise UnknownAlgorithmError(f"Algorithm '{key}' not found. Available: {available}") from None

def create_algorithm(key: Union[Algorithm, str]) -> PathfindingAlgorithm:
    """
    Create a search algorithm instance.

    Example:
        algo = create_algorithm("astar")
        result = algo.solve(maze, start, end)
    """
    return ALGORITHMS[resolve_algorithm(key)]()

def run_algorithm(algo: Union[Algorithm, str], maze: Maze, start: Position, end: Position) -> SearchResult:
    """Run one algorithm against the maze and return its result."""
    return create_algorithm(algo).solve(maze, start, end)

def get_algorithm_info(key: Union[Algorithm, str]) -> Dict[str, Any]:
    """Get display information for a specific algorithm."""
    algorithm = resolve_algorithm(key)
    algorithm_class = ALGORITHMS[algorithm]
    return {
        "key": algorithm.value,
        "display_name": algorithm_class.display_name,
        "short_name": SHORT_NAMES[algorithm],
        "description": algorithm_class.description,
    }

def list_algorithms() -> List[Dict[str, Any]]:
    """Display information for every registered algorithm, in menu order."""
    return [get_algorithm_info(algorithm) for algorithm in ALGORITHMS]

__all__ = [
    "PathfindingAlgorithm",
    "AStarSearch",
    "BreadthFirstSearch",
    "DepthFirstSearch",
    "UniformCostSearch",
    "IterativeDeepeningSearch",
    "NodeArena",
    "SearchNode",
    "ALGORITHMS",
    "SHORT_NAMES",
    "resolve_algorithm",
    "create_algorithm",
    "run_algorithm",
    "get_algorithm_info",
    "list_algorithms",
]
