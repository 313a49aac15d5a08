"""
Algorithm registry tests.
"""

import pytest

from maze_arena.exceptions import UnknownAlgorithmError
from maze_arena.models import Algorithm
from maze_arena.solver import (
    ALGORITHMS,
    AStarSearch,
    IterativeDeepeningSearch,
    PathfindingAlgorithm,
    create_algorithm,
    get_algorithm_info,
    list_algorithms,
    resolve_algorithm,
)


@pytest.mark.unit
class TestAlgorithmRegistry:

    def test_every_identifier_is_registered(self):
        assert set(ALGORITHMS) == set(Algorithm)
        for algorithm, algorithm_class in ALGORITHMS.items():
            assert algorithm_class.key == algorithm
            assert issubclass(algorithm_class, PathfindingAlgorithm)

    def test_create_from_string_and_enum(self):
        assert isinstance(create_algorithm("astar"), AStarSearch)
        assert isinstance(create_algorithm(Algorithm.IDS), IterativeDeepeningSearch)

    def test_resolve(self):
        assert resolve_algorithm("ucs") is Algorithm.UCS
        assert resolve_algorithm(Algorithm.DFS) is Algorithm.DFS

    def test_unknown_algorithm(self):
        with pytest.raises(UnknownAlgorithmError, match="Algorithm 'dijkstra' not found"):
            create_algorithm("dijkstra")

    def test_algorithm_info(self):
        info = get_algorithm_info("astar")
        assert info == {
            "key": "astar",
            "display_name": "A* Search",
            "short_name": "A*",
            "description": "Uses heuristic to find optimal path efficiently",
        }

    def test_list_algorithms_in_menu_order(self):
        keys = [info["key"] for info in list_algorithms()]
        assert keys == ["astar", "bfs", "dfs", "ucs", "ids"]
