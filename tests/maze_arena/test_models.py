"""
Data model tests: positions, maze validation and result invariants.
"""

import pytest
from pydantic import ValidationError

from maze_arena.models import (
    Algorithm,
    AlgorithmStats,
    ComparisonResult,
    Maze,
    MazeCell,
    Position,
    SearchResult,
)


@pytest.mark.unit
class TestPosition:

    def test_key_encoding(self):
        assert Position(x=3, z=4).key == "3,4"

    def test_from_key_roundtrip(self):
        assert Position.from_key("3,4") == Position(x=3, z=4)
        assert Position.from_key(" 10 , 2 ") == Position(x=10, z=2)

    @pytest.mark.parametrize("bad", ["3", "3,4,5", "a,b", ""])
    def test_from_key_rejects_malformed(self, bad: str):
        with pytest.raises(ValueError):
            Position.from_key(bad)

    def test_structural_equality_and_hashing(self):
        a = Position(x=1, z=2)
        b = Position(x=1, z=2)
        assert a == b
        assert a is not b
        assert len({a, b}) == 1
        assert {a: "seen"}[b] == "seen"

    def test_immutable(self):
        pos = Position(x=1, z=2)
        with pytest.raises(ValidationError):
            pos.x = 5


@pytest.mark.unit
class TestMaze:

    def test_from_rows_dimensions(self):
        maze = Maze.from_rows([[0, 1, 0], [0, 0, 0]])
        assert maze.width == 3
        assert maze.height == 2
        assert maze.is_wall(Position(x=1, z=0))
        assert not maze.is_wall(Position(x=1, z=1))

    def test_in_bounds(self):
        maze = Maze.from_rows([[0, 0, 0], [0, 0, 0]])
        assert maze.in_bounds(Position(x=2, z=1))
        assert not maze.in_bounds(Position(x=3, z=1))
        assert not maze.in_bounds(Position(x=0, z=2))
        assert not maze.in_bounds(Position(x=-1, z=0))

    def test_empty_grid_rejected(self):
        with pytest.raises(ValidationError, match="at least one cell"):
            Maze(cells=[])
        with pytest.raises(ValidationError, match="at least one cell"):
            Maze(cells=[[]])

    def test_ragged_grid_rejected(self):
        with pytest.raises(ValidationError, match="not rectangular"):
            Maze.from_rows([[0, 0, 0], [0, 0]])

    def test_cosmetic_attributes_are_kept(self):
        cell = MazeCell(is_wall=False, color="#ff0000")
        maze = Maze(cells=[[cell]])
        assert maze.cell(Position(x=0, z=0)).color == "#ff0000"

    def test_deep_copy_does_not_share_cells(self):
        maze = Maze.from_rows([[0, 1], [0, 0]])
        copy = maze.model_copy(deep=True)
        assert copy == maze
        assert copy.cells[0][0] is not maze.cells[0][0]
        copy.cells[0][0].is_wall = True
        assert not maze.cells[0][0].is_wall


@pytest.mark.unit
class TestSearchResult:

    def test_from_trace_fills_stats(self):
        path = [Position(x=0, z=0), Position(x=1, z=0)]
        visited = [Position(x=0, z=0), Position(x=0, z=1), Position(x=1, z=0)]
        result = SearchResult.from_trace(path, visited, 1.5)

        assert result.stats.nodes_explored == 3
        assert result.stats.path_length == 2
        assert result.stats.solve_time_ms == 1.5
        assert result.found

    def test_unreachable_result(self):
        result = SearchResult.from_trace([], [Position(x=0, z=0)], 0.1)
        assert result.stats.path_length == 0
        assert not result.found

    def test_mismatched_stats_rejected(self):
        with pytest.raises(ValidationError, match="nodes_explored"):
            SearchResult(
                path=[],
                visited=[Position(x=0, z=0)],
                stats=AlgorithmStats(solve_time_ms=0.0, nodes_explored=2, path_length=0),
            )

    def test_negative_time_rejected(self):
        with pytest.raises(ValidationError):
            AlgorithmStats(solve_time_ms=-1.0, nodes_explored=0, path_length=0)

    def test_camel_case_dump(self):
        result = SearchResult.from_trace([Position(x=0, z=0)], [Position(x=0, z=0)], 0.25)
        dumped = result.model_dump(mode="json", by_alias=True)

        assert dumped["stats"] == {"solveTimeMs": 0.25, "nodesExplored": 1, "pathLength": 1}
        assert dumped["path"] == [{"x": 0, "z": 0}]
        assert dumped["visited"] == [{"x": 0, "z": 0}]

    def test_comparison_result_copies_fields(self):
        result = SearchResult.from_trace([Position(x=0, z=0)], [Position(x=0, z=0)], 0.25)
        comparison = ComparisonResult.from_search_result(Algorithm.BFS, result)

        assert comparison.algorithm == Algorithm.BFS
        assert comparison.stats == result.stats
        assert comparison.path == result.path
        assert comparison.visited == result.visited
