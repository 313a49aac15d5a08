"""
Pytest configuration and shared fixtures for the pathfinding engine tests.
"""

import pytest
import logging
from collections import deque
from typing import List, Optional

from maze_arena.models import Maze, Position
from maze_arena.grid import neighbors

# Configure logging for tests
logging.basicConfig(level=logging.INFO)

@pytest.fixture
def open_maze() -> Maze:
    """5x5 grid without walls."""
    return Maze.from_rows([[0] * 5 for _ in range(5)])

@pytest.fixture
def snake_maze() -> Maze:
    """5x5 grid with a single corridor winding from (0,0) to (4,4)."""
    return Maze.from_rows([
        [0, 0, 0, 0, 0],
        [1, 1, 1, 1, 0],
        [0, 0, 0, 0, 0],
        [0, 1, 1, 1, 1],
        [0, 0, 0, 0, 0],
    ])

@pytest.fixture
def two_route_maze() -> Maze:
    """
    5x5 grid with a short route down the left edge (8 steps) and a long route
    across the top and through the middle (12 steps) from (0,0) to (4,4).
    """
    return Maze.from_rows([
        [0, 0, 0, 0, 0],
        [0, 1, 1, 1, 0],
        [0, 1, 0, 0, 0],
        [0, 1, 0, 1, 1],
        [0, 0, 0, 0, 0],
    ])

@pytest.fixture
def split_maze() -> Maze:
    """4x2 grid whose wall column cuts the 2x2 block on the left off from column 3."""
    return Maze.from_rows([
        [0, 0, 1, 0],
        [0, 0, 1, 0],
    ])

@pytest.fixture
def corner() -> Position:
    return Position(x=0, z=0)

@pytest.fixture
def far_corner() -> Position:
    return Position(x=4, z=4)


def _shortest_distance(maze: Maze, start: Position, end: Position) -> Optional[int]:
    """Reference step count between two cells, None if unreachable."""
    queue = deque([(start, 0)])
    seen = {start}
    while queue:
        pos, dist = queue.popleft()
        if pos == end:
            return dist
        for n in neighbors(pos, maze):
            if n not in seen:
                seen.add(n)
                queue.append((n, dist + 1))
    return None


def _assert_valid_path(maze: Maze, path: List[Position], start: Position, end: Position) -> None:
    """A path must run from start to end over adjacent floor cells without repeats."""
    assert path, "Path should not be empty"
    assert path[0] == start
    assert path[-1] == end
    assert len(set(path)) == len(path), "Path revisits a cell"
    for pos in path:
        assert maze.in_bounds(pos)
        assert not maze.is_wall(pos)
    for a, b in zip(path, path[1:]):
        assert abs(a.x - b.x) + abs(a.z - b.z) == 1, f"{a} and {b} are not adjacent"


@pytest.fixture
def shortest_distance():
    """Reference BFS step count, for checking optimal algorithms."""
    return _shortest_distance


@pytest.fixture
def assert_valid_path():
    """Path checker: start..end over adjacent floor cells, no repeats."""
    return _assert_valid_path
