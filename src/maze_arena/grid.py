"""
Adjacency rule and helpers shared by every search algorithm.
"""

from typing import List, Tuple

from maze_arena.exceptions import InvalidPositionError
from maze_arena.models import Maze, Position

# North, south, west, east. Every algorithm relies on this order for its trace.
DIRECTIONS: Tuple[Tuple[int, int], ...] = (
    (0, -1),
    (0, 1),
    (-1, 0),
    (1, 0),
)


def neighbors(position: Position, maze: Maze) -> List[Position]:
    """Return the in-bounds, non-wall cells one unit step away from position."""
    result: List[Position] = []
    for dx, dz in DIRECTIONS:
        x = position.x + dx
        z = position.z + dz
        if 0 <= z < maze.height and 0 <= x < maze.width and not maze.cells[z][x].is_wall:
            result.append(Position(x=x, z=z))
    return result


def manhattan(a: Position, b: Position) -> int:
    return abs(a.x - b.x) + abs(a.z - b.z)


def validate_endpoints(maze: Maze, start: Position, end: Position) -> None:
    """
    Check that start and end are usable before a search runs.

    Raises:
        InvalidPositionError: If either position is out of bounds or on a wall
    """
    for label, pos in (("Start", start), ("End", end)):
        if not maze.in_bounds(pos):
            raise InvalidPositionError(
                f"{label} position {pos} is outside the {maze.width}x{maze.height} maze."
            )
        if maze.is_wall(pos):
            raise InvalidPositionError(f"{label} position {pos} is on a wall.")
