"""
Maze Arena - Pathfinding Engine

Grid search algorithms (A*, BFS, DFS, UCS, IDS) over a shared node model,
plus a harness that runs several of them on one maze and ranks them.
"""

from .models import (
    Algorithm,
    AlgorithmStats,
    ComparisonResult,
    Maze,
    MazeCell,
    Position,
    SearchResult,
)

__all__ = [
    'Algorithm',
    'AlgorithmStats',
    'ComparisonResult',
    'Maze',
    'MazeCell',
    'Position',
    'SearchResult',
]
