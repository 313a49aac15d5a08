from collections import deque
from typing import Deque, List, Set

from maze_arena.grid import neighbors
from maze_arena.models import Algorithm, Maze, Position
from .base import PathfindingAlgorithm, Trace
from .nodes import NodeArena


class BreadthFirstSearch(PathfindingAlgorithm):
    """FIFO search. Positions are marked seen when enqueued, so none is queued twice."""

    key = Algorithm.BFS
    display_name = "BFS"
    description = "Breadth-First Search - explores level by level"

    def _search(self, maze: Maze, start: Position, end: Position) -> Trace:
        arena = NodeArena()
        visited: List[Position] = []
        seen: Set[Position] = {start}
        queue: Deque[int] = deque([arena.add(start, 0)])

        while queue:
            current = queue.popleft()
            node = arena[current]
            visited.append(node.position)

            if node.position == end:
                return arena.path_to(current), visited

            for neighbor in neighbors(node.position, maze):
                if neighbor not in seen:
                    seen.add(neighbor)
                    queue.append(arena.add(neighbor, node.g + 1, parent=current))

        return [], visited
