from typing import List, Set

from maze_arena.grid import neighbors
from maze_arena.models import Algorithm, Maze, Position
from .base import PathfindingAlgorithm, Trace
from .nodes import NodeArena


class DepthFirstSearch(PathfindingAlgorithm):
    """
    LIFO search. A position is marked seen when popped, so the same position
    may sit on the stack more than once; later copies are skipped. The path
    found is valid but not necessarily the shortest.
    """

    key = Algorithm.DFS
    display_name = "DFS"
    description = "Depth-First Search - explores as far as possible first"

    def _search(self, maze: Maze, start: Position, end: Position) -> Trace:
        arena = NodeArena()
        visited: List[Position] = []
        seen: Set[Position] = set()
        stack: List[int] = [arena.add(start, 0)]

        while stack:
            current = stack.pop()
            node = arena[current]

            if node.position in seen:
                continue
            seen.add(node.position)
            visited.append(node.position)

            if node.position == end:
                return arena.path_to(current), visited

            for neighbor in neighbors(node.position, maze):
                if neighbor not in seen:
                    stack.append(arena.add(neighbor, node.g + 1, parent=current))

        return [], visited
