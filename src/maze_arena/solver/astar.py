from typing import List, Set

from maze_arena.grid import manhattan, neighbors
from maze_arena.models import Algorithm, Maze, Position
from .base import PathfindingAlgorithm, Trace
from .nodes import NodeArena


class AStarSearch(PathfindingAlgorithm):
    """
    A* over the 4-connected grid with the Manhattan heuristic.

    The open set is a plain list that is stably re-sorted by f before each pop,
    so equal-f nodes leave in the order they were queued or replaced. A cheaper
    route to a queued position replaces that entry in place.
    """

    key = Algorithm.ASTAR
    display_name = "A* Search"
    description = "Uses heuristic to find optimal path efficiently"

    def _search(self, maze: Maze, start: Position, end: Position) -> Trace:
        arena = NodeArena()
        visited: List[Position] = []
        closed: Set[Position] = set()

        open_set: List[int] = [arena.add(start, 0, manhattan(start, end))]

        while open_set:
            open_set.sort(key=lambda handle: arena[handle].f)
            current = open_set.pop(0)
            node = arena[current]

            visited.append(node.position)
            if node.position == end:
                return arena.path_to(current), visited

            closed.add(node.position)

            for neighbor in neighbors(node.position, maze):
                if neighbor in closed:
                    continue

                g = node.g + 1
                h = manhattan(neighbor, end)

                existing = arena.find_in(open_set, neighbor)
                if existing is not None:
                    if g < arena[open_set[existing]].g:
                        open_set[existing] = arena.add(neighbor, g, h, current)
                else:
                    open_set.append(arena.add(neighbor, g, h, current))

        return [], visited
