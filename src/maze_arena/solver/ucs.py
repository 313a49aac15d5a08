from typing import List, Set

from maze_arena.grid import neighbors
from maze_arena.models import Algorithm, Maze, Position
from .base import PathfindingAlgorithm, Trace
from .nodes import NodeArena


class UniformCostSearch(PathfindingAlgorithm):
    """
    Cheapest-first search keyed on path cost g.

    With unit step costs this expands cells in the same layers as BFS, but the
    ordering goes through cost comparison, with the same stable re-sort and
    in-place replacement as A*. Closed positions are skipped at pop time and
    do not appear in the visited trace.
    """

    key = Algorithm.UCS
    display_name = "UCS"
    description = "Uniform Cost Search - finds lowest cost path"

    def _search(self, maze: Maze, start: Position, end: Position) -> Trace:
        arena = NodeArena()
        visited: List[Position] = []
        closed: Set[Position] = set()
        open_set: List[int] = [arena.add(start, 0)]

        while open_set:
            open_set.sort(key=lambda handle: arena[handle].g)
            current = open_set.pop(0)
            node = arena[current]

            if node.position in closed:
                continue
            closed.add(node.position)
            visited.append(node.position)

            if node.position == end:
                return arena.path_to(current), visited

            for neighbor in neighbors(node.position, maze):
                if neighbor in closed:
                    continue

                g = node.g + 1
                existing = arena.find_in(open_set, neighbor)
                if existing is not None:
                    if g < arena[open_set[existing]].g:
                        open_set[existing] = arena.add(neighbor, g, parent=current)
                else:
                    open_set.append(arena.add(neighbor, g, parent=current))

        return [], visited
