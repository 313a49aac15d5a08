import logging
from typing import List, Optional, Set, Tuple

from maze_arena.grid import neighbors
from maze_arena.models import Algorithm, Maze, Position
from .base import PathfindingAlgorithm, Trace
from .nodes import NodeArena

logger = logging.getLogger(__name__)


class IterativeDeepeningSearch(PathfindingAlgorithm):
    """
    Depth-limited DFS repeated for limits 0, 1, 2, ... up to width * height.

    Every pass restarts from the start cell, and every expansion of every pass
    is appended to one running visited trace, so the explored count is much
    larger than for the other algorithms. Each branch carries its own copy of
    the cells above it: siblings never block one another within a pass.
    """

    key = Algorithm.IDS
    display_name = "IDS"
    description = "Iterative Deepening Search - combines DFS and BFS"

    def _search(self, maze: Maze, start: Position, end: Position) -> Trace:
        visited: List[Position] = []
        max_depth = maze.width * maze.height

        for depth_limit in range(max_depth + 1):
            arena = NodeArena()
            goal = self._depth_limited(maze, end, arena, arena.add(start, 0), depth_limit, visited)
            if goal is not None:
                logger.debug(f"IDS reached goal at depth limit {depth_limit}")
                return arena.path_to(goal), visited

        return [], visited

    def _depth_limited(
        self,
        maze: Maze,
        end: Position,
        arena: NodeArena,
        root: int,
        depth_limit: int,
        visited: List[Position],
    ) -> Optional[int]:
        """
        One depth-limited pass in recursive pre-order, driven by an explicit stack.

        Returns the handle of the goal node, or None if the pass did not reach it.
        """
        # (node handle, remaining depth, positions on the branch above the node)
        stack: List[Tuple[int, int, Set[Position]]] = [(root, depth_limit, set())]

        while stack:
            handle, remaining, ancestors = stack.pop()
            node = arena[handle]
            visited.append(node.position)

            if node.position == end:
                return handle
            if remaining <= 0:
                continue

            branch = set(ancestors)
            branch.add(node.position)

            children = [
                arena.add(neighbor, node.g + 1, parent=handle)
                for neighbor in neighbors(node.position, maze)
                if neighbor not in branch
            ]
            # Reversed so the first neighbor is expanded first
            for child in reversed(children):
                stack.append((child, remaining - 1, branch))

        return None
