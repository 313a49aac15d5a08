"""
Search node storage.

Nodes are kept in a flat arena and refer to their parent by integer handle, so
a run's whole search tree is dropped together with the arena.
"""

from dataclasses import dataclass
from typing import List, Optional

from maze_arena.models import Position

ROOT = -1


@dataclass
class SearchNode:
    position: Position
    g: int
    h: int = 0
    parent: int = ROOT

    @property
    def f(self) -> int:
        return self.g + self.h


class NodeArena:
    """Owns every SearchNode created during one algorithm run."""

    def __init__(self):
        self._nodes: List[SearchNode] = []

    def __len__(self) -> int:
        return len(self._nodes)

    def __getitem__(self, handle: int) -> SearchNode:
        return self._nodes[handle]

    def add(self, position: Position, g: int, h: int = 0, parent: int = ROOT) -> int:
        """Create a node and return its handle."""
        self._nodes.append(SearchNode(position=position, g=g, h=h, parent=parent))
        return len(self._nodes) - 1

    def path_to(self, handle: int) -> List[Position]:
        """Walk parent handles back to the root and return the path root-first."""
        path: List[Position] = []
        current = handle
        while current != ROOT:
            node = self._nodes[current]
            path.append(node.position)
            current = node.parent
        path.reverse()
        return path

    def find_in(self, frontier: List[int], position: Position) -> Optional[int]:
        """Index of the frontier entry holding position, or None (linear scan)."""
        for index, handle in enumerate(frontier):
            if self._nodes[handle].position == position:
                return index
        return None
