from typing import Any, List, Sequence
from enum import Enum
from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

# --- Enums ---

class Algorithm(str, Enum):
    """Identifiers of the available search algorithms."""
    ASTAR = "astar"
    BFS = "bfs"
    DFS = "dfs"
    UCS = "ucs"
    IDS = "ids"

# --- Grid Models ---

class Position(BaseModel):
    """An integer cell coordinate on the maze grid."""
    model_config = ConfigDict(frozen=True)

    x: int = Field(..., description="Column index")
    z: int = Field(..., description="Row index")

    @property
    def key(self) -> str:
        """Canonical string encoding, e.g. '3,4'."""
        return f"{self.x},{self.z}"

    @classmethod
    def from_key(cls, key: str) -> "Position":
        """Parse the canonical 'x,z' encoding."""
        parts = key.split(",")
        if len(parts) != 2:
            raise ValueError(f"Position '{key}' is not in 'x,z' form.")
        try:
            return cls(x=int(parts[0].strip()), z=int(parts[1].strip()))
        except ValueError:
            raise ValueError(f"Position '{key}' must contain two integers.") from None

    def __str__(self) -> str:
        return f"({self.x}, {self.z})"

class MazeCell(BaseModel):
    """A single grid cell. Extra fields carry cosmetic data the engine ignores."""
    model_config = ConfigDict(extra="allow")

    is_wall: bool = Field(False, description="Whether the cell is impassable")

class Maze(BaseModel):
    """A rectangular grid of cells, indexed as cells[z][x]."""
    cells: List[List[MazeCell]] = Field(..., description="Row-major cell grid")

    @field_validator("cells")
    @classmethod
    def must_be_rectangular(cls, v: List[List[MazeCell]]):
        if not v or not v[0]:
            raise ValueError("Maze grid must contain at least one cell.")
        width = len(v[0])
        for z, row in enumerate(v):
            if len(row) != width:
                raise ValueError(f"Maze grid is not rectangular: row {z} has {len(row)} cells, expected {width}.")
        return v

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[Any]]) -> "Maze":
        """Build a maze from rows of wall flags (truthy means wall)."""
        return cls(cells=[[MazeCell(is_wall=bool(flag)) for flag in row] for row in rows])

    @property
    def width(self) -> int:
        return len(self.cells[0])

    @property
    def height(self) -> int:
        return len(self.cells)

    def in_bounds(self, pos: Position) -> bool:
        return 0 <= pos.x < self.width and 0 <= pos.z < self.height

    def cell(self, pos: Position) -> MazeCell:
        return self.cells[pos.z][pos.x]

    def is_wall(self, pos: Position) -> bool:
        return self.cells[pos.z][pos.x].is_wall

# --- Result Models ---

class AlgorithmStats(BaseModel):
    """Measured statistics of one algorithm run."""
    model_config = ConfigDict(frozen=True)

    solve_time_ms: float = Field(..., ge=0, serialization_alias="solveTimeMs", description="Wall time of the search in milliseconds")
    nodes_explored: int = Field(..., ge=0, serialization_alias="nodesExplored", description="Number of entries in the visited trace")
    path_length: int = Field(..., ge=0, serialization_alias="pathLength", description="Number of positions on the path, 0 if unreachable")

class SearchResult(BaseModel):
    """Output of a single algorithm run."""
    model_config = ConfigDict(frozen=True)

    path: List[Position] = Field(default_factory=list, description="Positions from start to end inclusive, empty if unreachable")
    visited: List[Position] = Field(default_factory=list, description="Positions in the order they were expanded")
    stats: AlgorithmStats

    @model_validator(mode="after")
    def stats_match_trace(self) -> "SearchResult":
        if self.stats.nodes_explored != len(self.visited):
            raise ValueError("nodes_explored must equal the number of visited positions.")
        if self.stats.path_length != len(self.path):
            raise ValueError("path_length must equal the number of path positions.")
        return self

    @classmethod
    def from_trace(cls, path: List[Position], visited: List[Position], solve_time_ms: float) -> "SearchResult":
        return cls(
            path=path,
            visited=visited,
            stats=AlgorithmStats(
                solve_time_ms=solve_time_ms,
                nodes_explored=len(visited),
                path_length=len(path),
            ),
        )

    @property
    def found(self) -> bool:
        """True when a path from start to end exists."""
        return bool(self.path)

class ComparisonResult(BaseModel):
    """One algorithm's outcome within a comparison run."""
    model_config = ConfigDict(frozen=True)

    algorithm: Algorithm
    stats: AlgorithmStats
    path: List[Position] = Field(default_factory=list)
    visited: List[Position] = Field(default_factory=list)

    @classmethod
    def from_search_result(cls, algorithm: Algorithm, result: SearchResult) -> "ComparisonResult":
        return cls(algorithm=algorithm, stats=result.stats, path=result.path, visited=result.visited)
