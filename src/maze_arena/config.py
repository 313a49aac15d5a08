import os
from typing import List
from pydantic import BaseModel, Field

from maze_arena.models import Algorithm

class MazeArenaConfig(BaseModel):
    """Configuration for the maze_arena engine and command line."""

    # Logging settings
    log_level: str = "WARNING"
    use_rich_logging: bool = True

    # Solver settings
    default_algorithm: Algorithm = Algorithm.ASTAR
    compare_algorithms: List[Algorithm] = Field(default_factory=lambda: list(Algorithm))

    # Display settings
    time_precision: int = Field(3, ge=0, description="Decimal places shown for solve times")

    @classmethod
    def from_env(cls) -> "MazeArenaConfig":
        """Create config from environment variables."""
        compare_raw = os.getenv("MAZE_ARENA_COMPARE_ALGORITHMS", ",".join(a.value for a in Algorithm))
        return cls(
            log_level=os.getenv("MAZE_ARENA_LOG_LEVEL", "WARNING"),
            use_rich_logging=os.getenv("MAZE_ARENA_RICH_LOGS", "true").lower() == "true",
            default_algorithm=os.getenv("MAZE_ARENA_DEFAULT_ALGORITHM", Algorithm.ASTAR.value),
            compare_algorithms=[a.strip() for a in compare_raw.split(",") if a.strip()],
            time_precision=int(os.getenv("MAZE_ARENA_TIME_PRECISION", "3")),
        )

# Global config instance
config = MazeArenaConfig.from_env()
