"""
Plain-text maze layouts for the command line.

    #########
    #S..#...#
    #.#.#.#.#
    #.#...#E#
    #########

'#' is a wall, '.' or ' ' is floor, 'S' and 'E' mark start and end on floor.
"""

from pathlib import Path
from typing import List, Optional, Union

from pydantic import BaseModel, ConfigDict

from maze_arena.exceptions import InvalidMazeError
from maze_arena.models import Maze, MazeCell, Position

WALL = "#"
FLOOR = {".", " "}
START = "S"
END = "E"


class MazeLayout(BaseModel):
    """A maze together with the start and end markers found in its text."""
    model_config = ConfigDict(frozen=True)

    maze: Maze
    start: Optional[Position] = None
    end: Optional[Position] = None


def _strip_blank_edges(lines: List[str]) -> List[str]:
    while lines and not lines[0].strip():
        lines.pop(0)
    while lines and not lines[-1].strip():
        lines.pop()
    return lines


def parse_maze_text(text: str) -> MazeLayout:
    """
    Parse a text maze.

    Raises:
        InvalidMazeError: If the text is empty or ragged, contains an unknown
            character, or repeats a start/end marker
    """
    lines = _strip_blank_edges(text.splitlines())
    if not lines:
        raise InvalidMazeError("Maze text is empty.")

    width = len(lines[0])
    rows: List[List[MazeCell]] = []
    start: Optional[Position] = None
    end: Optional[Position] = None

    for z, line in enumerate(lines):
        if len(line) != width:
            raise InvalidMazeError(f"Line {z + 1} has {len(line)} columns, expected {width}.")
        row: List[MazeCell] = []
        for x, char in enumerate(line):
            if char == WALL:
                row.append(MazeCell(is_wall=True))
                continue
            if char == START:
                if start is not None:
                    raise InvalidMazeError(f"Second start marker at line {z + 1}, column {x + 1}.")
                start = Position(x=x, z=z)
            elif char == END:
                if end is not None:
                    raise InvalidMazeError(f"Second end marker at line {z + 1}, column {x + 1}.")
                end = Position(x=x, z=z)
            elif char not in FLOOR:
                raise InvalidMazeError(f"Unknown character '{char}' at line {z + 1}, column {x + 1}.")
            row.append(MazeCell(is_wall=False))
        rows.append(row)

    return MazeLayout(maze=Maze(cells=rows), start=start, end=end)


def load_maze_file(path: Union[str, Path]) -> MazeLayout:
    """Read and parse a text maze file."""
    maze_path = Path(path)
    try:
        text = maze_path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise InvalidMazeError(f"Could not read maze file {maze_path}: {e}") from e
    return parse_maze_text(text)
