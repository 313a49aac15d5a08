"""
Errors raised for bad input to the maze engine and the command line.

Everything here derives from MazeArenaException, whose ``message`` is what
the CLI prints before exiting with code 2.
"""

class MazeArenaException(Exception):
    """Root of the maze_arena error tree."""
    def __init__(self, message: str):
        self.message = message
        super().__init__(self.message)

class InvalidMazeError(MazeArenaException):
    """The maze text or file could not be read as a grid."""

class InvalidPositionError(MazeArenaException):
    """A start or end cell lies outside the grid or on a wall."""

class UnknownAlgorithmError(MazeArenaException):
    """No search algorithm is registered under the given key."""
