"""
Domain errors raised by the board state machine.

Both errors are terminal for the current game: the host is expected to
start over with a fresh ``initialize`` call.
"""


class SnakeError(Exception):
    """Base class for board state machine errors."""


class InvalidConfiguration(SnakeError, ValueError):
    """The grid or initial snake handed to ``initialize`` is malformed."""


class BoardFull(SnakeError):
    """An apple was requested but every grid cell is occupied by the snake."""
