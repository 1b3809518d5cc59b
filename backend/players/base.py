"""
Base player interface for the game engine.
"""

from domain.board import Board
from domain.constants import Direction


class Player:
    """
    Base class/interface for direction sources.

    The host asks the player for exactly one direction per tick, given the
    board the tick will be applied to.
    """

    name = "player"

    def get_move(self, board: Board) -> Direction:
        """
        Return a move direction given the current board.

        Args:
            board: Current state of the game

        Returns:
            One of LEFT, RIGHT, UP, DOWN or NONE (keep going)
        """
        raise NotImplementedError

    def reset(self) -> None:
        """Forget any pending input; called when the game restarts."""
