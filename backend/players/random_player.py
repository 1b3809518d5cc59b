"""
Random player implementation - picks one of the four directions.
"""

import random
from typing import Optional

from domain.board import Board
from domain.constants import Direction, UP, DOWN, LEFT, RIGHT
from .base import Player

MOVE_ORDER = (LEFT, RIGHT, UP, DOWN)


class RandomPlayer(Player):
    """
    Picks a direction uniformly at random from its own seeded generator.

    There is no lookahead: reversals are simply ignored by the board and
    crashes end the game. Two players built with the same seed produce the
    same move sequence.
    """

    name = "random"

    def __init__(self, seed: Optional[int] = None):
        self.seed = seed
        self.rng = random.Random(seed)

    def get_move(self, board: Board) -> Direction:
        return self.rng.choice(MOVE_ORDER)

    def reset(self) -> None:
        self.rng = random.Random(self.seed)
