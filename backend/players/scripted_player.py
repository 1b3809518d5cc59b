"""
Scripted player - replays a fixed sequence of moves.
"""

import re
from typing import Iterable, List

from domain.board import Board
from domain.constants import Direction, DOWN, LEFT, NONE, RIGHT, UP
from .base import Player

MOVE_ALIASES = {
    "L": LEFT, "LEFT": LEFT,
    "R": RIGHT, "RIGHT": RIGHT,
    "U": UP, "UP": UP,
    "D": DOWN, "DOWN": DOWN,
    "N": NONE, "NONE": NONE, "-": NONE, ".": NONE,
}


def parse_moves(text: str) -> List[Direction]:
    """
    Turn a move script such as "R,R,D" or "right down none" into directions.

    Raises:
        ValueError: a token is not a known move
    """
    moves = []
    for token in re.split(r"[\s,]+", text.strip()):
        if not token:
            continue
        key = token.upper()
        if key not in MOVE_ALIASES:
            known = ", ".join(sorted(MOVE_ALIASES))
            raise ValueError(f"Unknown move '{token}'. Known moves: {known}")
        moves.append(MOVE_ALIASES[key])
    return moves


class ScriptedPlayer(Player):
    """Returns the scripted moves in order, then NONE forever."""

    name = "scripted"

    def __init__(self, moves: Iterable[Direction] = ()):
        self.moves = [tuple(move) for move in moves]
        self.position = 0

    @property
    def exhausted(self) -> bool:
        return self.position >= len(self.moves)

    def get_move(self, board: Board) -> Direction:
        if self.exhausted:
            return NONE
        move = self.moves[self.position]
        self.position += 1
        return move

    def reset(self) -> None:
        self.position = 0
