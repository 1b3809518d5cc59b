"""
Keyboard player - turns key presses collected during a tick into a move.
"""

from typing import Optional

from domain.board import Board
from domain.constants import Direction, DOWN, LEFT, NONE, RIGHT, UP
from .base import Player

# Key names as reported by pygame.key.name()
KEY_BINDINGS = {
    # Arrow keys
    "left": LEFT,
    "right": RIGHT,
    "up": UP,
    "down": DOWN,
    # Vim keys
    "h": LEFT,
    "l": RIGHT,
    "k": UP,
    "j": DOWN,
    # WASD
    "a": LEFT,
    "d": RIGHT,
    "w": UP,
    "s": DOWN,
}


def direction_for_key(key_name: str) -> Optional[Direction]:
    """Return the direction bound to ``key_name``, or None for unbound keys."""
    return KEY_BINDINGS.get(key_name.lower())


class KeyboardPlayer(Player):
    """
    Collects key presses between two ticks.

    The most recent bound key wins. Unbound keys are ignored, so a stray key
    press never cancels a turn. The pending move is cleared once the tick
    consumes it.
    """

    name = "keyboard"

    def __init__(self):
        self.pending: Direction = NONE

    def press(self, key_name: str) -> bool:
        """Register a key press; return True if the key is bound to a direction."""
        direction = direction_for_key(key_name)
        if direction is None:
            return False
        self.pending = direction
        return True

    def get_move(self, board: Board) -> Direction:
        move, self.pending = self.pending, NONE
        return move

    def reset(self) -> None:
        self.pending = NONE
