"""
Domain entities for the funkysnake game engine.

This module contains the board state machine, which is independent of
presentation concerns (windows, input devices, frame timing, video).
"""

from .constants import (
    UP, DOWN, LEFT, RIGHT, NONE, VALID_MOVES, DIRECTIONS, DIRECTION_NAMES,
    RUNNING, GAME_OVER, DEFAULT_COLUMNS, DEFAULT_ROWS, INITIAL_DIRECTION, INITIAL_SNAKE,
)
from .errors import SnakeError, InvalidConfiguration, BoardFull
from .board import Board
from .snake import is_opposite, reconcile_direction, wrap, advance
from .rules import (
    FREE_CELLS, SAMPLE_RETRY, APPLE_STRATEGIES, SELF_COLLISION, BOARD_FILLED,
    initialize, place_apple, step, is_game_over, game_over_reason, game_status,
)

__all__ = [
    'UP', 'DOWN', 'LEFT', 'RIGHT', 'NONE', 'VALID_MOVES', 'DIRECTIONS', 'DIRECTION_NAMES',
    'RUNNING', 'GAME_OVER', 'DEFAULT_COLUMNS', 'DEFAULT_ROWS', 'INITIAL_DIRECTION', 'INITIAL_SNAKE',
    'SnakeError', 'InvalidConfiguration', 'BoardFull',
    'Board',
    'is_opposite', 'reconcile_direction', 'wrap', 'advance',
    'FREE_CELLS', 'SAMPLE_RETRY', 'APPLE_STRATEGIES', 'SELF_COLLISION', 'BOARD_FILLED',
    'initialize', 'place_apple', 'step', 'is_game_over', 'game_over_reason', 'game_status',
]
