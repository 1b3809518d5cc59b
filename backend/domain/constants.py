"""
Game constants for funkysnake.
"""

from typing import Tuple

Cell = Tuple[int, int]
Direction = Tuple[int, int]

# Movement directions (screen coordinates: y grows downward)
LEFT: Direction = (-1, 0)
RIGHT: Direction = (1, 0)
UP: Direction = (0, -1)
DOWN: Direction = (0, 1)
NONE: Direction = (0, 0)  # keep the current direction
VALID_MOVES = {LEFT, RIGHT, UP, DOWN}
DIRECTIONS = VALID_MOVES | {NONE}

DIRECTION_NAMES = {
    LEFT: "LEFT",
    RIGHT: "RIGHT",
    UP: "UP",
    DOWN: "DOWN",
    NONE: "NONE",
}

# Game states
RUNNING = "running"
GAME_OVER = "game_over"

# Default board (640x480 window split into 40px cells)
DEFAULT_COLUMNS = 16
DEFAULT_ROWS = 12
INITIAL_DIRECTION: Direction = RIGHT
INITIAL_SNAKE = ((0, 0),)
