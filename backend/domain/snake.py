"""
Snake movement helpers: direction reconciliation and toroidal wrapping.
"""

from typing import Sequence

from .constants import Cell, Direction, DIRECTIONS, NONE


def is_opposite(a: Direction, b: Direction) -> bool:
    """Return True if ``a`` is the additive inverse of ``b``."""
    return a[0] == -b[0] and a[1] == -b[1]


def reconcile_direction(current: Direction, requested: Direction) -> Direction:
    """
    Decide the direction for the next step.

    A zero input keeps the current direction, and so does an input that would
    reverse the snake into its own neck. Anything else replaces it.
    """
    if requested not in DIRECTIONS:
        raise ValueError(f"Unknown direction {requested!r}")
    if requested == NONE or is_opposite(requested, current):
        return current
    return requested


def wrap(cell: Cell, width: int, height: int) -> Cell:
    """Map a cell onto the grid, re-entering from the opposite edge."""
    x, y = cell
    return (x % width, y % height)


def advance(head: Cell, direction: Direction, width: int, height: int) -> Cell:
    """Return the cell the head moves to when travelling in ``direction``."""
    return wrap((head[0] + direction[0], head[1] + direction[1]), width, height)


def has_self_collision(snake: Sequence[Cell]) -> bool:
    """Return True if any body cell sits on the head."""
    head = snake[0]
    return any(cell == head for cell in snake[1:])
