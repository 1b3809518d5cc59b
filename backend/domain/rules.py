"""
Board state machine: initialization, apple placement, stepping and the
game-over query.

Every function here is pure. A tick takes the previous Board plus an input
direction and returns a new Board; nothing is mutated in place, so any tick
can be replayed from (board, input) alone.
"""

import random
from typing import Iterable, Optional, Tuple

from .board import Board
from .constants import Cell, Direction, DIRECTIONS, GAME_OVER, RUNNING
from .errors import BoardFull, InvalidConfiguration
from .snake import advance, has_self_collision, reconcile_direction

# Apple placement strategies
FREE_CELLS = "free_cells"
SAMPLE_RETRY = "sample_retry"
APPLE_STRATEGIES = (FREE_CELLS, SAMPLE_RETRY)

# Game over reasons
SELF_COLLISION = "self"
BOARD_FILLED = "filled"


def initialize(
    grid_size: Tuple[int, int],
    initial_direction: Direction,
    initial_snake_cells: Iterable[Cell],
    random_seed: int,
    strategy: str = FREE_CELLS,
) -> Board:
    """
    Create the first Board of a game.

    Args:
        grid_size: (width, height) of the grid
        initial_direction: one of the five directions
        initial_snake_cells: snake cells, head first
        random_seed: seeds the first apple only; the seed counter starts at 0
        strategy: apple placement strategy used for the first apple

    Raises:
        InvalidConfiguration: empty snake, cell outside the grid, duplicate
            cells, bad grid size or unknown direction
        BoardFull: the snake already covers the whole grid
    """
    try:
        width, height = grid_size
    except (TypeError, ValueError):
        raise InvalidConfiguration(f"Grid size must be a (width, height) pair, got {grid_size!r}")
    if not _is_positive_int(width) or not _is_positive_int(height):
        raise InvalidConfiguration(f"Grid dimensions must be positive integers, got {grid_size!r}")

    direction = tuple(initial_direction)
    if direction not in DIRECTIONS:
        raise InvalidConfiguration(f"Unknown initial direction {initial_direction!r}")

    snake = tuple(tuple(cell) for cell in initial_snake_cells)
    if not snake:
        raise InvalidConfiguration("The initial snake needs at least one cell")
    for x, y in snake:
        if not (0 <= x < width and 0 <= y < height):
            raise InvalidConfiguration(f"Snake cell {(x, y)} is outside the {width}x{height} grid")
    if len(set(snake)) != len(snake):
        raise InvalidConfiguration(f"The initial snake overlaps itself: {list(snake)}")

    # The apple field is filled in by place_apple below
    board = Board(
        width=width,
        height=height,
        snake=snake,
        direction=direction,
        apple=snake[0],
        rng_seed=0,
    )
    return place_apple(board, random_seed, strategy=strategy)


def place_apple(board: Board, seed: int, strategy: str = FREE_CELLS) -> Board:
    """
    Return a copy of ``board`` with a new apple derived from ``seed``.

    FREE_CELLS enumerates the unoccupied cells (row-major) and picks one
    uniformly. SAMPLE_RETRY picks uniformly over the whole grid and retries
    with seed + 1, seed + 2, ... on a hit; after width * height misses it scans
    forward from the last sampled cell. Same board and seed always give the
    same apple.

    Raises:
        BoardFull: no cell is free
        ValueError: unknown strategy
    """
    if strategy == FREE_CELLS:
        apple = _free_cell_apple(board, seed)
    elif strategy == SAMPLE_RETRY:
        apple = _sampled_apple(board, seed)
    else:
        raise ValueError(f"Unknown apple strategy '{strategy}'. Available: {', '.join(APPLE_STRATEGIES)}")
    return board.evolve(apple=apple)


def _free_cell_apple(board: Board, seed: int) -> Cell:
    available_cells = board.free_cells()
    if not available_cells:
        raise BoardFull(f"No free cell left on the {board.width}x{board.height} grid")
    rng = random.Random(seed)
    return available_cells[rng.randrange(len(available_cells))]


def _sampled_apple(board: Board, seed: int) -> Cell:
    total = board.cell_count
    occupied = set(board.snake)
    if len(occupied) >= total:
        raise BoardFull(f"No free cell left on the {board.width}x{board.height} grid")

    index = 0
    for attempt in range(total):
        index = random.Random(seed + attempt).randrange(total)
        cell = (index % board.width, index // board.width)
        if cell not in occupied:
            return cell

    for offset in range(1, total):
        probe = (index + offset) % total
        cell = (probe % board.width, probe // board.width)
        if cell not in occupied:
            return cell
    # Unreachable: the occupancy check above guarantees a free cell
    raise BoardFull(f"No free cell left on the {board.width}x{board.height} grid")


def step(board: Board, input_direction: Direction, strategy: str = FREE_CELLS) -> Board:
    """
    Advance the game by one tick.

    If the head sits on the apple (it was eaten on the previous tick) the
    seed counter is bumped, the tail is doubled so the snake grows by one
    cell, and a new apple is placed before moving. The move itself never
    checks for collisions; ask ``is_game_over`` for that.

    Raises:
        BoardFull: the snake ate the last free cell's apple
        ValueError: ``input_direction`` is not one of the five directions
    """
    if board.head == board.apple:
        grown = board.evolve(
            rng_seed=board.rng_seed + 1,
            snake=board.snake + (board.tail,),
        )
        return step(place_apple(grown, grown.rng_seed, strategy=strategy), input_direction, strategy)

    direction = reconcile_direction(board.direction, tuple(input_direction))
    new_head = advance(board.head, direction, board.width, board.height)
    return board.evolve(
        direction=direction,
        snake=(new_head,) + board.snake[:-1],
    )


def is_game_over(board: Board) -> bool:
    """True on self-collision, or once the snake is one cell short of filling the grid."""
    return game_over_reason(board) is not None


def game_over_reason(board: Board) -> Optional[str]:
    """Return SELF_COLLISION, BOARD_FILLED or None while the game is running."""
    if has_self_collision(board.snake):
        return SELF_COLLISION
    if len(board.snake) + 1 == board.cell_count:
        return BOARD_FILLED
    return None


def game_status(board: Board) -> str:
    return GAME_OVER if is_game_over(board) else RUNNING


def _is_positive_int(value) -> bool:
    return isinstance(value, int) and not isinstance(value, bool) and value > 0
