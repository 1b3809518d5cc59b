"""
Interactive funkysnake window.

The window shell owns everything tied to wall-clock time: it polls input and
redraws at the frame limit for the length of one tick window, then hands the
collected direction to the game session exactly once. The board state
machine never sees pygame.

Usage:
    python app.py
    python app.py --columns 20 --rows 15 --tick_ms 75 --seed 42

Keys:
    arrows / HJKL / WASD   steer
    r                      restart
    q / space / return     quit
"""

import argparse
import logging
import sys

import pygame

from config import GameConfig, LOG_FORMAT, load_config
from domain.board import Board
from main import SnakeGame
from players import KeyboardPlayer
from services.frame_renderer import ColorScheme, cell_color, cell_rect, hex_to_rgb

logger = logging.getLogger(__name__)

QUIT_KEYS = {"q", "space", "return", "escape"}
RESTART_KEYS = {"r"}


class WindowContext:
    """
    Window and event-loop state for one run of the app.

    Passed explicitly to the input and render helpers instead of living in
    module globals.
    """

    def __init__(self, config: GameConfig, surface=None, clock=None):
        self.config = config
        self.surface = surface
        self.clock = clock
        self.quit_requested = False
        self.restart_requested = False

    @classmethod
    def open(cls, config: GameConfig) -> "WindowContext":
        pygame.init()
        surface = pygame.display.set_mode(config.window_size)
        pygame.display.set_caption("funkysnake")
        return cls(config, surface=surface, clock=pygame.time.Clock())

    def close(self):
        pygame.quit()


def key_name(event) -> str:
    return pygame.key.name(event.key)


def poll_events(context: WindowContext, player: KeyboardPlayer, events=None):
    """
    Drain pending events into the context (quit/restart) and the player (moves).
    """
    if events is None:
        events = pygame.event.get()
    for event in events:
        if event.type == pygame.QUIT:
            context.quit_requested = True
        elif event.type == pygame.KEYDOWN:
            name = key_name(event)
            if name in QUIT_KEYS:
                context.quit_requested = True
            elif name in RESTART_KEYS:
                context.restart_requested = True
            elif not player.press(name):
                logger.debug(f"Ignoring unbound key '{name}'")


def draw_board(surface, board: Board, cell_size: int):
    """Draw one padded quad per cell, plus the apple quad on top of its cell."""
    surface.fill(hex_to_rgb(ColorScheme.BACKGROUND))
    for x, y in board.cells():
        rect = pygame.Rect(cell_rect(x, y, cell_size))
        pygame.draw.rect(surface, hex_to_rgb(cell_color(board, (x, y))), rect)
        if board.apple == (x, y):
            pygame.draw.rect(surface, hex_to_rgb(ColorScheme.APPLE), rect)


def on_tick(context: WindowContext, game: SnakeGame, player: KeyboardPlayer):
    """
    Tick boundary: restart if asked to or if the last tick ended the game,
    otherwise advance the board once with the collected move.
    """
    if context.restart_requested or game.game_over:
        if game.game_result:
            logger.info(f"Final result: {game.game_result}")
        context.restart_requested = False
        player.reset()
        game.restart(context.config.seed)
        logger.info(f"Restarted (restart #{game.restarts}, seed {game.seed})")
        return
    game.run_round(player.get_move(game.board))


def run(config: GameConfig):
    context = WindowContext.open(config)
    player = KeyboardPlayer()
    game = SnakeGame(config.columns, config.rows, seed=config.seed)
    logger.info(f"Playing on a {config.columns}x{config.rows} board with seed {game.seed}")

    try:
        while not context.quit_requested:
            window_start = pygame.time.get_ticks()
            while pygame.time.get_ticks() - window_start < config.tick_ms:
                poll_events(context, player)
                if context.quit_requested or context.restart_requested:
                    break
                draw_board(context.surface, game.board, config.cell_size)
                pygame.display.flip()
                context.clock.tick(config.framerate)
            if context.quit_requested:
                break
            on_tick(context, game, player)
    finally:
        context.close()


def main():
    parser = argparse.ArgumentParser(
        description='Play funkysnake in a window',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__
    )
    parser.add_argument('--columns', type=int, help='Number of grid columns')
    parser.add_argument('--rows', type=int, help='Number of grid rows')
    parser.add_argument('--cell_size', type=int, help='Cell size in pixels')
    parser.add_argument('--tick_ms', type=int, help='Milliseconds per tick')
    parser.add_argument('--seed', type=int, help='Apple seed (default: fresh every game)')
    args = parser.parse_args()

    config = load_config().with_overrides(
        columns=args.columns,
        rows=args.rows,
        cell_size=args.cell_size,
        tick_ms=args.tick_ms,
        seed=args.seed,
    )
    logging.basicConfig(level=config.log_level, format=LOG_FORMAT)

    try:
        run(config)
    except KeyboardInterrupt:
        logger.info("\nCancelled by user")
        sys.exit(1)
    except Exception as e:
        logger.error(f"Error: {e}", exc_info=True)
        sys.exit(1)


if __name__ == '__main__':
    main()
