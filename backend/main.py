import argparse
import json
import logging
import uuid
from typing import Any, Dict, List, Optional

from config import LOG_FORMAT, fresh_seed, load_config
from domain import (
    Board,
    BoardFull,
    FREE_CELLS,
    APPLE_STRATEGIES,
    INITIAL_DIRECTION,
    INITIAL_SNAKE,
    DIRECTION_NAMES,
    initialize,
    step,
    game_over_reason,
)
from domain.constants import Direction
from players import Player, get_player_class, parse_moves, AVAILABLE_PLAYERS

logger = logging.getLogger(__name__)

DEFAULT_MAX_ROUNDS = 500


class SnakeGame:
    """
    Host-side session around the board state machine.

    Manages:
      - The current Board snapshot
      - Rounds and restarts
      - History for replay/video export
      - The end-of-game summary

    The board itself is never mutated; every round replaces ``self.board``
    with the snapshot returned by ``step``.
    """

    def __init__(
        self,
        width: int,
        height: int,
        seed: Optional[int] = None,
        max_rounds: Optional[int] = None,
        game_id: Optional[str] = None,
        strategy: str = FREE_CELLS,
        initial_snake=INITIAL_SNAKE,
        initial_direction: Direction = INITIAL_DIRECTION,
        verbose: bool = False
    ):
        self.width = width
        self.height = height
        self.max_rounds = max_rounds
        self.strategy = strategy
        self.initial_snake = tuple(initial_snake)
        self.initial_direction = initial_direction
        self.verbose = verbose
        self.restarts = 0

        if game_id is None:
            self.game_id = str(uuid.uuid4())
        else:
            self.game_id = game_id

        self.reset(seed)

    def reset(self, seed: Optional[int] = None):
        """
        Start a fresh game on the same grid.

        Raises:
            InvalidConfiguration: the initial snake does not fit the grid
        """
        self.seed = fresh_seed() if seed is None else seed
        self.board: Board = initialize(
            (self.width, self.height),
            self.initial_direction,
            self.initial_snake,
            self.seed,
            strategy=self.strategy
        )
        self.round_number = 0
        self.game_over = False
        self.game_result: Optional[Dict[str, Any]] = None
        self.move_history: List[Direction] = []
        self.history: List[Board] = [self.board]
        logger.debug(f"Game {self.game_id} started with seed {self.seed}, apple at {self.board.apple}")

        # A start one cell short of filling the grid is already over
        reason = game_over_reason(self.board)
        if reason is not None:
            self.end_game(reason)

    def restart(self, seed: Optional[int] = None):
        """Reset after a finished (or abandoned) game and count the restart."""
        self.restarts += 1
        self.reset(seed)

    @property
    def apples_eaten(self) -> int:
        # The seed counter moves by exactly one per apple
        return self.board.rng_seed

    def run_round(self, direction: Direction) -> Board:
        """
        Execute one tick:
          1) If the game is over, do nothing
          2) Step the board with the given direction
          3) Record the new snapshot
          4) End the game on collision, a filled board or the round limit
        """
        if self.game_over:
            logger.info("Game is already over. No more rounds.")
            return self.board

        self.move_history.append(direction)
        try:
            self.board = step(self.board, direction, strategy=self.strategy)
        except BoardFull:
            # The apple had nowhere to go: the snake covers the grid
            self.end_game("filled")
            return self.board

        self.round_number += 1
        self.record_history()

        if self.verbose:
            self.print_board()

        reason = game_over_reason(self.board)
        if reason is not None:
            self.end_game(reason)
        elif self.max_rounds is not None and self.round_number >= self.max_rounds:
            self.end_game("max_rounds")

        return self.board

    def record_history(self):
        self.history.append(self.board)

    def end_game(self, reason: str):
        self.game_over = True
        self.game_result = {
            "reason": reason,
            "rounds": self.round_number,
            "length": len(self.board.snake),
            "apples_eaten": self.apples_eaten,
        }
        logger.info(
            f"Game Over ({reason}) after {self.round_number} rounds, "
            f"length {len(self.board.snake)}, apples eaten {self.apples_eaten}"
        )

    def print_board(self):
        """
        Prints a visual representation of the current board state.
        """
        print("\n" + self.board.print_board() + "\n")

    def summary(self) -> Dict[str, Any]:
        return {
            "game_id": self.game_id,
            "seed": self.seed,
            "board": {"width": self.width, "height": self.height},
            "rounds": self.round_number,
            "final_length": len(self.board.snake),
            "final_board": self.board.to_dict(),
            "apples_eaten": self.apples_eaten,
            "moves": [DIRECTION_NAMES[move] for move in self.move_history],
            "game_result": self.game_result,
        }


def play_game(game: SnakeGame, player: Player) -> SnakeGame:
    """Feed the player's moves into the game until it ends."""
    while not game.game_over:
        game.run_round(player.get_move(game.board))
    return game


# -------------------------------
# Simulation Function
# -------------------------------

def build_player(name: str, seed: Optional[int] = None, moves: Optional[str] = None) -> Player:
    """
    Create a headless player by registry key.

    Raises:
        ValueError: unknown player, or a player that needs a window
    """
    player_class = get_player_class(name)
    if player_class.name == "keyboard":
        raise ValueError("The keyboard player needs a window; run app.py instead.")
    if player_class.name == "scripted":
        return player_class(parse_moves(moves or ""))
    return player_class(seed)


def run_simulation(player: Player, game_params: argparse.Namespace) -> Dict:
    """
    Runs a single headless game.

    Args:
        player: Direction source asked once per round.
        game_params: An object (like argparse.Namespace) containing game settings
                     (width, height, max_rounds, seed, strategy).

    Returns:
        A dictionary summarizing the game (game_id, seed, rounds, final_length,
        apples_eaten, final_board, moves, game_result).
    """
    game = SnakeGame(
        width=game_params.width,
        height=game_params.height,
        seed=getattr(game_params, 'seed', None),
        max_rounds=getattr(game_params, 'max_rounds', DEFAULT_MAX_ROUNDS),
        game_id=getattr(game_params, 'game_id', None),
        strategy=getattr(game_params, 'strategy', FREE_CELLS),
        verbose=getattr(game_params, 'verbose', False)
    )
    print(f"Game ID: {game.game_id} (seed {game.seed})")

    if game.verbose:
        game.print_board()

    play_game(game, player)

    return game.summary()


def add_game_arguments(parser: argparse.ArgumentParser):
    """Arguments shared by the headless tools."""
    config = load_config()
    parser.add_argument("--width", type=int, default=config.columns,
                        help="Number of columns on the board")
    parser.add_argument("--height", type=int, default=config.rows,
                        help="Number of rows on the board")
    parser.add_argument("--seed", type=int, default=config.seed,
                        help="Seed for apple placement (default: SNAKE_SEED or a fresh one)")
    parser.add_argument("--max_rounds", type=int, default=DEFAULT_MAX_ROUNDS,
                        help="Maximum number of rounds")
    parser.add_argument("--strategy", choices=APPLE_STRATEGIES, default=FREE_CELLS,
                        help="Apple placement strategy")
    parser.add_argument("--player", choices=AVAILABLE_PLAYERS, default="random",
                        help="Direction source")
    parser.add_argument("--moves", type=str, default="",
                        help="Move script for the scripted player, e.g. 'R,R,D,L'")
    parser.add_argument("--player_seed", type=int, default=None,
                        help="Seed for the random player")


# -------------------------------
# Example Usage (Main Entry Point)
# -------------------------------
def main():
    parser = argparse.ArgumentParser(
        description="Run a headless funkysnake game and print the board every round."
    )
    add_game_arguments(parser)
    parser.add_argument("--quiet", action="store_true",
                        help="Only print the summary")
    args = parser.parse_args()

    logging.basicConfig(level=load_config().log_level, format=LOG_FORMAT)

    player = build_player(args.player, seed=args.player_seed, moves=args.moves)
    args.verbose = not args.quiet
    result = run_simulation(player, args)

    print("\nSimulation Result Summary:")
    print(json.dumps(result, indent=2))


if __name__ == "__main__":
    main()
