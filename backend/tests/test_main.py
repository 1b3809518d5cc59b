"""
Tests for main.py - the game session around the board state machine.
"""

import os
import sys
from argparse import Namespace

import pytest

# Add backend to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

import main  # noqa: E402
from main import SnakeGame, build_player, play_game, run_simulation  # noqa: E402
from domain import BoardFull, InvalidConfiguration, DOWN, NONE, RIGHT, place_apple  # noqa: E402
from players import RandomPlayer, ScriptedPlayer  # noqa: E402

# Head at (1, 1) heading right into its own body at (2, 1)
COILED_SNAKE = [(1, 1), (0, 1), (0, 2), (1, 2), (2, 2), (2, 1), (3, 1)]


class TestSnakeGame:
    """Tests for the SnakeGame session."""

    def test_new_game_uses_initial_snake(self):
        game = SnakeGame(width=10, height=8, seed=3, game_id="g1")
        assert game.game_id == "g1"
        assert game.board.snake == ((0, 0),)
        assert game.board.direction == RIGHT
        assert game.board.rng_seed == 0
        assert game.apples_eaten == 0
        assert game.round_number == 0
        assert game.history == [game.board]
        assert game.game_over is False

    def test_game_id_generated_when_missing(self):
        game = SnakeGame(width=10, height=8, seed=3)
        assert len(game.game_id) == 36

    def test_seed_drawn_when_missing(self):
        game = SnakeGame(width=10, height=8)
        assert isinstance(game.seed, int)
        assert game.board.rng_seed == 0
        assert game.board.apple == place_apple(game.board, game.seed).apple

    def test_terminal_start_is_over_before_any_round(self):
        """A snake one cell short of filling the grid never gets stepped."""
        game = SnakeGame(3, 1, seed=0, initial_snake=[(1, 0), (0, 0)])
        assert game.game_over is True
        assert game.round_number == 0
        assert game.game_result["reason"] == "filled"
        assert game.game_result["rounds"] == 0

        board = game.board
        assert game.run_round(NONE) is board
        assert game.round_number == 0
        assert game.history == [board]

    def test_invalid_initial_snake_raises(self):
        with pytest.raises(InvalidConfiguration):
            SnakeGame(width=2, height=2, seed=0, initial_snake=[(5, 5)])

    def test_run_round_advances_board(self):
        game = SnakeGame(width=10, height=8, seed=3)
        board = game.run_round(DOWN)
        assert board.head == (0, 1)
        assert game.round_number == 1
        assert game.move_history == [DOWN]
        assert len(game.history) == 2

    def test_self_collision_ends_game(self):
        game = SnakeGame(width=5, height=5, seed=0, initial_snake=COILED_SNAKE)
        game.run_round(NONE)
        assert game.game_over is True
        assert game.game_result["reason"] == "self"
        assert game.game_result["rounds"] == 1

    def test_rounds_after_game_over_are_ignored(self):
        game = SnakeGame(width=5, height=5, seed=0, initial_snake=COILED_SNAKE)
        game.run_round(NONE)
        board = game.board
        assert game.run_round(DOWN) is board
        assert game.round_number == 1

    def test_max_rounds_ends_game(self):
        game = SnakeGame(width=10, height=10, seed=1, max_rounds=3)
        for _ in range(3):
            game.run_round(NONE)
        assert game.game_over is True
        assert game.game_result["reason"] == "max_rounds"

    def test_filling_ring_board(self):
        """On a 4x1 ring the snake eats two apples and fills the board."""
        game = SnakeGame(width=4, height=1, seed=11)
        play_game(game, ScriptedPlayer())
        assert game.game_result["reason"] == "filled"
        assert game.apples_eaten == 2
        assert len(game.board.snake) == 3

    def test_board_full_during_step_ends_game(self, monkeypatch):
        def full(board, direction, strategy):
            raise BoardFull("no room")

        monkeypatch.setattr(main, "step", full)
        game = SnakeGame(width=5, height=5, seed=0)
        game.run_round(NONE)
        assert game.game_over is True
        assert game.game_result["reason"] == "filled"

    def test_restart_resets_state(self):
        game = SnakeGame(width=5, height=5, seed=0, initial_snake=COILED_SNAKE)
        game.run_round(NONE)
        game.restart(seed=4)
        assert game.restarts == 1
        assert game.game_over is False
        assert game.game_result is None
        assert game.round_number == 0
        assert game.board.snake == tuple(COILED_SNAKE)
        assert game.seed == 4
        assert game.board.rng_seed == 0
        assert game.board.apple == place_apple(game.board, 4).apple

    def test_print_board(self, capsys):
        game = SnakeGame(width=3, height=2, seed=0)
        game.print_board()
        captured = capsys.readouterr()
        assert "H" in captured.out
        assert "A" in captured.out

    def test_summary(self):
        game = SnakeGame(width=5, height=5, seed=0, initial_snake=COILED_SNAKE, game_id="abc")
        game.run_round(NONE)
        summary = game.summary()
        assert summary["game_id"] == "abc"
        assert summary["seed"] == 0
        assert summary["rounds"] == 1
        assert summary["moves"] == ["NONE"]
        assert summary["final_length"] == len(COILED_SNAKE)
        assert summary["final_board"] == game.board.to_dict()
        assert summary["final_board"]["snake"][0] == (2, 1)
        assert summary["game_result"]["reason"] == "self"


class TestSimulation:
    """Tests for run_simulation and build_player."""

    def test_run_simulation_is_reproducible(self, capsys):
        params = Namespace(width=6, height=6, seed=5, max_rounds=40, strategy="free_cells")
        first = run_simulation(RandomPlayer(seed=2), params)
        second = run_simulation(RandomPlayer(seed=2), params)
        for key in ("rounds", "final_length", "apples_eaten", "moves", "game_result"):
            assert first[key] == second[key]
        assert first["rounds"] <= 40

    def test_run_simulation_verbose_prints_boards(self, capsys):
        params = Namespace(width=4, height=3, seed=1, max_rounds=2, verbose=True)
        run_simulation(ScriptedPlayer(), params)
        captured = capsys.readouterr()
        assert "Game ID:" in captured.out
        assert captured.out.count("   0 1 2 3") == 3

    def test_build_random_player(self):
        player = build_player("random", seed=9)
        assert isinstance(player, RandomPlayer)
        assert player.seed == 9

    def test_build_scripted_player(self):
        player = build_player("scripted", moves="R,D")
        assert isinstance(player, ScriptedPlayer)
        assert player.moves == [RIGHT, DOWN]

    def test_keyboard_player_rejected_headless(self):
        with pytest.raises(ValueError):
            build_player("keyboard")

    def test_main_prints_summary(self, monkeypatch, capsys):
        monkeypatch.setattr(sys, "argv", [
            "main.py", "--width", "5", "--height", "4", "--seed", "2",
            "--player", "scripted", "--moves", "D,D", "--max_rounds", "3", "--quiet",
        ])
        main.main()
        captured = capsys.readouterr()
        assert "Simulation Result Summary" in captured.out
        assert '"seed": 2' in captured.out
