"""
Tests for environment-driven configuration.
"""

import os
import sys

import pytest

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from config import GameConfig, fresh_seed, load_config  # noqa: E402

SNAKE_VARS = [
    "SNAKE_COLUMNS", "SNAKE_ROWS", "SNAKE_CELL_SIZE", "SNAKE_TICK_MS",
    "SNAKE_FRAMERATE", "SNAKE_SEED", "SNAKE_LOG_LEVEL",
]


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in SNAKE_VARS:
        monkeypatch.delenv(name, raising=False)


def test_defaults_match_640x480_window():
    config = load_config()
    assert config == GameConfig()
    assert config.grid_size == (16, 12)
    assert config.window_size == (640, 480)
    assert config.tick_ms == 100
    assert config.seed is None


def test_values_read_from_environment(monkeypatch):
    monkeypatch.setenv("SNAKE_COLUMNS", "20")
    monkeypatch.setenv("SNAKE_ROWS", "10")
    monkeypatch.setenv("SNAKE_TICK_MS", "75")
    monkeypatch.setenv("SNAKE_SEED", "-3")
    monkeypatch.setenv("SNAKE_LOG_LEVEL", "debug")

    config = load_config()
    assert config.grid_size == (20, 10)
    assert config.tick_ms == 75
    assert config.seed == -3
    assert config.log_level == "DEBUG"


def test_blank_values_fall_back_to_defaults(monkeypatch):
    monkeypatch.setenv("SNAKE_COLUMNS", " ")
    monkeypatch.setenv("SNAKE_SEED", "")
    config = load_config()
    assert config.columns == 16
    assert config.seed is None


@pytest.mark.parametrize("name,value", [
    ("SNAKE_COLUMNS", "wide"),
    ("SNAKE_ROWS", "0"),
    ("SNAKE_CELL_SIZE", "-4"),
    ("SNAKE_SEED", "1.5"),
])
def test_invalid_values_raise(monkeypatch, name, value):
    monkeypatch.setenv(name, value)
    with pytest.raises(ValueError):
        load_config()


def test_overrides_skip_none():
    config = GameConfig().with_overrides(columns=8, rows=None, seed=0)
    assert config.columns == 8
    assert config.rows == 12
    assert config.seed == 0


def test_fresh_seed_is_int():
    seed = fresh_seed()
    assert isinstance(seed, int)
    assert 0 <= seed < 2 ** 32
