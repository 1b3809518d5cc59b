"""
Runtime configuration for the funkysnake host programs.

Values come from the environment (a local .env file is loaded first) and can
be overridden by command line flags in each entry point.
"""

import os
import random
from dataclasses import dataclass, replace
from typing import Optional

from dotenv import load_dotenv

from domain.constants import DEFAULT_COLUMNS, DEFAULT_ROWS

load_dotenv()

DEFAULT_CELL_SIZE = 40
DEFAULT_TICK_MS = 100
DEFAULT_FRAMERATE = 60
DEFAULT_LOG_LEVEL = "INFO"
LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


@dataclass(frozen=True)
class GameConfig:
    """Settings shared by the window shell and the headless tools."""

    columns: int = DEFAULT_COLUMNS
    rows: int = DEFAULT_ROWS
    cell_size: int = DEFAULT_CELL_SIZE
    tick_ms: int = DEFAULT_TICK_MS
    framerate: int = DEFAULT_FRAMERATE
    seed: Optional[int] = None
    log_level: str = DEFAULT_LOG_LEVEL

    @property
    def grid_size(self):
        return (self.columns, self.rows)

    @property
    def window_size(self):
        return (self.columns * self.cell_size, self.rows * self.cell_size)

    def with_overrides(self, **overrides) -> "GameConfig":
        """Return a copy with every override that is not None applied."""
        changes = {key: value for key, value in overrides.items() if value is not None}
        return replace(self, **changes)


def _int_env(name: str, default: int, minimum: int = 1) -> int:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        value = int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got '{raw}'")
    if value < minimum:
        raise ValueError(f"{name} must be >= {minimum}, got {value}")
    return value


def load_config() -> GameConfig:
    """
    Build a GameConfig from SNAKE_* environment variables.

    Raises:
        ValueError: a variable is set to something that is not a valid value
    """
    seed_raw = os.getenv("SNAKE_SEED")
    seed = None
    if seed_raw is not None and seed_raw.strip() != "":
        try:
            seed = int(seed_raw)
        except ValueError:
            raise ValueError(f"SNAKE_SEED must be an integer, got '{seed_raw}'")

    return GameConfig(
        columns=_int_env("SNAKE_COLUMNS", DEFAULT_COLUMNS),
        rows=_int_env("SNAKE_ROWS", DEFAULT_ROWS),
        cell_size=_int_env("SNAKE_CELL_SIZE", DEFAULT_CELL_SIZE),
        tick_ms=_int_env("SNAKE_TICK_MS", DEFAULT_TICK_MS),
        framerate=_int_env("SNAKE_FRAMERATE", DEFAULT_FRAMERATE),
        seed=seed,
        log_level=os.getenv("SNAKE_LOG_LEVEL", DEFAULT_LOG_LEVEL).upper(),
    )


def fresh_seed() -> int:
    """A seed drawn from the OS entropy pool, for games started without one."""
    return random.SystemRandom().randrange(2 ** 32)
