"""
Author: funkysnake maintainers
Date: 2026-10-18
PURPOSE: Registry for player implementations.
         Maps player keys (e.g., 'keyboard', 'random') to player classes so the CLIs
         can pick a direction source by name. To add a player, create
         players/<name>_player.py, add a loader below and an entry to PLAYER_LOADERS.

SRP/DRY check: Pass - single responsibility is mapping player keys to player classes.
"""

from typing import Callable, Dict, Type

from .base import Player


# Lazy imports keep the registry importable on its own
def _get_keyboard_player() -> Type[Player]:
    from .keyboard_player import KeyboardPlayer
    return KeyboardPlayer


def _get_random_player() -> Type[Player]:
    from .random_player import RandomPlayer
    return RandomPlayer


def _get_scripted_player() -> Type[Player]:
    from .scripted_player import ScriptedPlayer
    return ScriptedPlayer


PLAYER_LOADERS: Dict[str, Callable[[], Type[Player]]] = {
    "keyboard": _get_keyboard_player,
    "random": _get_random_player,
    "scripted": _get_scripted_player,
}

AVAILABLE_PLAYERS = list(PLAYER_LOADERS.keys())


def get_player_class(player_key: str) -> Type[Player]:
    """
    Get the player class for a given key.

    Args:
        player_key: One of 'keyboard', 'random' or 'scripted' (case-insensitive)

    Returns:
        The player class (subclass of Player).

    Raises:
        ValueError: If player_key is not recognized.
    """
    key = (player_key or "").strip().lower()

    if key not in PLAYER_LOADERS:
        available = ", ".join(AVAILABLE_PLAYERS)
        raise ValueError(
            f"Unknown player '{player_key}'. Available players: {available}"
        )

    return PLAYER_LOADERS[key]()


def list_players() -> list:
    """
    Return metadata about all available players.

    Returns:
        List of dicts with 'key' and 'description' for each player.
    """
    return [
        {"key": "keyboard", "description": "Arrow keys, HJKL or WASD; most recent key per tick wins"},
        {"key": "random", "description": "Seeded uniform choice among the four directions"},
        {"key": "scripted", "description": "Replays a fixed move list, then keeps going straight"},
    ]
