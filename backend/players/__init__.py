"""
Player implementations for funkysnake.

This module contains the player abstraction and the direction sources the
host can feed into the board once per tick.
"""

from .base import Player
from .keyboard_player import KeyboardPlayer, KEY_BINDINGS, direction_for_key
from .random_player import RandomPlayer
from .scripted_player import ScriptedPlayer, parse_moves
from .variant_registry import get_player_class, list_players, AVAILABLE_PLAYERS

__all__ = [
    'Player',
    'KeyboardPlayer',
    'KEY_BINDINGS',
    'direction_for_key',
    'RandomPlayer',
    'ScriptedPlayer',
    'parse_moves',
    'get_player_class',
    'list_players',
    'AVAILABLE_PLAYERS',
]
