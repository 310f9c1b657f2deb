"""
Utilities Module

Helpers shared by the tests and the tools.

Key Components:
    - REFERENCE_GAMES: move sequences with known outcomes
    - play_moves / board_from_moves: replay 'a7-b7' style move lists
"""

from ataxx_engine.utils.positions import (
    REFERENCE_GAMES,
    ReferenceGame,
    board_from_moves,
    get_reference_game,
    play_moves,
)

__all__ = [
    'REFERENCE_GAMES',
    'ReferenceGame',
    'board_from_moves',
    'get_reference_game',
    'play_moves',
]
