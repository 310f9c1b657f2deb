"""
Players Module

Uniform interface through which the driver asks for the next move.

Key Components:
    - Player (ABC): get_move(board) -> Move or None
    - AIPlayer: minimax search, never blocks
    - ManualPlayer: defers to an outside move source
"""

from ataxx_engine.players.base import Player
from ataxx_engine.players.ai import AIPlayer
from ataxx_engine.players.manual import ManualPlayer, MoveSource

__all__ = ['Player', 'AIPlayer', 'ManualPlayer', 'MoveSource']
