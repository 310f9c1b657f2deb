"""
Console Game Module

This module drives a game session from text commands: setting up the
board, choosing who plays each side, asking players for moves and
reporting the outcome. It talks to the engine only through the Board,
Player and search interfaces.

Session Flow:
    ataxx: block c3
    ataxx: auto red
    ataxx: start
    Red moves a7-b6.
    Blue: g7-f6
    ...
    Red wins.
"""

from ataxx_engine.game.commands import Command, CommandType, parse_command
from ataxx_engine.game.interface import AtaxxGame, GameState, setup_logger

__all__ = [
    'AtaxxGame',
    'GameState',
    'Command',
    'CommandType',
    'parse_command',
    'setup_logger',
]
