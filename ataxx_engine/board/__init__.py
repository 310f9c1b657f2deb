"""
Board Module

This module holds the Ataxx rules engine and the value types it works with.

Key Components:
    - Board: grid with a blocked border, legality, make/undo, game over
    - Move: pass sentinel or source/destination pair ('a7-b7')
    - PieceColor: EMPTY, RED, BLUE, BLOCKED
    - GameError: raised when a mutator's precondition fails
    - representation: square coordinates, numpy array view, text dump

Data Flow:
    Move.parse('a7-b7') → board.legal_move() → board.make_move() → board.undo()
"""

from ataxx_engine.board.errors import GameError
from ataxx_engine.board.pieces import PieceColor
from ataxx_engine.board.move import Move
from ataxx_engine.board.board import Board, JUMP_LIMIT
from ataxx_engine.board.representation import board_to_array, dump, parse_square

__all__ = [
    'Board',
    'Move',
    'PieceColor',
    'GameError',
    'JUMP_LIMIT',
    'board_to_array',
    'dump',
    'parse_square',
]
