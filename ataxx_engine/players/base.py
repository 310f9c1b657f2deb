"""
Player Interface

A player supplies the next move for one side. The driver asks the player
of the side to move, checks the answer against the board and applies it.

Contract:
    - get_move(board) returns a Move (possibly Move.PASS), or None when the
      session ended before a move arrived
    - Players never modify the board they are given
"""

from abc import ABC, abstractmethod
from typing import Optional

from ataxx_engine.board import Board, Move, PieceColor


class Player(ABC):
    """
    Abstract base class for move sources.

    Attributes:
        color: Side this player moves for
    """

    def __init__(self, color: PieceColor):
        self.color = color

    @abstractmethod
    def get_move(self, board: Board) -> Optional[Move]:
        """
        Return the next move for self.color on BOARD.

        Args:
            board: Current game board (must not be modified)

        Returns:
            Move to play, or None if the session ended first
        """

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.color})"
