"""
Manual Player

Takes its moves from an outside source, typically the console driver
reading a human's commands.
"""

from typing import Callable, Optional

from ataxx_engine.board import Board, Move, PieceColor
from ataxx_engine.players.base import Player

# (color, prompt) -> move, or None when the session ended first
MoveSource = Callable[[PieceColor, str], Optional[Move]]


class ManualPlayer(Player):
    """
    Player whose moves come from MOVE_SOURCE.

    Attributes:
        color: Side this player moves for
        move_source: Callable asked for each move with a '<Color>: ' prompt
    """

    def __init__(self, color: PieceColor, move_source: MoveSource):
        super().__init__(color)
        self.move_source = move_source

    def get_move(self, board: Board) -> Optional[Move]:
        return self.move_source(self.color, f"{self.color}: ")
