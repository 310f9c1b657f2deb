"""
Automated Player

Wraps the minimax search. Always answers with a legal move (or a pass
when the side has none) and never waits on outside input.
"""

import logging
from typing import Optional

from ataxx_engine.board import Board, Move, PieceColor
from ataxx_engine.evaluation.base import Evaluator
from ataxx_engine.evaluation.material import MaterialEvaluator
from ataxx_engine.players.base import Player
from ataxx_engine.search.minimax import SEARCH_DEPTH, find_best_move

logger = logging.getLogger(__name__)


class AIPlayer(Player):
    """
    Player that computes its own moves.

    Attributes:
        color: Side this player moves for
        depth: Search depth in plies
        evaluator: Static evaluation used by the search
    """

    def __init__(
        self,
        color: PieceColor,
        depth: int = SEARCH_DEPTH,
        evaluator: Optional[Evaluator] = None,
    ):
        super().__init__(color)
        self.depth = depth
        self.evaluator = evaluator if evaluator else MaterialEvaluator()

    def get_move(self, board: Board) -> Move:
        if not board.can_move(self.color):
            logger.info(f"{self.color} passes")
            return Move.PASS

        move, score, nodes = find_best_move(board, self.depth, self.evaluator)
        logger.info(f"{self.color} moves {move} (score {score}, nodes {nodes})")
        return move
