"""
Material Evaluation

The baseline (and default) heuristic: the piece difference between the
two sides. It is independent of whose turn it is.

    score = red_pieces - blue_pieces
"""

from ataxx_engine.board import Board
from ataxx_engine.evaluation.base import Evaluator


class MaterialEvaluator(Evaluator):
    """Scores a position by Red's piece count minus Blue's."""

    def evaluate(self, board: Board) -> int:
        return board.red_pieces() - board.blue_pieces()
