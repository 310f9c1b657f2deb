"""
Abstract Evaluator Interface

This module defines the abstract base class for all position evaluators.
The search only talks to this interface, so evaluators can be swapped
without touching the search algorithm.

Key Principles:
    1. Evaluators are stateless
    2. evaluate() always scores from Red's perspective
    3. Positive = Red advantage, Negative = Blue advantage

The search applies its own sense (+1 for Red, -1 for Blue) when
interpreting these values; evaluators never look at whose turn it is.
"""

from abc import ABC, abstractmethod

from ataxx_engine.board import Board


# Larger in magnitude than any evaluation (the board has 49 squares)
INFINITY = 100000


class Evaluator(ABC):
    """
    Abstract base class for position evaluation.

    All evaluator implementations must inherit from this class and implement
    the evaluate() method.

    Methods:
        evaluate(board): Returns the static score of the position
    """

    @abstractmethod
    def evaluate(self, board: Board) -> int:
        """
        Evaluate an Ataxx position from Red's perspective.

        Args:
            board: Board to evaluate (must not be modified)

        Returns:
            int: Static score, positive when Red is ahead
        """

    def __repr__(self) -> str:
        """String representation of evaluator."""
        return f"{self.__class__.__name__}()"
