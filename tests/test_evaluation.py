"""
Unit Tests for Evaluation Module

Tests for position evaluation functions, focusing on:
    - Material counting accuracy
    - Independence from the side to move
    - The abstract interface
"""

import pytest

from ataxx_engine.board import Board, Move
from ataxx_engine.evaluation import Evaluator, MaterialEvaluator
from ataxx_engine.utils.positions import board_from_moves, get_reference_game


class TestMaterialEvaluator:
    """Tests for MaterialEvaluator."""

    @pytest.fixture
    def evaluator(self):
        """Create a MaterialEvaluator instance."""
        return MaterialEvaluator()

    def test_starting_position_equal(self, evaluator):
        assert evaluator.evaluate(Board()) == 0

    def test_extend_gains_one(self, evaluator):
        board = board_from_moves(["a7-b7"])

        assert evaluator.evaluate(board) == 1

    def test_conversion_counts(self, evaluator):
        board = board_from_moves(get_reference_game("OPENING").moves)

        assert evaluator.evaluate(board) == -2, "Red 4, Blue 6"

    def test_wipeout(self, evaluator):
        board = board_from_moves(get_reference_game("RED_WIPEOUT").moves)

        assert evaluator.evaluate(board) == -9, "Red 0, Blue 9"

    def test_ignores_side_to_move(self, evaluator):
        board = board_from_moves(get_reference_game("RED_WIPEOUT").moves)
        before = evaluator.evaluate(board)

        board.make_move(Move.PASS)

        assert evaluator.evaluate(board) == before

    def test_does_not_modify_board(self, evaluator):
        board = board_from_moves(["a7-b7"])
        version = board.version

        evaluator.evaluate(board)

        assert board.version == version

    def test_repr(self, evaluator):
        assert repr(evaluator) == "MaterialEvaluator()"


class TestEvaluatorInterface:
    """Tests for the abstract base class."""

    def test_cannot_instantiate_base(self):
        with pytest.raises(TypeError):
            Evaluator()

    def test_subclass_must_implement_evaluate(self):
        class Incomplete(Evaluator):
            pass

        with pytest.raises(TypeError):
            Incomplete()
