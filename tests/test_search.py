"""
Unit Tests for Search Module

Tests for minimax search with alpha-beta pruning.
"""

from unittest.mock import patch

import pytest

from ataxx_engine.board import Board, Move, PieceColor
from ataxx_engine.evaluation import INFINITY, Evaluator, MaterialEvaluator
from ataxx_engine.search import SEARCH_DEPTH, find_best_move, minimax
from ataxx_engine.utils.positions import board_from_moves, get_reference_game


def full_minimax(board: Board, depth: int, evaluator: Evaluator) -> float:
    """Plain minimax without pruning, as a reference value."""
    if depth == 0:
        return evaluator.evaluate(board)
    scores = []
    for move in board.legal_moves(board.whose_move):
        board.make_move(move)
        scores.append(full_minimax(board, depth - 1, evaluator))
        board.undo()
    return max(scores) if board.whose_move == PieceColor.RED else min(scores)


def reference_board(game_id: str) -> Board:
    return board_from_moves(get_reference_game(game_id).moves)


class TestMinimax:
    """Tests for the minimax function itself."""

    @pytest.fixture
    def evaluator(self):
        """Create evaluator for testing."""
        return MaterialEvaluator()

    def test_depth_zero_is_static_eval(self, evaluator):
        board = reference_board("OPENING")

        score = minimax(board, 0, -INFINITY, INFINITY, 1, evaluator)

        assert score == board.red_pieces() - board.blue_pieces() == -2

    def test_counts_nodes(self, evaluator):
        board = Board()
        nodes = [0]

        minimax(board, 1, -INFINITY, INFINITY, 1, evaluator, nodes_searched=nodes)

        assert nodes[0] == 17, "Root plus one node per legal move"

    def test_records_best_move_at_root(self, evaluator):
        board = Board()
        best = [None]

        score = minimax(board, 1, -INFINITY, INFINITY, 1, evaluator, best_move=best)

        assert best[0] == Move.parse("a7-a6")
        assert score == 1

    def test_board_restored(self, evaluator):
        board = reference_board("OPENING")
        before = board.copy()

        minimax(board, 2, -INFINITY, INFINITY, 1, evaluator)

        assert board == before
        assert board.whose_move == before.whose_move
        assert board.num_moves == before.num_moves

    @pytest.mark.parametrize("game_id,depth", [
        (None, 3),
        ("OPENING", 2),
        ("JUMP_SHUFFLE_SHORT", 2),
    ])
    def test_alpha_beta_correctness(self, evaluator, game_id, depth):
        """Test that alpha-beta pruning produces same result as full minimax."""
        board = reference_board(game_id) if game_id else Board()
        sense = 1 if board.whose_move == PieceColor.RED else -1

        pruned = minimax(board.copy(), depth, -INFINITY, INFINITY, sense, evaluator)
        expected = full_minimax(board.copy(), depth, evaluator)

        assert pruned == expected

    def test_searches_through_pass(self, evaluator):
        """A side with no moves passes inside the tree instead of stopping."""
        board = Board()
        for col in range(7):
            for row in range(7):
                if board.legal_block(col, row):
                    board.set_block(col, row)

        score = minimax(board, 3, -INFINITY, INFINITY, 1, evaluator)

        assert score == 0
        assert board.num_moves == 0


class TestFindBestMove:
    """Tests for the root search."""

    def test_earliest_best_move_wins_ties(self):
        """Every extend scores +1; the first one generated is kept."""
        move, score, nodes = find_best_move(Board(), depth=1)

        assert move == Move.parse("a7-a6")
        assert score == 1
        assert nodes == 17

    def test_blue_minimizes(self):
        board = board_from_moves(["a7-b7"])

        move, score, _ = find_best_move(board, depth=1)

        assert move == Move.parse("a1-a2")
        assert score == 0

    def test_finds_biggest_capture(self):
        """From the opening, the jump to b4 takes three pieces."""
        board = reference_board("OPENING")

        move, score, _ = find_best_move(board, depth=1)

        assert move == Move.parse("a6-b4")
        assert score == 4

    def test_pass_without_search(self):
        board = reference_board("RED_WIPEOUT")

        with patch("ataxx_engine.search.minimax.minimax") as search:
            move, score, nodes = find_best_move(board, depth=3)

        search.assert_not_called()
        assert move is Move.PASS
        assert score == -board.blue_pieces()
        assert nodes == 0

    def test_board_not_modified(self):
        board = reference_board("OPENING")
        before = board.copy()
        version = board.version
        calls = []
        board.add_observer(calls.append)

        find_best_move(board, depth=2)

        assert board == before
        assert board.version == version
        assert calls == [], "Search must not notify observers of the real board"

    def test_deterministic(self):
        board = reference_board("OPENING")

        first = find_best_move(board, depth=2)
        second = find_best_move(board, depth=2)

        assert first == second

    def test_result_is_legal(self):
        board = reference_board("JUMP_SHUFFLE_SHORT")

        move, _, nodes = find_best_move(board, depth=2)

        assert board.legal_move(move)
        assert nodes > 1

    def test_default_depth(self):
        board = Board()

        move, _, nodes_default = find_best_move(board)
        _, _, nodes_d2 = find_best_move(board, depth=2)

        assert SEARCH_DEPTH == 4
        assert board.legal_move(move)
        assert nodes_default > nodes_d2, "Deeper search should explore more nodes"

    def test_invalid_depth(self):
        with pytest.raises(ValueError):
            find_best_move(Board(), depth=0)

    def test_custom_evaluator(self):
        """The search follows whatever evaluator it is given."""

        class BlueLover(Evaluator):
            def evaluate(self, board):
                return board.blue_pieces() - board.red_pieces()

        # Red now prefers to give Blue pieces, i.e. to jump without converting
        move, score, _ = find_best_move(Board(), depth=1, evaluator=BlueLover())

        assert move.is_jump
        assert score == 0
