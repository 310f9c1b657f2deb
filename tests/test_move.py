"""
Unit Tests for Moves, Pieces and Square Geometry
"""

import pytest

from ataxx_engine.board import GameError, Move, PieceColor
from ataxx_engine.board.representation import (
    EXTENDED_SIDE,
    index,
    neighbor,
    on_board,
    parse_square,
    square_name,
)


class TestMove:
    """Tests for Move parsing and classification."""

    def test_parse(self):
        move = Move.parse("a7-b6")

        assert (move.col0, move.row0, move.col1, move.row1) == (0, 6, 1, 5)
        assert str(move) == "a7-b6"

    def test_parse_is_case_insensitive(self):
        assert Move.parse(" C3-E5 ") == Move.parse("c3-e5")

    def test_pass_sentinel(self):
        assert Move.parse("-") is Move.PASS
        assert Move.PASS.is_pass
        assert str(Move.PASS) == "-"
        assert Move.PASS.distance == 0
        assert not Move.PASS.is_extend
        assert not Move.PASS.is_jump

    @pytest.mark.parametrize("text", ["h1-a1", "a7b7", "a0-a1", "a8-a7", "", "pass", "a7-b7-c7"])
    def test_parse_invalid(self, text):
        with pytest.raises(GameError):
            Move.parse(text)

    @pytest.mark.parametrize("text,distance,extend,jump", [
        ("a7-b7", 1, True, False),
        ("a7-b6", 1, True, False),
        ("a7-a5", 2, False, True),
        ("a7-c6", 2, False, True),
        ("a7-d7", 3, False, False),
        ("a7-a7", 0, False, False),
    ])
    def test_classification(self, text, distance, extend, jump):
        move = Move.parse(text)

        assert move.distance == distance
        assert move.is_extend == extend
        assert move.is_jump == jump

    def test_signed_distances(self):
        move = Move.parse("c3-a5")

        assert move.col_distance == -2
        assert move.row_distance == 2

    def test_moves_are_values(self):
        assert Move.parse("a7-b7") == Move(0, 6, 1, 6)
        assert len({Move.parse("a7-b7"), Move(0, 6, 1, 6), Move.PASS}) == 2


class TestPieceColor:
    """Tests for PieceColor."""

    def test_opposite(self):
        assert PieceColor.RED.opposite() == PieceColor.BLUE
        assert PieceColor.BLUE.opposite() == PieceColor.RED
        assert PieceColor.EMPTY.opposite() == PieceColor.EMPTY
        assert PieceColor.BLOCKED.opposite() == PieceColor.BLOCKED

    def test_is_piece(self):
        assert PieceColor.RED.is_piece
        assert PieceColor.BLUE.is_piece
        assert not PieceColor.EMPTY.is_piece
        assert not PieceColor.BLOCKED.is_piece

    def test_text(self):
        assert str(PieceColor.RED) == "Red"
        assert str(PieceColor.BLUE) == "Blue"
        assert [c.marker for c in PieceColor] == ["-", "r", "b", "X"]

    def test_parse(self):
        assert PieceColor.parse("red") == PieceColor.RED
        assert PieceColor.parse("BLUE") == PieceColor.BLUE

        with pytest.raises(GameError):
            PieceColor.parse("empty")


class TestSquares:
    """Tests for square naming and grid indexing."""

    def test_parse_square(self):
        assert parse_square("a1") == (0, 0)
        assert parse_square("g7") == (6, 6)
        assert parse_square("C3") == (2, 2)

    @pytest.mark.parametrize("name", ["h1", "a0", "a8", "a", "", "a11"])
    def test_parse_square_invalid(self, name):
        with pytest.raises(GameError):
            parse_square(name)

    def test_square_name(self):
        assert square_name(0, 6) == "a7"
        assert square_name(6, 0) == "g1"

    def test_index(self):
        assert index(0, 0) == 2 * EXTENDED_SIDE + 2
        assert index(-2, -2) == 0
        assert index(8, 8) == EXTENDED_SIDE * EXTENDED_SIDE - 1

    def test_neighbor(self):
        sq = index(3, 3)

        assert neighbor(sq, 1, 0) == index(4, 3)
        assert neighbor(sq, -2, 2) == index(1, 5)

    def test_on_board(self):
        assert on_board(0, 0)
        assert on_board(6, 6)
        assert not on_board(-1, 0)
        assert not on_board(0, 7)
