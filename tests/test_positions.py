"""
Unit Tests for the Reference Games
"""

import pytest

from ataxx_engine.board import Board, GameError, PieceColor
from ataxx_engine.utils.positions import (
    REFERENCE_GAMES,
    board_from_moves,
    get_reference_game,
    play_moves,
)


class TestReferenceGames:
    """Every reference game replays legally and ends where it says."""

    @pytest.mark.parametrize("game", REFERENCE_GAMES, ids=lambda g: g.id)
    def test_replays_legally(self, game):
        board = board_from_moves(game.moves)

        assert board.num_moves == len(game.moves)
        assert game.description

    def test_lookup(self):
        assert get_reference_game("OPENING").moves[0] == "a7-b7"

        with pytest.raises(KeyError):
            get_reference_game("NO_SUCH_GAME")

    def test_ids_unique(self):
        ids = [game.id for game in REFERENCE_GAMES]

        assert len(ids) == len(set(ids))

    def test_outcomes(self):
        wipeout = board_from_moves(get_reference_game("RED_WIPEOUT").moves)
        shuffle = board_from_moves(get_reference_game("JUMP_SHUFFLE").moves)
        short = board_from_moves(get_reference_game("JUMP_SHUFFLE_SHORT").moves)

        assert wipeout.game_over() and wipeout.red_pieces() == 0
        assert wipeout.blue_pieces() == 9, "b2-c1 and c1-d1 are extends"
        assert "Blue 9" in get_reference_game("RED_WIPEOUT").description
        assert shuffle.game_over() and shuffle.num_jumps == 26
        assert not short.game_over()
        assert short == Board(), "Twenty shuffle jumps return to the start layout"
        assert short.whose_move == PieceColor.RED


class TestPlayMoves:
    """Tests for the replay helpers."""

    def test_returns_same_board(self):
        board = Board()

        assert play_moves(board, ["a7-b7"]) is board

    def test_illegal_move_raises(self):
        board = Board()

        with pytest.raises(GameError):
            play_moves(board, ["a7-b7", "b7-b6"])

        assert board.num_moves == 1, "Moves before the bad one stay applied"

    def test_malformed_move_raises(self):
        with pytest.raises(GameError):
            board_from_moves(["a7 b7"])
