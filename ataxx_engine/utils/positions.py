"""
Reference Games

A small suite of move sequences with known outcomes, shared by the tests
and the tools. Each entry replays from the starting layout.

Suite:
    1. OPENING: six extends down the a-file, ending with one conversion
    2. RED_WIPEOUT: Blue captures every Red piece and wins
    3. JUMP_SHUFFLE: 26 consecutive jumps, ending the game by the jump limit
    4. JUMP_SHUFFLE_SHORT: the first 20 jumps of the shuffle, game still on
"""

from dataclasses import dataclass
from typing import Iterable, List

from ataxx_engine.board import Board, Move


@dataclass
class ReferenceGame:
    """
    A move sequence with a description of where it leads.

    Attributes:
        id: Identifier (e.g. "OPENING")
        moves: Moves in 'a7-b7' form, Red first
        description: Human-readable description of the final position
    """
    id: str
    moves: List[str]
    description: str = ""


_SHUFFLE = [
    "a7-a5", "a1-a3", "a5-a7", "a3-a1",
] * 6 + ["a7-a5", "a1-a3"]


REFERENCE_GAMES = [
    ReferenceGame(
        id="OPENING",
        moves=["a7-b7", "a1-a2", "a7-a6", "a2-a3", "a6-a5", "a3-a4"],
        description="Blue's a3-a4 converts a5; Red 4, Blue 6; game continues"
    ),
    ReferenceGame(
        id="RED_WIPEOUT",
        moves=["a7-a5", "a1-a2", "a5-a3", "a1-b2",
               "g1-e1", "b2-c1", "e1-e2", "c1-d1"],
        description="Red has no pieces left (Red 0, Blue 9); Blue wins"
    ),
    ReferenceGame(
        id="JUMP_SHUFFLE",
        moves=_SHUFFLE,
        description="26 jumps in a row; game over by the jump limit"
    ),
    ReferenceGame(
        id="JUMP_SHUFFLE_SHORT",
        moves=_SHUFFLE[:20],
        description="20 jumps in a row; Red to move with 16 legal moves"
    ),
]


def get_reference_game(game_id: str) -> ReferenceGame:
    """
    Look up a reference game by id.

    Raises:
        KeyError: If no game has that id
    """
    for game in REFERENCE_GAMES:
        if game.id == game_id:
            return game
    raise KeyError(game_id)


def play_moves(board: Board, moves: Iterable[str]) -> Board:
    """
    Apply MOVES (in 'a7-b7' form) to BOARD in order.

    Returns:
        The same board, for chaining

    Raises:
        GameError: If a move is malformed or illegal when reached
    """
    for text in moves:
        board.make_move(Move.parse(text))
    return board


def board_from_moves(moves: Iterable[str]) -> Board:
    """Return a new board with MOVES played from the starting layout."""
    return play_moves(Board(), moves)
