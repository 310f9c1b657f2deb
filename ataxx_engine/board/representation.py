"""
Board Geometry and Array Views

The real board is 7x7, but the engine stores it inside an 11x11 grid whose
outer two rings are permanently BLOCKED. Any square within two columns and
rows of a real square is therefore a valid grid index, and move generation
never needs a bounds check: squares hanging off the edge simply look
blocked.

Coordinates:
    - Columns a..g map to col 0..6, rows 1..7 map to row 0..6
    - Border squares have col/row in -2..-1 and 7..8
    - Linearized index = (row + 2) * 11 + (col + 2), row-major over the
      physical grid

Array View (board_to_array):
    - Row 0 = board row 7 (the top line of a dump)
    - Row 6 = board row 1
    - Column 0 = column a
"""

import re
from typing import TYPE_CHECKING, Tuple

import numpy as np

from ataxx_engine.board.errors import GameError
from ataxx_engine.board.pieces import PieceColor

if TYPE_CHECKING:
    from ataxx_engine.board.board import Board

SIDE = 7
BORDER = 2
EXTENDED_SIDE = SIDE + 2 * BORDER

COLUMNS = "abcdefg"
ROWS = "1234567"

_SQUARE_PATTERN = re.compile(r"^([a-g])([1-7])$")


def index(col: int, row: int) -> int:
    """
    Return the linearized grid index of the square at (col, row).

    Args:
        col: Column, 0 = a (border columns are -2, -1, 7, 8)
        row: Row, 0 = row 1 (border rows are -2, -1, 7, 8)

    Returns:
        Index into the flat EXTENDED_SIDE * EXTENDED_SIDE grid
    """
    return (row + BORDER) * EXTENDED_SIDE + (col + BORDER)


def neighbor(sq: int, dc: int, dr: int) -> int:
    """Return the index of the square DC columns and DR rows away from SQ."""
    return sq + dc + dr * EXTENDED_SIDE


def on_board(col: int, row: int) -> bool:
    """True iff (col, row) lies on the real 7x7 board."""
    return 0 <= col < SIDE and 0 <= row < SIDE


def square_name(col: int, row: int) -> str:
    """Return the text name of a square, e.g. (0, 6) -> 'a7'."""
    return f"{chr(ord('a') + col)}{chr(ord('1') + row)}"


def parse_square(name: str) -> Tuple[int, int]:
    """
    Parse a square name such as 'c3'.

    Returns:
        Tuple of (col, row), both zero-based

    Raises:
        GameError: If the text does not name a square on the real board
    """
    match = _SQUARE_PATTERN.match(name.strip().lower())
    if match is None:
        raise GameError(f"Invalid square: {name!r}")
    return COLUMNS.index(match.group(1)), ROWS.index(match.group(2))


def board_to_array(board: "Board") -> np.ndarray:
    """
    Return the real board as a (7, 7) int8 array of PieceColor values.

    The array is a copy; row 0 is board row 7 so the result reads the same
    way as a dump.
    """
    grid = board.grid.reshape(EXTENDED_SIDE, EXTENDED_SIDE)
    real = grid[BORDER:BORDER + SIDE, BORDER:BORDER + SIDE]
    return np.flipud(real).copy()


def dump(board: "Board") -> str:
    """
    Return the framed text depiction of the board.

    Format:
        ===
          r - - - - - b
          ...
          b - - - - - r
        ===
    """
    lines = ["==="]
    for row in board_to_array(board):
        lines.append("  " + " ".join(PieceColor(int(cell)).marker for cell in row))
    lines.append("===")
    return "\n".join(lines)
