"""
Cell Contents

Every square of the board (including the hidden border) holds one
PieceColor. The values are small integers so that the grid can live in a
numpy int8 array.
"""

from enum import IntEnum

from ataxx_engine.board.errors import GameError


class PieceColor(IntEnum):
    """Contents of a square, and the identity of a side."""

    EMPTY = 0
    RED = 1
    BLUE = 2
    BLOCKED = 3

    def opposite(self) -> "PieceColor":
        """Return the other side for RED/BLUE; EMPTY and BLOCKED map to themselves."""
        if self is PieceColor.RED:
            return PieceColor.BLUE
        if self is PieceColor.BLUE:
            return PieceColor.RED
        return self

    @property
    def is_piece(self) -> bool:
        return self is PieceColor.RED or self is PieceColor.BLUE

    @property
    def marker(self) -> str:
        """Single character used by the text dump."""
        return _MARKERS[self]

    @classmethod
    def parse(cls, name: str) -> "PieceColor":
        """
        Parse a side name ('red' or 'blue', any case).

        Raises:
            GameError: If name is not a side
        """
        key = name.strip().lower()
        if key == "red":
            return cls.RED
        if key == "blue":
            return cls.BLUE
        raise GameError(f"Invalid color: {name!r}")

    def __str__(self) -> str:
        return self.name.capitalize()


_MARKERS = {
    PieceColor.EMPTY: "-",
    PieceColor.RED: "r",
    PieceColor.BLUE: "b",
    PieceColor.BLOCKED: "X",
}
