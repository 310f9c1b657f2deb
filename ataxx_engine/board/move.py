"""
Moves

A move is either the pass sentinel or a pair of squares. Moves are
classified by the Chebyshev distance between source and destination:

    - distance 1: extend (the source piece stays, a new piece appears)
    - distance 2: jump (the source piece relocates)

Anything else is never legal. Coordinates are zero-based and may fall
outside the real board; the Board decides legality.
"""

import re
from dataclasses import dataclass
from typing import ClassVar, Optional

from ataxx_engine.board.errors import GameError
from ataxx_engine.board.representation import COLUMNS, ROWS, square_name

_MOVE_PATTERN = re.compile(r"^([a-g])([1-7])-([a-g])([1-7])$")


@dataclass(frozen=True)
class Move:
    """
    A move from (col0, row0) to (col1, row1), or a pass.

    Attributes:
        col0, row0: Source square
        col1, row1: Destination square
        (all None for the pass sentinel)
    """

    col0: Optional[int] = None
    row0: Optional[int] = None
    col1: Optional[int] = None
    row1: Optional[int] = None

    PASS: ClassVar["Move"]

    @classmethod
    def parse(cls, text: str) -> "Move":
        """
        Parse a move in the form 'a7-b7', or '-' for a pass.

        Raises:
            GameError: If the text is not a well-formed move
        """
        text = text.strip().lower()
        if text == "-":
            return cls.PASS
        match = _MOVE_PATTERN.match(text)
        if match is None:
            raise GameError(f"Invalid move: {text!r}")
        c0, r0, c1, r1 = match.groups()
        return cls(COLUMNS.index(c0), ROWS.index(r0), COLUMNS.index(c1), ROWS.index(r1))

    @property
    def is_pass(self) -> bool:
        return self.col0 is None

    @property
    def col_distance(self) -> int:
        return self.col1 - self.col0

    @property
    def row_distance(self) -> int:
        return self.row1 - self.row0

    @property
    def distance(self) -> int:
        """Chebyshev distance between source and destination (0 for a pass)."""
        if self.is_pass:
            return 0
        return max(abs(self.col_distance), abs(self.row_distance))

    @property
    def is_extend(self) -> bool:
        return self.distance == 1

    @property
    def is_jump(self) -> bool:
        return self.distance == 2

    def __str__(self) -> str:
        if self.is_pass:
            return "-"
        return f"{square_name(self.col0, self.row0)}-{square_name(self.col1, self.row1)}"


Move.PASS = Move()
