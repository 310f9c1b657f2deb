"""
Ataxx Board Engine

This module holds the game state and every rule of Ataxx: legality,
move application with conversion, snapshot-based undo, symmetric block
placement and end-of-game detection.

Representation:
    - Flat numpy int8 grid of EXTENDED_SIDE * EXTENDED_SIDE cells
    - The real 7x7 board sits in the middle, surrounded by two rings of
      BLOCKED squares that gameplay never touches
    - Start layout: Red on a7 and g1, Blue on a1 and g7, Red to move

Move Application (make_move):
    1. Check legality for the mover (GameError, board untouched)
    2. Push a snapshot of the current state onto the history
    3. Count the move; a pass just hands the turn over
    4. Extend resets the jump counter, jump increments it and empties
       the source square
    5. Place the mover's piece and convert the opponent pieces in the
       8 surrounding squares
    6. Hand the turn to the opponent

Game Over:
    - Exactly one side has no pieces
    - Neither side can move
    - JUMP_LIMIT consecutive jumps without an intervening extend

Observers:
    Every mutator (clear, make_move, pass_turn, undo, set_block) bumps
    `version` and calls each registered callback with the board. Copies
    start with no observers.
"""

from typing import Callable, List, NamedTuple, Optional

import numpy as np

from ataxx_engine.board.errors import GameError
from ataxx_engine.board.move import Move
from ataxx_engine.board.pieces import PieceColor
from ataxx_engine.board.representation import (
    BORDER,
    EXTENDED_SIDE,
    SIDE,
    dump,
    index,
    on_board,
)

JUMP_LIMIT = 25  # Consecutive jumps before the game is forced to end

BoardObserver = Callable[["Board"], None]


class _Snapshot(NamedTuple):
    """Frozen pre-move state kept on the undo stack."""

    grid: np.ndarray
    whose_move: PieceColor
    move_count: int
    jump_count: int


class Board:
    """
    An Ataxx board.

    Squares are addressed either by zero-based (col, row) on the real board
    (a1 = (0, 0), g7 = (6, 6)) or by linearized grid index (see
    representation.index). Anything off the real board reads as BLOCKED.

    Attributes:
        grid: Flat int8 array of PieceColor values (read only for callers)
        whose_move: Side to move
        num_moves: Moves and passes made since the last clear
        num_jumps: Consecutive jumps since the last extend
        version: Counter bumped by every mutation

    Equality compares grid contents only; counters, side to move and
    history are not part of it.
    """

    def __init__(self):
        """Create a cleared board in the starting layout."""
        self._grid = np.full(EXTENDED_SIDE * EXTENDED_SIDE, PieceColor.BLOCKED, dtype=np.int8)
        self._whose_move = PieceColor.RED
        self._move_count = 0
        self._jump_count = 0
        self._history: List[_Snapshot] = []
        self._observers: List[BoardObserver] = []
        self._version = 0
        self.clear()

    # ------------------------------------------------------------------
    # State access
    # ------------------------------------------------------------------

    @property
    def grid(self) -> np.ndarray:
        return self._grid

    @property
    def whose_move(self) -> PieceColor:
        """Side that has the next move (arbitrary once the game is over)."""
        return self._whose_move

    @property
    def num_moves(self) -> int:
        return self._move_count

    @property
    def num_jumps(self) -> int:
        return self._jump_count

    @property
    def version(self) -> int:
        return self._version

    def get(self, col: int, row: Optional[int] = None) -> PieceColor:
        """
        Return the contents of a square.

        Args:
            col: Column, or a linearized grid index when row is omitted
            row: Row (zero-based)

        Returns:
            PieceColor of the square; BLOCKED for anything off the real board
        """
        if row is None:
            sq = col
        else:
            if not (-BORDER <= col < SIDE + BORDER and -BORDER <= row < SIDE + BORDER):
                return PieceColor.BLOCKED
            sq = index(col, row)
        if not 0 <= sq < self._grid.size:
            return PieceColor.BLOCKED
        return PieceColor(int(self._grid[sq]))

    def num_pieces(self, color: PieceColor) -> int:
        """Return the number of squares of the real board holding COLOR."""
        return int(np.count_nonzero(self._real_view() == color))

    def red_pieces(self) -> int:
        return self.num_pieces(PieceColor.RED)

    def blue_pieces(self) -> int:
        return self.num_pieces(PieceColor.BLUE)

    # ------------------------------------------------------------------
    # Legality
    # ------------------------------------------------------------------

    def legal_move(self, move: Optional[Move], color: Optional[PieceColor] = None) -> bool:
        """
        Return True iff MOVE is legal for COLOR on the current board.

        The check ignores whose turn it is when COLOR is given; without it
        the side to move is used.

        Rules:
            - A pass is legal iff COLOR has no other legal move
            - Otherwise both squares must be on the board, the destination
              empty, the source COLOR's piece, and the two squares at most
              two columns and two rows apart
        """
        if move is None:
            return False
        if color is None:
            color = self._whose_move
        if move.is_pass:
            return not self.can_move(color)
        if not (on_board(move.col0, move.row0) and on_board(move.col1, move.row1)):
            return False
        if self._grid[index(move.col1, move.row1)] != PieceColor.EMPTY:
            return False
        if self._grid[index(move.col0, move.row0)] != color:
            return False
        return abs(move.col_distance) <= 2 and abs(move.row_distance) <= 2

    def can_move(self, color: PieceColor) -> bool:
        """Return True iff COLOR has a non-pass move, whoever's turn it is."""
        columns = self._column_view()
        for col, row in np.argwhere(self._real_column_view() == color):
            if np.any(columns[col:col + 5, row:row + 5] == PieceColor.EMPTY):
                return True
        return False

    def legal_moves(self, color: PieceColor) -> List[Move]:
        """
        Return every legal non-pass move for COLOR, or [Move.PASS] if none.

        Sources are scanned column by column (a..g), rows 1..7 within a
        column; destinations by column offset -2..2, then row offset -2..2.
        """
        moves = []
        columns = self._column_view()
        for col, row in np.argwhere(self._real_column_view() == color):
            window = columns[col:col + 5, row:row + 5]
            for dc, dr in np.argwhere(window == PieceColor.EMPTY):
                moves.append(Move(
                    int(col), int(row),
                    int(col + dc - BORDER), int(row + dr - BORDER),
                ))
        if not moves:
            moves.append(Move.PASS)
        return moves

    def legal_block(self, col: int, row: int) -> bool:
        """
        Return True iff a block may be placed at (col, row).

        The square and its reflections across the middle column, the middle
        row and the center must all be empty squares of the real board.
        """
        if not on_board(col, row):
            return False
        return all(
            self.get(c, r) == PieceColor.EMPTY
            for c, r in _reflections(col, row)
        )

    def game_over(self) -> bool:
        """Return True iff the game has ended."""
        red = self.red_pieces()
        blue = self.blue_pieces()
        if (red == 0) != (blue == 0):
            return True
        if not self.can_move(PieceColor.RED) and not self.can_move(PieceColor.BLUE):
            return True
        return self._jump_count >= JUMP_LIMIT

    # ------------------------------------------------------------------
    # Mutators
    # ------------------------------------------------------------------

    def clear(self):
        """Reset to the starting layout with Red to move and no history."""
        self._grid[:] = PieceColor.BLOCKED
        self._real_view()[:] = PieceColor.EMPTY
        self._grid[index(0, 6)] = PieceColor.RED
        self._grid[index(6, 0)] = PieceColor.RED
        self._grid[index(0, 0)] = PieceColor.BLUE
        self._grid[index(6, 6)] = PieceColor.BLUE
        self._whose_move = PieceColor.RED
        self._move_count = 0
        self._jump_count = 0
        self._history = []
        self._notify()

    def make_move(self, move: Move):
        """
        Make MOVE for the side to move.

        Raises:
            GameError: If MOVE is not legal for the side to move
        """
        if not self.legal_move(move):
            raise GameError(f"Illegal move: {move}")

        self._history.append(_Snapshot(
            self._grid.copy(), self._whose_move, self._move_count, self._jump_count,
        ))
        self._move_count += 1

        if move.is_pass:
            self._whose_move = self._whose_move.opposite()
            self._notify()
            return

        mover = self._whose_move
        if move.is_extend:
            self._jump_count = 0
        else:
            self._jump_count += 1
            self._grid[index(move.col0, move.row0)] = PieceColor.EMPTY

        self._grid[index(move.col1, move.row1)] = mover
        self._convert_neighbors(mover, move.col1, move.row1)
        self._whose_move = mover.opposite()
        self._notify()

    def pass_turn(self):
        """
        Pass: hand the turn to the opponent.

        Unlike make_move(Move.PASS) this records nothing in the history
        and does not count as a move.

        Raises:
            GameError: If the side to move still has a legal move
        """
        if self.can_move(self._whose_move):
            raise GameError(f"{self._whose_move} cannot pass: it has legal moves")
        self._whose_move = self._whose_move.opposite()
        self._notify()

    def undo(self):
        """
        Restore the state before the last make_move.

        Raises:
            GameError: If there is nothing to undo
        """
        if not self._history:
            raise GameError("Nothing to undo")
        snapshot = self._history.pop()
        self._grid[:] = snapshot.grid
        self._whose_move = snapshot.whose_move
        self._move_count = snapshot.move_count
        self._jump_count = snapshot.jump_count
        self._notify()

    def set_block(self, col: int, row: int):
        """
        Block (col, row) and its three reflections.

        Raises:
            GameError: If legal_block(col, row) is False
        """
        if not self.legal_block(col, row):
            raise GameError("Illegal block placement")
        for c, r in _reflections(col, row):
            self._grid[index(c, r)] = PieceColor.BLOCKED
        self._notify()

    # ------------------------------------------------------------------
    # Observers
    # ------------------------------------------------------------------

    def add_observer(self, callback: BoardObserver):
        """Register CALLBACK to be called with the board after each mutation."""
        self._observers.append(callback)

    def remove_observer(self, callback: BoardObserver):
        self._observers.remove(callback)

    def _notify(self):
        self._version += 1
        for callback in list(self._observers):
            callback(self)

    # ------------------------------------------------------------------
    # Copying, comparison, display
    # ------------------------------------------------------------------

    def copy(self) -> "Board":
        """
        Return an independent copy, history included.

        History snapshots are never modified once pushed, so the copy
        shares them; its own grid is a fresh array.
        """
        other = Board.__new__(Board)
        other._grid = self._grid.copy()
        other._whose_move = self._whose_move
        other._move_count = self._move_count
        other._jump_count = self._jump_count
        other._history = list(self._history)
        other._observers = []
        other._version = self._version
        return other

    def __eq__(self, other) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return bool(np.array_equal(self._grid, other._grid))

    def __hash__(self) -> int:
        return hash(self._grid.tobytes())

    def __str__(self) -> str:
        return dump(self)

    def __repr__(self) -> str:
        return (
            f"Board(whose_move={self._whose_move}, moves={self._move_count}, "
            f"jumps={self._jump_count}, red={self.red_pieces()}, blue={self.blue_pieces()})"
        )

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _real_view(self) -> np.ndarray:
        """Writable (row, col) view of the real 7x7 board."""
        grid = self._grid.reshape(EXTENDED_SIDE, EXTENDED_SIDE)
        return grid[BORDER:BORDER + SIDE, BORDER:BORDER + SIDE]

    def _column_view(self) -> np.ndarray:
        """(col, row) view of the whole physical grid, border included."""
        return self._grid.reshape(EXTENDED_SIDE, EXTENDED_SIDE).T

    def _real_column_view(self) -> np.ndarray:
        return self._column_view()[BORDER:BORDER + SIDE, BORDER:BORDER + SIDE]

    def _convert_neighbors(self, color: PieceColor, col: int, row: int):
        """Turn every opponent piece adjacent to (col, row) into COLOR."""
        grid = self._grid.reshape(EXTENDED_SIDE, EXTENDED_SIDE)
        r = row + BORDER
        c = col + BORDER
        around = grid[r - 1:r + 2, c - 1:c + 2]
        around[around == color.opposite()] = color


def _reflections(col: int, row: int):
    """The square itself and its mirror images through the board's middle."""
    mirror_col = SIDE - 1 - col
    mirror_row = SIDE - 1 - row
    return (
        (col, row),
        (mirror_col, mirror_row),
        (mirror_col, row),
        (col, mirror_row),
    )
