"""
Engine Errors

Rule violations raised by board mutators and by the text parsers.
Queries never raise: off-board lookups report BLOCKED and legality
checks return booleans.
"""


class GameError(ValueError):
    """
    Raised when an operation would break the rules of the game.

    Examples:
        - make_move() with an illegal move
        - pass_turn() while the mover still has moves
        - set_block() on an occupied or asymmetric square
        - undo() with an empty history
        - malformed move, square or color text

    The board is never modified when a GameError is raised.
    """
