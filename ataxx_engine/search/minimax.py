"""
Minimax Search with Alpha-Beta Pruning

This module implements the move search used by the automated player.
Minimax explores the game tree to a fixed depth, and alpha-beta pruning
skips branches that cannot change the result.

Key Concepts:
    - Sense: +1 when the side to move is Red (maximize), -1 for Blue
      (minimize); evaluations are always from Red's perspective
    - Fixed depth: SEARCH_DEPTH plies, no iterative deepening
    - No move ordering: moves are searched in Board.legal_moves() order
    - Tie-break: the earliest move that strictly improves the bound wins

Scratch Board:
    find_best_move() searches a private copy of the board, so neither the
    caller's board nor its observers see the speculative make/undo cycles.

References:
    - Minimax: https://www.chessprogramming.org/Minimax
    - Alpha-Beta: https://www.chessprogramming.org/Alpha-Beta
"""

import logging
import time
from typing import List, Optional, Tuple

from ataxx_engine.board import Board, Move, PieceColor
from ataxx_engine.evaluation.base import Evaluator, INFINITY
from ataxx_engine.evaluation.material import MaterialEvaluator

SEARCH_DEPTH = 4  # Plies searched before the static evaluation

logger = logging.getLogger(__name__)


def minimax(
    board: Board,
    depth: int,
    alpha: float,
    beta: float,
    sense: int,
    evaluator: Evaluator,
    best_move: Optional[List[Optional[Move]]] = None,
    nodes_searched: Optional[List[int]] = None,
) -> float:
    """
    Minimax search with alpha-beta pruning.

    Searches from BOARD, whose side to move must match SENSE, and returns
    the value of the position. The board is left as it was found.

    Args:
        board: Position to search (mutated and restored via make/undo)
        depth: Remaining search depth
        alpha: Best value the maximizer is assured of
        beta: Best value the minimizer is assured of
        sense: +1 to maximize (Red to move), -1 to minimize (Blue to move)
        evaluator: Static evaluation used at depth 0
        best_move: One-element list that receives the move achieving the
            returned value; only passed at the root
        nodes_searched: Optional mutable list [count] to track positions visited

    Returns:
        float: alpha when maximizing, beta when minimizing

    Algorithm:
        1. depth = 0 → static evaluation
        2. For each legal move (a lone pass when there is none):
            a. Make the move
            b. Search depth - 1 with the sense flipped
            c. Undo the move
            d. Raise alpha (max) or lower beta (min) on a strict improvement,
               recording the move at the root
            e. Stop once alpha >= beta
    """
    if nodes_searched is not None:
        nodes_searched[0] += 1

    if depth == 0:
        return evaluator.evaluate(board)

    for move in board.legal_moves(board.whose_move):
        board.make_move(move)
        score = minimax(
            board,
            depth - 1,
            alpha,
            beta,
            -sense,
            evaluator,
            None,
            nodes_searched,
        )
        board.undo()

        if sense == 1 and score > alpha:
            alpha = score
            if best_move is not None:
                best_move[0] = move
        elif sense == -1 and score < beta:
            beta = score
            if best_move is not None:
                best_move[0] = move

        if alpha >= beta:
            break

    return alpha if sense == 1 else beta


def find_best_move(
    board: Board,
    depth: int = SEARCH_DEPTH,
    evaluator: Optional[Evaluator] = None,
) -> Tuple[Move, float, int]:
    """
    Find the best move for the side to move on BOARD.

    Args:
        board: Current position (not modified)
        depth: Search depth in plies (default: SEARCH_DEPTH)
        evaluator: Position evaluation (default: MaterialEvaluator)

    Returns:
        Tuple of (best_move, score, nodes)
            - best_move: Legal move, or Move.PASS when the mover cannot move
            - score: Value of the best move from Red's perspective
            - nodes: Number of positions visited (0 when passing)

    Raises:
        ValueError: If depth < 1
    """
    if depth < 1:
        raise ValueError(f"Search depth must be at least 1, got {depth}")
    if evaluator is None:
        evaluator = MaterialEvaluator()

    mover = board.whose_move
    if not board.can_move(mover):
        score = evaluator.evaluate(board)
        logger.debug(f"{mover} has no moves, passing (score {score})")
        return Move.PASS, score, 0

    sense = 1 if mover == PieceColor.RED else -1
    scratch = board.copy()
    best: List[Optional[Move]] = [None]
    nodes = [0]

    start_time = time.time()
    score = minimax(
        scratch,
        depth,
        -INFINITY,
        INFINITY,
        sense,
        evaluator,
        best_move=best,
        nodes_searched=nodes,
    )
    elapsed_ms = int((time.time() - start_time) * 1000)

    logger.debug(
        f"Search complete: mover={mover}, depth={depth}, best_move={best[0]}, "
        f"score={score}, nodes={nodes[0]}, time={elapsed_ms}ms"
    )
    return best[0], score, nodes[0]
