"""
Search Module

This module implements the move search: minimax with alpha-beta pruning to
a fixed depth over the board engine.

Key Components:
    - minimax: Core recursive search with alpha-beta pruning
    - find_best_move: Root-level search on a scratch copy of the board
    - SEARCH_DEPTH: Default search depth (4 plies)
"""

from ataxx_engine.search.minimax import minimax, find_best_move, SEARCH_DEPTH

__all__ = ['minimax', 'find_best_move', 'SEARCH_DEPTH']
