#!/usr/bin/env python3
"""
Self-Play Runner

Plays the automated player against itself from the starting layout (or
from the end of a reference game) and reports results and search speed.

Usage:
    python tools/self_play.py [--games 4] [--depths 2,3] [--start OPENING] [--verbose]
"""

import sys
import time
import argparse
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional

sys.path.insert(0, str(Path(__file__).parent.parent))

from tqdm import tqdm

from ataxx_engine.board import Board, PieceColor
from ataxx_engine.search import find_best_move
from ataxx_engine.utils.positions import REFERENCE_GAMES, board_from_moves, get_reference_game


@dataclass
class GameResult:
    """
    Outcome of one self-play game.

    Attributes:
        winner: RED, BLUE, or None for a draw
        red: Red pieces at the end
        blue: Blue pieces at the end
        moves: Moves and passes played (including the starting sequence)
        jumps: Consecutive jumps at the end
        nodes: Positions searched over the whole game
        time_taken: Seconds spent searching
    """
    winner: Optional[PieceColor]
    red: int
    blue: int
    moves: int
    jumps: int
    nodes: int
    time_taken: float


def setup_logging(verbose: bool = False):
    """Configure logging."""
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format='%(asctime)s [%(levelname)s] %(message)s',
        datefmt='%H:%M:%S'
    )


def format_time(seconds: float) -> str:
    """Format time"""
    if seconds < 1:
        return f"{seconds * 1000:.0f}ms"
    elif seconds < 60:
        return f"{seconds:.1f}s"
    else:
        minutes = int(seconds // 60)
        secs = seconds % 60
        return f"{minutes}m {secs:.0f}s"


def play_game(board: Board, depth: int, max_moves: int = 500) -> GameResult:
    """
    Play BOARD out with both sides searching to DEPTH.

    Args:
        board: Starting position (played on in place)
        depth: Search depth for both sides
        max_moves: Safety cap on moves played

    Returns:
        GameResult for the final position
    """
    nodes = 0
    start_time = time.time()

    for _ in range(max_moves):
        if board.game_over():
            break
        move, _, searched = find_best_move(board, depth)
        board.make_move(move)
        nodes += searched

    red = board.red_pieces()
    blue = board.blue_pieces()
    if red > blue:
        winner = PieceColor.RED
    elif blue > red:
        winner = PieceColor.BLUE
    else:
        winner = None

    return GameResult(
        winner=winner,
        red=red,
        blue=blue,
        moves=board.num_moves,
        jumps=board.num_jumps,
        nodes=nodes,
        time_taken=time.time() - start_time,
    )


def run_self_play(depths: List[int], games: int, start: Optional[str] = None) -> List[dict]:
    """
    Run self-play games at each depth.

    The search is deterministic, so repeated games from the same start
    replay the same moves; games > 1 is useful for timing.

    Args:
        depths: Search depths to try
        games: Games per depth
        start: Reference game id to start from (None = starting layout)
    """
    logger = logging.getLogger(__name__)
    moves = get_reference_game(start).moves if start else []

    print("=" * 80)
    print("SELF-PLAY - Ataxx Engine")
    print("=" * 80)
    print("Search: Minimax with Alpha-Beta Pruning, Material Evaluation")
    print(f"Start: {start or 'initial layout'}")
    print(f"Depths: {depths}")
    print("=" * 80)

    summary = []
    for depth in depths:
        results = []
        for _ in tqdm(range(games), desc=f"depth {depth}", unit="game"):
            board = board_from_moves(moves)
            results.append(play_game(board, depth))

        total_time = sum(r.time_taken for r in results)
        total_nodes = sum(r.nodes for r in results)
        nodes_per_sec = total_nodes / total_time if total_time > 0 else 0

        row = {
            'depth': depth,
            'red_wins': sum(1 for r in results if r.winner is PieceColor.RED),
            'blue_wins': sum(1 for r in results if r.winner is PieceColor.BLUE),
            'draws': sum(1 for r in results if r.winner is None),
            'avg_moves': sum(r.moves for r in results) / len(results),
            'total_time': total_time,
            'nodes_per_sec': nodes_per_sec,
            'results': results,
        }
        summary.append(row)

        last = results[-1]
        logger.info(
            f"depth {depth}: final score {last.red}-{last.blue} after {last.moves} moves "
            f"({total_nodes:,} nodes in {format_time(total_time)})"
        )

    print("\n" + "=" * 80)
    print("SUMMARY TABLE")
    print("=" * 80)
    print(f"{'Depth':<8} {'Red':<6} {'Blue':<6} {'Draw':<6} {'Avg Moves':<12} {'Time':<10} {'Nodes/sec':<15}")
    print("-" * 80)
    for r in summary:
        print(
            f"{r['depth']:<8} {r['red_wins']:<6} {r['blue_wins']:<6} {r['draws']:<6} "
            f"{r['avg_moves']:<12.1f} {format_time(r['total_time']):<10} {r['nodes_per_sec']:>12,.0f}"
        )
    print("=" * 80)

    return summary


def main():
    parser = argparse.ArgumentParser(
        description="Play the Ataxx engine against itself"
    )
    parser.add_argument(
        "--depths",
        type=str,
        default="2,3",
        help="Comma-separated list of depths to test (default: 2,3)"
    )
    parser.add_argument(
        "--games",
        type=int,
        default=1,
        help="Games per depth (default: 1)"
    )
    parser.add_argument(
        "--start",
        choices=[game.id for game in REFERENCE_GAMES],
        default=None,
        help="Start from the end of a reference game"
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable debug logging"
    )

    args = parser.parse_args()
    setup_logging(verbose=args.verbose)

    try:
        depths = [int(d.strip()) for d in args.depths.split(",")]
    except ValueError:
        print("Error: depths must be comma-separated integers")
        sys.exit(1)

    if args.games < 1:
        print("Error: --games must be at least 1")
        sys.exit(1)

    try:
        run_self_play(depths, args.games, start=args.start)
    except KeyboardInterrupt:
        print("\n\nSelf-play interrupted by user")
        sys.exit(1)


if __name__ == "__main__":
    main()
