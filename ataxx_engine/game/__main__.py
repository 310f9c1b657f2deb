"""
Main entry point for playing Ataxx on the console.

Usage:
    python -m ataxx_engine.game [--red manual] [--blue auto] [--depth 4]
"""

import argparse

from ataxx_engine.config import EngineConfig, PLAYER_KINDS
from ataxx_engine.game.interface import AtaxxGame


def main():
    parser = argparse.ArgumentParser(description="Play Ataxx on the console")
    parser.add_argument(
        "--red",
        choices=PLAYER_KINDS,
        default="manual",
        help="Who plays Red (default: manual)"
    )
    parser.add_argument(
        "--blue",
        choices=PLAYER_KINDS,
        default="auto",
        help="Who plays Blue (default: auto)"
    )
    parser.add_argument(
        "--depth",
        type=int,
        default=4,
        help="Search depth for automated players (default: 4)"
    )
    parser.add_argument(
        "--log-file",
        type=str,
        default=None,
        help="Session log file (default: ~/.ataxx/engine.log)"
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug logging"
    )
    args = parser.parse_args()

    options = dict(
        search_depth=args.depth,
        red_player=args.red,
        blue_player=args.blue,
        debug=args.debug,
    )
    if args.log_file:
        options["log_file"] = args.log_file

    try:
        config = EngineConfig(**options)
    except ValueError as e:
        parser.error(str(e))

    AtaxxGame(config).run()


if __name__ == "__main__":
    main()
