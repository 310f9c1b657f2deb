"""
Console Session

This module runs an Ataxx session driven by text commands, in the spirit of
an engine protocol loop: read a line, dispatch it, respond on stdout.

States:
    - SETUP: place blocks, choose players, make setup moves, 'start'
    - PLAYING: players are asked for moves in turn until the game ends
    - FINISHED: winner reported; 'clear' returns to SETUP

Moves:
    The side to move is asked through its Player. Automated players answer
    at once; manual players read commands via read_move() until a move
    arrives, executing any other command along the way.

Errors:
    GameError raised by the board (illegal move, block, pass) or by a
    command in the wrong state is reported on stderr and logged; the
    session carries on with the board untouched.
"""

import logging
import sys
from enum import Enum
from pathlib import Path
from typing import Dict, Iterable, Optional

from ataxx_engine.board import Board, GameError, Move, PieceColor, dump, parse_square
from ataxx_engine.config import EngineConfig
from ataxx_engine.game.commands import Command, CommandType, parse_command
from ataxx_engine.players import AIPlayer, ManualPlayer, Player

PROMPT = "ataxx: "

HELP_TEXT = """\
Commands:
  start               start playing
  clear               abandon the game and return to setup
  block <sq>          block sq and its reflections (setup only)
  auto <color>        engine plays color (setup only)
  manual <color>      console plays color (setup only)
  dump                print the board
  pass                pass (only when no move is possible)
  quit                end the session
  <c0><r0>-<c1><r1>   move, e.g. a7-b7"""


class GameState(Enum):
    SETUP = "setup"
    PLAYING = "playing"
    FINISHED = "finished"


def setup_logger(log_file: Path, debug: bool = False) -> logging.Logger:
    """
    Setup file-based logger for the session.

    Args:
        log_file: File to write the log to (parent directories are created)
        debug: If True, log at DEBUG level; otherwise INFO level

    Returns:
        Configured 'ataxx_engine' logger, parent of every module logger
    """
    log_file = Path(log_file)
    log_file.parent.mkdir(parents=True, exist_ok=True)

    logger = logging.getLogger("ataxx_engine")
    logger.setLevel(logging.DEBUG if debug else logging.INFO)

    for handler in list(logger.handlers):
        handler.close()
    logger.handlers.clear()

    handler = logging.FileHandler(log_file, mode='w')
    formatter = logging.Formatter(
        '%(asctime)s [%(levelname)s] %(message)s',
        datefmt='%H:%M:%S'
    )
    handler.setFormatter(formatter)
    logger.addHandler(handler)

    return logger


class AtaxxGame:
    """
    A console game session.

    Attributes:
        config: Session configuration
        board: Board being played on (owned by the session)
        players: Player for each side
        state: Current GameState
        running: False once 'quit' or end of input is seen

    Methods:
        run: Main command/play loop
        do_command: Execute one line of input
        read_move: Move source for manual players
    """

    def __init__(
        self,
        config: Optional[EngineConfig] = None,
        lines: Optional[Iterable[str]] = None,
        board: Optional[Board] = None,
    ):
        """
        Initialize a session.

        Args:
            config: Session configuration (default: EngineConfig())
            lines: Input lines; stdin is read when omitted
            board: Board to play on (default: a new Board)
        """
        self.config = config if config else EngineConfig()
        self.board = board if board is not None else Board()
        self._lines = iter(lines) if lines is not None else None

        self.state = GameState.SETUP
        self.running = False

        self.logger = setup_logger(self.config.log_file, debug=self.config.debug)
        self.board.add_observer(self._board_changed)

        self.players: Dict[PieceColor, Player] = {
            PieceColor.RED: self._make_player(PieceColor.RED, self.config.red_player),
            PieceColor.BLUE: self._make_player(PieceColor.BLUE, self.config.blue_player),
        }

        self._handlers = {
            CommandType.START: self.handle_start,
            CommandType.CLEAR: self.handle_clear,
            CommandType.BLOCK: self.handle_block,
            CommandType.AUTO: self.handle_auto,
            CommandType.MANUAL: self.handle_manual,
            CommandType.DUMP: self.handle_dump,
            CommandType.HELP: self.handle_help,
            CommandType.PASS: self.handle_pass,
            CommandType.QUIT: self.handle_quit,
            CommandType.MOVE: self.handle_move,
            CommandType.EMPTY: lambda command: None,
            CommandType.ERROR: self.handle_error,
        }

        self.logger.info("=== Ataxx session started ===")
        self.logger.info(f"Config: {self.config!r}")

    def run(self):
        """
        Main loop.

        In SETUP and FINISHED, reads and executes commands. In PLAYING,
        asks the side to move for its move and applies it, reporting the
        winner once the game is over. Returns after 'quit' or end of input.
        """
        self.running = True
        while self.running:
            if self.state is GameState.PLAYING:
                self._play_turn()
            else:
                self.do_command(self._next_line(PROMPT))
        self.logger.info("=== Ataxx session ended ===")

    def do_command(self, line: Optional[str]):
        """Parse and execute one line of input."""
        self.dispatch(parse_command(line))

    def dispatch(self, command: Command):
        """Execute COMMAND, reporting any GameError it raises."""
        self.logger.debug(f">>> {command.kind.value} {' '.join(command.operands)}")
        try:
            self._handlers[command.kind](command)
        except GameError as e:
            self.logger.warning(f"{command.kind.value}: {e}")
            print(f"Error: {e}", file=sys.stderr)

    def read_move(self, color: PieceColor, prompt: str) -> Optional[Move]:
        """
        Read commands until a move for COLOR arrives.

        Other commands are executed as they come. A 'pass' is returned as
        Move.PASS only when COLOR cannot move; otherwise it is handled (and
        rejected) like any other command.

        Returns:
            The move, or None if the session left PLAYING first
        """
        while self.running and self.state is GameState.PLAYING:
            command = parse_command(self._next_line(prompt))
            if command.kind is CommandType.MOVE:
                return command.move
            if command.kind is CommandType.PASS and not self.board.can_move(color):
                return Move.PASS
            self.dispatch(command)
        return None

    # ------------------------------------------------------------------
    # Command handlers
    # ------------------------------------------------------------------

    def handle_start(self, command: Command):
        self._check_state(command, GameState.SETUP)
        self.state = GameState.PLAYING
        self.logger.info("Game started")

    def handle_clear(self, command: Command):
        self.board.clear()
        self.state = GameState.SETUP
        self.logger.info("Board cleared, back to setup")

    def handle_block(self, command: Command):
        self._check_state(command, GameState.SETUP)
        col, row = parse_square(command.operands[0])
        self.board.set_block(col, row)
        self.logger.info(f"Block placed at {command.operands[0]}")

    def handle_auto(self, command: Command):
        self._check_state(command, GameState.SETUP)
        color = PieceColor.parse(command.operands[0])
        self.players[color] = self._make_player(color, "auto")

    def handle_manual(self, command: Command):
        self._check_state(command, GameState.SETUP)
        color = PieceColor.parse(command.operands[0])
        self.players[color] = self._make_player(color, "manual")

    def handle_dump(self, command: Command):
        print(dump(self.board))
        sys.stdout.flush()

    def handle_help(self, command: Command):
        print(HELP_TEXT)

    def handle_pass(self, command: Command):
        self._check_state(command, GameState.SETUP, GameState.PLAYING)
        if not self.board.legal_move(Move.PASS):
            raise GameError(f"Illegal pass: {self.board.whose_move} has legal moves")
        self.board.make_move(Move.PASS)

    def handle_move(self, command: Command):
        self._check_state(command, GameState.SETUP, GameState.PLAYING)
        self.board.make_move(command.move)

    def handle_quit(self, command: Command):
        self.logger.info("Handling: quit")
        self.running = False

    def handle_error(self, command: Command):
        raise GameError(f"Command not understood: {command.operands[0]!r}")

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def report_winner(self):
        """Print the outcome of the finished game."""
        red = self.board.red_pieces()
        blue = self.board.blue_pieces()
        if red > blue:
            message = "Red wins."
        elif blue > red:
            message = "Blue wins."
        else:
            message = "Draw."
        print(message)
        sys.stdout.flush()
        self.logger.info(f"Game over after {self.board.num_moves} moves: {message} ({red}-{blue})")

    def _play_turn(self):
        if self.board.game_over():
            self.report_winner()
            self.state = GameState.FINISHED
            return

        player = self.players[self.board.whose_move]
        move = player.get_move(self.board)
        if move is None or self.state is not GameState.PLAYING:
            return

        try:
            self.board.make_move(move)
        except GameError as e:
            self.logger.warning(f"{player.color}: {e}")
            print(f"Error: {e}", file=sys.stderr)
            return

        if isinstance(player, AIPlayer):
            if move.is_pass:
                print(f"{player.color} passes.")
            else:
                print(f"{player.color} moves {move}.")
            sys.stdout.flush()

    def _make_player(self, color: PieceColor, kind: str) -> Player:
        if kind == "auto":
            return AIPlayer(color, depth=self.config.search_depth)
        return ManualPlayer(color, self.read_move)

    def _check_state(self, command: Command, *states: GameState):
        if self.state not in states:
            raise GameError(f"'{command.kind.value}' command is not allowed now")

    def _next_line(self, prompt: str) -> Optional[str]:
        """Return the next input line, or None at end of input."""
        if self._lines is None:
            try:
                return input(prompt)
            except EOFError:
                return None
        return next(self._lines, None)

    def _board_changed(self, board: Board):
        self.logger.debug(f"Board changed (version {board.version}): {board!r}")
