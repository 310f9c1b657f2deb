"""
Console Commands

Parses one line of console input into a tagged Command. The session
dispatches on Command.kind through a handler table.

Commands:
    start               leave setup and start playing
    clear               abandon the game, back to setup on a fresh board
    block <sq>          block sq and its reflections (setup only)
    auto <color>        let the engine play color (setup only)
    manual <color>      let the console play color (setup only)
    dump                print the board
    help                print the command summary
    pass                pass (only legal with no other move)
    quit                end the session (also on end of input)
    <c0><r0>-<c1><r1>   piece move, e.g. a7-b7
"""

import re
from enum import Enum
from typing import NamedTuple, Optional, Tuple

from ataxx_engine.board import Move


class CommandType(Enum):
    START = "start"
    CLEAR = "clear"
    BLOCK = "block"
    AUTO = "auto"
    MANUAL = "manual"
    DUMP = "dump"
    HELP = "help"
    PASS = "pass"
    QUIT = "quit"
    MOVE = "move"
    EMPTY = "empty"
    ERROR = "error"


class Command(NamedTuple):
    """A parsed console line."""

    kind: CommandType
    operands: Tuple[str, ...] = ()
    move: Optional[Move] = None


# Tried in order; the first full match wins
_PATTERNS = [
    (re.compile(r"^$"), CommandType.EMPTY),
    (re.compile(r"^start$"), CommandType.START),
    (re.compile(r"^clear$"), CommandType.CLEAR),
    (re.compile(r"^block\s+([a-g][1-7])$"), CommandType.BLOCK),
    (re.compile(r"^auto\s+(red|blue)$"), CommandType.AUTO),
    (re.compile(r"^manual\s+(red|blue)$"), CommandType.MANUAL),
    (re.compile(r"^dump$"), CommandType.DUMP),
    (re.compile(r"^help$"), CommandType.HELP),
    (re.compile(r"^pass$"), CommandType.PASS),
    (re.compile(r"^quit$"), CommandType.QUIT),
    (re.compile(r"^([a-g][1-7]-[a-g][1-7])$"), CommandType.MOVE),
]


def parse_command(line: Optional[str]) -> Command:
    """
    Parse a console line.

    Args:
        line: Input text, or None at end of input

    Returns:
        Command; end of input becomes QUIT, unrecognised text becomes
        ERROR with the original text as its only operand
    """
    if line is None:
        return Command(CommandType.QUIT)

    text = line.strip().lower()
    for pattern, kind in _PATTERNS:
        match = pattern.match(text)
        if match is None:
            continue
        operands = match.groups()
        if kind is CommandType.MOVE:
            return Command(kind, operands, Move.parse(operands[0]))
        return Command(kind, operands)

    return Command(CommandType.ERROR, (line.strip(),))
