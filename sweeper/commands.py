from __future__ import annotations
import re
from dataclasses import dataclass
from enum import Enum
from typing import Optional, TextIO

from sweeper.engine import Board, CoordinateOrder
from sweeper.render import render_board

USAGE = ("Unknown command. Commands: r x y (reveal), f x y (flag), q (quit), "
         "n [w h] (new), p (print), P (print revealed)")
OUT_OF_RANGE = "Coordinates out of range"
PROMPT = ' > '

_LEADING_INT = re.compile(r'\s*([+-]?\d+)')


class Verb(Enum):
    REVEAL = 'reveal'
    FLAG = 'flag'
    NEW = 'new'
    QUIT = 'quit'
    PRINT = 'print'
    PRINT_REVEALED = 'print-revealed'
    UNKNOWN = 'unknown'


@dataclass
class Command:
    verb: Verb
    x: int = 0
    y: int = 0


def to_int(token: Optional[str]) -> int:
    """Leading integer of ``token``; 0 when there is none."""
    if not token:
        return 0
    m = _LEADING_INT.match(token)
    return int(m.group(1)) if m else 0


def _coords(order: CoordinateOrder, a: Optional[str], b: Optional[str]):
    if order is CoordinateOrder.COLUMN_FIRST:
        return to_int(a), to_int(b)
    return to_int(b), to_int(a)


def parse_command(line: str, order: CoordinateOrder, width: int) -> Command:
    tokens = line.split()
    verb = tokens[0] if tokens else ''
    a = tokens[1] if len(tokens) > 1 else None
    b = tokens[2] if len(tokens) > 2 else None
    if verb == 'r':
        return Command(Verb.REVEAL, *_coords(order, a, b))
    if verb in ('f', 'm'):
        return Command(Verb.FLAG, *_coords(order, a, b))
    if verb == 'n':
        # Width then height, whatever the coordinate order.
        return Command(Verb.NEW, to_int(a), to_int(b))
    if verb == 'q':
        return Command(Verb.QUIT)
    if verb == 'p':
        return Command(Verb.PRINT)
    if verb == 'P':
        return Command(Verb.PRINT_REVEALED)
    if re.fullmatch(r'[+-]?\d+', verb) and 0 <= int(verb) < width:
        # Bare coordinates: the leading number is the first component.
        return Command(Verb.REVEAL, *_coords(order, verb, a))
    return Command(Verb.UNKNOWN)


def read_command(board: Board, stdin: TextIO, stdout: TextIO) -> Command:
    """Prompt until a turn-consuming command is entered.

    Printing, unknown verbs and out-of-range coordinates are handled here
    and never leave the loop. End of input reads as quit.
    """
    while True:
        print(PROMPT, end='', file=stdout, flush=True)
        line = stdin.readline()
        if not line:
            return Command(Verb.QUIT)
        command = parse_command(line, board.order, board.width)
        if command.verb is Verb.PRINT:
            print(render_board(board), file=stdout)
        elif command.verb is Verb.PRINT_REVEALED:
            print(render_board(board, reveal=True), file=stdout)
        elif command.verb is Verb.UNKNOWN:
            print(USAGE, file=stdout)
        elif command.verb in (Verb.REVEAL, Verb.FLAG) and not board.in_bounds(command.x, command.y):
            print(OUT_OF_RANGE, file=stdout)
        else:
            return command
