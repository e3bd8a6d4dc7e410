from __future__ import annotations
import argparse
import logging
import os
import sys
from typing import List, Optional

from sweeper.engine import Board, CoordinateOrder, DEFAULT_WIDTH, DEFAULT_HEIGHT, DEFAULT_MINES
from sweeper.game import ConsoleGame


def hex_seed(text: str) -> int:
    try:
        value = int(text, 16)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid hexadecimal seed: {text!r}")
    if not 0 <= value < 2 ** 64:
        raise argparse.ArgumentTypeError(f"seed must fit in 64 bits: {text!r}")
    return value


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description='Clear the minefield from the console.',
                                     allow_abbrev=False)
    parser.add_argument('--width', type=int, default=DEFAULT_WIDTH)
    parser.add_argument('--height', type=int, default=DEFAULT_HEIGHT)
    parser.add_argument('--mines', type=int, default=DEFAULT_MINES)
    parser.add_argument('--seed', type=hex_seed, default=None,
                        help='Hexadecimal RNG seed for the first game; random when omitted')
    parser.add_argument('--cartesian', action='store_true',
                        help='Read coordinates as column then row (default: row then column)')
    parser.add_argument('--log-level', type=str.upper, default=os.getenv('SWEEPER_LOG_LEVEL', 'WARNING').upper(),
                        choices=['DEBUG', 'INFO', 'WARNING', 'ERROR'],
                        help='Logging level for diagnostics on stderr')
    return parser


def make_board(args: argparse.Namespace, parser: argparse.ArgumentParser) -> Board:
    order = CoordinateOrder.COLUMN_FIRST if args.cartesian else CoordinateOrder.ROW_FIRST
    try:
        return Board(args.width, args.height, args.mines, seed=args.seed, order=order)
    except ValueError as error:
        parser.error(str(error))


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args, _unknown = parser.parse_known_args(argv)
    logging.basicConfig(level=args.log_level, format='[%(name)s] %(levelname)s %(message)s')
    board = make_board(args, parser)
    return ConsoleGame(board).run()


if __name__ == '__main__':
    sys.exit(main())
