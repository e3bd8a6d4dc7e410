from __future__ import annotations
from typing import List

from sweeper.engine import Board, Cell

HIDDEN = ' [ ]'
FLAG = ' [!]'
MINE = ' [X]'
FLAGGED_MINE = ' [x]'
BLANK = '    '


def cell_text(board: Board, cell: Cell, reveal: bool = False) -> str:
    if board.game_over and cell.is_mine:
        return MINE
    if cell.is_flagged:
        if reveal and cell.is_mine:
            return FLAGGED_MINE
        return FLAG
    if reveal or cell.is_revealed:
        if cell.is_mine:
            return MINE
        if cell.neighbor_mines > 0:
            return f" {cell.neighbor_mines:>3}"
        return BLANK
    return HIDDEN


def render_board(board: Board, reveal: bool = False) -> str:
    """Text grid with a seed line, column header, row labels and a footer.

    The footer holds the mines-minus-flags counter and the turn counter.
    ``reveal`` shows every cell, marking flagged mines with ``[x]``.
    """
    lines: List[str] = [f"Seed: {board.seed:x}"]
    lines.append('     ' + ''.join(f" {x:>3}" for x in range(board.width)))
    lines.append('   | ' + '----' * board.width)
    for y in range(board.height):
        row = ''.join(cell_text(board, board.get(x, y), reveal) for x in range(board.width))
        lines.append(f"{y:>3}| {row}")
    lines.append(f"   |  [{board.mines_remaining:>5}] [{board.elapsed_turns:>5}]")
    return '\n'.join(lines)
