"""
Shared fixtures and helpers for the board, rendering and session tests.
"""
from typing import Iterable, Tuple

import pytest

from sweeper import arrays
from sweeper.engine import Board


def lay_mines(board: Board, coords: Iterable[Tuple[int, int]]) -> Board:
    """Put mines exactly at ``coords`` and arm the board, bypassing the RNG."""
    coords = list(coords)
    for x, y in coords:
        board.get(x, y).is_mine = True
    counts = arrays.derive_counts(arrays.state_masks(board)['mine'])
    for y in range(board.height):
        for x in range(board.width):
            board.get(x, y).neighbor_mines = int(counts[y, x])
    board.num_mines = len(coords)
    board.mines_placed = True
    return board


def find_seed(width, height, mines, safe, wanted):
    """First seed whose placement around ``safe`` puts mines exactly on ``wanted``."""
    for seed in range(10000):
        board = Board(width, height, mines, seed=seed)
        board.place_mines(*safe)
        if set(board.mine_coordinates()) == set(wanted):
            return seed
    raise AssertionError("no seed found")


@pytest.fixture
def corner_mine_board() -> Board:
    """3x3 board with a single mine in the top-left corner."""
    return lay_mines(Board(3, 3, 1, seed=1), [(0, 0)])


@pytest.fixture
def corner_seed() -> int:
    """Seed giving a 5x5 board whose only mine sits at (4, 4) when (0, 0) is revealed first."""
    return find_seed(5, 5, 1, (0, 0), [(4, 4)])
