import numpy as np

from conftest import lay_mines
from sweeper import arrays
from sweeper.engine import Board


def test_state_masks_shape_and_values(corner_mine_board):
    board = corner_mine_board
    board.reveal(2, 2)
    board.toggle_flag(0, 0)
    masks = arrays.state_masks(board)
    assert masks['mine'].shape == (3, 3)
    assert masks['mine'][0, 0] and masks['mine'].sum() == 1
    assert masks['flagged'][0, 0] and masks['flagged'].sum() == 1
    assert masks['revealed'].sum() == 8


def test_masks_index_rows_by_y():
    board = lay_mines(Board(4, 2, 1, seed=0), [(3, 1)])
    assert arrays.state_masks(board)['mine'][1, 3]


def test_derive_counts():
    mine = np.array([
        [True, False, False],
        [False, False, False],
        [False, False, True],
    ])
    expected = np.array([
        [0, 1, 0],
        [1, 2, 1],
        [0, 1, 0],
    ])
    assert (arrays.derive_counts(mine) == expected).all()


def test_stored_counts_match_placement():
    board = Board(7, 5, 9, seed=0x5eed)
    board.place_mines(3, 2)
    mine = arrays.state_masks(board)['mine']
    assert (arrays.stored_counts(board) == arrays.derive_counts(mine)).all()


def test_win_counts(corner_mine_board):
    board = corner_mine_board
    assert arrays.win_counts(board) == (0, 9)
    board.toggle_flag(0, 0)
    board.toggle_flag(1, 0)
    assert arrays.win_counts(board) == (1, 7)
    board.reveal(2, 2)
    assert arrays.win_counts(board) == (1, 0)
