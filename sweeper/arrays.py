from __future__ import annotations
from typing import Dict, Tuple
import numpy as np

# Whole-board numpy views, shaped (height, width):
# - boolean masks for mine / revealed / flagged
# - the stored neighbour counts
# - neighbour counts derived from the mine mask alone


def state_masks(board) -> Dict[str, np.ndarray]:
    shape = (board.height, board.width)
    mine = np.fromiter((c.is_mine for c in board.cells), dtype=bool, count=len(board.cells))
    revealed = np.fromiter((c.is_revealed for c in board.cells), dtype=bool, count=len(board.cells))
    flagged = np.fromiter((c.is_flagged for c in board.cells), dtype=bool, count=len(board.cells))
    return {
        'mine': mine.reshape(shape),
        'revealed': revealed.reshape(shape),
        'flagged': flagged.reshape(shape),
    }


def stored_counts(board) -> np.ndarray:
    counts = np.fromiter((c.neighbor_mines for c in board.cells), dtype=np.int8, count=len(board.cells))
    return counts.reshape(board.height, board.width)


def derive_counts(mine: np.ndarray) -> np.ndarray:
    """Neighbour mine counts from a mine mask; mine cells get 0."""
    h, w = mine.shape
    padded = np.pad(mine.astype(np.int8), 1)
    counts = np.zeros((h, w), dtype=np.int8)
    for dy in (-1, 0, 1):
        for dx in (-1, 0, 1):
            if dx == 0 and dy == 0:
                continue
            counts += padded[1 + dy:1 + dy + h, 1 + dx:1 + dx + w]
    counts[mine] = 0
    return counts


def win_counts(board) -> Tuple[int, int]:
    """(flagged mines, cells neither flagged nor revealed)."""
    masks = state_masks(board)
    correctly_flagged = int(np.count_nonzero(masks['flagged'] & masks['mine']))
    unrevealed = int(np.count_nonzero(~masks['flagged'] & ~masks['revealed']))
    return correctly_flagged, unrevealed
