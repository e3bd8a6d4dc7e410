from __future__ import annotations
import logging
import random
from dataclasses import dataclass
from enum import Enum
from typing import List, Tuple, Optional

from sweeper import arrays

logger = logging.getLogger(__name__)

Coordinate = Tuple[int, int]

DEFAULT_WIDTH = 20
DEFAULT_HEIGHT = 20
DEFAULT_MINES = 70


def fresh_seed() -> int:
    return random.SystemRandom().getrandbits(64)


@dataclass
class Cell:
    is_mine: bool = False
    is_revealed: bool = False
    is_flagged: bool = False
    neighbor_mines: int = 0


class CoordinateOrder(Enum):
    ROW_FIRST = 'row-first'
    COLUMN_FIRST = 'column-first'


class RevealOutcome(Enum):
    REVEALED = 'revealed'
    CHORDED = 'chorded'
    BAD_CHORD = 'bad-chord'
    EXPLODED = 'exploded'
    NOOP = 'noop'


def validate_geometry(width: int, height: int, num_mines: int) -> None:
    if width <= 0 or height <= 0:
        raise ValueError(f"board dimensions must be positive, got {width}x{height}")
    if num_mines < 0:
        raise ValueError(f"mine count must not be negative, got {num_mines}")
    if num_mines >= width * height:
        raise ValueError(
            f"{num_mines} mines do not fit on a {width}x{height} board "
            f"(at most {width * height - 1})"
        )


class Board:
    def __init__(self, width: int = DEFAULT_WIDTH, height: int = DEFAULT_HEIGHT,
                 num_mines: int = DEFAULT_MINES, seed: Optional[int] = None,
                 order: CoordinateOrder = CoordinateOrder.ROW_FIRST):
        validate_geometry(width, height, num_mines)
        self.width = width
        self.height = height
        self.num_mines = num_mines
        self.order = order
        self.seed = fresh_seed() if seed is None else seed
        self.cells: List[Cell] = [Cell() for _ in range(width * height)]
        self.mines_placed = False
        self.game_over = False
        self.win = False
        self.elapsed_turns = 0

    # Grid storage

    def index(self, x: int, y: int) -> int:
        return y * self.width + x

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def get(self, x: int, y: int) -> Cell:
        assert self.in_bounds(x, y), f"({x}, {y}) outside {self.width}x{self.height} board"
        return self.cells[self.index(x, y)]

    def set(self, x: int, y: int, cell: Cell) -> None:
        assert self.in_bounds(x, y), f"({x}, {y}) outside {self.width}x{self.height} board"
        self.cells[self.index(x, y)] = cell

    def neighbors(self, x: int, y: int) -> List[Coordinate]:
        coords = []
        for dy in (-1, 0, 1):
            for dx in (-1, 0, 1):
                if dx == 0 and dy == 0:
                    continue
                nx, ny = x + dx, y + dy
                if self.in_bounds(nx, ny):
                    coords.append((nx, ny))
        return coords

    # Mine placement

    def place_mines(self, safe_x: int, safe_y: int) -> None:
        """Scatter ``num_mines`` mines, never on (safe_x, safe_y).

        Draws flat indices from a generator seeded with ``self.seed`` and
        rejects the safe cell and cells that already hold a mine, so the same
        seed and first reveal always give the same board.
        """
        assert not self.mines_placed, "mines are placed once per game"
        assert self.in_bounds(safe_x, safe_y)
        rng = random.Random(self.seed)
        blocked = self.index(safe_x, safe_y)
        last = self.width * self.height - 1
        placed = 0
        rejected = 0
        while placed < self.num_mines:
            pos = rng.randint(0, last)
            if pos == blocked or self.cells[pos].is_mine:
                rejected += 1
                continue
            cell = self.cells[pos]
            cell.is_mine = True
            cell.neighbor_mines = 0
            placed += 1
            for nx, ny in self.neighbors(pos % self.width, pos // self.width):
                neighbor = self.get(nx, ny)
                if not neighbor.is_mine:
                    neighbor.neighbor_mines += 1
        self.mines_placed = True
        logger.debug("placed %d mines with seed %x around safe cell (%d, %d), %d draws rejected",
                     placed, self.seed, safe_x, safe_y, rejected)

    def mine_coordinates(self) -> List[Coordinate]:
        return [(i % self.width, i // self.width) for i, c in enumerate(self.cells) if c.is_mine]

    # Reveal engine

    def reveal_cell(self, x: int, y: int, recursive: bool = False) -> int:
        """Reveal (x, y) and flood through zero-count cells.

        Returns how many cells were newly revealed. The default walks an
        explicit stack; ``recursive=True`` uses plain recursion, which is
        bounded by the size of the blank region.
        """
        if recursive:
            count = self._reveal_recursive(x, y)
        else:
            count = 0
            stack = [(x, y)]
            while stack:
                cx, cy = stack.pop()
                cell = self.get(cx, cy)
                if cell.is_revealed:
                    continue
                cell.is_flagged = False
                cell.is_revealed = True
                count += 1
                if cell.is_mine or cell.neighbor_mines > 0:
                    continue
                stack.extend(self.neighbors(cx, cy))
        if count > 1:
            logger.debug("flood from (%d, %d) revealed %d cells", x, y, count)
        return count

    def _reveal_recursive(self, x: int, y: int) -> int:
        cell = self.get(x, y)
        if cell.is_revealed:
            return 0
        cell.is_flagged = False
        cell.is_revealed = True
        if cell.is_mine or cell.neighbor_mines > 0:
            return 1
        return 1 + sum(self._reveal_recursive(nx, ny) for nx, ny in self.neighbors(x, y))

    def chord_reveal(self, x: int, y: int) -> bool:
        cell = self.get(x, y)
        assert cell.is_revealed and cell.neighbor_mines > 0, "chording needs a revealed number"
        nbrs = self.neighbors(x, y)
        flags = sum(1 for nx, ny in nbrs if self.get(nx, ny).is_flagged)
        if flags != cell.neighbor_mines:
            return False
        # Mine neighbours are skipped even when a flag sits on a safe cell.
        for nx, ny in nbrs:
            if not self.get(nx, ny).is_mine:
                self.reveal_cell(nx, ny)
        return True

    def reveal(self, x: int, y: int) -> RevealOutcome:
        """Player reveal: arms the board, chords numbers, detects a loss."""
        assert self.in_bounds(x, y)
        if self.game_over:
            return RevealOutcome.NOOP
        if not self.mines_placed:
            self.place_mines(x, y)
        cell = self.get(x, y)
        if cell.is_revealed:
            if cell.neighbor_mines == 0:
                return RevealOutcome.NOOP
            if not self.chord_reveal(x, y):
                return RevealOutcome.BAD_CHORD
            return RevealOutcome.CHORDED
        self.reveal_cell(x, y)
        if cell.is_mine:
            self.game_over = True
            self.win = False
            logger.info("mine revealed at (%d, %d) on turn %d", x, y, self.elapsed_turns)
            return RevealOutcome.EXPLODED
        return RevealOutcome.REVEALED

    def toggle_flag(self, x: int, y: int) -> bool:
        cell = self.get(x, y)
        if self.game_over or cell.is_revealed:
            return False
        cell.is_flagged = not cell.is_flagged
        return True

    # Win detection

    def win_condition(self) -> bool:
        correctly_flagged, unrevealed = arrays.win_counts(self)
        return correctly_flagged + unrevealed == self.num_mines

    def check_win(self) -> bool:
        # Before the first reveal there are no mines to clear.
        if self.game_over or not self.mines_placed:
            return False
        if not self.win_condition():
            return False
        for cell in self.cells:
            if cell.is_mine:
                cell.is_flagged = True
        self.game_over = True
        self.win = True
        logger.info("board cleared on turn %d", self.elapsed_turns)
        return True

    @property
    def flag_count(self) -> int:
        return sum(1 for c in self.cells if c.is_flagged)

    @property
    def mines_remaining(self) -> int:
        return self.num_mines - self.flag_count

    # Lifecycle

    def new_game(self, width: int = 0, height: int = 0, seed: Optional[int] = None) -> None:
        if width > 0 and height > 0:
            validate_geometry(width, height, self.num_mines)
            self.width, self.height = width, height
        self.cells = [Cell() for _ in range(self.width * self.height)]
        self.seed = fresh_seed() if seed is None else seed
        self.mines_placed = False
        self.game_over = False
        self.win = False
        self.elapsed_turns = 0
        logger.debug("new %dx%d game with %d mines, seed %x",
                     self.width, self.height, self.num_mines, self.seed)
