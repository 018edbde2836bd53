"""Randomized backtracking generator for complete Sudoku grids."""

import logging

import numpy as np

from .errors import GenerationError, InvalidInputError
from .grid import DIGITS, EMPTY, SIZE, Grid, as_grid, empty_grid, fits, freeze
from .validator import is_valid_board

logger = logging.getLogger(__name__)

RngLike = int | np.random.Generator | None


def make_rng(seed: RngLike = None) -> np.random.Generator:
    """
    Build the randomness source used by generation and carving.

    Args:
        seed: None for OS entropy, an int seed for reproducible output,
            or an existing Generator which is returned unchanged.
    """
    if isinstance(seed, np.random.Generator):
        return seed
    return np.random.default_rng(seed)


class _Search:
    """Backtracking state for one fill call."""

    def __init__(self, grid: Grid, rng: np.random.Generator):
        self.grid = grid
        self.rng = rng
        self.placements = 0
        self.backtracks = 0

    def _next_empty(self) -> tuple[int, int] | None:
        empties = np.argwhere(self.grid == EMPTY)
        if len(empties) == 0:
            return None
        row, col = empties[0]
        return int(row), int(col)

    def fill(self) -> bool:
        cell = self._next_empty()
        if cell is None:
            return True
        row, col = cell

        for num in self.rng.permutation(DIGITS):
            num = int(num)
            if not fits(self.grid, row, col, num):
                continue
            self.grid[row, col] = num
            self.placements += 1
            if self.fill():
                return True
            self.grid[row, col] = EMPTY
            self.backtracks += 1
        return False


def fill_grid(grid: Grid, rng: np.random.Generator) -> bool:
    """
    Fill every empty cell of ``grid`` in place.

    Cells are visited in row-major order. At each cell the digits 1-9 are
    tried in an order freshly shuffled by ``rng``; the first candidate that
    leads to a full grid wins.

    Returns:
        True if the grid was completed, False if no completion exists. On
        failure every cell the search wrote has been reset to empty.
    """
    search = _Search(grid, rng)
    done = search.fill()
    logger.debug(
        "fill %s after %d placements, %d backtracks",
        "succeeded" if done else "failed",
        search.placements,
        search.backtracks,
    )
    return done


def dead_cells(grid: Grid) -> list[tuple[int, int]]:
    """Empty cells where no digit fits."""
    dead = []
    for row, col in np.argwhere(grid == EMPTY):
        row, col = int(row), int(col)
        if not any(fits(grid, row, col, num) for num in DIGITS):
            dead.append((row, col))
    return dead


def complete_grid(seed_grid: Grid, rng: RngLike = None) -> Grid:
    """
    Complete a partially filled grid.

    Seeds with an empty cell that no digit fits are rejected before the
    search starts. Other unsolvable seeds are only detected by exhausting
    the search, which can take exponential time.

    Args:
        seed_grid: Starting board; it is copied, never modified.
        rng: Randomness source or seed.

    Returns:
        A read-only complete grid agreeing with every non-zero seed cell.

    Raises:
        InvalidInputError: The seed is malformed or already breaks a rule.
        GenerationError: The seed admits no completion.
    """
    grid = as_grid(seed_grid)
    if not is_valid_board(grid):
        raise InvalidInputError("seed grid repeats a digit in a row, column or box")
    dead = dead_cells(grid)
    if dead:
        raise GenerationError(f"seed grid has no completion; no digit fits at {dead}")
    if not fill_grid(grid, make_rng(rng)):
        raise GenerationError("backtracking search exhausted every candidate; seed grid has no completion")
    return freeze(grid)


def generate_complete(rng: RngLike = None) -> Grid:
    """
    Generate a complete, valid 9x9 grid.

    Args:
        rng: Randomness source or seed. The same seed always yields the same
            grid.

    Returns:
        A read-only grid where every row, column and box holds 1-9 once.

    Raises:
        GenerationError: The search failed, which cannot happen from an
            empty board and signals a bug.
    """
    grid = empty_grid()
    if not fill_grid(grid, make_rng(rng)):
        raise GenerationError(f"failed to fill an empty {SIZE}x{SIZE} grid")
    return freeze(grid)
