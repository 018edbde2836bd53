"""Stateless consistency checks for arbitrary boards."""

from collections.abc import Iterator
from typing import Any

from .grid import EMPTY, SIZE, Grid, as_grid, fits


def _iter_conflicts(grid: Grid) -> Iterator[tuple[int, int]]:
    for row in range(SIZE):
        for col in range(SIZE):
            num = int(grid[row, col])
            if num != EMPTY and not fits(grid, row, col, num):
                yield row, col


def find_conflicts(board: Any) -> list[tuple[int, int]]:
    """
    List the cells whose digit also appears among their peers.

    Each non-zero cell is checked with the same rule used during generation,
    with the cell itself excluded from the comparison. The board is copied
    first and never modified.

    Raises:
        InvalidInputError: Wrong dimensions or out-of-range values.
    """
    return list(_iter_conflicts(as_grid(board)))


def is_valid_board(board: Any) -> bool:
    """True iff no digit repeats within any row, column or box.

    Empty cells are allowed; see :func:`is_complete_solution` for full grids.
    Stops at the first conflict.
    """
    return next(_iter_conflicts(as_grid(board)), None) is None


def is_complete_solution(board: Any) -> bool:
    grid = as_grid(board)
    return not (grid == EMPTY).any() and is_valid_board(grid)
