"""9x9 grid representation and the placement-legality rule."""

from typing import Any

import numpy as np

from .errors import InvalidInputError

SIZE: int = 9
BOX: int = 3
EMPTY: int = 0
DIGITS: tuple[int, ...] = tuple(range(1, SIZE + 1))

Grid = np.ndarray


def box_index(row: int, col: int) -> int:
    """Index (0-8, row-major) of the 3x3 box containing (row, col)."""
    return (row // BOX) * BOX + col // BOX


def _make_peer_masks() -> np.ndarray:
    """Boolean masks of shape (9, 9, 9, 9): masks[r, c] marks the peers of (r, c).

    A peer shares the row, column or box of the cell. The cell itself is
    excluded so a placed value never conflicts with itself.
    """
    masks = np.zeros((SIZE, SIZE, SIZE, SIZE), dtype=bool)
    for row in range(SIZE):
        for col in range(SIZE):
            mask = masks[row, col]
            mask[row, :] = True
            mask[:, col] = True
            top, left = BOX * (row // BOX), BOX * (col // BOX)
            mask[top:top + BOX, left:left + BOX] = True
            mask[row, col] = False
    masks.flags.writeable = False
    return masks


PEER_MASKS: np.ndarray = _make_peer_masks()


def empty_grid() -> Grid:
    """Create an all-empty 9x9 grid."""
    return np.zeros((SIZE, SIZE), dtype=np.int64)


def as_grid(board: Any) -> Grid:
    """
    Coerce an externally supplied board into a fresh 9x9 int64 array.

    Args:
        board: Nested sequence or array of cell values.

    Returns:
        A new array that does not share storage with ``board``.

    Raises:
        InvalidInputError: Wrong dimensions, non-integer cells or values
            outside [0, 9].
    """
    try:
        arr = np.array(board)
    except (TypeError, ValueError) as e:
        raise InvalidInputError(f"board is not a rectangular grid: {e}") from e

    if arr.shape != (SIZE, SIZE):
        raise InvalidInputError(f"board must have shape ({SIZE}, {SIZE}); got {arr.shape}")
    if arr.dtype == np.bool_ or not np.issubdtype(arr.dtype, np.integer):
        raise InvalidInputError(f"board cells must be integers; got dtype {arr.dtype}")
    if np.any((arr < EMPTY) | (arr > SIZE)):
        bad = arr[(arr < EMPTY) | (arr > SIZE)]
        raise InvalidInputError(f"board contains out-of-range values {sorted(set(bad.tolist()))}")
    return arr.astype(np.int64)


def _check_position(row: int, col: int) -> None:
    if not (0 <= row < SIZE and 0 <= col < SIZE):
        raise InvalidInputError(f"cell ({row}, {col}) is outside the {SIZE}x{SIZE} grid")


def _check_digit(num: int) -> None:
    if not 1 <= num <= SIZE:
        raise InvalidInputError(f"digit must be in [1, {SIZE}]; got {num}")


def fits(grid: Grid, row: int, col: int, num: int) -> bool:
    """Unchecked form of :func:`can_place` used inside the search loop."""
    return not np.any(grid[PEER_MASKS[row, col]] == num)


def can_place(grid: Grid, row: int, col: int, num: int) -> bool:
    """
    Check whether ``num`` may stand at (row, col).

    True iff ``num`` does not already appear in the row, the column or the
    3x3 box of the cell. The current value at (row, col) is ignored, so the
    same call answers both "can I write here" and "is this value legal".

    Raises:
        InvalidInputError: Bad grid shape, coordinate or digit.
    """
    grid = np.asarray(grid)
    if grid.shape != (SIZE, SIZE):
        raise InvalidInputError(f"grid must have shape ({SIZE}, {SIZE}); got {grid.shape}")
    _check_position(row, col)
    _check_digit(num)
    return fits(grid, row, col, num)


def count_empty(grid: Grid) -> int:
    return int(np.count_nonzero(grid == EMPTY))


def freeze(grid: Grid) -> Grid:
    """Return a read-only copy of ``grid``."""
    out = np.array(grid, dtype=np.int64, copy=True)
    out.flags.writeable = False
    return out


def format_grid(grid: Grid) -> str:
    """Render a grid as text with box separators; blanks print as '.'."""
    lines = []
    for row in range(SIZE):
        if row and row % BOX == 0:
            lines.append("+".join(["-" * (2 * BOX + 1)] * BOX)[1:-1])
        chunks = []
        for left in range(0, SIZE, BOX):
            cells = grid[row, left:left + BOX]
            chunks.append(" ".join(str(int(v)) if v else "." for v in cells))
        lines.append(" | ".join(chunks))
    return "\n".join(lines)
