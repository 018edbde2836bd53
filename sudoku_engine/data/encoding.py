"""String and one-hot encodings of 9x9 grids."""

import numpy as np

from ..errors import InvalidInputError
from ..grid import EMPTY, SIZE, Grid, as_grid

NUM_CELLS = SIZE * SIZE


def grid_to_string(grid: Grid) -> str:
    """Flatten a grid row-major into an 81-character digit string (0 = blank)."""
    return "".join(str(int(v)) for v in as_grid(grid).flatten())


def grid_from_string(text: str) -> Grid:
    """
    Parse an 81-character puzzle string.

    Args:
        text: Digits 1-9 with '0' or '.' for blanks. Surrounding whitespace
            is ignored.

    Returns:
        A new 9x9 grid.

    Raises:
        InvalidInputError: Wrong length or an unexpected character.
    """
    text = text.strip()
    if len(text) != NUM_CELLS:
        raise InvalidInputError(f"puzzle string must have {NUM_CELLS} characters, got {len(text)}")
    values = []
    for idx, char in enumerate(text):
        if char == ".":
            values.append(EMPTY)
        elif char in "0123456789":
            values.append(int(char))
        else:
            raise InvalidInputError(f"Invalid character {char!r} at position {idx}")
    return np.array(values, dtype=np.int64).reshape(SIZE, SIZE)


def encode_puzzle(puzzle: Grid) -> np.ndarray:
    """
    One-hot encode a puzzle into (81, 10).

    Channel 0 represents blank cells, channels 1..9 the digits.
    """
    flat = as_grid(puzzle).flatten()
    encoded = np.zeros((NUM_CELLS, SIZE + 1), dtype=np.float32)
    encoded[np.arange(NUM_CELLS), flat] = 1.0
    return encoded


def encode_solution(solution: Grid) -> np.ndarray:
    """
    Encode a complete grid into class indices in [0, 8] with shape (81,).

    Raises:
        InvalidInputError: The grid still has blank cells.
    """
    flat = as_grid(solution).flatten()
    if np.any(flat == EMPTY):
        raise InvalidInputError("solution must not contain blank cells")
    return flat.astype(np.int64) - 1
