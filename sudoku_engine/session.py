"""Player-side state for one game: the board being filled and answer checks."""

import numpy as np

from .errors import InvalidInputError, InvalidMoveError
from .grid import EMPTY, SIZE, Grid, as_grid
from .puzzle import Puzzle


class GameSession:
    """
    Track a player's progress on a puzzle.

    The givens mask is captured once at construction, because after the
    player starts writing digits the board alone no longer tells clues and
    answers apart. The solution is only read.
    """

    def __init__(self, puzzle: Puzzle):
        self.puzzle = puzzle
        self.solution: Grid = puzzle.solution
        self.board: Grid = as_grid(puzzle.puzzle)
        self.givens: np.ndarray = self.board != EMPTY
        self.givens.flags.writeable = False

    def _check_cell(self, row: int, col: int) -> None:
        if not (0 <= row < SIZE and 0 <= col < SIZE):
            raise InvalidInputError(f"cell ({row}, {col}) is outside the {SIZE}x{SIZE} grid")

    def is_given(self, row: int, col: int) -> bool:
        self._check_cell(row, col)
        return bool(self.givens[row, col])

    def place(self, row: int, col: int, num: int) -> bool:
        """
        Write ``num`` at (row, col); 0 clears the cell.

        Returns:
            True if the digit matches the solution.

        Raises:
            InvalidMoveError: The cell is a clue.
            InvalidInputError: Bad coordinate or digit.
        """
        self._check_cell(row, col)
        if isinstance(num, (bool, np.bool_)) or not isinstance(num, (int, np.integer)):
            raise InvalidInputError(f"digit must be an integer; got {num!r}")
        if not 0 <= num <= SIZE:
            raise InvalidInputError(f"digit must be in [0, {SIZE}]; got {num}")
        if self.givens[row, col]:
            raise InvalidMoveError(f"cell ({row}, {col}) is a given and cannot be changed")
        self.board[row, col] = num
        return self.is_correct(row, col)

    def is_correct(self, row: int, col: int) -> bool:
        self._check_cell(row, col)
        value = self.board[row, col]
        return bool(value != EMPTY and value == self.solution[row, col])

    def mistakes(self) -> list[tuple[int, int]]:
        """Filled cells that disagree with the solution."""
        wrong = (self.board != EMPTY) & (self.board != self.solution)
        return [(int(r), int(c)) for r, c in np.argwhere(wrong)]

    def is_solved(self) -> bool:
        return bool(np.array_equal(self.board, self.solution))

    def hint(self) -> tuple[int, int, int] | None:
        """First empty or wrong cell in row-major order, with its answer."""
        open_cells = np.argwhere(self.board != self.solution)
        if len(open_cells) == 0:
            return None
        row, col = (int(v) for v in open_cells[0])
        return row, col, int(self.solution[row, col])
