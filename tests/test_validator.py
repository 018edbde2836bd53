"""Tests for board validation."""

import numpy as np
import pytest

from sudoku_engine.errors import InvalidInputError
from sudoku_engine.generator import generate_complete
from sudoku_engine.grid import empty_grid
from sudoku_engine.validator import find_conflicts, is_complete_solution, is_valid_board


class TestIsValidBoard:
    """Tests for the consistency check."""

    def test_empty_board_valid(self):
        assert is_valid_board(empty_grid()) is True

    def test_complete_solution_valid(self, pattern_solution):
        assert is_valid_board(pattern_solution) is True

    def test_generated_grid_valid(self):
        assert is_valid_board(generate_complete(5)) is True

    def test_partial_board_valid(self, pattern_solution):
        """Blanking cells of a solution keeps it valid."""
        board = pattern_solution
        board[np.random.default_rng(0).random((9, 9)) < 0.5] = 0
        assert is_valid_board(board) is True

    def test_row_repeat(self):
        board = empty_grid()
        board[3, 1] = board[3, 7] = 2
        assert is_valid_board(board) is False

    def test_column_repeat(self):
        board = empty_grid()
        board[0, 6] = board[8, 6] = 9
        assert is_valid_board(board) is False

    def test_box_repeat(self):
        board = empty_grid()
        board[6, 0] = board[8, 2] = 1
        assert is_valid_board(board) is False

    def test_swap_breaks_solution(self, pattern_solution):
        """Swapping two cells of a solution introduces repeats."""
        board = pattern_solution
        board[0, 0], board[0, 1] = board[0, 1], board[0, 0]
        assert is_valid_board(board) is False

    def test_accepts_lists(self, pattern_solution):
        assert is_valid_board(pattern_solution.tolist()) is True

    def test_does_not_mutate(self, pattern_solution):
        """The board passed in is never modified."""
        board = pattern_solution
        board[0, 0] = board[0, 1]
        before = board.copy()
        is_valid_board(board)
        assert np.array_equal(board, before)

    @pytest.mark.parametrize(
        "board",
        [
            [[0] * 9] * 8,
            [[0] * 10] * 9,
            [[12] + [0] * 8] + [[0] * 9] * 8,
            "not a board",
        ],
    )
    def test_malformed_input(self, board):
        """Malformed boards raise InvalidInputError instead of returning a bool."""
        with pytest.raises(InvalidInputError):
            is_valid_board(board)


class TestFindConflicts:
    """Tests for conflict reporting."""

    def test_no_conflicts(self, pattern_solution):
        assert find_conflicts(pattern_solution) == []

    def test_both_cells_reported(self):
        """Each cell of a clashing pair is reported."""
        board = empty_grid()
        board[4, 4] = board[4, 8] = 3
        assert find_conflicts(board) == [(4, 4), (4, 8)]


class TestIsCompleteSolution:
    """Tests for the complete-solution check."""

    def test_complete(self, pattern_solution):
        assert is_complete_solution(pattern_solution) is True

    def test_blank_cell(self, pattern_solution):
        board = pattern_solution
        board[8, 8] = 0
        assert is_complete_solution(board) is False


class TestConsistency:
    """is_valid_board and find_conflicts apply the same rule."""

    @pytest.mark.parametrize("cells", [[], [(0, 0), (0, 4)], [(2, 2), (8, 8)], [(4, 0), (4, 3)]])
    def test_agree(self, pattern_solution, cells):
        board = pattern_solution
        for row, col in cells:
            board[row, col] = board[0, 0]
        assert is_valid_board(board) == (find_conflicts(board) == [])
