"""Shared fixtures."""

import numpy as np
import pytest

FIXED_SEED = 1234

# generate_complete(FIXED_SEED)
SEEDED_SOLUTION = np.array(
    [
        [8, 2, 4, 6, 9, 3, 5, 1, 7],
        [9, 5, 1, 4, 2, 7, 3, 6, 8],
        [7, 6, 3, 1, 5, 8, 2, 4, 9],
        [5, 1, 6, 9, 7, 2, 8, 3, 4],
        [3, 9, 8, 5, 4, 6, 1, 7, 2],
        [4, 7, 2, 8, 3, 1, 6, 9, 5],
        [2, 4, 9, 3, 6, 5, 7, 8, 1],
        [6, 8, 7, 2, 1, 4, 9, 5, 3],
        [1, 3, 5, 7, 8, 9, 4, 2, 6],
    ],
    dtype=np.int64,
)

# Shifted-row pattern: value(r, c) = (3r + r//3 + c) mod 9 + 1
PATTERN_SOLUTION = np.array(
    [[(r * 3 + r // 3 + c) % 9 + 1 for c in range(9)] for r in range(9)],
    dtype=np.int64,
)


def _assert_complete(grid: np.ndarray) -> None:
    digits = set(range(1, 10))
    assert grid.shape == (9, 9)
    for i in range(9):
        assert set(grid[i, :].tolist()) == digits
        assert set(grid[:, i].tolist()) == digits
    for top in range(0, 9, 3):
        for left in range(0, 9, 3):
            assert set(grid[top:top + 3, left:left + 3].flatten().tolist()) == digits


@pytest.fixture
def assert_complete():
    """Check that every row, column and box holds each digit exactly once."""
    return _assert_complete


@pytest.fixture
def pattern_solution():
    """A known complete grid."""
    return PATTERN_SOLUTION.copy()


@pytest.fixture
def fixed_seed():
    return FIXED_SEED


@pytest.fixture
def seeded_solution():
    """The grid generate_complete produces for ``fixed_seed``."""
    return SEEDED_SOLUTION.copy()
