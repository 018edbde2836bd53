"""
sudoku-engine: 9x9 Sudoku puzzle generation.

Builds complete grids by randomized backtracking, carves them into puzzles
by difficulty tier and checks boards and player answers.
"""

from sudoku_engine.carver import DIFFICULTY_TIERS, CarveResult, carve, removal_target
from sudoku_engine.config import Config, load_config, merge_configs
from sudoku_engine.errors import (
    GenerationError,
    InvalidInputError,
    InvalidMoveError,
    SudokuError,
    UnknownTierError,
)
from sudoku_engine.generator import complete_grid, fill_grid, generate_complete, make_rng
from sudoku_engine.grid import as_grid, box_index, can_place, empty_grid, format_grid
from sudoku_engine.logging_utils import get_logger
from sudoku_engine.puzzle import Puzzle, create_puzzle
from sudoku_engine.session import GameSession
from sudoku_engine.validator import find_conflicts, is_complete_solution, is_valid_board

__version__ = "0.1.0"
__all__ = [
    # Grid
    "as_grid",
    "box_index",
    "can_place",
    "empty_grid",
    "format_grid",
    # Generation
    "make_rng",
    "fill_grid",
    "generate_complete",
    "complete_grid",
    # Carving
    "DIFFICULTY_TIERS",
    "CarveResult",
    "carve",
    "removal_target",
    "Puzzle",
    "create_puzzle",
    # Validation
    "is_valid_board",
    "is_complete_solution",
    "find_conflicts",
    "GameSession",
    # Errors
    "SudokuError",
    "InvalidInputError",
    "UnknownTierError",
    "GenerationError",
    "InvalidMoveError",
    # Configuration
    "Config",
    "load_config",
    "merge_configs",
    "get_logger",
]
