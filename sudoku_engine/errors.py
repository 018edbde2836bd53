"""Exceptions raised by the Sudoku engine."""


class SudokuError(Exception):
    """Base class for all engine errors."""


class InvalidInputError(SudokuError, ValueError):
    """A grid, coordinate or digit supplied by the caller is malformed."""


class UnknownTierError(SudokuError, KeyError):
    """Raised in strict mode when a difficulty label is not recognized."""

    def __init__(self, tier: str, known: list[str]):
        self.tier = tier
        self.known = known
        super().__init__(f"Unknown difficulty tier {tier!r}; expected one of {known}")

    def __str__(self) -> str:
        # KeyError quotes its argument otherwise
        return str(self.args[0])


class GenerationError(SudokuError, RuntimeError):
    """The backtracking search ran out of candidates."""


class InvalidMoveError(SudokuError, ValueError):
    """A player tried to overwrite a given cell."""
