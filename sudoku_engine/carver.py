"""Difficulty-based cell removal turning a solution into a puzzle."""

import logging
from dataclasses import dataclass

import numpy as np

from .errors import InvalidInputError, UnknownTierError
from .grid import EMPTY, SIZE, Grid, as_grid

logger = logging.getLogger(__name__)

# Cells removed out of 81
DIFFICULTY_TIERS: dict[str, int] = {
    "easy": 35,
    "medium": 45,
    "hard": 52,
    "expert": 58,
}
DEFAULT_TIER = "easy"
DEFAULT_MAX_ATTEMPTS = 1000


def removal_target(tier: str, strict: bool = False) -> int:
    """
    Number of cells to clear for a difficulty tier.

    Args:
        tier: One of ``DIFFICULTY_TIERS``.
        strict: Raise on unknown labels instead of falling back to easy.

    Raises:
        UnknownTierError: ``strict`` is set and ``tier`` is not recognized.
    """
    if tier in DIFFICULTY_TIERS:
        return DIFFICULTY_TIERS[tier]
    if strict:
        raise UnknownTierError(tier, list(DIFFICULTY_TIERS))
    logger.warning("Unknown difficulty tier %r, falling back to %r", tier, DEFAULT_TIER)
    return DIFFICULTY_TIERS[DEFAULT_TIER]


@dataclass
class CarveResult:
    """Outcome of one carving pass."""

    puzzle: Grid
    target: int
    removed: int
    attempts: int

    @property
    def exhausted(self) -> bool:
        """True when the attempt budget ran out before the target was reached."""
        return self.removed < self.target


def carve(
    solution: Grid,
    tier: str,
    rng: np.random.Generator,
    max_attempts: int = DEFAULT_MAX_ATTEMPTS,
    strict_tier: bool = False,
) -> CarveResult:
    """
    Clear random cells of a copy of ``solution``.

    Each trial picks a uniformly random cell and clears it if it still holds
    a digit. Every trial counts against ``max_attempts``, hit or miss. When
    the budget runs out first, the partially carved puzzle is returned with
    ``removed < target`` and a warning is logged; the target is never
    exceeded.

    Args:
        solution: Complete grid; left untouched.
        tier: Difficulty label selecting the removal target.
        rng: Randomness source.
        max_attempts: Maximum number of random trials.
        strict_tier: Raise on unknown tiers instead of using the easy count.

    Raises:
        InvalidInputError: ``max_attempts`` is negative or ``solution`` is malformed.
        UnknownTierError: Unknown tier with ``strict_tier`` set.
    """
    if max_attempts < 0:
        raise InvalidInputError(f"max_attempts must be non-negative; got {max_attempts}")

    target = removal_target(tier, strict=strict_tier)
    puzzle = as_grid(solution)

    removed = 0
    attempts = 0
    while removed < target and attempts < max_attempts:
        attempts += 1
        row, col = (int(v) for v in rng.integers(0, SIZE, size=2))
        if puzzle[row, col] != EMPTY:
            puzzle[row, col] = EMPTY
            removed += 1

    result = CarveResult(puzzle=puzzle, target=target, removed=removed, attempts=attempts)
    if result.exhausted:
        logger.warning(
            "Carving budget exhausted for tier %r: removed %d of %d cells in %d attempts",
            tier,
            removed,
            target,
            attempts,
        )
    else:
        logger.debug("Removed %d cells for tier %r in %d attempts", removed, tier, attempts)
    return result
