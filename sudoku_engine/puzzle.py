"""Puzzle creation: generate a solution, then carve it for a difficulty tier."""

import logging
from dataclasses import dataclass
from typing import Any

import numpy as np

from .carver import DEFAULT_MAX_ATTEMPTS, carve
from .generator import RngLike, generate_complete, make_rng
from .grid import EMPTY, Grid

logger = logging.getLogger(__name__)


@dataclass
class Puzzle:
    """A carved puzzle together with the solution it was derived from."""

    puzzle: Grid
    solution: Grid
    tier: str
    target: int
    removed: int
    attempts: int

    @property
    def exhausted(self) -> bool:
        """True when fewer cells than the tier asks for were removed."""
        return self.removed < self.target

    @property
    def givens(self) -> np.ndarray:
        """Boolean mask of the clue cells."""
        return self.puzzle != EMPTY

    def to_dict(self) -> dict[str, Any]:
        """Plain-Python form for the presentation layer."""
        return {
            "puzzle": self.puzzle.tolist(),
            "solution": self.solution.tolist(),
            "tier": self.tier,
            "target": self.target,
            "removed": self.removed,
        }


def create_puzzle(
    tier: str,
    rng: RngLike = None,
    max_attempts: int = DEFAULT_MAX_ATTEMPTS,
    strict_tier: bool = False,
) -> Puzzle:
    """
    Create a new puzzle for a difficulty tier.

    The solution is generated first and the same randomness source then
    drives carving, so a fixed seed reproduces both grids exactly.

    Args:
        tier: Difficulty label (easy, medium, hard, expert).
        rng: Randomness source or seed.
        max_attempts: Carving trial budget.
        strict_tier: Raise on unknown tiers instead of using the easy count.

    Returns:
        A Puzzle whose grid is an independent copy of the read-only solution.
    """
    rng = make_rng(rng)
    solution = generate_complete(rng)
    result = carve(solution, tier, rng, max_attempts=max_attempts, strict_tier=strict_tier)
    logger.debug(
        "Created %s puzzle: %d cells removed, %d clues",
        tier,
        result.removed,
        int(np.count_nonzero(result.puzzle)),
    )
    return Puzzle(
        puzzle=result.puzzle,
        solution=solution,
        tier=tier,
        target=result.target,
        removed=result.removed,
        attempts=result.attempts,
    )
