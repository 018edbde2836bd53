"""PyTorch dataset of freshly generated puzzles."""

import numpy as np
import torch
from torch.utils.data import Dataset

from ..carver import DEFAULT_MAX_ATTEMPTS, DEFAULT_TIER
from ..puzzle import Puzzle, create_puzzle
from .encoding import encode_puzzle, encode_solution


class PuzzleDataset(Dataset[tuple[torch.Tensor, torch.Tensor]]):
    """
    Generated (puzzle, solution) pairs as tensors.

    Item ``i`` is built from a randomness source seeded with ``(seed, i)``,
    so an index always maps to the same puzzle regardless of access order
    or worker process.
    """

    def __init__(
        self,
        num_samples: int,
        tier: str = DEFAULT_TIER,
        seed: int = 0,
        max_attempts: int = DEFAULT_MAX_ATTEMPTS,
    ):
        """
        Args:
            num_samples: Number of puzzles in the dataset.
            tier: Difficulty label used for every puzzle.
            seed: Base seed combined with the item index.
            max_attempts: Carving trial budget per puzzle.
        """
        if num_samples < 0:
            raise ValueError(f"num_samples must be non-negative, got {num_samples}")
        self.num_samples = num_samples
        self.tier = tier
        self.seed = seed
        self.max_attempts = max_attempts

    def __len__(self) -> int:
        return self.num_samples

    def puzzle(self, index: int) -> Puzzle:
        """The raw puzzle behind item ``index``."""
        if not 0 <= index < self.num_samples:
            raise IndexError(f"index {index} out of range for dataset of size {self.num_samples}")
        rng = np.random.default_rng([self.seed, index])
        return create_puzzle(self.tier, rng, max_attempts=self.max_attempts)

    def __getitem__(self, index: int) -> tuple[torch.Tensor, torch.Tensor]:
        item = self.puzzle(index)
        return (
            torch.tensor(encode_puzzle(item.puzzle), dtype=torch.float32),
            torch.tensor(encode_solution(item.solution), dtype=torch.long),
        )
