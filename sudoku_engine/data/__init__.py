"""Encodings and datasets built on the generator."""

from .dataset import PuzzleDataset
from .encoding import (
    encode_puzzle,
    encode_solution,
    grid_from_string,
    grid_to_string,
)

__all__ = [
    "PuzzleDataset",
    "encode_puzzle",
    "encode_solution",
    "grid_from_string",
    "grid_to_string",
]
