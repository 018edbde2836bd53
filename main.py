#!/usr/bin/env python3
"""
Command-line entry point for the sudoku engine.

Generates single puzzles, validates boards and exports batches of
puzzle/solution pairs to CSV.
"""

import argparse
import csv
import json
import sys
from pathlib import Path

from tqdm import tqdm

from sudoku_engine.carver import DIFFICULTY_TIERS, removal_target
from sudoku_engine.config import Config, load_config, merge_configs
from sudoku_engine.data import grid_from_string, grid_to_string
from sudoku_engine.errors import SudokuError
from sudoku_engine.generator import make_rng
from sudoku_engine.grid import format_grid
from sudoku_engine.logging_utils import get_logger
from sudoku_engine.puzzle import create_puzzle
from sudoku_engine.validator import find_conflicts

EXIT_OK = 0
EXIT_INVALID = 1
EXIT_ERROR = 2


def run_generate(config: Config, as_json: bool = False) -> int:
    """Generate one puzzle and print it with its solution."""
    gen = config.generator
    puzzle = create_puzzle(
        gen.tier,
        gen.seed,
        max_attempts=gen.max_attempts,
        strict_tier=gen.strict_tiers,
    )

    if as_json:
        print(json.dumps(puzzle.to_dict()))
    else:
        print(f"Tier: {puzzle.tier} ({puzzle.removed}/{puzzle.target} cells removed)\n")
        print(format_grid(puzzle.puzzle))
        print("\nSolution:\n")
        print(format_grid(puzzle.solution))
    return EXIT_OK


def read_board(source: str) -> str:
    """Board text from a file path, or the argument itself."""
    path = Path(source)
    if path.is_file():
        text = path.read_text()
    else:
        text = source
    return "".join(text.split())


def run_validate(source: str) -> int:
    """Check a board for repeated digits; report conflicting cells."""
    grid = grid_from_string(read_board(source))
    conflicts = find_conflicts(grid)
    if conflicts:
        cells = ", ".join(f"({r}, {c})" for r, c in conflicts)
        print(f"INVALID: conflicting cells {cells}")
        return EXIT_INVALID
    print("VALID")
    return EXIT_OK


def run_export(config: Config) -> int:
    """Write ``num_puzzles`` generated puzzles to a CSV file."""
    gen, export = config.generator, config.export
    logger = get_logger()
    # Fail before the output file is created
    removal_target(gen.tier, strict=gen.strict_tiers)
    rng = make_rng(gen.seed)

    output = Path(export.output)
    output.parent.mkdir(parents=True, exist_ok=True)
    short = 0

    with open(output, "w", newline="") as f:
        writer = csv.writer(f)
        writer.writerow(["index", "tier", "puzzle", "solution", "removed"])
        for index in tqdm(range(export.num_puzzles), desc="Generating", unit="puzzle"):
            puzzle = create_puzzle(
                gen.tier,
                rng,
                max_attempts=gen.max_attempts,
                strict_tier=gen.strict_tiers,
            )
            short += puzzle.exhausted
            writer.writerow(
                [
                    index,
                    puzzle.tier,
                    grid_to_string(puzzle.puzzle),
                    grid_to_string(puzzle.solution),
                    puzzle.removed,
                ]
            )

    logger.info("Wrote %d puzzles to %s", export.num_puzzles, output)
    if short:
        logger.warning("%d puzzles have fewer removed cells than requested", short)
    return EXIT_OK


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Sudoku puzzle generator")
    parser.add_argument(
        "--config",
        type=str,
        default=None,
        help="Path to a YAML config file",
    )
    parser.add_argument(
        "--log-level",
        type=str,
        default=None,
        help="Logging level, e.g. DEBUG or WARNING (default: from config, INFO)",
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    def add_generation_args(sub: argparse.ArgumentParser) -> None:
        sub.add_argument(
            "--tier",
            type=str,
            default=None,
            help=f"Difficulty tier: {', '.join(DIFFICULTY_TIERS)} (default: easy)",
        )
        sub.add_argument(
            "--seed",
            type=int,
            default=None,
            help="Random seed for reproducible output (default: random)",
        )
        sub.add_argument(
            "--strict-tiers",
            action="store_true",
            help="Fail on unknown tiers instead of falling back to easy",
        )

    generate = subparsers.add_parser("generate", help="Generate one puzzle")
    add_generation_args(generate)
    generate.add_argument(
        "--json",
        action="store_true",
        help="Print the puzzle and solution as JSON",
    )

    validate = subparsers.add_parser("validate", help="Check a board for rule violations")
    validate.add_argument(
        "board",
        type=str,
        help="81-character board ('0' or '.' for blanks) or a file containing one",
    )

    export = subparsers.add_parser("export", help="Export generated puzzles to CSV")
    add_generation_args(export)
    export.add_argument(
        "--num",
        type=int,
        default=None,
        help="Number of puzzles (default: 100)",
    )
    export.add_argument(
        "--output",
        type=str,
        default=None,
        help="CSV output path (default: puzzles.csv)",
    )

    return parser


def config_from_args(args: argparse.Namespace) -> Config:
    """Load the YAML config and apply command-line overrides."""
    config = load_config(args.config)

    generator = {}
    if getattr(args, "tier", None) is not None:
        generator["tier"] = args.tier
    if getattr(args, "seed", None) is not None:
        generator["seed"] = args.seed
    if getattr(args, "strict_tiers", False):
        generator["strict_tiers"] = True

    export = {}
    if getattr(args, "num", None) is not None:
        export["num_puzzles"] = args.num
    if getattr(args, "output", None) is not None:
        export["output"] = args.output

    logging_overrides = {}
    if args.log_level is not None:
        logging_overrides["level"] = args.log_level

    return merge_configs(
        config,
        {"generator": generator, "export": export, "logging": logging_overrides},
    )


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    config = config_from_args(args)

    log_file = Path(config.logging.log_dir) / "sudoku_engine.log" if config.logging.log_dir else None
    logger = get_logger(level=config.logging.level, log_file=log_file)

    try:
        if args.command == "generate":
            return run_generate(config, as_json=args.json)
        if args.command == "validate":
            return run_validate(args.board)
        return run_export(config)
    except SudokuError as e:
        logger.error("%s", e)
        return EXIT_ERROR


if __name__ == "__main__":
    sys.exit(main())
