"""Tests for the command-line entry point."""

import csv
import json

import numpy as np
import pytest

from main import EXIT_ERROR, EXIT_INVALID, EXIT_OK, main
from sudoku_engine.data import grid_from_string, grid_to_string


class TestGenerate:
    """Tests for the generate command."""

    def test_json_output(self, capsys):
        assert main(["generate", "--tier", "medium", "--seed", "4", "--json"]) == EXIT_OK
        data = json.loads(capsys.readouterr().out)
        puzzle = np.array(data["puzzle"])
        assert int((puzzle == 0).sum()) == 45
        assert data["tier"] == "medium"

    def test_text_output(self, capsys):
        assert main(["generate", "--seed", "4"]) == EXIT_OK
        out = capsys.readouterr().out
        assert "Tier: easy (35/35 cells removed)" in out
        assert "Solution:" in out

    def test_strict_unknown_tier(self):
        assert main(["generate", "--tier", "bogus", "--strict-tiers"]) == EXIT_ERROR


class TestValidate:
    """Tests for the validate command."""

    def test_valid_board(self, pattern_solution, capsys):
        assert main(["validate", grid_to_string(pattern_solution)]) == EXIT_OK
        assert "VALID" in capsys.readouterr().out

    def test_invalid_board(self, capsys):
        board = "11" + "0" * 79
        assert main(["validate", board]) == EXIT_INVALID
        assert "(0, 0), (0, 1)" in capsys.readouterr().out

    def test_board_from_file(self, pattern_solution, tmp_path):
        path = tmp_path / "board.txt"
        text = grid_to_string(pattern_solution)
        path.write_text("\n".join(text[i:i + 9] for i in range(0, 81, 9)))
        assert main(["validate", str(path)]) == EXIT_OK

    def test_malformed_board(self):
        assert main(["validate", "12345"]) == EXIT_ERROR


class TestExport:
    """Tests for the export command."""

    def test_unknown_tier_leaves_no_file(self, tmp_path):
        """A strict tier error is raised before the CSV is created."""
        output = tmp_path / "never.csv"
        code = main(
            ["export", "--num", "2", "--tier", "bogus", "--strict-tiers", "--output", str(output)]
        )
        assert code == EXIT_ERROR
        assert not output.exists()

    def test_writes_csv(self, tmp_path):
        output = tmp_path / "out.csv"
        code = main(
            ["export", "--num", "3", "--tier", "hard", "--seed", "1", "--output", str(output)]
        )
        assert code == EXIT_OK

        with open(output, newline="") as f:
            rows = list(csv.DictReader(f))
        assert len(rows) == 3
        for row in rows:
            puzzle = grid_from_string(row["puzzle"])
            solution = grid_from_string(row["solution"])
            assert int((puzzle == 0).sum()) == 52
            mask = puzzle != 0
            assert np.array_equal(puzzle[mask], solution[mask])

    def test_config_file(self, tmp_path):
        """Values from a YAML config are used when no flag overrides them."""
        output = tmp_path / "from_config.csv"
        config = tmp_path / "config.yaml"
        config.write_text(
            f"generator:\n  tier: expert\n  seed: 2\nexport:\n  num_puzzles: 2\n  output: {output}\n"
        )
        assert main(["--config", str(config), "export"]) == EXIT_OK
        with open(output, newline="") as f:
            rows = list(csv.DictReader(f))
        assert [row["tier"] for row in rows] == ["expert", "expert"]


def test_command_required():
    with pytest.raises(SystemExit):
        main([])
