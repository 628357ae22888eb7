"""Tests for the command line interface."""

import json
import re
from pathlib import Path

import pytest
from typer.testing import CliRunner

from swiss_pairing import __version__
from swiss_pairing.cli import app

EXAMPLE_DATA = Path(__file__).parent.parent / "example_data"
FOUR_TEAMS = ["-t", "Alice", "-t", "Bob", "-t", "Charlie", "-t", "David"]

runner = CliRunner()


@pytest.fixture(autouse=True)
def no_seed_env(monkeypatch):
    """Keep a developer's seed setting out of the tests."""
    monkeypatch.delenv("SWISS_PAIRING_SEED", raising=False)


class TestGenerate:
    """Tests for the generate command."""

    def test_round_robin_text(self):
        """Test three rounds for four teams cover every pairing."""
        result = runner.invoke(app, ["generate", *FOUR_TEAMS, "-n", "3", "--format", "text-plain"])

        assert result.exit_code == 0
        assert (
            "Round 1:\nAlice vs Bob\nCharlie vs David\n"
            "Round 2:\nAlice vs Charlie\nBob vs David\n"
            "Round 3:\nAlice vs David\nBob vs Charlie"
        ) in result.stdout

    def test_default_format_is_markdown(self):
        """Test markdown is used when no format is given."""
        result = runner.invoke(app, ["generate", *FOUR_TEAMS])

        assert result.exit_code == 0
        assert "**Round 1**" in result.stdout
        assert "1. Alice vs Bob" in result.stdout

    def test_json_output(self):
        """Test JSON output with a later start round and played matches."""
        result = runner.invoke(
            app,
            [
                "generate",
                *FOUR_TEAMS,
                "-s",
                "2",
                "-m",
                "Alice,Bob",
                "-m",
                "Charlie,David",
                "--format",
                "json-plain",
            ],
        )

        assert result.exit_code == 0
        line = next(line for line in result.stdout.splitlines() if line.startswith("{"))
        assert json.loads(line) == {"Round 2": [["Alice", "Charlie"], ["Bob", "David"]]}

    def test_odd_team_count_gets_bye(self):
        """Test an odd roster is padded with BYE."""
        result = runner.invoke(
            app, ["generate", "-t", "Alice", "-t", "Bob", "-t", "Charlie", "--format", "text-plain"]
        )

        assert result.exit_code == 0
        assert "Charlie vs BYE" in result.stdout

    def test_too_many_rounds(self):
        """Test asking for as many rounds as teams is rejected."""
        result = runner.invoke(app, ["generate", *FOUR_TEAMS, "-n", "4"])

        assert result.exit_code == 1
        assert "Invalid input: Number of rounds (4) must be less than number of teams (4)" in (
            result.output
        )

    def test_no_valid_solution(self):
        """Test squads that block every pairing are reported."""
        result = runner.invoke(
            app,
            [
                "generate",
                "-t",
                "Alice [X]",
                "-t",
                "Bob [X]",
                "-t",
                "Charlie [X]",
                "-t",
                "David [Y]",
            ],
        )

        assert result.exit_code == 1
        assert "Failed to generate matches: No valid pairings possible for Round 1" in (
            result.output
        )

    def test_no_teams(self):
        """Test a missing roster is a configuration error."""
        result = runner.invoke(app, ["generate"])

        assert result.exit_code == 1
        assert "No teams provided" in result.output

    def test_invalid_order(self):
        """Test an unknown order names the bad argument."""
        result = runner.invoke(app, ["generate", *FOUR_TEAMS, "--order", "sideways"])

        assert result.exit_code == 1
        assert 'Invalid CLI argument "order"' in result.output

    def test_seeded_random_is_reproducible(self):
        """Test the same seed gives the same random schedule."""
        args = ["generate", *FOUR_TEAMS, "-o", "random", "--seed", "7", "--format", "csv"]
        first = runner.invoke(app, args)
        second = runner.invoke(app, args)

        def schedule(output):
            return [line for line in output.splitlines() if re.match(r"\d+,\d+,\w+,\w+$", line)]

        assert first.exit_code == 0
        assert len(schedule(first.stdout)) == 2
        assert schedule(first.stdout) == schedule(second.stdout)

    def test_csv_file(self):
        """Test squads from a CSV file keep teammates apart."""
        result = runner.invoke(
            app, ["generate", "--file", str(EXAMPLE_DATA / "tournament_round1.csv")]
        )

        assert result.exit_code == 0
        assert "**Round 1**\n\n1. Alice vs Charlie\n2. Bob vs David" in result.stdout

    def test_file_with_cli_override(self):
        """Test command line options override file settings."""
        result = runner.invoke(
            app,
            [
                "generate",
                "--file",
                str(EXAMPLE_DATA / "tournament_round1.csv"),
                "--format",
                "csv",
            ],
        )

        assert result.exit_code == 0
        assert "Round,Match,Home Team,Away Team\n1,1,Alice,Charlie\n1,2,Bob,David" in (
            result.stdout
        )

    def test_json_file_with_history(self):
        """Test a JSON file with previous matches and a later start round."""
        result = runner.invoke(
            app, ["generate", "--file", str(EXAMPLE_DATA / "tournament_round2.json")]
        )

        assert result.exit_code == 0
        assert "**Round 2**\n\n1. Alice vs David\n2. Bob vs Charlie" in result.stdout

    def test_missing_file(self, tmp_path):
        """Test a missing input file is reported."""
        result = runner.invoke(app, ["generate", "--file", str(tmp_path / "nope.csv")])

        assert result.exit_code == 1
        assert "File not found" in result.output

    def test_malformed_team_list_in_file(self, tmp_path):
        """Test a scalar team list in a file is reported as an argument error."""
        path = tmp_path / "input.json"
        path.write_text('{"teams": 5}', encoding="utf-8")

        result = runner.invoke(app, ["generate", "--file", str(path)])

        assert result.exit_code == 1
        assert 'Invalid JSON argument "teams"' in result.output
        assert "Unexpected error" not in result.output

    def test_unsupported_file(self, tmp_path):
        """Test an unsupported input file is reported."""
        result = runner.invoke(app, ["generate", "--file", str(tmp_path / "teams.txt")])

        assert result.exit_code == 1
        assert "Invalid file type" in result.output


class TestValidate:
    """Tests for the validate command."""

    def test_valid_file(self):
        """Test a valid file prints a summary."""
        result = runner.invoke(app, ["validate", str(EXAMPLE_DATA / "tournament_round1.csv")])

        assert result.exit_code == 0
        assert "Input is valid!" in result.output
        assert "Teams: 4" in result.output
        assert "| Alice" in result.output

    def test_odd_roster_is_valid(self):
        """Test a roster that needs a BYE still validates."""
        result = runner.invoke(app, ["validate", str(EXAMPLE_DATA / "league.yaml")])

        assert result.exit_code == 0
        assert "Input is valid!" in result.output

    def test_unknown_team_in_matches(self, tmp_path):
        """Test played matches must name known teams."""
        path = tmp_path / "input.json"
        path.write_text(
            json.dumps(
                {"teams": ["Alice", "Bob", "Charlie", "David"], "matches": [["Alice", "Zed"]]}
            ),
            encoding="utf-8",
        )

        result = runner.invoke(app, ["validate", str(path)])

        assert result.exit_code == 1
        assert 'Unknown team in matches: "Zed"' in result.output


class TestInfo:
    """Tests for version and info output."""

    def test_version(self):
        """Test --version prints the package version."""
        result = runner.invoke(app, ["--version"])

        assert result.exit_code == 0
        assert f"swiss-pairing v{__version__}" in result.stdout

    def test_info(self):
        """Test info lists example commands."""
        result = runner.invoke(app, ["info"])

        assert result.exit_code == 0
        assert "Example Commands:" in result.stdout
        assert "swiss-pairing generate" in result.stdout
