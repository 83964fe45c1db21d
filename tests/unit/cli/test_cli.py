"""Tests for CLI commands."""

import json
from pathlib import Path

from click.testing import CliRunner

from mathkit.cli.main import _parse_observations, cli


class TestCLIGroup:
    """Tests for main CLI group."""

    def test_help(self) -> None:
        runner = CliRunner()
        result = runner.invoke(cli, ["--help"])

        assert result.exit_code == 0
        assert "mathkit" in result.output
        assert "stats" in result.output

    def test_version(self) -> None:
        runner = CliRunner()
        result = runner.invoke(cli, ["--version"])

        assert result.exit_code == 0
        assert "0.1.0" in result.output

    def test_missing_config_file(self, tmp_path: Path) -> None:
        runner = CliRunner()
        result = runner.invoke(cli, ["--config", str(tmp_path / "nope.yaml"), "stats", "1"])

        assert result.exit_code == 1
        assert "Configuration file not found" in result.output


class TestStatsCommand:
    """Tests for 'stats' command."""

    def test_stats_help(self) -> None:
        runner = CliRunner()
        result = runner.invoke(cli, ["stats", "--help"])

        assert result.exit_code == 0
        assert "--file" in result.output
        assert "--format" in result.output
        assert "--sample-sd" in result.output

    def test_stats_text(self) -> None:
        runner = CliRunner()
        result = runner.invoke(cli, ["stats", "1", "2", "3", "4"])

        assert result.exit_code == 0
        lines = result.output.splitlines()
        assert lines[0] == "mean=2.5"
        assert "Q1=1.5" in lines
        assert "Q3=3.5" in lines

    def test_stats_json(self) -> None:
        runner = CliRunner()
        result = runner.invoke(cli, ["stats", "1", "2", "3", "4", "5", "--format", "json"])

        assert result.exit_code == 0
        data = json.loads(result.output)
        assert data["median"] == 3.0
        assert data["q1"] == 1.5
        assert data["q3"] == 4.5

    def test_stats_markdown_with_precision(self) -> None:
        runner = CliRunner()
        result = runner.invoke(cli, ["stats", "1", "2", "--format", "markdown", "-p", "2"])

        assert result.exit_code == 0
        assert "| mean | 1.50 |" in result.output

    def test_stats_from_stdin(self) -> None:
        runner = CliRunner()
        result = runner.invoke(cli, ["stats", "--file", "-"], input="1 2\n3,4\n")

        assert result.exit_code == 0
        assert "n=4" in result.output.splitlines()

    def test_stats_from_file(self, tmp_path: Path) -> None:
        data_file = tmp_path / "sample.txt"
        data_file.write_text("# observations\n5\n")
        runner = CliRunner()
        result = runner.invoke(cli, ["stats", "--file", str(data_file)])

        assert result.exit_code == 0
        assert "sample SD=undefined" in result.output

    def test_stats_negative_values(self) -> None:
        runner = CliRunner()
        result = runner.invoke(cli, ["stats", "--", "-1", "1"])

        assert result.exit_code == 0
        assert "mean=0.0" in result.output.splitlines()

    def test_stats_textbook_sample_sd(self) -> None:
        runner = CliRunner()
        result = runner.invoke(cli, ["stats", "1", "3", "--sample-sd", "textbook", "-p", "3"])

        assert result.exit_code == 0
        assert "sample SD=1.414" in result.output.splitlines()

    def test_stats_config_file(self, tmp_path: Path) -> None:
        config_file = tmp_path / "settings.yaml"
        config_file.write_text("output:\n  format: json\n")
        runner = CliRunner()
        result = runner.invoke(cli, ["--config", str(config_file), "stats", "7"])

        assert result.exit_code == 0
        assert json.loads(result.output)["mode"] == 7.0

    def test_stats_empty_input(self) -> None:
        runner = CliRunner()
        result = runner.invoke(cli, ["stats"])

        assert result.exit_code == 1
        assert "Error" in result.output
        assert "empty sample" in result.output

    def test_stats_invalid_file_token(self) -> None:
        runner = CliRunner()
        result = runner.invoke(cli, ["stats", "--file", "-"], input="1 two 3\n")

        assert result.exit_code == 2
        assert "not a number" in result.output


class TestParseObservations:
    """Tests for _parse_observations()."""

    def test_mixed_separators(self) -> None:
        assert _parse_observations("1, 2\t3\n\n4.5") == [1.0, 2.0, 3.0, 4.5]

    def test_comments_ignored(self) -> None:
        assert _parse_observations("# header\n1 # first\n2\n") == [1.0, 2.0]


class TestSolveCommand:
    """Tests for 'solve' command."""

    def test_solve(self) -> None:
        runner = CliRunner()
        result = runner.invoke(cli, ["solve", "2", "2", "9"])

        assert result.exit_code == 0
        assert result.output == "2x+2=9\tx=3.5\n"

    def test_solve_negative_coefficients(self) -> None:
        runner = CliRunner()
        result = runner.invoke(cli, ["solve", "--", "-3", "-2", "-1"])

        assert result.exit_code == 0
        assert result.output == "-3x-2=-1\tx=-0.333\n"

    def test_solve_zero_coefficient(self) -> None:
        runner = CliRunner()
        result = runner.invoke(cli, ["solve", "0", "4"])

        assert result.exit_code == 1
        assert "Error" in result.output


class TestDistanceCommand:
    """Tests for 'distance' command."""

    def test_distance_from_origin(self) -> None:
        runner = CliRunner()
        result = runner.invoke(cli, ["distance", "3,4"])

        assert result.exit_code == 0
        assert result.output == "5\n"

    def test_distance_between_points(self) -> None:
        runner = CliRunner()
        result = runner.invoke(cli, ["distance", "1,2,3", "4,6,3"])

        assert result.exit_code == 0
        assert result.output == "5\n"

    def test_dimension_mismatch(self) -> None:
        runner = CliRunner()
        result = runner.invoke(cli, ["distance", "1,2", "1,2,3"])

        assert result.exit_code == 1
        assert "Error" in result.output

    def test_invalid_point(self) -> None:
        runner = CliRunner()
        result = runner.invoke(cli, ["distance", "1"])

        assert result.exit_code == 2
        assert "2 or 3 components" in result.output


class TestComplexCommand:
    """Tests for 'complex' command."""

    def test_add(self) -> None:
        runner = CliRunner()
        result = runner.invoke(cli, ["complex", "add", "3,2", "1,-1"])

        assert result.exit_code == 0
        assert result.output == "4+i\n"

    def test_divide(self) -> None:
        runner = CliRunner()
        result = runner.invoke(cli, ["complex", "divide", "1,1", "0,1"])

        assert result.exit_code == 0
        assert result.output == "1-i\n"

    def test_divide_by_zero(self) -> None:
        runner = CliRunner()
        result = runner.invoke(cli, ["complex", "divide", "1,1", "0,0"])

        assert result.exit_code == 1
        assert "cannot divide zero" in result.output

    def test_compare_uses_tolerance(self) -> None:
        runner = CliRunner()
        result = runner.invoke(cli, ["complex", "compare", "1,1", "1.0005,1"])

        assert result.exit_code == 0
        assert result.output == "equal\n"

    def test_unknown_operation(self) -> None:
        runner = CliRunner()
        result = runner.invoke(cli, ["complex", "power", "1,1", "2"])

        assert result.exit_code == 2
