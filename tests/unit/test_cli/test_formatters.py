"""Tests for the CLI output helpers."""

import click
from click.testing import CliRunner
import pytest

from traveller_service.cli.utils import counts_table, fail, warning


@click.command()
@click.option("--broken", is_flag=True)
def report(broken: bool) -> None:
    if broken:
        fail("Catalogue unavailable", exit_code=3)
    warning("Catalogue is empty")
    counts_table({"worlds": 7, "spaceships": 2})


@pytest.fixture
def cli_runner():
    """Create Click CLI runner for testing commands."""
    return CliRunner()


class TestFormatters:
    """Tests for counts_table, warning and fail."""

    def test_counts_table_aligns_and_sums(self, cli_runner):
        """Test that names are padded to the longest label and a total is added."""
        result = cli_runner.invoke(report)

        assert result.exit_code == 0
        assert "  worlds      7\n" in result.output
        assert "  spaceships  2\n" in result.output
        assert "  total       9\n" in result.output

    def test_warning_is_printed(self, cli_runner):
        """Test that warnings reach the combined output."""
        result = cli_runner.invoke(report)

        assert "⚠ Catalogue is empty" in result.output

    def test_fail_exits_with_code(self, cli_runner):
        """Test that fail prints the error and stops the command."""
        result = cli_runner.invoke(report, ["--broken"])

        assert result.exit_code == 3
        assert "✗ Catalogue unavailable" in result.output
        assert "worlds" not in result.output
