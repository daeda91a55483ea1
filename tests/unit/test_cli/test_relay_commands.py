"""Tests for the relay CLI commands.

Testing approach:
- Uses Click's CliRunner for command invocation
- No database: the relay tools only encode and decode strings
"""

from click.testing import CliRunner
import pytest

from traveller_service.cli.main import cli


@pytest.fixture
def cli_runner():
    """Create Click CLI runner for testing commands."""
    return CliRunner()


class TestEncodeId:
    """Tests for `relay encode-id`."""

    def test_encode_known_type(self, cli_runner):
        """Test encoding a registered node type."""
        result = cli_runner.invoke(cli, ["relay", "encode-id", "World", "42"])

        assert result.exit_code == 0
        assert result.output.strip() == "V29ybGQ6NDI="

    def test_encode_unknown_type_warns(self, cli_runner):
        """Test that unknown types are encoded with a warning."""
        result = cli_runner.invoke(cli, ["relay", "encode-id", "Starport", "1"])

        assert result.exit_code == 0
        assert "not a registered node type" in result.output
        assert "U3RhcnBvcnQ6MQ==" in result.output

    def test_encode_rejects_separator_in_tag(self, cli_runner):
        """Test that tags containing the separator fail."""
        result = cli_runner.invoke(cli, ["relay", "encode-id", "Bad:Tag", "1"])

        assert result.exit_code == 1
        assert "Invalid type tag" in result.output

    def test_encode_requires_integer_id(self, cli_runner):
        """Test that the local id must be an integer."""
        result = cli_runner.invoke(cli, ["relay", "encode-id", "World", "forty-two"])

        assert result.exit_code == 2


class TestDecodeId:
    """Tests for `relay decode-id`."""

    def test_decode(self, cli_runner):
        """Test decoding a global id."""
        result = cli_runner.invoke(cli, ["relay", "decode-id", "V29ybGQ6NDI="])

        assert result.exit_code == 0
        assert result.output.strip() == "World 42"

    def test_decode_invalid(self, cli_runner):
        """Test that malformed ids exit with an error."""
        result = cli_runner.invoke(cli, ["relay", "decode-id", "garbage"])

        assert result.exit_code == 1
        assert "Invalid global id" in result.output


class TestCursorCommands:
    """Tests for `relay encode-cursor` and `relay decode-cursor`."""

    def test_encode_cursor(self, cli_runner):
        """Test encoding a position."""
        result = cli_runner.invoke(cli, ["relay", "encode-cursor", "9"])

        assert result.exit_code == 0
        assert result.output.strip() == "OQ=="

    def test_encode_negative_cursor(self, cli_runner):
        """Test that negative positions are rejected."""
        result = cli_runner.invoke(cli, ["relay", "encode-cursor", "--", "-1"])

        assert result.exit_code == 1
        assert "non-negative" in result.output

    def test_decode_cursor(self, cli_runner):
        """Test decoding a cursor."""
        result = cli_runner.invoke(cli, ["relay", "decode-cursor", "Mw=="])

        assert result.exit_code == 0
        assert result.output.strip() == "3"

    def test_decode_invalid_cursor(self, cli_runner):
        """Test that unusable cursors exit with an error."""
        result = cli_runner.invoke(cli, ["relay", "decode-cursor", "LTE="])

        assert result.exit_code == 1
        assert "Invalid cursor" in result.output


def test_help_lists_groups(cli_runner):
    """Test that the top-level help lists every command group."""
    result = cli_runner.invoke(cli, ["--help"])

    assert result.exit_code == 0
    for group in ("relay", "db", "server"):
        assert group in result.output
