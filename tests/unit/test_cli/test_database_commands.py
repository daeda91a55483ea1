"""Tests for the database CLI commands against a SQLite file."""

import re

from click.testing import CliRunner
import pytest

from traveller_service.cli.main import cli
from traveller_service.core.settings import clear_all_settings_caches


@pytest.fixture
def cli_runner():
    """Create Click CLI runner for testing commands."""
    return CliRunner()


@pytest.fixture
def sqlite_file(tmp_path, monkeypatch):
    """Point the DB_ settings at a fresh SQLite file."""
    path = tmp_path / "traveller.db"
    monkeypatch.setenv("DB_DATABASE_URL", f"sqlite+aiosqlite:///{path}")
    clear_all_settings_caches()
    return path


class TestDatabaseCommands:
    """Tests for `db check`, `db create` and `db seed`."""

    def test_check(self, cli_runner, sqlite_file):
        """Test that the connection check succeeds."""
        result = cli_runner.invoke(cli, ["db", "check"])

        assert result.exit_code == 0, result.output
        assert "Database connection OK" in result.output

    def test_create_then_seed(self, cli_runner, sqlite_file):
        """Test creating the schema and seeding the demo catalogue."""
        created = cli_runner.invoke(cli, ["db", "create"])
        seeded = cli_runner.invoke(cli, ["db", "seed", "--tenant", "campaign"])

        assert created.exit_code == 0, created.output
        assert "Created 9 tables" in created.output
        assert seeded.exit_code == 0, seeded.output
        assert re.search(r"^  worlds +7$", seeded.output, re.MULTILINE)
        assert re.search(r"^  total +30$", seeded.output, re.MULTILINE)
        assert "Seeded tenant 'campaign'" in seeded.output

    def test_seed_same_tenant_twice(self, cli_runner, sqlite_file):
        """Test that seeding an existing tenant fails cleanly."""
        cli_runner.invoke(cli, ["db", "create"])
        cli_runner.invoke(cli, ["db", "seed"])

        result = cli_runner.invoke(cli, ["db", "seed"])

        assert result.exit_code == 1
        assert "already exists" in result.output

    def test_seed_without_schema(self, cli_runner, sqlite_file):
        """Test that seeding an empty database reports the failure."""
        result = cli_runner.invoke(cli, ["db", "seed"])

        assert result.exit_code == 1
        assert "Seeding failed" in result.output
