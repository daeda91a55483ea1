"""CLI command modules."""

from traveller_service.cli.commands import database, relay, server

__all__ = ["database", "relay", "server"]
