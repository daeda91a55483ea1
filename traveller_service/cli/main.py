"""Main CLI entry point for traveller-service management commands."""

import click

from traveller_service.cli.commands import database, relay, server
from traveller_service.infra.logging.config import setup_logging


@click.group()
@click.version_option(package_name="traveller-service", prog_name="traveller-service")
@click.pass_context
def cli(ctx: click.Context) -> None:
    """Traveller Service CLI.

    \b
    Command Groups:
      relay      Encode/decode global ids and cursors
      db         Create, check and seed the database
      server     Run the API server

    \b
    Quick Start:
      traveller-service db create
      traveller-service db seed
      traveller-service server run
    """
    ctx.ensure_object(dict)


cli.add_command(relay.relay)
cli.add_command(database.db)
cli.add_command(server.server)


def main() -> None:
    """Entry point for CLI."""
    setup_logging()
    cli(obj={})


if __name__ == "__main__":
    main()
