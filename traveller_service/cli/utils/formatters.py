"""Output helpers shared by the CLI commands.

Messages go through ``click.secho`` so colour is dropped when the output
is not a terminal. Errors go to stderr; ``fail`` also ends the command.
"""

from collections.abc import Mapping
import sys
from typing import NoReturn

import click


def success(message: str) -> None:
    click.secho(f"✓ {message}", fg="green")


def info(message: str) -> None:
    click.secho(f"ℹ {message}", fg="blue")


def warning(message: str) -> None:
    click.secho(f"⚠ {message}", fg="yellow", err=True)


def error(message: str) -> None:
    click.secho(f"✗ {message}", fg="red", err=True)


def fail(message: str, exit_code: int = 1) -> NoReturn:
    """Print an error and exit with ``exit_code``."""
    error(message)
    sys.exit(exit_code)


def header(message: str) -> None:
    click.secho(f"\n{message}", fg="cyan", bold=True)


def counts_table(counts: Mapping[str, int], total_label: str = "total") -> None:
    """Print row counts per table, aligned, followed by their sum.

    Example:
        counts_table({"worlds": 7, "characters": 5})

          worlds      7
          characters  5
          total       12
    """
    width = max((len(name) for name in [*counts, total_label]), default=0)
    for name, count in counts.items():
        click.echo(f"  {name.ljust(width)}  {count}")
    click.secho(f"  {total_label.ljust(width)}  {sum(counts.values())}", bold=True)
