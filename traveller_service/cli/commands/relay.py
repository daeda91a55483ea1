"""Relay identifier tools.

Encode and decode the opaque strings clients see, without a database:

    traveller-service relay encode-id World 42
    traveller-service relay decode-id V29ybGQ6NDI=
    traveller-service relay encode-cursor 9
    traveller-service relay decode-cursor OQ==
"""

import click

from traveller_service.cli.utils import fail, warning
from traveller_service.core.exceptions import InvalidGlobalIdException
from traveller_service.core.pagination import INVALID_CURSOR, CursorCodec
from traveller_service.core.relay import NodeType, from_global_id, to_global_id


@click.group(name="relay")
def relay() -> None:
    """Global id and cursor tools."""


@relay.command("encode-id")
@click.argument("type_tag")
@click.argument("local_id", type=int)
def encode_id(type_tag: str, local_id: int) -> None:
    """Print the global id for TYPE_TAG and LOCAL_ID."""
    if type_tag not in {t.value for t in NodeType}:
        warning(f"{type_tag!r} is not a registered node type")
    try:
        click.echo(to_global_id(type_tag, local_id))
    except ValueError as e:
        fail(str(e))


@relay.command("decode-id")
@click.argument("global_id")
def decode_id(global_id: str) -> None:
    """Print the type tag and local id inside GLOBAL_ID."""
    try:
        decoded = from_global_id(global_id)
    except InvalidGlobalIdException as e:
        fail(e.detail)
    click.echo(f"{decoded.type_tag} {decoded.local_id}")


@relay.command("encode-cursor")
@click.argument("index", type=int)
def encode_cursor(index: int) -> None:
    """Print the cursor for position INDEX."""
    try:
        click.echo(CursorCodec.encode(index))
    except ValueError as e:
        fail(str(e))


@relay.command("decode-cursor")
@click.argument("cursor")
def decode_cursor(cursor: str) -> None:
    """Print the position inside CURSOR."""
    index = CursorCodec.decode(cursor)
    if index == INVALID_CURSOR:
        fail(f"Invalid cursor: {cursor!r}")
    click.echo(index)
