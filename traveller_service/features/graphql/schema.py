"""GraphQL schema assembly.

Every node type is listed explicitly so ``node``/``nodes`` can return any
of them through the ``Node`` interface.
"""

from __future__ import annotations

import logging

import strawberry

from traveller_service.features.graphql.extensions import get_extensions
from traveller_service.features.graphql.resolvers import Query
from traveller_service.features.graphql.types import NODE_TYPES

logger = logging.getLogger(__name__)


def create_schema() -> strawberry.Schema:
    """Build the schema with the configured extensions."""
    return strawberry.Schema(
        query=Query,
        types=list(NODE_TYPES),
        extensions=get_extensions(),
    )


schema = create_schema()

logger.debug("GraphQL schema created")

__all__ = ["create_schema", "schema"]
