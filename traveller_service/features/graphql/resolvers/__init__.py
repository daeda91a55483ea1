"""GraphQL resolvers."""

from traveller_service.features.graphql.resolvers.queries import Query

__all__ = ["Query"]
