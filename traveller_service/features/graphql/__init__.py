"""GraphQL API: Relay node interface and paginated connections over the catalogue."""
