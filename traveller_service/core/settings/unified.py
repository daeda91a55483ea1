"""Unified settings composition for convenient access.

Usage:
    from traveller_service.core.settings import get_settings

    settings = get_settings()
    print(settings.app.tenant_header)
    print(settings.graphql.max_page_size)

Each nested settings class keeps its own env prefix.
"""

from __future__ import annotations

from functools import lru_cache

from pydantic import BaseModel, ConfigDict

from .app import AppSettings
from .graphql import GraphQLSettings
from .logs import LoggingSettings
from .postgres import PostgresSettings


class Settings(BaseModel):
    """All settings domains in one object."""

    model_config = ConfigDict(frozen=True)

    app: AppSettings
    db: PostgresSettings
    logging: LoggingSettings
    graphql: GraphQLSettings


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Get cached unified settings built from the per-domain loaders."""
    from .loader import get_app_settings, get_db_settings, get_graphql_settings, get_logging_settings

    return Settings(
        app=get_app_settings(),
        db=get_db_settings(),
        logging=get_logging_settings(),
        graphql=get_graphql_settings(),
    )
