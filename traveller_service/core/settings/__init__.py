"""Modular Pydantic Settings v2 configuration.

One frozen settings class per domain, each with its own env prefix:

- AppSettings (APP_): identity, server, tenancy
- PostgresSettings (DB_): database URL and pool
- LoggingSettings (LOG_): log level, format, handlers
- GraphQLSettings (GRAPHQL_): endpoint, depth limit, Relay pagination

Configuration precedence (highest to lowest):
    1. init kwargs (testing/overrides)
    2. YAML/conf.d files (optional, local/dev)
    3. Environment variables
    4. .env file
    5. secrets_dir
"""

from __future__ import annotations

from .app import AppSettings
from .graphql import GraphQLSettings
from .loader import (
    clear_all_settings_caches,
    get_app_settings,
    get_db_settings,
    get_graphql_settings,
    get_logging_settings,
)
from .logs import LoggingSettings
from .postgres import PostgresSettings
from .unified import Settings, get_settings

__all__ = [
    "AppSettings",
    "GraphQLSettings",
    "LoggingSettings",
    "PostgresSettings",
    "Settings",
    "clear_all_settings_caches",
    "get_app_settings",
    "get_db_settings",
    "get_graphql_settings",
    "get_logging_settings",
    "get_settings",
]
