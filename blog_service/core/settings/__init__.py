"""Modular Pydantic Settings v2 configuration.

Each domain (app, db, logging, graphql, pagination, auth) has its own
frozen settings class with an env prefix and an LRU-cached loader:

    from blog_service.core.settings import get_pagination_settings

Or use unified settings for access to all domains:

    from blog_service.core.settings import get_settings

Configuration precedence (highest to lowest):
    1. init kwargs (testing/overrides)
    2. Environment variables
    3. .env file
"""

from __future__ import annotations

from .app import AppSettings
from .auth import AuthSettings
from .database import DatabaseSettings
from .graphql import GraphQLSettings
from .loader import (
    get_app_settings,
    get_auth_settings,
    get_db_settings,
    get_graphql_settings,
    get_logging_settings,
    get_pagination_settings,
)
from .logs import LoggingSettings
from .pagination import PaginationSettings
from .unified import Settings, clear_all_caches, get_settings

__all__ = [
    "AppSettings",
    "AuthSettings",
    "DatabaseSettings",
    "GraphQLSettings",
    "LoggingSettings",
    "PaginationSettings",
    "Settings",
    "clear_all_caches",
    "get_app_settings",
    "get_auth_settings",
    "get_db_settings",
    "get_graphql_settings",
    "get_logging_settings",
    "get_pagination_settings",
    "get_settings",
]
