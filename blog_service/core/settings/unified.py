"""Unified settings composition for convenient access.

Usage:
    from blog_service.core.settings import get_settings

    settings = get_settings()
    print(settings.pagination.max_page_size)

Each nested settings class still respects its own env prefix. Code that
only needs one domain should prefer the individual get_*_settings()
functions.
"""

from __future__ import annotations

from functools import lru_cache

from pydantic import BaseModel, ConfigDict

from .app import AppSettings
from .auth import AuthSettings
from .database import DatabaseSettings
from .graphql import GraphQLSettings
from .logs import LoggingSettings
from .loader import (
    get_app_settings,
    get_auth_settings,
    get_db_settings,
    get_graphql_settings,
    get_logging_settings,
    get_pagination_settings,
)
from .pagination import PaginationSettings


class Settings(BaseModel):
    """All settings domains in one object."""

    model_config = ConfigDict(frozen=True)

    app: AppSettings
    db: DatabaseSettings
    logging: LoggingSettings
    graphql: GraphQLSettings
    pagination: PaginationSettings
    auth: AuthSettings


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Get cached unified settings built from the per-domain loaders."""
    return Settings(
        app=get_app_settings(),
        db=get_db_settings(),
        logging=get_logging_settings(),
        graphql=get_graphql_settings(),
        pagination=get_pagination_settings(),
        auth=get_auth_settings(),
    )


def clear_all_caches() -> None:
    """Clear every settings cache (used by tests after changing env vars)."""
    get_app_settings.cache_clear()
    get_db_settings.cache_clear()
    get_logging_settings.cache_clear()
    get_graphql_settings.cache_clear()
    get_pagination_settings.cache_clear()
    get_auth_settings.cache_clear()
    get_settings.cache_clear()
