"""Application lifespan management.

Startup Order:
1. Logging - always runs first
2. Database - connectivity check, optional table creation

Shutdown Order: Reverse of startup.
"""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import TYPE_CHECKING

from blog_service.core.settings import get_app_settings, get_logging_settings
from blog_service.infra.database import close_database, init_database
from blog_service.infra.logging.config import setup_logging, shutdown as shutdown_logging

if TYPE_CHECKING:
    from collections.abc import AsyncIterator

    from fastapi import FastAPI

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Start and stop the service's infrastructure."""
    app_settings = get_app_settings()

    setup_logging(get_logging_settings())
    logger.info(
        "Application starting",
        extra={
            "service": app_settings.service_name,
            "version": app_settings.version,
            "environment": app_settings.environment,
        },
    )

    await init_database()

    try:
        yield
    finally:
        logger.info("Application shutting down", extra={"service": app_settings.service_name})
        await close_database()
        shutdown_logging()
