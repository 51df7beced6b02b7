"""Middleware configuration for FastAPI application.

Example Usage:
    from blog_service.app.middleware import configure_middleware

    configure_middleware(app, get_settings())
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from fastapi.middleware.cors import CORSMiddleware

from blog_service.app.middleware.base import HeaderContextMiddleware
from blog_service.app.middleware.request_id import RequestIDMiddleware

if TYPE_CHECKING:
    from fastapi import FastAPI

    from blog_service.core.settings import Settings

logger = logging.getLogger(__name__)


def configure_middleware(app: FastAPI, settings: Settings) -> None:
    """Configure all middleware for the FastAPI application.

    Middleware is applied in REVERSE order (last added = first to execute).
    Execution order (outermost to innermost):

    1. Request ID Middleware
       - Sets request_id in logging context for all downstream logs
    2. CORS Middleware (debug only)
       - Lets a browser-based GraphQL IDE on another origin call the API
    """
    if settings.app.debug:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=["*"],
            allow_methods=["GET", "POST", "OPTIONS"],
            allow_headers=["*"],
        )

    app.add_middleware(RequestIDMiddleware)

    logger.info(
        "Middleware configured",
        extra={"cors": settings.app.debug, "request_id": True},
    )


__all__ = ["HeaderContextMiddleware", "RequestIDMiddleware", "configure_middleware"]
