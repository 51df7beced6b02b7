"""FastAPI application factory."""

from __future__ import annotations

from fastapi import FastAPI

from blog_service.app.exception_handlers import configure_exception_handlers
from blog_service.app.lifespan import lifespan
from blog_service.app.middleware import configure_middleware
from blog_service.app.router import setup_routers
from blog_service.core.settings import get_settings


def create_app() -> FastAPI:
    """Build the app: exception handlers, middleware, then routers."""
    settings = get_settings()
    app_settings = settings.app

    app = FastAPI(
        title=app_settings.title,
        version=app_settings.version,
        docs_url="/docs" if app_settings.docs_enabled else None,
        redoc_url=None,
        openapi_url="/openapi.json" if app_settings.docs_enabled else None,
        debug=app_settings.debug,
        lifespan=lifespan,
    )

    configure_exception_handlers(app)

    configure_middleware(app, settings)

    setup_routers(app, settings.graphql)

    return app


# Application instance for uvicorn
app = create_app()
