"""Server management commands."""

import click
import uvicorn

from blog_service.cli.utils import info
from blog_service.core.settings import get_app_settings


@click.group(name="server")
def server() -> None:
    """Server management commands."""


@server.command()
@click.option("--host", default="127.0.0.1", help="Host to bind")
@click.option("--port", default=8000, type=int, help="Port to bind")
@click.option(
    "--reload/--no-reload",
    default=False,
    help="Enable auto-reload on code changes",
)
@click.option(
    "--log-level",
    default="info",
    type=click.Choice(["critical", "error", "warning", "info", "debug", "trace"]),
    help="Uvicorn log level",
)
def run(host: str, port: int, reload: bool, log_level: str) -> None:
    """Run the API server."""
    settings = get_app_settings()
    info(f"Server will run at: http://{host}:{port}")
    info(f"Environment: {settings.environment}")

    uvicorn.run(
        "blog_service.app.main:app",
        host=host,
        port=port,
        reload=reload,
        log_level=log_level,
    )
