"""CLI helpers: the async runner and output formatting."""

from blog_service.cli.utils.async_runner import coro
from blog_service.cli.utils.formatters import error, header, info, success, table

__all__ = ["coro", "error", "header", "info", "success", "table"]
