"""CLI command modules."""

from blog_service.cli.commands import db, server, users

__all__ = ["db", "server", "users"]
