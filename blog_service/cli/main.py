"""Main CLI entry point for blog-service management commands."""

import click

from blog_service.cli.commands import db, server, users
from blog_service.infra.logging.config import setup_logging


@click.group()
@click.version_option(version="1.0.0", prog_name="blog-service")
@click.pass_context
def cli(ctx: click.Context) -> None:
    """Blog Service CLI - management commands for the blog GraphQL API.

    \b
    Command Groups:
      db         Database checks and table creation
      users      User account management
      server     Run the API server

    \b
    Quick Start:
      blog-service db create-tables
      blog-service users create alice alice@example.com
      blog-service server run --reload
    """
    ctx.ensure_object(dict)


cli.add_command(db.db)
cli.add_command(users.users)
cli.add_command(server.server)


def main() -> None:
    """Entry point for CLI."""
    setup_logging()
    cli(obj={})


if __name__ == "__main__":
    main()
