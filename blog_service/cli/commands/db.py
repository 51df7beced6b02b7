"""Database management commands.

Example:bash
    # Check the connection
    blog-service db check

    # Create missing tables
    blog-service db create-tables
"""

import sys

import click
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError

from blog_service.cli.utils import coro, error, header, info, success
from blog_service.core.settings import get_db_settings


@click.group(name="db")
def db() -> None:
    """Database management commands."""


@db.command()
@coro
async def check() -> None:
    """Test the database connection."""
    from blog_service.infra.database import close_database, engine

    header("Database Connection")
    info(f"Driver: {engine.dialect.driver}")

    try:
        async with engine.connect() as conn:
            await conn.execute(text("SELECT 1"))
    except SQLAlchemyError as e:
        error(f"Database connection failed: {e}")
        sys.exit(1)
    finally:
        await close_database()

    success("Database connection OK")


@db.command(name="create-tables")
@coro
async def create_tables_command() -> None:
    """Create every table that does not exist yet."""
    from blog_service.infra.database import close_database, create_tables

    header("Create Tables")
    if get_db_settings().is_sqlite:
        info("SQLite database: tables are created in the database file")

    try:
        await create_tables()
    except SQLAlchemyError as e:
        error(f"Failed to create tables: {e}")
        sys.exit(1)
    finally:
        await close_database()

    success("Tables created")
