"""User management commands.

Blogs are owned by users, and users normally arrive through the auth
proxy. These commands register and list them by hand:

    blog-service users create alice alice@example.com
    blog-service users list --format json
"""

import json
import sys

import click
from pydantic import ValidationError

from blog_service.cli.utils import coro, error, header, info, success, table
from blog_service.core.exceptions import ConflictException


@click.group(name="users")
def users() -> None:
    """User management commands."""


@users.command(name="create")
@click.argument("username")
@click.argument("email")
@click.option("--picture", default=None, help="Avatar URL")
@coro
async def create_user(username: str, email: str, picture: str | None) -> None:
    """Register a user."""
    from blog_service.features.users.schemas import UserCreate
    from blog_service.features.users.service import UserService
    from blog_service.infra.database import close_database, get_async_session

    try:
        payload = UserCreate(username=username, email=email, picture=picture)
    except ValidationError as e:
        error(f"Invalid user: {e.errors()[0]['msg']}")
        sys.exit(1)

    try:
        async with get_async_session() as session:
            user = await UserService(session).create_user(payload)
            await session.commit()
    except ConflictException as e:
        error(e.detail)
        sys.exit(1)
    finally:
        await close_database()

    success(f"Created user {user.username} <{user.email}> ({user.id})")


@users.command(name="list")
@click.option(
    "--limit",
    default=50,
    type=int,
    help="Maximum number of users to show (default: 50)",
)
@click.option(
    "--format",
    "output_format",
    type=click.Choice(["table", "json"]),
    default="table",
    help="Output format",
)
@coro
async def list_users(limit: int, output_format: str) -> None:
    """List registered users, oldest first."""
    from blog_service.features.users.repository import get_user_repository
    from blog_service.features.users.schemas import UserResponse
    from blog_service.infra.database import close_database, get_async_session

    try:
        async with get_async_session() as session:
            users_list = await get_user_repository().list(session, limit=limit)
    finally:
        await close_database()

    if output_format == "json":
        data = [UserResponse.model_validate(u).model_dump(mode="json") for u in users_list]
        click.echo(json.dumps(data, indent=2))
        return

    header("User List")
    if not users_list:
        info("No users found")
        return

    table(
        ["ID", "Username", "Email", "Created"],
        [(user.id, user.username, user.email, f"{user.created_at:%Y-%m-%d %H:%M}") for user in users_list],
    )
    click.echo()
    success(f"Total: {len(users_list)} users")
