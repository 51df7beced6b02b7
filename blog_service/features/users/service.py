"""Service layer for the users feature."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from blog_service.core.database.exceptions import NotFoundError
from blog_service.core.exceptions import ConflictException, NotFoundException
from blog_service.features.users.models import User
from blog_service.features.users.repository import UserRepository, get_user_repository
from blog_service.features.users.schemas import UserCreate
from blog_service.infra.logging import get_lazy_logger

if TYPE_CHECKING:
    from uuid import UUID

    from sqlalchemy.ext.asyncio import AsyncSession

logger = logging.getLogger(__name__)
lazy_logger = get_lazy_logger(__name__)


class UserService:
    """Service for user lookup and registration."""

    def __init__(
        self,
        session: AsyncSession,
        repo: UserRepository | None = None,
    ) -> None:
        self._session = session
        self._repo = repo or get_user_repository()

    async def get_user(self, user_id: UUID) -> User:
        """Get a user by ID.

        Raises:
            NotFoundException: If the user does not exist
        """
        try:
            return await self._repo.get_or_raise(self._session, user_id)
        except NotFoundError as exc:
            raise NotFoundException(
                detail=f"User {user_id} not found",
                type="user-not-found",
                extra={"user_id": str(user_id)},
            ) from exc

    async def find_by_email(self, email: str) -> User | None:
        return await self._repo.get_by_email(self._session, email)

    async def create_user(self, payload: UserCreate) -> User:
        """Register a new user.

        Raises:
            ConflictException: If the email is already registered
        """
        if await self._repo.get_by_email(self._session, payload.email):
            raise ConflictException(
                detail=f"User with email '{payload.email}' already exists",
                type="user-email-exists",
                extra={"email": payload.email},
            )

        user = await self._repo.create(
            self._session,
            User(username=payload.username, email=payload.email, picture=payload.picture),
        )
        logger.info("User created", extra={"user_id": str(user.id)})
        return user

    async def get_or_provision(self, email: str, *, picture: str | None = None) -> User:
        """Return the user for `email`, registering one on first sight.

        The username defaults to the local part of the email.
        """
        user = await self.find_by_email(email)
        if user is not None:
            return user

        payload = UserCreate(username=email.split("@", 1)[0], email=email, picture=picture)
        user = await self.create_user(payload)
        lazy_logger.debug(lambda: f"service.get_or_provision({email!r}) -> provisioned {user.id}")
        return user
