"""Authentication dependencies.

Identity comes from an upstream auth proxy, which authenticates the browser
session and forwards the user's email in a trusted header (see AuthSettings).
This service only maps that email to a User row.

    from blog_service.core.dependencies.auth import OptionalUser

    @router.get("/whoami")
    async def whoami(user: OptionalUser):
        return {"email": user.email} if user else None
"""

from __future__ import annotations

import logging
from typing import Annotated

from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from blog_service.core.dependencies.database import get_db_session
from blog_service.core.settings import get_auth_settings
from blog_service.features.users.models import User
from blog_service.features.users.service import UserService
from blog_service.infra.logging import set_log_context

logger = logging.getLogger(__name__)


async def get_current_user_optional(
    request: Request,
    session: Annotated[AsyncSession, Depends(get_db_session)],
) -> User | None:
    """Resolve the requesting user from the identity header, or None.

    With AUTH_AUTO_PROVISION enabled an unknown email is registered on the
    spot; otherwise it is treated as anonymous.
    """
    settings = get_auth_settings()
    email = request.headers.get(settings.user_header, "").strip()
    if not email:
        return None

    service = UserService(session)
    user = await service.find_by_email(email)
    if user is None and settings.auto_provision:
        user = await service.get_or_provision(email, picture=settings.default_picture)
        await session.commit()
    if user is None:
        logger.info("Unknown user in identity header", extra={"header": settings.user_header})
        return None

    set_log_context(user_id=str(user.id))
    return user


OptionalUser = Annotated[User | None, Depends(get_current_user_optional)]
