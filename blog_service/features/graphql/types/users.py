"""GraphQL types for users."""

from __future__ import annotations

from datetime import datetime
from typing import TYPE_CHECKING

import strawberry

from blog_service.features.graphql.types.base import as_utc

if TYPE_CHECKING:
    from blog_service.features.users.models import User


@strawberry.type(name="User", description="A registered author")
class UserType:
    id: strawberry.ID
    username: str
    email: str
    picture: str | None
    created: datetime
    updated: datetime

    @classmethod
    def from_model(cls, user: User) -> UserType:
        return cls(
            id=strawberry.ID(str(user.id)),
            username=user.username,
            email=user.email,
            picture=user.picture,
            created=as_utc(user.created_at),
            updated=as_utc(user.updated_at),
        )


__all__ = ["UserType"]
