"""SQLAlchemy models for the users feature."""

from __future__ import annotations

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column

from blog_service.core.database import Base, TimestampMixin, UUIDPKMixin


class User(Base, UUIDPKMixin, TimestampMixin):
    """A person who can own blogs.

    Users are identified by email, which the auth proxy asserts on every
    request.
    """

    __tablename__ = "users"

    username: Mapped[str] = mapped_column(
        String(100),
        nullable=False,
        comment="Display name",
    )
    email: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        unique=True,
        index=True,
        comment="Login email (unique, lowercase)",
    )
    picture: Mapped[str | None] = mapped_column(
        String(500),
        nullable=True,
        comment="Avatar URL or file name",
    )

    def __repr__(self) -> str:
        return f"<User(id={self.id}, email={self.email!r})>"
