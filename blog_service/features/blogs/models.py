"""SQLAlchemy models for the blogs feature."""

from __future__ import annotations

from uuid import UUID

from sqlalchemy import ForeignKey, Index, String
from sqlalchemy.orm import Mapped, mapped_column

from blog_service.core.database import Base, TimestampMixin, UUIDPKMixin


class Blog(Base, UUIDPKMixin, TimestampMixin):
    """A blog owned by exactly one user.

    Blogs are addressed publicly by `handle` and listed oldest first,
    ordered by (created_at, id).
    """

    __tablename__ = "blogs"
    __table_args__ = (Index("ix_blogs_created_at_id", "created_at", "id"),)

    handle: Mapped[str] = mapped_column(
        String(64),
        nullable=False,
        unique=True,
        comment="URL-safe unique handle (lowercase)",
    )
    name: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        comment="Display name",
    )
    user_id: Mapped[UUID] = mapped_column(
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
        comment="Owner",
    )

    def __repr__(self) -> str:
        return f"<Blog(id={self.id}, handle={self.handle!r})>"
