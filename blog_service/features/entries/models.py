"""SQLAlchemy models for the entries feature."""

from __future__ import annotations

from datetime import datetime
from uuid import UUID

from sqlalchemy import DateTime, ForeignKey, Index, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from blog_service.core.database import Base, TimestampMixin, UUIDPKMixin


class Entry(Base, UUIDPKMixin, TimestampMixin):
    """A post in a blog.

    Entries page per blog in (created_at, id) order; the composite index
    serves that seek directly.
    """

    __tablename__ = "entries"
    __table_args__ = (Index("ix_entries_blog_id_created_at_id", "blog_id", "created_at", "id"),)

    blog_id: Mapped[UUID] = mapped_column(
        ForeignKey("blogs.id", ondelete="CASCADE"),
        nullable=False,
        comment="Blog this entry belongs to",
    )
    title: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
    )
    content: Mapped[str] = mapped_column(
        Text,
        nullable=False,
        default="",
    )
    published_at: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True),
        nullable=True,
        comment="When the entry was published (NULL while draft)",
    )

    @property
    def is_published(self) -> bool:
        return self.published_at is not None

    def __repr__(self) -> str:
        return f"<Entry(id={self.id}, blog_id={self.blog_id}, title={self.title!r})>"
