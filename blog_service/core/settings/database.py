"""Database connection settings.

Environment variables use DB_ prefix.
Example: DB_URL=sqlite+aiosqlite:///./blog.db, DB_ECHO=true
"""

from __future__ import annotations

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class DatabaseSettings(BaseSettings):
    """Async SQLAlchemy engine configuration."""

    url: str = Field(
        default="sqlite+aiosqlite:///./blog.db",
        min_length=1,
        description="Async SQLAlchemy database URL",
    )
    echo: bool = Field(
        default=False,
        description="Log every SQL statement (very verbose)",
    )
    create_tables: bool = Field(
        default=True,
        description="Create missing tables on application startup",
    )

    model_config = SettingsConfigDict(
        env_prefix="DB_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        frozen=True,
        extra="ignore",
    )

    @field_validator("url")
    @classmethod
    def require_async_driver(cls, v: str) -> str:
        """Reject synchronous driver URLs; the engine is always async."""
        if v.startswith("sqlite://") or v.startswith("postgresql://"):
            msg = f"Database URL must name an async driver (e.g. sqlite+aiosqlite), got {v!r}"
            raise ValueError(msg)
        return v

    @property
    def is_sqlite(self) -> bool:
        """Check if the configured backend is SQLite."""
        return self.url.startswith("sqlite")
