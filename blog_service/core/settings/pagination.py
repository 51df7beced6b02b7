"""Pagination settings for connection fields.

Having centralized pagination settings keeps every connection
(blogs, a blog's entries) consistent.

Environment variables use PAGINATION_ prefix.
Example: PAGINATION_DEFAULT_PAGE_SIZE=10, PAGINATION_MAX_PAGE_SIZE=100
"""

from __future__ import annotations

from pydantic import Field, SecretStr, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class PaginationSettings(BaseSettings):
    """Cursor pagination configuration.

    Attributes:
        default_page_size: Page size used when neither first nor last is given.
        max_page_size: Largest first/last a caller may request.
        cursor_secret: Optional key used to sign cursors. When set, cursors
            minted with a different key (or edited by hand) are rejected.
    """

    default_page_size: int = Field(
        default=10,
        ge=1,
        le=1000,
        description="Default page size when first/last not specified",
    )
    max_page_size: int = Field(
        default=100,
        ge=1,
        le=10000,
        description="Maximum allowed page size (hard limit)",
    )
    cursor_secret: SecretStr | None = Field(
        default=None,
        description="HMAC key for signing cursors; unsigned when unset",
    )

    model_config = SettingsConfigDict(
        env_prefix="PAGINATION_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        frozen=True,
        extra="ignore",
    )

    @model_validator(mode="after")
    def check_default_within_max(self) -> PaginationSettings:
        if self.default_page_size > self.max_page_size:
            msg = (
                f"default_page_size ({self.default_page_size}) cannot exceed "
                f"max_page_size ({self.max_page_size})"
            )
            raise ValueError(msg)
        return self
