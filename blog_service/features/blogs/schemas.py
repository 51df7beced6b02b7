"""Pydantic schemas for the blogs feature."""

from __future__ import annotations

import re

from pydantic import BaseModel, Field, field_validator

HANDLE_PATTERN = re.compile(r"^[a-z0-9][a-z0-9_-]*$")


class BlogCreate(BaseModel):
    """Payload used when creating a blog."""

    handle: str = Field(
        ...,
        min_length=1,
        max_length=64,
        description="Unique handle: lowercase letters, digits, '-' and '_'",
    )
    name: str = Field(..., min_length=1, max_length=255)

    @field_validator("handle")
    @classmethod
    def normalize_handle(cls, v: str) -> str:
        """Lowercase the handle and check its character set."""
        v = v.strip().lower()
        if not HANDLE_PATTERN.match(v):
            msg = "handle must start with a letter or digit and contain only a-z, 0-9, '-' or '_'"
            raise ValueError(msg)
        return v

    @field_validator("name")
    @classmethod
    def strip_name(cls, v: str) -> str:
        v = v.strip()
        if not v:
            msg = "name must not be blank"
            raise ValueError(msg)
        return v


class BlogUpdate(BaseModel):
    """Payload for renaming a blog. The handle is immutable."""

    name: str = Field(..., min_length=1, max_length=255)

    @field_validator("name")
    @classmethod
    def strip_name(cls, v: str) -> str:
        v = v.strip()
        if not v:
            msg = "name must not be blank"
            raise ValueError(msg)
        return v

