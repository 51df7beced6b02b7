"""Pydantic schemas for the users feature."""

from __future__ import annotations

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, EmailStr, Field, field_validator


class UserCreate(BaseModel):
    """Payload used when registering a user."""

    username: str = Field(..., min_length=1, max_length=100)
    email: EmailStr
    picture: str | None = Field(default=None, max_length=500)

    @field_validator("username")
    @classmethod
    def strip_username(cls, v: str) -> str:
        v = v.strip()
        if not v:
            msg = "username must not be blank"
            raise ValueError(msg)
        return v

    @field_validator("email")
    @classmethod
    def normalize_email(cls, v: str) -> str:
        """Emails are compared case-insensitively, so store them lowercase."""
        return v.strip().lower()


class UserResponse(BaseModel):
    """Representation returned from the API."""

    model_config = ConfigDict(from_attributes=True)

    id: UUID
    username: str
    email: str
    picture: str | None
    created_at: datetime
    updated_at: datetime
