"""Pydantic schemas for the entries feature."""

from __future__ import annotations

from pydantic import BaseModel, Field, field_validator


class EntryCreate(BaseModel):
    """Payload used when writing a new entry."""

    title: str = Field(..., min_length=1, max_length=255)
    content: str = Field(default="", max_length=100_000)

    @field_validator("title")
    @classmethod
    def strip_title(cls, v: str) -> str:
        v = v.strip()
        if not v:
            msg = "title must not be blank"
            raise ValueError(msg)
        return v


class EntryUpdate(BaseModel):
    """Payload for editing an entry. Omitted fields are left unchanged."""

    title: str | None = Field(default=None, min_length=1, max_length=255)
    content: str | None = Field(default=None, max_length=100_000)

    @field_validator("title")
    @classmethod
    def strip_title(cls, v: str | None) -> str | None:
        if v is None:
            return v
        v = v.strip()
        if not v:
            msg = "title must not be blank"
            raise ValueError(msg)
        return v

