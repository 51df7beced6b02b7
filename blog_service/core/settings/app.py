"""Service identity and FastAPI toggles (``APP_`` prefix)."""

from __future__ import annotations

from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

Environment = Literal["development", "staging", "production", "test"]


class AppSettings(BaseSettings):
    """Settings for the FastAPI application itself.

    Example: APP_DEBUG=true APP_DOCS_ENABLED=false
    """

    service_name: str = Field(
        default="blog-service",
        pattern=r"^[a-z0-9]+(-[a-z0-9]+)*$",
        max_length=100,
        description="Name stamped on log records and health responses",
    )
    title: str = Field(default="Blog Service API", min_length=1, max_length=200)
    version: str = Field(default="1.0.0", pattern=r"^\d+\.\d+\.\d+(-[a-zA-Z0-9]+)?$")
    environment: Environment = "development"

    debug: bool = Field(
        default=False,
        description="Unmask internal GraphQL errors and allow any CORS origin",
    )
    docs_enabled: bool = Field(default=True, description="Serve /docs and /openapi.json")

    model_config = SettingsConfigDict(
        env_prefix="APP_",
        env_file=".env",
        extra="ignore",
        frozen=True,
    )
