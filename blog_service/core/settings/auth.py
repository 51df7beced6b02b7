"""Authentication settings.

Identity is asserted by an upstream auth proxy (oauth2-proxy and friends)
through a request header carrying the user's email.

Environment variables use AUTH_ prefix.
Example: AUTH_USER_HEADER=X-Forwarded-Email, AUTH_AUTO_PROVISION=true
"""

from __future__ import annotations

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class AuthSettings(BaseSettings):
    """Header-based authentication configuration."""

    user_header: str = Field(
        default="X-Auth-Request-Email",
        min_length=1,
        description="Request header holding the authenticated user's email",
    )
    auto_provision: bool = Field(
        default=False,
        description="Create a user record on first sight of an unknown email",
    )
    default_picture: str = Field(
        default="default.png",
        description="Picture assigned to auto-provisioned users",
    )

    model_config = SettingsConfigDict(
        env_prefix="AUTH_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        frozen=True,
        extra="ignore",
    )
