"""Logging settings (``LOG_`` prefix).

Example: LOG_LEVEL=debug LOG_JSON=true LOG_FILE_PATH=logs/blog.jsonl
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Literal

from pydantic import AliasChoices, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class LoggingSettings(BaseSettings):
    service_name: str = Field(default="blog-service", description="Static 'service' field of JSON records")

    level: LogLevel = "INFO"
    console_level: LogLevel | None = Field(default=None, description="Console level; defaults to `level`")
    console_enabled: bool = True
    json_logs: bool = Field(
        default=False,
        validation_alias=AliasChoices("log_json", "json_logs"),
        description="Write JSON Lines instead of plain text",
    )

    file_path: Path | None = Field(default=None, description="Rotating log file; disabled when unset")
    file_max_bytes: int = Field(default=10 * 1024 * 1024, ge=1024)
    file_backup_count: int = Field(default=5, ge=0, le=100)

    include_context: bool = Field(
        default=True,
        description="Copy the request's log context (request_id, ...) onto every record",
    )
    capture_warnings: bool = True

    model_config = SettingsConfigDict(
        env_prefix="LOG_",
        env_file=".env",
        extra="ignore",
        frozen=True,
        populate_by_name=True,
    )

    @field_validator("level", "console_level", mode="before")
    @classmethod
    def _upper_level(cls, value: Any) -> Any:
        return value.upper() if isinstance(value, str) else value

    def to_logging_kwargs(self) -> dict[str, Any]:
        """Keyword arguments for ``configure_logging``."""
        return {
            "log_level": self.level,
            "console_level": self.console_level,
            "console_enabled": self.console_enabled,
            "json_logs": self.json_logs,
            "file_path": str(self.file_path) if self.file_path else None,
            "file_max_bytes": self.file_max_bytes,
            "file_backup_count": self.file_backup_count,
            "include_context": self.include_context,
            "capture_warnings": self.capture_warnings,
            "service_name": self.service_name,
        }
