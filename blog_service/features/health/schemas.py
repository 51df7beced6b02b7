"""Health check response schemas."""

from __future__ import annotations

from datetime import datetime
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

HealthStatus = Literal["healthy", "unhealthy"]


class LivenessResponse(BaseModel):
    """Liveness probe response: the process is up."""

    status: HealthStatus = Field(description="Always 'healthy' when the process answers")
    timestamp: datetime = Field(description="Check timestamp")
    service: str = Field(min_length=1, max_length=100, description="Service name")
    version: str = Field(min_length=1, max_length=50, description="Service version")


class ReadinessResponse(BaseModel):
    """Readiness probe response with dependency checks.

    Example:
        ```json
        {
            "ready": true,
            "timestamp": "2025-01-01T00:00:00Z",
            "checks": {"database": true}
        }
        ```
    """

    ready: bool = Field(description="Whether the service can accept traffic")
    timestamp: datetime = Field(description="Check timestamp")
    checks: dict[str, bool] = Field(
        default_factory=dict, description="Individual dependency health checks"
    )

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "ready": True,
                "timestamp": "2025-01-01T00:00:00Z",
                "checks": {"database": True},
            }
        },
    )
