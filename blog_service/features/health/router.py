"""Health check API endpoints.

- Liveness probes: /health/live (and /health) - Is the process alive?
- Readiness probes: /health/ready - Can the database be reached?
"""

from __future__ import annotations

import logging
from datetime import UTC, datetime
from typing import Annotated

from fastapi import APIRouter, Depends, Response, status
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from blog_service.core.dependencies.database import get_db_session
from blog_service.core.settings import get_app_settings
from blog_service.features.health.schemas import LivenessResponse, ReadinessResponse

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/health", tags=["health"])


@router.get(
    "",
    response_model=LivenessResponse,
    summary="Liveness probe",
    description="Returns 200 as long as the process is serving requests",
)
@router.get("/live", response_model=LivenessResponse, include_in_schema=False)
async def liveness_check() -> LivenessResponse:
    settings = get_app_settings()
    return LivenessResponse(
        status="healthy",
        timestamp=datetime.now(UTC),
        service=settings.service_name,
        version=settings.version,
    )


@router.get(
    "/ready",
    response_model=ReadinessResponse,
    status_code=status.HTTP_200_OK,
    responses={
        503: {"description": "Service not ready to accept traffic"},
    },
    summary="Readiness probe",
    description="Returns 200 if the database answers, 503 if not",
)
async def readiness_check(
    response: Response,
    session: Annotated[AsyncSession, Depends(get_db_session)],
) -> ReadinessResponse:
    """Ping the database with SELECT 1."""
    try:
        await session.execute(text("SELECT 1"))
        database_ok = True
    except SQLAlchemyError as exc:
        logger.warning("Readiness check failed", extra={"dependency": "database", "error": str(exc)})
        database_ok = False

    if not database_ok:
        response.status_code = status.HTTP_503_SERVICE_UNAVAILABLE

    return ReadinessResponse(
        ready=database_ok,
        timestamp=datetime.now(UTC),
        checks={"database": database_ok},
    )
