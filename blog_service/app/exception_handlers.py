"""Exception handlers rendering RFC 7807 problem details.

GraphQL errors are reported inside the GraphQL response. These handlers cover
the REST surface (health probes, docs) and anything raised by a dependency
before a GraphQL operation starts, such as identity-header provisioning.
"""

from __future__ import annotations

import logging
from typing import Any

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from blog_service.core.exceptions import AppException, default_title
from blog_service.core.pagination import InvalidCursorError, PaginationError

logger = logging.getLogger(__name__)

PROBLEM_JSON = "application/problem+json"


def problem_response(
    request: Request,
    status_code: int,
    detail: str,
    *,
    type_: str = "about:blank",
    title: str | None = None,
    instance: str | None = None,
    extra: dict[str, Any] | None = None,
) -> JSONResponse:
    """Build an ``application/problem+json`` response.

    `extra` members are merged into the top level of the body, and the request
    id set by RequestIDMiddleware is echoed as ``request_id``.
    """
    body: dict[str, Any] = {
        "type": type_,
        "title": title or default_title(status_code),
        "status": status_code,
        "detail": detail,
        "instance": instance or str(request.url),
    }
    if extra:
        body.update(extra)
    if request_id := getattr(request.state, "request_id", None):
        body["request_id"] = request_id
    return JSONResponse(status_code=status_code, content=body, media_type=PROBLEM_JSON)


def _request_fields(request: Request) -> dict[str, Any]:
    return {
        "request_id": getattr(request.state, "request_id", None),
        "path": request.url.path,
        "method": request.method,
    }


async def app_exception_handler(request: Request, exc: AppException) -> JSONResponse:
    logger.warning(
        "Application exception occurred",
        extra={
            **_request_fields(request),
            "exception_type": exc.type,
            "status_code": exc.status_code,
            "detail": exc.detail,
        },
    )
    return problem_response(
        request,
        exc.status_code,
        exc.detail,
        type_=exc.type,
        title=exc.title,
        instance=exc.instance,
        extra=exc.extra,
    )


async def pagination_exception_handler(request: Request, exc: PaginationError) -> JSONResponse:
    """Bad connection arguments outside GraphQL become a 422."""
    type_ = "invalid-cursor" if isinstance(exc, InvalidCursorError) else "validation-error"
    logger.info("Rejected pagination arguments", extra={**_request_fields(request), **exc.details})
    return problem_response(
        request,
        status.HTTP_422_UNPROCESSABLE_ENTITY,
        exc.message,
        type_=type_,
        extra=exc.details,
    )


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """List each failing field under ``errors``."""
    errors = [
        {
            "field": ".".join(str(part) for part in err["loc"]),
            "message": err["msg"],
            "type": err["type"],
        }
        for err in exc.errors()
    ]
    logger.warning(
        "Request validation failed",
        extra={**_request_fields(request), "error_count": len(errors)},
    )
    return problem_response(
        request,
        status.HTTP_422_UNPROCESSABLE_ENTITY,
        f"Request validation failed for {len(errors)} field(s)",
        type_="validation-error",
        title="Validation Error",
        extra={"errors": errors},
    )


async def generic_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.error(
        "Unexpected exception occurred",
        extra={**_request_fields(request), "exception_type": type(exc).__name__},
        exc_info=exc,
    )
    # The message of an unexpected error is never sent to the client
    return problem_response(
        request,
        status.HTTP_500_INTERNAL_SERVER_ERROR,
        "An unexpected error occurred while processing your request",
        type_="internal-error",
    )


def configure_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(AppException, app_exception_handler)  # type: ignore[arg-type]
    app.add_exception_handler(PaginationError, pagination_exception_handler)  # type: ignore[arg-type]
    app.add_exception_handler(RequestValidationError, validation_exception_handler)  # type: ignore[arg-type]
    app.add_exception_handler(Exception, generic_exception_handler)

    logger.info("Exception handlers configured")
