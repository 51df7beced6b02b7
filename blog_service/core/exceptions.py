"""Domain exceptions shared by the services, the HTTP handlers and GraphQL.

Every exception carries the RFC 7807 problem fields. The FastAPI handlers
render them as ``application/problem+json``. The GraphQL error classifier maps
the concrete class onto an ``extensions.code``.
"""

from __future__ import annotations

from http import HTTPStatus
from typing import Any, ClassVar


def default_title(status_code: int) -> str:
    """Reason phrase for `status_code`, or "Error" for unknown codes."""
    try:
        return HTTPStatus(status_code).phrase
    except ValueError:
        return "Error"


class AppException(Exception):
    """Base application exception.

    Subclasses pin `status_code`, `title` and a default problem `type` as class
    attributes, so raising one only needs the human-readable detail:

        raise ConflictException(
            detail="Blog handle 'notes' is already taken",
            type="blog-handle-exists",
            extra={"handle": "notes"},
        )

    Attributes:
        status_code: HTTP status used when rendered as problem details.
        detail: Human-readable error message.
        type: Problem type identifier.
        title: Short summary of the problem type.
        instance: URI reference for this occurrence, if any.
        extra: Context merged into the problem body and GraphQL extensions.
    """

    status_code: int = 500
    title: str = "Internal Server Error"
    default_type: ClassVar[str] = "about:blank"
    default_detail: ClassVar[str] = "Internal server error"

    def __init__(
        self,
        detail: str | None = None,
        type: str | None = None,
        instance: str | None = None,
        extra: dict[str, Any] | None = None,
        *,
        status_code: int | None = None,
        title: str | None = None,
    ) -> None:
        if status_code is not None:
            self.status_code = status_code
            self.title = default_title(status_code)
        if title is not None:
            self.title = title
        self.detail = detail or self.default_detail
        self.type = type or self.default_type
        self.instance = instance
        self.extra = extra or {}
        super().__init__(self.detail)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(status_code={self.status_code}, type={self.type!r}, detail={self.detail!r})"


class NotFoundException(AppException):
    """A blog, entry or user does not exist."""

    status_code = 404
    title = "Not Found"
    default_type = "not-found"
    default_detail = "Resource not found"


class ValidationException(AppException):
    """Input passed type checks but is still unacceptable (a malformed ID)."""

    status_code = 422
    title = "Validation Error"
    default_type = "validation-error"
    default_detail = "Invalid input"


class UnauthorizedException(AppException):
    status_code = 401
    title = "Unauthorized"
    default_type = "unauthorized"
    default_detail = "Authentication required"


class ForbiddenException(AppException):
    """The signed-in user does not own the blog being changed."""

    status_code = 403
    title = "Forbidden"
    default_type = "forbidden"
    default_detail = "Access denied"


class ConflictException(AppException):
    """A write collides with existing state, such as a taken handle or email."""

    status_code = 409
    title = "Conflict"
    default_type = "conflict"
    default_detail = "Resource already exists"
