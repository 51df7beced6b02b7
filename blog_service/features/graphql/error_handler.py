"""GraphQL error classification, masking and logging.

Services raise domain exceptions (AppException family, pagination errors,
repository errors). ErrorClassificationExtension turns each of them into a
GraphQLError with a stable `extensions.code`, and hides the message of
anything unexpected (StoreError, bugs) unless running in debug mode.

    {"message": "Cursor belongs to a different collection",
     "path": ["blog", "entries"],
     "extensions": {"code": "INVALID_CURSOR", "field": "after"}}
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from datetime import UTC, datetime
from typing import TYPE_CHECKING, Any

from graphql import GraphQLError
from pydantic import ValidationError as PydanticValidationError
from strawberry.extensions import SchemaExtension

from blog_service.core.database.exceptions import NotFoundError
from blog_service.core.exceptions import (
    AppException,
    ConflictException,
    ForbiddenException,
    NotFoundException,
    UnauthorizedException,
    ValidationException,
)
from blog_service.core.pagination import InvalidCursorError, PaginationValidationError
from blog_service.core.settings import get_app_settings, get_graphql_settings

if TYPE_CHECKING:
    from strawberry.types import ExecutionContext

logger = logging.getLogger(__name__)

INTERNAL_ERROR_MESSAGE = "An internal error occurred. Please try again later."


class ErrorCategory:
    """Values of `extensions.code`."""

    VALIDATION = "VALIDATION_ERROR"
    INVALID_CURSOR = "INVALID_CURSOR"
    AUTHENTICATION = "AUTHENTICATION_ERROR"
    AUTHORIZATION = "AUTHORIZATION_ERROR"
    NOT_FOUND = "NOT_FOUND"
    CONFLICT = "CONFLICT"
    INTERNAL = "INTERNAL_ERROR"


USER_FACING_CODES = frozenset(
    {
        ErrorCategory.VALIDATION,
        ErrorCategory.INVALID_CURSOR,
        ErrorCategory.AUTHENTICATION,
        ErrorCategory.AUTHORIZATION,
        ErrorCategory.NOT_FOUND,
        ErrorCategory.CONFLICT,
    }
)

# Most specific classes first
_CATEGORY_BY_EXCEPTION: tuple[tuple[type[BaseException], str], ...] = (
    (InvalidCursorError, ErrorCategory.INVALID_CURSOR),
    (PaginationValidationError, ErrorCategory.VALIDATION),
    (PydanticValidationError, ErrorCategory.VALIDATION),
    (ValidationException, ErrorCategory.VALIDATION),
    (UnauthorizedException, ErrorCategory.AUTHENTICATION),
    (ForbiddenException, ErrorCategory.AUTHORIZATION),
    (NotFoundException, ErrorCategory.NOT_FOUND),
    (NotFoundError, ErrorCategory.NOT_FOUND),
    (ConflictException, ErrorCategory.CONFLICT),
)


def categorize(exc: BaseException | None) -> str | None:
    """Error category for a resolver exception, or None for non-domain errors."""
    if exc is None:
        return None
    for exc_type, category in _CATEGORY_BY_EXCEPTION:
        if isinstance(exc, exc_type):
            return category
    return None


def is_user_facing_error(error: GraphQLError) -> bool:
    """Whether the error message is safe to show as-is.

    Errors without an original exception come from parsing or validating
    the query document and are always user-facing.
    """
    if error.original_error is None:
        return True
    code = (error.extensions or {}).get("code") or categorize(error.original_error)
    return code in USER_FACING_CODES


def classify_error(error: GraphQLError, *, mask_internal: bool) -> GraphQLError:
    """Attach `extensions.code` (and details) to an execution error."""
    original = error.original_error
    if original is None or (error.extensions or {}).get("code"):
        return error

    category = categorize(original)
    if category is None:
        if mask_internal:
            return mask_internal_error(error)
        error.extensions = {
            **(error.extensions or {}),
            "code": ErrorCategory.INTERNAL,
            "debug": {
                "exception_type": type(original).__name__,
                "exception_message": str(original),
            },
        }
        return error

    extensions: dict[str, Any] = {**(error.extensions or {}), "code": category}
    extensions.update(_details(original))
    error.extensions = extensions
    if isinstance(original, PydanticValidationError):
        error.message = _pydantic_message(original)
    return error


def mask_internal_error(error: GraphQLError) -> GraphQLError:
    """Replace an internal error with a generic one, keeping location and path."""
    return GraphQLError(
        INTERNAL_ERROR_MESSAGE,
        nodes=error.nodes,
        source=error.source,
        positions=error.positions,
        path=error.path,
        original_error=None,
        extensions={"code": ErrorCategory.INTERNAL, "timestamp": _get_timestamp()},
    )


def log_error(error: GraphQLError, execution_context: ExecutionContext | None) -> None:
    """Log one error: INFO for user-facing ones, ERROR with traceback otherwise."""
    log_context: dict[str, Any] = {
        "error_message": error.message,
        "error_path": error.path,
    }

    if execution_context is not None:
        if execution_context.operation_name:
            log_context["operation_name"] = execution_context.operation_name
        correlation_id = getattr(execution_context.context, "correlation_id", None)
        if correlation_id:
            log_context["correlation_id"] = correlation_id

    original = error.original_error
    if original is not None:
        log_context["exception_type"] = type(original).__name__

    if is_user_facing_error(error):
        logger.info("GraphQL user-facing error", extra=log_context)
    else:
        logger.error("GraphQL internal error", extra=log_context, exc_info=original)


class ErrorClassificationExtension(SchemaExtension):
    """Classify (and where needed mask) every error of an operation.

    Internal errors are masked when GRAPHQL_MASK_INTERNAL_ERRORS is on and
    the app is not in debug mode.
    """

    def on_operation(self) -> Iterator[None]:
        yield
        result = self.execution_context.result
        errors = getattr(result, "errors", None)
        if not errors:
            return

        mask = get_graphql_settings().mask_internal_errors and not get_app_settings().debug
        result.errors = [classify_error(error, mask_internal=mask) for error in errors]  # type: ignore[union-attr]


def _details(exc: BaseException) -> dict[str, Any]:
    if isinstance(exc, InvalidCursorError | PaginationValidationError):
        return {k: v for k, v in exc.details.items() if v is not None}
    if isinstance(exc, AppException):
        details: dict[str, Any] = {"type": exc.type}
        details.update({k: v for k, v in exc.extra.items() if isinstance(v, str | int | bool)})
        return details
    if isinstance(exc, PydanticValidationError):
        errors = exc.errors()
        if errors and errors[0].get("loc"):
            return {"field": ".".join(str(part) for part in errors[0]["loc"])}
    return {}


def _pydantic_message(exc: PydanticValidationError) -> str:
    errors = exc.errors()
    if not errors:
        return "Invalid input"
    first = errors[0]
    location = ".".join(str(part) for part in first.get("loc", ()))
    message = str(first.get("msg", "Invalid value"))
    return f"{location}: {message}" if location else message


def _get_timestamp() -> str:
    return datetime.now(UTC).isoformat()


__all__ = [
    "ErrorCategory",
    "ErrorClassificationExtension",
    "categorize",
    "classify_error",
    "is_user_facing_error",
    "log_error",
    "mask_internal_error",
]
