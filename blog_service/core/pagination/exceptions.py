"""Pagination error taxonomy.

PaginationValidationError and InvalidCursorError are caller mistakes and are
reported back verbatim. Store failures are not pagination errors: they
surface as blog_service.core.database.exceptions.StoreError.
"""

from __future__ import annotations

from typing import Any


class PaginationError(Exception):
    """Base class for errors caused by pagination arguments."""

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details or {}


class PaginationValidationError(PaginationError):
    """A pagination argument is malformed (negative size, empty cursor, ...).

    Attributes:
        field: Name of the offending argument (first, last, after, before)
    """

    def __init__(self, field: str, message: str) -> None:
        self.field = field
        super().__init__(message, details={"field": field})


class InvalidCursorError(PaginationError):
    """A cursor could not be decoded or belongs to another collection.

    Attributes:
        reason: Short machine-friendly reason (malformed, version, scope,
            keys, signature)
    """

    def __init__(self, reason: str, message: str | None = None, *, field: str | None = None) -> None:
        self.reason = reason
        self.field = field
        details: dict[str, Any] = {"reason": reason}
        if field:
            details["field"] = field
        super().__init__(message or f"Invalid cursor ({reason})", details=details)
