"""Errors raised by repositories and keyset stores.

These are data-layer errors. Services translate `NotFoundError` into
`NotFoundException` where the caller should see a 404. `StoreError` is left
to propagate and ends up as an internal error.
"""

from __future__ import annotations

from typing import Any


def _format_pairs(values: dict[str, Any]) -> str:
    return ", ".join(f"{key}={value!r}" for key, value in values.items())


class RepositoryError(Exception):
    """Base class for repository failures.

    Attributes:
        message: Error message without the details.
        details: Structured context, also used as logging extras.
    """

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        return f"{self.message} ({_format_pairs(self.details)})" if self.details else self.message


class NotFoundError(RepositoryError):
    """No row of `model_name` matched `identifier`."""

    def __init__(self, model_name: str, identifier: dict[str, Any]) -> None:
        self.model_name = model_name
        self.identifier = identifier
        super().__init__(
            f"{model_name} not found with {_format_pairs(identifier)}",
            details={"model": model_name, **identifier},
        )


class StoreError(RepositoryError):
    """The database failed during `operation`.

    The driver's SQLAlchemyError is chained as ``__cause__``.
    """

    def __init__(self, operation: str, details: dict[str, Any] | None = None) -> None:
        self.operation = operation
        super().__init__(f"Store operation '{operation}' failed", details=details)
