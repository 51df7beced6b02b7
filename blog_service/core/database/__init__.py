"""Core database package: declarative base, mixins, repository and errors.

Base Classes and Mixins:
    - Base: Declarative base with constraint naming convention
    - UUIDPKMixin: UUID v4 primary key
    - TimestampMixin: created_at, updated_at tracking

Repository:
    - BaseRepository[T]: Generic CRUD and keyset pagination with explicit session passing

Exceptions:
    - RepositoryError, NotFoundError, StoreError
"""

from __future__ import annotations

from blog_service.core.database.base import (
    NAMING_CONVENTION,
    Base,
    TimestampMixin,
    UUIDPKMixin,
    utcnow,
)
from blog_service.core.database.exceptions import NotFoundError, RepositoryError, StoreError
from blog_service.core.database.repository import BaseRepository

__all__ = [
    "NAMING_CONVENTION",
    "Base",
    "BaseRepository",
    "NotFoundError",
    "RepositoryError",
    "StoreError",
    "TimestampMixin",
    "UUIDPKMixin",
    "utcnow",
]
