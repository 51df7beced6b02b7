"""Entries feature: posts inside a blog."""

from __future__ import annotations

from .models import Entry
from .repository import EntryRepository, entries_scope, get_entry_repository
from .schemas import EntryCreate, EntryUpdate
from .service import EntryService

__all__ = [
    "Entry",
    "EntryCreate",
    "EntryRepository",
    "EntryService",
    "EntryUpdate",
    "entries_scope",
    "get_entry_repository",
]
