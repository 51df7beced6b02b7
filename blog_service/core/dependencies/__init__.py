"""FastAPI dependencies for route handlers.

    from blog_service.core.dependencies import get_db_session, OptionalUser
"""

from __future__ import annotations

from blog_service.core.dependencies.auth import OptionalUser, get_current_user_optional
from blog_service.core.dependencies.database import get_db_session

__all__ = [
    "OptionalUser",
    "get_current_user_optional",
    "get_db_session",
]
