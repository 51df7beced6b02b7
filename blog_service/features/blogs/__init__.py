"""Blogs feature: user-owned blogs addressed by handle."""

from __future__ import annotations

from .models import Blog
from .repository import BLOGS_SCOPE, BlogRepository, get_blog_repository
from .schemas import BlogCreate, BlogUpdate
from .service import BlogService, ensure_owner, require_user

__all__ = [
    "BLOGS_SCOPE",
    "Blog",
    "BlogCreate",
    "BlogRepository",
    "BlogService",
    "BlogUpdate",
    "ensure_owner",
    "get_blog_repository",
    "require_user",
]
