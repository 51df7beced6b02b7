"""Liveness and readiness endpoints."""

from __future__ import annotations

from blog_service.features.health.router import router

__all__ = ["router"]
