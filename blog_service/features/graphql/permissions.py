"""GraphQL permission classes.

    @strawberry.mutation(permission_classes=[IsAuthenticated])
    async def create_blog(self, info: Info[GraphQLContext, None], blog: BlogCreateInput) -> BlogType:
        ...
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from strawberry.permission import BasePermission

from blog_service.features.graphql.error_handler import ErrorCategory

if TYPE_CHECKING:
    from strawberry.types import Info

logger = logging.getLogger(__name__)


class IsAuthenticated(BasePermission):
    """Require an authenticated user in the context."""

    message = "You must be authenticated to access this resource"
    error_extensions = {"code": ErrorCategory.AUTHENTICATION}

    def has_permission(self, source: Any, info: Info, **kwargs: Any) -> bool:
        if info.context.is_authenticated:
            return True

        logger.warning(
            "Unauthenticated GraphQL access attempt",
            extra={
                "field": info.field_name,
                "parent_type": info.parent_type.name,
                "operation": info.operation.operation.value if info.operation else None,
            },
        )
        return False
