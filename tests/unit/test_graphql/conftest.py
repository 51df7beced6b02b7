"""GraphQL test fixtures.

Provides:
- A context factory bound to the test session
- Contexts for an anonymous caller and for alice
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING

import pytest

from blog_service.features.graphql.context import GraphQLContext
from blog_service.features.graphql.dataloaders import create_dataloaders

if TYPE_CHECKING:
    from sqlalchemy.ext.asyncio import AsyncSession

    from blog_service.features.users.models import User

ContextFactory = Callable[..., GraphQLContext]


@pytest.fixture
def make_context(db_session: AsyncSession) -> ContextFactory:
    """Build a fresh context (new DataLoaders) for one operation.

    Example:
        result = await schema.execute(QUERY, context_value=make_context(alice))
    """

    def _make(user: User | None = None) -> GraphQLContext:
        return GraphQLContext(
            session=db_session,
            loaders=create_dataloaders(db_session),
            user=user,
            correlation_id="test-request",
        )

    return _make


@pytest.fixture
def graphql_context(make_context: ContextFactory) -> GraphQLContext:
    """Context for an anonymous caller."""
    return make_context()


@pytest.fixture
def alice_context(make_context: ContextFactory, alice: User) -> GraphQLContext:
    return make_context(alice)
