"""GraphQL root types."""

from __future__ import annotations

from blog_service.features.graphql.resolvers.mutations import BlogMutations, EntryMutations, Mutation
from blog_service.features.graphql.resolvers.queries import Query

__all__ = ["BlogMutations", "EntryMutations", "Mutation", "Query"]
