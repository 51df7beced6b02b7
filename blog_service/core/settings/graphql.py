"""GraphQL server configuration settings.

Controls the GraphQL endpoint and its IDE.
Environment variables use GRAPHQL_ prefix.
"""

from __future__ import annotations

from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

GraphQLIDE = Literal["graphiql", "apollo-sandbox", "pathfinder", False]


class GraphQLSettings(BaseSettings):
    """GraphQL server configuration.

    Environment variables use GRAPHQL_ prefix.
    Example: GRAPHQL_PATH=/graphql, GRAPHQL_DISABLE_PLAYGROUND=true
    """

    path: str = Field(
        default="/graphql",
        min_length=1,
        max_length=255,
        pattern=r"^/.*$",
        description="GraphQL endpoint path",
    )

    graphql_ide: GraphQLIDE = Field(
        default="graphiql",
        description="GraphQL IDE to serve on GET: graphiql, apollo-sandbox, pathfinder, or false",
    )

    disable_playground: bool = Field(
        default=False,
        description="Disable the GraphQL IDE regardless of graphql_ide",
    )

    mask_internal_errors: bool = Field(
        default=True,
        description="Replace internal error messages with a generic one (ignored in debug mode)",
    )

    model_config = SettingsConfigDict(
        env_prefix="GRAPHQL_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        frozen=True,
        extra="ignore",
    )

    def get_graphql_ide(self) -> GraphQLIDE:
        """IDE to serve, or False when disabled."""
        if self.disable_playground:
            return False
        return self.graphql_ide
