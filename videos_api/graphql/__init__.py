"""
GraphQL Package

This package provides the GraphQL API using Strawberry GraphQL.

Two schemas are served:
- schema: Relay-compliant API with global IDs, the Node interface and
  cursor-based connections (mounted at /graphql)
- basic_schema: the first API version with plain lists (mounted at
  /graphql/basic)

Example Query:
    query {
        videos(first: 1) {
            edges {
                node { id title }
                cursor
            }
            pageInfo { hasNextPage }
            totalCount
        }
    }
"""

import strawberry
from strawberry.fastapi import GraphQLRouter

from videos_api.graphql.context import get_context
from videos_api.graphql.mutations import BasicMutation, Mutation
from videos_api.graphql.queries import BasicQuery, Query
from videos_api.graphql.types.video import VideoType

# Relay schema. VideoType is listed so the Node interface can resolve to it.
schema = strawberry.Schema(
    query=Query,
    mutation=Mutation,
    types=[VideoType],
)

basic_schema = strawberry.Schema(
    query=BasicQuery,
    mutation=BasicMutation,
)


def create_graphql_router(
    graphql_schema: strawberry.Schema = schema,
    playground_enabled: bool = True,
) -> GraphQLRouter:
    """
    Create a GraphQL router for FastAPI.

    Args:
        graphql_schema: Schema to serve
        playground_enabled: Serve the GraphiQL IDE on GET requests

    Returns:
        GraphQLRouter configured with schema and context
    """
    return GraphQLRouter(
        graphql_schema,
        context_getter=get_context,
        graphql_ide="graphiql" if playground_enabled else None,
    )


__all__ = ["schema", "basic_schema", "create_graphql_router"]
