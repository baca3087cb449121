"""
GraphQL Context

Provides request context to all GraphQL resolvers.

The context is created fresh for each GraphQL request and passed
to all resolvers via the `info` parameter. It carries the video store
the application was built with, so resolvers never reach for a
module-level instance.
"""

from fastapi import Request
from strawberry.fastapi import BaseContext

from videos_api.services.store import VideoStore


class GraphQLContext(BaseContext):
    """
    Context object available to all GraphQL resolvers.

    Inherits from Strawberry's BaseContext for proper integration.

    Attributes:
        store: The application's video store
    """

    def __init__(self, store: VideoStore):
        super().__init__()
        self.store = store


async def get_context(request: Request) -> GraphQLContext:
    """
    Create GraphQL context for each request.

    This function is called by Strawberry for every GraphQL request.
    The store lives on the application state, set up by create_app().

    Args:
        request: FastAPI request object

    Returns:
        GraphQLContext with the application's store
    """
    return GraphQLContext(store=request.app.state.store)
