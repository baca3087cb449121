"""
GraphQL Query Resolvers

Defines the read operations of both GraphQL schemas:

- Query: the Relay schema, with the ``node`` field and a
  cursor-paginated ``videos`` connection
- BasicQuery: the first API version, where ``videos`` is a plain list

Each resolver reads from the store carried by the context.
"""

import logging
from collections.abc import Callable
from typing import Any

import strawberry
from strawberry.types import Info

from videos_api.graphql.context import GraphQLContext
from videos_api.graphql.types.node import Node
from videos_api.graphql.types.video import (
    PageInfoType,
    VideoConnection,
    VideoEdge,
    VideoType,
)
from videos_api.schemas.video import Video
from videos_api.services.global_id import (
    VIDEO_TYPE,
    resolve_node,
    to_global_id,
    type_of,
)
from videos_api.services.pagination import Connection, PaginationArgs, paginate

logger = logging.getLogger(__name__)


def video_to_graphql(video: Video) -> VideoType:
    """Convert a stored Video to the GraphQL VideoType."""
    return VideoType(
        id=strawberry.ID(to_global_id(VIDEO_TYPE, video.id)),
        title=video.title,
        duration=video.duration,
        watched=video.watched,
        released=video.released,
    )


def connection_to_graphql(connection: Connection[Video]) -> VideoConnection:
    """Convert a paginated Connection of videos to the GraphQL VideoConnection."""
    page_info = connection.page_info
    return VideoConnection(
        edges=[
            VideoEdge(node=video_to_graphql(edge.node), cursor=edge.cursor)
            for edge in connection.edges
        ],
        page_info=PageInfoType(
            has_next_page=page_info.has_next_page,
            has_previous_page=page_info.has_previous_page,
            start_cursor=page_info.start_cursor,
            end_cursor=page_info.end_cursor,
        ),
        total_count=connection.total_count,
    )


# Converters from stored entities to the GraphQL types implementing Node
NODE_TYPES: dict[str, Callable[[Any], Node]] = {
    VIDEO_TYPE: video_to_graphql,
}


def get_video(info: Info[GraphQLContext, None], id: strawberry.ID) -> VideoType | None:
    """Resolve a single video by its local id."""
    video = info.context.store.get_video_by_id(id)

    if video is None:
        return None

    return video_to_graphql(video)


@strawberry.type(name="Query", description="The root query type.")
class Query:
    """
    Root query type of the Relay schema.
    """

    @strawberry.field(description="Fetches an object given its ID")
    def node(
        self,
        info: Info[GraphQLContext, None],
        id: strawberry.ID,
    ) -> Node | None:
        """
        Fetch any object by its global ID.

        Unknown ids resolve to null. Malformed ids raise
        MalformedIdentifierError, which is reported on this field only.
        """
        entity = resolve_node(info.context.store, id)

        if entity is None:
            return None

        type_name = type_of(entity)
        converter = NODE_TYPES.get(type_name)
        if converter is None:
            logger.warning(f"Cannot resolve the object type of node {id!r}")
            return None

        return converter(entity)

    @strawberry.field(description="A paginated connection of videos")
    async def videos(
        self,
        info: Info[GraphQLContext, None],
        first: int | None = None,
        last: int | None = None,
        after: str | None = None,
        before: str | None = None,
    ) -> VideoConnection:
        """
        Get videos as a cursor-paginated connection.

        Args:
            first: Return at most this many videos from the start
            last: Return at most this many videos from the end
            after: Only videos after this cursor
            before: Only videos before this cursor

        Returns:
            Connection of videos with page info and total count
        """
        args = PaginationArgs(first=first, last=last, after=after, before=before)
        connection = await paginate(info.context.store.get_videos(), args)
        return connection_to_graphql(connection)

    @strawberry.field(description="Get a single video by ID")
    def video(
        self,
        info: Info[GraphQLContext, None],
        id: strawberry.ID,
    ) -> VideoType | None:
        """Get a single video by its id (not its global ID)."""
        return get_video(info, id)


@strawberry.type(name="Query", description="The root query type.")
class BasicQuery:
    """
    Root query type of the basic schema.

    Videos are returned as a plain list without pagination.
    """

    @strawberry.field(description="Get every video")
    async def videos(self, info: Info[GraphQLContext, None]) -> list[VideoType]:
        """Get all videos in store order."""
        videos = await info.context.store.get_videos()
        return [video_to_graphql(v) for v in videos]

    @strawberry.field(description="Get a single video by ID")
    def video(
        self,
        info: Info[GraphQLContext, None],
        id: strawberry.ID,
    ) -> VideoType | None:
        """Get a single video by its id."""
        return get_video(info, id)
