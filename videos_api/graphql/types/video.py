"""
GraphQL Video Type

Defines the Video type, its connection types and the inputs of the
createVideo mutations.
"""

import strawberry

from videos_api.graphql.types.node import Node


@strawberry.type(name="Video", description="A video on Egghead.io")
class VideoType(Node):
    """
    GraphQL type representing a video.

    ``id`` holds the global ID, never the store's own identifier.
    """

    title: str | None = strawberry.field(
        default=None, description="The title of the video."
    )
    duration: int | None = strawberry.field(
        default=None, description="The duration of the video (in seconds)."
    )
    watched: bool | None = strawberry.field(
        default=None, description="Whether or not the viewer has watched the video."
    )
    released: bool | None = strawberry.field(
        default=None, description="Whether or not the video is released."
    )


@strawberry.type(name="PageInfo", description="Information about pagination in a connection.")
class PageInfoType:
    """Page metadata of a connection."""

    has_next_page: bool = strawberry.field(
        description="When paginating forwards, are there more items?"
    )
    has_previous_page: bool = strawberry.field(
        description="When paginating backwards, are there more items?"
    )
    start_cursor: str | None = strawberry.field(
        default=None, description="When paginating backwards, the cursor to continue."
    )
    end_cursor: str | None = strawberry.field(
        default=None, description="When paginating forwards, the cursor to continue."
    )


@strawberry.type(description="An edge in a connection.")
class VideoEdge:
    """A video together with its cursor."""

    node: VideoType = strawberry.field(description="The item at the end of the edge")
    cursor: str = strawberry.field(description="A cursor for use in pagination")


@strawberry.type(description="A connection to a list of videos.")
class VideoConnection:
    """
    Cursor-paginated list of videos.

    Follows the Relay Connection pattern for GraphQL pagination.
    """

    edges: list[VideoEdge] = strawberry.field(description="A list of edges.")
    page_info: PageInfoType = strawberry.field(
        description="Information to aid in pagination."
    )
    total_count: int = strawberry.field(
        description="A count of the total number of objects in this connection."
    )


@strawberry.input(description="Fields of a new video.")
class VideoInput:
    """
    Input type for creating a video.
    """

    title: str = strawberry.field(description="The title of the video.")
    duration: int = strawberry.field(
        description="The duration of the video (in seconds)."
    )
    released: bool = strawberry.field(
        description="Whether or not the video is released."
    )


@strawberry.input(description="Fields of a new video, with a client mutation id.")
class CreateVideoInput:
    """
    Input type for the Relay createVideo mutation.

    ``client_mutation_id`` is echoed back unchanged in the payload.
    """

    title: str = strawberry.field(description="The title of the video.")
    duration: int = strawberry.field(
        description="The duration of the video (in seconds)."
    )
    released: bool = strawberry.field(
        description="Whether or not the video is released."
    )
    client_mutation_id: str | None = None


@strawberry.type(description="Result of the createVideo mutation.")
class CreateVideoPayload:
    """
    Response type for the Relay createVideo mutation.
    """

    video: VideoType
    client_mutation_id: str | None = None
