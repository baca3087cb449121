"""
GraphQL Mutation Resolvers

Defines the write operations of both GraphQL schemas.

- Mutation: Relay-style createVideo taking a single ``input`` argument
  and echoing ``clientMutationId`` back in its payload
- BasicMutation: createVideo returning the new video directly
"""

import strawberry
from pydantic import ValidationError
from strawberry.types import Info

from videos_api.graphql.context import GraphQLContext
from videos_api.graphql.queries import video_to_graphql
from videos_api.graphql.types.video import (
    CreateVideoInput,
    CreateVideoPayload,
    VideoInput,
    VideoType,
)
from videos_api.schemas.video import Video, VideoCreate


# =============================================================================
# Error classes for GraphQL
# =============================================================================


class VideoValidationError(Exception):
    """Raised when the fields of a new video fail validation."""

    pass


def add_video(
    info: Info[GraphQLContext, None],
    title: str,
    duration: int,
    released: bool,
) -> Video:
    """Validate the new video's fields and add it to the store."""
    try:
        data = VideoCreate(title=title, duration=duration, released=released)
    except ValidationError as e:
        messages = "; ".join(
            f"{'.'.join(str(loc) for loc in error['loc'])}: {error['msg']}"
            for error in e.errors()
        )
        raise VideoValidationError(f"Invalid video: {messages}") from e

    return info.context.store.create_video(data)


@strawberry.type(name="Mutation", description="The root Mutation type.")
class Mutation:
    """
    Root mutation type of the Relay schema.
    """

    @strawberry.mutation(description="Create a new video")
    def create_video(
        self,
        info: Info[GraphQLContext, None],
        input: CreateVideoInput,
    ) -> CreateVideoPayload:
        """
        Create a video.

        The client mutation id is returned exactly as it was sent.
        """
        video = add_video(info, input.title, input.duration, input.released)

        return CreateVideoPayload(
            video=video_to_graphql(video),
            client_mutation_id=input.client_mutation_id,
        )


@strawberry.type(name="Mutation", description="The root Mutation type.")
class BasicMutation:
    """
    Root mutation type of the basic schema.
    """

    @strawberry.mutation(description="Create a new video")
    def create_video(
        self,
        info: Info[GraphQLContext, None],
        video: VideoInput,
    ) -> VideoType:
        """Create a video and return it."""
        created = add_video(info, video.title, video.duration, video.released)
        return video_to_graphql(created)
