"""
GraphQL Types Package

This package contains all GraphQL type definitions, written with
Strawberry's decorator syntax.

Types defined here:
- Node: Relay interface for objects with a global ID
- VideoType: A video, implementing Node
- VideoConnection, VideoEdge, PageInfoType: Cursor pagination
- VideoInput, CreateVideoInput, CreateVideoPayload: createVideo mutations
"""

from videos_api.graphql.types.node import Node
from videos_api.graphql.types.video import (
    CreateVideoInput,
    CreateVideoPayload,
    PageInfoType,
    VideoConnection,
    VideoEdge,
    VideoInput,
    VideoType,
)

__all__ = [
    "Node",
    # Video types
    "VideoType",
    "VideoConnection",
    "VideoEdge",
    "PageInfoType",
    "VideoInput",
    "CreateVideoInput",
    "CreateVideoPayload",
]
