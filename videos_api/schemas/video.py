"""
Video Pydantic Schemas

Schemas for the video entities held by the in-memory store.

Every entity carries an explicit ``kind`` discriminator so the GraphQL
layer can tell which object type a node belongs to without inspecting
its fields.
"""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator


class VideoBase(BaseModel):
    """Base schema with shared video fields."""

    title: str = Field(
        ...,
        min_length=1,
        max_length=255,
        description="The title of the video",
        examples=["Create a GraphQL Schema"],
    )

    duration: int = Field(
        ...,
        ge=0,
        description="The duration of the video (in seconds)",
        examples=[120],
    )

    released: bool = Field(
        default=False,
        description="Whether or not the video is released",
    )

    @field_validator("title")
    @classmethod
    def title_must_not_be_empty(cls, v: str) -> str:
        """Validate and normalize the title."""
        if not v.strip():
            raise ValueError("Title cannot be empty or whitespace")
        return v.strip()


class VideoCreate(VideoBase):
    """Schema for creating a new video."""

    released: bool = Field(
        ...,
        description="Whether or not the video is released",
    )


class Video(VideoBase):
    """A video stored in the in-memory store."""

    kind: Literal["Video"] = Field(
        default="Video",
        description="Entity discriminator used for Node type resolution",
    )

    id: str = Field(..., description="Identifier, unique among videos")

    watched: bool = Field(
        default=False,
        description="Whether or not the viewer has watched the video",
    )

    model_config = ConfigDict(
        frozen=True,
        json_schema_extra={
            "example": {
                "kind": "Video",
                "id": "a",
                "title": "Create a GraphQL Schema",
                "duration": 120,
                "watched": True,
                "released": True,
            }
        },
    )
