"""
Pydantic Schemas Package

This package contains the Pydantic models of the entities held by the
video store.

Schema Naming Convention:
- XxxBase: Shared fields
- XxxCreate: Fields required when creating a new record
- Xxx: The stored entity, including its id and discriminator
"""

from videos_api.schemas.video import Video, VideoBase, VideoCreate

__all__ = [
    "Video",
    "VideoBase",
    "VideoCreate",
]
