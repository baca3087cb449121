"""
In-Memory Video Store

Holds the list of videos served by the API and exposes the three
capabilities the GraphQL layer relies on:

- fetch a single object by type name and local id
- fetch every video (asynchronously)
- create a new video

The store is created once by the application factory and handed to
resolvers through the GraphQL context. Nothing imports a shared instance.

Usage:
    store = VideoStore()
    video = store.get_object_by_id("video", "a")
    videos = await store.get_videos()
"""

import itertools
import logging
from collections.abc import Callable, Iterable

from videos_api.schemas.video import Video, VideoCreate

logger = logging.getLogger(__name__)


DEFAULT_VIDEOS = (
    Video(
        id="a",
        title="Create a GraphQL Schema",
        duration=120,
        watched=True,
        released=True,
    ),
    Video(
        id="b",
        title="Ember.js CLI",
        duration=240,
        watched=False,
        released=True,
    ),
)


class VideoStore:
    """
    Process-local store of videos.

    Videos are kept in insertion order, which is also the order used
    for pagination.

    Attributes:
        _videos: Ordered list of stored videos
        _ids: Counter used to assign local ids to new videos
    """

    def __init__(self, videos: Iterable[Video] | None = None):
        self._videos: list[Video] = list(
            DEFAULT_VIDEOS if videos is None else videos
        )
        self._ids = itertools.count(1)
        self._getters: dict[str, Callable[[str], Video | None]] = {
            "video": self.get_video_by_id,
        }

    def __len__(self) -> int:
        return len(self._videos)

    def get_video_by_id(self, video_id: str) -> Video | None:
        """
        Look up a video by its local id.

        Args:
            video_id: Local identifier of the video

        Returns:
            The video if found, None otherwise
        """
        video_id = str(video_id)
        for video in self._videos:
            if video.id == video_id:
                return video
        return None

    def get_object_by_id(self, type_name: str, object_id: str) -> Video | None:
        """
        Look up any stored object by lower-case type name and local id.

        Unknown type names resolve to None, the same as unknown ids.
        """
        getter = self._getters.get(type_name)
        if getter is None:
            return None
        return getter(object_id)

    async def get_videos(self) -> list[Video]:
        """Return a snapshot of every stored video."""
        return list(self._videos)

    def create_video(self, data: VideoCreate) -> Video:
        """
        Create and store a new video.

        The new video gets a fresh local id and starts unwatched.

        Args:
            data: Validated video fields

        Returns:
            The stored video
        """
        video = Video(id=self._next_id(), watched=False, **data.model_dump())
        self._videos.append(video)
        logger.info(f"Created video {video.id}: {video.title}")
        return video

    def _next_id(self) -> str:
        """Return a local id that no stored video uses yet."""
        while True:
            candidate = str(next(self._ids))
            if self.get_video_by_id(candidate) is None:
                return candidate
