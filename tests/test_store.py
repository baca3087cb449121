"""
Video Store Tests

Tests for the in-memory video store and the video schemas.
"""

import pytest
from pydantic import ValidationError

from videos_api.schemas.video import Video, VideoCreate
from videos_api.services.store import VideoStore


class TestVideoStore:
    """Tests for VideoStore lookups and creation."""

    def test_default_videos(self, store: VideoStore):
        """Test a new store holds the two default videos."""
        assert len(store) == 2
        assert store.get_video_by_id("a").title == "Create a GraphQL Schema"
        assert store.get_video_by_id("b").title == "Ember.js CLI"

    def test_custom_videos(self, many_videos: list[Video]):
        """Test a store can be created with its own videos."""
        store = VideoStore(videos=many_videos)

        assert len(store) == 10
        assert store.get_video_by_id("a") is None
        assert store.get_video_by_id("3").title == "Test Video 3"

    def test_get_video_not_found(self, store: VideoStore):
        """Test an unknown id gives None."""
        assert store.get_video_by_id("zzz") is None

    def test_get_object_by_id(self, store: VideoStore):
        """Test lookups by lower-case type name."""
        assert store.get_object_by_id("video", "a").id == "a"
        assert store.get_object_by_id("video", "zzz") is None
        assert store.get_object_by_id("playlist", "a") is None

    @pytest.mark.asyncio
    async def test_get_videos_is_a_snapshot(self, store: VideoStore):
        """Test the returned list is a copy of the stored videos."""
        videos = await store.get_videos()
        videos.clear()

        assert len(await store.get_videos()) == 2

    def test_create_video(self, store: VideoStore):
        """Test creating a video stores it with a fresh id."""
        video = store.create_video(
            VideoCreate(title="Foo", duration=300, released=False)
        )

        assert video.title == "Foo"
        assert video.duration == 300
        assert video.released is False
        assert video.watched is False
        assert video.kind == "Video"
        assert video.id not in {"a", "b"}
        assert store.get_video_by_id(video.id) == video
        assert len(store) == 3

    def test_created_ids_are_unique(self, store: VideoStore):
        """Test every created video gets its own id."""
        data = VideoCreate(title="Same Title", duration=10, released=True)
        created = [store.create_video(data) for _ in range(5)]

        assert len({video.id for video in created}) == 5

    def test_created_id_skips_taken_ids(self):
        """Test new ids never reuse an id already in the store."""
        store = VideoStore(
            videos=[Video(id="1", title="Taken", duration=1)]
        )
        video = store.create_video(VideoCreate(title="New", duration=2, released=True))

        assert video.id != "1"

    @pytest.mark.asyncio
    async def test_created_videos_are_appended(self, store: VideoStore):
        """Test new videos come after the existing ones."""
        store.create_video(VideoCreate(title="Foo", duration=300, released=False))
        videos = await store.get_videos()

        assert [v.title for v in videos] == [
            "Create a GraphQL Schema",
            "Ember.js CLI",
            "Foo",
        ]


class TestVideoSchemas:
    """Tests for the video pydantic models."""

    def test_title_is_stripped(self):
        """Test titles are normalized."""
        data = VideoCreate(title="  Foo  ", duration=1, released=True)
        assert data.title == "Foo"

    @pytest.mark.parametrize(
        "fields",
        [
            {"title": "", "duration": 1, "released": True},
            {"title": "   ", "duration": 1, "released": True},
            {"title": "Foo", "duration": -1, "released": True},
            {"title": "Foo", "duration": 1},
        ],
    )
    def test_invalid_create(self, fields: dict):
        """Test invalid video fields are rejected."""
        with pytest.raises(ValidationError):
            VideoCreate(**fields)

    def test_video_is_immutable(self):
        """Test stored videos cannot be changed in place."""
        video = Video(id="a", title="Foo", duration=1)

        with pytest.raises(ValidationError):
            video.title = "Bar"
