"""
pytest Fixtures for Videos API Tests

This file contains shared fixtures used across all test files.

Every test gets its own VideoStore and an application built around it,
so videos created in one test never leak into another.
"""

# =============================================================================
# TEST ENVIRONMENT SETUP
# =============================================================================
# Set environment variables BEFORE importing the app
import os

os.environ["LOG_LEVEL"] = "WARNING"

from collections.abc import Generator

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from videos_api.main import create_app
from videos_api.schemas.video import Video
from videos_api.services.store import VideoStore


# =============================================================================
# STORE FIXTURES
# =============================================================================


@pytest.fixture
def store() -> VideoStore:
    """Store holding the two default videos."""
    return VideoStore()


@pytest.fixture
def empty_store() -> VideoStore:
    """Store without any videos."""
    return VideoStore(videos=[])


@pytest.fixture
def many_videos() -> list[Video]:
    """Ten videos for pagination testing."""
    return [
        Video(
            id=str(i),
            title=f"Test Video {i}",
            duration=60 * (i + 1),
            released=i % 2 == 0,
        )
        for i in range(10)
    ]


# =============================================================================
# APPLICATION FIXTURES
# =============================================================================


@pytest.fixture
def app(store: VideoStore) -> FastAPI:
    """Application serving the test store."""
    return create_app(store=store)


@pytest.fixture
def client(app: FastAPI) -> Generator[TestClient, None, None]:
    """
    Create a test client for the application.

    Runs the lifespan handlers on enter and exit.
    """
    with TestClient(app) as test_client:
        yield test_client
