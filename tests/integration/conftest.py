"""Integration test fixtures for the live YouTube Data API."""

from __future__ import annotations

import os

import pytest

from playlist_categorizer.config import CategorizerSettings


@pytest.fixture(scope="session")
def live_api_key() -> str:
    """Get a real API key from the environment or skip."""
    key = os.getenv("TEST_YT_API_KEY")
    if not key:
        pytest.skip("TEST_YT_API_KEY not set; skipping live YouTube tests")
    return key


@pytest.fixture(scope="session")
def live_playlist_id() -> str:
    """A small public playlist to list."""
    # Public playlists change over time; override with TEST_YT_PLAYLIST_ID
    return os.getenv("TEST_YT_PLAYLIST_ID", "PLOU2XLYxmsIIM9h1Ybw2DuRw6o2fkNMeR")


@pytest.fixture
def live_settings(live_api_key: str) -> CategorizerSettings:
    return CategorizerSettings(youtube_api_key=live_api_key, deadline=60.0)

