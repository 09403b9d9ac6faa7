"""Shared test fixtures for all tests."""

from __future__ import annotations

import pytest

from playlist_categorizer.config import CategorizerSettings
from playlist_categorizer.core.models import ChannelDescriptor, PlaylistItem

# ============================================================================
# Test Data Constants
# ============================================================================

PLAYLIST_ID = "PLrAXtmErZgOeiKm4sgNOknGvNjby9efdf"
CHANNEL_A = "UC_x5XG1OV2P6uZZ5FSM9Ttw"
CHANNEL_B = "UCBR8-60-B28hp2BmDPdntcQ"
EDITOR_CHANNEL = "UCeditor0000000000000000"


# ============================================================================
# Sample Data Fixtures
# ============================================================================


@pytest.fixture
def sample_items() -> list[PlaylistItem]:
    """Four playlist items: two share an uploader, one has no channel at all."""
    return [
        PlaylistItem(
            position=0,
            video_id="dQw4w9WgXcQ",
            title="Intro to asyncio",
            channel_id=CHANNEL_A,
            playlist_id=PLAYLIST_ID,
        ),
        PlaylistItem(
            position=1,
            video_id="9bZkp7q19f0",
            title="Structured concurrency",
            channel_id=CHANNEL_B,
            playlist_id=PLAYLIST_ID,
        ),
        PlaylistItem(
            position=2,
            video_id="kJQP7kiw5Fk",
            title="Task groups in practice",
            channel_id=CHANNEL_A,
            playlist_id=PLAYLIST_ID,
        ),
        PlaylistItem(
            position=3,
            video_id="deleted0001",
            title="Deleted video",
            channel_id="",
            playlist_id=PLAYLIST_ID,
        ),
    ]


@pytest.fixture
def sample_channels() -> list[ChannelDescriptor]:
    """Descriptors for the two uploader channels of sample_items."""
    return [
        ChannelDescriptor(
            channel_id=CHANNEL_A,
            title="Google for Developers",
            description="Talks and tutorials for developers.",
        ),
        ChannelDescriptor(
            channel_id=CHANNEL_B,
            title="YouTube",
            description="",
        ),
    ]


# ============================================================================
# Settings Fixtures
# ============================================================================


@pytest.fixture
def mock_settings() -> CategorizerSettings:
    """Create mock settings for testing."""
    return CategorizerSettings(
        youtube_api_key="test-youtube-key",
        youtube_base_url="https://www.googleapis.com/youtube/v3",
        request_timeout=5.0,
        deadline=10.0,
        page_size=50,
        batch_size=50,
        max_concurrent_batches=2,
        debug=True,
        log_level="DEBUG",
    )


@pytest.fixture
def mock_settings_no_key() -> CategorizerSettings:
    """Create settings without a YouTube API key."""
    return CategorizerSettings(youtube_api_key=None)
