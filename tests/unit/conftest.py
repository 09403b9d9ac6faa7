"""Unit test fixtures with HTTP mocking and in-memory fakes."""

from __future__ import annotations

import asyncio
from typing import Any, Callable, Sequence

import pytest
import respx
from httpx import Response

from playlist_categorizer.core.exceptions import UpstreamError
from playlist_categorizer.core.models import ChannelDescriptor, PlaylistItem, PlaylistPage
from playlist_categorizer.youtube.base import YouTubeClientConfig

YOUTUBE_URL = "https://www.googleapis.com/youtube/v3"


# ============================================================================
# HTTP Mocking Fixtures
# ============================================================================


@pytest.fixture
def respx_mock():
    """Provide a respx mock router for HTTP mocking.

    Use this when you need fine-grained control over mocked responses.
    The mock is automatically started and stopped by respx.
    """
    with respx.mock(base_url=YOUTUBE_URL, assert_all_called=False) as router:
        yield router


@pytest.fixture
def client_config() -> YouTubeClientConfig:
    """Create a YouTube client config for testing."""
    return YouTubeClientConfig(api_key="test-api-key", base_url=YOUTUBE_URL, timeout=5.0)


# ============================================================================
# Payload Builders
# ============================================================================


def playlist_item_payload(
    position: int,
    *,
    video_id: str | None = None,
    channel_id: str | None = "UCuploader",
    editor_channel_id: str = "UCeditor",
    playlist_id: str = "PLtest",
) -> dict[str, Any]:
    """Build a playlistItems.list item as the API returns it."""
    video_id = video_id if video_id is not None else f"video{position:04d}"
    snippet: dict[str, Any] = {
        "publishedAt": "2024-01-15T12:00:00Z",
        "channelId": editor_channel_id,
        "title": f"Video {position}",
        "description": "",
        "channelTitle": "Playlist Editor",
        "playlistId": playlist_id,
        "position": position,
        "resourceId": {"kind": "youtube#video", "videoId": video_id},
    }
    if channel_id is not None:
        snippet["videoOwnerChannelId"] = channel_id
        snippet["videoOwnerChannelTitle"] = f"Channel {channel_id}"
    return {
        "kind": "youtube#playlistItem",
        "snippet": snippet,
        "contentDetails": {"videoId": video_id},
    }


def playlist_page_payload(
    items: list[dict[str, Any]],
    next_page_token: str | None = None,
) -> dict[str, Any]:
    """Build a playlistItems.list response body."""
    data: dict[str, Any] = {
        "kind": "youtube#playlistItemListResponse",
        "items": items,
        "pageInfo": {"totalResults": len(items), "resultsPerPage": 50},
    }
    if next_page_token:
        data["nextPageToken"] = next_page_token
    return data


def channel_payload(channel_id: str, description: str = "") -> dict[str, Any]:
    """Build a channels.list item."""
    return {
        "kind": "youtube#channel",
        "id": channel_id,
        "snippet": {"title": f"Channel {channel_id}", "description": description},
    }


def mock_error_response(status_code: int, reason: str = "quotaExceeded") -> Response:
    """Create a YouTube-style error response."""
    return Response(
        status_code=status_code,
        json={
            "error": {
                "code": status_code,
                "message": "The request cannot be completed.",
                "errors": [{"domain": "youtube.quota", "reason": reason}],
            }
        },
    )


@pytest.fixture
def payloads():
    """Provide payload builder functions."""
    return {
        "item": playlist_item_payload,
        "page": playlist_page_payload,
        "channel": channel_payload,
        "error": mock_error_response,
    }


# ============================================================================
# Port Fakes
# ============================================================================


class FakePageFetcher:
    """
    Serves pre-built pages in order.

    Page ``i`` is returned for token ``None`` (i == 0) or ``"token-{i}"``.
    Exceptions in ``pages`` are raised instead of returned.
    """

    def __init__(self, pages: Sequence[PlaylistPage | Exception], delay: float = 0.0) -> None:
        self._pages = list(pages)
        self._delay = delay
        self.calls: list[tuple[str, int, str | None]] = []

    async def fetch_page(
        self,
        playlist_id: str,
        page_size: int,
        page_token: str | None = None,
    ) -> PlaylistPage:
        self.calls.append((playlist_id, page_size, page_token))
        if self._delay:
            await asyncio.sleep(self._delay)
        index = 0 if page_token is None else int(page_token.removeprefix("token-"))
        page = self._pages[index]
        if isinstance(page, Exception):
            raise page
        return page


class FakeBatchFetcher:
    """Resolves channel IDs from an in-memory table and records every batch."""

    def __init__(
        self,
        channels: dict[str, str],
        *,
        fail_on: Callable[[int, Sequence[str]], Exception | None] | None = None,
        delay: Callable[[int], float] | None = None,
    ) -> None:
        self._channels = channels
        self._fail_on = fail_on
        self._delay = delay
        self.batches: list[list[str]] = []
        self.in_flight = 0
        self.max_in_flight = 0

    async def fetch_batch(self, channel_ids: Sequence[str]) -> list[ChannelDescriptor]:
        index = len(self.batches)
        self.batches.append(list(channel_ids))
        self.in_flight += 1
        self.max_in_flight = max(self.max_in_flight, self.in_flight)
        try:
            if self._delay:
                await asyncio.sleep(self._delay(index))
            if self._fail_on and (error := self._fail_on(index, channel_ids)):
                raise error
            return [
                ChannelDescriptor(channel_id=cid, description=self._channels[cid])
                for cid in channel_ids
                if cid in self._channels
            ]
        finally:
            self.in_flight -= 1

    @property
    def requested_ids(self) -> list[str]:
        return [cid for batch in self.batches for cid in batch]


def make_pages(sizes: Sequence[int], channel_for: Callable[[int], str] | None = None) -> list[PlaylistPage]:
    """Build pages of the given sizes with consecutive positions and chained tokens."""
    pages = []
    position = 0
    for index, size in enumerate(sizes):
        items = []
        for _ in range(size):
            items.append(
                PlaylistItem(
                    position=position,
                    video_id=f"video{position:04d}",
                    title=f"Video {position}",
                    channel_id=channel_for(position) if channel_for else f"UC{position % 7:04d}",
                    playlist_id="PLtest",
                )
            )
            position += 1
        is_last = index == len(sizes) - 1
        pages.append(
            PlaylistPage(items=items, next_page_token=None if is_last else f"token-{index + 1}")
        )
    return pages


def upstream_error(status_code: int = 403, source: str = "playlistItems") -> UpstreamError:
    return UpstreamError(
        message=f"youtube api non-200: {status_code}",
        source=source,
        status_code=status_code,
        details={"error": {"code": status_code, "message": "quotaExceeded"}},
    )


@pytest.fixture
def fakes():
    """Provide fake port implementations and builders."""
    return {
        "page_fetcher": FakePageFetcher,
        "batch_fetcher": FakeBatchFetcher,
        "pages": make_pages,
        "upstream_error": upstream_error,
    }
