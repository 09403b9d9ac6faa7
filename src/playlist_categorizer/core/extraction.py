"""Field extraction from raw YouTube Data API payloads.

Payloads come straight from ``response.json()`` and are treated as untrusted:
any sub-object that is not a mapping counts as absent.
"""

from __future__ import annotations

from typing import Any, Mapping

from playlist_categorizer.core.models import ChannelDescriptor, PlaylistItem


def _mapping(value: Any) -> Mapping[str, Any]:
    return value if isinstance(value, Mapping) else {}


def _string(value: Any) -> str:
    return value if isinstance(value, str) else ""


def extract_video_id(item: Mapping[str, Any]) -> str:
    """
    Get the video ID of a playlist item.

    Prefers ``contentDetails.videoId`` and falls back to
    ``snippet.resourceId.videoId``.
    """
    video_id = _string(_mapping(item.get("contentDetails")).get("videoId"))
    if video_id:
        return video_id

    resource_id = _mapping(_mapping(item.get("snippet")).get("resourceId"))
    return _string(resource_id.get("videoId"))


def extract_channel_id(snippet: Mapping[str, Any]) -> str:
    """
    Get the uploader channel ID from a playlist item snippet.

    ``videoOwnerChannelId`` is the channel that uploaded the video;
    ``channelId`` is the channel that added it to the playlist and is only
    used when the former is missing.
    """
    return _string(snippet.get("videoOwnerChannelId")) or _string(snippet.get("channelId"))


def parse_playlist_item(item: Mapping[str, Any]) -> PlaylistItem:
    """Parse a playlistItems.list item into a PlaylistItem."""
    snippet = _mapping(item.get("snippet"))

    position = snippet.get("position")
    if not isinstance(position, int) or isinstance(position, bool) or position < 0:
        position = 0

    return PlaylistItem(
        position=position,
        video_id=extract_video_id(item),
        title=_string(snippet.get("title")),
        channel_id=extract_channel_id(snippet),
        playlist_id=_string(snippet.get("playlistId")),
    )


def parse_channel(item: Mapping[str, Any]) -> ChannelDescriptor | None:
    """Parse a channels.list item. Returns None for items without an ID."""
    channel_id = _string(item.get("id"))
    if not channel_id:
        return None

    snippet = _mapping(item.get("snippet"))
    return ChannelDescriptor(
        channel_id=channel_id,
        title=_string(snippet.get("title")),
        description=_string(snippet.get("description")),
    )
