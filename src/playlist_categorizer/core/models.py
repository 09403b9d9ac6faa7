"""Domain models for playlist items and cluster requests."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

DEFAULT_STRATEGY = "hdbscan"
DEFAULT_PARAMS: dict[str, str] = {
    "title_weight": "0.8",
    "channel_weight": "0.2",
}

# YouTube Data API maxResults / id list bound
MAX_BATCH_SIZE = 50
DEFAULT_PAGE_SIZE = 50


class PlaylistItem(BaseModel):
    """One entry of a playlist as returned by playlistItems.list."""

    model_config = ConfigDict(frozen=True)

    position: int = Field(default=0, ge=0, description="Zero-based position in the playlist")
    video_id: str = Field(default="", description="Underlying video ID")
    title: str = Field(default="", description="Video title")
    channel_id: str = Field(
        default="",
        description="Uploader channel ID, falling back to the channel that added the item",
    )
    playlist_id: str = Field(default="", description="Playlist the item belongs to")


class PlaylistPage(BaseModel):
    """A single page of playlist items."""

    model_config = ConfigDict(frozen=True)

    items: list[PlaylistItem] = Field(default_factory=list)
    next_page_token: str | None = None

    @property
    def has_next(self) -> bool:
        return bool(self.next_page_token)


class ChannelDescriptor(BaseModel):
    """Channel metadata from channels.list."""

    model_config = ConfigDict(frozen=True)

    channel_id: str = Field(..., min_length=1, description="Channel ID")
    title: str = Field(default="", description="Channel title")
    description: str = Field(default="", description="Channel description, may be empty")


class Video(BaseModel):
    """A playlist item enriched with its uploader's channel description."""

    model_config = ConfigDict(frozen=True)

    video_id: str
    title: str
    channel_id: str
    channel_description: str = ""
    playlist_id: str
    position: int = Field(default=0, ge=0)

    @classmethod
    def from_item(cls, item: PlaylistItem, channel_description: str = "") -> Video:
        return cls(
            video_id=item.video_id,
            title=item.title,
            channel_id=item.channel_id,
            channel_description=channel_description,
            playlist_id=item.playlist_id,
            position=item.position,
        )


class ClusterRequest(BaseModel):
    """Aggregated playlist handed to the clustering service."""

    model_config = ConfigDict(frozen=True)

    strategy: str = Field(default=DEFAULT_STRATEGY, description="Opaque clustering strategy label")
    params: dict[str, str] = Field(
        default_factory=lambda: dict(DEFAULT_PARAMS),
        description="Free-form strategy parameters",
    )
    videos: list[Video] = Field(default_factory=list)
