"""Abstract YouTube Data API client with HTTP client management."""

from __future__ import annotations

import logging
from abc import ABC
from contextlib import asynccontextmanager
from typing import Any, AsyncIterator, ClassVar

import httpx
from pydantic import BaseModel, Field

from playlist_categorizer.core.exceptions import UpstreamError
from playlist_categorizer.core.types import SourceName

logger = logging.getLogger(__name__)

YOUTUBE_API_URL = "https://www.googleapis.com/youtube/v3"


class YouTubeClientConfig(BaseModel):
    """Configuration for a YouTube Data API client."""

    api_key: str = Field(..., min_length=1)
    base_url: str = YOUTUBE_API_URL
    timeout: float = Field(default=15.0, gt=0)


class AbstractYouTubeClient(ABC):
    """
    Base class for YouTube Data API resource clients.

    Provides:
    - HTTP client management with connection pooling
    - API key injection
    - Consistent mapping of transport, status and decode failures to UpstreamError

    Requests are never retried; a failed call surfaces immediately.
    """

    SOURCE_NAME: ClassVar[SourceName]
    PATH: ClassVar[str]

    def __init__(self, config: YouTubeClientConfig) -> None:
        self.config = config
        self._client: httpx.AsyncClient | None = None

    @property
    def source_name(self) -> SourceName:
        return self.SOURCE_NAME

    @asynccontextmanager
    async def _get_client(self) -> AsyncIterator[httpx.AsyncClient]:
        """Get or create HTTP client with proper lifecycle."""
        if self._client is None or self._client.is_closed:
            self._client = httpx.AsyncClient(
                base_url=self.config.base_url,
                timeout=httpx.Timeout(self.config.timeout),
                headers=self._get_default_headers(),
            )

        try:
            yield self._client
        except httpx.HTTPError as e:
            raise UpstreamError(
                message=f"youtube request failed: {e}",
                source=self.source_name.value,
            ) from e

    def _get_default_headers(self) -> dict[str, str]:
        return {
            "User-Agent": "playlist-categorizer/0.1",
            "Accept": "application/json",
        }

    async def close(self) -> None:
        """Close the HTTP client."""
        if self._client and not self._client.is_closed:
            await self._client.aclose()
            self._client = None

    async def _get_json(self, params: dict[str, Any]) -> dict[str, Any]:
        """
        GET this client's resource and decode the JSON body.

        Args:
            params: Query parameters, without the API key

        Returns:
            The decoded response object

        Raises:
            UpstreamError: On transport failure, non-2xx status or undecodable body
        """
        query = {**params, "key": self.config.api_key}
        logger.debug(f"GET {self.PATH} {params}")

        async with self._get_client() as client:
            response = await client.get(self.PATH, params=query)

        if not response.is_success:
            raise UpstreamError(
                message=f"youtube api non-200: {response.status_code}",
                source=self.source_name.value,
                status_code=response.status_code,
                details=self._error_payload(response),
            )

        try:
            data = response.json()
        except ValueError as e:
            raise UpstreamError(
                message=f"decode {self.source_name.value} response: {e}",
                source=self.source_name.value,
                status_code=response.status_code,
            ) from e

        if not isinstance(data, dict):
            raise UpstreamError(
                message=f"decode {self.source_name.value} response: expected an object",
                source=self.source_name.value,
                status_code=response.status_code,
            )
        return data

    @staticmethod
    def _error_payload(response: httpx.Response) -> dict[str, Any]:
        """Extract the structured ``error`` object from an API error response."""
        try:
            body = response.json()
        except ValueError:
            return {"body": response.text[:500]} if response.text else {}

        if isinstance(body, dict) and "error" in body:
            return {"error": body["error"]}
        return {"error": body}

    async def __aenter__(self) -> AbstractYouTubeClient:
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()
