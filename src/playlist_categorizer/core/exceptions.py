"""Custom exception hierarchy for playlist_categorizer."""

from typing import Any


class CategorizerError(Exception):
    """Base exception for all playlist_categorizer errors."""

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details or {}


class ValidationError(CategorizerError):
    """Inbound request failed validation."""

    pass


class ConfigurationError(CategorizerError):
    """Settings are missing or invalid."""

    pass


class UpstreamError(CategorizerError):
    """A single call to the YouTube Data API failed."""

    def __init__(
        self,
        message: str,
        source: str,
        status_code: int | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message, details)
        self.source = source
        self.status_code = status_code


class PlaylistFetchError(CategorizerError):
    """Listing the playlist failed. Fatal for the whole aggregation."""

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message, details)
        self.status_code = status_code


class EnrichmentError(CategorizerError):
    """Resolving channel descriptions failed. The aggregator degrades instead of failing."""

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message, details)
        self.status_code = status_code
