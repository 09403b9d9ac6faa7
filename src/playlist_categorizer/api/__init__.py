"""FastAPI application and routes."""

from playlist_categorizer.api.app import app, create_app

__all__ = [
    "app",
    "create_app",
]
