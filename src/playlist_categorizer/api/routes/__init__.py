"""API route modules."""

from playlist_categorizer.api.routes.health import router as health_router
from playlist_categorizer.api.routes.playlist import router as playlist_router

__all__ = [
    "health_router",
    "playlist_router",
]
