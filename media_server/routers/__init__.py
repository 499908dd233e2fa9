"""API routers for LAN Media Server."""

from media_server.routers.health import router as health_router
from media_server.routers.media import router as media_router

__all__ = [
    "health_router",
    "media_router",
]
