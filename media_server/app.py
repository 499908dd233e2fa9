"""FastAPI app factory for LAN Media Server."""

import logging
from pathlib import Path

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import PlainTextResponse
from fastapi.staticfiles import StaticFiles

from media_server import __version__
from media_server.config import Settings, get_settings
from media_server.errors import MediaServerError, RangeError
from media_server.routers import health_router, media_router

logger = logging.getLogger(__name__)


async def media_error_handler(request: Request, exc: MediaServerError) -> PlainTextResponse:
    """Turn a media error into a terse plain-text response.

    The cause (which may include filesystem paths) is logged, the client only
    sees the error's fixed detail message.
    """
    log = logger.error if exc.status_code >= 500 else logger.warning
    log(f"{request.method} {request.url.path} -> {exc.status_code}: {exc}")

    headers = {}
    if isinstance(exc, RangeError) and exc.file_size is not None:
        headers["Content-Range"] = f"bytes */{exc.file_size}"

    return PlainTextResponse(exc.detail, status_code=exc.status_code, headers=headers)


def create_app(settings: Settings | None = None) -> FastAPI:
    """Create and configure the FastAPI application.

    Args:
        settings: Settings to serve with. Defaults to get_settings()
    """
    settings = settings or get_settings()

    app = FastAPI(
        title="LAN Media Server",
        description="Stream local videos and pictures with HTTP range support",
        version=__version__,
    )

    # Media roots are fixed for the lifetime of the app
    app.state.settings = settings
    app.state.media_roots = settings.media_roots()

    # Add CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["GET"],
        allow_headers=["*"],
        expose_headers=["Content-Range", "Accept-Ranges", "Content-Length"],
    )

    app.add_exception_handler(MediaServerError, media_error_handler)

    # Include routers
    app.include_router(media_router)
    app.include_router(health_router)

    # Serve the frontend shell at root (must be mounted after the API routes)
    static_dir = Path(settings.static_dir)
    if static_dir.is_dir():
        app.mount("/", StaticFiles(directory=static_dir, html=True), name="static")
    else:
        logger.warning(f"Static directory not found, frontend disabled: {static_dir}")

    for root in app.state.media_roots:
        logger.info(f"Serving {root.kind}s from: {root.directory}")

    return app
