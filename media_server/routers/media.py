"""Media listing and streaming endpoints."""

import logging

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse, StreamingResponse
from starlette.concurrency import run_in_threadpool

from media_server.config import MediaRoot, Settings
from media_server.errors import CatalogUnavailable, MediaServerError, ServerError
from media_server.schemas import ErrorResponse, MediaListResponse
from media_server.streaming import list_media, prepare_stream, resolve_media_path, respond

router = APIRouter(prefix="/api", tags=["media"])
logger = logging.getLogger(__name__)


def get_app_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_media_roots(request: Request) -> tuple[MediaRoot, ...]:
    return request.app.state.media_roots


@router.get(
    "/videos",
    response_model=MediaListResponse,
    responses={500: {"model": ErrorResponse}},
)
async def list_videos(roots: tuple[MediaRoot, ...] = Depends(get_media_roots)):
    """List streamable videos and pictures.

    Missing media folders are reported as empty lists. Any other read
    failure fails the whole listing.
    """
    try:
        listing = await run_in_threadpool(list_media, roots)
    except CatalogUnavailable as e:
        logger.error(f"Error reading media folders: {e}")
        return JSONResponse(status_code=500, content={"error": e.detail})

    return MediaListResponse(**listing)


# {name:path} lets encoded slashes through so they are rejected as invalid
# names instead of falling through to a 404.
@router.get("/stream/{name:path}", response_class=StreamingResponse)
async def stream_file(
    name: str,
    request: Request,
    roots: tuple[MediaRoot, ...] = Depends(get_media_roots),
    settings: Settings = Depends(get_app_settings),
):
    """Stream a media file, honouring a single ``Range: bytes=start-end?``.

    Failures outside the error taxonomy are reported as ``ServerError``.
    """
    try:
        resolved = resolve_media_path(name, roots)
        stream_request = await prepare_stream(resolved, request.headers.get("range"))

        if stream_request.byte_range is not None:
            logger.debug(
                f"Streaming {name} bytes {stream_request.byte_range.start}-"
                f"{stream_request.byte_range.end}/{stream_request.file_size}"
            )
        else:
            logger.debug(f"Streaming {name} ({stream_request.file_size} bytes)")

        return await respond(stream_request, settings.chunk_size)
    except MediaServerError:
        raise
    except Exception as e:
        raise ServerError(f"Unexpected failure streaming {name!r}: {e}") from e
