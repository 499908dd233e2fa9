"""Health endpoint."""

from fastapi import APIRouter

from media_server import __version__
from media_server.schemas import HealthResponse

router = APIRouter(tags=["health"])


@router.get("/health", response_model=HealthResponse)
async def health():
    """Health check endpoint."""
    return HealthResponse(status="ok", version=__version__)
