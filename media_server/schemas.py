"""Pydantic schemas for response models."""

from pydantic import BaseModel, Field


class MediaListResponse(BaseModel):
    """Media available for streaming, names only."""

    videos: list[str] = Field(default_factory=list)
    pictures: list[str] = Field(default_factory=list)


class ErrorResponse(BaseModel):
    """JSON error body."""

    error: str


class HealthResponse(BaseModel):
    """Health check response."""

    status: str
    version: str
