"""Pytest configuration and fixtures."""

from pathlib import Path

import pytest
from fastapi.testclient import TestClient

from media_server.app import create_app
from media_server.config import Settings

# 10 KiB of non-repeating-ish bytes so off-by-one slices are detectable
SAMPLE_BYTES = bytes((i * 7 + i // 256) % 256 for i in range(10 * 1024))


@pytest.fixture
def video_dir(tmp_path) -> Path:
    path = tmp_path / "videos"
    path.mkdir()
    return path


@pytest.fixture
def picture_dir(tmp_path) -> Path:
    path = tmp_path / "pictures"
    path.mkdir()
    return path


@pytest.fixture
def settings(video_dir, picture_dir) -> Settings:
    """Settings pointing at temporary media folders.

    A small chunk size forces multi-chunk copies even for tiny files.
    """
    return Settings(
        video_dir=str(video_dir),
        picture_dir=str(picture_dir),
        chunk_size=1000,
        log_file=None,
    )


@pytest.fixture
def client(settings):
    """FastAPI test client."""
    return TestClient(create_app(settings))


@pytest.fixture
def sample_video(video_dir) -> bytes:
    """Write a sample video and return its contents."""
    (video_dir / "clip.mp4").write_bytes(SAMPLE_BYTES)
    return SAMPLE_BYTES
