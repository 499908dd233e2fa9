"""Tests for media name resolution."""

from pathlib import Path

import pytest

from media_server.config import Settings, MediaKind
from media_server.errors import InvalidName, UnsupportedType
from media_server.streaming.resolver import resolve_media_path


@pytest.fixture
def roots(tmp_path):
    return Settings(
        video_dir=str(tmp_path / "videos"),
        picture_dir=str(tmp_path / "pictures"),
    ).media_roots()


@pytest.mark.parametrize(
    "name,kind,folder",
    [
        ("clip.mp4", MediaKind.VIDEO, "videos"),
        ("clip.WEBM", MediaKind.VIDEO, "videos"),
        ("photo.jpg", MediaKind.PICTURE, "pictures"),
        ("My Photo.JpEg", MediaKind.PICTURE, "pictures"),
    ],
)
def test_resolves_into_matching_root(roots, tmp_path, name, kind, folder):
    resolved = resolve_media_path(name, roots)
    assert resolved.kind == kind
    assert resolved.name == name
    assert resolved.extension == Path(name).suffix.lower()
    assert resolved.path == (tmp_path / folder).resolve() / name


def test_does_not_touch_filesystem(roots):
    # Nothing exists on disk, resolution still succeeds
    resolved = resolve_media_path("missing.mp4", roots)
    assert not resolved.path.exists()


@pytest.mark.parametrize(
    "name",
    [
        "",
        "../secret.mp4",
        "../../etc/passwd.jpg",
        "/etc/clip.mp4",
        "sub/clip.mp4",
        "sub\\clip.mp4",
        "..",
        "...mp4",
        "a..b.mp4",
        "clip\x00.mp4",
    ],
)
def test_invalid_names(roots, name):
    with pytest.raises(InvalidName) as excinfo:
        resolve_media_path(name, roots)
    assert excinfo.value.status_code == 400


def test_traversal_checked_before_extension(roots):
    with pytest.raises(InvalidName):
        resolve_media_path("../notes.txt", roots)


@pytest.mark.parametrize("name", ["notes.txt", "movie.mkv", "noextension", ".mp4", "clip.mp4.bak"])
def test_unsupported_types(roots, name):
    with pytest.raises(UnsupportedType) as excinfo:
        resolve_media_path(name, roots)
    assert excinfo.value.status_code == 415
