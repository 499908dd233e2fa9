"""Map a requested file name onto a media root."""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable

from media_server.config import MediaKind, MediaRoot
from media_server.errors import InvalidName, UnsupportedType


@dataclass(frozen=True)
class ResolvedMedia:
    """A validated on-disk location for a requested name."""

    name: str
    path: Path
    extension: str
    kind: MediaKind


def _is_bare_name(name: str) -> bool:
    if not name or "\x00" in name or ".." in name:
        return False
    if "/" in name or "\\" in name:
        return False
    return os.path.basename(name) == name


def resolve_media_path(name: str, roots: Iterable[MediaRoot]) -> ResolvedMedia:
    """Resolve an already URL-decoded name to a path inside a media root.

    Does not touch the filesystem; existence is checked when the file is
    opened for streaming.

    Raises:
        InvalidName: name has directory components or traversal segments
        UnsupportedType: extension is not served by any root
    """
    if not _is_bare_name(name):
        raise InvalidName(f"Rejected file name {name!r}")

    extension = os.path.splitext(name)[1].lower()
    for root in roots:
        if root.allows(extension):
            return ResolvedMedia(
                name=name,
                path=root.directory / name,
                extension=extension,
                kind=root.kind,
            )

    raise UnsupportedType(f"Extension {extension or '(none)'!r} not allowed for {name!r}")
