"""Enumerate media files in the configured roots."""

import locale
import logging
import os
from typing import Iterable

from media_server.config import MediaKind, MediaRoot
from media_server.errors import CatalogUnavailable

logger = logging.getLogger(__name__)


def _sort_key(name: str) -> tuple[str, str]:
    # Case-folded first so the order stays case-insensitive under the C locale
    return (locale.strxfrm(name.casefold()), name)


def list_root(root: MediaRoot) -> list[str]:
    """List allowed regular files in a single root, sorted by name.

    A missing directory is treated as empty.

    Raises:
        CatalogUnavailable: the directory exists but could not be read
    """
    try:
        with os.scandir(root.directory) as entries:
            names = [
                entry.name
                for entry in entries
                if entry.is_file(follow_symlinks=False)
                and root.allows(os.path.splitext(entry.name)[1])
            ]
    except FileNotFoundError:
        logger.debug(f"Media folder missing, treating as empty: {root.directory}")
        return []
    except OSError as e:
        raise CatalogUnavailable(f"Failed to read {root.kind} folder {root.directory}: {e}") from e

    return sorted(names, key=_sort_key)


def list_media(roots: Iterable[MediaRoot]) -> dict[str, list[str]]:
    """List every root, keyed the way the listing endpoint returns them."""
    listing: dict[str, list[str]] = {"videos": [], "pictures": []}
    for root in roots:
        key = "videos" if root.kind == MediaKind.VIDEO else "pictures"
        listing[key].extend(list_root(root))
    return listing
