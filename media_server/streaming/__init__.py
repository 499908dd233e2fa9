"""Range-request streaming core: name resolution, listing, ranges, responses."""

from media_server.streaming.catalog import list_media, list_root
from media_server.streaming.ranges import ByteRange, parse_range
from media_server.streaming.resolver import ResolvedMedia, resolve_media_path
from media_server.streaming.responder import (
    FileStream,
    StreamRequest,
    StreamState,
    content_type_for,
    prepare_stream,
    respond,
)

__all__ = [
    "ByteRange",
    "FileStream",
    "ResolvedMedia",
    "StreamRequest",
    "StreamState",
    "content_type_for",
    "list_media",
    "list_root",
    "parse_range",
    "prepare_stream",
    "resolve_media_path",
    "respond",
]
