"""Full and partial content responses backed by a bounded-buffer file copy."""

import logging
import os
import stat
from collections.abc import AsyncIterator
from dataclasses import dataclass
from enum import StrEnum
from pathlib import Path
from typing import Any, BinaryIO

from fastapi.responses import StreamingResponse
from starlette.concurrency import run_in_threadpool
from starlette.types import Message, Receive, Scope, Send

from media_server.config import DEFAULT_CHUNK_SIZE
from media_server.errors import NotFound, ServerError
from media_server.streaming.ranges import ByteRange, parse_range
from media_server.streaming.resolver import ResolvedMedia

logger = logging.getLogger(__name__)

CONTENT_TYPES = {
    ".mp4": "video/mp4",
    ".webm": "video/webm",
    ".jpg": "image/jpeg",
    ".jpeg": "image/jpeg",
}
DEFAULT_CONTENT_TYPE = "application/octet-stream"


class StreamState(StrEnum):
    """Lifecycle of a single streamed response."""

    IDLE = "idle"
    HEADER_SENT = "header_sent"
    STREAMING = "streaming"
    COMPLETED = "completed"
    ABORTED = "aborted"


@dataclass(frozen=True)
class StreamRequest:
    """Everything needed to send one response: which bytes and how to label them."""

    name: str
    path: Path
    file_size: int
    content_type: str
    byte_range: ByteRange | None = None

    @property
    def start(self) -> int:
        return self.byte_range.start if self.byte_range else 0

    @property
    def length(self) -> int:
        return self.byte_range.length if self.byte_range else self.file_size


def content_type_for(name: str) -> str:
    """Get the Content-Type for a file name based on its extension."""
    return CONTENT_TYPES.get(os.path.splitext(name)[1].lower(), DEFAULT_CONTENT_TYPE)


def _access_error(name: str, e: OSError) -> NotFound | ServerError:
    if isinstance(e, (FileNotFoundError, NotADirectoryError)):
        return NotFound(f"{name!r} does not exist: {e}")
    return ServerError(f"Cannot access {name!r}: {e}")


def _stat_size(resolved: ResolvedMedia) -> int:
    try:
        st = os.stat(resolved.path)
    except OSError as e:
        raise _access_error(resolved.name, e) from e

    if not stat.S_ISREG(st.st_mode):
        raise NotFound(f"{resolved.name!r} is not a regular file")
    return st.st_size


def _open_at(request: StreamRequest) -> BinaryIO:
    try:
        f = open(request.path, "rb")
    except OSError as e:
        raise _access_error(request.name, e) from e

    try:
        f.seek(request.start)
    except OSError as e:
        f.close()
        raise ServerError(f"Cannot seek {request.name!r} to {request.start}: {e}") from e
    return f


async def prepare_stream(resolved: ResolvedMedia, range_header: str | None) -> StreamRequest:
    """Stat the resolved file and validate the requested range against it.

    Raises:
        NotFound: the file is missing or not a regular file
        ServerError: any other stat failure
        MalformedRange, Unsatisfiable: the Range header cannot be served
    """
    file_size = await run_in_threadpool(_stat_size, resolved)
    return StreamRequest(
        name=resolved.name,
        path=resolved.path,
        file_size=file_size,
        content_type=content_type_for(resolved.name),
        byte_range=parse_range(range_header, file_size),
    )


class FileStream:
    """Copy ``length`` bytes from an already positioned file in bounded chunks.

    Owns the file handle and closes it when the copy completes, fails, or is
    cancelled because the client went away. Nothing is retried: once headers
    are out an error can only end the body early.
    """

    def __init__(self, file: BinaryIO, name: str, length: int, chunk_size: int = DEFAULT_CHUNK_SIZE):
        self.name = name
        self.length = length
        self.chunk_size = chunk_size
        self.sent = 0
        self.state = StreamState.IDLE
        self._file = file

    def __aiter__(self) -> AsyncIterator[bytes]:
        return self._iter_chunks()

    async def _iter_chunks(self) -> AsyncIterator[bytes]:
        self.state = StreamState.STREAMING
        try:
            while self.sent < self.length:
                size = min(self.chunk_size, self.length - self.sent)
                chunk = await run_in_threadpool(self._file.read, size)
                if not chunk:
                    logger.warning(
                        f"{self.name} ended after {self.sent} of {self.length} bytes (file truncated?)"
                    )
                    return
                self.sent += len(chunk)
                yield chunk
            self.state = StreamState.COMPLETED
        except OSError as e:
            logger.error(f"Read failed while streaming {self.name}: {e}")
        finally:
            self.finish()

    def finish(self) -> None:
        """Release the file. Anything short of a full copy counts as aborted."""
        self.close()
        if self.state not in (StreamState.COMPLETED, StreamState.ABORTED):
            self.state = StreamState.ABORTED
            logger.info(f"Stream of {self.name} aborted after {self.sent} of {self.length} bytes")

    def close(self) -> None:
        self._file.close()


class FileStreamResponse(StreamingResponse):
    """StreamingResponse that tracks header delivery and always releases its file.

    If the client goes away before the body iterator starts, the iterator's
    own cleanup never runs, so the file is released here instead.
    """

    body_iterator: FileStream

    def __init__(self, content: FileStream, **kwargs: Any):
        super().__init__(content, **kwargs)
        self.body_iterator = content

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        stream = self.body_iterator

        async def send_tracking_headers(message: Message) -> None:
            await send(message)
            if message["type"] == "http.response.start":
                stream.state = StreamState.HEADER_SENT

        try:
            await super().__call__(scope, receive, send_tracking_headers)
        finally:
            stream.finish()


def _build_headers(request: StreamRequest) -> dict[str, str]:
    headers = {
        "Accept-Ranges": "bytes",
        "Content-Length": str(request.length),
    }
    if request.byte_range is not None:
        headers["Content-Range"] = request.byte_range.content_range(request.file_size)
    return headers


async def respond(request: StreamRequest, chunk_size: int = DEFAULT_CHUNK_SIZE) -> FileStreamResponse:
    """Open the file at the requested offset and build the streaming response.

    The file is opened before any header is produced, so a file that vanished
    since ``prepare_stream`` still yields a clean 404.

    Raises:
        NotFound: the file disappeared before it could be opened
        ServerError: any other open or seek failure
    """
    f = await run_in_threadpool(_open_at, request)
    body = FileStream(f, request.name, request.length, chunk_size)

    return FileStreamResponse(
        body,
        status_code=206 if request.byte_range is not None else 200,
        media_type=request.content_type,
        headers=_build_headers(request),
    )
