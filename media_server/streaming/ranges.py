"""HTTP Range header parsing.

Only the single-range forms ``bytes=<start>-<end>`` and ``bytes=<start>-``
are supported. Suffix ranges (``bytes=-500``) and multi-range requests are
rejected as malformed rather than served as a full or partial response.
"""

import re
from dataclasses import dataclass

from media_server.errors import MalformedRange, Unsatisfiable

_RANGE_RE = re.compile(r"bytes=(\d+)-(\d*)", re.ASCII)


@dataclass(frozen=True)
class ByteRange:
    """Inclusive byte interval within a file."""

    start: int
    end: int

    @property
    def length(self) -> int:
        return self.end - self.start + 1

    def content_range(self, file_size: int) -> str:
        return f"bytes {self.start}-{self.end}/{file_size}"


def parse_range(header: str | None, file_size: int) -> ByteRange | None:
    """Parse a Range header against a file of ``file_size`` bytes.

    Returns None when no range was requested (serve the whole file).

    Raises:
        MalformedRange: header is not a single ``bytes=start-end?`` range
        Unsatisfiable: start or end falls outside the file, or start > end
    """
    if not header:
        return None

    match = _RANGE_RE.fullmatch(header.strip())
    if match is None:
        raise MalformedRange(f"Malformed Range header {header!r}", file_size=file_size)

    try:
        start = int(match.group(1))
        end = int(match.group(2)) if match.group(2) else file_size - 1
    except ValueError as e:
        # Offsets too long for int() are far past the end of any file
        raise Unsatisfiable(f"Range offsets out of bounds: {e}", file_size=file_size) from e

    if start >= file_size or end >= file_size or start > end:
        raise Unsatisfiable(
            f"Range {start}-{end} not satisfiable for {file_size} bytes",
            file_size=file_size,
        )

    return ByteRange(start=start, end=end)
