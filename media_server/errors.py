"""Error taxonomy for listing and streaming requests.

Each error carries the HTTP status it maps to and a terse client-facing
``detail``. The exception message is the server-side cause and is only
logged, never sent to the client (it may contain filesystem paths).
"""


class MediaServerError(Exception):
    """Base class for errors that map directly to an HTTP response."""

    status_code: int = 500
    detail: str = "Server error."

    def __init__(self, message: str | None = None):
        super().__init__(message or self.detail)


class InvalidName(MediaServerError):
    """Requested name is not a bare file name (traversal attempt)."""

    status_code = 400
    detail = "Invalid file name."


class UnsupportedType(MediaServerError):
    """Extension is not in the allow-list."""

    status_code = 415
    detail = "Unsupported media type."


class RangeError(MediaServerError):
    """Range header could not be honoured."""

    status_code = 416
    detail = "Requested range not satisfiable."

    def __init__(self, message: str | None = None, file_size: int | None = None):
        super().__init__(message)
        self.file_size = file_size


class MalformedRange(RangeError):
    """Range header does not match ``bytes=<start>-<end?>``."""

    detail = "Malformed Range header."


class Unsatisfiable(RangeError):
    """Range is well-formed but outside the file or inverted."""


class NotFound(MediaServerError):
    """File vanished between resolution and access."""

    status_code = 404
    detail = "Not found."


class ServerError(MediaServerError):
    """Unexpected stat/open failure."""


class CatalogUnavailable(MediaServerError):
    """A media directory exists but could not be read."""

    detail = "Could not read media folders."
