"""Error taxonomy for forecast and realtime retrieval."""


class SurfcastError(Exception):
    """Base error. The message is meant to be shown to a person."""


class UpstreamUnavailable(SurfcastError):
    """Raised when an upstream feed keeps failing after all retries."""

    def __init__(self, message: str, status_code: int | None = None, url: str | None = None):
        super().__init__(message)
        self.status_code = status_code
        self.url = url


class MalformedPayload(SurfcastError):
    """Raised when a required field or shape is missing from a feed."""


class StaleData(SurfcastError):
    """Raised when a reading is past its freshness window and no fallback worked."""


class IndexOutOfRange(SurfcastError):
    """Raised when the current-hour index falls past the end of a series."""
