"""Errors raised while assembling GitHub statistics."""


class FetchError(Exception):
    """Base class for failures to produce GitHub statistics."""


class UpstreamError(FetchError):
    """GitHub answered with a non-success status or an unusable payload."""

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.status_code = status_code


class UnexpectedError(FetchError):
    """Any other failure (transport errors, malformed JSON, ...)."""
