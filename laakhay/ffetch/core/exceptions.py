"""Custom exception hierarchy."""

from __future__ import annotations


class FFetchError(Exception):
    """Base exception for all library errors."""

    pass


class InvalidURLError(FFetchError):
    """A base or resolved URL is malformed."""

    def __init__(self, url: str, message: str | None = None) -> None:
        super().__init__(message or f"Invalid URL: {url}")
        self.url = url


class NetworkError(FFetchError):
    """Transport failure or unexpected page status.

    Raised for connection-level failures and for any page response whose
    status is neither 200 nor 404.
    """

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
    ) -> None:
        super().__init__(message)
        self.status_code = status_code


class DecodingError(FFetchError):
    """Envelope, value or document decode failure."""

    pass


class InvalidResponseError(FFetchError):
    """Response body has an unexpected shape."""

    pass


class DocumentNotFoundError(FFetchError):
    """Explicit not-found signal for a single document.

    Distinct from the 404 that gracefully ends pagination.
    """

    pass


class OperationFailedError(FFetchError):
    """Generic failure with a message."""

    def __init__(self, message: str) -> None:
        super().__init__(f"Operation failed: {message}")
        self.reason = message
