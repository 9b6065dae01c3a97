"""Laakhay FFetch - lazy, composable access to paginated content indexes."""

from .api import FFetch, FFetchMapped, ffetch
from .core import (
    CacheConfig,
    CachePolicy,
    DecodingError,
    DocumentNotFoundError,
    FetchContext,
    FFetchError,
    InvalidResponseError,
    InvalidURLError,
    NetworkError,
    OperationFailedError,
)
from .io import HTMLParser, HTTPClient, HTTPResponse, HTTPTransport, SoupHTMLParser
from .models import PageResponse, Record
from .security import WILDCARD

__version__ = "0.1.0"

__all__ = [
    # Pipelines
    "FFetch",
    "FFetchMapped",
    "ffetch",
    # Configuration
    "CacheConfig",
    "CachePolicy",
    "FetchContext",
    "WILDCARD",
    # Collaborators
    "HTTPClient",
    "HTTPResponse",
    "HTTPTransport",
    "HTMLParser",
    "SoupHTMLParser",
    # Models
    "PageResponse",
    "Record",
    # Exceptions
    "FFetchError",
    "InvalidURLError",
    "NetworkError",
    "DecodingError",
    "InvalidResponseError",
    "DocumentNotFoundError",
    "OperationFailedError",
]
