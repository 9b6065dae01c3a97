"""Core components."""

from .cache import CacheConfig
from .context import DEFAULT_CHUNK_SIZE, DEFAULT_MAX_CONCURRENCY, FetchContext
from .enums import CachePolicy
from .exceptions import (
    DecodingError,
    DocumentNotFoundError,
    FFetchError,
    InvalidResponseError,
    InvalidURLError,
    NetworkError,
    OperationFailedError,
)

__all__ = [
    "CacheConfig",
    "CachePolicy",
    "DEFAULT_CHUNK_SIZE",
    "DEFAULT_MAX_CONCURRENCY",
    "FetchContext",
    # Exceptions
    "FFetchError",
    "InvalidURLError",
    "NetworkError",
    "DecodingError",
    "InvalidResponseError",
    "DocumentNotFoundError",
    "OperationFailedError",
]
