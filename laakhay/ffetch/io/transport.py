"""Transport contract consumed by the pagination driver and document follower."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Protocol

from yarl import URL

from ..core.cache import CacheConfig


@dataclass(frozen=True)
class HTTPResponse:
    """Raw response handed back by a transport.

    Attributes:
        body: Undecoded response body
        status: HTTP status code
        headers: Response headers
    """

    body: bytes
    status: int
    headers: Mapping[str, str] = field(default_factory=dict)


class HTTPTransport(Protocol):
    """Anything that can GET a URL.

    Implementations may raise on connection failures; the caller maps those
    to ``NetworkError``. Non-2xx statuses must be returned, not raised.
    """

    async def fetch(self, url: URL, cache: CacheConfig) -> HTTPResponse: ...
