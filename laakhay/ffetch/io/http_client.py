"""aiohttp-backed transport."""

from __future__ import annotations

import asyncio

import aiohttp
from yarl import URL

from ..core.cache import CacheConfig
from ..core.enums import CachePolicy
from ..core.exceptions import NetworkError
from .transport import HTTPResponse

_POLICY_DIRECTIVES = {
    CachePolicy.USE_PROTOCOL_CACHE_POLICY: None,
    CachePolicy.RELOAD_IGNORING_CACHE: "no-cache",
    CachePolicy.RETURN_CACHE_ELSE_LOAD: "max-stale",
    CachePolicy.RETURN_CACHE_DONT_LOAD: "only-if-cached",
}


def cache_headers(cache: CacheConfig) -> dict[str, str]:
    """Translate a cache directive into request headers.

    ``ignore_server_cache_control`` only matters to a caching layer and
    produces no header.
    """
    directives = []
    directive = _POLICY_DIRECTIVES[cache.policy]
    if directive is not None:
        directives.append(directive)
    if cache.max_age is not None:
        directives.append(f"max-age={cache.max_age}")
    if not directives:
        return {}

    headers = {"Cache-Control": ", ".join(directives)}
    if cache.policy is CachePolicy.RELOAD_IGNORING_CACHE:
        headers["Pragma"] = "no-cache"
    return headers


class HTTPClient:
    """Async HTTP client wrapper."""

    def __init__(
        self,
        timeout: float = 30.0,
        headers: dict[str, str] | None = None,
    ) -> None:
        self.timeout = aiohttp.ClientTimeout(total=timeout)
        self.headers = dict(headers or {})
        self._session: aiohttp.ClientSession | None = None

    @property
    def session(self) -> aiohttp.ClientSession:
        """Get or create session."""
        if self._session is None or self._session.closed:
            self._session = aiohttp.ClientSession(timeout=self.timeout, headers=self.headers)
        return self._session

    async def fetch(self, url: URL, cache: CacheConfig = CacheConfig.DEFAULT) -> HTTPResponse:
        """GET ``url`` and return the raw response without checking its status.

        Raises:
            NetworkError: On connection failures and timeouts
        """
        try:
            async with self.session.get(url, headers=cache_headers(cache) or None) as response:
                body = await response.read()
                return HTTPResponse(
                    body=body,
                    status=response.status,
                    headers=dict(response.headers),
                )
        except (aiohttp.ClientError, asyncio.TimeoutError) as e:
            raise NetworkError(str(e) or type(e).__name__) from e

    async def close(self) -> None:
        """Close session."""
        if self._session and not self._session.closed:
            await self._session.close()

    async def __aenter__(self) -> HTTPClient:
        """Context manager entry."""
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        """Context manager exit."""
        await self.close()
