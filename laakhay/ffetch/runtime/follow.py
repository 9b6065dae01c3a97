"""Document following: fetch and parse the document an entry links to.

Architecture:
    ``DocumentFollower.follow`` turns one entry into an augmented entry. It
    never raises for per-entry problems; missing links, blocked hosts,
    transport failures and parse failures all become an error field on the
    entry so one bad link cannot abort the stream. ``stream`` runs ``follow``
    through the concurrency batcher.

Security:
    Every resolved URL is checked against the context's allowed hosts
    before any request is issued. By default only the index's own host is
    allowed.
"""

from __future__ import annotations

import logging
from collections.abc import AsyncIterator
from typing import Any

from yarl import URL

from ..core.context import FetchContext
from ..core.exceptions import InvalidURLError
from ..io.html import HTMLParser
from ..io.transport import HTTPTransport
from ..models import Record
from ..security import host_key, is_host_allowed
from ..utils import call_maybe_async
from .batching import run_batched

logger = logging.getLogger(__name__)


def resolve_document_url(base: URL, value: str) -> URL:
    """Resolve a link value to an absolute URL.

    Values with a scheme are used as-is; anything else is resolved against
    ``base``.

    Raises:
        InvalidURLError: If the value is blank or cannot be parsed
    """
    if not value.strip():
        raise InvalidURLError(value)
    try:
        url = URL(value)
        if url.scheme:
            return url
        return base.join(url)
    except (TypeError, ValueError) as e:
        raise InvalidURLError(value) from e


class DocumentFollower:
    """Follows a URL-valued field of each entry."""

    def __init__(
        self,
        *,
        base_url: URL,
        context: FetchContext,
        transport: HTTPTransport,
        parser: HTMLParser,
        field: str,
        as_field: str | None = None,
    ) -> None:
        """Initialize document follower.

        Args:
            base_url: Index URL that relative links are resolved against
            context: Fetch configuration (allowed hosts, cache, concurrency)
            transport: Transport used for document requests
            parser: Parser applied to fetched documents
            field: Entry field holding the link
            as_field: Field receiving the document (defaults to ``field``)
        """
        self._base_url = base_url
        self._context = context
        self._transport = transport
        self._parser = parser
        self.field = field
        self.as_field = as_field or field

    @property
    def error_field(self) -> str:
        return f"{self.as_field}_error"

    def stream(self, source: AsyncIterator[Record]) -> AsyncIterator[Record]:
        """Follow every entry of ``source`` with bounded concurrency."""
        return run_batched(source, self.follow, max_concurrency=self._context.max_concurrency)

    async def follow(self, record: Record) -> Record:
        """Return ``record`` augmented with its linked document or an error."""
        value = record.get(self.field)
        if not isinstance(value, str):
            return self._error(record, f"Missing or invalid URL string in field '{self.field}'")

        try:
            url = resolve_document_url(self._base_url, value)
        except InvalidURLError:
            return self._error(record, f"Could not resolve URL from field '{self.field}': {value}")

        host = host_key(url)
        if not is_host_allowed(self._context.allowed_hosts, host):
            logger.warning("follow_blocked", extra={"url": str(url), "host": host})
            return self._error(
                record,
                f"Hostname '{host or ''}' is not allowed for document following. "
                "Use .allow() to permit additional hostnames.",
            )

        try:
            response = await self._transport.fetch(url, self._context.cache)
        except Exception as e:
            return self._error(record, f"Network error for {url}: {e}")

        if response.status != 200:
            return self._error(record, f"HTTP error {response.status} for {url}")

        try:
            document = await call_maybe_async(self._parser.parse, response.body)
        except Exception as e:
            return self._error(record, f"HTML parsing error for {url}: {e}")

        return self._with(record, document)

    def _with(self, record: Record, document: Any) -> Record:
        result = dict(record)
        result[self.as_field] = document
        result.pop(self.error_field, None)
        return result

    def _error(self, record: Record, message: str) -> Record:
        logger.debug(
            "follow_failed",
            extra={"field": self.field, "as_field": self.as_field, "error_message": message},
        )
        result = dict(record)
        result[self.as_field] = None
        result[self.error_field] = message
        return result
