"""Pagination driver that streams index entries page by page.

This module provides the PaginationDriver class that requests successive
pages of a content index, learns the total from the first page and yields
entries lazily in server order.
"""

from __future__ import annotations

import json
from collections.abc import AsyncIterator
from time import perf_counter

from pydantic import ValidationError
from yarl import URL

from ...core.context import FetchContext
from ...core.exceptions import (
    DecodingError,
    FFetchError,
    InvalidResponseError,
    NetworkError,
)
from ...io.transport import HTTPTransport
from ...models import PageResponse, Record
from .definitions import PagePlan, PaginationStats
from .planners import PagePlanner
from .telemetry import (
    log_page_error,
    log_page_fetched,
    log_page_not_found,
    log_pagination_complete,
)


def decode_page(body: bytes) -> PageResponse:
    """Decode a page body into its envelope.

    Raises:
        DecodingError: If the body is not JSON or does not fit the envelope
        InvalidResponseError: If the JSON document is not an object
    """
    try:
        payload = json.loads(body)
    except ValueError as e:
        raise DecodingError(f"Decoding error: {e}") from e

    if not isinstance(payload, dict):
        raise InvalidResponseError("Invalid response format")

    try:
        return PageResponse.model_validate(payload)
    except ValidationError as e:
        raise DecodingError(f"Decoding error: {e}") from e


class PaginationDriver:
    """Fetches pages sequentially and yields their entries.

    Only one page request is in flight at a time. The total reported by the
    first page is authoritative for the rest of the run; later pages may
    report a different value without effect.
    """

    def __init__(self, url: URL, context: FetchContext, transport: HTTPTransport) -> None:
        """Initialize pagination driver.

        Args:
            url: Base index URL
            context: Fetch configuration
            transport: Transport used for page requests
        """
        self._url = url
        self._context = context
        self._transport = transport
        self._planner = PagePlanner(context.chunk_size, context.sheet_name)
        self.stats = PaginationStats(total=context.total)

    async def iter_records(self) -> AsyncIterator[Record]:
        """Yield entries of every page in server order.

        A 404 on any page ends the stream without error. Any other failure
        raises before the failing page's entries are yielded.
        """
        plan: PagePlan | None = self._planner.first()

        while plan is not None:
            if self.stats.total is not None and plan.offset >= self.stats.total:
                break

            page = await self._fetch_page(plan)
            if page is None:
                self.stats.stopped_by_not_found = True
                break

            if self.stats.total is None:
                self.stats.total = page.total
            self.stats.pages_fetched += 1

            for record in page.data:
                self.stats.entries_emitted += 1
                yield record

            plan = self._planner.next(plan, self.stats.total)

        log_pagination_complete(url=str(self._url), stats=self.stats)

    async def _fetch_page(self, plan: PagePlan) -> PageResponse | None:
        """Fetch and decode one page.

        Returns:
            The decoded page, or None if the server answered 404
        """
        url = self._planner.build_url(self._url, plan)
        start = perf_counter()
        try:
            try:
                response = await self._transport.fetch(url, self._context.cache)
            except FFetchError:
                raise
            except Exception as e:
                raise NetworkError(f"Network error: {e}") from e

            if response.status == 404:
                log_page_not_found(url=str(url), plan=plan)
                return None
            if response.status != 200:
                raise NetworkError(
                    f"Network error: HTTP {response.status}", status_code=response.status
                )

            page = decode_page(response.body)
        except FFetchError as e:
            log_page_error(
                url=str(url),
                plan=plan,
                error_type=type(e).__name__,
                error_message=str(e),
            )
            raise

        log_page_fetched(
            url=str(url),
            plan=plan,
            entries=len(page.data),
            total=self.stats.total if self.stats.total is not None else page.total,
            latency_ms=(perf_counter() - start) * 1000.0,
        )
        return page
