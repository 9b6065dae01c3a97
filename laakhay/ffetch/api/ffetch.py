"""Fluent, lazily evaluated access to paginated content indexes.

Architecture:
    ``FFetch`` is an immutable description of a pipeline: a base URL, a
    ``FetchContext`` and a factory for the upstream stage chain. Configuration
    methods return a new ``FFetch`` with an evolved context; operators return
    a new pipeline whose factory wraps the previous one. Nothing touches the
    network until the pipeline is iterated.

Design Decisions:
    - Async iteration rebuilds the stage chain from the original request, so
      each ``async for`` (or terminal call) paginates afresh
    - Configuration applies to stages added after it; stages already in the
      chain keep the context they were created with
    - ``map`` yields an ``FFetchMapped`` because its elements need not be
      entries any more; ``follow`` is only available on entries

Example:
    >>> entries = await (
    ...     ffetch("https://example.com/query-index.json")
    ...     .chunks(100)
    ...     .filter(lambda e: e.get("template") == "blog")
    ...     .follow("path", as_field="document")
    ...     .limit(10)
    ...     .all()
    ... )
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import AsyncIterator, Callable, Iterable
from contextlib import aclosing, asynccontextmanager
from typing import Generic, TypeVar

from yarl import URL

from ..core.cache import CacheConfig
from ..core.context import FetchContext
from ..core.exceptions import InvalidURLError
from ..io.html import HTMLParser, SoupHTMLParser
from ..io.http_client import HTTPClient
from ..io.transport import HTTPTransport
from ..models import Record
from ..runtime.follow import DocumentFollower
from ..runtime.pagination import PaginationDriver
from ..runtime.stream import filter_stream, limit_stream, map_stream, skip_stream, slice_stream
from ..security import allow_hosts, seed_origin
from ..utils import MaybeAsync

T = TypeVar("T")
R = TypeVar("R")

SourceFactory = Callable[[], AsyncIterator[T]]


def _parse_base_url(url: str | URL) -> URL:
    """Validate the index URL."""
    if isinstance(url, URL):
        parsed = url
    else:
        try:
            parsed = URL(url)
        except (TypeError, ValueError) as e:
            raise InvalidURLError(str(url)) from e
    if not parsed.scheme or not parsed.is_absolute():
        raise InvalidURLError(str(url))
    return parsed


@asynccontextmanager
async def _open_transport(context: FetchContext) -> AsyncIterator[HTTPTransport]:
    """Yield the configured transport, or a default client owned by this scope."""
    if context.http_client is not None:
        yield context.http_client
        return
    async with HTTPClient() as client:
        yield client


class _Pipeline(ABC, Generic[T]):
    """Operators and terminal consumers shared by both pipeline kinds."""

    def __init__(self, url: URL, context: FetchContext, source: SourceFactory[T] | None) -> None:
        self.url = url
        self.context = context
        self._upstream = source

    def __aiter__(self) -> AsyncIterator[T]:
        if self._upstream is None:
            raise TypeError(f"{type(self).__name__} has no source")
        return self._upstream()

    @abstractmethod
    def _derive(self, source: SourceFactory[T]) -> _Pipeline[T]:
        """Wrap ``source`` in a pipeline of the same kind."""

    # --- Operators ----------------------------------------------------------

    def map(self, transform: MaybeAsync[R]) -> FFetchMapped[R]:
        """Transform elements concurrently (up to ``max_concurrency`` at a time).

        Output order matches input order. Elements whose transform raises are
        dropped, so the output can be shorter than the input.
        """
        max_concurrency = self.context.max_concurrency

        def source() -> AsyncIterator[R]:
            return map_stream(aiter(self), transform, max_concurrency=max_concurrency)

        return FFetchMapped(self.url, self.context, source)

    def filter(self, predicate: MaybeAsync[bool]):
        """Keep elements for which ``predicate`` holds.

        Elements whose predicate raises are dropped.
        """
        return self._derive(lambda: filter_stream(aiter(self), predicate))

    def limit(self, count: int):
        """Yield at most ``count`` elements; no further pages are requested."""
        return self._derive(lambda: limit_stream(aiter(self), count))

    def skip(self, count: int):
        """Discard the first ``count`` elements."""
        return self._derive(lambda: skip_stream(aiter(self), count))

    def slice(self, start: int, end: int):
        """Elements ``start`` (inclusive) to ``end`` (exclusive).

        Equivalent to ``skip(start).limit(end - start)``.
        """
        return self._derive(lambda: slice_stream(aiter(self), start, end))

    # --- Terminal consumers -------------------------------------------------

    async def all(self) -> list[T]:
        """Collect every element."""
        results: list[T] = []
        async with aclosing(aiter(self)) as elements:
            async for element in elements:
                results.append(element)
        return results

    async def first(self) -> T | None:
        """Return the first element, or None for an empty stream."""
        async with aclosing(aiter(self)) as elements:
            async for element in elements:
                return element
        return None

    async def count(self) -> int:
        """Count the elements."""
        total = 0
        async with aclosing(aiter(self)) as elements:
            async for _ in elements:
                total += 1
        return total


class FFetch(_Pipeline[Record]):
    """Lazy stream of entries from a paginated content index."""

    def __init__(
        self,
        url: str | URL,
        *,
        context: FetchContext | None = None,
        _source: SourceFactory[Record] | None = None,
    ) -> None:
        """Create a pipeline for the index at ``url``.

        Args:
            url: Absolute index URL; existing query parameters are kept
            context: Starting configuration (defaults to ``FetchContext()``)

        Raises:
            InvalidURLError: If ``url`` is malformed or not absolute
        """
        base_url = _parse_base_url(url)
        context = context or FetchContext()
        seeded = seed_origin(context.allowed_hosts, base_url)
        if seeded is not context.allowed_hosts:
            context = context.evolve(allowed_hosts=seeded)
        super().__init__(base_url, context, _source)

    def __aiter__(self) -> AsyncIterator[Record]:
        if self._upstream is None:
            return self._paginate()
        return self._upstream()

    async def _paginate(self) -> AsyncIterator[Record]:
        async with _open_transport(self.context) as transport:
            driver = PaginationDriver(self.url, self.context, transport)
            async with aclosing(driver.iter_records()) as records:
                async for record in records:
                    yield record

    def _derive(self, source: SourceFactory[Record]) -> FFetch:
        return FFetch(self.url, context=self.context, _source=source)

    def _configure(self, **changes) -> FFetch:
        return FFetch(self.url, context=self.context.evolve(**changes), _source=self._upstream)

    # --- Configuration ------------------------------------------------------

    def chunks(self, size: int) -> FFetch:
        """Set the number of entries requested per page (default 255)."""
        return self._configure(chunk_size=size)

    def sheet(self, name: str) -> FFetch:
        """Select a sheet of a multi-sheet index."""
        return self._configure(sheet_name=name)

    def max_concurrency(self, limit: int) -> FFetch:
        """Bound the number of concurrently running ``map``/``follow`` operations."""
        return self._configure(max_concurrency=limit)

    def cache(self, config: CacheConfig) -> FFetch:
        """Set the cache directive forwarded with every request."""
        return self._configure(cache=config)

    def reload_cache(self) -> FFetch:
        """Bypass cached responses."""
        return self.cache(CacheConfig.NO_CACHE)

    def with_cache_reload(self, reload: bool = True) -> FFetch:
        """Bypass cached responses if ``reload``, otherwise use the default directive."""
        return self.cache(CacheConfig.NO_CACHE if reload else CacheConfig.DEFAULT)

    def with_http_client(self, client: HTTPTransport) -> FFetch:
        """Use ``client`` for page and document requests."""
        return self._configure(http_client=client)

    def with_html_parser(self, parser: HTMLParser) -> FFetch:
        """Use ``parser`` for followed documents."""
        return self._configure(html_parser=parser)

    def allow(self, hosts: str | Iterable[str]) -> FFetch:
        """Allow document following to additional hosts.

        By default only the index's own host is allowed. Passing ``"*"`` (alone
        or inside an iterable) allows every host, including URLs with no host
        at all; use it only with trusted indexes.

        Args:
            hosts: A host (``"cdn.example.com"``, ``"example.com:8080"``) or an
                iterable of hosts; matching is case-insensitive and a port is
                only needed when it is not the scheme default
        """
        if isinstance(hosts, str):
            hosts = [hosts]
        return self._configure(allowed_hosts=allow_hosts(self.context.allowed_hosts, hosts))

    # --- Document following -------------------------------------------------

    def follow(self, field: str, as_field: str | None = None) -> FFetch:
        """Fetch and parse the document each entry links to.

        The link in ``field`` is resolved against the index URL. On success
        the parsed document is stored in ``as_field`` (default: ``field``).
        On failure ``as_field`` is None and ``<as_field>_error`` holds a
        message; the entry is still emitted.
        """
        context = self.context
        base_url = self.url

        async def source() -> AsyncIterator[Record]:
            async with _open_transport(context) as transport:
                follower = DocumentFollower(
                    base_url=base_url,
                    context=context,
                    transport=transport,
                    parser=context.html_parser or SoupHTMLParser(),
                    field=field,
                    as_field=as_field,
                )
                async with aclosing(follower.stream(aiter(self))) as records:
                    async for record in records:
                        yield record

        return self._derive(source)


class FFetchMapped(_Pipeline[T]):
    """Lazy stream of transformed elements produced by ``map``."""

    def __init__(self, url: URL, context: FetchContext, source: SourceFactory[T]) -> None:
        super().__init__(url, context, source)

    def _derive(self, source: SourceFactory[T]) -> FFetchMapped[T]:
        return FFetchMapped(self.url, self.context, source)


def ffetch(url: str | URL) -> FFetch:
    """Create an ``FFetch`` pipeline for ``url``.

    Raises:
        InvalidURLError: If ``url`` is malformed or not absolute
    """
    return FFetch(url)
