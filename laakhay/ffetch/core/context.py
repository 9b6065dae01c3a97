"""Immutable fetch configuration shared by every stage of a pipeline.

Architecture:
    ``FetchContext`` is a frozen dataclass. Every configuration call on the
    facade produces a new context through ``dataclasses.replace`` so that
    pipelines forked from a common ancestor never observe each other's
    settings and need no locking.

Design Decisions:
    - Collaborators are optional: None means "use the library default"
    - ``total`` is an optional pre-known entry count; the pagination driver
      keeps the value it learns from the first page locally
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import TYPE_CHECKING

from .cache import CacheConfig

if TYPE_CHECKING:
    from ..io.html import HTMLParser
    from ..io.transport import HTTPTransport

DEFAULT_CHUNK_SIZE = 255
DEFAULT_MAX_CONCURRENCY = 5


@dataclass(frozen=True)
class FetchContext:
    """Configuration snapshot for a pipeline.

    Attributes:
        chunk_size: Entries requested per page
        sheet_name: Optional sheet selector for multi-sheet indexes
        max_concurrency: Upper bound of concurrently running per-entry operations
        cache: Cache directive forwarded to the transport
        allowed_hosts: Hosts document following may contact
        total: Known total entry count, if any
        http_client: Transport override
        html_parser: Parser override
    """

    chunk_size: int = DEFAULT_CHUNK_SIZE
    sheet_name: str | None = None
    max_concurrency: int = DEFAULT_MAX_CONCURRENCY
    cache: CacheConfig = CacheConfig.DEFAULT
    allowed_hosts: frozenset[str] = field(default_factory=frozenset)
    total: int | None = None
    http_client: HTTPTransport | None = None
    html_parser: HTMLParser | None = None

    def __post_init__(self) -> None:
        if self.chunk_size < 1:
            raise ValueError("chunk_size must be >= 1")
        if self.max_concurrency < 1:
            raise ValueError("max_concurrency must be >= 1")

    def evolve(self, **changes) -> FetchContext:
        """Return a copy with ``changes`` applied."""
        return replace(self, **changes)
