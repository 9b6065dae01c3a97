"""Pagination plan structures."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class PagePlan:
    """Plan for a single page request.

    Attributes:
        offset: Index of the first entry requested
        limit: Number of entries requested (the chunk size)
        sheet: Optional sheet selector
        page_index: Zero-based index of this page in the run
    """

    offset: int
    limit: int
    sheet: str | None = None
    page_index: int = 0

    def query(self) -> dict[str, str]:
        """Query parameters for this page."""
        params = {"offset": str(self.offset), "limit": str(self.limit)}
        if self.sheet is not None:
            params["sheet"] = self.sheet
        return params


@dataclass
class PaginationStats:
    """Counters accumulated over one pagination run.

    Attributes:
        pages_fetched: Pages that returned a decodable envelope
        entries_emitted: Entries yielded downstream
        total: Total learned from the first page (or preset)
        stopped_by_not_found: Whether a 404 ended the run
    """

    pages_fetched: int = 0
    entries_emitted: int = 0
    total: int | None = None
    stopped_by_not_found: bool = False
