"""Offset planning for paginated index requests."""

from __future__ import annotations

from yarl import URL

from .definitions import PagePlan


class PagePlanner:
    """Plans successive offset windows for an index.

    The planner only knows the chunk size and sheet; the total is supplied by
    the driver once the first page has been read.
    """

    def __init__(self, chunk_size: int, sheet: str | None = None) -> None:
        if chunk_size < 1:
            raise ValueError("chunk_size must be >= 1")
        self._chunk_size = chunk_size
        self._sheet = sheet

    def first(self) -> PagePlan:
        """Plan for the page at offset 0."""
        return PagePlan(offset=0, limit=self._chunk_size, sheet=self._sheet, page_index=0)

    def next(self, plan: PagePlan, total: int) -> PagePlan | None:
        """Plan for the page after ``plan``.

        Args:
            plan: Page that was just fetched
            total: Authoritative total entry count

        Returns:
            The next plan, or None when ``plan`` reached the end of the index
        """
        if plan.offset + plan.limit >= total:
            return None
        return PagePlan(
            offset=plan.offset + plan.limit,
            limit=plan.limit,
            sheet=plan.sheet,
            page_index=plan.page_index + 1,
        )

    @staticmethod
    def build_url(base: URL, plan: PagePlan) -> URL:
        """Merge the plan's query parameters into ``base``.

        Existing parameters on the base URL are kept; ``offset``, ``limit`` and
        ``sheet`` replace any same-named ones.
        """
        return base.update_query(plan.query())
