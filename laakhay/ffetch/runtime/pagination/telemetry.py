"""Structured logging for pagination runs."""

from __future__ import annotations

import logging

from .definitions import PagePlan, PaginationStats

logger = logging.getLogger(__name__)


def log_page_fetched(
    *,
    url: str,
    plan: PagePlan,
    entries: int,
    total: int | None,
    latency_ms: float | None = None,
) -> None:
    """Log a successfully decoded page.

    Args:
        url: Request URL of the page
        plan: Plan the page was fetched for
        entries: Number of entries in the page
        total: Total known after this page
        latency_ms: Request latency in milliseconds (optional)
    """
    logger.debug(
        "page_fetched",
        extra={
            "url": url,
            "page_index": plan.page_index,
            "offset": plan.offset,
            "limit": plan.limit,
            "entries": entries,
            "total": total,
            "latency_ms": latency_ms,
        },
    )


def log_page_not_found(*, url: str, plan: PagePlan) -> None:
    """Log a 404 page, which ends pagination without error."""
    logger.info(
        "page_not_found",
        extra={"url": url, "page_index": plan.page_index, "offset": plan.offset},
    )


def log_page_error(
    *,
    url: str,
    plan: PagePlan,
    error_type: str,
    error_message: str,
) -> None:
    """Log a page failure that aborts the run.

    Args:
        url: Request URL of the page
        plan: Plan the page was fetched for
        error_type: Exception class name
        error_message: Exception message
    """
    logger.error(
        "page_error",
        extra={
            "url": url,
            "page_index": plan.page_index,
            "offset": plan.offset,
            "error_type": error_type,
            "error_message": error_message,
        },
    )


def log_pagination_complete(*, url: str, stats: PaginationStats) -> None:
    """Log the end of a pagination run."""
    logger.info(
        "pagination_complete",
        extra={
            "url": url,
            "pages_fetched": stats.pages_fetched,
            "entries_emitted": stats.entries_emitted,
            "total": stats.total,
            "stopped_by_not_found": stats.stopped_by_not_found,
        },
    )
