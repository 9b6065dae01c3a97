"""Runtime: pagination, stream operators, batching and document following."""

from .batching import run_batched
from .follow import DocumentFollower, resolve_document_url
from .pagination import PagePlan, PagePlanner, PaginationDriver, PaginationStats, decode_page
from .stream import filter_stream, limit_stream, map_stream, skip_stream, slice_stream

__all__ = [
    "DocumentFollower",
    "PagePlan",
    "PagePlanner",
    "PaginationDriver",
    "PaginationStats",
    "decode_page",
    "filter_stream",
    "limit_stream",
    "map_stream",
    "resolve_document_url",
    "run_batched",
    "skip_stream",
    "slice_stream",
]
