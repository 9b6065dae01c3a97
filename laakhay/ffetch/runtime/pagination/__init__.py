"""Offset pagination over content-index endpoints.

Architecture:
    - definitions.py: Page plans and run statistics
    - planners.py: Offset planning and request URL construction
    - executors.py: Sequential page fetching and entry streaming
    - telemetry.py: Structured logging
"""

from __future__ import annotations

from .definitions import PagePlan, PaginationStats
from .executors import PaginationDriver, decode_page
from .planners import PagePlanner

__all__ = [
    "PagePlan",
    "PagePlanner",
    "PaginationDriver",
    "PaginationStats",
    "decode_page",
]
