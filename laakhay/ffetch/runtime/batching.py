"""Bounded-concurrency, order-preserving execution of per-entry operations.

Architecture:
    ``run_batched`` pulls entries from an upstream async iterator and starts
    one task per entry. Once ``max_concurrency`` tasks are in flight (or the
    upstream is exhausted) it awaits the whole batch in submission order,
    yielding each result as soon as it and all earlier ones are done. The
    next batch starts only after the current one is drained.

Design Decisions:
    - Batched synchronization, not a sliding window: throughput is bounded
      by the slowest operation of each batch
    - Output order always equals input order
    - A failing operation drops its entry; it never aborts the batch
    - Closing the iterator cancels every task still in flight
    - An upstream error surfaces only after the entries already pulled
      have been delivered
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import AsyncIterator, Awaitable, Callable
from contextlib import aclosing
from typing import TypeVar

T = TypeVar("T")
R = TypeVar("R")

logger = logging.getLogger(__name__)


async def run_batched(
    source: AsyncIterator[T],
    operation: Callable[[T], Awaitable[R]],
    *,
    max_concurrency: int,
) -> AsyncIterator[R]:
    """Apply ``operation`` to every entry of ``source`` with bounded concurrency.

    Args:
        source: Upstream entries
        operation: Async per-entry operation
        max_concurrency: Batch size, i.e. the maximum number of running tasks

    Yields:
        Results in submission order. Entries whose operation raised are skipped.
    """
    if max_concurrency < 1:
        raise ValueError("max_concurrency must be >= 1")

    pending: list[asyncio.Task[R]] = []
    try:
        async with aclosing(source) as entries:
            exhausted = False
            upstream_error: Exception | None = None
            while not exhausted:
                while len(pending) < max_concurrency:
                    try:
                        entry = await anext(entries)
                    except StopAsyncIteration:
                        exhausted = True
                        break
                    except Exception as e:
                        # Entries already pulled are still delivered before the error.
                        upstream_error = e
                        exhausted = True
                        break
                    pending.append(asyncio.ensure_future(operation(entry)))

                while pending:
                    task = pending.pop(0)
                    try:
                        result = await task
                    except Exception as e:
                        logger.debug(
                            "batch_item_failed",
                            extra={"error_type": type(e).__name__, "error_message": str(e)},
                        )
                        continue
                    yield result

            if upstream_error is not None:
                raise upstream_error
    finally:
        for task in pending:
            task.cancel()
        if pending:
            await asyncio.gather(*pending, return_exceptions=True)
