"""Lazy, pull-based stream operators.

Each operator wraps an upstream async iterator and is itself an async
generator, so operators chain freely. Upstreams are closed with
``contextlib.aclosing`` as soon as an operator stops pulling, which stops
pagination and cancels in-flight batch work.
"""

from __future__ import annotations

import logging
from collections.abc import AsyncIterator
from contextlib import aclosing
from typing import TypeVar

from ..utils import MaybeAsync, call_maybe_async
from .batching import run_batched

T = TypeVar("T")
R = TypeVar("R")

logger = logging.getLogger(__name__)


async def filter_stream(
    source: AsyncIterator[T],
    predicate: MaybeAsync[bool],
) -> AsyncIterator[T]:
    """Yield entries for which ``predicate`` is true.

    An entry whose predicate raises is dropped.
    """
    async with aclosing(source) as entries:
        async for entry in entries:
            try:
                keep = await call_maybe_async(predicate, entry)
            except Exception as e:
                logger.debug(
                    "filter_predicate_failed",
                    extra={"error_type": type(e).__name__, "error_message": str(e)},
                )
                continue
            if keep:
                yield entry


async def limit_stream(source: AsyncIterator[T], count: int) -> AsyncIterator[T]:
    """Yield at most ``count`` entries, then close the upstream."""
    async with aclosing(source) as entries:
        if count <= 0:
            return
        yielded = 0
        async for entry in entries:
            yield entry
            yielded += 1
            if yielded >= count:
                return


async def skip_stream(source: AsyncIterator[T], count: int) -> AsyncIterator[T]:
    """Discard the first ``count`` entries and yield the rest."""
    skipped = 0
    async with aclosing(source) as entries:
        async for entry in entries:
            if skipped < count:
                skipped += 1
                continue
            yield entry


def slice_stream(source: AsyncIterator[T], start: int, end: int) -> AsyncIterator[T]:
    """Entries ``start`` (inclusive) to ``end`` (exclusive)."""
    return limit_stream(skip_stream(source, start), end - start)


def map_stream(
    source: AsyncIterator[T],
    transform: MaybeAsync[R],
    *,
    max_concurrency: int,
) -> AsyncIterator[R]:
    """Transform entries concurrently, preserving order.

    Entries whose transform raises are dropped from the output.
    """

    async def apply(entry: T) -> R:
        return await call_maybe_async(transform, entry)

    return run_batched(source, apply, max_concurrency=max_concurrency)

