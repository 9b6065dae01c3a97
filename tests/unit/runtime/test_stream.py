"""Unit tests for lazy stream operators."""

import asyncio

import pytest

from laakhay.ffetch.runtime import (
    filter_stream,
    limit_stream,
    map_stream,
    skip_stream,
    slice_stream,
)


class Source:
    """Async source that records how far it was pulled."""

    def __init__(self, items):
        self.items = list(items)
        self.pulled = 0
        self.closed = False

    async def __call__(self):
        try:
            for item in self.items:
                self.pulled += 1
                yield item
        finally:
            self.closed = True


async def collect(stream):
    return [item async for item in stream]


class TestFilterStream:
    """Test filter_stream."""

    @pytest.mark.asyncio
    async def test_sync_predicate(self):
        result = await collect(filter_stream(Source(range(10))(), lambda x: x % 3 == 0))
        assert result == [0, 3, 6, 9]

    @pytest.mark.asyncio
    async def test_async_predicate(self):
        async def is_even(x):
            await asyncio.sleep(0)
            return x % 2 == 0

        assert await collect(filter_stream(Source(range(5))(), is_even)) == [0, 2, 4]

    @pytest.mark.asyncio
    async def test_raising_predicate_drops_entry(self):
        def predicate(entry):
            return entry["keep"]

        entries = [{"keep": True, "id": 1}, {"id": 2}, {"keep": True, "id": 3}]
        result = await collect(filter_stream(Source(entries)(), predicate))
        assert [e["id"] for e in result] == [1, 3]


class TestLimitStream:
    """Test limit_stream."""

    @pytest.mark.asyncio
    async def test_limits_and_stops_pulling(self):
        source = Source(range(100))
        assert await collect(limit_stream(source(), 3)) == [0, 1, 2]
        assert source.pulled == 3
        assert source.closed

    @pytest.mark.asyncio
    async def test_zero_pulls_nothing(self):
        source = Source(range(5))
        assert await collect(limit_stream(source(), 0)) == []
        assert source.pulled == 0

    @pytest.mark.asyncio
    async def test_negative_is_empty(self):
        assert await collect(limit_stream(Source(range(5))(), -1)) == []

    @pytest.mark.asyncio
    async def test_larger_than_source(self):
        assert await collect(limit_stream(Source(range(3))(), 10)) == [0, 1, 2]


class TestSkipStream:
    """Test skip_stream."""

    @pytest.mark.asyncio
    async def test_skips(self):
        assert await collect(skip_stream(Source(range(5))(), 2)) == [2, 3, 4]

    @pytest.mark.asyncio
    async def test_skip_past_end(self):
        assert await collect(skip_stream(Source(range(3))(), 5)) == []

    @pytest.mark.asyncio
    async def test_skip_zero(self):
        assert await collect(skip_stream(Source(range(3))(), 0)) == [0, 1, 2]


class TestSliceStream:
    """Test slice_stream."""

    @pytest.mark.asyncio
    async def test_slice(self):
        assert await collect(slice_stream(Source(range(10))(), 2, 5)) == [2, 3, 4]

    @pytest.mark.asyncio
    async def test_empty_slice(self):
        assert await collect(slice_stream(Source(range(10))(), 4, 4)) == []

    @pytest.mark.asyncio
    async def test_inverted_slice(self):
        assert await collect(slice_stream(Source(range(10))(), 5, 2)) == []

    @pytest.mark.asyncio
    async def test_slice_stops_pulling(self):
        source = Source(range(100))
        await collect(slice_stream(source(), 1, 3))
        assert source.pulled == 3


class TestMapStream:
    """Test map_stream."""

    @pytest.mark.asyncio
    async def test_sync_transform(self):
        result = await collect(map_stream(Source(range(4))(), lambda x: x * x, max_concurrency=2))
        assert result == [0, 1, 4, 9]

    @pytest.mark.asyncio
    async def test_async_transform_keeps_order(self):
        async def slow_first(x):
            await asyncio.sleep(0.02 if x == 0 else 0)
            return str(x)

        result = await collect(map_stream(Source(range(5))(), slow_first, max_concurrency=5))
        assert result == ["0", "1", "2", "3", "4"]

    @pytest.mark.asyncio
    async def test_failing_transform_drops_entry(self):
        def invert(x):
            return 1 / x

        result = await collect(map_stream(Source([1, 0, 2])(), invert, max_concurrency=3))
        assert result == [1.0, 0.5]
