"""Shared fakes for unit tests."""

from __future__ import annotations

import asyncio
import json
from typing import Any

import pytest
from yarl import URL

from laakhay.ffetch.core.cache import CacheConfig
from laakhay.ffetch.io.transport import HTTPResponse
from laakhay.ffetch.runtime.pagination import PagePlan, PagePlanner

BASE_URL = "https://example.com/query-index.json"


class FakeTransport:
    """In-memory transport keyed by full request URL.

    Unknown URLs answer 404.
    """

    def __init__(self) -> None:
        self.routes: dict[str, HTTPResponse | Exception] = {}
        self.delays: dict[str, float] = {}
        self.requests: list[URL] = []
        self.caches: list[CacheConfig] = []

    def add(self, url: str | URL, body: bytes | str, status: int = 200) -> None:
        if isinstance(body, str):
            body = body.encode()
        self.routes[str(url)] = HTTPResponse(body=body, status=status)

    def add_json(self, url: str | URL, payload: Any, status: int = 200) -> None:
        self.add(url, json.dumps(payload), status=status)

    def add_error(self, url: str | URL, error: Exception) -> None:
        self.routes[str(url)] = error

    def add_index(
        self,
        entries: list[dict[str, Any]],
        *,
        chunk_size: int,
        url: str = BASE_URL,
        sheet: str | None = None,
    ) -> list[URL]:
        """Register every page of an index and return the page URLs."""
        pages = []
        offset = 0
        index = 0
        while True:
            plan = PagePlan(offset=offset, limit=chunk_size, sheet=sheet, page_index=index)
            page_url = PagePlanner.build_url(URL(url), plan)
            self.add_json(
                page_url,
                {
                    "total": len(entries),
                    "offset": offset,
                    "limit": chunk_size,
                    "data": entries[offset : offset + chunk_size],
                },
            )
            pages.append(page_url)
            offset += chunk_size
            index += 1
            if offset >= len(entries):
                return pages

    def page_url(
        self, offset: int, limit: int, url: str = BASE_URL, sheet: str | None = None
    ) -> URL:
        return PagePlanner.build_url(URL(url), PagePlan(offset=offset, limit=limit, sheet=sheet))

    def requested(self) -> list[str]:
        return [str(u) for u in self.requests]

    async def fetch(self, url: URL, cache: CacheConfig) -> HTTPResponse:
        self.requests.append(url)
        self.caches.append(cache)
        key = str(url)
        if key in self.delays:
            await asyncio.sleep(self.delays[key])
        route = self.routes.get(key)
        if route is None:
            return HTTPResponse(body=b"Not Found", status=404)
        if isinstance(route, Exception):
            raise route
        return route


class FakeParser:
    """Parser that records what it was given."""

    def __init__(self, fail_on: bytes | None = None) -> None:
        self.fail_on = fail_on
        self.calls: list[bytes] = []

    def parse(self, html: bytes) -> dict[str, str]:
        self.calls.append(html)
        if self.fail_on is not None and html == self.fail_on:
            raise ValueError("unparseable markup")
        return {"html": html.decode()}


def _make_entries(count: int, **extra: Any) -> list[dict[str, Any]]:
    return [{"title": f"Entry {i}", "path": f"/doc-{i}", **extra} for i in range(count)]


@pytest.fixture
def transport() -> FakeTransport:
    return FakeTransport()


@pytest.fixture
def parser() -> FakeParser:
    return FakeParser()


@pytest.fixture
def make_entries():
    return _make_entries
