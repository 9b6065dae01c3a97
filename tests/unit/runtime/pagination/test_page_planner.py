"""Unit tests for PagePlanner and PagePlan."""

import pytest
from yarl import URL

from laakhay.ffetch.runtime.pagination import PagePlan, PagePlanner


class TestPagePlan:
    """Test per-page query parameters."""

    def test_query_without_sheet(self):
        plan = PagePlan(offset=20, limit=10)
        assert plan.query() == {"offset": "20", "limit": "10"}

    def test_query_with_sheet(self):
        plan = PagePlan(offset=0, limit=255, sheet="products")
        assert plan.query() == {"offset": "0", "limit": "255", "sheet": "products"}


class TestPagePlanner:
    """Test offset planning."""

    def test_first_plan(self):
        planner = PagePlanner(10, sheet="blog")
        plan = planner.first()
        assert plan == PagePlan(offset=0, limit=10, sheet="blog", page_index=0)

    def test_next_plan_advances_by_chunk(self):
        planner = PagePlanner(10)
        plan = planner.next(planner.first(), total=25)
        assert plan == PagePlan(offset=10, limit=10, page_index=1)

    def test_offsets_for_total(self):
        """Total 25, chunk 10 plans offsets 0, 10, 20."""
        planner = PagePlanner(10)
        plan = planner.first()
        offsets = []
        while plan is not None:
            offsets.append(plan.offset)
            plan = planner.next(plan, total=25)
        assert offsets == [0, 10, 20]

    def test_exact_multiple_stops_at_total(self):
        planner = PagePlanner(10)
        assert planner.next(PagePlan(offset=10, limit=10), total=20) is None

    def test_zero_total_stops_after_first(self):
        planner = PagePlanner(10)
        assert planner.next(planner.first(), total=0) is None

    def test_rejects_zero_chunk(self):
        with pytest.raises(ValueError):
            PagePlanner(0)


class TestBuildURL:
    """Test query merging."""

    def test_adds_pagination_params(self):
        url = PagePlanner.build_url(URL("https://example.com/idx.json"), PagePlan(0, 255))
        assert url.query["offset"] == "0"
        assert url.query["limit"] == "255"
        assert "sheet" not in url.query

    def test_keeps_existing_params(self):
        base = URL("https://example.com/idx.json?lang=en")
        url = PagePlanner.build_url(base, PagePlan(10, 5, sheet="news"))
        assert url.query["lang"] == "en"
        assert url.query["offset"] == "10"
        assert url.query["limit"] == "5"
        assert url.query["sheet"] == "news"

    def test_overrides_same_named_params(self):
        base = URL("https://example.com/idx.json?offset=99")
        url = PagePlanner.build_url(base, PagePlan(0, 5))
        assert url.query.getall("offset") == ["0"]
