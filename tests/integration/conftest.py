"""Shared fixtures for integration tests."""

import os

import pytest

AEM_INDEX_URL = "https://www.aem.live/docpages-index.json"


@pytest.fixture
def index_url() -> str:
    """Public index served by aem.live."""
    return os.environ.get("FFETCH_INDEX_URL", AEM_INDEX_URL)
