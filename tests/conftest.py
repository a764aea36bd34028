"""Shared pytest fixtures for newsreel tests."""

from unittest.mock import MagicMock

import pytest

from factories import make_page
from newsreel.services.news_service import NewsService

TOTAL_RESULTS = 45


@pytest.fixture
def fake_service():
    """A NewsService stand-in serving 20-article pages out of 45 results."""
    service = MagicMock(spec=NewsService)
    service.page_size = 20

    def fetch(query, page):
        start = (page - 1) * 20
        count = max(0, min(20, TOTAL_RESULTS - start))
        return make_page(start, count, total_results=TOTAL_RESULTS)

    service.fetch_articles.side_effect = fetch
    return service
