"""Tests for the ArticleDetailScreen modal."""

from __future__ import annotations

from unittest.mock import patch

import pytest
from textual.app import App
from textual.widgets import Label

from factories import make_article
from newsreel.ui.detail.article_screen import ArticleDetailScreen


class DetailTestApp(App[None]):
    def __init__(self, screen: ArticleDetailScreen):
        super().__init__()
        self._detail = screen

    def on_mount(self) -> None:
        self.push_screen(self._detail)


class TestArticleDetailScreen:
    @pytest.mark.asyncio
    async def test_shows_article(self) -> None:
        detail = ArticleDetailScreen(make_article(3))
        async with DetailTestApp(detail).run_test(size=(100, 40)) as pilot:
            await pilot.pause()
            assert pilot.app.screen is detail
            assert detail.query("#detail-description")
            assert detail.query("#detail-content")
            assert "Headline 3" in detail.article.title
            detail.query_one("#detail-title", Label)

    @pytest.mark.asyncio
    async def test_open_in_browser(self) -> None:
        detail = ArticleDetailScreen(make_article(3))
        async with DetailTestApp(detail).run_test(size=(100, 40)) as pilot:
            await pilot.pause()
            with patch("newsreel.ui.detail.article_screen.webbrowser.open") as mock_open:
                await pilot.press("o")
                await pilot.pause()

            mock_open.assert_called_once_with("https://example.com/news/3")

    @pytest.mark.asyncio
    async def test_missing_url_does_not_open(self) -> None:
        detail = ArticleDetailScreen(make_article(3, url=""))
        async with DetailTestApp(detail).run_test(size=(100, 40)) as pilot:
            await pilot.pause()
            with patch("newsreel.ui.detail.article_screen.webbrowser.open") as mock_open:
                await pilot.press("o")
                await pilot.pause()

            mock_open.assert_not_called()

    @pytest.mark.asyncio
    async def test_escape_closes(self) -> None:
        detail = ArticleDetailScreen(make_article(3), is_saved=True)
        async with DetailTestApp(detail).run_test(size=(100, 40)) as pilot:
            await pilot.pause()
            await pilot.press("escape")
            await pilot.pause()

            assert pilot.app.screen is not detail

    @pytest.mark.asyncio
    async def test_optional_sections_are_omitted(self) -> None:
        detail = ArticleDetailScreen(make_article(3, description=None, content=None))
        async with DetailTestApp(detail).run_test(size=(100, 40)) as pilot:
            await pilot.pause()
            assert not detail.query("#detail-description")
            assert not detail.query("#detail-content")
