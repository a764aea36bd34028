"""
News Screen - paginated, searchable article list.

Features:
- Search bar with debounced queries
- Next page loads when the list is scrolled to the end
- Loading indicator while a fetch is in flight
- Enter opens the article detail screen
"""

import logging
from collections.abc import Awaitable

from textual.app import ComposeResult
from textual.binding import Binding
from textual.containers import Horizontal
from textual.screen import Screen
from textual.timer import Timer
from textual.widgets import Button, Footer, Input, LoadingIndicator, Static

from ...config.constants import DEFAULT_TOPIC, SEARCH_NEWS_TIME_DELAY
from ...models.articles import NewsResponse
from ...models.resource import Resource, ResourceStatus
from ..detail.article_screen import ArticleDetailScreen
from .article_list import ArticleList
from .news_presenter import NewsPresenter
from .scroll_state import PaginationState

logger = logging.getLogger(__name__)


class NewsScreen(Screen):
    """
    Article list with a persistent search bar.

    Layout:
    - Search input and clear button at top
    - Loading indicator (only while fetching)
    - Scrollable list of article cards
    - Status line and footer
    """

    BINDINGS = [
        Binding("slash", "focus_search", "Search"),
        Binding("ctrl+l", "clear_search", "Clear"),
        Binding("escape", "focus_list", "List", show=False),
    ]

    DEFAULT_CSS = """
    NewsScreen {
        layout: vertical;
    }

    #search-bar {
        height: 3;
        padding: 0 1;
        background: $surface;
    }

    #search-input {
        width: 1fr;
    }

    #clear-search {
        min-width: 9;
        margin-left: 1;
    }

    #news-loading {
        height: 1;
    }

    #article-list {
        height: 1fr;
        scrollbar-gutter: stable;
    }

    #article-list > .option-list--option {
        padding: 0 1 1 1;
    }

    #news-status {
        height: 1;
        background: $surface-darken-1;
        padding: 0 1;
    }
    """

    def __init__(
        self,
        presenter: NewsPresenter,
        search_delay: float = SEARCH_NEWS_TIME_DELAY,
        **kwargs,
    ) -> None:
        super().__init__(**kwargs)
        self.presenter = presenter
        self.presenter.on_state_update = self._on_state_update
        self.search_delay = search_delay
        self.pagination = PaginationState(page_size=presenter.page_size)
        self._debounce_timer: Timer | None = None
        self.status_text = ""

    def compose(self) -> ComposeResult:
        with Horizontal(id="search-bar"):
            yield Input(placeholder="Search news...", id="search-input")
            yield Button("Clear", id="clear-search")
        yield LoadingIndicator(id="news-loading")
        yield ArticleList(id="article-list")
        yield Static("", id="news-status")
        yield Footer()

    def on_mount(self) -> None:
        logger.info("NewsScreen mounted")
        self._hide_progress()
        self.query_one("#article-list", ArticleList).focus()
        self.run_worker(self._safe_fetch(self.presenter.get_all_articles(DEFAULT_TOPIC)))

    def on_unmount(self) -> None:
        self._cancel_pending_search()
        self.pagination.reset()

    @property
    def search_text(self) -> str:
        return self.query_one("#search-input", Input).value

    # -- search ---------------------------------------------------------

    def _cancel_pending_search(self) -> None:
        if self._debounce_timer is not None:
            self._debounce_timer.stop()
            self._debounce_timer = None

    def on_input_changed(self, event: Input.Changed) -> None:
        """Restart the debounce timer on every keystroke."""
        if event.input.id != "search-input":
            return

        query = event.value
        self._cancel_pending_search()

        def do_search() -> None:
            self._debounce_timer = None
            self.presenter.reset_state()
            if query:
                self.run_worker(self._safe_fetch(self.presenter.get_all_new_articles(query)))
            else:
                self.run_worker(self._safe_fetch(self.presenter.get_all_articles(DEFAULT_TOPIC)))

        self._debounce_timer = self.set_timer(self.search_delay, do_search)

    def on_input_submitted(self, event: Input.Submitted) -> None:
        if event.input.id == "search-input":
            self.action_focus_list()

    def on_button_pressed(self, event: Button.Pressed) -> None:
        if event.button.id == "clear-search":
            self.action_clear_search()

    def action_clear_search(self) -> None:
        """Empty the search field and go back to the default topic."""
        search_input = self.query_one("#search-input", Input)
        with search_input.prevent(Input.Changed):
            search_input.value = ""
        self._cancel_pending_search()
        self.presenter.reset_state()
        self.run_worker(self._safe_fetch(self.presenter.get_all_articles(DEFAULT_TOPIC)))

    def action_focus_search(self) -> None:
        self.query_one("#search-input", Input).focus()

    def action_focus_list(self) -> None:
        self.query_one("#article-list", ArticleList).focus()

    # -- state ----------------------------------------------------------

    async def _safe_fetch(self, fetch: Awaitable[None]) -> None:
        """Run a presenter fetch with error handling."""
        try:
            await fetch
        except Exception as e:
            logger.error(f"Data can't be loaded -> {e}", exc_info=True)
            self._hide_progress()

    async def _on_state_update(self, response: Resource[NewsResponse]) -> None:
        if response.status is ResourceStatus.SUCCESS:
            self._hide_progress()
            if response.data is not None:
                self._show_articles(response.data)
        elif response.status is ResourceStatus.ERROR:
            self._hide_progress()
            if response.message:
                logger.error(f"Data can't be loaded -> {response.message}")
        elif response.status is ResourceStatus.LOADING:
            self._show_progress()

    def _show_articles(self, news: NewsResponse) -> None:
        self.query_one("#article-list", ArticleList).submit_list(news.articles)
        self.pagination.is_last_page = self.presenter.is_last_page(news.total_results)

        status = f"{len(news.articles)} of {news.total_results} articles"
        if self.pagination.is_last_page:
            status += " | end of results"
        self.status_text = status
        self.query_one("#news-status", Static).update(status)

    def _show_progress(self) -> None:
        self.query_one("#news-loading", LoadingIndicator).display = True
        self.pagination.is_loading = True

    def _hide_progress(self) -> None:
        self.query_one("#news-loading", LoadingIndicator).display = False
        self.pagination.is_loading = False

    # -- pagination -----------------------------------------------------

    def on_article_list_scroll_started(self, event: ArticleList.ScrollStarted) -> None:
        self.pagination.is_scrolling = True

    def on_article_list_scrolled(self, event: ArticleList.Scrolled) -> None:
        if not self.pagination.should_paginate(event.window):
            return
        topic = self.search_text or DEFAULT_TOPIC
        logger.debug(f"Paginating q={topic!r} page={self.presenter.page}")
        self.run_worker(self._safe_fetch(self.presenter.get_all_articles(topic)))
        self.pagination.is_scrolling = False

    # -- navigation -----------------------------------------------------

    def on_article_list_article_chosen(self, event: ArticleList.ArticleChosen) -> None:
        self.app.push_screen(ArticleDetailScreen(event.article, is_saved=False))
