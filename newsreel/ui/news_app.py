"""
Textual application hosting the news screens.
"""

import logging

from textual.app import App
from textual.binding import Binding

from ..config.constants import SEARCH_NEWS_TIME_DELAY
from ..services.news_service import NewsService
from .news.news_presenter import NewsPresenter
from .news.news_screen import NewsScreen

logger = logging.getLogger(__name__)


class NewsApp(App):
    """Terminal news reader."""

    TITLE = "newsreel"

    BINDINGS = [
        Binding("ctrl+q", "quit", "Quit"),
    ]

    def __init__(self, service: NewsService, search_delay: float = SEARCH_NEWS_TIME_DELAY):
        super().__init__()
        self.service = service
        self.search_delay = search_delay

    def on_mount(self) -> None:
        presenter = NewsPresenter(self.service, page_size=self.service.page_size)
        self.push_screen(NewsScreen(presenter, search_delay=self.search_delay))

    def on_unmount(self) -> None:
        logger.info("Closing news service")
        self.service.close()
