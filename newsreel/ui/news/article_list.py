"""
Article list widget.

An OptionList that renders articles as multi-line cards and reports
scrolling so the screen can decide when to load the next page.
"""

import logging
import math
from datetime import datetime, timezone

from rich.markup import escape
from textual import events
from textual.message import Message
from textual.widgets import OptionList
from textual.widgets.option_list import Option

from ...models.articles import Article
from .scroll_state import ListWindow

logger = logging.getLogger(__name__)

TITLE_MAX = 100
DESCRIPTION_MAX = 200


def format_relative_time(published_at: datetime | None, now: datetime | None = None) -> str:
    """Format a timestamp as a short relative age (5m, 3h, 2d, 1w) or a date."""
    if published_at is None:
        return ""
    if published_at.tzinfo is None:
        published_at = published_at.replace(tzinfo=timezone.utc)
    now = now or datetime.now(timezone.utc)
    delta = now - published_at
    if delta.total_seconds() < 0:
        return published_at.strftime("%Y-%m-%d")
    if delta.days == 0:
        hours = delta.seconds // 3600
        return f"{hours}h" if hours > 0 else f"{delta.seconds // 60}m"
    if delta.days < 7:
        return f"{delta.days}d"
    if delta.days < 30:
        return f"{delta.days // 7}w"
    return published_at.strftime("%Y-%m-%d")


def _truncate(text: str, limit: int) -> str:
    return text if len(text) <= limit else text[: limit - 3] + "..."


def format_article_card(article: Article) -> str:
    """Render an article as title, metadata and description lines."""
    title = escape(_truncate(article.title or "(untitled)", TITLE_MAX))
    line1 = f"[bold]{title}[/bold]"

    meta_parts = [f"[cyan]{escape(article.source.name)}[/cyan]"]
    if article.author:
        meta_parts.append(escape(article.author))
    age = format_relative_time(article.published_at)
    if age:
        meta_parts.append(age)
    line2 = f"[dim]{' · '.join(meta_parts)}[/dim]"

    if not article.description:
        return f"{line1}\n{line2}"
    description = " ".join(article.description.split())
    return f"{line1}\n{line2}\n{escape(_truncate(description, DESCRIPTION_MAX))}"


class ArticleList(OptionList):
    """Scrollable list of article cards."""

    class ScrollStarted(Message):
        """The user began scrolling towards the end of the list."""

    class Scrolled(Message):
        """The visible window moved."""

        def __init__(self, window: ListWindow) -> None:
            super().__init__()
            self.window = window

    class ArticleChosen(Message):
        def __init__(self, article: Article) -> None:
            super().__init__()
            self.article = article

    def __init__(self, *args, **kwargs) -> None:
        self._articles: list[Article] = []
        self._index_by_id: dict[str, int] = {}
        super().__init__(*args, **kwargs)

    @property
    def articles(self) -> list[Article]:
        return list(self._articles)

    def submit_list(self, articles: list[Article]) -> None:
        """Replace the items, keeping the highlighted article if it survives."""
        previous_id = None
        if self.highlighted is not None:
            option = self.get_option_at_index(self.highlighted)
            previous_id = option.id

        self._articles = []
        self._index_by_id = {}
        options = []
        for article in articles:
            option_id = article.key or f"article-{len(self._articles)}"
            if option_id in self._index_by_id:
                continue
            self._index_by_id[option_id] = len(self._articles)
            self._articles.append(article)
            options.append(Option(format_article_card(article), id=option_id))

        self.clear_options()
        self.add_options(options)

        if previous_id is not None and previous_id in self._index_by_id:
            self.highlighted = self._index_by_id[previous_id]
        logger.debug(f"Article list now holds {len(self._articles)} items")

    def current_window(self) -> ListWindow:
        """Map the scroll offset onto item positions."""
        total = len(self._articles)
        virtual_height = self.virtual_size.height
        if total == 0 or virtual_height <= 0 or self.max_scroll_y <= 0:
            return ListWindow(first_visible=0, visible_count=total, total_count=total)
        viewport_height = virtual_height - self.max_scroll_y
        first_visible = int(total * self.scroll_y / virtual_height)
        visible_count = math.ceil(total * viewport_height / virtual_height)
        return ListWindow(first_visible, visible_count, total)

    def _report_scroll_start(self) -> None:
        self.post_message(self.ScrollStarted())
        self.post_message(self.Scrolled(self.current_window()))

    def watch_scroll_y(self, old_value: float, new_value: float) -> None:
        super().watch_scroll_y(old_value, new_value)
        self.post_message(self.Scrolled(self.current_window()))

    def on_mouse_scroll_down(self, event: events.MouseScrollDown) -> None:
        self._report_scroll_start()

    def action_cursor_down(self) -> None:
        super().action_cursor_down()
        self._report_scroll_start()

    def action_page_down(self) -> None:
        super().action_page_down()
        self._report_scroll_start()

    def action_last(self) -> None:
        super().action_last()
        self._report_scroll_start()

    def on_option_list_option_selected(self, event: OptionList.OptionSelected) -> None:
        if event.option_list is not self:
            return
        event.stop()
        index = self._index_by_id.get(event.option.id or "")
        if index is not None:
            self.post_message(self.ArticleChosen(self._articles[index]))
