"""
Article detail modal.
"""

import logging
import webbrowser

from rich.markup import escape
from textual.app import ComposeResult
from textual.binding import Binding
from textual.containers import Vertical, VerticalScroll
from textual.screen import ModalScreen
from textual.widgets import Label, Static

from ...models.articles import Article

logger = logging.getLogger(__name__)


class ArticleDetailScreen(ModalScreen):
    """Full view of a single article."""

    CSS = """
    ArticleDetailScreen {
        align: center middle;
    }

    #detail-dialog {
        width: 90%;
        height: 85%;
        border: thick $background 80%;
        background: $surface;
        padding: 1 2;
    }

    #detail-title {
        text-style: bold;
        margin-bottom: 1;
    }

    #detail-meta {
        color: $text-muted;
        margin-bottom: 1;
    }

    #detail-body {
        height: 1fr;
    }

    #detail-url {
        height: 1;
        color: $text-muted;
    }
    """

    BINDINGS = [
        Binding("o", "open_in_browser", "Open"),
        Binding("escape", "close", "Back"),
        Binding("q", "close", "Back", show=False),
    ]

    def __init__(self, article: Article, is_saved: bool = False):
        super().__init__()
        self.article = article
        self.is_saved = is_saved

    def compose(self) -> ComposeResult:
        article = self.article
        with Vertical(id="detail-dialog"):
            title = escape(article.title or "(untitled)")
            if self.is_saved:
                title += "  [green]\\[saved][/green]"
            yield Label(title, id="detail-title")
            yield Label(self._format_meta(), id="detail-meta")
            with VerticalScroll(id="detail-body"):
                if article.description:
                    yield Static(escape(article.description), id="detail-description")
                if article.content:
                    yield Static(escape(article.content), id="detail-content")
            yield Label(
                f"{escape(article.url)}  [dim]o[/dim] open · [dim]esc[/dim] back",
                id="detail-url",
            )

    def _format_meta(self) -> str:
        parts = [self.article.source.name]
        if self.article.author:
            parts.append(self.article.author)
        if self.article.published_at:
            parts.append(self.article.published_at.strftime("%Y-%m-%d %H:%M"))
        return escape(" · ".join(parts))

    def action_open_in_browser(self) -> None:
        if not self.article.url:
            self.notify("Article has no URL", severity="warning", timeout=2)
            return
        logger.info(f"Opening {self.article.url}")
        webbrowser.open(self.article.url)

    def action_close(self) -> None:
        self.dismiss()
