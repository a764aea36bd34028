"""
Article models parsed from NewsAPI responses.

The API speaks camelCase JSON; these dataclasses are the snake_case view
the rest of newsreel works with.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any

from ..config.constants import REMOVED_ARTICLE_TITLE

logger = logging.getLogger(__name__)


def parse_published_at(value: str | None) -> datetime | None:
    """Parse an ISO-8601 timestamp, accepting a trailing ``Z``."""
    if not value:
        return None
    try:
        return datetime.fromisoformat(value.replace("Z", "+00:00"))
    except ValueError:
        logger.debug(f"Unparseable publishedAt value: {value!r}")
        return None


@dataclass
class ArticleSource:
    """Publisher of an article."""

    id: str | None
    name: str

    @classmethod
    def from_dict(cls, data: Any) -> ArticleSource:
        if isinstance(data, str):
            return cls(id=None, name=data or "Unknown")
        if not isinstance(data, dict):
            data = {}
        return cls(id=data.get("id"), name=data.get("name") or "Unknown")


@dataclass
class Article:
    """A single news article."""

    title: str
    url: str
    source: ArticleSource
    author: str | None = None
    description: str | None = None
    content: str | None = None
    url_to_image: str | None = None
    published_at: datetime | None = None

    @property
    def key(self) -> str:
        """Stable identity used by the list widget."""
        return self.url

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Article:
        return cls(
            title=(data.get("title") or "").strip(),
            url=data.get("url") or "",
            source=ArticleSource.from_dict(data.get("source")),
            author=data.get("author"),
            description=data.get("description"),
            content=data.get("content"),
            url_to_image=data.get("urlToImage"),
            published_at=parse_published_at(data.get("publishedAt")),
        )

    def to_dict(self) -> dict[str, Any]:
        """Serialize back to the API's field names."""
        return {
            "source": {"id": self.source.id, "name": self.source.name},
            "author": self.author,
            "title": self.title,
            "description": self.description,
            "url": self.url,
            "urlToImage": self.url_to_image,
            "publishedAt": self.published_at.isoformat() if self.published_at else None,
            "content": self.content,
        }


@dataclass
class NewsResponse:
    """One page (or an accumulated set of pages) of articles."""

    status: str = "ok"
    total_results: int = 0
    articles: list[Article] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> NewsResponse:
        items = data.get("articles")
        if not isinstance(items, list):
            items = []
        articles = [
            Article.from_dict(item)
            for item in items
            if isinstance(item, dict)
            and (item.get("title") or "").strip() != REMOVED_ARTICLE_TITLE
        ]
        return cls(
            status=data.get("status", "ok"),
            total_results=int(data.get("totalResults") or 0),
            articles=articles,
        )
