"""Service layer for newsreel."""

from .news_service import NewsService

__all__ = ["NewsService"]
