"""Data models for newsreel."""

from .articles import Article, ArticleSource, NewsResponse
from .resource import Resource, ResourceStatus

__all__ = [
    "Article",
    "ArticleSource",
    "NewsResponse",
    "Resource",
    "ResourceStatus",
]
