"""
News Screen - Paginated, searchable article list.

Provides:
- NewsScreen: Screen with debounced search and infinite scroll
- NewsPresenter: Fetch state for the screen
"""

from .news_presenter import NewsPresenter
from .news_screen import NewsScreen

__all__ = [
    "NewsPresenter",
    "NewsScreen",
]
