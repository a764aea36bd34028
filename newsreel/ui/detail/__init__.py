from .article_screen import ArticleDetailScreen

__all__ = ["ArticleDetailScreen"]
