"""Data models for the news feed."""

from newsfeed.data.models import NewsArticle, NewsPage, RawArticle

__all__ = [
    "NewsArticle",
    "NewsPage",
    "RawArticle",
]
