"""newsfeed: paginated news feed state with search and in-memory bookmarks."""

from newsfeed.config import NewsFeedConfig, create_from_config, load_config
from newsfeed.controller import FeedController
from newsfeed.data import NewsArticle, NewsPage, RawArticle
from newsfeed.display import format_published_at
from newsfeed.fetch_logger import FetchLogger
from newsfeed.normalizer import normalize_article, normalize_page
from newsfeed.observable import Observable
from newsfeed.transport import (
    SAMPLE_ARTICLES,
    ArticleTransport,
    HttpArticleTransport,
    StaticArticleTransport,
    TransportError,
)

__all__ = [
    # Models
    "NewsArticle",
    "NewsPage",
    "RawArticle",
    # Functions
    "format_published_at",
    "normalize_article",
    "normalize_page",
    # Protocols
    "ArticleTransport",
    # Transports
    "HttpArticleTransport",
    "SAMPLE_ARTICLES",
    "StaticArticleTransport",
    "TransportError",
    # State
    "FeedController",
    "Observable",
    # Logging
    "FetchLogger",
    # Config
    "NewsFeedConfig",
    "create_from_config",
    "load_config",
]
