from newsfeed.transport.base import ArticleTransport, TransportError
from newsfeed.transport.http import HttpArticleTransport
from newsfeed.transport.static import SAMPLE_ARTICLES, StaticArticleTransport

__all__ = [
    "ArticleTransport",
    "HttpArticleTransport",
    "SAMPLE_ARTICLES",
    "StaticArticleTransport",
    "TransportError",
]
