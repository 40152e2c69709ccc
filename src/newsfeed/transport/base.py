from typing import Protocol

from newsfeed.data import NewsPage


class TransportError(Exception):
    """A page request failed: network error, bad status, or malformed body."""


class ArticleTransport(Protocol):
    """Interface for fetching pages of raw articles."""

    async def browse(self, *, cursor: str | None, page_size: int) -> NewsPage:
        """Fetch one page of the latest articles.

        Args:
            cursor: Continuation token from the previous page, or None for page one.
            page_size: Number of articles to request.

        Returns:
            The requested page.

        Raises:
            TransportError: If the request fails for any reason.
        """
        ...

    async def search(self, query: str, *, page_size: int) -> NewsPage:
        """Fetch a single page of articles matching a keyword query.

        Args:
            query: Search keywords.
            page_size: Number of articles to request.

        Returns:
            The matching page.

        Raises:
            TransportError: If the request fails for any reason.
        """
        ...
