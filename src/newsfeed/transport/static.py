"""In-memory transport serving a fixed list of articles.

Useful for offline runs and demos where the daily API quota matters.
"""

from newsfeed.data import NewsPage, RawArticle
from newsfeed.transport.base import TransportError

SAMPLE_ARTICLES: tuple[RawArticle, ...] = (
    RawArticle(
        id="1",
        title="Breaking News: Kotlin Takes Over",
        source_name="Tech Daily",
        published_at="2025-03-20T09:15:00",
        media_url="https://images.unsplash.com/photo-1728044849248-e90f3ec6a889",
        description="Developers around the world are switching to Kotlin for Android development.",
    ),
    RawArticle(
        id="2",
        title="AI Revolution in 2025 is transforming industries",
        source_name="AI News",
        published_at="2025-03-19T14:30:00",
        media_url="https://images.unsplash.com/photo-1742147550712-9c25dc0832aa",
        description="Artificial Intelligence is transforming industries faster than expected.",
    ),
    RawArticle(
        id="3",
        title="SpaceX Launches New Rocket",
        source_name="Space Journal",
        published_at="2025-03-18T06:00:00",
        media_url="https://images.unsplash.com/photo-1742144897659-8a3e8a0a090c",
        description="Elon Musk's company successfully launches a reusable rocket.",
    ),
    RawArticle(
        id="4",
        title="No Image News Sample from the world",
        source_name="News TV",
        published_at="2025-01-01T00:00:00",
        media_url=None,
        description="",
    ),
)


class StaticArticleTransport:
    """Serve pages out of an in-memory article list.

    Browse cursors are decimal offsets into the list. Search matches the
    query case-insensitively against title and description.

    Args:
        articles: Articles to serve (defaults to ``SAMPLE_ARTICLES``).
    """

    def __init__(self, articles: tuple[RawArticle, ...] = SAMPLE_ARTICLES) -> None:
        self._articles = tuple(articles)

    async def browse(self, *, cursor: str | None, page_size: int) -> NewsPage:
        """Return the page starting at ``cursor``."""
        try:
            offset = int(cursor) if cursor is not None else 0
        except ValueError as e:
            raise TransportError(f"Invalid cursor: {cursor!r}") from e
        if offset < 0:
            raise TransportError(f"Invalid cursor: {cursor!r}")

        end = offset + page_size
        next_cursor = str(end) if end < len(self._articles) else None
        return NewsPage(
            articles=self._articles[offset:end],
            next_cursor=next_cursor,
            total_results=len(self._articles),
            per_page=page_size,
        )

    async def search(self, query: str, *, page_size: int) -> NewsPage:
        """Return the first ``page_size`` articles matching ``query``."""
        needle = query.lower()
        matches = [
            article
            for article in self._articles
            if needle in (article.title or "").lower()
            or needle in (article.description or "").lower()
        ]
        return NewsPage(
            articles=tuple(matches[:page_size]),
            next_cursor=None,
            total_results=len(matches),
            per_page=page_size,
        )
