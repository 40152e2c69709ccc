"""Core data models for the news feed."""

from dataclasses import dataclass


@dataclass(frozen=True)
class RawArticle:
    """An article record as delivered by a transport.

    Every field may be missing; the normalizer fills defaults.
    """

    id: str | None = None
    title: str | None = None
    source_name: str | None = None
    published_at: str | None = None
    media_url: str | None = None
    description: str | None = None


@dataclass(frozen=True)
class NewsArticle:
    """A well-formed news article shown in the feed and bookmark views.

    ``published_at`` is kept as the opaque token the transport sent; it is
    only parsed when formatted for display.
    """

    id: str
    title: str
    source_name: str
    published_at: str
    media_url: str | None = None
    description: str = ""

    @property
    def is_featured(self) -> bool:
        """Whether the article has an image to feature."""
        return self.media_url is not None


@dataclass(frozen=True)
class NewsPage:
    """One page of results returned by a transport."""

    articles: tuple[RawArticle, ...] = ()
    next_cursor: str | None = None
    total_results: int = 0
    per_page: int = 0
