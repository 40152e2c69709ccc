"""Map raw transport records onto well-formed ``NewsArticle`` values."""

from collections.abc import Mapping
from typing import Any

from newsfeed.data import NewsArticle, NewsPage, RawArticle

DEFAULT_TITLE = "No Title"
DEFAULT_SOURCE_NAME = "Unknown Source"

_FIELDS = ("id", "title", "source_name", "published_at", "media_url", "description")


def normalize_article(raw: RawArticle | NewsArticle | Mapping[str, Any]) -> NewsArticle:
    """Build a ``NewsArticle`` from a raw record, filling defaults.

    Never fails: missing or malformed fields fall back to their defaults.
    Normalizing an already-normalized article returns an equal article.

    Args:
        raw: A ``RawArticle``, a ``NewsArticle``, or a mapping keyed by the
            domain field names.

    Returns:
        The normalized article.
    """
    if isinstance(raw, Mapping):
        values = {name: coerce_text(raw.get(name)) for name in _FIELDS}
    else:
        values = {name: coerce_text(getattr(raw, name, None)) for name in _FIELDS}

    title = values["title"]
    published_at = values["published_at"]
    article_id = values["id"]
    if article_id is None:
        # Same underlying item must map to the same identity across fetches;
        # missing parts render as "null", matching ids derived upstream.
        article_id = f"{_or_null(title)}-{_or_null(published_at)}"

    return NewsArticle(
        id=article_id,
        title=title if title is not None else DEFAULT_TITLE,
        source_name=(
            values["source_name"] if values["source_name"] is not None else DEFAULT_SOURCE_NAME
        ),
        published_at=published_at if published_at is not None else "",
        media_url=values["media_url"],
        description=values["description"] if values["description"] is not None else "",
    )


def normalize_page(page: NewsPage) -> tuple[NewsArticle, ...]:
    """Normalize every article of a page, keeping order."""
    return tuple(normalize_article(raw) for raw in page.articles)


def coerce_text(value: Any) -> str | None:
    """Coerce a field value to text; anything unusable counts as absent.

    Numbers become their string form; None, booleans and containers become None.
    """
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, str):
        return value
    if isinstance(value, int | float):
        return str(value)
    return None


def _or_null(value: str | None) -> str:
    return "null" if value is None else value
