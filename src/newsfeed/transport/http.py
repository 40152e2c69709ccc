"""News API transport over HTTP using httpx."""

import logging
import os
from typing import Any

import httpx
from pydantic import BaseModel, ValidationError, field_validator

from newsfeed.data import NewsPage, RawArticle
from newsfeed.normalizer import coerce_text
from newsfeed.transport.base import TransportError

NEWS_PATH = "/v1/news"

logger = logging.getLogger(__name__)


class ArticlePayload(BaseModel):
    """A single article as it appears in the API response body."""

    id: str | None = None
    title: str | None = None
    source_title: str | None = None
    pub_date: str | None = None
    media_url: str | None = None
    description: str | None = None

    model_config = {"extra": "ignore"}

    @field_validator("*", mode="before")
    @classmethod
    def lenient_text(cls, v: Any) -> str | None:
        """Bad field values become None instead of failing the whole page."""
        return coerce_text(v)


class NewsPayload(BaseModel):
    """The API response body for both browse and search requests."""

    data: list[ArticlePayload] | None = None
    next_cursor: str | None = None
    total_results: int = 0
    per_page: int = 0

    model_config = {"extra": "ignore"}

    @field_validator("total_results", "per_page", mode="before")
    @classmethod
    def null_count_is_zero(cls, v: Any) -> Any:
        return 0 if v is None else v


class HttpArticleTransport:
    """Fetch article pages from the news API.

    Both browse and search hit ``GET {base_url}/v1/news``; search adds the
    ``q`` parameter, browse adds ``cursor`` once a page has been read.

    Args:
        base_url: API root, e.g. ``https://news.example.com``.
        api_key: API key (defaults to NEWS_API_KEY env var).
        timeout: Request timeout in seconds; None waits indefinitely.
    """

    def __init__(
        self,
        base_url: str,
        *,
        api_key: str | None = None,
        timeout: float | None = None,
    ) -> None:
        self._api_key = api_key or os.environ.get("NEWS_API_KEY")
        if not self._api_key:
            raise ValueError("News API key required. Pass api_key or set NEWS_API_KEY env var.")
        self._base_url = base_url.rstrip("/")
        self._timeout = timeout

    async def browse(self, *, cursor: str | None, page_size: int) -> NewsPage:
        """Fetch one page of the latest articles."""
        params: dict[str, str | int] = {"per_page": page_size}
        if cursor is not None:
            params["cursor"] = cursor
        return await self._get(params)

    async def search(self, query: str, *, page_size: int) -> NewsPage:
        """Fetch one page of articles matching ``query``."""
        params: dict[str, str | int] = {"q": query, "per_page": page_size}
        return await self._get(params)

    async def _get(self, params: dict[str, str | int]) -> NewsPage:
        """Issue the request and convert the body into a ``NewsPage``."""
        headers = {"x-api-key": self._api_key}  # type: ignore[dict-item]
        try:
            async with httpx.AsyncClient(timeout=self._timeout) as client:
                response = await client.get(
                    f"{self._base_url}{NEWS_PATH}", params=params, headers=headers
                )
                response.raise_for_status()
                payload = NewsPayload.model_validate(response.json())
        except httpx.HTTPError as e:
            raise TransportError(f"News API request failed: {e}") from e
        except ValidationError as e:
            raise TransportError(f"Malformed news API response: {e}") from e
        except ValueError as e:
            raise TransportError(f"News API returned invalid JSON: {e}") from e

        logger.debug(
            "Fetched %d articles (total %d)", len(payload.data or []), payload.total_results
        )
        return _to_page(payload)


def _to_page(payload: NewsPayload) -> NewsPage:
    """Map wire field names onto the domain ``RawArticle`` fields."""
    articles = tuple(
        RawArticle(
            id=item.id,
            title=item.title,
            source_name=item.source_title,
            published_at=item.pub_date,
            media_url=item.media_url,
            description=item.description,
        )
        for item in payload.data or []
    )
    return NewsPage(
        articles=articles,
        next_cursor=payload.next_cursor,
        total_results=payload.total_results,
        per_page=payload.per_page,
    )
