"""Feed state controller: pagination, search, loading gate and bookmarks."""

import asyncio
import logging
import time

from newsfeed.data import NewsArticle, NewsPage
from newsfeed.fetch_logger import FetchLogger, FetchMode, FetchOutcome
from newsfeed.normalizer import normalize_page
from newsfeed.observable import Observable
from newsfeed.transport.base import ArticleTransport, TransportError

DEFAULT_PAGE_SIZE = 40

logger = logging.getLogger(__name__)


class FeedController:
    """Owns the news feed state and the operations that change it.

    An empty ``query`` means browse mode: pages are appended as the cursor
    advances. A non-empty ``query`` means search mode: every fetch replaces the
    feed with a single page of results.

    Only one fetch is in flight at a time. The ``is_loading`` flag is checked
    and set before the first suspension point, so a fetch requested while
    another is running is dropped rather than queued.

    All operations are expected to run on one event loop.

    Args:
        transport: Source of article pages.
        page_size: Articles requested per page (default 40).
        fetch_logger: Optional FetchLogger recording every fetch attempt.
    """

    def __init__(
        self,
        transport: ArticleTransport,
        *,
        page_size: int = DEFAULT_PAGE_SIZE,
        fetch_logger: FetchLogger | None = None,
    ) -> None:
        if page_size <= 0:
            raise ValueError(f"page_size must be positive, got {page_size}")
        self._transport = transport
        self._page_size = page_size
        self._fetch_logger = fetch_logger
        self._cursor: str | None = None
        self._closed = False
        self._tasks: set[asyncio.Task[None]] = set()

        self.articles: Observable[tuple[NewsArticle, ...]] = Observable(())
        self.bookmarks: Observable[tuple[NewsArticle, ...]] = Observable(())
        self.query: Observable[str] = Observable("")
        self.is_loading: Observable[bool] = Observable(False)

        if self._fetch_logger:
            self._fetch_logger.start_session()

    @property
    def cursor(self) -> str | None:
        """Continuation token for the next browse page."""
        return self._cursor

    @property
    def page_size(self) -> int:
        return self._page_size

    @property
    def closed(self) -> bool:
        """Whether ``close()`` has been called."""
        return self._closed

    # -- Fetching --

    async def fetch_next_page(self) -> None:
        """Load one more page into the feed.

        Does nothing if a fetch is already in flight. Transport failures are
        logged and leave the feed untouched.
        """
        if not self._admit():
            return
        await self._run_fetch()

    def launch_next_page(self) -> asyncio.Task[None] | None:
        """Start ``fetch_next_page`` in the background.

        ``is_loading`` is set before this returns, so a second call made
        before the task runs is rejected.

        Returns:
            The fetch task, or None if a fetch is already in flight.

        Raises:
            RuntimeError: If called without a running event loop.
        """
        # Fail before admission so the loading flag is never left set.
        asyncio.get_running_loop()
        if not self._admit():
            return None
        task = asyncio.create_task(self._run_fetch())
        self._tasks.add(task)
        task.add_done_callback(self._tasks.discard)
        task.add_done_callback(self._on_task_done)
        return task

    def load_more_if_needed(self, last_visible_index: int) -> asyncio.Task[None] | None:
        """Trigger the next page once the last article is on screen.

        Args:
            last_visible_index: Index of the last article the view shows.

        Returns:
            The fetch task, or None if no fetch was started.
        """
        self._ensure_open()
        if last_visible_index < len(self.articles.value) - 1 or self.is_loading.value:
            return None
        return self.launch_next_page()

    async def refresh(self) -> None:
        """Drop the accumulated feed and cursor, then fetch page one."""
        self._ensure_open()
        self._cursor = None
        self.articles.set(())
        await self.fetch_next_page()

    def _admit(self) -> bool:
        """Check-and-set the loading flag. Must not await."""
        self._ensure_open()
        if self.is_loading.value:
            logger.debug("Fetch already in flight; ignoring request")
            return False
        self.is_loading.set(True)
        return True

    async def _run_fetch(self) -> None:
        query = self.query.value
        cursor = self._cursor
        mode: FetchMode = "search" if query else "browse"
        t0 = time.monotonic()
        try:
            if query:
                page = await self._transport.search(query, page_size=self._page_size)
            else:
                page = await self._transport.browse(cursor=cursor, page_size=self._page_size)
        except TransportError as e:
            logger.warning(f"Error fetching {mode} page: {e}")
            self._log_fetch(mode, query, cursor, "failure", t0, error=str(e))
        else:
            if self._closed:
                logger.debug("Controller closed; discarding %s page", mode)
                return
            self._apply_page(page, search=bool(query))
            self._log_fetch(mode, query, cursor, "success", t0, page=page)
        finally:
            self.is_loading.set(False)

    def _apply_page(self, page: NewsPage, *, search: bool) -> None:
        articles = normalize_page(page)
        if search:
            self.articles.set(articles)
            return
        self.articles.set(self.articles.value + articles)
        # A missing next cursor sends the following browse back to page one.
        self._cursor = page.next_cursor

    def _log_fetch(
        self,
        mode: FetchMode,
        query: str,
        cursor: str | None,
        outcome: FetchOutcome,
        t0: float,
        *,
        page: NewsPage | None = None,
        error: str | None = None,
    ) -> None:
        if not self._fetch_logger:
            return
        self._fetch_logger.log_fetch(
            mode=mode,
            query=query,
            cursor=cursor,
            outcome=outcome,
            duration_seconds=time.monotonic() - t0,
            article_count=len(page.articles) if page else 0,
            next_cursor=page.next_cursor if page else None,
            error=error,
        )

    @staticmethod
    def _on_task_done(task: asyncio.Task[None]) -> None:
        """Log unhandled exceptions from background fetches."""
        if task.cancelled():
            return
        exc = task.exception()
        if exc is not None:
            logger.error("Unhandled exception in background fetch: %s", exc, exc_info=exc)

    # -- Query and bookmarks --

    def set_query(self, text: str) -> None:
        """Update the search query. Does not fetch."""
        self._ensure_open()
        self.query.set(text)

    def toggle_bookmark(self, article: NewsArticle) -> bool:
        """Add or remove ``article`` from the bookmarks, matching by id.

        Returns:
            True if the article is now bookmarked, False if it was removed.
        """
        self._ensure_open()
        current = self.bookmarks.value
        if any(b.id == article.id for b in current):
            self.bookmarks.set(tuple(b for b in current if b.id != article.id))
            return False
        self.bookmarks.set((*current, article))
        return True

    def is_bookmarked(self, article: NewsArticle) -> bool:
        return any(b.id == article.id for b in self.bookmarks.value)

    def current_articles(self) -> tuple[NewsArticle, ...]:
        """Snapshot of the feed."""
        return self.articles.value

    def find_article(self, article_id: str) -> NewsArticle | None:
        """Look up an article by id in the feed, then in the bookmarks."""
        for article in (*self.articles.value, *self.bookmarks.value):
            if article.id == article_id:
                return article
        return None

    # -- Teardown --

    def close(self) -> None:
        """Tear the controller down.

        Results of fetches still in flight are discarded when they arrive.
        """
        if self._closed:
            return
        self._closed = True
        if self._fetch_logger:
            self._fetch_logger.finish_session(
                list(self.articles.value), list(self.bookmarks.value)
            )
        for observable in (self.articles, self.bookmarks, self.query, self.is_loading):
            observable.clear()

    def _ensure_open(self) -> None:
        if self._closed:
            raise RuntimeError("FeedController is closed")
