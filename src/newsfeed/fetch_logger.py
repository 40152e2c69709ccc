"""Fetch logger for recording every page request of a session to a JSON file."""

import dataclasses
import uuid
from datetime import UTC, datetime
from pathlib import Path
from typing import Any, Literal

from pydantic import BaseModel

FetchMode = Literal["browse", "search"]
FetchOutcome = Literal["success", "failure"]


class FetchRecord(BaseModel):
    """Record of a single fetch attempt."""

    mode: FetchMode
    query: str = ""
    cursor: str | None = None
    outcome: FetchOutcome
    article_count: int = 0
    next_cursor: str | None = None
    error: str | None = None
    timestamp: str = ""
    duration_seconds: float = 0.0


class SessionRecord(BaseModel):
    """Record of a complete feed session."""

    session_id: str
    started_at: str
    completed_at: str | None = None
    fetches: list[FetchRecord] = []
    final_article_count: int = 0
    bookmarks: list[dict[str, Any]] = []


class FetchLogger:
    """Accumulates fetch records and writes one JSON log file per session.

    When ``enabled=False``, all methods are no-ops.

    Args:
        log_dir: Directory to write JSON log files.
        enabled: If False, all methods become no-ops.
    """

    def __init__(self, log_dir: Path, *, enabled: bool = True) -> None:
        self._log_dir = log_dir
        self._enabled = enabled
        self._record: SessionRecord | None = None
        self._last_log_path: Path | None = None

    @property
    def enabled(self) -> bool:
        """Whether logging is active."""
        return self._enabled

    @property
    def last_log_path(self) -> Path | None:
        """Path to the last written log file, or None."""
        return self._last_log_path

    @property
    def fetches(self) -> list[FetchRecord]:
        """Fetch records of the session in progress."""
        return list(self._record.fetches) if self._record else []

    def start_session(self) -> None:
        """Initialize a new session record."""
        if not self._enabled:
            return

        self._record = SessionRecord(
            session_id=str(uuid.uuid4()),
            started_at=datetime.now(tz=UTC).isoformat(),
        )

    def log_fetch(
        self,
        *,
        mode: FetchMode,
        query: str,
        cursor: str | None,
        outcome: FetchOutcome,
        duration_seconds: float,
        article_count: int = 0,
        next_cursor: str | None = None,
        error: str | None = None,
    ) -> None:
        """Append a fetch record to the current session.

        Args:
            mode: "browse" or "search".
            query: Search query in effect (empty in browse mode).
            cursor: Cursor the request was issued with.
            outcome: "success" or "failure".
            duration_seconds: Wall-clock time of the request.
            article_count: Number of articles received.
            next_cursor: Cursor returned by the page.
            error: Error message for failed attempts.
        """
        if not self._enabled or self._record is None:
            return

        self._record.fetches.append(
            FetchRecord(
                mode=mode,
                query=query,
                cursor=cursor,
                outcome=outcome,
                article_count=article_count,
                next_cursor=next_cursor,
                error=error,
                timestamp=datetime.now(tz=UTC).isoformat(),
                duration_seconds=round(duration_seconds, 4),
            )
        )

    def finish_session(self, articles: list[Any], bookmarks: list[Any]) -> Path | None:
        """Write the session record to a JSON file.

        Args:
            articles: Articles in the feed when the session ended.
            bookmarks: Bookmarked articles when the session ended.

        Returns:
            Path to the written JSON file, or None if logging is disabled.
        """
        if not self._enabled or self._record is None:
            return None

        self._record.completed_at = datetime.now(tz=UTC).isoformat()
        self._record.final_article_count = len(articles)
        self._record.bookmarks = [dataclasses.asdict(b) for b in bookmarks]

        self._log_dir.mkdir(parents=True, exist_ok=True)

        # session_2026-02-12T14-30-00.json (colons → dashes)
        ts = self._record.started_at.replace(":", "-")
        ts = ts.split(".")[0].split("+")[0]
        filepath = self._log_dir / f"session_{ts}.json"

        filepath.write_text(self._record.model_dump_json(indent=2))
        self._last_log_path = filepath
        self._record = None
        return filepath
