"""Tests for FetchLogger."""

import json
from pathlib import Path

from newsfeed.data import NewsArticle
from newsfeed.fetch_logger import FetchLogger, FetchRecord, SessionRecord


def _article(article_id: str) -> NewsArticle:
    return NewsArticle(
        id=article_id,
        title=f"Title {article_id}",
        source_name="Source",
        published_at="2025-03-20",
        media_url="https://img.example.com/x.jpg",
    )


def test_disabled_logger_is_noop(tmp_path: Path) -> None:
    fetch_logger = FetchLogger(log_dir=tmp_path / "logs", enabled=False)
    fetch_logger.start_session()
    fetch_logger.log_fetch(
        mode="browse", query="", cursor=None, outcome="success", duration_seconds=0.1
    )
    result = fetch_logger.finish_session([], [])

    assert fetch_logger.enabled is False
    assert result is None
    assert fetch_logger.last_log_path is None
    assert fetch_logger.fetches == []
    assert not (tmp_path / "logs").exists()


def test_log_fetch_without_session_is_noop(tmp_path: Path) -> None:
    fetch_logger = FetchLogger(log_dir=tmp_path)
    fetch_logger.log_fetch(
        mode="search", query="ai", cursor=None, outcome="failure", duration_seconds=0.0
    )
    assert fetch_logger.fetches == []
    assert fetch_logger.finish_session([], []) is None


def test_log_fetch_records_fields(tmp_path: Path) -> None:
    fetch_logger = FetchLogger(log_dir=tmp_path)
    fetch_logger.start_session()
    fetch_logger.log_fetch(
        mode="browse",
        query="",
        cursor="c1",
        outcome="success",
        duration_seconds=0.123456,
        article_count=40,
        next_cursor="c2",
    )

    (record,) = fetch_logger.fetches
    assert isinstance(record, FetchRecord)
    assert record.mode == "browse"
    assert record.cursor == "c1"
    assert record.next_cursor == "c2"
    assert record.article_count == 40
    assert record.duration_seconds == 0.1235
    assert record.error is None
    assert record.timestamp


def test_finish_session_writes_json(tmp_path: Path) -> None:
    log_dir = tmp_path / "nested" / "logs"
    fetch_logger = FetchLogger(log_dir=log_dir)
    fetch_logger.start_session()
    fetch_logger.log_fetch(
        mode="search",
        query="ai",
        cursor=None,
        outcome="failure",
        duration_seconds=1.0,
        error="503",
    )

    path = fetch_logger.finish_session([_article("a"), _article("b")], [_article("a")])

    assert path is not None
    assert path.parent == log_dir
    assert path.name.startswith("session_")
    assert path.suffix == ".json"
    assert ":" not in path.name
    assert fetch_logger.last_log_path == path

    record = SessionRecord.model_validate(json.loads(path.read_text()))
    assert record.completed_at is not None
    assert record.final_article_count == 2
    assert record.bookmarks[0]["id"] == "a"
    assert record.bookmarks[0]["media_url"] == "https://img.example.com/x.jpg"
    assert record.fetches[0].query == "ai"
    assert record.fetches[0].error == "503"


def test_finish_session_closes_the_session(tmp_path: Path) -> None:
    fetch_logger = FetchLogger(log_dir=tmp_path)
    fetch_logger.start_session()
    assert fetch_logger.finish_session([], []) is not None

    fetch_logger.log_fetch(
        mode="browse", query="", cursor=None, outcome="success", duration_seconds=0.0
    )
    assert fetch_logger.fetches == []
    assert fetch_logger.finish_session([], []) is None
