"""Tests for the CLI runner."""

import json
from pathlib import Path

import pytest

from main import CLIArgs, run
from newsfeed.config import get_default_config_path
from newsfeed.transport.static import StaticArticleTransport


def _args(tmp_path: Path, query: str = "") -> CLIArgs:
    return CLIArgs(
        query=query,
        config=get_default_config_path(),
        log=True,
        log_dir=str(tmp_path),
    )


def _session_logs(tmp_path: Path) -> list[Path]:
    return sorted(tmp_path.glob("session_*.json"))


def test_cli_args_rejects_missing_config() -> None:
    with pytest.raises(ValueError, match="Config file not found"):
        CLIArgs(config=Path("/nonexistent/config.yaml"))


def test_cli_args_rejects_zero_pages() -> None:
    with pytest.raises(ValueError):
        CLIArgs(config=get_default_config_path(), pages=0)


async def test_run_writes_fetch_log(tmp_path: Path) -> None:
    await run(_args(tmp_path))

    (log_path,) = _session_logs(tmp_path)
    data = json.loads(log_path.read_text())
    assert data["final_article_count"] == 4
    assert [f["outcome"] for f in data["fetches"]] == ["success"]


async def test_run_writes_fetch_log_when_transport_crashes(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    async def broken_browse(self, *, cursor, page_size):
        raise RuntimeError("transport bug")

    monkeypatch.setattr(StaticArticleTransport, "browse", broken_browse)

    with pytest.raises(RuntimeError, match="transport bug"):
        await run(_args(tmp_path))

    (log_path,) = _session_logs(tmp_path)
    data = json.loads(log_path.read_text())
    assert data["final_article_count"] == 0
    assert data["completed_at"] is not None
