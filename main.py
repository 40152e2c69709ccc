#!/usr/bin/env python
"""CLI for browsing and searching the news feed."""

import argparse
import asyncio
import logging
import sys
from pathlib import Path

from pydantic import BaseModel, Field, field_validator

from newsfeed.config import create_from_config, get_default_config_path, load_config
from newsfeed.controller import FeedController
from newsfeed.display import format_published_at

logger = logging.getLogger(__name__)


class CLIArgs(BaseModel):
    """Validated CLI arguments."""

    query: str = ""
    config: Path
    pages: int = Field(default=1, ge=1)
    log: bool = False
    log_dir: str = "logs"

    @field_validator("config")
    @classmethod
    def config_must_exist(cls, v: Path) -> Path:
        if not v.exists():
            raise ValueError(f"Config file not found: {v}")
        return v


async def run(args: CLIArgs) -> None:
    """Fetch and print the feed with the given configuration.

    Args:
        args: Validated CLI arguments.
    """
    config = load_config(args.config)
    controller, fetch_logger = create_from_config(
        config,
        log_override=args.log if args.log else None,
        log_dir_override=args.log_dir if args.log_dir != "logs" else None,
    )

    mode = f"search: {args.query}" if args.query else "latest news"
    logger.info(f"Fetching {mode}")
    logger.info(f"Config: {args.config}")

    try:
        await _show_feed(controller, args)
    finally:
        controller.close()

    if fetch_logger and fetch_logger.last_log_path:
        logger.info(f"\nFetch log written to: {fetch_logger.last_log_path}")


async def _show_feed(controller: FeedController, args: CLIArgs) -> None:
    """Fetch the requested pages and print the resulting feed."""
    controller.set_query(args.query)
    await controller.refresh()
    for _ in range(args.pages - 1):
        # Search results are a single page; browse stops at the end of the feed.
        if args.query or controller.cursor is None:
            break
        await controller.fetch_next_page()

    articles = controller.current_articles()
    print(f"\nFound {len(articles)} articles:\n")
    for i, article in enumerate(articles, 1):
        marker = " [featured]" if article.is_featured else ""
        logger.info(f"{i}. {article.title}{marker}")
        logger.info(f"   Source: {article.source_name}")
        if article.published_at:
            logger.info(f"   Published: {format_published_at(article.published_at)}")


def main() -> None:
    """Entry point for the CLI."""
    parser = argparse.ArgumentParser(description="Browse or search the news feed.")
    parser.add_argument(
        "query",
        nargs="?",
        default="",
        help="Search keywords (omit to browse the latest news)",
    )
    parser.add_argument(
        "--config",
        "-c",
        type=Path,
        default=None,
        help="Path to YAML config file (default: configs/default.yaml)",
    )
    parser.add_argument(
        "--pages",
        "-p",
        type=int,
        default=1,
        help="Number of browse pages to fetch (default: 1)",
    )
    parser.add_argument(
        "--log",
        action="store_true",
        default=False,
        help="Write a JSON log of every fetch attempt",
    )
    parser.add_argument(
        "--log-dir",
        type=str,
        default="logs",
        help="Directory for log files (default: logs/)",
    )

    logging.basicConfig(level=logging.INFO, format="%(message)s")

    ns = parser.parse_args()
    config_path: Path = ns.config if ns.config else get_default_config_path()

    try:
        args = CLIArgs(
            query=ns.query,
            config=config_path,
            pages=ns.pages,
            log=ns.log,
            log_dir=ns.log_dir,
        )
    except Exception as e:
        logger.error(str(e))
        sys.exit(1)

    try:
        asyncio.run(run(args))
    except KeyboardInterrupt:
        sys.exit(130)


if __name__ == "__main__":
    main()
