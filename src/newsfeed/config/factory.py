"""Factory functions to create components from configuration."""

import os
from pathlib import Path

from newsfeed.config.models import (
    FeedConfig,
    HttpTransportConfig,
    NewsFeedConfig,
    StaticTransportConfig,
    TransportConfig,
)
from newsfeed.controller import FeedController
from newsfeed.fetch_logger import FetchLogger
from newsfeed.transport.base import ArticleTransport
from newsfeed.transport.http import HttpArticleTransport
from newsfeed.transport.static import StaticArticleTransport


def create_transport(config: TransportConfig) -> ArticleTransport:
    """Create an article transport from config."""
    if isinstance(config, HttpTransportConfig):
        return HttpArticleTransport(
            config.base_url,
            api_key=os.environ.get(config.api_key_env),
            timeout=config.timeout,
        )
    if isinstance(config, StaticTransportConfig):
        return StaticArticleTransport()
    msg = f"Unknown transport config type: {type(config)}"
    raise ValueError(msg)


def create_controller(
    transport: ArticleTransport,
    config: FeedConfig,
    fetch_logger: FetchLogger | None = None,
) -> FeedController:
    """Create a feed controller around ``transport``."""
    return FeedController(
        transport,
        page_size=config.page_size,
        fetch_logger=fetch_logger,
    )


def create_from_config(
    config: NewsFeedConfig,
    *,
    log_override: bool | None = None,
    log_dir_override: str | None = None,
) -> tuple[FeedController, FetchLogger | None]:
    """Create a ready-to-use feed controller from root config.

    Args:
        config: Root configuration.
        log_override: Override the config's logging.enabled setting.
        log_dir_override: Override the config's logging.log_dir setting.

    Returns:
        Tuple of (controller, fetch_logger).
        fetch_logger is None if logging is disabled.
    """
    log_enabled = log_override if log_override is not None else config.logging.enabled
    log_dir = Path(log_dir_override if log_dir_override is not None else config.logging.log_dir)

    fetch_logger: FetchLogger | None = None
    if log_enabled:
        fetch_logger = FetchLogger(log_dir=log_dir, enabled=True)

    transport = create_transport(config.transport)
    controller = create_controller(transport, config.feed, fetch_logger=fetch_logger)
    return (controller, fetch_logger)
