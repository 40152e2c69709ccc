"""Configuration module for the news feed."""

from newsfeed.config.factory import create_controller, create_from_config, create_transport
from newsfeed.config.loader import get_default_config_path, load_config
from newsfeed.config.models import (
    FeedConfig,
    HttpTransportConfig,
    LoggingConfig,
    NewsFeedConfig,
    StaticTransportConfig,
    TransportConfig,
)

__all__ = [
    "FeedConfig",
    "HttpTransportConfig",
    "LoggingConfig",
    "NewsFeedConfig",
    "StaticTransportConfig",
    "TransportConfig",
    "create_controller",
    "create_from_config",
    "create_transport",
    "get_default_config_path",
    "load_config",
]
