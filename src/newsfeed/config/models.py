"""Pydantic configuration models for the news feed."""

from typing import Annotated, Literal

from pydantic import BaseModel, Field

# ============================================================
# Transport Configs
# ============================================================


class HttpTransportConfig(BaseModel):
    """Configuration for HttpArticleTransport."""

    type: Literal["http"] = "http"
    base_url: str
    api_key_env: str = "NEWS_API_KEY"
    timeout: float | None = None

    model_config = {"frozen": True}


class StaticTransportConfig(BaseModel):
    """Offline transport serving the built-in sample articles."""

    type: Literal["static"] = "static"

    model_config = {"frozen": True}


TransportConfig = Annotated[
    HttpTransportConfig | StaticTransportConfig,
    Field(discriminator="type"),
]


# ============================================================
# Feed Config
# ============================================================


class FeedConfig(BaseModel):
    """Configuration for FeedController."""

    page_size: int = Field(default=40, gt=0)

    model_config = {"frozen": True}


# ============================================================
# Logging Config
# ============================================================


class LoggingConfig(BaseModel):
    """Configuration for per-session fetch logging."""

    enabled: bool = False
    log_dir: str = "logs"

    model_config = {"frozen": True}


# ============================================================
# Root Config
# ============================================================


class NewsFeedConfig(BaseModel):
    """Root configuration for the news feed."""

    transport: TransportConfig = Field(default_factory=StaticTransportConfig)
    feed: FeedConfig = Field(default_factory=FeedConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    model_config = {"frozen": True}
