"""Configuration module for environment-driven settings."""
from __future__ import annotations

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class ToolSettings(BaseSettings):
    """Tool pipeline settings, overridable with ``CHAT_TOOLS_*`` variables."""

    model_config = SettingsConfigDict(env_prefix="CHAT_TOOLS_", extra="ignore")

    # Web fetch relay
    proxy_url: str = Field(default="https://api.allorigins.win/get")
    accept_header: str = Field(
        default="text/html,application/xhtml+xml,application/xml;q=0.9,*/*;q=0.8"
    )
    request_timeout_sec: float = Field(default=30.0, gt=0)
    max_preview_chars: int = Field(default=500, gt=0)

    # Misc
    log_level: str = Field(default="INFO")


@lru_cache
def get_settings() -> ToolSettings:
    """Return cached settings instance."""
    return ToolSettings()
