from __future__ import annotations

from functools import lru_cache
from typing import Any

from loguru import logger
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from qiita.net.http import DEFAULT_USER_AGENT
from qiita.pagination import LAST_PAGE_CEILING

log = logger.bind(module="config")

DEFAULT_BASE_URL = "https://qiita.com/api/v2"


class Settings(BaseSettings):
    """Client configuration loaded from the environment (or `.env`)."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        populate_by_name=True,
    )

    base_url: str = Field(default=DEFAULT_BASE_URL, alias="QIITA_BASE_URL")
    access_token: str = Field(default="", alias="QIITA_ACCESS_TOKEN")
    user_agent: str = Field(default=DEFAULT_USER_AGENT, min_length=1, alias="QIITA_USER_AGENT")
    timeout_seconds: float = Field(default=10.0, gt=0, alias="QIITA_TIMEOUT_SECONDS")
    last_page_ceiling: int = Field(default=LAST_PAGE_CEILING, ge=1, alias="QIITA_LAST_PAGE_CEILING")
    log_level: str = Field(default="INFO", alias="LOG_LEVEL")

    def export_safe(self) -> dict[str, Any]:
        """Return non-sensitive settings for debugging/logging."""
        return {
            "base_url": self.base_url,
            "access_token": "***" if self.access_token else "",
            "user_agent": self.user_agent,
            "timeout_seconds": self.timeout_seconds,
            "last_page_ceiling": self.last_page_ceiling,
            "log_level": self.log_level,
        }


@lru_cache
def get_settings() -> Settings:
    """Load and cache client settings."""
    settings = Settings()
    log.info("Settings initialised: {}", settings.export_safe())
    return settings
