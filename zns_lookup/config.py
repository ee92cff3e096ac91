"""Centralized configuration via pydantic-settings. Overrides from env / .env."""

from pathlib import Path
from functools import lru_cache
from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import Field


PROJECT_ROOT = Path(__file__).resolve().parent.parent


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="ZNS_",
        env_file=PROJECT_ROOT / ".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Remote ZNS API
    api_base_url: str = "https://zns.bio"
    request_timeout: float = Field(default=10.0, gt=0, description="Seconds per outbound request")
    user_agent: str = "zns-lookup/0.1.0"

    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"

    @property
    def resolve_domain_url(self) -> str:
        return f"{self.api_base_url.rstrip('/')}/api/resolveDomain"

    @property
    def resolve_address_url(self) -> str:
        return f"{self.api_base_url.rstrip('/')}/api/resolveAddress"


@lru_cache
def get_settings() -> Settings:
    return Settings()
