"""Application configuration models."""

from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .utils import MAC_RE


LOG_LEVELS: tuple[str, ...] = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


class Settings(BaseSettings):
    """Settings loaded from environment variables or a .env file."""

    app_name: str = Field(default="IPTV Portal Mock", alias="APP_NAME")
    server_host: str = Field(default="0.0.0.0", alias="HOST")
    server_port: int = Field(default=3211, alias="PORT", ge=1, le=65_535)

    environment: Literal["development", "production"] = Field(
        default="development", alias="ENVIRONMENT"
    )
    log_level: str = Field(default="INFO", alias="LOG_LEVEL")

    public_base_url: str | None = Field(default=None, alias="PUBLIC_BASE_URL")
    stalker_proxy_mac: str = Field(
        default="00:1a:79:00:00:01", alias="STALKER_PROXY_MAC"
    )
    stalker_page_size: int = Field(
        default=14, alias="STALKER_PAGE_SIZE", ge=1, le=500
    )
    epg_default_size: int = Field(default=12, alias="EPG_DEFAULT_SIZE", ge=0, le=50)
    stream_stub_url: str = Field(
        default="https://test-streams.mux.dev/x36xhzz/x36xhzz.m3u8",
        alias="STREAM_STUB_URL",
    )

    @field_validator("stalker_proxy_mac", mode="before")
    @classmethod
    def _normalise_mac(cls, value: object) -> str:
        """Accept MAC addresses in any case, rejecting malformed values."""

        candidate = str(value or "").strip().lower().replace("-", ":")
        if not MAC_RE.match(candidate):
            raise ValueError("STALKER_PROXY_MAC must look like 00:1a:79:00:00:01")
        return candidate

    @field_validator("log_level", mode="before")
    @classmethod
    def _normalise_log_level(cls, value: object) -> str:
        level = str(value or "INFO").strip().upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"Unknown LOG_LEVEL {value!r}")
        return level

    @property
    def server_url(self) -> str:
        """Return the base URL advertised in Xtream ``server_info``."""

        if self.public_base_url:
            return self.public_base_url.rstrip("/")
        host = "localhost" if self.server_host in {"0.0.0.0", ""} else self.server_host
        return f"http://{host}:{self.server_port}"

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8")


@lru_cache
def get_settings() -> Settings:
    """Return a cached settings instance."""

    return Settings()  # type: ignore[call-arg]


settings = get_settings()
