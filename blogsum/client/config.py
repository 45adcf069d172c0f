"""Client settings loaded from BLOGSUM_* environment variables."""

from __future__ import annotations

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from blogsum.client.retry import DEFAULT_BASE_DELAY_SECONDS, DEFAULT_MAX_RETRIES
from blogsum.client.validation import BlogUrlPolicy


class ClientSettings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="BLOGSUM_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    api_url: str = "http://127.0.0.1:8000"
    timeout_seconds: float = 30.0
    max_retries: int = Field(default=DEFAULT_MAX_RETRIES, ge=0)
    retry_base_delay: float = Field(default=DEFAULT_BASE_DELAY_SECONDS, ge=0)
    blog_url_policy: BlogUrlPolicy = BlogUrlPolicy.WARN

    @field_validator("api_url", mode="before")
    @classmethod
    def _strip_url(cls, value: object) -> object:
        if isinstance(value, str):
            return value.strip()
        return value

    @field_validator("blog_url_policy", mode="before")
    @classmethod
    def _lower_policy(cls, value: object) -> object:
        if isinstance(value, str):
            return value.strip().lower()
        return value
