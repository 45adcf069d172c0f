"""Application settings loaded from environment variables."""

from __future__ import annotations

from functools import lru_cache
from typing import Annotated

from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict, SettingsError

from blogsum.core.constants import (
    DEFAULT_COMPLETION_BASE_URL,
    DEFAULT_COMPLETION_MODEL,
    DEFAULT_FETCH_TIMEOUT_SECONDS,
    DEFAULT_USER_AGENT,
    MAX_CONTENT_CHARS,
)
from blogsum.core.errors import ConfigurationError


class Settings(BaseSettings):
    """
    Configuration loaded from environment variables.

    Only secrets and deployment-specific values belong here.
    Application constants live in their respective modules.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # ---------------------------------------------------------------------------
    # API Keys (required secrets)
    # ---------------------------------------------------------------------------
    gemini_api_key: str = Field(..., min_length=1, validation_alias="GEMINI_API_KEY")

    # ---------------------------------------------------------------------------
    # Completion service (optional)
    # ---------------------------------------------------------------------------
    completion_model: str = Field(default=DEFAULT_COMPLETION_MODEL, validation_alias="COMPLETION_MODEL")
    completion_base_url: str = Field(default=DEFAULT_COMPLETION_BASE_URL, validation_alias="COMPLETION_BASE_URL")

    # ---------------------------------------------------------------------------
    # Page fetching (optional)
    # ---------------------------------------------------------------------------
    fetch_user_agent: str = Field(default=DEFAULT_USER_AGENT, validation_alias="FETCH_USER_AGENT")
    fetch_timeout_seconds: float = Field(
        default=DEFAULT_FETCH_TIMEOUT_SECONDS,
        validation_alias="FETCH_TIMEOUT_SECONDS",
    )
    max_content_chars: int = Field(default=MAX_CONTENT_CHARS, validation_alias="MAX_CONTENT_CHARS")

    # ---------------------------------------------------------------------------
    # Environment config (optional)
    # ---------------------------------------------------------------------------
    app_env: str = Field(default="local", validation_alias="APP_ENV")

    # ---------------------------------------------------------------------------
    # Deployment config (optional)
    # ---------------------------------------------------------------------------
    # Comma-separated, not JSON.
    cors_allow_origins: Annotated[list[str], NoDecode] = Field(
        default_factory=list,
        validation_alias="CORS_ALLOW_ORIGINS",
    )
    rate_limit: int = Field(default=0, validation_alias="RATE_LIMIT")  # requests/min, 0 = disabled

    @field_validator(
        "gemini_api_key",
        "completion_model",
        "completion_base_url",
        "fetch_user_agent",
        "app_env",
        mode="before",
    )
    @classmethod
    def _strip_strings(cls, value: object) -> object:
        if isinstance(value, str):
            return value.strip()
        return value

    @field_validator("cors_allow_origins", mode="before")
    @classmethod
    def _parse_list(cls, value: object) -> object:
        if value is None:
            return []
        if isinstance(value, str):
            items = [item.strip() for item in value.split(",")]
            return [item for item in items if item]
        return value

    @field_validator("max_content_chars")
    @classmethod
    def _clamp_content_chars(cls, value: int) -> int:
        return max(1, value)

    @field_validator("fetch_timeout_seconds")
    @classmethod
    def _clamp_fetch_timeout(cls, value: float) -> float:
        return max(1.0, value)


def _missing_fields(exc: ValidationError) -> list[str]:
    names: list[str] = []
    for error in exc.errors():
        if error.get("type") not in {"missing", "string_too_short"}:
            continue
        loc = error.get("loc") or ()
        if loc:
            names.append(str(loc[0]))
    return names


def load_settings() -> Settings:
    """Build settings, turning missing secrets into a readable configuration error."""
    try:
        return Settings()
    except ValidationError as exc:
        missing = _missing_fields(exc)
        if missing:
            raise ConfigurationError(f"Missing required configuration: {', '.join(missing)}.") from exc
        raise ConfigurationError(f"Invalid configuration: {exc.error_count()} error(s).") from exc
    except SettingsError as exc:
        raise ConfigurationError(f"Invalid configuration: {exc}") from exc


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return load_settings()
