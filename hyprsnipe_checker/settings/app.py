"""Application settings powered by Pydantic BaseSettings."""

from pathlib import Path
from typing import Annotated, Any

import httpx
from pydantic import Field, ValidationError, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from hyprsnipe_checker.errors import ConfigError
from hyprsnipe_checker.fetch.config import FetchConfig, validate_header_value
from hyprsnipe_checker.fetch.constants import (
    DEFAULT_CONNECT_TIMEOUT_SECONDS,
    DEFAULT_REQUEST_DELAY_MS,
    DEFAULT_RETRY_DELAY_MS,
    DEFAULT_TIMEOUT_SECONDS,
    DEFAULT_USER_AGENT,
)
from hyprsnipe_checker.fetch.models import RetryPolicy

from .error_hints import format_validation_error


DEFAULT_CODES_FILE = Path(".data.txt")
DEFAULT_RESULTS_FILE = Path("results.txt")


class AppSettings(BaseSettings):
    """Centralized environment configuration."""

    model_config = SettingsConfigDict(
        env_prefix="",
        case_sensitive=False,
        env_file=".env",
        env_file_encoding="utf-8",
        env_ignore_empty=True,
        extra="ignore",
        populate_by_name=True,
        frozen=True,
    )

    base_url: str = Field(validation_alias="BASE_URL")
    cookie: str | None = Field(default=None, validation_alias="COOKIE")
    user_agent: Annotated[str, Field(min_length=1)] = Field(
        default=DEFAULT_USER_AGENT, validation_alias="USER_AGENT"
    )
    codes_file: Path = Field(default=DEFAULT_CODES_FILE, validation_alias="CODES_FILE")
    results_file: Path = Field(
        default=DEFAULT_RESULTS_FILE, validation_alias="RESULTS_FILE"
    )
    request_delay_ms: Annotated[int, Field(ge=0, le=600_000)] = Field(
        default=DEFAULT_REQUEST_DELAY_MS, validation_alias="REQUEST_DELAY_MS"
    )
    retry_delay_ms: Annotated[int, Field(ge=0, le=600_000)] = Field(
        default=DEFAULT_RETRY_DELAY_MS, validation_alias="RETRY_DELAY_MS"
    )
    max_retries: Annotated[int, Field(ge=0)] | None = Field(
        default=None, validation_alias="MAX_RETRIES"
    )
    connect_timeout_seconds: Annotated[float, Field(gt=0, le=300.0)] = Field(
        default=DEFAULT_CONNECT_TIMEOUT_SECONDS,
        validation_alias="CONNECT_TIMEOUT_SECONDS",
    )
    timeout_seconds: Annotated[float, Field(gt=0, le=300.0)] = Field(
        default=DEFAULT_TIMEOUT_SECONDS, validation_alias="TIMEOUT_SECONDS"
    )

    @field_validator("base_url")
    @classmethod
    def validate_base_url(cls, v: str) -> str:
        """Require an absolute http(s) URL with a host."""
        v = v.strip()
        try:
            url = httpx.URL(v)
        except httpx.InvalidURL as e:
            msg = f"not a valid URL: {e}"
            raise ValueError(msg) from e
        if url.scheme not in {"http", "https"} or not url.host:
            msg = "must be an absolute http:// or https:// URL"
            raise ValueError(msg)
        return v

    @field_validator("cookie")
    @classmethod
    def normalize_cookie(cls, v: str | None) -> str | None:
        """Trim the cookie and treat a blank one as absent."""
        if v is None or not v.strip():
            return None
        return validate_header_value("Cookie", v.strip())

    @field_validator("user_agent")
    @classmethod
    def validate_user_agent(cls, v: str) -> str:
        """Ensure the user agent is a valid header value."""
        return validate_header_value("User-Agent", v)

    @model_validator(mode="after")
    def validate_timeouts(self) -> "AppSettings":
        """Ensure the connect timeout fits inside the total timeout."""
        if self.connect_timeout_seconds > self.timeout_seconds:
            msg = (
                f"CONNECT_TIMEOUT_SECONDS ({self.connect_timeout_seconds}) exceeds "
                f"TIMEOUT_SECONDS ({self.timeout_seconds})"
            )
            raise ValueError(msg)
        return self

    def fetch_config(self) -> FetchConfig:
        """Build the HTTP client configuration for a run."""
        return FetchConfig(
            user_agent=self.user_agent,
            cookie=self.cookie,
            connect_timeout_seconds=self.connect_timeout_seconds,
            timeout_seconds=self.timeout_seconds,
            retry_policy=RetryPolicy(
                delay_ms=self.retry_delay_ms,
                max_retries=self.max_retries,
            ),
        )


def load_settings(**overrides: Any) -> AppSettings:
    """Load settings, turning validation failures into a ConfigError.

    Args:
        **overrides: Field values that take precedence over the environment.

    Returns:
        Validated settings.

    Raises:
        ConfigError: If a required variable is missing or a value is invalid.
    """
    try:
        return AppSettings(**overrides)
    except ValidationError as e:
        problems = [
            format_validation_error(
                ".".join(str(part) for part in err["loc"]) or "settings",
                err["msg"],
                err["type"],
            )
            for err in e.errors()
        ]
        msg = "invalid configuration:\n  " + "\n  ".join(problems)
        raise ConfigError(msg) from e
