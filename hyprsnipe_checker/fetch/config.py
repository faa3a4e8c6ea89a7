"""Configuration models for the HTTP fetch layer."""

import re
from typing import Annotated

import httpx
from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from hyprsnipe_checker.fetch.constants import (
    DEFAULT_CONNECT_TIMEOUT_SECONDS,
    DEFAULT_TIMEOUT_SECONDS,
    DEFAULT_USER_AGENT,
)
from hyprsnipe_checker.fetch.models import RetryPolicy


# httpx encodes str header values as ASCII; only tab and printable ASCII are sendable
_INVALID_HEADER_CHARS = re.compile(r"[^\x09\x20-\x7e]")


def validate_header_value(name: str, value: str) -> str:
    """Reject header values that cannot be sent on the wire.

    Args:
        name: Header name, used in the error message.
        value: Header value to check.

    Returns:
        The unchanged value.

    Raises:
        ValueError: If the value contains control or non-ASCII characters.
    """
    if _INVALID_HEADER_CHARS.search(value):
        msg = (
            f"invalid {name} header value: "
            "only printable ASCII characters are allowed"
        )
        raise ValueError(msg)
    return value


class FetchConfig(BaseModel):
    """Configuration for the HTTP fetch layer.

    Built once at startup and shared read-only by every request of a run.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    user_agent: Annotated[str, Field(min_length=1, max_length=500)] = (
        DEFAULT_USER_AGENT
    )
    cookie: str | None = None
    connect_timeout_seconds: Annotated[float, Field(gt=0, le=300.0)] = (
        DEFAULT_CONNECT_TIMEOUT_SECONDS
    )
    timeout_seconds: Annotated[float, Field(gt=0, le=300.0)] = DEFAULT_TIMEOUT_SECONDS
    retry_policy: RetryPolicy = Field(default_factory=RetryPolicy)

    @field_validator("user_agent")
    @classmethod
    def validate_user_agent(cls, v: str) -> str:
        """Ensure the user agent is a valid header value."""
        return validate_header_value("User-Agent", v)

    @field_validator("cookie")
    @classmethod
    def normalize_cookie(cls, v: str | None) -> str | None:
        """Trim the cookie and treat a blank one as absent."""
        if v is None:
            return None
        v = v.strip()
        if not v:
            return None
        return validate_header_value("Cookie", v)

    @model_validator(mode="after")
    def validate_timeouts(self) -> "FetchConfig":
        """Ensure the connect timeout fits inside the total timeout."""
        if self.connect_timeout_seconds > self.timeout_seconds:
            msg = (
                f"connect timeout ({self.connect_timeout_seconds}s) exceeds "
                f"total timeout ({self.timeout_seconds}s)"
            )
            raise ValueError(msg)
        return self

    def build_headers(self) -> dict[str, str]:
        """Build the default headers sent with every request.

        Returns:
            Headers dictionary.
        """
        headers: dict[str, str] = {"User-Agent": self.user_agent}
        if self.cookie:
            headers["Cookie"] = self.cookie
        return headers

    def build_timeout(self) -> httpx.Timeout:
        """Build the per-request timeout.

        Returns:
            Timeout with the connect phase bounded separately.
        """
        return httpx.Timeout(self.timeout_seconds, connect=self.connect_timeout_seconds)

    def build_client(
        self, transport: httpx.BaseTransport | None = None
    ) -> httpx.Client:
        """Create the shared HTTP client for a run.

        Args:
            transport: Optional transport override (used by tests).

        Returns:
            Configured ``httpx.Client``; the caller owns closing it.
        """
        return httpx.Client(
            headers=self.build_headers(),
            timeout=self.build_timeout(),
            follow_redirects=True,
            transport=transport,
        )
