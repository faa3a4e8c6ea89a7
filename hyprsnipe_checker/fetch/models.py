"""Data models for the HTTP fetch layer."""

from enum import Enum
from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field

from hyprsnipe_checker.fetch.constants import DEFAULT_RETRY_DELAY_MS


class FetchErrorClass(str, Enum):
    """Classification of fetch failures for retry decisions.

    - RATE_LIMITED: 429 Too Many Requests
    - NETWORK_TIMEOUT: Connect, read, write or pool timeout
    - CONNECTION_ERROR: Could not establish connection
    - INVALID_URL: URL could not be built or parsed
    - TRANSPORT: Any other transport failure
    - RETRIES_EXHAUSTED: Transient failures outlasted the retry ceiling
    """

    RATE_LIMITED = "RATE_LIMITED"
    NETWORK_TIMEOUT = "NETWORK_TIMEOUT"
    CONNECTION_ERROR = "CONNECTION_ERROR"
    INVALID_URL = "INVALID_URL"
    TRANSPORT = "TRANSPORT"
    RETRIES_EXHAUSTED = "RETRIES_EXHAUSTED"


TRANSIENT_ERROR_CLASSES = frozenset(
    {
        FetchErrorClass.RATE_LIMITED,
        FetchErrorClass.NETWORK_TIMEOUT,
        FetchErrorClass.CONNECTION_ERROR,
    }
)


class RetryPolicy(BaseModel):
    """Configuration for retry behavior.

    Every retry waits the same fixed delay. ``max_retries=None`` retries
    transient failures forever.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    delay_ms: Annotated[int, Field(ge=0, le=600_000)] = DEFAULT_RETRY_DELAY_MS
    max_retries: Annotated[int, Field(ge=0)] | None = None

    @property
    def is_unbounded(self) -> bool:
        """Check if transient failures are retried without limit."""
        return self.max_retries is None

    def should_retry(self, error_class: FetchErrorClass, retry_count: int) -> bool:
        """Determine if a request should be retried.

        Args:
            error_class: Classification of the failed attempt.
            retry_count: Retries already performed for this request.

        Returns:
            True if the request should be retried.
        """
        if error_class not in TRANSIENT_ERROR_CLASSES:
            return False
        if self.max_retries is None:
            return True
        return retry_count < self.max_retries

    @property
    def delay_seconds(self) -> float:
        """Get the retry delay in seconds."""
        return self.delay_ms / 1000.0
