"""HTTP fetch layer with fixed-delay retries.

This module provides:
- A shared, read-only client configuration (headers and timeouts)
- Status fetching that retries rate limiting and transient network errors
- Header redaction for logging
- Metrics collection for observability
"""

from hyprsnipe_checker.fetch.client import StatusFetcher
from hyprsnipe_checker.fetch.config import FetchConfig, validate_header_value
from hyprsnipe_checker.fetch.constants import (
    DEFAULT_CONNECT_TIMEOUT_SECONDS,
    DEFAULT_REQUEST_DELAY_MS,
    DEFAULT_RETRY_DELAY_MS,
    DEFAULT_TIMEOUT_SECONDS,
    DEFAULT_USER_AGENT,
    HTTP_STATUS_BAD_REQUEST,
    HTTP_STATUS_OK,
    HTTP_STATUS_TOO_MANY_REQUESTS,
)
from hyprsnipe_checker.fetch.errors import FetchError, InvalidTargetUrlError
from hyprsnipe_checker.fetch.metrics import FetchMetrics
from hyprsnipe_checker.fetch.models import (
    TRANSIENT_ERROR_CLASSES,
    FetchErrorClass,
    RetryPolicy,
)
from hyprsnipe_checker.fetch.redact import redact_headers, redact_url_credentials


__all__ = [
    # Client
    "StatusFetcher",
    # Config
    "FetchConfig",
    "validate_header_value",
    # Models
    "FetchErrorClass",
    "RetryPolicy",
    "TRANSIENT_ERROR_CLASSES",
    # Errors
    "FetchError",
    "InvalidTargetUrlError",
    # Constants
    "HTTP_STATUS_OK",
    "HTTP_STATUS_BAD_REQUEST",
    "HTTP_STATUS_TOO_MANY_REQUESTS",
    "DEFAULT_RETRY_DELAY_MS",
    "DEFAULT_REQUEST_DELAY_MS",
    "DEFAULT_CONNECT_TIMEOUT_SECONDS",
    "DEFAULT_TIMEOUT_SECONDS",
    "DEFAULT_USER_AGENT",
    # Metrics
    "FetchMetrics",
    # Redaction
    "redact_headers",
    "redact_url_credentials",
]
