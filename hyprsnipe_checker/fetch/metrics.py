"""Metrics collection for the HTTP fetch layer."""

from dataclasses import dataclass, field
from typing import ClassVar

from hyprsnipe_checker.fetch.models import FetchErrorClass


@dataclass
class FetchMetrics:
    """Metrics for HTTP fetch operations.

    Singleton class that tracks request counts per status, retries,
    transient failures, and request durations.
    """

    http_requests_total: dict[int, int] = field(default_factory=dict)
    http_retry_total: int = 0
    http_transient_errors_total: dict[str, int] = field(default_factory=dict)
    http_duration_ms_total: float = 0.0
    http_fetch_count: int = 0

    _instance: ClassVar["FetchMetrics | None"] = None

    @classmethod
    def get_instance(cls) -> "FetchMetrics":
        """Get singleton metrics instance."""
        if cls._instance is None:
            cls._instance = cls()
        return cls._instance

    @classmethod
    def reset(cls) -> None:
        """Reset metrics (primarily for testing)."""
        cls._instance = None

    def record_response(self, status_code: int) -> None:
        """Record a received HTTP response, retried or not.

        Args:
            status_code: HTTP status code.
        """
        self.http_requests_total[status_code] = (
            self.http_requests_total.get(status_code, 0) + 1
        )

    def record_retry(self, error_class: FetchErrorClass) -> None:
        """Record a retry caused by a transient failure.

        Args:
            error_class: Classification of the failure being retried.
        """
        self.http_retry_total += 1
        key = error_class.value
        self.http_transient_errors_total[key] = (
            self.http_transient_errors_total.get(key, 0) + 1
        )

    def record_fetch(self, duration_ms: float) -> None:
        """Record a completed fetch including all of its retries.

        Args:
            duration_ms: Duration in milliseconds.
        """
        self.http_fetch_count += 1
        self.http_duration_ms_total += duration_ms

    def to_dict(self) -> dict[str, int | float | dict[str, int] | dict[int, int]]:
        """Convert metrics to dictionary.

        Returns:
            Dictionary of metric name to value.
        """
        return {
            "http_requests_total": dict(self.http_requests_total),
            "http_retry_total": self.http_retry_total,
            "http_transient_errors_total": dict(self.http_transient_errors_total),
            "http_duration_ms_total": self.http_duration_ms_total,
            "http_fetch_count": self.http_fetch_count,
        }

