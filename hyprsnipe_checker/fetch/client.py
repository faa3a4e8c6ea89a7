"""HTTP status fetcher with fixed-delay retry on transient failures."""

import time

import httpx
import structlog

from hyprsnipe_checker.fetch.constants import HTTP_STATUS_TOO_MANY_REQUESTS
from hyprsnipe_checker.fetch.errors import FetchError
from hyprsnipe_checker.fetch.metrics import FetchMetrics
from hyprsnipe_checker.fetch.models import FetchErrorClass, RetryPolicy
from hyprsnipe_checker.fetch.redact import redact_url_credentials


logger = structlog.get_logger()


class StatusFetcher:
    """Resolves a URL to its final HTTP status code.

    Rate limiting (429), timeouts and connection failures are retried
    after a fixed delay; any other transport failure is fatal. Each call
    keeps its own retry counter, so one URL's retries never affect the
    next.
    """

    def __init__(self, client: httpx.Client, retry_policy: RetryPolicy) -> None:
        """Initialize the status fetcher.

        Args:
            client: Shared HTTP client carrying headers and timeouts.
            retry_policy: Delay and optional ceiling for retries.
        """
        self._client = client
        self._policy = retry_policy
        self._metrics = FetchMetrics.get_instance()
        self._log = logger.bind(component="fetch")

    def fetch_status(self, url: str) -> int:
        """GET a URL and return its final status code.

        Args:
            url: Absolute URL to request.

        Returns:
            The first non-429 status, or 429 once a bounded retry
            ceiling is reached.

        Raises:
            FetchError: On a non-transient failure, or when network
                failures outlast a bounded retry ceiling.
        """
        safe_url = redact_url_credentials(url)
        log = self._log.bind(url=safe_url)
        retry_count = 0

        while True:
            try:
                response = self._client.get(url)
            except (httpx.TimeoutException, httpx.ConnectError) as e:
                error_class = (
                    FetchErrorClass.NETWORK_TIMEOUT
                    if isinstance(e, httpx.TimeoutException)
                    else FetchErrorClass.CONNECTION_ERROR
                )
                if not self._policy.should_retry(error_class, retry_count):
                    msg = (
                        f"failed to GET {safe_url}: giving up after "
                        f"{retry_count} retries"
                    )
                    raise FetchError(
                        msg,
                        url=safe_url,
                        fetch_error_class=FetchErrorClass.RETRIES_EXHAUSTED,
                        retry_count=retry_count,
                    ) from e
                retry_count += 1
                log.warning(
                    "transient_network_error",
                    error_class=error_class.value,
                    error=str(e),
                    attempt=retry_count,
                    delay_ms=self._policy.delay_ms,
                )
                self._backoff(error_class)
                continue
            except (httpx.HTTPError, httpx.InvalidURL) as e:
                msg = f"failed to GET {safe_url}"
                raise FetchError(
                    msg,
                    url=safe_url,
                    fetch_error_class=FetchErrorClass.TRANSPORT,
                    retry_count=retry_count,
                ) from e

            status_code = response.status_code
            self._metrics.record_response(status_code)

            if status_code != HTTP_STATUS_TOO_MANY_REQUESTS:
                return status_code

            if not self._policy.should_retry(FetchErrorClass.RATE_LIMITED, retry_count):
                log.warning("rate_limit_retries_exhausted", retry_count=retry_count)
                return status_code

            retry_count += 1
            log.warning(
                "rate_limited",
                status_code=status_code,
                attempt=retry_count,
                delay_ms=self._policy.delay_ms,
            )
            self._backoff(FetchErrorClass.RATE_LIMITED)

    def _backoff(self, error_class: FetchErrorClass) -> None:
        self._metrics.record_retry(error_class)
        time.sleep(self._policy.delay_seconds)
