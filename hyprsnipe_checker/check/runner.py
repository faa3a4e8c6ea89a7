"""Sequential check driver with a fixed inter-request throttle."""

import time
from collections.abc import Callable, Iterable

import structlog

from hyprsnipe_checker.check.models import CheckResult, ResultBuckets
from hyprsnipe_checker.check.url import join_code_url
from hyprsnipe_checker.fetch.client import StatusFetcher
from hyprsnipe_checker.fetch.constants import DEFAULT_REQUEST_DELAY_MS
from hyprsnipe_checker.fetch.metrics import FetchMetrics


logger = structlog.get_logger()

ResultCallback = Callable[[CheckResult], None]


class CheckRunner:
    """Checks codes one at a time and sorts the results into buckets.

    Each code is fully resolved, retries included, before the next one
    starts. A fatal fetch error propagates immediately and the results
    collected so far are discarded with it.
    """

    def __init__(
        self,
        fetcher: StatusFetcher,
        base_url: str,
        request_delay_ms: int = DEFAULT_REQUEST_DELAY_MS,
        on_result: ResultCallback | None = None,
    ) -> None:
        """Initialize the check runner.

        Args:
            fetcher: Status fetcher sharing one HTTP client.
            base_url: URL each code is appended to.
            request_delay_ms: Pause after every code.
            on_result: Optional callback invoked with each result.
        """
        self._fetcher = fetcher
        self._base_url = base_url
        self._request_delay_ms = request_delay_ms
        self._on_result = on_result
        self._metrics = FetchMetrics.get_instance()
        self._log = logger.bind(component="runner")

    def run(self, codes: Iterable[str]) -> ResultBuckets:
        """Check every code in order.

        Args:
            codes: Codes in file order; blank entries are skipped.

        Returns:
            The populated result buckets.

        Raises:
            FetchError: On the first non-transient failure.
        """
        buckets = ResultBuckets()

        for raw_code in codes:
            code = raw_code.strip()
            if not code:
                continue

            result = self.check(code)
            buckets.add(result)

            if self._on_result is not None:
                self._on_result(result)

            time.sleep(self._request_delay_ms / 1000.0)

        self._log.info(
            "check_run_complete",
            total=buckets.total,
            ok=len(buckets.ok),
            bad=len(buckets.bad),
            other=len(buckets.other),
        )
        return buckets

    def check(self, code: str) -> CheckResult:
        """Fetch and time a single code.

        Args:
            code: Trimmed, non-empty code.

        Returns:
            The code's final status and elapsed time.
        """
        url = join_code_url(self._base_url, code)

        start_time_ns = time.perf_counter_ns()
        status_code = self._fetcher.fetch_status(url)
        duration_ms = (time.perf_counter_ns() - start_time_ns) / 1_000_000
        self._metrics.record_fetch(duration_ms)

        result = CheckResult(code=code, status_code=status_code, duration_ms=duration_ms)
        self._log.info(
            "code_checked",
            code=code,
            status_code=status_code,
            duration_ms=round(duration_ms, 2),
        )
        return result
