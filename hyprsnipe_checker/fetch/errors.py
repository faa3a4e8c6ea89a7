"""Fatal fetch errors."""

from hyprsnipe_checker.errors import CheckerError, CheckerErrorClass
from hyprsnipe_checker.fetch.models import FetchErrorClass


class FetchError(CheckerError):
    """A request failed in a way that aborts the whole run."""

    error_class = CheckerErrorClass.FETCH

    def __init__(
        self,
        message: str,
        url: str,
        fetch_error_class: FetchErrorClass = FetchErrorClass.TRANSPORT,
        retry_count: int = 0,
    ) -> None:
        """Initialize the fetch error.

        Args:
            message: Human-readable error message.
            url: URL being fetched (credentials already redacted).
            fetch_error_class: Classification of the underlying failure.
            retry_count: Retries performed before giving up.
        """
        super().__init__(
            message,
            details={
                "url": url,
                "fetch_error_class": fetch_error_class.value,
                "retry_count": retry_count,
            },
        )
        self.url = url
        self.fetch_error_class = fetch_error_class
        self.retry_count = retry_count


class InvalidTargetUrlError(FetchError):
    """Joining the base URL and a code did not produce a usable URL."""

    def __init__(self, message: str, url: str) -> None:
        """Initialize the invalid URL error.

        Args:
            message: Human-readable error message.
            url: The rejected URL.
        """
        super().__init__(message, url, fetch_error_class=FetchErrorClass.INVALID_URL)
