"""HTTP constants for the fetch layer."""

HTTP_STATUS_OK = 200
HTTP_STATUS_BAD_REQUEST = 400
HTTP_STATUS_TOO_MANY_REQUESTS = 429

# Fixed delay between retries of one request (milliseconds)
DEFAULT_RETRY_DELAY_MS = 1000

# Fixed delay between consecutive codes (milliseconds)
DEFAULT_REQUEST_DELAY_MS = 1000

DEFAULT_CONNECT_TIMEOUT_SECONDS = 10.0
DEFAULT_TIMEOUT_SECONDS = 15.0

DEFAULT_USER_AGENT = "hyprsnipe-checker/0.1"
