"""Error hints for settings validation errors.

Maps pydantic error types and environment variable names to short,
actionable remediation hints.
"""

from typing import Final


ERROR_HINTS: Final[dict[str, str]] = {
    "missing": "This variable is required. Set it in the environment or in .env.",
    "int_parsing": "This variable must be an integer (whole number).",
    "float_parsing": "This variable must be a number.",
    "greater_than": "The value is too small. It must be greater than zero.",
    "greater_than_equal": "The value is too small. Check the minimum allowed.",
    "less_than_equal": "The value is too large. Check the maximum allowed.",
    "string_too_short": "The value must not be empty.",
    "value_error": "Check the value format.",
}

FIELD_HINTS: Final[dict[str, str]] = {
    "BASE_URL": (
        "Must be an http:// or https:// URL; codes are appended to it "
        "(e.g. 'https://example.com/check/')."
    ),
    "COOKIE": "Must be a single-line Cookie header value in printable ASCII.",
    "USER_AGENT": "Must be a single-line User-Agent header value in printable ASCII.",
    "MAX_RETRIES": "Must be 0 or a positive integer; leave unset to retry forever.",
    "REQUEST_DELAY_MS": "Must be between 0 and 600000 milliseconds.",
    "RETRY_DELAY_MS": "Must be between 0 and 600000 milliseconds.",
}


def get_error_hint(error_type: str, field_name: str | None = None) -> str:
    """Get a user-friendly hint for a validation error.

    Args:
        error_type: The pydantic error type (e.g. 'missing').
        field_name: Optional environment variable name.

    Returns:
        A user-friendly hint string.
    """
    if field_name and field_name.upper() in FIELD_HINTS:
        return FIELD_HINTS[field_name.upper()]
    return ERROR_HINTS.get(error_type, "Check the README for valid values.")


def format_validation_error(
    location: str,
    message: str,
    error_type: str,
    *,
    include_hint: bool = True,
) -> str:
    """Format a validation error with optional hint.

    Args:
        location: The variable name.
        message: The original error message.
        error_type: The error type.
        include_hint: Whether to include a hint.

    Returns:
        Formatted error string.
    """
    base = f"{location}: {message}"
    if include_hint:
        hint = get_error_hint(error_type, location)
        return f"{base}\n    Hint: {hint}"
    return base
