"""Build the target URL for one code."""

from urllib.parse import quote

import httpx

from hyprsnipe_checker.fetch.errors import InvalidTargetUrlError
from hyprsnipe_checker.fetch.redact import redact_url_credentials


def join_code_url(base_url: str, code: str) -> str:
    """Append a code to the base URL.

    A base carrying a query string, or ending in ``=``, receives the code
    as a value (``...?id=`` + code). Any other base is treated as a path
    and gets exactly one ``/`` before the code. The code is
    percent-encoded so it always stays a single segment or value.

    Args:
        base_url: Absolute http(s) base URL.
        code: Trimmed, non-empty code.

    Returns:
        The combined absolute URL.

    Raises:
        InvalidTargetUrlError: If the result is not an absolute http(s) URL.
    """
    encoded = quote(code, safe="")
    if "?" in base_url or base_url.endswith("="):
        url = base_url + encoded
    else:
        url = base_url.rstrip("/") + "/" + encoded

    try:
        parsed = httpx.URL(url)
    except httpx.InvalidURL as e:
        msg = f"cannot build a valid URL for code {code!r}"
        raise InvalidTargetUrlError(msg, url=redact_url_credentials(url)) from e

    if parsed.scheme not in {"http", "https"} or not parsed.host:
        msg = f"URL for code {code!r} is not an absolute http(s) URL"
        raise InvalidTargetUrlError(msg, url=redact_url_credentials(url))

    return url
