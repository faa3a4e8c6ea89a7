"""Check driver: one request per code, results sorted by status."""

from hyprsnipe_checker.check.models import CheckResult, ResultBuckets
from hyprsnipe_checker.check.runner import CheckRunner
from hyprsnipe_checker.check.url import join_code_url


__all__ = [
    "CheckResult",
    "CheckRunner",
    "ResultBuckets",
    "join_code_url",
]
