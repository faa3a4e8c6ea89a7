"""Application settings loading."""

from .app import AppSettings, load_settings
from .error_hints import format_validation_error, get_error_hint


__all__ = [
    "AppSettings",
    "format_validation_error",
    "get_error_hint",
    "load_settings",
]
