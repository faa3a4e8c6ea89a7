"""Status checker for code lists served behind a single base URL."""

__version__ = "0.1.0"
