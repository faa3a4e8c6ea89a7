"""Shared pytest fixtures."""

from collections.abc import Iterator

import pytest
import structlog


@pytest.fixture(autouse=True)
def reset_structlog() -> Iterator[None]:
    """Drop logging configuration made by CLI invocations."""
    yield
    structlog.reset_defaults()
    structlog.contextvars.clear_contextvars()
