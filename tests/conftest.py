"""
Shared fixtures for the typed-result test suite.
"""

from __future__ import annotations

from collections.abc import Iterator

import pytest
import structlog


@pytest.fixture(autouse=True)
def _reset_structlog() -> Iterator[None]:
    """Restore structlog's default configuration after every test."""
    yield
    structlog.reset_defaults()
