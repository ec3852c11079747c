"""
Shared test fixtures.
"""

import pytest
import structlog

from upca.config import get_settings


@pytest.fixture(autouse=True)
def clean_settings(monkeypatch):
    """Isolate tests from UPCA_* environment variables and cached settings."""
    for name in ("UPCA_CHECK_DIGIT_MODE", "UPCA_LOG_LEVEL", "UPCA_LOG_FORMAT"):
        monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
    structlog.reset_defaults()
