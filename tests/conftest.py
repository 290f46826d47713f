"""Pytest configuration.

This configuration ensures:
1. Settings load in the testing environment (JSON logs)
2. Builder preconditions raise instead of logging
3. Cached settings and logger never leak between tests
"""

import os

os.environ.setdefault("ROUTEGEN_ENVIRONMENT", "testing")
os.environ.setdefault("ROUTEGEN_VERIFY_CONTRACTS", "true")

import pytest  # noqa: E402

from routegen.core.config import get_settings  # noqa: E402
from routegen.core.container import get_logger  # noqa: E402


@pytest.fixture(autouse=True)
def reset_singletons():
    """Clear cached settings and logger around every test."""
    get_settings.cache_clear()
    get_logger.cache_clear()
    yield
    get_settings.cache_clear()
    get_logger.cache_clear()


# Pytest markers for different test types
def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests with mocked dependencies")
