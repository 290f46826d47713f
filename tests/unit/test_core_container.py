"""Unit tests for the application logger singleton.

Tests cover:
- Adapter selection from settings
- Cached singleton behavior
"""

import logging
from unittest.mock import patch

import pytest

from routegen.core.config import Settings
from routegen.core.container import get_logger
from routegen.infrastructure.logging.console_adapter import ConsoleAdapter


@pytest.mark.unit
class TestGetLogger:
    """Test get_logger()."""

    def test_returns_console_adapter(self):
        assert isinstance(get_logger(), ConsoleAdapter)

    def test_cached(self):
        assert get_logger() is get_logger()

    def test_configured_from_settings(self):
        settings = Settings(log_json=True, log_level="warning")

        with (
            patch("routegen.core.container.get_settings", return_value=settings),
            patch(
                "routegen.infrastructure.logging.console_adapter.ConsoleAdapter"
            ) as mock_adapter,
        ):
            get_logger()

        mock_adapter.assert_called_once_with(use_json=True, level=logging.WARNING)
