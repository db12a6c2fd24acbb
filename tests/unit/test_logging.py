"""Unit tests for logging setup."""

import logging

import pytest
from pydantic import ValidationError

from ephemeral_pg.utils.logging import setup_logging


@pytest.fixture
def restore_logging():
    """Put back the configuration tests/conftest.py installed."""
    yield
    setup_logging()


class TestSetupLogging:
    """Test setup_logging."""

    def test_applies_level(self, restore_logging):
        setup_logging(level="warning")
        assert logging.getLogger().level == logging.WARNING

    def test_json_renderer(self, restore_logging):
        import structlog

        setup_logging(level="info", log_format="json")
        formatter = logging.root.handlers[0].formatter
        assert isinstance(formatter, structlog.stdlib.ProcessorFormatter)
        assert isinstance(formatter.processors[-1], structlog.processors.JSONRenderer)

    def test_unknown_level_raises_validation_error(self):
        """Test a bad level is reported as a settings error, not AttributeError."""
        with pytest.raises(ValidationError):
            setup_logging(level="chatty")

    def test_unknown_format_raises_validation_error(self):
        with pytest.raises(ValidationError):
            setup_logging(log_format="xml")
