"""
Tests for logging helpers.
"""

import logging

import pytest
import structlog

from aiconnectify.core.config import settings
from aiconnectify.utils.logger import (
    MASK,
    add_connector_context,
    configure_logging,
    get_logger,
    mask_secrets,
)


@pytest.fixture(autouse=True)
def restore_logging():
    """Undo structlog and root logger changes made by configure_logging."""
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    structlog.reset_defaults()
    root.handlers[:] = handlers
    root.setLevel(level)


class TestLogger:
    """Test cases for structlog configuration."""

    def test_connector_context(self):
        assert add_connector_context("Claude") == {"connector": "Claude"}

    def test_mask_secrets(self):
        """Credential fields are masked whatever their casing."""
        event = {"event": "Client created", "api_key": "sk-live", "Authorization": "Bearer x"}

        result = mask_secrets(None, "info", event)

        assert result == {"event": "Client created", "api_key": MASK, "Authorization": MASK}

    def test_mask_secrets_leaves_empty_values(self):
        assert mask_secrets(None, "info", {"event": "e", "api_key": None})["api_key"] is None

    def test_console_renderer_in_development(self, monkeypatch):
        monkeypatch.setattr(settings, "APP_ENV", "development")

        configure_logging()

        renderer = structlog.get_config()["processors"][-1]
        assert isinstance(renderer, structlog.dev.ConsoleRenderer)

    def test_json_renderer_in_production(self, monkeypatch):
        monkeypatch.setattr(settings, "APP_ENV", "production")

        configure_logging()

        processors = structlog.get_config()["processors"]
        assert isinstance(processors[-1], structlog.processors.JSONRenderer)
        assert mask_secrets in processors

    def test_explicit_json_output(self, monkeypatch):
        monkeypatch.setattr(settings, "APP_ENV", "development")

        configure_logging(level="debug", json_output=True)

        renderer = structlog.get_config()["processors"][-1]
        assert isinstance(renderer, structlog.processors.JSONRenderer)

    def test_silent_without_configuration(self, capsys):
        """Library events are not printed unless the host configures logging."""
        logger = get_logger("aiconnectify.connectors.http_client")

        logger.debug("Sending request", connector="Mistral", endpoint="/models")
        logger.info("Connector created", connector="Mistral")
        logger.warning("Provider returned an error", connector="Mistral")

        captured = capsys.readouterr()
        assert captured.out == ""
        assert captured.err == ""

    def test_events_reach_stdlib_logging(self, caplog):
        caplog.set_level(logging.DEBUG, logger="aiconnectify")
        logger = get_logger("aiconnectify.connectors.http_client")

        logger.debug("Sending request", connector="Mistral")

        assert len(caplog.records) == 1
        record = caplog.records[0]
        assert record.name == "aiconnectify.connectors.http_client"
        assert record.levelno == logging.DEBUG
        assert "Sending request" in record.getMessage()
