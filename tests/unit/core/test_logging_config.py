"""Unit tests for the structlog configuration."""

import json
import logging

import pytest
import structlog

from src.core.logging import build_processors, configure_logging


@pytest.fixture
def restore_logging():
    root = logging.getLogger()
    level = root.level
    yield
    root.setLevel(level)
    structlog.reset_defaults()


class TestBuildProcessors:
    """Test cases for the processor chain."""

    def test_json_renderer_last(self):
        processors = build_processors(json_logs=True)
        assert isinstance(processors[-1], structlog.processors.JSONRenderer)

    def test_console_renderer_last(self):
        processors = build_processors(json_logs=False)
        assert isinstance(processors[-1], structlog.dev.ConsoleRenderer)

    def test_level_filter_first(self):
        assert build_processors(json_logs=True)[0] is structlog.stdlib.filter_by_level


class TestConfigureLogging:
    """Test cases for configure_logging."""

    def test_sets_root_level(self, restore_logging):
        configure_logging(log_level="warning", json_logs=True)

        assert logging.getLogger().level == logging.WARNING

    def test_emits_json_events_through_stdlib(self, restore_logging, caplog):
        # Arrange
        configure_logging(log_level="INFO", json_logs=True)
        logger = structlog.get_logger("tests.harvest")

        # Act
        with caplog.at_level(logging.INFO):
            logger.info("harvest started", verb="ListRecords")

        # Assert
        event = json.loads(caplog.records[-1].getMessage())
        assert event["event"] == "harvest started"
        assert event["verb"] == "ListRecords"
        assert event["level"] == "info"
        assert "timestamp" in event

    def test_debug_events_filtered_at_info(self, restore_logging, caplog):
        configure_logging(log_level="INFO", json_logs=True)
        logger = structlog.get_logger("tests.quiet")

        logger.debug("Email validated successfully")

        assert not [record for record in caplog.records if "Email validated" in record.getMessage()]
