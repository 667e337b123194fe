"""Tests for structured logging configuration."""

import io
import json

from datadock.core.logging import configure_logging, get_logger, log_context


class TestConfigureLogging:
    """Tests for configure_logging output."""

    def test_json_output_carries_request_context(self):
        """Context bound with log_context appears on every event inside it."""
        stream = io.StringIO()
        configure_logging(log_level="INFO", log_format="json", stream=stream)
        logger = get_logger("datadock.test")

        with log_context(request="table_list", generation=3):
            logger.info("table_list_loaded", count=2)
        logger.info("outside")

        first, second = [json.loads(line) for line in stream.getvalue().splitlines()]
        assert first["event"] == "table_list_loaded"
        assert first["request"] == "table_list"
        assert first["generation"] == 3
        assert first["count"] == 2
        assert "request" not in second

    def test_level_filters_events(self):
        """Events below the configured level are dropped."""
        stream = io.StringIO()
        configure_logging(log_level="WARNING", log_format="json", stream=stream)
        logger = get_logger("datadock.test")

        logger.info("hidden")
        logger.warning("shown")

        events = [json.loads(line)["event"] for line in stream.getvalue().splitlines()]
        assert events == ["shown"]

    def test_nested_contexts_restore_outer_values(self):
        """Leaving an inner context restores what the outer one bound."""
        stream = io.StringIO()
        configure_logging(log_level="INFO", log_format="json", stream=stream)
        logger = get_logger("datadock.test")

        with log_context(request="table_data", table="customers"):
            with log_context(table="orders"):
                logger.info("inner")
            logger.info("outer")

        inner, outer = [json.loads(line) for line in stream.getvalue().splitlines()]
        assert inner["table"] == "orders"
        assert outer["table"] == "customers"
        assert outer["request"] == "table_data"
