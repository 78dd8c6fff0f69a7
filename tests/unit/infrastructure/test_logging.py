"""Tests for logging setup."""

import json

from loguru import logger

from filter_grid.infrastructure.logging import LogContext, get_logger, setup_logging


class TestLogging:
    """Test loguru configuration helpers."""

    def teardown_method(self):
        setup_logging(console_output=False)

    def test_json_file_sink(self, tmp_path):
        log_file = tmp_path / "logs" / "log.jsonl"
        setup_logging(log_level="DEBUG", log_file=log_file, console_output=False, json_output=True)

        get_logger("tests").info("hello")
        logger.complete()

        entry = json.loads(log_file.read_text().splitlines()[-1])
        assert entry["record"]["message"] == "hello"
        assert entry["record"]["extra"]["name"] == "tests"

    def test_log_context_adds_fields(self):
        setup_logging(console_output=False)
        records = []
        handler_id = logger.add(lambda m: records.append(m.record), level="INFO")
        try:
            with LogContext(operation="query", rows=3):
                logger.info("inside")
            logger.info("outside")
        finally:
            logger.remove(handler_id)

        assert records[0]["extra"]["operation"] == "query"
        assert records[0]["extra"]["rows"] == 3
        assert "operation" not in records[1]["extra"]

    def test_level_filtering(self, tmp_path):
        log_file = tmp_path / "log.txt"
        setup_logging(log_level="WARNING", log_file=log_file, console_output=False)

        logger.info("quiet")
        logger.warning("loud")
        logger.complete()

        text = log_file.read_text()
        assert "loud" in text
        assert "quiet" not in text
