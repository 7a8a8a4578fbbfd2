"""Tests for centralized logging."""

import json
import logging
import sys
from journeystats.infrastructure.logging import (
    ConsoleFormatter,
    configure_logging,
    extra_fields,
    level_from_name,
    JSONFormatter,
)


class TestConfigureLogging:
    def test_default_level(self):
        configure_logging(level=logging.INFO)
        logger = logging.getLogger("journeystats")
        assert logger.level == logging.INFO

    def test_debug_level(self):
        configure_logging(level=logging.DEBUG)
        logger = logging.getLogger("journeystats")
        assert logger.level == logging.DEBUG

    def test_json_format(self):
        configure_logging(level=logging.INFO, json_format=True)
        logger = logging.getLogger("journeystats")
        assert len(logger.handlers) == 1
        assert isinstance(logger.handlers[0].formatter, JSONFormatter)

    def test_human_format(self):
        configure_logging(level=logging.INFO, json_format=False)
        logger = logging.getLogger("journeystats")
        assert len(logger.handlers) == 1
        assert isinstance(logger.handlers[0].formatter, ConsoleFormatter)

    def test_replaces_handlers(self):
        configure_logging(level=logging.INFO)
        configure_logging(level=logging.DEBUG)
        logger = logging.getLogger("journeystats")
        assert len(logger.handlers) == 1


class TestLevelFromName:
    def test_known_names(self):
        assert level_from_name("debug") == logging.DEBUG
        assert level_from_name("INFO") == logging.INFO

    def test_unknown_name_falls_back(self):
        assert level_from_name("chatty") == logging.WARNING
        assert level_from_name("", default=logging.ERROR) == logging.ERROR


def _record(msg, level=logging.INFO, exc_info=None, **extra):
    record = logging.LogRecord(
        name="test",
        level=level,
        pathname="test.py",
        lineno=1,
        msg=msg,
        args=(),
        exc_info=exc_info,
    )
    for key, value in extra.items():
        setattr(record, key, value)
    return record


class TestJSONFormatter:
    def test_format_basic(self):
        data = json.loads(JSONFormatter().format(_record("hello world")))
        assert data["message"] == "hello world"
        assert data["level"] == "INFO"
        assert data["logger"] == "test"
        assert "timestamp" in data

    def test_format_extra_fields(self):
        record = _record("tracked", analytics_event="deploy:success")
        data = json.loads(JSONFormatter().format(record))
        assert data["analytics_event"] == "deploy:success"
        assert "pathname" not in data

    def test_format_with_exception(self):
        try:
            raise ValueError("test error")
        except ValueError:
            exc_info = sys.exc_info()

        record = _record("error occurred", level=logging.ERROR, exc_info=exc_info)
        data = json.loads(JSONFormatter().format(record))
        assert "exception" in data
        assert "ValueError" in data["exception"]


class TestConsoleFormatter:
    def test_plain_message(self):
        line = ConsoleFormatter().format(_record("hello world"))
        assert line.endswith("[INFO] test: hello world")

    def test_appends_extra_fields(self):
        record = _record("Tracking deploy:success", analytics_event="deploy:success")
        line = ConsoleFormatter().format(record)
        assert line.endswith("test: Tracking deploy:success [analytics_event=deploy:success]")

    def test_extra_fields_ignores_standard_attributes(self):
        record = _record("msg", analytics_event="deploy:error")
        assert extra_fields(record) == {"analytics_event": "deploy:error"}
