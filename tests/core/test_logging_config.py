"""
Tests for logging configuration
"""

import json
import logging
import sys

import pytest

from dashforge.core.logging_config import (
    ContextFormatter,
    JSONFormatter,
    get_logger,
    log_with_context,
    setup_logging,
)


@pytest.fixture
def restore_root_logger():
    """Restore root logger handlers and level after setup_logging()"""
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield root
    root.handlers[:] = handlers
    root.setLevel(level)


def make_record(message="Dashboard rendered", **extra):
    record = logging.LogRecord("dashforge.test", logging.INFO, __file__, 10, message, None, None)
    for key, value in extra.items():
        setattr(record, key, value)
    return record


class TestJSONFormatter:
    """Test structured JSON output"""

    def test_basic_fields(self):
        data = json.loads(JSONFormatter().format(make_record()))

        assert data["level"] == "INFO"
        assert data["logger"] == "dashforge.test"
        assert data["message"] == "Dashboard rendered"
        assert data["timestamp"].endswith("Z")

    def test_extra_fields_merged(self):
        record = make_record(extra_fields={"widget_id": "sales", "chart_count": 3})
        data = json.loads(JSONFormatter().format(record))

        assert data["widget_id"] == "sales"
        assert data["chart_count"] == 3

    def test_exception_included(self):
        try:
            raise ValueError("boom")
        except ValueError:
            record = make_record()
            record.exc_info = sys.exc_info()

        data = json.loads(JSONFormatter().format(record))
        assert "ValueError: boom" in data["exception"]


class TestContextFormatter:
    """Test human-readable output"""

    def test_levelname_restored(self):
        formatter = ContextFormatter(fmt="%(levelname)s %(message)s")
        record = make_record()

        assert formatter.format(record).endswith("Dashboard rendered")
        assert record.levelname == "INFO"


class TestSetupLogging:
    """Test setup_logging()"""

    def test_sets_level(self, restore_root_logger):
        setup_logging(level="DEBUG")
        assert restore_root_logger.level == logging.DEBUG
        assert len(restore_root_logger.handlers) == 1

    def test_json_output(self, restore_root_logger):
        setup_logging(json_output=True)
        assert isinstance(restore_root_logger.handlers[0].formatter, JSONFormatter)

    def test_log_file(self, restore_root_logger, tmp_path):
        log_file = tmp_path / "logs" / "render.log"
        setup_logging(log_file=log_file)

        get_logger("dashforge.test").info("written to file")
        for handler in restore_root_logger.handlers:
            handler.flush()

        line = log_file.read_text(encoding="utf-8").strip().splitlines()[-1]
        assert json.loads(line)["message"] == "written to file"
        restore_root_logger.handlers[-1].close()

    def test_jinja2_logger_quieted(self, restore_root_logger):
        setup_logging(level="DEBUG")
        assert logging.getLogger("jinja2").level == logging.WARNING


class TestLogWithContext:
    """Test log_with_context()"""

    def test_context_in_extra_fields(self, caplog):
        logger = get_logger("dashforge.test")

        with caplog.at_level(logging.INFO, logger="dashforge.test"):
            log_with_context(logger, "info", "Dashboard rendered", widget_id="sales")

        record = caplog.records[-1]
        assert record.getMessage() == "Dashboard rendered"
        assert record.extra_fields == {"widget_id": "sales"}
