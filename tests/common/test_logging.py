"""Tests for logging setup and formatters."""

import json
import logging
import sys

import pytest

from hashbrown.common.logging import (
    DetailedFormatter,
    LogContext,
    SimpleFormatter,
    StructuredFormatter,
    setup_logging,
)


@pytest.fixture
def restore_root_logger():
    """Restore root logger handlers and level after the test."""
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield root
    for handler in root.handlers:
        if handler not in handlers:
            handler.close()
    root.handlers[:] = handlers
    root.setLevel(level)


def _record(message="hello", **extra):
    record = logging.LogRecord(
        name="hashbrown.test",
        level=logging.INFO,
        pathname=__file__,
        lineno=10,
        msg=message,
        args=(),
        exc_info=None,
    )
    for key, value in extra.items():
        setattr(record, key, value)
    return record


class TestStructuredFormatter:
    """Tests for the JSON formatter."""

    def test_outputs_json_with_core_fields(self):
        output = json.loads(StructuredFormatter().format(_record()))

        assert output["level"] == "INFO"
        assert output["logger"] == "hashbrown.test"
        assert output["message"] == "hello"
        assert "timestamp" in output

    def test_includes_extra_fields(self):
        record = _record(extra_fields={"command": "digest", "files": 2})

        output = json.loads(StructuredFormatter().format(record))

        assert output["command"] == "digest"
        assert output["files"] == 2

    def test_includes_exception_info(self):
        try:
            raise OSError("disk gone")
        except OSError:
            record = _record(exc_info=sys.exc_info())

        output = json.loads(StructuredFormatter().format(record))

        assert output["exception"]["type"] == "OSError"
        assert output["exception"]["message"] == "disk gone"


class TestSetupLogging:
    """Tests for setup_logging."""

    def test_sets_level_and_single_console_handler(self, restore_root_logger):
        setup_logging(level="debug", format="detailed")

        root = restore_root_logger
        assert root.level == logging.DEBUG
        assert len(root.handlers) == 1
        assert isinstance(root.handlers[0].formatter, DetailedFormatter)

    def test_unknown_format_falls_back_to_simple(self, restore_root_logger):
        setup_logging(format="fancy")

        assert isinstance(restore_root_logger.handlers[0].formatter, SimpleFormatter)

    def test_file_handler_writes_json(self, restore_root_logger, tmp_path):
        log_file = tmp_path / "logs" / "hashbrown.log"

        setup_logging(level="INFO", log_file=log_file)
        logging.getLogger("hashbrown.test").info("to file")
        for handler in restore_root_logger.handlers:
            handler.flush()

        assert log_file.exists()
        line = log_file.read_text(encoding="utf-8").strip().splitlines()[-1]
        assert json.loads(line)["message"] == "to file"


class TestLogContext:
    """Tests for LogContext."""

    def test_adds_fields_inside_block_only(self):
        logger = logging.getLogger("hashbrown.test")
        factory_before = logging.getLogRecordFactory()

        with LogContext(logger, command="compare"):
            record = logging.getLogRecordFactory()(
                "hashbrown.test", logging.INFO, __file__, 1, "msg", (), None
            )
            assert record.extra_fields == {"command": "compare"}

        assert logging.getLogRecordFactory() is factory_before
