"""Tests for aio_config.logger."""

import json
import logging
import os
from unittest import mock

import pytest

from aio_config.logger import (
    Logger,
    MemoryLogger,
    StructuredLogger,
    create_logger,
    get_logger,
)


class TestLoggerInterface:
    """Tests for the Logger abstract interface."""

    def test_logger_is_abstract(self):
        with pytest.raises(TypeError):
            Logger()  # type: ignore

    def test_logger_has_required_methods(self):
        for method in ("debug", "info", "warning", "error", "critical"):
            assert hasattr(Logger, method)


class TestMemoryLogger:
    """Tests for the MemoryLogger implementation."""

    def test_records_entries(self):
        logger = MemoryLogger()
        logger.debug("first", path="/tmp/x")
        logger.error("second")

        assert logger.messages == ["first", "second"]
        assert logger.entries[0].level == "DEBUG"
        assert logger.entries[0].extra == {"path": "/tmp/x"}
        assert logger.entries[1].level == "ERROR"

    def test_all_levels(self):
        logger = MemoryLogger()
        logger.debug("d")
        logger.info("i")
        logger.warning("w")
        logger.error("e")
        logger.critical("c")
        assert [e.level for e in logger.entries] == ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]

    def test_clear(self):
        logger = MemoryLogger()
        logger.info("x")
        logger.clear()
        assert logger.entries == []


class TestStructuredLogger:
    """Tests for the StructuredLogger implementation."""

    def test_writes_to_stderr(self, capsys):
        logger = StructuredLogger(name="test-stderr", level=logging.DEBUG)
        logger.debug("Test message")

        captured = capsys.readouterr()
        assert captured.out == ""
        assert "DEBUG" in captured.err
        assert "Test message" in captured.err
        assert "test-stderr" in captured.err

    def test_default_level_hides_debug(self, capsys):
        logger = StructuredLogger(name="test-default-level")
        logger.debug("hidden")
        logger.warning("shown")

        captured = capsys.readouterr()
        assert "hidden" not in captured.err
        assert "shown" in captured.err

    def test_json_format(self, capsys):
        logger = StructuredLogger(name="test-json", json_format=True)
        logger.warning("Test message", path="/tmp/.aio")

        log_entry = json.loads(capsys.readouterr().err.strip())
        assert log_entry["level"] == "WARNING"
        assert log_entry["message"] == "Test message"
        assert log_entry["logger"] == "test-json"
        assert log_entry["path"] == "/tmp/.aio"

    def test_text_includes_extras(self, capsys):
        logger = StructuredLogger(name="test-text-extras")
        logger.error("Test message", error="boom")
        assert "error=boom" in capsys.readouterr().err

    def test_reserved_kwargs_prefixed(self, capsys):
        logger = StructuredLogger(name="test-reserved", json_format=True)
        logger.error("Test", name="should be prefixed")
        assert "_name" in json.loads(capsys.readouterr().err.strip())

    def test_file_output(self, tmp_path):
        log_file = tmp_path / "aio.log"
        logger = StructuredLogger(name="test-file", log_file=str(log_file))
        logger.error("File test message")
        for handler in logger._logger.handlers:
            handler.flush()
        assert "File test message" in log_file.read_text()

    def test_unusable_log_file_falls_back(self, tmp_path, capsys):
        StructuredLogger(name="test-bad-file", log_file=str(tmp_path / "missing" / "x.log"))
        assert "Failed to setup log file" in capsys.readouterr().err

    def test_reinit_does_not_duplicate_handlers(self):
        StructuredLogger(name="test-reinit")
        logger = StructuredLogger(name="test-reinit")
        assert len(logger._logger.handlers) == 1


class TestLoggerFactoryFunctions:
    """Tests for create_logger and get_logger."""

    def test_create_logger_returns_logger(self):
        assert isinstance(create_logger(name="test-factory"), Logger)

    def test_level_from_env(self, capsys):
        with mock.patch.dict(os.environ, {"TEST_ENV_LEVEL_LOG_LEVEL": "DEBUG"}):
            logger = create_logger(name="test-env-level")
        logger.debug("debug visible")
        assert "debug visible" in capsys.readouterr().err

    def test_json_from_env(self, capsys):
        with mock.patch.dict(os.environ, {"TEST_ENV_JSON_LOG_JSON": "true"}):
            logger = create_logger(name="test-env-json")
        logger.warning("as json")
        assert json.loads(capsys.readouterr().err.strip())["message"] == "as json"

    def test_explicit_level_wins(self, capsys):
        with mock.patch.dict(os.environ, {"TEST_EXPLICIT_LOG_LEVEL": "DEBUG"}):
            logger = create_logger(name="test-explicit", level=logging.ERROR)
        logger.warning("hidden")
        assert "hidden" not in capsys.readouterr().err

    def test_get_logger_default_name(self):
        logger = get_logger()
        assert isinstance(logger, StructuredLogger)
        assert logger.name == "aioconfig"
