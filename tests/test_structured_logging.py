# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Error-Tracking-Bridge contributors

"""Tests for the structured logging abstraction."""

import json
import logging
import os
from unittest.mock import patch

import pytest

from error_tracking_bridge import Logger, SilentLogger, StdoutLogger, create_logger


class TestLoggerFactory:
    """Tests for create_logger factory function."""

    def test_create_stdout_logger(self):
        logger = create_logger(logger_type="stdout", level="INFO")

        assert isinstance(logger, StdoutLogger)
        assert isinstance(logger, Logger)
        assert logger.level == "INFO"

    def test_create_silent_logger(self):
        assert isinstance(create_logger(logger_type="silent"), SilentLogger)

    def test_create_unknown_logger_type(self):
        with pytest.raises(ValueError, match="Unknown logger_type"):
            create_logger(logger_type="invalid")

    def test_create_logger_from_env(self):
        with patch.dict(os.environ, {
            "LOG_TYPE": "silent",
            "LOG_LEVEL": "debug",
            "LOG_NAME": "env-bridge",
        }):
            logger = create_logger()

        assert isinstance(logger, SilentLogger)
        assert logger.level == "DEBUG"
        assert logger.name == "env-bridge"


class TestStdoutLogger:
    """Tests for StdoutLogger."""

    def test_invalid_level(self):
        with pytest.raises(ValueError, match="Invalid log level"):
            StdoutLogger(level="LOUD")

    def test_outputs_json(self, capsys):
        logger = StdoutLogger(name="test-bridge")

        logger.info("Bridge loaded", environment="production")

        entry = json.loads(capsys.readouterr().out.strip())
        assert entry["level"] == "INFO"
        assert entry["logger"] == "test-bridge"
        assert entry["message"] == "Bridge loaded"
        assert entry["extra"] == {"environment": "production"}
        assert entry["timestamp"].endswith("Z")

    def test_filters_below_level(self, capsys):
        logger = StdoutLogger(level="WARNING")

        logger.info("hidden")
        logger.warning("shown")

        output = capsys.readouterr().out
        assert "hidden" not in output
        assert "shown" in output

    def test_mirrors_to_stdlib_logging(self, caplog):
        logger = StdoutLogger(name="test-bridge-mirror")

        with caplog.at_level(logging.INFO):
            logger.error("something failed")

        assert "something failed" in caplog.text


class TestSilentLogger:
    """Tests for SilentLogger."""

    def test_stores_logs(self):
        logger = SilentLogger()

        logger.info("one", key="value")
        logger.debug("two")

        assert logger.get_logs("INFO") == [{"level": "INFO", "message": "one", "extra": {"key": "value"}}]
        assert logger.has_log("two", level="DEBUG")
        assert not logger.has_log("two", level="INFO")

    def test_clear_logs(self):
        logger = SilentLogger()
        logger.warning("x")

        logger.clear_logs()

        assert logger.logs == []
