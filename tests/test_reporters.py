# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Error-Tracking-Bridge contributors

"""Tests for reporting clients."""

import logging
from unittest.mock import patch

import pytest
from sentry_sdk.utils import BadDsn

from error_tracking_bridge import (
    ConsoleErrorReporter,
    ErrorReporter,
    SentryErrorReporter,
    ServerReportingConfig,
    SilentErrorReporter,
    create_error_reporter,
)

SENTRY_SDK = "error_tracking_bridge.reporters.sentry_error_reporter.sentry_sdk"
CONFIG = ServerReportingConfig(access_token="https://key@sentry.example/1", environment="production")


class TestErrorReporterFactory:
    """Tests for create_error_reporter factory function."""

    def test_create_sentry_reporter(self):
        reporter = create_error_reporter(reporter_type="sentry")

        assert isinstance(reporter, SentryErrorReporter)
        assert isinstance(reporter, ErrorReporter)
        assert reporter.is_initialized is False

    def test_create_sentry_reporter_with_sdk_options(self):
        reporter = create_error_reporter(reporter_type="sentry", traces_sample_rate=0.5)

        assert reporter.sdk_options == {"traces_sample_rate": 0.5}

    def test_create_console_reporter_with_logger_name(self):
        reporter = create_error_reporter(reporter_type="console", logger_name="test.logger")

        assert isinstance(reporter, ConsoleErrorReporter)
        assert reporter.logger.name == "test.logger"

    def test_create_silent_reporter(self):
        assert isinstance(create_error_reporter(reporter_type="SILENT"), SilentErrorReporter)

    def test_create_unknown_reporter_type(self):
        with pytest.raises(ValueError, match="Unknown reporter type"):
            create_error_reporter(reporter_type="invalid")


class TestSentryErrorReporter:
    """Tests for SentryErrorReporter with the SDK mocked out."""

    def test_init_configures_sdk(self):
        reporter = SentryErrorReporter(traces_sample_rate=0.0)

        with patch(SENTRY_SDK) as sdk:
            reporter.init(CONFIG)

        sdk.init.assert_called_once_with(
            dsn="https://key@sentry.example/1",
            environment="production",
            traces_sample_rate=0.0,
        )
        assert reporter.is_initialized is True
        assert reporter.config == CONFIG

    def test_repeated_init_with_same_config_is_cheap(self):
        reporter = SentryErrorReporter()

        with patch(SENTRY_SDK) as sdk:
            reporter.init(CONFIG)
            reporter.init(ServerReportingConfig(access_token=CONFIG.access_token, environment="production"))

        assert sdk.init.call_count == 1

    def test_changed_config_reinitializes(self):
        reporter = SentryErrorReporter()

        with patch(SENTRY_SDK) as sdk:
            reporter.init(CONFIG)
            reporter.init(ServerReportingConfig(access_token=CONFIG.access_token, environment="staging"))

        assert sdk.init.call_count == 2
        assert sdk.init.call_args.kwargs["environment"] == "staging"

    def test_report_error_captures_exception(self):
        reporter = SentryErrorReporter()
        error = ValueError("boom")

        with patch(SENTRY_SDK) as sdk:
            reporter.init(CONFIG)
            reporter.report_error(error)

        sdk.capture_exception.assert_called_once_with(error)
        scope = sdk.new_scope.return_value.__enter__.return_value
        scope.set_level.assert_called_once_with("error")
        scope.set_context.assert_not_called()

    def test_report_error_with_context(self):
        reporter = SentryErrorReporter()
        error = RuntimeError("job failed")

        with patch(SENTRY_SDK) as sdk:
            reporter.init(CONFIG)
            reporter.report_error(error, context={"job_id": 42})

        scope = sdk.new_scope.return_value.__enter__.return_value
        scope.set_tag.assert_called_once_with("job_id", "42")
        scope.set_context.assert_called_once_with("error_context", {"job_id": 42})
        sdk.capture_exception.assert_called_once_with(error)

    def test_report_before_init_raises(self):
        reporter = SentryErrorReporter()

        with pytest.raises(RuntimeError, match="not initialized"):
            reporter.report_error(ValueError("boom"))

    def test_rejected_dsn_is_logged_not_raised(self, caplog):
        reporter = SentryErrorReporter()
        rejected = ServerReportingConfig(access_token="tok123", environment="production")

        with caplog.at_level(logging.WARNING):
            reporter.init(rejected)

        assert reporter.is_initialized is False
        assert reporter.rejected_config == rejected
        assert "rejected the server access token" in caplog.text

    def test_report_after_rejected_dsn_is_skipped(self):
        reporter = SentryErrorReporter()
        reporter.init(ServerReportingConfig(access_token="tok123", environment="production"))

        with patch(SENTRY_SDK) as sdk:
            reporter.report_error(ValueError("boom"))

        sdk.capture_exception.assert_not_called()

    def test_rejected_dsn_not_retried_until_config_changes(self):
        reporter = SentryErrorReporter()
        rejected = ServerReportingConfig(access_token="tok123", environment="production")

        with patch(SENTRY_SDK) as sdk:
            sdk.init.side_effect = [BadDsn("Unsupported scheme ''"), None]
            reporter.init(rejected)
            reporter.init(rejected)
            reporter.init(CONFIG)

        assert sdk.init.call_count == 2
        assert reporter.config == CONFIG
        assert reporter.rejected_config is None


class TestConsoleErrorReporter:
    """Tests for ConsoleErrorReporter."""

    def test_report_error(self, caplog):
        reporter = ConsoleErrorReporter()
        reporter.init(CONFIG)

        try:
            raise ValueError("Test error")
        except ValueError as e:
            with caplog.at_level(logging.ERROR):
                reporter.report_error(e, context={"job_id": "7"})

        assert "ValueError: Test error" in caplog.text
        assert "Environment: production" in caplog.text
        assert "job_id=7" in caplog.text


class TestSilentErrorReporter:
    """Tests for SilentErrorReporter."""

    def test_records_init_and_reports(self):
        reporter = SilentErrorReporter()
        error = KeyError("missing")

        reporter.init(CONFIG)
        reporter.report_error(error, context={"source": "queue"})

        assert reporter.init_calls == [CONFIG]
        assert reporter.has_errors()
        report = reporter.get_errors("KeyError")[0]
        assert report["error"] is error
        assert report["config"] == CONFIG
        assert report["level"] == "error"
        assert report["context"] == {"source": "queue"}

    def test_clear(self):
        reporter = SilentErrorReporter()
        reporter.init(CONFIG)
        reporter.report_error(ValueError("x"))

        reporter.clear()

        assert reporter.config is None
        assert not reporter.has_errors()
