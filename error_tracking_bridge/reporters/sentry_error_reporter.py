# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Error-Tracking-Bridge contributors

"""Sentry reporting client."""

import logging
import threading
from typing import Any

import sentry_sdk
from sentry_sdk.utils import BadDsn

from ..configuration import ServerReportingConfig
from .error_reporter import ErrorReporter

logger = logging.getLogger(__name__)


class SentryErrorReporter(ErrorReporter):
    """Sentry reporting client for cloud-based error tracking.

    The server access token is used as the Sentry DSN. ``init`` only
    re-initializes the SDK when the token or environment changed, so the
    bridge may call it on every event.

    A token the SDK rejects as a DSN is logged once and reports are skipped
    until a different config is applied; a misconfigured token never breaks
    the host's own error handling.

    Example:
        reporter = SentryErrorReporter()
        reporter.init(ServerReportingConfig(access_token="https://...@sentry.io/1", environment="production"))
        reporter.report_error(exception, context={"job_id": "42"})
    """

    def __init__(self, **sdk_options: Any):
        """Initialize Sentry reporting client.

        Args:
            **sdk_options: Extra keyword arguments for ``sentry_sdk.init``
                (e.g. ``traces_sample_rate``)
        """
        self.sdk_options = sdk_options
        self.config: ServerReportingConfig | None = None
        self.rejected_config: ServerReportingConfig | None = None
        self._lock = threading.Lock()

    @property
    def is_initialized(self) -> bool:
        return self.config is not None

    def init(self, config: ServerReportingConfig) -> None:
        with self._lock:
            if config == self.config or config == self.rejected_config:
                return
            try:
                sentry_sdk.init(
                    dsn=config.access_token,
                    environment=config.environment,
                    **self.sdk_options,
                )
            except BadDsn as e:
                self.config = None
                self.rejected_config = config
                logger.warning(f"Sentry rejected the server access token as a DSN ({e}); reports are skipped")
                return
            self.config = config
            self.rejected_config = None
        logger.debug(f"Sentry client initialized for environment {config.environment}")

    def report_error(self, error: BaseException, context: dict[str, Any] | None = None) -> None:
        if not self.is_initialized:
            if self.rejected_config is not None:
                logger.debug(f"Skipping report of {type(error).__name__}: no valid Sentry DSN")
                return
            raise RuntimeError("Sentry reporter not initialized; call init() first")

        with sentry_sdk.new_scope() as scope:
            scope.set_level("error")
            if context:
                # Tags for simple key-value pairs, full context as a dictionary
                for key, value in context.items():
                    scope.set_tag(key, str(value))
                scope.set_context("error_context", context)
            sentry_sdk.capture_exception(error)
