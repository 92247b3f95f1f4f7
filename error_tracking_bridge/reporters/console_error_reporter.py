# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Error-Tracking-Bridge contributors

"""Console-based reporting client for local development."""

import logging
import traceback
from typing import Any

from ..configuration import ServerReportingConfig
from .error_reporter import ErrorReporter

logger = logging.getLogger(__name__)


class ConsoleErrorReporter(ErrorReporter):
    """Reporting client that writes reports through Python's logging system.

    Useful where no remote service is reachable; reports keep the same shape
    they would have in the remote tracker.
    """

    def __init__(self, logger_name: str | None = None):
        """Initialize console error reporter.

        Args:
            logger_name: Optional logger name to use (defaults to module logger)
        """
        self.logger = logging.getLogger(logger_name) if logger_name else logger
        self.config: ServerReportingConfig | None = None

    def init(self, config: ServerReportingConfig) -> None:
        if config != self.config:
            self.config = config
            self.logger.debug(f"Console reporter configured for environment {config.environment}")

    def report_error(self, error: BaseException, context: dict[str, Any] | None = None) -> None:
        error_type = type(error).__name__
        stack_trace = "".join(traceback.format_exception(type(error), error, error.__traceback__))

        log_message = f"Exception occurred: {error_type}: {error}"
        if self.config is not None:
            log_message += f" | Environment: {self.config.environment}"
        if context:
            context_str = ", ".join(f"{k}={v}" for k, v in context.items())
            log_message += f" | Context: {context_str}"

        self.logger.error(log_message)
        self.logger.debug(f"Stack trace:\n{stack_trace}")
