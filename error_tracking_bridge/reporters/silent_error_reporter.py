# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Error-Tracking-Bridge contributors

"""Silent reporting client that stores reports in memory for testing."""

from typing import Any

from ..configuration import ServerReportingConfig
from .error_reporter import ErrorReporter


class SilentErrorReporter(ErrorReporter):
    """Reporting client that records every call instead of sending it.

    This implementation is useful for unit tests where you want to verify
    what the bridge forwards without producing network traffic.
    """

    def __init__(self):
        self.init_calls: list[ServerReportingConfig] = []
        self.reported_errors: list[dict[str, Any]] = []

    @property
    def config(self) -> ServerReportingConfig | None:
        """The most recently applied configuration."""
        return self.init_calls[-1] if self.init_calls else None

    def init(self, config: ServerReportingConfig) -> None:
        self.init_calls.append(config)

    def report_error(self, error: BaseException, context: dict[str, Any] | None = None) -> None:
        self.reported_errors.append({
            "error": error,
            "error_type": type(error).__name__,
            "error_message": str(error),
            "level": "error",
            "config": self.config,
            "context": context or {},
        })

    def get_errors(self, error_type: str | None = None) -> list[dict[str, Any]]:
        """Get all reported errors, optionally filtered by type.

        Args:
            error_type: Optional error type to filter by

        Returns:
            List of reported error dictionaries
        """
        if error_type:
            return [e for e in self.reported_errors if e["error_type"] == error_type]
        return self.reported_errors

    def clear(self) -> None:
        """Clear all stored calls."""
        self.init_calls.clear()
        self.reported_errors.clear()

    def has_errors(self) -> bool:
        return len(self.reported_errors) > 0
