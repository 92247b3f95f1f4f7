# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Error-Tracking-Bridge contributors

"""Reporting clients the bridge forwards server-side errors to."""

from typing import Any

from .console_error_reporter import ConsoleErrorReporter
from .error_reporter import ErrorReporter
from .sentry_error_reporter import SentryErrorReporter
from .silent_error_reporter import SilentErrorReporter


def create_error_reporter(
    reporter_type: str = "sentry",
    logger_name: str | None = None,
    **kwargs: Any
) -> ErrorReporter:
    """Create a reporting client based on type.

    Args:
        reporter_type: Type of reporter ("sentry", "console", "silent")
        logger_name: Logger name for console reporter (optional)
        **kwargs: Extra ``sentry_sdk.init`` options for the sentry reporter

    Returns:
        ErrorReporter instance

    Raises:
        ValueError: If reporter_type is unknown
    """
    reporter_type = reporter_type.lower()
    if reporter_type == "sentry":
        return SentryErrorReporter(**kwargs)
    elif reporter_type == "console":
        return ConsoleErrorReporter(logger_name=logger_name)
    elif reporter_type == "silent":
        return SilentErrorReporter()
    else:
        raise ValueError(f"Unknown reporter type: {reporter_type}")


__all__ = [
    "ErrorReporter",
    "ConsoleErrorReporter",
    "SentryErrorReporter",
    "SilentErrorReporter",
    "create_error_reporter",
]
