# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Error-Tracking-Bridge contributors

"""Error Tracking Bridge.

Forwards a host application's unhandled exceptions and queue-job failures
to an error-tracking service, and injects the browser error-tracking
snippet into rendered pages.
"""

from .bridge import ErrorReportingBridge
from .configuration import ClientReportingConfig, ConfigurationProvider, ServerReportingConfig
from .events import (
    APPLICATION_EXCEPTION,
    BEFORE_RENDER_TEMPLATE,
    QUEUE_JOB_ERROR,
    ExceptionEvent,
    HostEventBus,
    InMemoryEventBus,
    JobErrorEvent,
    TemplateEvent,
)
from .providers import ConfigProvider, EnvConfigProvider, StaticConfigProvider
from .reporters import (
    ConsoleErrorReporter,
    ErrorReporter,
    SentryErrorReporter,
    SilentErrorReporter,
    create_error_reporter,
)
from .script_helper import ClientScriptHelper, SentryScriptHelper
from .settings import (
    DEFAULT_JS_SDK_VERSION,
    DEFAULT_REPORTER,
    JS_SDK_VERSION_KEY,
    REPORTER_KEY,
    ReportingSettings,
    load_settings,
)
from .structured_logging import Logger, SilentLogger, StdoutLogger, create_logger
from .view import HostView, InMemoryView

__version__ = "0.1.0"


def create_bridge(
    event_bus: HostEventBus,
    provider: ConfigProvider | None = None,
    logger: Logger | None = None,
) -> ErrorReportingBridge:
    """Build an ErrorReportingBridge from a settings provider.

    Args:
        event_bus: The host's event bus
        provider: Settings source. Defaults to environment variables.
        logger: Optional structured logger for lifecycle diagnostics

    Returns:
        An uninitialized ErrorReportingBridge; call ``initialize()`` on it
    """
    provider = provider or EnvConfigProvider()
    reporter = create_error_reporter(provider.get_str(REPORTER_KEY, DEFAULT_REPORTER))
    script_helper = SentryScriptHelper(
        sdk_version=provider.get_str(JS_SDK_VERSION_KEY, DEFAULT_JS_SDK_VERSION)
    )
    return ErrorReportingBridge(
        load_settings(provider),
        event_bus,
        reporter,
        script_helper=script_helper,
        logger=logger,
    )


__all__ = [
    "__version__",
    # Lifecycle
    "ErrorReportingBridge",
    "create_bridge",
    # Settings and configuration
    "ReportingSettings",
    "load_settings",
    "ConfigProvider",
    "EnvConfigProvider",
    "StaticConfigProvider",
    "ConfigurationProvider",
    "ServerReportingConfig",
    "ClientReportingConfig",
    # Host interfaces
    "HostEventBus",
    "InMemoryEventBus",
    "HostView",
    "InMemoryView",
    "APPLICATION_EXCEPTION",
    "QUEUE_JOB_ERROR",
    "BEFORE_RENDER_TEMPLATE",
    "ExceptionEvent",
    "JobErrorEvent",
    "TemplateEvent",
    # Reporting clients
    "ErrorReporter",
    "SentryErrorReporter",
    "ConsoleErrorReporter",
    "SilentErrorReporter",
    "create_error_reporter",
    "ClientScriptHelper",
    "SentryScriptHelper",
    # Logging
    "Logger",
    "StdoutLogger",
    "SilentLogger",
    "create_logger",
]
