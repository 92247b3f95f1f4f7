# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Error-Tracking-Bridge contributors

"""Bridge lifecycle: wires the subscribers into the host event bus."""

import threading

from .configuration import ClientReportingConfig, ConfigurationProvider, ServerReportingConfig
from .events import APPLICATION_EXCEPTION, BEFORE_RENDER_TEMPLATE, QUEUE_JOB_ERROR, HostEventBus
from .reporters import ErrorReporter
from .script_helper import ClientScriptHelper, SentryScriptHelper
from .settings import ReportingSettings
from .structured_logging import Logger, create_logger
from .subscribers import ClientScriptInjector, ServerErrorSubscriber


class ErrorReportingBridge:
    """Error reporting bridge for a host application.

    The bridge is constructed once by the host and passed explicitly to
    whatever needs it. ``initialize`` subscribes the callbacks to the host
    event bus; calling it again is a logged no-op.

    Callbacks are always subscribed and check the current settings when an
    event fires, so ``update_settings`` takes effect without re-registering.

    Example:
        bus = InMemoryEventBus()
        bridge = ErrorReportingBridge(load_settings(), bus, SentryErrorReporter())
        bridge.initialize()
        bus.emit(APPLICATION_EXCEPTION, ExceptionEvent(exception))
    """

    def __init__(
        self,
        settings: ReportingSettings,
        event_bus: HostEventBus,
        reporter: ErrorReporter,
        script_helper: ClientScriptHelper | None = None,
        logger: Logger | None = None,
        name: str = "Error Tracking Bridge",
    ):
        self.name = name
        self.event_bus = event_bus
        self.reporter = reporter
        self.logger = logger or create_logger()
        self._configuration = ConfigurationProvider(settings)
        self.server_subscriber = ServerErrorSubscriber(self._configuration, reporter)
        self.script_injector = ClientScriptInjector(
            self._configuration, script_helper or SentryScriptHelper()
        )
        self._initialized = False
        self._lock = threading.Lock()

    @property
    def initialized(self) -> bool:
        return self._initialized

    @property
    def configuration(self) -> ConfigurationProvider:
        return self._configuration

    @property
    def settings(self) -> ReportingSettings:
        return self._configuration.settings

    @property
    def server_config(self) -> ServerReportingConfig:
        return self._configuration.get_server_config()

    @property
    def client_config(self) -> ClientReportingConfig:
        return self._configuration.get_client_config()

    def _subscriptions(self):
        return [
            (APPLICATION_EXCEPTION, self.server_subscriber.handle_exception),
            (QUEUE_JOB_ERROR, self.server_subscriber.handle_job_error),
            (BEFORE_RENDER_TEMPLATE, self.script_injector.handle_before_render),
        ]

    def initialize(self) -> bool:
        """Subscribe the bridge callbacks to the host event bus.

        Returns:
            True if callbacks were registered, False if the bridge was
            already initialized
        """
        with self._lock:
            if self._initialized:
                self.logger.warning(
                    f"{self.name} already initialized; ignoring repeated initialization"
                )
                return False

            for event_name, callback in self._subscriptions():
                self.event_bus.subscribe(event_name, callback)
            self._initialized = True

        self._log_loaded()
        return True

    def shutdown(self) -> None:
        """Remove the bridge callbacks from the host event bus."""
        with self._lock:
            if not self._initialized:
                return
            for event_name, callback in self._subscriptions():
                self.event_bus.unsubscribe(event_name, callback)
            self._initialized = False
        self.logger.info(f"{self.name} plugin unloaded")

    def update_settings(self, settings: ReportingSettings) -> None:
        """Swap in a new settings snapshot, e.g. after the host saved settings."""
        configuration = ConfigurationProvider(settings)
        self._configuration = configuration
        self.server_subscriber.configuration = configuration
        self.script_injector.configuration = configuration
        self.logger.info(
            f"{self.name} settings updated",
            server_reporting=configuration.is_server_reporting_enabled(),
            client_reporting=configuration.is_client_reporting_enabled(),
        )

    def _log_loaded(self) -> None:
        self.logger.info(
            f"{self.name} plugin loaded",
            environment=self.settings.environment,
            server_reporting=self._configuration.is_server_reporting_enabled(),
            client_reporting=self._configuration.is_client_reporting_enabled(),
        )
