# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Error-Tracking-Bridge contributors

"""Event callbacks that forward host errors and inject client markup."""

import logging

from .configuration import ConfigurationProvider
from .events import ExceptionEvent, JobErrorEvent, TemplateEvent
from .reporters import ErrorReporter
from .script_helper import ClientScriptHelper

logger = logging.getLogger(__name__)

HEAD_MARKUP_KEY = "error-tracking-bridge"


class ServerErrorSubscriber:
    """Forwards unhandled exceptions and job failures to the reporting client.

    Both handlers are gated on server reporting being enabled. The client is
    (re)initialized with the current server config on every event; it is
    expected to make that cheap. Failures raised by the client propagate.
    """

    def __init__(self, configuration: ConfigurationProvider, reporter: ErrorReporter):
        self.configuration = configuration
        self.reporter = reporter

    def handle_exception(self, event: ExceptionEvent) -> None:
        self._forward(event.exception)

    def handle_job_error(self, event: JobErrorEvent) -> None:
        self._forward(event.exception, context=event.context())

    def _forward(self, error: BaseException, context: dict | None = None) -> None:
        if not self.configuration.is_server_reporting_enabled():
            logger.debug(f"Server reporting disabled; not reporting {type(error).__name__}")
            return

        self.reporter.init(self.configuration.get_server_config())
        self.reporter.report_error(error, context=context)


class ClientScriptInjector:
    """Registers the browser error-tracking markup before templates render."""

    def __init__(self, configuration: ConfigurationProvider, script_helper: ClientScriptHelper):
        self.configuration = configuration
        self.script_helper = script_helper

    def handle_before_render(self, event: TemplateEvent) -> None:
        if not self.configuration.is_client_reporting_enabled():
            return

        markup = self.script_helper.build_markup(self.configuration.get_client_config())
        # The fixed key lets the view collapse repeated renders in one response
        event.view.register_head_markup(markup, key=HEAD_MARKUP_KEY)
