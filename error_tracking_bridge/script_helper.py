# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Error-Tracking-Bridge contributors

"""Client-side helpers that render the browser error-tracking markup."""

import json
from abc import ABC, abstractmethod

from .configuration import ClientReportingConfig
from .settings import DEFAULT_JS_SDK_VERSION

CONFIG_VARIABLE = "_errorTrackingConfig"

# Characters that could close the surrounding <script> element
_SCRIPT_ESCAPES = {
    ord("<"): "\\u003c",
    ord(">"): "\\u003e",
    ord("&"): "\\u0026",
}


def _script_safe_json(value: dict) -> str:
    return json.dumps(value, sort_keys=True).translate(_SCRIPT_ESCAPES)


class ClientScriptHelper(ABC):
    """Abstract base class for client-side markup builders."""

    @abstractmethod
    def build_config_markup(self, config: ClientReportingConfig) -> str:
        """Return a tag that publishes the browser configuration."""
        pass

    @abstractmethod
    def build_init_snippet(self, config: ClientReportingConfig) -> str:
        """Return the markup that loads and starts the browser SDK."""
        pass

    def build_markup(self, config: ClientReportingConfig) -> str:
        """Return config markup followed by the init snippet."""
        return self.build_config_markup(config) + self.build_init_snippet(config)


class SentryScriptHelper(ClientScriptHelper):
    """Builds markup for the Sentry browser bundle.

    The config tag exposes ``window._errorTrackingConfig``; the snippet loads
    the bundle from the Sentry CDN and calls ``Sentry.init`` with the client
    access token as DSN. When ``captureUncaught`` is false the global
    error handlers integration is dropped.
    """

    def __init__(
        self,
        sdk_version: str = DEFAULT_JS_SDK_VERSION,
        cdn_url: str = "https://browser.sentry-cdn.com",
    ):
        self.sdk_version = sdk_version
        self.cdn_url = cdn_url.rstrip("/")

    @property
    def bundle_url(self) -> str:
        return f"{self.cdn_url}/{self.sdk_version}/bundle.min.js"

    def build_config_markup(self, config: ClientReportingConfig) -> str:
        return (
            f"<script>var {CONFIG_VARIABLE} = "
            f"{_script_safe_json(config.to_dict())};</script>"
        )

    def build_init_snippet(self, config: ClientReportingConfig) -> str:
        return (
            f'<script src="{self.bundle_url}" crossorigin="anonymous"></script>'
            "<script>(function (cfg) {"
            "var options = {dsn: cfg.accessToken, environment: cfg.payload.environment};"
            "if (!cfg.captureUncaught) {"
            "options.integrations = function (defaults) {"
            "return defaults.filter(function (i) { return i.name !== 'GlobalHandlers'; });"
            "};"
            "}"
            "Sentry.init(options);"
            f"}})(window.{CONFIG_VARIABLE});</script>"
        )
