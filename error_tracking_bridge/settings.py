# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Error-Tracking-Bridge contributors

"""Persisted reporting settings and the keys they are loaded from."""

from dataclasses import dataclass

from .providers import ConfigProvider, EnvConfigProvider

SERVER_TOKEN_KEY = "ERROR_TRACKING_SERVER_TOKEN"
CLIENT_TOKEN_KEY = "ERROR_TRACKING_CLIENT_TOKEN"
CLIENT_ENABLED_KEY = "ERROR_TRACKING_CLIENT_ENABLED"
ENVIRONMENT_KEY = "ERROR_TRACKING_ENVIRONMENT"
REPORTER_KEY = "ERROR_TRACKING_REPORTER"
JS_SDK_VERSION_KEY = "ERROR_TRACKING_JS_SDK_VERSION"

DEFAULT_ENVIRONMENT = "production"
DEFAULT_REPORTER = "sentry"
DEFAULT_JS_SDK_VERSION = "8.40.0"


@dataclass(frozen=True)
class ReportingSettings:
    """Snapshot of the bridge settings.

    Attributes:
        server_access_token: Token (Sentry DSN) for server-side reports.
            Absent or blank disables server reporting.
        client_access_token: Token (browser DSN) embedded in rendered pages.
        client_reporting_enabled: Whether pages get the client snippet.
        environment: Environment name attached to every report.
    """

    server_access_token: str | None = None
    client_access_token: str | None = None
    client_reporting_enabled: bool = False
    environment: str = DEFAULT_ENVIRONMENT


def load_settings(provider: ConfigProvider | None = None) -> ReportingSettings:
    """Build a ReportingSettings snapshot from a configuration provider.

    Args:
        provider: Settings source. Defaults to the process environment.

    Returns:
        ReportingSettings with blank values normalized to None
    """
    provider = provider or EnvConfigProvider()
    return ReportingSettings(
        server_access_token=provider.get_str(SERVER_TOKEN_KEY),
        client_access_token=provider.get_str(CLIENT_TOKEN_KEY),
        client_reporting_enabled=provider.get_bool(CLIENT_ENABLED_KEY, False),
        environment=provider.get_str(ENVIRONMENT_KEY, DEFAULT_ENVIRONMENT),
    )
