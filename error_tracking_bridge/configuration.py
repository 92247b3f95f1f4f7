# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Error-Tracking-Bridge contributors

"""Derived reporting configuration for the server and client sides."""

from dataclasses import dataclass, field
from typing import Any

from .settings import ReportingSettings


@dataclass(frozen=True)
class ServerReportingConfig:
    """Configuration handed to the server-side reporting client."""

    access_token: str
    environment: str

    def to_dict(self) -> dict[str, Any]:
        return {
            "access_token": self.access_token,
            "environment": self.environment,
        }


@dataclass(frozen=True)
class ClientReportingConfig:
    """Configuration embedded into rendered pages for the browser SDK."""

    access_token: str
    payload: dict[str, Any] = field(default_factory=dict)
    capture_uncaught: bool = True

    def to_dict(self) -> dict[str, Any]:
        """Return the browser-side (camel-cased) configuration shape."""
        return {
            "accessToken": self.access_token,
            "captureUncaught": self.capture_uncaught,
            "payload": dict(self.payload),
        }


class ConfigurationProvider:
    """Read-only view over a ReportingSettings snapshot.

    Missing tokens are an expected state: they disable the dependent feature
    and never raise.
    """

    def __init__(self, settings: ReportingSettings):
        self._settings = settings

    @property
    def settings(self) -> ReportingSettings:
        return self._settings

    def is_server_reporting_enabled(self) -> bool:
        return bool(self._settings.server_access_token)

    def is_client_reporting_enabled(self) -> bool:
        return bool(
            self._settings.client_reporting_enabled
            and self._settings.client_access_token
        )

    def get_server_config(self) -> ServerReportingConfig:
        return ServerReportingConfig(
            access_token=self._settings.server_access_token or "",
            environment=self._settings.environment,
        )

    def get_client_config(self) -> ClientReportingConfig:
        return ClientReportingConfig(
            access_token=self._settings.client_access_token or "",
            payload={"environment": self._settings.environment},
        )
