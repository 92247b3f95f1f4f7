# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Error-Tracking-Bridge contributors

"""Shared fixtures for bridge tests."""

import pytest

from error_tracking_bridge import (
    ErrorReportingBridge,
    InMemoryEventBus,
    ReportingSettings,
    SilentErrorReporter,
    SilentLogger,
)


@pytest.fixture
def full_settings():
    """Settings with both server and client reporting enabled."""
    return ReportingSettings(
        server_access_token="tok123",
        client_access_token="jstok",
        client_reporting_enabled=True,
        environment="production",
    )


@pytest.fixture
def event_bus():
    return InMemoryEventBus()


@pytest.fixture
def reporter():
    return SilentErrorReporter()


@pytest.fixture
def silent_logger():
    return SilentLogger()


@pytest.fixture
def make_bridge(event_bus, reporter, silent_logger):
    """Factory building a bridge wired to the in-memory bus and reporter."""
    def _make(settings):
        return ErrorReportingBridge(settings, event_bus, reporter, logger=silent_logger)
    return _make
