# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Error-Tracking-Bridge contributors

"""Abstract reporting client interface used by the bridge."""

from abc import ABC, abstractmethod
from typing import Any

from ..configuration import ServerReportingConfig


class ErrorReporter(ABC):
    """Abstract base class for reporting clients.

    The bridge treats a reporting client as a black box: it configures it
    with ``init`` and hands it errors with ``report_error``. Transport,
    batching and retry are the client's concern.
    """

    @abstractmethod
    def init(self, config: ServerReportingConfig) -> None:
        """Configure the client.

        Called lazily on every reported event, so implementations must make
        repeated calls with an unchanged config cheap.

        Args:
            config: Access token and environment to report with
        """
        pass

    @abstractmethod
    def report_error(self, error: BaseException, context: dict[str, Any] | None = None) -> None:
        """Submit an exception as an error-level report.

        Args:
            error: The exception to report, unmodified
            context: Optional dictionary with additional context (job id, etc.)
        """
        pass
