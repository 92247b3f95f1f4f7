# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Error-Tracking-Bridge contributors

"""Host event bus interface and the event payloads the bridge consumes."""

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Callable

logger = logging.getLogger(__name__)

APPLICATION_EXCEPTION = "application.exception"
QUEUE_JOB_ERROR = "queue.job_error"
BEFORE_RENDER_TEMPLATE = "view.before_render_template"


@dataclass
class ExceptionEvent:
    """Fired by the host before it handles an unhandled exception."""

    exception: BaseException


@dataclass
class JobErrorEvent:
    """Fired by the host's job queue after a job raised during execution."""

    exception: BaseException
    job_id: str | None = None
    job_description: str | None = None

    def context(self) -> dict[str, Any]:
        """Job metadata to attach to the report."""
        context: dict[str, Any] = {"source": "queue"}
        if self.job_id is not None:
            context["job_id"] = self.job_id
        if self.job_description is not None:
            context["job_description"] = self.job_description
        return context


@dataclass
class TemplateEvent:
    """Fired once per template render, before output is produced.

    Attributes:
        template: Name of the template being rendered
        context: Template variables
        view: Host view receiving registered markup (a ``HostView``)
    """

    template: str | None
    view: Any
    context: dict[str, Any] = field(default_factory=dict)


EventCallback = Callable[[Any], None]


class HostEventBus(ABC):
    """Something that lets the bridge subscribe callbacks to named events."""

    @abstractmethod
    def subscribe(self, event_name: str, callback: EventCallback) -> None:
        """Register a callback for a named event.

        Args:
            event_name: Name of the event (e.g. ``application.exception``)
            callback: Function called with the event payload
        """
        pass

    @abstractmethod
    def unsubscribe(self, event_name: str, callback: EventCallback) -> None:
        """Remove a previously registered callback."""
        pass


class InMemoryEventBus(HostEventBus):
    """Synchronous event bus that dispatches in registration order.

    Hosts without an event system of their own call ``emit`` at their
    lifecycle points; tests use it to inject events.
    """

    def __init__(self):
        self.callbacks: dict[str, list[EventCallback]] = {}

    def subscribe(self, event_name: str, callback: EventCallback) -> None:
        if not isinstance(event_name, str) or not event_name:
            raise TypeError("event_name must be a non-empty string")
        self.callbacks.setdefault(event_name, []).append(callback)
        logger.debug(f"Subscribed {getattr(callback, '__name__', callback)} to {event_name}")

    def unsubscribe(self, event_name: str, callback: EventCallback) -> None:
        callbacks = self.callbacks.get(event_name, [])
        if callback in callbacks:
            callbacks.remove(callback)

    def emit(self, event_name: str, event: Any) -> int:
        """Dispatch an event to every subscribed callback.

        Args:
            event_name: Name of the event
            event: Event payload

        Returns:
            Number of callbacks invoked
        """
        callbacks = list(self.callbacks.get(event_name, []))
        for callback in callbacks:
            callback(event)
        if not callbacks:
            logger.debug(f"No callback for {event_name}")
        return len(callbacks)

    def get_subscriptions(self) -> list[str]:
        """Event names with at least one callback."""
        return [name for name, callbacks in self.callbacks.items() if callbacks]

    def clear_subscriptions(self) -> None:
        self.callbacks.clear()
