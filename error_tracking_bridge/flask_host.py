# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Error-Tracking-Bridge contributors

"""Flask host integration.

Maps Flask's ``got_request_exception`` and ``before_render_template``
signals onto the bridge's event names, collects head markup per request
in ``flask.g`` and splices it into HTML responses. Events Flask has no
signal for (such as queue job errors) are delivered with ``emit``.

Example:
    app = Flask(__name__)
    host = FlaskHost(app)
    bridge = ErrorReportingBridge(load_settings(), host, SentryErrorReporter())
    bridge.initialize()

    # In a worker, after a job raised:
    host.emit(QUEUE_JOB_ERROR, JobErrorEvent(exc, job_id=job.id))
"""

import logging
from typing import Any

from flask import Flask, Response, before_render_template, g, got_request_exception

from .events import (
    APPLICATION_EXCEPTION,
    BEFORE_RENDER_TEMPLATE,
    EventCallback,
    ExceptionEvent,
    InMemoryEventBus,
    TemplateEvent,
)
from .view import HostView, insert_into_head

logger = logging.getLogger(__name__)

_HEAD_ATTR = "_error_tracking_head"


class FlaskHost(InMemoryEventBus, HostView):
    """Event bus and view backed by a Flask application."""

    def __init__(self, app: Flask):
        super().__init__()
        self.app = app
        self._receivers: dict[tuple[str, EventCallback], Any] = {}
        app.after_request(self._inject_head_markup)

    def subscribe(self, event_name: str, callback: EventCallback) -> None:
        if event_name == APPLICATION_EXCEPTION:
            def receiver(sender, exception, **extra):
                callback(ExceptionEvent(exception=exception))

            got_request_exception.connect(receiver, sender=self.app, weak=False)
        elif event_name == BEFORE_RENDER_TEMPLATE:
            def receiver(sender, template, context, **extra):
                callback(TemplateEvent(template=template.name, view=self, context=context))

            before_render_template.connect(receiver, sender=self.app, weak=False)
        else:
            super().subscribe(event_name, callback)
            return

        self._receivers[(event_name, callback)] = receiver
        logger.debug(f"Connected {event_name} to Flask signal for {self.app.name}")

    def unsubscribe(self, event_name: str, callback: EventCallback) -> None:
        receiver = self._receivers.pop((event_name, callback), None)
        if receiver is None:
            super().unsubscribe(event_name, callback)
        elif event_name == APPLICATION_EXCEPTION:
            got_request_exception.disconnect(receiver, sender=self.app)
        else:
            before_render_template.disconnect(receiver, sender=self.app)

    def get_subscriptions(self) -> list[str]:
        names = super().get_subscriptions()
        for event_name, _ in self._receivers:
            if event_name not in names:
                names.append(event_name)
        return names

    def register_head_markup(self, markup: str, key: str | None = None) -> None:
        head = g.setdefault(_HEAD_ATTR, {})
        head[key if key is not None else markup] = markup

    def _inject_head_markup(self, response: Response) -> Response:
        head = g.get(_HEAD_ATTR)
        if not head or response.mimetype != "text/html" or response.is_streamed:
            return response

        response.set_data(insert_into_head(response.get_data(as_text=True), "".join(head.values())))
        return response
