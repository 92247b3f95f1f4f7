#!/usr/bin/env python3
# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Error-Tracking-Bridge contributors

"""
Example: Wiring the error tracking bridge into a Flask application.

Set ERROR_TRACKING_SERVER_TOKEN (and optionally ERROR_TRACKING_CLIENT_TOKEN
with ERROR_TRACKING_CLIENT_ENABLED=true) before running. Use
ERROR_TRACKING_REPORTER=console to log reports locally instead of sending
them to Sentry.
"""

from flask import Flask, render_template_string

from error_tracking_bridge import QUEUE_JOB_ERROR, JobErrorEvent, create_bridge
from error_tracking_bridge.flask_host import FlaskHost

PAGE = """<!doctype html>
<html>
  <head><title>Bridge demo</title></head>
  <body><a href="/boom">Raise an exception</a> | <a href="/job">Fail a job</a></body>
</html>"""

app = Flask(__name__)
host = FlaskHost(app)
bridge = create_bridge(host)
bridge.initialize()


@app.route("/")
def index():
    return render_template_string(PAGE)


@app.route("/boom")
def boom():
    raise RuntimeError("Example unhandled exception")


@app.route("/job")
def job():
    try:
        raise ValueError("Example job failure")
    except ValueError as e:
        host.emit(QUEUE_JOB_ERROR, JobErrorEvent(e, job_id="demo-1", job_description="Example job"))
    return {"status": "job failed and was reported"}


if __name__ == "__main__":
    app.run(host="127.0.0.1", port=5000, debug=False)
