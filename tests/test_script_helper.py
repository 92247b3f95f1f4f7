# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Error-Tracking-Bridge contributors

"""Tests for the client-side script helper."""

import json

from error_tracking_bridge import ClientReportingConfig, SentryScriptHelper


def _config(token="jstok", environment="production"):
    return ClientReportingConfig(access_token=token, payload={"environment": environment})


class TestSentryScriptHelper:
    """Tests for SentryScriptHelper."""

    def test_config_markup_publishes_config(self):
        markup = SentryScriptHelper().build_config_markup(_config())

        assert markup.startswith("<script>var _errorTrackingConfig = ")
        assert markup.endswith(";</script>")
        payload = markup[len("<script>var _errorTrackingConfig = "):-len(";</script>")]
        assert json.loads(payload) == {
            "accessToken": "jstok",
            "captureUncaught": True,
            "payload": {"environment": "production"},
        }

    def test_config_markup_cannot_close_script_tag(self):
        markup = SentryScriptHelper().build_config_markup(_config(environment="</script><b>"))

        assert markup.count("</script>") == 1
        assert "\\u003c/script\\u003e" in markup

    def test_init_snippet_loads_pinned_bundle(self):
        helper = SentryScriptHelper(sdk_version="8.0.0", cdn_url="https://cdn.example/")

        snippet = helper.build_init_snippet(_config())

        assert helper.bundle_url == "https://cdn.example/8.0.0/bundle.min.js"
        assert '<script src="https://cdn.example/8.0.0/bundle.min.js"' in snippet
        assert "Sentry.init(options)" in snippet
        assert "window._errorTrackingConfig" in snippet

    def test_build_markup_concatenates_in_order(self):
        helper = SentryScriptHelper()
        config = _config()

        markup = helper.build_markup(config)

        assert markup == helper.build_config_markup(config) + helper.build_init_snippet(config)
