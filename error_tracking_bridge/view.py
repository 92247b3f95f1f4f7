# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Error-Tracking-Bridge contributors

"""Host view interface for registering markup at the document head."""

import re
from abc import ABC, abstractmethod

_HEAD_OPEN = re.compile(r"<head(\s[^>]*)?>", re.IGNORECASE)
# Leading doctype, comments and <html> tag that must stay ahead of injected markup
_DOCUMENT_PROLOGUE = re.compile(
    r"\A\s*(?:(?:<!doctype[^>]*>|<!--.*?-->)\s*)*(?:<html(?:\s[^>]*)?>)?",
    re.IGNORECASE | re.DOTALL,
)


def insert_into_head(html: str, markup: str) -> str:
    """Insert markup right after the opening ``<head>`` tag.

    Documents without a head tag get the markup after their doctype,
    leading comments and opening ``<html>`` tag.
    """
    match = _HEAD_OPEN.search(html) or _DOCUMENT_PROLOGUE.match(html)
    return html[:match.end()] + markup + html[match.end():]


class HostView(ABC):
    """Markup registration surface of the host's templating layer."""

    @abstractmethod
    def register_head_markup(self, markup: str, key: str | None = None) -> None:
        """Register markup for insertion at the document head.

        Args:
            markup: HTML to insert
            key: Registration key; markup registered again under the same
                key replaces the earlier registration instead of repeating
        """
        pass


class InMemoryView(HostView):
    """View that collects head markup for one response."""

    def __init__(self):
        self._head: dict[str, str] = {}

    def register_head_markup(self, markup: str, key: str | None = None) -> None:
        self._head[key if key is not None else markup] = markup

    @property
    def head_markup(self) -> list[str]:
        return list(self._head.values())

    def render_head(self) -> str:
        return "".join(self._head.values())

    def apply(self, html: str) -> str:
        """Return ``html`` with the registered markup inserted into its head."""
        if not self._head:
            return html
        return insert_into_head(html, self.render_head())

    def reset(self) -> None:
        """Forget registered markup, e.g. at the start of a new response."""
        self._head.clear()
