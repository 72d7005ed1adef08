"""
Text Formatter Adapter (TextFormatterPort implementation).

Turns raw front matter values into display-safe text for <title> and
<meta> content.

Key behaviors:
- Pipeline order is fixed: markdown, strip_html, normalize_whitespace,
  escape_once. Each step assumes the previous ones already ran
- escape_once never double-escapes existing entities
- Empty output is reported as None
"""

from __future__ import annotations

import re
from collections.abc import Callable
from typing import Any

from markdown_it import MarkdownIt

_md = MarkdownIt("commonmark", {"html": True})

_STRIP_HTML_RES = (
    re.compile(r"<script.*?</script>", re.DOTALL | re.IGNORECASE),
    re.compile(r"<!--.*?-->", re.DOTALL),
    re.compile(r"<style.*?</style>", re.DOTALL | re.IGNORECASE),
    re.compile(r"<.*?>", re.DOTALL),
)
_WHITESPACE_RE = re.compile(r"\s+")
_ESCAPE_ONCE_RE = re.compile(r"[\"><']|&(?!([a-zA-Z]+|(#\d+));)")
_HTML_ESCAPE = {
    "&": "&amp;",
    ">": "&gt;",
    "<": "&lt;",
    '"': "&quot;",
    "'": "&#39;",
}


def markdownify(text: str) -> str:
    """Render inline markdown to HTML."""
    return _md.renderInline(text)


def strip_html(text: str) -> str:
    """Remove scripts, comments, styles and tags."""
    for pattern in _STRIP_HTML_RES:
        text = pattern.sub("", text)
    return text


def normalize_whitespace(text: str) -> str:
    """Collapse whitespace runs to single spaces and trim."""
    return _WHITESPACE_RE.sub(" ", text).strip()


def escape_once(text: str) -> str:
    """HTML-escape text, leaving existing entities untouched."""
    return _ESCAPE_ONCE_RE.sub(lambda m: _HTML_ESCAPE[m.group(0)[0]], text)


FORMAT_PIPELINE: tuple[Callable[[str], str], ...] = (
    markdownify,
    strip_html,
    normalize_whitespace,
    escape_once,
)


class TextFormatter:
    """
    Default text formatter.

    The pipeline can be swapped for tests or for sites that need a
    different markup dialect; escape_once should stay last.
    """

    def __init__(self, pipeline: tuple[Callable[[str], str], ...] = FORMAT_PIPELINE) -> None:
        self._pipeline = pipeline

    def format(self, value: Any) -> str | None:
        if value is None:
            return None

        text = str(value)
        for step in self._pipeline:
            text = step(text)

        return text or None
