"""
Word-based description truncation.

Key behaviors:
- Splits on runs of whitespace and keeps at most max_words words
- Joins kept words with single spaces
- Appends an ellipsis only when the result is shorter than the input
"""

from __future__ import annotations

import re

ELLIPSIS = "…"

_WHITESPACE_RE = re.compile(r"\s+")


def truncate_words(text: str | None, max_words: int) -> str | None:
    """
    Truncate text to at most max_words words.

    Examples:
        >>> truncate_words("For a long time, I went to bed early", 6)
        'For a long time, I went…'
        >>> truncate_words("short text", 100)
        'short text'
    """
    if text is None:
        return None

    words = _WHITESPACE_RE.split(text, maxsplit=max_words)[:max_words]
    result = " ".join(words)
    if len(result) < len(text):
        return result + ELLIPSIS
    return result


class WordTruncator:
    """Default TruncatorPort implementation."""

    def truncate(self, text: str | None, max_words: int) -> str | None:
        return truncate_words(text, max_words)
