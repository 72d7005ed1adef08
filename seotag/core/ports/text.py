"""
Text collaborator interfaces.

Protocol-based interfaces for the string pipelines the resolver calls
but does not implement.

Key requirements:
- Formatting is a fixed, ordered pipeline (markdown, strip tags,
  normalize whitespace, escape once); escaping always runs last
- An empty formatting result is reported as None, never ""
- Truncation is word based and marks shortened output with an ellipsis
"""

from __future__ import annotations

from typing import Any, Protocol


class TextFormatterPort(Protocol):
    """Formats a front matter value into display-safe text."""

    def format(self, value: Any) -> str | None:
        """
        Run value through the formatting pipeline.

        Args:
            value: Raw front matter value (string, number, None)

        Returns:
            Formatted text, or None if nothing remains
        """
        ...


class TruncatorPort(Protocol):
    """Word-based truncation."""

    def truncate(self, text: str | None, max_words: int) -> str | None:
        """
        Truncate text to at most max_words words.

        Returns None unchanged. Appends an ellipsis if words were dropped.
        """
        ...
