"""
Date service interface.

Key requirements:
- Output is an XML-schema (ISO-8601) datetime string with offset
- Naive values are interpreted in the configured site timezone
- Unparseable input raises; the resolver does not catch it
"""

from __future__ import annotations

from typing import Any, Protocol


class DatePort(Protocol):
    """Date conversion interface."""

    def to_xmlschema(self, value: Any) -> str:
        """
        Convert a date value to an XML-schema datetime string.

        Args:
            value: datetime, date or date string

        Returns:
            e.g. "2017-01-01T00:00:00-05:00"
        """
        ...
