"""
XML-Schema Date Adapter (DatePort implementation).

Converts front matter dates to XML-schema datetime strings in the site
timezone, e.g. for article:published_time and JSON-LD datePublished.

Key behaviors:
- datetime values: naive ones are localized, aware ones are converted
- date values: midnight in the site timezone
- strings: ISO-8601 first, then dateutil's flexible parser
- Unparseable values raise DateParseError
"""

from __future__ import annotations

from datetime import date, datetime
from typing import Any
from zoneinfo import ZoneInfo

from dateutil import parser as date_parser


class DateParseError(ValueError):
    """Raised when a front matter date cannot be parsed."""

    def __init__(self, value: Any, reason: Exception | None = None) -> None:
        self.value = value
        message = f"Invalid date value: {value!r}"
        if reason is not None:
            message = f"{message} ({reason})"
        super().__init__(message)


class XmlSchemaDateAdapter:
    """Date adapter bound to one IANA timezone."""

    def __init__(self, tz_name: str = "UTC") -> None:
        """
        Initialize with specified timezone.

        Args:
            tz_name: IANA timezone name (default: UTC)
        """
        self._tz_name = tz_name
        self._tz = ZoneInfo(tz_name)

    @property
    def timezone_name(self) -> str:
        return self._tz_name

    def to_datetime(self, value: Any) -> datetime:
        """Parse value into an aware datetime in the configured timezone."""
        if isinstance(value, datetime):
            parsed = value
        elif isinstance(value, date):
            parsed = datetime.combine(value, datetime.min.time())
        else:
            parsed = self._parse_string(value)

        if parsed.tzinfo is None:
            return parsed.replace(tzinfo=self._tz)
        return parsed.astimezone(self._tz)

    def to_xmlschema(self, value: Any) -> str:
        return self.to_datetime(value).isoformat(timespec="seconds")

    def _parse_string(self, value: Any) -> datetime:
        raw = str(value).strip() if value is not None else ""
        if not raw:
            raise DateParseError(value)

        try:
            return date_parser.isoparse(raw)
        except (ValueError, OverflowError):
            pass

        try:
            return date_parser.parse(raw)
        except (TypeError, ValueError, OverflowError) as e:
            raise DateParseError(value, e) from e
