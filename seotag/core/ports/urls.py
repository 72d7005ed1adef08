"""
URL service interface.

Absolutizes site-relative URLs and escapes URLs for safe embedding.
"""

from __future__ import annotations

from typing import Protocol


class UrlPort(Protocol):
    """URL helper interface."""

    def absolute_url(self, url: str | None) -> str | None:
        """
        Make url absolute against the site base URL.

        Absolute input is returned unchanged. Relative input is prefixed
        with the site url and baseurl. None stays None.
        """
        ...

    def is_absolute(self, url: str | None) -> bool:
        """Check whether url already carries a scheme."""
        ...

    def escape(self, url: str) -> str:
        """Percent-escape url without double-escaping existing escapes."""
        ...
