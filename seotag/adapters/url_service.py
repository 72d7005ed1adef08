"""
URL Service Adapter (UrlPort implementation).

Key behaviors:
- absolute_url: absolute input passes through; relative input gets the
  site baseurl and a leading slash, then the site url if one is set
- escape: percent-encodes unsafe characters, keeps reserved characters
  and existing %XX escapes
- Pure: output depends only on the site url/baseurl given at construction
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any
from urllib.parse import quote, urlparse

# Reserved characters plus "%" so that escaping is idempotent
_SAFE_CHARS = "/:?#[]@!$&'()*+,;=%~"


def ensure_leading_slash(path: str) -> str:
    if not path or path.startswith("/"):
        return path
    return "/" + path


class UrlService:
    """URL helper bound to one site's url and baseurl."""

    def __init__(self, site_url: str | None = None, baseurl: str | None = None) -> None:
        """
        Initialize URL service.

        Args:
            site_url: Site base URL (e.g. "https://example.com")
            baseurl: Subpath the site is served from (e.g. "/blog")
        """
        self._site_url = (site_url or "").rstrip("/")
        self._baseurl = (baseurl or "").rstrip("/")

    @classmethod
    def from_site(cls, site: Mapping[str, Any]) -> UrlService:
        url = site.get("url")
        baseurl = site.get("baseurl")
        return cls(
            site_url=str(url) if url else None,
            baseurl=str(baseurl) if baseurl else None,
        )

    def is_absolute(self, url: str | None) -> bool:
        if not url:
            return False
        return bool(urlparse(str(url)).scheme)

    def relative_url(self, url: str | None) -> str | None:
        """Prefix url with the site baseurl."""
        if url is None:
            return None
        url = str(url)
        if self.is_absolute(url):
            return url

        parts = (self._baseurl, url)
        return self.escape("".join(ensure_leading_slash(part) for part in parts))

    def absolute_url(self, url: str | None) -> str | None:
        if url is None:
            return None
        url = str(url)
        if self.is_absolute(url):
            return url

        relative = self.relative_url(url)
        if not self._site_url:
            return relative
        return f"{self._site_url}{relative}"

    def escape(self, url: str) -> str:
        return quote(str(url), safe=_SAFE_CHARS)
