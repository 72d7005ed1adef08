"""
Author Lookup Adapter (AuthorLookupPort implementation).

Resolution order:
1. page.author (string, mapping, or list -> first entry)
2. page.authors (first entry)
3. site.author

A string author is looked up in site.data.authors for extra fields
(twitter, url, picture, ...). The twitter handle is returned without a
leading "@" and defaults to the author name.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from seotag.core.entities import AuthorRecord
from seotag.core.services.namespaces import first_set, sub_mapping

_RECORD_FIELDS = ("name", "twitter", "url", "picture")


class AuthorLookup:
    """Default author lookup."""

    def lookup(self, page: Mapping[str, Any], site: Mapping[str, Any]) -> AuthorRecord | None:
        author = self._resolved_author(page, site)
        if author is None:
            return None

        author_hash = self._author_hash(author, site)
        name = author_hash.get("name")
        if not name:
            return None

        handle = author_hash.get("twitter") or name
        return AuthorRecord(
            name=str(name),
            twitter=str(handle).lstrip("@"),
            url=author_hash.get("url"),
            picture=author_hash.get("picture"),
            extra={k: v for k, v in author_hash.items() if k not in _RECORD_FIELDS},
        )

    def _resolved_author(self, page: Mapping[str, Any], site: Mapping[str, Any]) -> Any:
        author = first_set(page.get("author"), page.get("authors"), site.get("author"))
        if isinstance(author, list | tuple):
            author = author[0] if author else None
        return author

    def _author_hash(self, author: Any, site: Mapping[str, Any]) -> Mapping[str, Any]:
        if isinstance(author, Mapping):
            return author

        name = str(author)
        site_authors = sub_mapping(sub_mapping(site, "data"), "authors")
        data = site_authors.get(name)
        if isinstance(data, Mapping):
            return {"name": name, **data}
        return {"name": name}
