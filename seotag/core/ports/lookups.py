"""
Author and image lookup interfaces.

Both lookups are seeded per resolution pass and return immutable records
from seotag.core.entities.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Protocol

from seotag.core.entities import AuthorRecord, ImageRecord, PaginationState


class AuthorLookupPort(Protocol):
    """Resolves the page author."""

    def lookup(self, page: Mapping[str, Any], site: Mapping[str, Any]) -> AuthorRecord | None:
        """Return the named author for page, or None if no author is set."""
        ...


class ImageLookupPort(Protocol):
    """Resolves the page image."""

    def lookup(
        self,
        page: Mapping[str, Any],
        context: PaginationState | None,
    ) -> ImageRecord | None:
        """Return the page image, or None if the page has no image."""
        ...
