"""
Domain entities for seotag.

Inputs to the resolver are plain mappings (already-parsed front matter and
site configuration). These entities cover the structured values that
flow between the resolver and its collaborators:
- PaginationState: render-time paginator position
- AuthorRecord: resolved page author
- ImageRecord: resolved page image
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

PageFields = Mapping[str, Any]
SiteFields = Mapping[str, Any]


@dataclass(frozen=True)
class PaginationState:
    """Current paginator position (1-based)."""

    current: int
    total: int

    @classmethod
    def from_paginator(cls, paginator: Any) -> PaginationState | None:
        """
        Build from a paginator mapping ({"page": 2, "total_pages": 10}).

        Returns None when paginator is missing or has no current page.
        """
        if not isinstance(paginator, Mapping) or not paginator.get("page"):
            return None
        return cls(
            current=int(paginator["page"]),
            total=int(paginator.get("total_pages") or 0),
        )


@dataclass(frozen=True)
class AuthorRecord:
    """A named page author."""

    name: str | None = None
    twitter: str | None = None
    url: str | None = None
    picture: str | None = None
    extra: Mapping[str, Any] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        result: dict[str, Any] = dict(self.extra)
        for key in ("name", "twitter", "url", "picture"):
            value = getattr(self, key)
            if value is not None:
                result[key] = value
        return result


@dataclass(frozen=True)
class ImageRecord:
    """Resolved page image. path is absolute and escaped."""

    path: str | None = None
    height: Any = None
    width: Any = None
    alt: str | None = None

    def to_dict(self) -> dict[str, Any]:
        return {
            key: value
            for key, value in (
                ("path", self.path),
                ("height", self.height),
                ("width", self.width),
                ("alt", self.alt),
            )
            if value is not None
        }
