"""
Metadata component input/output models.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field, fields
from typing import Any

from seotag.core.entities import AuthorRecord, ImageRecord, PaginationState

# --- Validation Error ---


@dataclass(frozen=True)
class MetadataValidationError:
    """Non-fatal problem found in the page or site input."""

    code: str
    message: str
    field: str | None = None


# --- Input Models ---


@dataclass(frozen=True)
class ResolveMetadataInput:
    """Input for resolving one page's metadata."""

    page: Mapping[str, Any] = field(default_factory=dict)
    site: Mapping[str, Any] = field(default_factory=dict)
    pagination: PaginationState | None = None
    text: str = ""


# --- Output Models ---


@dataclass(frozen=True)
class ResolvedMetadata:
    """
    Every resolved metadata value for one page.

    Fields hold None when the value is absent.
    """

    version: str
    title: str | None = None
    show_title: bool = False
    site_title: str | None = None
    site_tagline: str | None = None
    site_description: str | None = None
    site_tagline_or_description: str | None = None
    page_title: str | None = None
    page_number: str | None = None
    name: str | None = None
    description: str | None = None
    description_max_words: int = 100

    # OpenGraph / Twitter Card
    og_title: str | None = None
    og_description: str | None = None
    twitter_title: str | None = None
    twitter_description: str | None = None
    twitter_card: str = "summary"
    twitter_image: str | None = None
    type: str = "WebPage"
    robots: str | None = None
    links: Any = None
    logo: str | None = None
    image: ImageRecord | None = None
    audio: Mapping[str, Any] | None = None
    video: Mapping[str, Any] | None = None

    # Structure
    author: AuthorRecord | None = None
    page_lang: str = "en_US"
    page_locale: str = "en_US"
    canonical_url: str | None = None
    date_published: str | None = None
    date_modified: str | None = None
    homepage_or_about: bool = False

    def to_dict(self) -> dict[str, Any]:
        """Flat field -> value mapping with absent values omitted."""
        result: dict[str, Any] = {}
        for f in fields(self):
            value = getattr(self, f.name)
            if value is None:
                continue
            if isinstance(value, AuthorRecord | ImageRecord):
                value = value.to_dict()
            elif isinstance(value, Mapping):
                value = dict(value)
            result[f.name] = value
        return result


@dataclass(frozen=True)
class ResolveMetadataOutput:
    """Output containing resolved page metadata."""

    metadata: ResolvedMetadata
    warnings: list[MetadataValidationError] = field(default_factory=list)
