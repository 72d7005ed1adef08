"""
Image Lookup Adapter (ImageLookupPort implementation).

Resolves the page image from front matter. The image may be given as a
plain path or as a mapping:

    image: /assets/card.png

    image:
      path: /assets/card.png
      height: 630
      width: 1200
      alt: "Card"

Resolution order for the path: image.path, image.twitter, image.facebook.
Relative paths are absolutized against the site url; all paths are
percent-escaped.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from seotag.core.entities import ImageRecord, PaginationState
from seotag.core.ports.urls import UrlPort

_PATH_KEYS = ("path", "twitter", "facebook")


class ImageLookup:
    """Default image lookup."""

    def __init__(self, urls: UrlPort) -> None:
        self._urls = urls

    def lookup(
        self,
        page: Mapping[str, Any],
        context: PaginationState | None = None,
    ) -> ImageRecord | None:
        image = self._image_mapping(page.get("image"))
        if not image:
            return None

        return ImageRecord(
            path=self._resolve_path(image),
            height=image.get("height"),
            width=image.get("width"),
            alt=image.get("alt"),
        )

    def _image_mapping(self, image: Any) -> Mapping[str, Any]:
        if isinstance(image, Mapping):
            return image
        if isinstance(image, str) and image:
            return {"path": image}
        return {}

    def _resolve_path(self, image: Mapping[str, Any]) -> str | None:
        raw_path = next((image[key] for key in _PATH_KEYS if image.get(key)), None)
        if raw_path is None:
            return None

        raw_path = str(raw_path)
        if not self._urls.is_absolute(raw_path):
            raw_path = self._urls.absolute_url(raw_path) or raw_path
        return self._urls.escape(raw_path)
