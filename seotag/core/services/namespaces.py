"""
Namespace lookup helpers.

Front matter namespaces (seo, og, twitter, social) are duck typed: a page
may set `og:` to a mapping, a scalar, a list, or nothing at all. Every
namespace read goes through sub_mapping so that a wrong shape reads as an
empty namespace instead of failing.

Protocol values can be written three ways. For og:title:

    og:title: "Title"        # colon notation
    og:
      title: "Title"         # nested notation

protocol_value checks colon notation first, then the nested mapping.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from types import MappingProxyType
from typing import Any

logger = logging.getLogger(__name__)

EMPTY_NAMESPACE: Mapping[str, Any] = MappingProxyType({})


def is_set(value: Any) -> bool:
    """Front matter truthiness: only None and False count as unset."""
    return value is not None and value is not False


def first_set(*values: Any) -> Any:
    """Return the first value that is set, or None."""
    for value in values:
        if is_set(value):
            return value
    return None


def sub_mapping(parent: Mapping[str, Any], key: str) -> Mapping[str, Any]:
    """
    Safely return a nested namespace.

    Args:
        parent: The parent mapping (page or site fields)
        key: Namespace key in the parent

    Returns:
        The nested mapping, or a shared empty read-only mapping if the
        value is missing or not a mapping.
    """
    value = parent.get(key)
    if isinstance(value, Mapping):
        return value
    if value is not None:
        logger.debug("Ignoring %r namespace of type %s", key, type(value).__name__)
    return EMPTY_NAMESPACE


def protocol_value(page: Mapping[str, Any], protocol: str, key: str) -> Any:
    """
    Look up a protocol field in colon, then nested, notation.

    protocol_value(page, "og", "audio:type") reads page["og:audio:type"]
    and then page["og"]["audio_type"].
    """
    return first_set(
        page.get(f"{protocol}:{key}"),
        sub_mapping(page, protocol).get(key.replace(":", "_")),
    )
