"""
Metadata component - SEO and social metadata for one page.

Resolves title, description, Open Graph, Twitter Card and JSON-LD input
values from page front matter + site configuration.

Invariants:
- I1: Inputs are never mutated
- I2: Resolution never raises on missing or wrong-shaped input
- I3: Collaborator failures (e.g. invalid dates) propagate unchanged
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from ._impl import MetadataResolver
from .models import (
    MetadataValidationError,
    ResolveMetadataInput,
    ResolveMetadataOutput,
)
from .ports import RulesPort

logger = logging.getLogger(__name__)

PAGE_NAMESPACES = ("seo", "og", "twitter")
SITE_NAMESPACES = ("social",)


def _namespace_warnings(
    fields: Mapping[str, Any],
    keys: tuple[str, ...],
    scope: str,
) -> list[MetadataValidationError]:
    warnings: list[MetadataValidationError] = []
    for key in keys:
        value = fields.get(key)
        if value is not None and not isinstance(value, Mapping):
            warnings.append(
                MetadataValidationError(
                    code="NAMESPACE_NOT_MAPPING",
                    message=f"{scope}.{key} is a {type(value).__name__}, expected a mapping",
                    field=f"{scope}.{key}",
                )
            )
    return warnings


def validate_input(inp: ResolveMetadataInput) -> list[MetadataValidationError]:
    """
    Find input problems the resolver will silently absorb.

    Args:
        inp: Resolution input

    Returns:
        List of warnings (empty if input is well formed)
    """
    warnings = _namespace_warnings(inp.page, PAGE_NAMESPACES, "page")
    warnings.extend(_namespace_warnings(inp.site, SITE_NAMESPACES, "site"))

    max_words = inp.page.get("seo_description_max_words")
    if max_words is not None and not isinstance(max_words, int):
        try:
            int(max_words)
        except (TypeError, ValueError):
            warnings.append(
                MetadataValidationError(
                    code="INVALID_MAX_WORDS",
                    message=f"seo_description_max_words is not a number: {max_words!r}",
                    field="page.seo_description_max_words",
                )
            )

    if inp.pagination is not None and inp.pagination.current > inp.pagination.total > 0:
        warnings.append(
            MetadataValidationError(
                code="PAGE_OUT_OF_RANGE",
                message=(
                    f"Paginator page {inp.pagination.current} "
                    f"exceeds total {inp.pagination.total}"
                ),
                field="context.pagination",
            )
        )

    return warnings


# --- Component Entry Points ---


def run_resolve_metadata(
    inp: ResolveMetadataInput,
    *,
    rules: RulesPort | None = None,
) -> ResolveMetadataOutput:
    """
    Resolve every metadata field for one page.

    Args:
        inp: Page, site, pagination and raw tag text.
        rules: Optional rules port for resolver defaults.

    Returns:
        ResolveMetadataOutput with resolved metadata and input warnings.
    """
    warnings = validate_input(inp)
    for warning in warnings:
        logger.debug("Metadata input warning %s: %s", warning.code, warning.message)

    kwargs: dict[str, Any] = {"text": inp.text}
    if rules is not None:
        kwargs["rules"] = rules

    resolver = MetadataResolver(inp.page, inp.site, inp.pagination, **kwargs)

    return ResolveMetadataOutput(
        metadata=resolver.resolve(),
        warnings=warnings,
    )


def run(
    inp: ResolveMetadataInput,
    *,
    rules: RulesPort | None = None,
) -> ResolveMetadataOutput:
    """
    Main entry point for the metadata component.

    Args:
        inp: Input object determining the operation.
        rules: Optional rules port for resolver defaults.

    Returns:
        ResolveMetadataOutput with page metadata.
    """
    if isinstance(inp, ResolveMetadataInput):
        return run_resolve_metadata(inp, rules=rules)
    else:
        raise ValueError(f"Unknown input type: {type(inp)}")
