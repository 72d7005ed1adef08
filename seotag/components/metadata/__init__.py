"""
Metadata component - SEO and social metadata resolution.
"""

from ._impl import (
    HOMEPAGE_OR_ABOUT_RE,
    MetadataResolver,
    create_metadata_resolver,
    format_paginator_message,
    is_homepage_or_about,
    resolve_page_url,
)
from .component import (
    run,
    run_resolve_metadata,
    validate_input,
)
from .models import (
    MetadataValidationError,
    ResolvedMetadata,
    ResolveMetadataInput,
    ResolveMetadataOutput,
)
from .ports import RulesPort

__all__ = [
    # Entry points
    "run",
    "run_resolve_metadata",
    "validate_input",
    # Resolver
    "MetadataResolver",
    "create_metadata_resolver",
    # Pure helpers
    "HOMEPAGE_OR_ABOUT_RE",
    "format_paginator_message",
    "is_homepage_or_about",
    "resolve_page_url",
    # Models
    "MetadataValidationError",
    "ResolveMetadataInput",
    "ResolveMetadataOutput",
    "ResolvedMetadata",
    # Ports
    "RulesPort",
]
