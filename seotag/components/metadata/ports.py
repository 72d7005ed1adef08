"""
Metadata component port definitions.
"""

from __future__ import annotations

from typing import Protocol

from seotag.rules.models import DateRules, MetadataRules


class RulesPort(Protocol):
    """Port for accessing resolver rules configuration."""

    def get_metadata_rules(self) -> MetadataRules:
        """Get title/description/social defaults."""
        ...

    def get_date_rules(self) -> DateRules:
        """Get date formatting defaults."""
        ...
