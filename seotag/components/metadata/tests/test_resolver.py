"""
Unit tests for MetadataResolver title, name and description resolution.
"""

from __future__ import annotations

from typing import Any

import pytest

from seotag.components.metadata import MetadataResolver
from seotag.core.entities import PaginationState
from seotag.core.services.namespaces import EMPTY_NAMESPACE
from seotag.rules.models import MetadataRules, Rules

SITE = {"title": "site title"}


def make_resolver(
    page: dict[str, Any] | None = None,
    site: dict[str, Any] | None = None,
    context: PaginationState | None = None,
    **kwargs: Any,
) -> MetadataResolver:
    return MetadataResolver(
        {"title": "page title"} if page is None else page,
        SITE if site is None else site,
        context,
        **kwargs,
    )


# --- Graceful Absence ---


class TestEmptyInputs:
    """Every accessor degrades to an absent value on empty input."""

    def test_resolve_with_nothing(self) -> None:
        """Resolving empty page/site/context does not raise."""
        meta = MetadataResolver({}, {}).resolve()

        assert meta.title is None
        assert meta.show_title is False
        assert meta.page_title is None
        assert meta.description is None
        assert meta.name is None
        assert meta.canonical_url is None
        assert meta.image is None
        assert meta.author is None
        assert meta.links is None
        assert meta.logo is None
        assert meta.audio is None
        assert meta.video is None
        assert meta.date_published is None
        assert meta.date_modified is None
        assert meta.type == "WebPage"
        assert meta.twitter_card == "summary"
        assert meta.page_lang == "en_US"
        assert meta.page_locale == "en_US"

    def test_none_inputs_share_empty_namespace(self) -> None:
        resolver = MetadataResolver(None, None)
        assert resolver.page is EMPTY_NAMESPACE
        assert resolver.site is EMPTY_NAMESPACE

    def test_resolve_with_none_inputs(self) -> None:
        """None page and site are treated as empty mappings."""
        meta = MetadataResolver(None, None).resolve()
        assert meta.title is None

    def test_to_dict_omits_absent_values(self) -> None:
        """Absent values are left out of the flat output mapping."""
        output = MetadataResolver({}, {}).resolve().to_dict()

        assert "title" not in output
        assert "description" not in output
        assert output["type"] == "WebPage"
        assert output["twitter_card"] == "summary"
        assert output["show_title"] is False

    def test_version(self) -> None:
        """Exposes the package version."""
        from seotag import __version__

        assert make_resolver().version == __version__


# --- title? ---


class TestShowTitle:
    """Tests for the title=false flag."""

    def test_title_shown_by_default(self) -> None:
        assert make_resolver().show_title is True

    def test_title_false_flag(self) -> None:
        """title=false in the raw tag text hides the title."""
        assert make_resolver(text="title=false").show_title is False

    def test_title_false_flag_is_case_insensitive(self) -> None:
        assert make_resolver(text="TITLE=False").show_title is False

    def test_no_title_means_not_shown(self) -> None:
        """Without a resolvable title the flag is irrelevant."""
        assert make_resolver(page={}, site={}).show_title is False


# --- Site Title ---


class TestSiteTitle:
    """Tests for site title, tagline and description."""

    def test_site_title(self) -> None:
        assert make_resolver().site_title == "site title"

    def test_site_name_fallback(self) -> None:
        assert make_resolver(site={"name": "site title"}).site_title == "site title"

    def test_site_description_is_normalized(self) -> None:
        """Trailing whitespace is stripped by the formatter."""
        resolver = make_resolver(site={"description": "site description "})
        assert resolver.site_description == "site description"

    def test_site_description_missing(self) -> None:
        assert make_resolver(site={}).site_description is None

    def test_tagline_preferred_over_description(self) -> None:
        resolver = make_resolver(site={"tagline": "tag", "description": "desc"})
        assert resolver.site_tagline_or_description == "tag"


# --- Page Title ---


class TestPageTitle:
    """Tests for page title resolution."""

    def test_page_title(self) -> None:
        assert make_resolver().page_title == "page title"

    def test_page_title_falls_back_to_site_title(self) -> None:
        assert make_resolver(page={}).page_title == "site title"

    def test_explicit_page_title_wins(self) -> None:
        """page_title is used for the browser tab over title."""
        resolver = make_resolver(page={"page_title": "Browser Tab Title", "title": "Full Title"})
        assert resolver.page_title == "Browser Tab Title"

    def test_empty_page_title_falls_back_to_title(self) -> None:
        resolver = make_resolver(page={"page_title": "", "title": "Full Page Title"})
        assert resolver.page_title == "Full Page Title"

    def test_title_and_category_combined(self) -> None:
        resolver = make_resolver(page={"title": "A", "title_category": "B"}, site={"title": "S"})
        assert resolver.page_title == "A | B"
        assert resolver.title == "A | B | S"

    def test_identical_category_not_repeated(self) -> None:
        resolver = make_resolver(page={"title": "A", "title_category": "A"})
        assert resolver.page_title == "A"

    def test_category_only(self) -> None:
        resolver = make_resolver(page={"title_category": "page title category"})
        assert resolver.page_title == "page title category"


# --- Document Title ---


class TestTitle:
    """Tests for the full document title."""

    def test_page_and_site_title(self) -> None:
        assert make_resolver().title == "page title | site title"

    def test_page_title_category_and_site_title(self) -> None:
        resolver = make_resolver(
            page={"title": "page title", "title_category": "page title category"}
        )
        assert resolver.title == "page title | page title category | site title"

    def test_site_description_without_page_title(self) -> None:
        resolver = make_resolver(
            page={}, site={"title": "site title", "description": "site description"}
        )
        assert resolver.title == "site title | site description"

    def test_site_tagline_without_page_title(self) -> None:
        resolver = make_resolver(
            page={},
            site={"title": "site title", "description": "site description", "tagline": "tag"},
        )
        assert resolver.title == "site title | tag"

    def test_just_page_title(self) -> None:
        assert make_resolver(site={}).title == "page title"

    def test_just_site_title(self) -> None:
        assert make_resolver(page={}).title == "site title"

    def test_no_titles(self) -> None:
        assert make_resolver(page={}, site={}).title is None

    def test_empty_page_title(self) -> None:
        assert make_resolver(page={"title": ""}).title == "site title"

    def test_empty_site_title(self) -> None:
        assert make_resolver(site={"title": ""}).title == "page title"

    def test_empty_page_and_site_title(self) -> None:
        assert make_resolver(page={"title": ""}, site={"title": ""}).title is None

    def test_markup_is_formatted(self) -> None:
        """Markdown and HTML are reduced to escaped plain text."""
        resolver = make_resolver(page={"title": "**Tom** & <em>Jerry</em>"}, site={})
        assert resolver.title == "Tom &amp; Jerry"

    def test_custom_separator(self) -> None:
        rules = Rules(metadata=MetadataRules(title_separator=" - "))
        assert make_resolver(rules=rules).title == "page title - site title"


# --- Pagination ---


class TestPagination:
    """Tests for the paginator title prefix."""

    def test_default_message(self) -> None:
        resolver = make_resolver(context=PaginationState(current=2, total=10))
        assert resolver.page_number == "Page 2 of 10 for "

    def test_title_is_prefixed(self) -> None:
        resolver = make_resolver(context=PaginationState(current=2, total=10))
        assert resolver.title == "Page 2 of 10 for page title | site title"

    def test_first_page_has_no_prefix(self) -> None:
        resolver = make_resolver(context=PaginationState(current=1, total=10))
        assert resolver.page_number is None
        assert resolver.title == "page title | site title"

    def test_not_paginating(self) -> None:
        assert make_resolver().page_number is None

    def test_custom_site_message(self) -> None:
        resolver = make_resolver(
            site={"title": "site title", "seo_paginator_message": "%<current>s of %<total>s"},
            context=PaginationState(current=2, total=10),
        )
        assert resolver.page_number == "2 of 10"

    def test_positional_message(self) -> None:
        resolver = make_resolver(
            site={"seo_paginator_message": "Page %s of %s for "},
            context=PaginationState(current=3, total=4),
        )
        assert resolver.page_number == "Page 3 of 4 for "

    def test_no_prefix_without_title(self) -> None:
        resolver = make_resolver(page={}, site={}, context=PaginationState(current=2, total=3))
        assert resolver.title is None


# --- Name ---


class TestName:
    """Tests for the JSON-LD name."""

    def test_seo_name(self) -> None:
        resolver = make_resolver(page={"seo": {"name": "seo name"}})
        assert resolver.name == "seo name"

    def test_no_name_on_regular_page(self) -> None:
        assert make_resolver(page={"permalink": "/post/"}).name is None

    def test_homepage_uses_social_name(self) -> None:
        resolver = make_resolver(
            page={"permalink": "/"}, site={"social": {"name": "social name"}}
        )
        assert resolver.name == "social name"

    def test_homepage_with_social_as_list(self) -> None:
        """A list-valued social namespace is treated as empty."""
        resolver = make_resolver(page={"permalink": "/"}, site={"social": ["a", "b"]})
        assert resolver.name is None

    def test_homepage_uses_site_title(self) -> None:
        assert make_resolver(page={"permalink": "/"}).name == "site title"

    @pytest.mark.parametrize("blank", ["", "  ", "<b></b>"])
    def test_blank_seo_name_falls_through(self, blank: str) -> None:
        """An seo.name that formats to nothing falls back to the social name."""
        resolver = make_resolver(
            page={"permalink": "/", "seo": {"name": blank}},
            site={"title": "site title", "social": {"name": "social name"}},
        )
        assert resolver.name == "social name"


# --- Description ---


class TestDescription:
    """Tests for description resolution and truncation."""

    def test_page_description(self) -> None:
        resolver = make_resolver(page={"description": "page description"})
        assert resolver.description == "page description"

    def test_page_excerpt(self) -> None:
        resolver = make_resolver(page={"excerpt": "page excerpt"})
        assert resolver.description == "page excerpt"

    def test_site_description_fallback(self) -> None:
        resolver = make_resolver(page={}, site={"description": "site description"})
        assert resolver.description == "site description"

    def test_no_descriptions(self) -> None:
        resolver = make_resolver(
            page={"description": None, "excerpt": None}, site={"description": None}
        )
        assert resolver.description is None

    def test_truncates_to_100_words_by_default(self) -> None:
        resolver = make_resolver(page={"description": "word " * 150})
        assert resolver.description == " ".join(["word"] * 100) + "…"

    def test_short_description_untouched(self) -> None:
        resolver = make_resolver(page={"description": "word " * 50})
        assert resolver.description == " ".join(["word"] * 50)

    def test_explicit_max_words(self) -> None:
        resolver = make_resolver(
            page={
                "description": "For a long time, I went to bed early",
                "seo_description_max_words": 6,
            }
        )
        assert resolver.description == "For a long time, I went…"

    def test_max_words_from_string(self) -> None:
        resolver = make_resolver(page={"seo_description_max_words": "6"})
        assert resolver.description_max_words == 6

    def test_invalid_max_words_uses_default(self) -> None:
        resolver = make_resolver(page={"seo_description_max_words": "many"})
        assert resolver.description_max_words == 100

    def test_rules_default_max_words(self) -> None:
        rules = Rules(metadata=MetadataRules(description_max_words=3))
        resolver = make_resolver(page={"description": "one two three four"}, rules=rules)
        assert resolver.description == "one two three…"


# --- Memoization and Purity ---


class CountingFormatter:
    """Formatter stub that records every call."""

    def __init__(self) -> None:
        self.calls: list[Any] = []

    def format(self, value: Any) -> str | None:
        self.calls.append(value)
        return str(value) or None


class TestResolutionPass:
    """Tests for per-pass caching and input immutability."""

    def test_accessors_are_cached(self) -> None:
        formatter = CountingFormatter()
        resolver = make_resolver(formatter=formatter)

        first = resolver.site_title
        calls = len(formatter.calls)
        second = resolver.site_title

        assert first == second == "site title"
        assert len(formatter.calls) == calls

    def test_recomputation_is_identical(self) -> None:
        page = {"title": "page title", "og:type": "article", "description": "desc"}
        first = MetadataResolver(page, SITE).resolve()
        second = MetadataResolver(page, SITE).resolve()
        assert first == second

    def test_inputs_not_mutated(self) -> None:
        page = {"title": "page title", "og": {"title": "og"}, "seo": ["a"]}
        site = {"title": "site title", "social": {"links": ["x"]}}
        page_before = {"title": "page title", "og": {"title": "og"}, "seo": ["a"]}
        site_before = {"title": "site title", "social": {"links": ["x"]}}

        MetadataResolver(page, site).resolve()

        assert page == page_before
        assert site == site_before

    def test_page_view_is_read_only(self) -> None:
        resolver = make_resolver()
        with pytest.raises(TypeError):
            resolver.page["title"] = "changed"  # type: ignore[index]
