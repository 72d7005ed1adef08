"""
MetadataResolver - SEO and social metadata resolution.

Derives title, description, Open Graph, Twitter Card and JSON-LD input
values for one page from page front matter, site configuration and
paginator state.

Key behaviors:
- Every field has its own fallback chain across page, namespaced
  (og/twitter/seo) and site values
- Protocol fields accept colon (og:title) and nested (og: {title:}) notation
- Wrong-shaped namespaces read as empty, never raise
- One resolver per pass: inputs are read-only views and each accessor is
  computed once and cached
- Pure: same inputs and collaborators always produce same outputs
"""

from __future__ import annotations

import logging
import re
from collections.abc import Mapping
from functools import cached_property
from types import MappingProxyType
from typing import Any

from seotag import __version__
from seotag.adapters.author_lookup import AuthorLookup
from seotag.adapters.date_xmlschema import XmlSchemaDateAdapter
from seotag.adapters.image_lookup import ImageLookup
from seotag.adapters.text_formatter import TextFormatter
from seotag.adapters.url_service import UrlService
from seotag.core.entities import AuthorRecord, ImageRecord, PaginationState
from seotag.core.ports import (
    AuthorLookupPort,
    DatePort,
    ImageLookupPort,
    TextFormatterPort,
    TruncatorPort,
    UrlPort,
)
from seotag.core.services.namespaces import (
    EMPTY_NAMESPACE,
    first_set,
    is_set,
    protocol_value,
    sub_mapping,
)
from seotag.core.services.snippet import WordTruncator
from seotag.rules.models import DEFAULT_RULES

from .models import ResolvedMetadata
from .ports import RulesPort

logger = logging.getLogger(__name__)

HOMEPAGE_OR_ABOUT_RE = re.compile(r"^/(about/)?(index\.html?)?$")

_INDEX_HTML_RE = re.compile(r"/index\.html$")
_PAGINATOR_PLACEHOLDER_RE = re.compile(r"%<(current|total)>s|\{(current|total)\}|%s")

# --- Pure helpers ---


def format_paginator_message(message: str, current: int, total: int) -> str:
    """
    Fill a paginator message template.

    Accepts named placeholders (%<current>s, {current}) and positional
    %s placeholders, which take current then total in order.

    Examples:
        >>> format_paginator_message("Page %<current>s of %<total>s for ", 2, 10)
        'Page 2 of 10 for '
        >>> format_paginator_message("Page %s of %s for ", 2, 10)
        'Page 2 of 10 for '
    """
    values = {"current": current, "total": total}
    positional = iter((current, total))

    def _replace(match: re.Match[str]) -> str:
        name = match.group(1) or match.group(2)
        if name:
            return str(values[name])
        return str(next(positional, ""))

    return _PAGINATOR_PLACEHOLDER_RE.sub(_replace, message)


def is_homepage_or_about(url: str | None) -> bool:
    """Check whether a page URL is the site root or the about page."""
    if not url:
        return False
    return HOMEPAGE_OR_ABOUT_RE.match(url) is not None


def resolve_page_url(page: Mapping[str, Any]) -> str | None:
    """
    Get the page's site-relative URL.

    Uses page.url, falling back to page.permalink. Relative paths get a
    leading slash ("index.html" -> "/index.html").
    """
    url = first_set(page.get("url"), page.get("permalink"))
    if url is None:
        return None

    url = str(url)
    if url and "://" not in url and not url.startswith("/"):
        url = "/" + url
    return url


def _read_only(fields: Mapping[str, Any] | None) -> Mapping[str, Any]:
    if fields is None:
        return EMPTY_NAMESPACE
    if isinstance(fields, MappingProxyType):
        return fields
    return MappingProxyType(dict(fields))


# --- Main Resolver ---


class MetadataResolver:
    """
    Per-pass metadata resolver.

    Build one resolver per page render. Accessors are lazy and cached, so a
    template that reads only `title` never touches dates or images.
    """

    def __init__(
        self,
        page: Mapping[str, Any] | None,
        site: Mapping[str, Any] | None,
        context: PaginationState | None = None,
        *,
        text: str = "",
        rules: RulesPort = DEFAULT_RULES,
        formatter: TextFormatterPort | None = None,
        urls: UrlPort | None = None,
        dates: DatePort | None = None,
        truncator: TruncatorPort | None = None,
        author_lookup: AuthorLookupPort | None = None,
        image_lookup: ImageLookupPort | None = None,
    ) -> None:
        """
        Initialize resolver for one page.

        Args:
            page: Page front matter fields
            site: Site configuration fields
            context: Paginator state, None when not paginating
            text: Raw tag markup (checked for the title=false flag)
            rules: Resolver defaults from the rules file
            formatter, urls, dates, truncator, author_lookup, image_lookup:
                Collaborators; site-bound defaults are built when omitted
        """
        self._page = _read_only(page)
        self._site = _read_only(site)
        self._context = context
        self._text = text or ""
        self._rules = rules.get_metadata_rules()

        self._formatter = formatter or TextFormatter()
        self._urls = urls or UrlService.from_site(self._site)
        self._date_port = dates
        self._default_timezone = rules.get_date_rules().default_timezone
        self._truncator = truncator or WordTruncator()
        self._author_lookup = author_lookup or AuthorLookup()
        self._image_lookup = image_lookup or ImageLookup(self._urls)

    # --- Inputs ---

    @property
    def page(self) -> Mapping[str, Any]:
        return self._page

    @property
    def site(self) -> Mapping[str, Any]:
        return self._site

    @property
    def context(self) -> PaginationState | None:
        return self._context

    @property
    def version(self) -> str:
        return __version__

    # --- Titles ---

    @cached_property
    def site_title(self) -> str | None:
        return self._format(first_set(self._site.get("title"), self._site.get("name")))

    @cached_property
    def site_tagline(self) -> str | None:
        return self._format(self._site.get("tagline"))

    @cached_property
    def site_description(self) -> str | None:
        return self._format(self._site.get("description"))

    @property
    def site_tagline_or_description(self) -> str | None:
        return self.site_tagline or self.site_description

    @cached_property
    def page_title(self) -> str | None:
        """
        Page title without the site title appended.

        Priority:
            1. page.page_title (explicit browser tab title)
            2. page.title, joined with page.title_category when they differ
            3. site_title
        """
        explicit = self._format(self._page.get("page_title"))
        if explicit:
            return explicit

        title = self._format(self._page.get("title"))
        category = self._format(self._page.get("title_category"))
        if title and category and title != category:
            return title + self._rules.title_separator + category
        return title or category or self.site_title

    @cached_property
    def _document_title(self) -> str | None:
        separator = self._rules.title_separator
        page_title = self.page_title
        site_title = self.site_title

        if site_title and page_title != site_title:
            return f"{page_title}{separator}{site_title}"
        if self.site_description and site_title:
            return f"{site_title}{separator}{self.site_tagline_or_description}"
        return page_title or site_title

    @cached_property
    def title(self) -> str | None:
        """Full <title> text, prefixed with the paginator message on page 2+."""
        title = self._document_title
        if title is not None and self.page_number:
            return self.page_number + title
        return title

    @cached_property
    def show_title(self) -> bool:
        """Should the <title> tag be generated for this page?"""
        if not self.title:
            return False
        flag = re.escape(self._rules.title_disable_flag)
        return re.search(flag, self._text, re.IGNORECASE) is None

    @cached_property
    def page_number(self) -> str | None:
        context = self._context
        if context is None or not context.current or context.current <= 1:
            return None

        message = self._site.get("seo_paginator_message") or self._rules.paginator_message
        return format_paginator_message(str(message), context.current, context.total)

    @cached_property
    def name(self) -> str | None:
        """
        Entity name for JSON-LD.

        seo.name wins everywhere. Otherwise only the homepage and about page
        carry a name: site.social.name, then the site title.
        """
        seo_name = self._format(self._page_seo.get("name"))
        if seo_name:
            return seo_name
        if not self.homepage_or_about:
            return None

        social_name = self._site_social.get("name")
        if is_set(social_name):
            return self._format(social_name)
        return self.site_title

    # --- Descriptions ---

    @cached_property
    def description_max_words(self) -> int:
        value = self._page.get("seo_description_max_words")
        if not is_set(value):
            return self._rules.description_max_words
        try:
            return int(value)
        except (TypeError, ValueError):
            logger.warning("Ignoring invalid seo_description_max_words: %r", value)
            return self._rules.description_max_words

    @cached_property
    def description(self) -> str | None:
        raw = first_set(self._page.get("description"), self._page.get("excerpt"))
        value = self._format(raw) or self.site_description
        return self._snippet(value)

    @cached_property
    def og_description(self) -> str | None:
        value = self._format(protocol_value(self._page, "og", "description")) or self.description
        return self._snippet(value)

    @cached_property
    def twitter_description(self) -> str | None:
        value = (
            self._format(protocol_value(self._page, "twitter", "description"))
            or self.og_description
            or self.description
        )
        return self._snippet(value)

    # --- Social titles ---

    @cached_property
    def og_title(self) -> str | None:
        return self._format(protocol_value(self._page, "og", "title")) or self.page_title

    @cached_property
    def twitter_title(self) -> str | None:
        return (
            self._format(protocol_value(self._page, "twitter", "title"))
            or self.og_title
            or self.page_title
        )

    # --- Classification ---

    @cached_property
    def type(self) -> str:
        """
        Open Graph / JSON-LD type.

        Priority:
            1. og:type (colon or nested notation)
            2. seo.type
            3. page.type
            4. Auto-detected: WebSite (home/about), BlogPosting (dated), WebPage
        """
        explicit = first_set(
            protocol_value(self._page, "og", "type"),
            self._page_seo.get("type"),
            self._page.get("type"),
        )
        if explicit is not None:
            return explicit

        if self.homepage_or_about:
            detected = "WebSite"
        elif is_set(self._page.get("date")):
            detected = "BlogPosting"
        else:
            detected = "WebPage"
        logger.debug("Auto-detected type %s for %s", detected, self.page_url)
        return detected

    @cached_property
    def robots(self) -> str | None:
        return self._page.get("robots")

    @cached_property
    def links(self) -> Any:
        seo_links = self._page_seo.get("links")
        if is_set(seo_links):
            return seo_links
        if not self.homepage_or_about:
            return None
        return first_set(self._site_social.get("links"))

    # --- Twitter Card ---

    @cached_property
    def twitter_card(self) -> str:
        explicit = protocol_value(self._page, "twitter", "card")
        if explicit is not None:
            return explicit
        return "summary_large_image" if self.image else "summary"

    @cached_property
    def twitter_image(self) -> str | None:
        explicit = protocol_value(self._page, "twitter", "image")
        if explicit is not None:
            return self._absolute_escaped(str(explicit))
        if self.image:
            return self.image.path
        return None

    # --- Media ---

    @cached_property
    def image(self) -> ImageRecord | None:
        """Page image, or None when it has no usable path."""
        record = self._image_lookup.lookup(self._page, self._context)
        if record is None or not record.path:
            return None
        return record

    @cached_property
    def logo(self) -> str | None:
        logo = self._site.get("logo")
        if not is_set(logo):
            return None
        return self._absolute_escaped(str(logo))

    @cached_property
    def audio(self) -> dict[str, Any] | None:
        url = protocol_value(self._page, "og", "audio")
        if url is None:
            return None

        return {
            "url": url,
            "secure_url": first_set(protocol_value(self._page, "og", "audio:secure_url"), url),
            "type": first_set(
                protocol_value(self._page, "og", "audio:type"),
                self._rules.default_audio_type,
            ),
        }

    @cached_property
    def video(self) -> dict[str, Any] | None:
        url = protocol_value(self._page, "og", "video")
        if url is None:
            return None

        return {
            "url": url,
            "secure_url": first_set(protocol_value(self._page, "og", "video:secure_url"), url),
            "type": protocol_value(self._page, "og", "video:type"),
            "width": protocol_value(self._page, "og", "video:width"),
            "height": protocol_value(self._page, "og", "video:height"),
        }

    # --- Structure ---

    @cached_property
    def author(self) -> AuthorRecord | None:
        return self._author_lookup.lookup(self._page, self._site)

    @cached_property
    def page_lang(self) -> str:
        return str(
            first_set(
                self._page.get("lang"),
                self._site.get("lang"),
                self._rules.default_lang,
            )
        )

    @cached_property
    def page_locale(self) -> str:
        locale = first_set(self._page.get("locale"), self._site.get("locale"), self.page_lang)
        return str(locale).replace("-", "_")

    @cached_property
    def canonical_url(self) -> str | None:
        explicit = self._page.get("canonical_url")
        if explicit is not None and str(explicit) != "":
            return explicit

        absolute = self._urls.absolute_url(self.page_url) or ""
        return _INDEX_HTML_RE.sub("/", absolute) or None

    @cached_property
    def date_published(self) -> str | None:
        date = self._page.get("date")
        if not is_set(date):
            return None
        return self._dates.to_xmlschema(date)

    @cached_property
    def date_modified(self) -> str | None:
        date = first_set(
            self._page_seo.get("date_modified"),
            self._page.get("last_modified_at"),
            self._page.get("date"),
        )
        if date is None:
            return None
        return self._dates.to_xmlschema(date)

    @cached_property
    def page_url(self) -> str | None:
        return resolve_page_url(self._page)

    @cached_property
    def homepage_or_about(self) -> bool:
        return is_homepage_or_about(self.page_url)

    # --- Output ---

    def resolve(self) -> ResolvedMetadata:
        """Evaluate every accessor and return the frozen result."""
        return ResolvedMetadata(
            version=self.version,
            title=self.title,
            show_title=self.show_title,
            site_title=self.site_title,
            site_tagline=self.site_tagline,
            site_description=self.site_description,
            site_tagline_or_description=self.site_tagline_or_description,
            page_title=self.page_title,
            page_number=self.page_number,
            name=self.name,
            description=self.description,
            description_max_words=self.description_max_words,
            og_title=self.og_title,
            og_description=self.og_description,
            twitter_title=self.twitter_title,
            twitter_description=self.twitter_description,
            twitter_card=self.twitter_card,
            twitter_image=self.twitter_image,
            type=self.type,
            robots=self.robots,
            links=self.links,
            logo=self.logo,
            image=self.image,
            audio=self.audio,
            video=self.video,
            author=self.author,
            page_lang=self.page_lang,
            page_locale=self.page_locale,
            canonical_url=self.canonical_url,
            date_published=self.date_published,
            date_modified=self.date_modified,
            homepage_or_about=self.homepage_or_about,
        )

    # --- Internals ---

    @cached_property
    def _page_seo(self) -> Mapping[str, Any]:
        return sub_mapping(self._page, "seo")

    @cached_property
    def _site_social(self) -> Mapping[str, Any]:
        return sub_mapping(self._site, "social")

    @cached_property
    def _dates(self) -> DatePort:
        # Only date fields may fail on an unknown timezone
        if self._date_port is not None:
            return self._date_port
        return XmlSchemaDateAdapter(str(self._site.get("timezone") or self._default_timezone))

    def _format(self, value: Any) -> str | None:
        if value is None:
            return None
        return self._formatter.format(value)

    def _snippet(self, value: str | None) -> str | None:
        if value is None:
            return None
        return self._truncator.truncate(value, self.description_max_words)

    def _absolute_escaped(self, url: str) -> str:
        if self._urls.is_absolute(url):
            return self._urls.escape(url)
        return self._urls.escape(self._urls.absolute_url(url) or url)


# --- Factory ---


def create_metadata_resolver(
    page: Mapping[str, Any] | None,
    site: Mapping[str, Any] | None,
    context: PaginationState | None = None,
    *,
    text: str = "",
    rules: RulesPort | None = None,
) -> MetadataResolver:
    """
    Create a resolver with the default, site-bound collaborators.

    Args:
        page: Page front matter fields
        site: Site configuration fields
        context: Paginator state
        text: Raw tag markup
        rules: Resolver defaults (DEFAULT_RULES when omitted)

    Returns:
        Configured MetadataResolver
    """
    return MetadataResolver(page, site, context, text=text, rules=rules or DEFAULT_RULES)
