# File: url_scout/extractor.py
"""url_scout.extractor: reads URLs out of HTML attributes and filters them by policy.

Example::

    extractor = UrlExtractor(html).set_home_url("https://example.com").set_files_only(True)
    for item in extractor.get_urls():
        print(item.attribute, item.url)
"""

from __future__ import annotations

from typing import Any, Iterable, List, Optional, Sequence

from bs4 import BeautifulSoup

from url_scout.config import ExtractorConfig
from url_scout.logger import get_logger
from url_scout.models import AttributeValue, ExtractedUrl
from url_scout.parser.html_parser import iter_attributes, parse_html
from url_scout.urls import (
    extension_of,
    is_alternate_domain_url,
    is_file_url,
    is_local_url,
    is_url,
    resolve,
)

__all__: Sequence[str] = ("UrlExtractor",)

logger = get_logger(__name__)


class UrlExtractor:
    """Parses HTML once and returns the attribute URLs that pass the configured policy.

    Setters validate a complete new :class:`ExtractorConfig` before swapping it
    in, so a rejected value (e.g. a home URL without a scheme) leaves the
    extractor exactly as it was.  One instance is not meant to be shared
    between threads.
    """

    def __init__(self, content: str | bytes, config: Optional[ExtractorConfig] = None) -> None:
        self._content = content
        self._config = config if config is not None else ExtractorConfig()
        self._soup: Optional[BeautifulSoup] = None

    # ------------------------------------------------------------------ #
    # Configuration                                                      #
    # ------------------------------------------------------------------ #

    @property
    def config(self) -> ExtractorConfig:
        return self._config

    @property
    def content(self) -> str | bytes:
        return self._content

    def configure(self, **changes: Any) -> UrlExtractor:
        """Apply several config changes at once; raises ``ValidationError`` on bad values."""
        new_config = self._config.replace(**changes)
        if new_config.parser != self._config.parser:
            self._soup = None
        self._config = new_config
        return self

    def set_home_url(self, home_url: Optional[str]) -> UrlExtractor:
        return self.configure(home_url=home_url)

    def set_alternate_domains(self, alternate_domains: Iterable[str]) -> UrlExtractor:
        return self.configure(alternate_domains=tuple(alternate_domains))

    def set_files_only(self, files_only: bool) -> UrlExtractor:
        return self.configure(files_only=files_only)

    def set_ignored_extensions(self, ignored_extensions: Iterable[str]) -> UrlExtractor:
        return self.configure(ignored_extensions=tuple(ignored_extensions))

    def set_attribute_filter(self, attribute_filter: Iterable[str]) -> UrlExtractor:
        return self.configure(attribute_filter=tuple(attribute_filter))

    def set_content(self, content: str | bytes) -> UrlExtractor:
        self._content = content
        self._soup = None
        return self

    # ------------------------------------------------------------------ #
    # Extraction                                                         #
    # ------------------------------------------------------------------ #

    @property
    def soup(self) -> BeautifulSoup:
        """Parsed document, built on first access."""
        if self._soup is None:
            self._soup = parse_html(self._content, self._config.parser)
        return self._soup

    def get_attribute_values(self) -> List[AttributeValue]:
        return list(iter_attributes(self.soup, self._config.attribute_filter))

    def get_urls(self) -> List[ExtractedUrl]:
        """Accepted URLs in document order, resolved when a home URL is set."""
        home_url = self._config.home_url
        items: List[ExtractedUrl] = []
        candidates = self.get_attribute_values()

        for candidate in candidates:
            if not self.is_desired_url(candidate.value):
                continue
            item = ExtractedUrl(attribute=candidate.name, value=candidate.value)
            if home_url:
                item.url = resolve(candidate.value, home_url)
            items.append(item)

        logger.info("Extracted %d of %d attribute values", len(items), len(candidates))
        return items

    def get_absolute_urls(self) -> List[str]:
        """Plain URL strings: resolved form when available, raw value otherwise."""
        return [item.url if item.url is not None else item.value for item in self.get_urls()]

    # ------------------------------------------------------------------ #
    # Policy                                                             #
    # ------------------------------------------------------------------ #

    def is_desired_url(self, url: str) -> bool:
        cfg = self._config

        if not is_url(url):
            logger.debug("Skip %r: not a URL", url)
            return False

        if cfg.home_url:
            is_local = is_local_url(url, cfg.home_url)
            if not is_local and not is_alternate_domain_url(url, cfg.domain_matchers):
                logger.debug("Skip %r: not local to %s", url, cfg.home_url)
                return False

        if cfg.files_only and not is_file_url(url):
            logger.debug("Skip %r: not a file", url)
            return False

        if extension_of(url) in cfg.ignored_extensions:
            logger.debug("Skip %r: ignored extension", url)
            return False

        return True
