# File: url_scout/urls.py
"""url_scout.urls: classification and resolution of raw attribute values.

Everything here is a pure function over strings. Malformed input never
raises: a value that cannot be parsed simply fails the predicate.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from pathlib import PurePosixPath
from typing import Iterable, Sequence, Union
from urllib.parse import urlsplit

__all__: Sequence[str] = (
    "LiteralDomain",
    "PatternDomain",
    "DomainMatcher",
    "build_domain_matcher",
    "is_url",
    "is_relative_url",
    "is_scheme_agnostic_url",
    "is_absolute_url",
    "host_of",
    "strip_www",
    "is_local_url",
    "is_alternate_domain_url",
    "is_file_url",
    "extension_of",
    "resolve",
)

_WWW_RE = re.compile(r"^www\.")
_WHITESPACE_RE = re.compile(r"\s")


# --------------------------------------------------------------------------- #
# Alternate domain matchers                                                   #
# --------------------------------------------------------------------------- #


@dataclass(frozen=True, slots=True)
class LiteralDomain:
    """Host that must match exactly."""

    domain: str

    def matches(self, host: str) -> bool:
        return host == self.domain


@dataclass(frozen=True, slots=True)
class PatternDomain:
    """Host pattern written as ``/regex/``; matched anywhere in the host."""

    source: str
    pattern: re.Pattern[str]

    def matches(self, host: str) -> bool:
        return self.pattern.search(host) is not None


DomainMatcher = Union[LiteralDomain, PatternDomain]


def build_domain_matcher(entry: str) -> DomainMatcher:
    """Turn a configured entry into a matcher.

    ``"/.*\\.cdn\\.example/"`` becomes a :class:`PatternDomain`, anything
    else a :class:`LiteralDomain`. Raises :class:`re.error` on a bad pattern.
    """
    if len(entry) >= 2 and entry.startswith("/") and entry.endswith("/"):
        return PatternDomain(source=entry, pattern=re.compile(entry[1:-1]))
    return LiteralDomain(domain=entry)


# --------------------------------------------------------------------------- #
# Syntax predicates                                                           #
# --------------------------------------------------------------------------- #


def is_scheme_agnostic_url(url: str) -> bool:
    """``//host/path``: no scheme, inherits it from the page."""
    return url.startswith("//")


def is_relative_url(url: str) -> bool:
    """Root-relative path such as ``/img/a.png``."""
    return url.startswith("/") and not is_scheme_agnostic_url(url)


def is_absolute_url(url: str) -> bool:
    """True when *url* carries both a scheme and a host."""
    if not url or _WHITESPACE_RE.search(url):
        return False
    try:
        parts = urlsplit(url)
    except ValueError:
        return False
    return bool(parts.scheme) and bool(host_of(url))


def is_url(url: str) -> bool:
    # scheme-agnostic first: "/" is a prefix of "//"
    return is_scheme_agnostic_url(url) or is_relative_url(url) or is_absolute_url(url)


# --------------------------------------------------------------------------- #
# Locality                                                                    #
# --------------------------------------------------------------------------- #


def host_of(url: str) -> str:
    """Host part of *url* without userinfo and port, case preserved; ``""`` if absent."""
    try:
        netloc = urlsplit(url).netloc
    except ValueError:
        return ""
    host = netloc.rpartition("@")[2]
    if host.startswith("["):
        end = host.find("]")
        return host[: end + 1] if end != -1 else ""
    return host.partition(":")[0]


def strip_www(host: str) -> str:
    return _WWW_RE.sub("", host)


def is_local_url(url: str, home_url: str) -> bool:
    """Relative URLs are always local; otherwise hosts are compared minus ``www.``.

    The ``www.`` stripping is an approximation of "same site": it treats
    ``www.example.com`` and ``example.com`` as one locality and nothing more.
    """
    if is_relative_url(url):
        return True

    host = host_of(url)
    if not host:
        return False

    return strip_www(host) == strip_www(host_of(home_url))


def is_alternate_domain_url(url: str, matchers: Iterable[DomainMatcher]) -> bool:
    host = host_of(url)
    if not host:
        return False
    return any(matcher.matches(host) for matcher in matchers)


# --------------------------------------------------------------------------- #
# Files                                                                       #
# --------------------------------------------------------------------------- #


def extension_of(url: str) -> str:
    """Lower-cased extension of the URL path (``"png"``), or ``""``.

    Only the path is inspected, never the query string or the fragment.
    A dotfile counts as an extension: ``/.htaccess`` gives ``"htaccess"``.
    """
    try:
        path = urlsplit(url).path
    except ValueError:
        return ""
    name = PurePosixPath(path).name
    return name.rpartition(".")[2].lower() if "." in name else ""


def is_file_url(url: str) -> bool:
    return extension_of(url) != ""


# --------------------------------------------------------------------------- #
# Resolution                                                                  #
# --------------------------------------------------------------------------- #


def resolve(url: str, home_url: str) -> str:
    """Rewrite *url* into an absolute URL using *home_url* as the base.

    *home_url* is expected without a trailing slash. Relative paths are
    appended to it verbatim; absolute URLs come back unchanged.
    """
    if is_scheme_agnostic_url(url):
        return f"{urlsplit(home_url).scheme}:{url}"
    if is_relative_url(url):
        return home_url + url
    return url
