# === FILE: url_scout/parser/html_parser.py ===
"""HTML parsing utilities for UrlScout.

A thin adapter over BeautifulSoup: build the tree once, then walk every
element in document order and report the attributes whose names are in an
allow-list.  Malformed markup is left to the tree builder, which always
produces a best-effort tree instead of raising.
"""
from __future__ import annotations

from collections.abc import Collection, Iterator, Sequence

from bs4 import BeautifulSoup
from bs4.element import Tag

from url_scout.models import AttributeValue

__all__: Sequence[str] = ("parse_html", "iter_attributes")


def parse_html(markup: str | bytes, parser: str = "html.parser") -> BeautifulSoup:
    """Parse *markup* into a tree.

    ``multi_valued_attributes=None`` keeps ``class``/``rel`` and friends as
    plain strings, so every attribute value reaches the classifier untouched.
    """
    return BeautifulSoup(markup, parser, multi_valued_attributes=None)


def iter_attributes(
    soup: BeautifulSoup, attribute_filter: Collection[str]
) -> Iterator[AttributeValue]:
    """Yield ``(name, value)`` pairs of allowed attributes in document order."""
    for tag in soup.find_all(True):
        if not isinstance(tag, Tag):
            continue
        for name, value in tag.attrs.items():
            if name not in attribute_filter:
                continue
            if not isinstance(value, str):
                # some tree builders still hand back lists
                value = " ".join(value)
            yield AttributeValue(name=name, value=value)
