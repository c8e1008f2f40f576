"""url_scout.parser: markup parsing helpers."""

from url_scout.parser.html_parser import iter_attributes, parse_html

__all__ = ["iter_attributes", "parse_html"]
