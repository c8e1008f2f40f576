# File: tests/conftest.py
from pathlib import Path

import pytest

from url_scout.config import ExtractorConfig
from url_scout.extractor import UrlExtractor

PAGE_HTML = """<!DOCTYPE html>
<html>
<head>
  <meta property="og:image" content="https://www.home.example/og.JPG">
  <meta name="description" content="Just a page">
  <link rel="stylesheet" href="/static/site.css">
  <link rel="canonical" href="https://home.example/about">
</head>
<body>
  <a href="/docs/guide.pdf?download=1#top">Guide</a>
  <a href="/about">About</a>
  <a href="http://other.example/page">Other</a>
  <a href="mailto:team@home.example">Mail</a>
  <a href="#section">Anchor</a>
  <img src="//assets.cdn.example/img/logo.png" alt="logo">
  <video poster="/media/poster.webp" src="https://media.home.example/clip.mp4"></video>
  <script src="//home.example/app.js"></script>
</body>
</html>
"""


@pytest.fixture()
def page_html() -> str:
    """
    A small page mixing local, remote, scheme-agnostic and non-URL values.
    """
    return PAGE_HTML


@pytest.fixture()
def home_config() -> ExtractorConfig:
    """
    Return a config bound to https://home.example.
    """
    return ExtractorConfig(home_url="https://home.example/")


@pytest.fixture()
def extractor(page_html, home_config) -> UrlExtractor:
    return UrlExtractor(page_html, home_config)


@pytest.fixture()
def page_file(tmp_path, page_html) -> Path:
    path = tmp_path / "page.html"
    path.write_text(page_html, encoding="utf-8")
    return path
