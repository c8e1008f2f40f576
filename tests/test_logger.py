# File: tests/test_logger.py
import logging

import pytest

from url_scout.extractor import UrlExtractor
from url_scout.logger import configure, get_logger, init_logging, logger


@pytest.fixture()
def log_file(tmp_path):
    path = tmp_path / "url_scout.log"
    configure(level="DEBUG", log_file=path)
    yield path
    init_logging()


@pytest.mark.parametrize(
    "name,expected",
    [
        ("url_scout.extractor", "UrlScout.extractor"),
        ("extractor", "UrlScout.extractor"),
        ("url_scout.report.html_report", "UrlScout.report.html_report"),
        ("url_scout", "UrlScout"),
    ],
)
def test_get_logger_names(name, expected):
    assert get_logger(name).name == expected


def test_children_share_root_handlers():
    child = get_logger("url_scout.extractor")
    assert child.parent is logger
    assert not child.handlers
    assert logger.propagate is False


def test_extraction_decisions_reach_log_file(log_file):
    UrlExtractor('<a href="mailto:a@b.example">m</a><img src="/a.png">').get_urls()
    text = log_file.read_text(encoding="utf-8")
    assert "UrlScout.extractor" in text
    assert "Skip 'mailto:a@b.example': not a URL" in text
    assert "Extracted 1 of 2 attribute values" in text


def test_configure_replaces_handlers(tmp_path):
    configure(log_file=tmp_path / "a.log")
    configure(log_file=tmp_path / "b.log")
    try:
        files = [h.baseFilename for h in logger.handlers if isinstance(h, logging.FileHandler)]
        assert files == [str(tmp_path / "b.log")]
    finally:
        init_logging()
