# url_scout/__init__.py
"""
UrlScout package initializer.
Defines package version and exposes the extraction API.
"""
__version__ = "0.1.0"

from url_scout.config import ExtractorConfig, load_config
from url_scout.extractor import UrlExtractor
from url_scout.models import AttributeValue, ExtractedUrl

__all__ = [
    "__version__",
    "AttributeValue",
    "ExtractedUrl",
    "ExtractorConfig",
    "UrlExtractor",
    "load_config",
]
