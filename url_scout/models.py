# url_scout/models.py
"""
Data models for UrlScout extraction results.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Optional


@dataclass(frozen=True, slots=True)
class AttributeValue:
    """One attribute found during the document walk: name and raw value."""

    name: str
    value: str


@dataclass(slots=True)
class ExtractedUrl:
    """Accepted URL: source attribute, raw value and, with a home URL, its absolute form."""

    attribute: str
    value: str
    url: Optional[str] = None

    def to_dict(self) -> Dict[str, str]:
        data = {"attribute": self.attribute, "value": self.value}
        if self.url is not None:
            data["url"] = self.url
        return data
