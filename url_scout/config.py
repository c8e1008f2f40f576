# === FILE: url_scout/config.py ===
"""
Модуль для загрузки и валидации конфигурации UrlScout.
Используется Pydantic для описания схемы и проверки данных.
"""
from __future__ import annotations

import errno
import json
import os
import re
from pathlib import Path
from typing import Any, Literal, Optional, Union

import yaml
from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    PrivateAttr,
    field_validator,
)

from url_scout.urls import DomainMatcher, build_domain_matcher, is_absolute_url

DEFAULT_ATTRIBUTE_FILTER: tuple[str, ...] = ("src", "href", "content", "poster")

# tree builders shipped with the package dependencies
TreeBuilder = Literal["html.parser", "lxml"]


class ExtractorConfig(BaseModel):
    """Политики одного запуска извлечения URL."""
    model_config = ConfigDict(extra="forbid", frozen=True)

    home_url: Optional[str] = Field(
        None, description="Абсолютный URL сайта: база для резолвинга и эталонный домен."
    )
    alternate_domains: tuple[str, ...] = Field(
        (), description="Дополнительные локальные домены: строки или /regex/."
    )
    files_only: bool = Field(False, description="Оставлять только URL файлов.")
    ignored_extensions: tuple[str, ...] = Field(
        (), description="Расширения, которые всегда исключаются."
    )
    attribute_filter: tuple[str, ...] = Field(
        DEFAULT_ATTRIBUTE_FILTER, min_length=1, description="Читаемые HTML-атрибуты."
    )
    parser: TreeBuilder = Field("html.parser", description="Бэкенд BeautifulSoup.")

    _domain_matchers: tuple[DomainMatcher, ...] = PrivateAttr(default=())

    @field_validator("home_url", mode="before")
    def _check_home_url(cls, v: Any) -> Any:
        if v is None:
            return v
        if not isinstance(v, str) or not is_absolute_url(v):
            raise ValueError(f"home_url must be an absolute URL, got {v!r}")
        return v.rstrip("/")

    @field_validator("alternate_domains")
    def _check_patterns(cls, v: tuple[str, ...]) -> tuple[str, ...]:
        for entry in v:
            try:
                build_domain_matcher(entry)
            except re.error as exc:
                raise ValueError(f"Invalid domain pattern {entry!r}: {exc}") from exc
        return v

    @field_validator("ignored_extensions")
    def _normalize_extensions(cls, v: tuple[str, ...]) -> tuple[str, ...]:
        normalized = (ext.strip().lstrip(".").lower() for ext in v)
        return tuple(ext for ext in normalized if ext)

    @field_validator("attribute_filter")
    def _normalize_attributes(cls, v: tuple[str, ...]) -> tuple[str, ...]:
        return tuple(name.lower() for name in v)

    def model_post_init(self, __context: Any) -> None:
        self._domain_matchers = tuple(build_domain_matcher(d) for d in self.alternate_domains)

    @property
    def domain_matchers(self) -> tuple[DomainMatcher, ...]:
        """Alternate domains compiled once into literal/pattern matchers."""
        return self._domain_matchers

    def replace(self, **changes: Any) -> ExtractorConfig:
        """Return a validated copy with *changes* applied; *self* is untouched."""
        data = self.model_dump()
        data.update(changes)
        return type(self).model_validate(data)


def _read_yaml(path: Path) -> dict[str, Any]:
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    except yaml.YAMLError as exc:
        raise ValueError(f"Неправильный YAML в {path}: {exc}") from exc
    if not isinstance(data, dict):
        raise TypeError(f"Верхний уровень YAML должен быть mapping, получено {type(data).__name__}")
    return data


def _read_json(path: Path) -> dict[str, Any]:
    try:
        data = json.loads(path.read_text(encoding="utf-8")) or {}
    except json.JSONDecodeError as exc:
        raise ValueError(f"Неправильный JSON в {path}: {exc}") from exc
    if not isinstance(data, dict):
        raise TypeError(f"Верхний уровень JSON должен быть mapping, получено {type(data).__name__}")
    return data


def load_config(path: Union[str, Path, None]) -> ExtractorConfig:
    """
    Читает YAML или JSON и возвращает проверенный объект ExtractorConfig.
    Без пути возвращает конфигурацию по умолчанию.
    """
    if path is None:
        return ExtractorConfig()

    path_obj = Path(path).expanduser().resolve()
    if not path_obj.is_file():
        raise FileNotFoundError(errno.ENOENT, os.strerror(errno.ENOENT), str(path_obj))

    suffix = path_obj.suffix.lower()
    if suffix in (".yaml", ".yml"):
        data = _read_yaml(path_obj)
    elif suffix == ".json":
        data = _read_json(path_obj)
    else:
        raise ValueError(f"Неподдерживаемый формат конфига: {suffix}")

    return ExtractorConfig(**data)
