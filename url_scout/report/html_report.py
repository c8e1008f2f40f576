# File: url_scout/report/html_report.py
"""url_scout.report.html_report: Генерация HTML-отчёта с помощью Jinja2."""

from __future__ import annotations

from collections import Counter
from pathlib import Path
from typing import Any, Iterable, Optional, Union

from jinja2 import Environment, FileSystemLoader, select_autoescape

from url_scout.models import ExtractedUrl
from url_scout.urls import extension_of

DEFAULT_TEMPLATE_DIR = Path(__file__).parent / "templates"
TEMPLATE_NAME = "report.html.j2"


def render_html(
    urls: Iterable[ExtractedUrl],
    template_dir: Optional[Union[Path, str]],
    output_path: Union[Path, str],
) -> Path:
    """Рендерит HTML-отчёт из шаблона и сохраняет его по указанному пути.

    Args:
        urls: записи ExtractedUrl.
        template_dir: директория с Jinja2-шаблонами; None означает встроенный шаблон.
        output_path: путь к итоговому HTML-файлу.

    Returns:
        Path до сохранённого HTML-файла.
    """
    template_dir = Path(template_dir) if template_dir is not None else DEFAULT_TEMPLATE_DIR
    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)

    env = Environment(
        loader=FileSystemLoader(str(template_dir)),
        autoescape=select_autoescape(["html", "xml", "j2"]),
    )
    template = env.get_template(TEMPLATE_NAME)

    items = list(urls)
    context: dict[str, Any] = {
        "urls": items,
        "by_attribute": Counter(item.attribute for item in items).most_common(),
        "by_extension": Counter(extension_of(item.value) or "-" for item in items).most_common(),
    }

    html_content = template.render(**context)
    output_path.write_text(html_content, encoding="utf-8")

    return output_path
